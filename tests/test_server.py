# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for the directory listing page, HTTP service and CLI."""

import logging
import os
import sys

import pytest
from fastapi.testclient import TestClient

from genro_htmless import SSRBuilder, exponent
from genro_htmless.cli import build_parser, config_from_args, main, parse_port
from genro_htmless.config import DEFAULT_PORT, ServeConfig
from genro_htmless.pages import build_directory_page, display_name, file_element_id
from genro_htmless.server import create_app, resolve_request_path, serve


@pytest.fixture
def share(tmp_path):
    """A small directory tree to serve."""
    (tmp_path / 'hello.txt').write_text('hello')
    sub = tmp_path / 'sub'
    sub.mkdir()
    (sub / 'inner.txt').write_text('inner')
    return tmp_path


@pytest.fixture
def client(share):
    return TestClient(create_app(share))


class TestDirectoryPage:
    """Tests for build_directory_page."""

    def test_structure(self):
        """Test the root is html with head and body."""
        ui = build_directory_page(['a.txt'])
        root = ui.root
        assert root.tag_name == 'html'
        assert [c.tag_name for c in root.children] == ['head', 'body']
        head, body = root.children
        assert [c.id for c in head.children] == ['styles', 'exponent-styles']
        assert [c.id for c in body.children] == ['menu', 'code', 'files']

    def test_file_entries(self):
        """Test every name becomes a clickable span."""
        html = build_directory_page(['a.txt', 'my file']).to_html()
        assert (
            '<span id="file-my%20file"  class="file exponent " '
            'onclick="fnav(this);" >my file</span>'
        ) in html
        assert '>a.txt</span>' in html

    def test_menu_entry(self):
        """Test the navigate-up entry."""
        html = build_directory_page([]).to_html()
        assert (
            '<span id="menu-nav-up"  class="menu-item exponent " '
            'onclick="fnav(this)" >..</span>'
        ) in html

    def test_empty_listing(self):
        """Test an empty directory renders an empty files container."""
        html = build_directory_page([]).to_html()
        assert '<div id="files"  class="exponent exponent-div " ></div>' in html
        assert html.startswith('<html ><head ><style id="styles" >body { ')
        assert html.endswith('</div></body></html>')

    def test_stylesheets(self):
        """Test both stylesheets are rendered as CSS text."""
        ui = build_directory_page([])
        styles, exponent_styles = ui.root.children[0].children
        assert styles.text_content.startswith(
            'body { background-color: gray; color: white !important; '
        )
        assert '.exponent-input { min-width: 0; min-height: 0; } ' in (
            exponent_styles.text_content
        )

    def test_reuses_and_clears_builder(self):
        """Test a passed builder is reset before use."""
        ui = SSRBuilder()
        ui.create('old')
        result = build_directory_page(['x'], ui)
        assert result is ui
        assert ui.root.tag_name == 'html'
        assert ui.default_callbacks == (exponent,)

    def test_file_element_id(self):
        """Test ids quote like encodeURIComponent."""
        assert file_element_id("it's (1).txt") == "file-it's%20(1).txt"
        assert file_element_id('a/b') == 'file-a%2Fb'

    def test_undecodable_name(self):
        """Test names with undecodable bytes render with replacement characters."""
        raw = os.fsdecode(b'bad\xff.txt')
        assert display_name(raw) == 'bad\ufffd.txt'
        html = build_directory_page([raw]).to_html()
        assert 'id="file-bad%EF%BF%BD.txt"' in html
        assert '>bad\ufffd.txt</span>' in html
        assert html.encode('utf-8')


class TestServer:
    """Tests for the FastAPI application."""

    def test_directory_listing(self, client):
        """Test a directory is served as an HTML listing."""
        response = client.get('/')
        assert response.status_code == 200
        assert response.headers['content-type'].startswith('text/html')
        assert response.text.startswith('<html >')
        assert '>hello.txt</span>' in response.text
        assert '>sub</span>' in response.text

    def test_subdirectory_listing(self, client):
        """Test nested directories are listed too."""
        response = client.get('/sub')
        assert response.status_code == 200
        assert '>inner.txt</span>' in response.text

    def test_file(self, client):
        """Test files are sent as they are."""
        response = client.get('/hello.txt')
        assert response.status_code == 200
        assert response.text == 'hello'
        assert response.headers['content-length'] == '5'

    def test_missing(self, client):
        """Test unknown paths give an empty 404."""
        response = client.get('/nope')
        assert response.status_code == 404
        assert response.content == b''

    def test_resolve_rejects_escape(self, share):
        """Test paths outside the root are not resolved."""
        root = share.resolve()
        assert resolve_request_path(root, '../') is None
        assert resolve_request_path(root, 'sub/../../') is None
        assert resolve_request_path(root, '') == root
        assert resolve_request_path(root, '/sub') == root / 'sub'

    @pytest.mark.skipif(sys.platform != 'linux', reason='needs arbitrary bytes in file names')
    def test_listing_with_undecodable_name(self, share):
        """Test one badly encoded file name does not break the listing."""
        (share / os.fsdecode(b'bad\xff.txt')).write_text('x')
        response = TestClient(create_app(share)).get('/')
        assert response.status_code == 200
        assert '>bad\ufffd.txt</span>' in response.text
        assert '>hello.txt</span>' in response.text

    @pytest.mark.skipif(not hasattr(os, 'mkfifo'), reason='needs named pipes')
    def test_not_file_or_directory(self, share):
        """Test a path that is neither a file nor a directory gives 400."""
        os.mkfifo(share / 'pipe')
        response = TestClient(create_app(share)).get('/pipe')
        assert response.status_code == 400
        assert response.text == 'Not a file or directory, aborting'

    def test_null_byte_path(self, client, share):
        """Test a path with a null byte is treated as missing."""
        assert resolve_request_path(share.resolve(), 'a\x00b') is None
        response = client.get('/a%00b')
        assert response.status_code == 404


class TestCli:
    """Tests for command line parsing."""

    def test_defaults(self, tmp_path, monkeypatch):
        """Test default configuration."""
        monkeypatch.chdir(tmp_path)
        config = config_from_args(build_parser().parse_args([]))
        assert config.port == DEFAULT_PORT
        assert config.root == tmp_path.resolve()
        assert config.ssl is False
        assert config.scheme == 'http'
        assert config.ssl_cert == './ssl.cert.pem'

    def test_ssl_and_port(self):
        """Test explicit flags."""
        args = build_parser().parse_args(
            ['--port', '8443', '--ssl', '--ssl-cert', 'c.pem', '--ssl-key', 'k.pem']
        )
        config = config_from_args(args)
        assert config.port == 8443
        assert config.scheme == 'https'
        assert (config.ssl_cert, config.ssl_key) == ('c.pem', 'k.pem')

    def test_malformed_port(self, caplog):
        """Test a bad port logs a warning and keeps the default."""
        with caplog.at_level(logging.WARNING, logger='genro_htmless.cli'):
            assert parse_port('abc') == DEFAULT_PORT
        assert 'Malformed port' in caplog.text

    def test_main_runs_server(self, tmp_path, monkeypatch):
        """Test main() hands the parsed config to serve()."""
        received = []
        monkeypatch.setattr('genro_htmless.server.serve', received.append)
        main(['--root', str(tmp_path), '--port', '9000'])
        assert len(received) == 1
        config = received[0]
        assert isinstance(config, ServeConfig)
        assert config.port == 9000
        assert config.root == tmp_path.resolve()

class TestServe:
    """Tests for serve() and its uvicorn settings."""

    def test_plain_http(self, tmp_path, monkeypatch):
        """Test no TLS options are passed without ssl."""
        calls = []
        monkeypatch.setattr('uvicorn.run', lambda app, **kw: calls.append(kw))
        serve(ServeConfig(root=tmp_path, port=8080))
        assert calls == [{'host': '0.0.0.0', 'port': 8080}]

    def test_ssl(self, tmp_path, monkeypatch):
        """Test ssl passes the certificate and key files to uvicorn."""
        calls = []
        monkeypatch.setattr('uvicorn.run', lambda app, **kw: calls.append(kw))
        args = build_parser().parse_args(
            ['--root', str(tmp_path), '--ssl', '--ssl-cert', 'c.pem', '--ssl-key', 'k.pem']
        )
        serve(config_from_args(args))
        assert len(calls) == 1
        assert calls[0]['ssl_certfile'] == 'c.pem'
        assert calls[0]['ssl_keyfile'] == 'k.pem'
        assert calls[0]['port'] == DEFAULT_PORT
