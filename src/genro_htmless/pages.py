# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Directory listing page built with SSRBuilder.

The page shows a menu bar with a ``..`` entry and one clickable entry per
directory item. Clicking navigates relative to the current URL.

Example:
    >>> ui = build_directory_page(['a.txt', 'docs'])
    >>> for chunk in ui.iter_chunks():
    ...     response.write(chunk)
"""

from __future__ import annotations

from typing import Iterable
from urllib.parse import quote

from .builder import SSRBuilder
from .defaults import EXPONENT_STYLESHEET, exponent

PAGE_STYLESHEET: dict[str, dict[str, str]] = {
    'body': {
        'backgroundColor': 'gray',
        'color': 'white !important',
        'flexDirection': 'column',
    },
    '#menu': {
        'flex': '1',
        'flexDirection': 'row',
        'borderRadius': '1em',
        'overflowY': 'hidden',
        'overflowX': 'auto',
        'backgroundColor': '#acd5e3',
        'margin': '1em',
        'lineHeight': '5em',
    },
    '.menu-item': {
        'maxWidth': '10em',
        'backgroundColor': '#666868',
        'cursor': 'pointer',
        'textAlign': 'center',
    },
    '#files': {
        'flex': '10',
        'flexDirection': 'column',
        'borderRadius': '1em',
        'overflowY': 'auto',
        'overflowX': 'hidden',
        'backgroundColor': '#acd5e3',
        'padding': '1em',
        'margin': '1em',
    },
    '.file': {
        'padding': '1em',
        'backgroundColor': '#666868',
        'margin': '1px',
        'cursor': 'pointer',
    },
}

# Left unquoted, as encodeURIComponent does.
_ID_SAFE_CHARS = "!~*'()"

NAVIGATION_SCRIPT = """
        function fnav(e) {
          if (e.textContent) {
            if (!window.location.href.endsWith("/")) {
              window.location.href += "/" + e.textContent;
            } else {
              window.location.href += e.textContent;
            }
          }
        }
      """


def display_name(name: str) -> str:
    """Make a file system name safe to encode as UTF-8.

    Undecodable bytes, which ``os.listdir`` keeps as lone surrogates, become
    U+FFFD replacement characters.
    """
    return name.encode('utf-8', 'surrogateescape').decode('utf-8', 'replace')


def file_element_id(name: str) -> str:
    """Element id for a listed entry: ``file-`` plus the URL-quoted name."""
    return f"file-{quote(name, safe=_ID_SAFE_CHARS)}"


def build_directory_page(
    names: Iterable[str],
    builder: SSRBuilder | None = None,
) -> SSRBuilder:
    """Assemble the listing page for the given directory entries.

    Args:
        names: Entry names, in display order. Written as text after
            ``display_name`` normalisation, without escaping.
        builder: Builder to use. It is cleared first; a new one is created
            if omitted.

    Returns:
        The builder, with the ``<html>`` node as root, ready to stream.
    """
    ui = builder.clear() if builder is not None else SSRBuilder()
    ui.register_default_callback(exponent)

    html = ui.create('html').e
    head = ui.create('head').mount(html).e
    ui.create('style').id('styles').mount(head).style(PAGE_STYLESHEET)
    ui.create('style', 'exponent-styles').style(EXPONENT_STYLESHEET).mount(head)

    body = ui.create('body').mount(html).e
    menu = ui.create('div', 'menu').mount(body).e
    (
        ui.create('span', 'menu-nav-up', 'menu-item')
        .text_content('..')
        .attrs({'onclick': 'fnav(this)'})
        .mount(menu)
    )
    ui.create('script', 'code').text_content(NAVIGATION_SCRIPT).mount(body)

    files = ui.create('div', 'files').mount(body).e
    for raw_name in names:
        name = display_name(raw_name)
        (
            ui.create('span', file_element_id(name), 'file')
            .text_content(name)
            .attrs({'onclick': 'fnav(this);'})
            .mount(files)
        )

    return ui
