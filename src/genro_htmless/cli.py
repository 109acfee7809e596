# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Command line entry point for the directory browsing service.

Usage:
    genro-htmless [--root DIR] [--port N] [--ssl [--ssl-cert F] [--ssl-key F]]

Examples:
    # Browse the current directory on http://localhost:3000
    genro-htmless

    # HTTPS on port 8443
    genro-htmless --port 8443 --ssl --ssl-cert cert.pem --ssl-key key.pem
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from .config import DEFAULT_HOST, DEFAULT_PORT, DEFAULT_SSL_FILE, ServeConfig

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='genro-htmless',
        description='Serve a directory tree with server-side rendered listings.',
    )
    parser.add_argument('--root', default='.', help='directory to serve (default: cwd)')
    parser.add_argument('--host', default=DEFAULT_HOST, help='interface to bind')
    # Kept as text: a malformed value falls back to the default port.
    parser.add_argument('--port', default=str(DEFAULT_PORT), help='TCP port (default: 3000)')
    parser.add_argument('--ssl', action='store_true', help='serve HTTPS')
    parser.add_argument('--ssl-cert', default=DEFAULT_SSL_FILE, help='certificate file')
    parser.add_argument('--ssl-key', default=DEFAULT_SSL_FILE, help='private key file')
    parser.add_argument('-v', '--verbose', action='store_true', help='debug logging')
    return parser


def parse_port(value: str, default: int = DEFAULT_PORT) -> int:
    """Parse a port number, logging a warning and using ``default`` if malformed."""
    try:
        return int(value)
    except ValueError:
        logger.warning("Malformed port %r, defaulting to %d", value, default)
        return default


def config_from_args(args: argparse.Namespace) -> ServeConfig:
    """Turn parsed arguments into a ServeConfig."""
    return ServeConfig(
        root=Path(args.root).resolve(),
        host=args.host,
        port=parse_port(args.port),
        ssl=args.ssl,
        ssl_cert=args.ssl_cert,
        ssl_key=args.ssl_key,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    from .server import serve

    serve(config_from_args(args))


if __name__ == '__main__':
    main()
