# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Settings for the directory browsing service."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_HOST = '0.0.0.0'
DEFAULT_PORT = 3000
DEFAULT_SSL_FILE = './ssl.cert.pem'


@dataclass
class ServeConfig:
    """Settings for ``server.serve()``.

    Attributes:
        root: Directory exposed at ``/``.
        host: Interface to bind.
        port: TCP port.
        ssl: Serve HTTPS using ``ssl_cert``/``ssl_key``.
    """

    root: Path
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    ssl: bool = False
    ssl_cert: str = DEFAULT_SSL_FILE
    ssl_key: str = DEFAULT_SSL_FILE

    @property
    def scheme(self) -> str:
        return 'https' if self.ssl else 'http'
