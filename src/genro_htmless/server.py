# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Directory browsing HTTP service.

Directories are rendered with ``build_directory_page`` and streamed
fragment by fragment; files are sent as they are. Requires the ``serve``
extra (FastAPI and uvicorn).

Example:
    >>> app = create_app('/srv/share')
    >>> uvicorn.run(app, port=3000)
"""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import FileResponse, Response, StreamingResponse

from .builder import SSRBuilder
from .config import ServeConfig
from .pages import build_directory_page

logger = logging.getLogger(__name__)


def resolve_request_path(root: Path, url_path: str) -> Path | None:
    """Map a URL path onto ``root``.

    Returns None when the target does not exist, lies outside ``root`` or
    cannot be a file system path (e.g. it contains a null byte). Symlinks
    are followed before the containment check, so links leading out of
    ``root`` are not served.
    """
    try:
        target = (root / url_path.lstrip('/')).resolve()
        if target != root and root not in target.parents:
            return None
        if not target.exists():
            return None
    except (ValueError, OSError):
        return None
    return target


def create_app(root: str | Path) -> FastAPI:
    """Build the FastAPI application serving ``root``."""
    root_dir = Path(root).resolve()
    app = FastAPI(title='genro-htmless', docs_url=None, redoc_url=None, openapi_url=None)

    @app.get('/{url_path:path}')
    def browse(url_path: str) -> Response:
        target = resolve_request_path(root_dir, url_path)
        if target is None:
            logger.info("GET /%s -> 404", url_path)
            return Response(status_code=404)

        if target.is_dir():
            names = sorted(entry.name for entry in target.iterdir())
            logger.info("GET /%s -> directory (%d entries)", url_path, len(names))
            # One builder per request: sessions are not shared.
            ui = build_directory_page(names, SSRBuilder())
            return StreamingResponse(ui.iter_chunks(), media_type='text/html')

        if target.is_file():
            logger.info("GET /%s -> file", url_path)
            return FileResponse(target)

        logger.warning("GET /%s -> not a file or directory", url_path)
        return Response(
            content='Not a file or directory, aborting',
            status_code=400,
        )

    return app


def serve(config: ServeConfig) -> None:
    """Run the service with uvicorn until interrupted."""
    import uvicorn

    app = create_app(config.root)
    ssl_options = {}
    if config.ssl:
        logger.info(
            "Reading cert file: %s, key file: %s", config.ssl_cert, config.ssl_key
        )
        ssl_options = {'ssl_certfile': config.ssl_cert, 'ssl_keyfile': config.ssl_key}

    logger.info("Listening on %s://localhost:%d", config.scheme, config.port)
    uvicorn.run(app, host=config.host, port=config.port, **ssl_options)
