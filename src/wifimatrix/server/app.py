"""FastAPI application serving the control panel assets.

    GET /        -> <asset_root>/index.html
    GET /<path>  -> <asset_root>/<path>, or the fixed 404 page
    GET /<dir>/  -> <asset_root>/<dir>/index.html (``/<dir>`` redirects)

Anything else, any method other than GET/HEAD included, gets the fixed
404 page. Dotfiles are never served. Path-to-file mapping, content types
and traversal checks are left to Starlette's StaticFiles.
"""

from __future__ import annotations

import logging
from pathlib import Path, PurePath

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import FileResponse, HTMLResponse, Response
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.types import Scope

from wifimatrix.config.settings import DEFAULT_ASSET_ROOT

logger = logging.getLogger(__name__)

INDEX_FILE = "index.html"

NOT_FOUND_HTML = "<h1>404 Not Found</h1><p>Page not found, check the URL.</p>"

# Unmatched methods fall through to the catch-all page as well
NOT_FOUND_STATUSES = {404, 405}


class AssetFiles(StaticFiles):
    """StaticFiles that hides dotfiles and leaves 404s to the app handler."""

    async def get_response(self, path: str, scope: Scope) -> Response:
        if any(part.startswith(".") for part in PurePath(path).parts):
            raise StarletteHTTPException(status_code=404)
        response = await super().get_response(path, scope)
        # html mode would otherwise answer with a 404.html from the asset root
        if response.status_code == 404:
            raise StarletteHTTPException(status_code=404)
        return response


def create_app(asset_root: Path | str | None = None) -> FastAPI:
    """Create the static asset application.

    Args:
        asset_root: Directory to serve. Defaults to the packaged
            control panel.

    Raises:
        FileNotFoundError: If the asset root is not a directory.
    """
    root = Path(asset_root) if asset_root is not None else DEFAULT_ASSET_ROOT
    root = root.resolve()
    if not root.is_dir():
        raise FileNotFoundError(f"Asset root {root} is not a directory")

    # No docs routes: every path but "/" belongs to the asset root
    app = FastAPI(
        title="wifimatrix",
        description="8x8 WiFi matrix control panel server",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.asset_root = root

    @app.exception_handler(StarletteHTTPException)
    async def not_found_handler(request: Request, exc: StarletteHTTPException) -> Response:
        if exc.status_code in NOT_FOUND_STATUSES:
            logger.debug("Not found: %s %s", request.method, request.url.path)
            return HTMLResponse(NOT_FOUND_HTML, status_code=404)
        return await http_exception_handler(request, exc)

    @app.get("/", include_in_schema=False)
    async def index() -> FileResponse:
        index_path = app.state.asset_root / INDEX_FILE
        if not index_path.is_file():
            raise StarletteHTTPException(status_code=404)
        return FileResponse(index_path)

    app.mount("/", AssetFiles(directory=root, html=True), name="assets")

    logger.debug("Serving assets from %s", root)
    return app
