# File: chronoboard/devserver.py

"""
Pretty-URL routing for the development server.

A request whose path names a real file under the web root is answered with
that file; everything else (including ``/``) goes to the application, which
acts as the front controller.
"""

from pathlib import Path
from typing import Optional, Union
from urllib.parse import unquote, urlsplit

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import FileResponse

from chronoboard.core.logging_config import get_logger

logger = get_logger(__name__)


def resolve_static(web_root: Union[str, Path], request_uri: str) -> Optional[Path]:
    """
    Map ``request_uri`` to an existing file under ``web_root``.

    The query string is ignored and the path is URL-decoded. Returns None
    for ``/``, for directories, for missing files, for paths holding a NUL
    byte and for anything that would resolve outside the web root.
    """
    path = unquote(urlsplit(request_uri).path)
    if path in ("", "/") or "\x00" in path:
        return None

    root = Path(web_root).resolve()
    try:
        candidate = (root / path.lstrip("/")).resolve()
        if root not in candidate.parents or not candidate.is_file():
            return None
    except OSError:
        # e.g. a segment longer than the filesystem allows
        return None
    return candidate


class StaticFileRouterMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, web_root: Union[str, Path]):
        super().__init__(app)
        self.web_root = Path(web_root)

    async def dispatch(self, request: Request, call_next):
        if request.method in ("GET", "HEAD"):
            raw_path = request.scope.get("raw_path")
            uri = raw_path.decode("latin-1") if raw_path else request.url.path
            asset = resolve_static(self.web_root, uri)
            if asset is not None:
                logger.debug("Serving static file %s", asset)
                return FileResponse(asset)
        return await call_next(request)
