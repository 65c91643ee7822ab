# chronoboard/main.py

from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware

from chronoboard.api.v1.api import api_router
from chronoboard.controllers.site import router as site_router
from chronoboard.core.config import settings
from chronoboard.core.exceptions import AuthenticationError, ChronoBoardError
from chronoboard.core.logging_config import get_logger, setup_logging
from chronoboard.core.middleware import RequestContextMiddleware
from chronoboard.db.session import SessionLocal
from chronoboard.devserver import StaticFileRouterMiddleware
from chronoboard.services.auth_service import user_from_token
from chronoboard.views.templating import render_page

logger = get_logger(__name__)


def _is_api_request(request: Request) -> bool:
    return request.url.path.startswith(settings.api_v1_prefix)


def _cookie_user(request: Request):
    """Signed-in user for the navbar of an error page, or None."""
    token = request.cookies.get(settings.auth_cookie_name)
    if not token:
        return None
    db = SessionLocal()
    try:
        return user_from_token(db, token)
    except AuthenticationError:
        return None
    finally:
        db.close()


def _error_page(request: Request, status_code: int, message: str):
    return render_page(
        request,
        "site/error.html",
        user=_cookie_user(request),
        title=f"{status_code} {HTTPStatus(status_code).phrase}",
        status_code=status_code,
        message=message,
    )


async def chronoboard_error_handler(request: Request, exc: ChronoBoardError):
    if exc.status_code >= 500:
        logger.error("%s on %s: %s", exc.code, request.url.path, exc.message)
    if _is_api_request(request):
        headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
        return JSONResponse(exc.to_dict(), status_code=exc.status_code, headers=headers)
    return _error_page(request, exc.status_code, exc.message)


async def web_http_exception_handler(request: Request, exc: StarletteHTTPException):
    if _is_api_request(request) or "text/html" not in request.headers.get("accept", ""):
        return await http_exception_handler(request, exc)
    return _error_page(request, exc.status_code, str(exc.detail))


@asynccontextmanager
async def lifespan(app: FastAPI):
    from chronoboard.db.init_db import init_db, seed_initial_data

    init_db()
    if settings.seed_admin_password:
        db = SessionLocal()
        try:
            seed_initial_data(
                db,
                username=settings.seed_admin_username,
                email=settings.admin_email,
                password=settings.seed_admin_password,
            )
        finally:
            db.close()
    yield


def create_application() -> FastAPI:
    setup_logging()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # ---------- CORS ----------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.backend_cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---------- SESSION (flash messages, CSRF) ----------
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.secret_key,
        session_cookie="chronoboard_session",
        same_site="lax",
        https_only=settings.is_production,
    )

    # ---------- STATIC FILES ----------
    # Existing files under the web root are served directly; everything
    # else falls through to the routers below.
    app.add_middleware(StaticFileRouterMiddleware, web_root=settings.web_root)

    app.add_middleware(RequestContextMiddleware)

    # ---------- ERRORS ----------
    app.add_exception_handler(ChronoBoardError, chronoboard_error_handler)
    app.add_exception_handler(StarletteHTTPException, web_http_exception_handler)

    # ---------- ROUTERS ----------
    app.include_router(api_router, prefix=settings.api_v1_prefix)
    app.include_router(site_router)

    @app.get("/healthz", tags=["health"])
    def healthz():
        return {"status": "ok"}

    return app


app = create_application()
