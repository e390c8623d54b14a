"""
Main entrypoint for the Event Hub API.

This module assembles the FastAPI application: logging, CORS, the
error envelope, the v1 routes, static file mounts and the MongoDB
startup/shutdown hooks.  ``create_app`` builds and configures the
app, which is then instantiated at module import time as ``app``::

    uvicorn event_hub_api.app.main:app --reload
"""

import logging
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import close_client, get_database, init_db
from .core.logging_config import setup_logging
from .core.uploads import ensure_upload_dir


logger = logging.getLogger(__name__)


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {error.get('msg')}" if loc else str(error.get("msg")))
    return "Invalid request: " + "; ".join(parts)


class CatchAllExceptionMiddleware(BaseHTTPMiddleware):
    """Turn exceptions no handler claimed into a 500 envelope.

    Installed beneath ``CORSMiddleware`` so these responses still carry
    the CORS headers a browser needs to read them.
    """

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"message": "Server error", "error": str(exc)},
            )


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error as ``{"message": ...}``.

    Database failures become 500 responses that also carry the
    underlying error text under ``error``; anything else is left to
    ``CatchAllExceptionMiddleware``.
    """

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": _describe_validation_errors(exc)},
        )

    @app.exception_handler(PyMongoError)
    async def database_exception_handler(request: Request, exc: PyMongoError) -> JSONResponse:
        logger.exception("Database error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Server error", "error": str(exc)},
        )


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    # Added first so it sits inside CORS.
    app.add_middleware(CatchAllExceptionMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(v1_router)

    # The upload directory must exist before StaticFiles checks it.
    upload_dir = ensure_upload_dir()
    app.mount(settings.upload_url_prefix, StaticFiles(directory=upload_dir), name="uploads")

    # Optional frontend bundle.  Mounted last so API routes take precedence.
    public_dir = Path(settings.public_dir)
    if public_dir.is_dir():
        app.mount("/", StaticFiles(directory=public_dir, html=True), name="public")

    @app.on_event("startup")
    async def startup_event() -> None:
        init_db(get_database())
        logger.info("MongoDB indexes ensured")

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        close_client()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
