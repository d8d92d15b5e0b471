import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from resumepdf.api.v1 import auth, convert, resumes, system
from resumepdf.core.config import Settings, settings as default_settings
from resumepdf.core.exceptions import ServiceError
from resumepdf.core.logging import configure_logging
from resumepdf.db.session import create_db_engine, init_db, make_session_factory
from resumepdf.services.pdf_renderer import PdfRenderer

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Internal server error"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # The engine is the process-wide storage handle: opened once here,
        # shared by every request session, disposed once on shutdown.
        engine = create_db_engine(settings.DATABASE_URL)
        init_db(engine)
        app.state.engine = engine
        app.state.session_factory = make_session_factory(engine)
        logger.info(
            "%s %s started (%s), public dir %s",
            settings.PROJECT_NAME,
            settings.VERSION,
            settings.ENVIRONMENT,
            settings.PUBLIC_DIR,
        )
        try:
            yield
        finally:
            engine.dispose()
            logger.info("Database connection closed.")

    app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION, lifespan=lifespan)
    app.state.settings = settings
    # Each render still launches its own browser; only the configuration is shared
    app.state.renderer = PdfRenderer(
        viewport_width=settings.PDF_VIEWPORT_WIDTH,
        viewport_height=settings.PDF_VIEWPORT_HEIGHT,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=settings.cors_origin_list != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_error_handlers(app, settings)

    app.include_router(auth.router, prefix="/api", tags=["auth"])
    app.include_router(resumes.router, prefix="/api/resumes", tags=["resumes"])
    app.include_router(convert.router, tags=["convert"])
    app.include_router(system.router, tags=["system"])

    if settings.PUBLIC_DIR.is_dir():
        app.mount("/static", StaticFiles(directory=settings.PUBLIC_DIR), name="static")

    return app


def _register_error_handlers(app: FastAPI, settings: Settings) -> None:
    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        body = {"error": exc.message}
        if exc.status_code >= 500:
            logger.error(
                "%s %s failed: %s", request.method, request.url.path, exc.message,
                exc_info=exc.__cause__ or exc,
            )
            if not exc.expose and settings.is_development and exc.__cause__ is not None:
                body["details"] = str(exc.__cause__)
        else:
            logger.warning(
                "%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.message
            )
        return JSONResponse(status_code=exc.status_code, content=body)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("%s %s -> 400 invalid request", request.method, request.url.path)
        return JSONResponse(
            status_code=400,
            content={
                "error": "Invalid request",
                "details": jsonable_encoder(exc.errors(), exclude={"input", "ctx", "url"}),
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            message = "Route not found"
        else:
            message = str(exc.detail)
        return JSONResponse(status_code=exc.status_code, content={"error": message})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        # The failing request gets a 500, the listener keeps serving
        logger.error(
            "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
        )
        body = {"error": GENERIC_ERROR}
        if settings.is_development:
            body["details"] = str(exc)
        return JSONResponse(status_code=500, content=body)


app = create_app()
