import os
import time
from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from loguru import logger
from prometheus_client import make_asgi_app

from app.api.routes import router as api_router
from app.core.config import Settings, get_settings
from app.core.exceptions import CareerGuideError
from app.core.logging import setup_logging
from app.core.security import SessionIssuer
from app.db.database import create_db_engine, create_session_factory, init_db
from app.services.activity_log import ActivityLog
from app.services.generation_service import GenerationGateway


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request payload"
    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Request body is not valid JSON"
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    if field:
        return f"Invalid or missing field: {field}"
    return "Invalid request payload"


def create_app(settings: Optional[Settings] = None, generation_client: Optional[Any] = None) -> FastAPI:
    """
    Build the application.

    Settings are read once and handed to the session issuer and generation
    gateway; ``generation_client`` replaces the OpenAI client (tests pass a fake).
    """
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    engine = create_db_engine(settings.SQLALCHEMY_DATABASE_URI)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.PROJECT_NAME}...")
        init_db(engine)
        logger.info("Database initialized successfully")
        yield
        logger.info(f"Shutting down {settings.PROJECT_NAME}...")
        engine.dispose()

    app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION, lifespan=lifespan)

    session_factory = create_session_factory(engine)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = session_factory
    app.state.session_issuer = SessionIssuer(settings)
    app.state.generation_gateway = GenerationGateway(settings, client=generation_client)
    app.state.activity_log = ActivityLog(session_factory)

    # CORS middleware configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=False,  # bearer tokens only, no cookies
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log request timing and status"""
        start_time = time.time()
        response = await call_next(request)
        logger.info(
            f"{request.method} {request.url.path} "
            f"Status: {response.status_code} "
            f"Duration: {(time.time() - start_time):.3f}s"
        )
        return response

    @app.exception_handler(CareerGuideError)
    async def career_guide_error_handler(request: Request, exc: CareerGuideError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": _validation_message(exc)},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.opt(exception=exc).error(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )

    # Routers
    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "version": settings.VERSION}

    # Prometheus metrics endpoint
    app.mount("/metrics", make_asgi_app())

    # Built client: real files are served as-is, any other GET path gets
    # index.html so client-side routes (/login, /register) survive a reload
    if settings.CLIENT_DIST_DIR and os.path.isdir(settings.CLIENT_DIST_DIR):
        client_root = os.path.realpath(settings.CLIENT_DIST_DIR)
        index_file = os.path.join(client_root, "index.html")

        @app.get("/{full_path:path}", include_in_schema=False)
        async def serve_client(full_path: str):
            candidate = os.path.realpath(os.path.join(client_root, full_path))
            if candidate.startswith(client_root + os.sep) and os.path.isfile(candidate):
                return FileResponse(candidate)
            return FileResponse(index_file)

    return app
