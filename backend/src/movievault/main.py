"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from movievault.config import Settings, get_settings
from movievault.domain.clock import SYSTEM_CLOCK, Clock
from movievault.infrastructure.auth.jwt import TokenService
from movievault.infrastructure.database.connection import (
    build_engine,
    build_session_factory,
    create_schema,
)
from movievault.interfaces.api.v1.router import v1_router
from movievault.log import configure_logging

logger = logging.getLogger("movievault.main")


def create_app(settings: Settings | None = None, *, clock: Clock = SYSTEM_CLOCK) -> FastAPI:
    """Build the application with every collaborator constructed from ``settings``."""
    settings = settings or get_settings()
    engine = build_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.is_sqlite:
            # Zero-setup local runs; PostgreSQL deployments migrate with Alembic
            await create_schema(engine)
        logger.info("%s %s started (%s)", settings.app_name, settings.app_version, settings.environment)
        yield
        await engine.dispose()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Private movie collection API",
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.token_service = TokenService.from_settings(settings, clock)
    app.state.clock = clock

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(v1_router)

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    @app.get("/health")
    async def health():
        return {"status": "ok", "version": settings.app_version}

    return app


def build_default_app() -> FastAPI:
    """ASGI factory: ``uvicorn movievault.main:build_default_app --factory``."""
    settings = get_settings()
    configure_logging(settings.log_level)
    return create_app(settings)
