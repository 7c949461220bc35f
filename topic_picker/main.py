"""Trainer Topic Picker — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from topic_picker.application.ports.assignment_store import AssignmentStore
from topic_picker.config import Settings, settings
from topic_picker.domain.errors import (
    AssignmentFailed,
    ExhaustedPool,
    StoreError,
    UnsupportedOperation,
)
from topic_picker.infrastructure.api.dependencies import build_services
from topic_picker.infrastructure.api.routes_admin import router as admin_router
from topic_picker.infrastructure.api.routes_assignments import router as assignments_router
from topic_picker.infrastructure.api.routes_health import router as health_router
from topic_picker.infrastructure.api.routes_topics import router as topics_router

logger = logging.getLogger(__name__)


def create_app(cfg: Settings | None = None, store: AssignmentStore | None = None) -> FastAPI:
    cfg = cfg or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup and shutdown events."""
        logging.getLogger("topic_picker").setLevel(logging.DEBUG if cfg.debug else logging.INFO)
        services = build_services(cfg, store)
        app.state.services = services
        records = await services.cache.refresh()
        if services.cache.last_error:
            logger.warning("Store not available on startup: %s", services.cache.last_error)
        else:
            logger.info("Loaded %d assignments on startup", len(records))
        yield
        await services.cache.aclose()
        if services.engine is not None:
            await services.engine.dispose()

    app = FastAPI(
        title="Trainer Topic Picker",
        description="Random topic assignment for trainer registrations, scoped per room",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_error_handlers(app)

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(topics_router, prefix="/api")
    app.include_router(assignments_router, prefix="/api")
    app.include_router(admin_router, prefix="/api")

    return app


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ExhaustedPool)
    async def _exhausted(request: Request, exc: ExhaustedPool):
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={
                "detail": str(exc),
                "action": "Please select a different room or contact the administrator.",
            },
        )

    @app.exception_handler(AssignmentFailed)
    async def _failed(request: Request, exc: AssignmentFailed):
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": str(exc), "action": "Please try again."},
        )

    @app.exception_handler(UnsupportedOperation)
    async def _unsupported(request: Request, exc: UnsupportedOperation):
        return JSONResponse(
            status_code=status.HTTP_501_NOT_IMPLEMENTED,
            content={
                "detail": str(exc),
                "action": "Edit the backing sheet directly.",
            },
        )

    @app.exception_handler(StoreError)
    async def _store_error(request: Request, exc: StoreError):
        logger.warning("Store error on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "detail": str(exc),
                "action": "The assignment store is unavailable. Please try again later.",
            },
        )


app = create_app()
