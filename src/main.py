"""Main FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.exception_handlers import setup_exception_handlers
from api.middleware.request_context import RequestContextMiddleware
from api.routes.health import router as health_router
from api.v1 import router as v1_router
from core.config import settings
from core.logging import setup_logging
from infrastructure.database.session import engine

logger = structlog.get_logger()

# Initialize structured logging
setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Release pooled connections on shutdown."""
    logger.info("app_started", backend=settings.repository_backend)
    yield
    await engine.dispose()
    logger.info("app_stopped")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        lifespan=lifespan,
        title=settings.app_name,
        description=(
            "## Todo Management\n\n"
            "CRUD over todos and labels. Each todo carries any number of "
            "labels; labels are shared between todos.\n\n"
            "Storage is either PostgreSQL or an in-process store, selected "
            "with `REPOSITORY_BACKEND`."
        ),
        version="0.1.0",
        debug=settings.debug,
        openapi_tags=[
            {
                "name": "health",
                "description": "Health check endpoints",
            },
            {
                "name": "todos",
                "description": "Todo management operations",
            },
            {
                "name": "labels",
                "description": "Label management operations",
            },
        ],
    )

    app.add_middleware(RequestContextMiddleware)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["Content-Type"],
    )

    # Setup exception handlers
    setup_exception_handlers(app)

    # Include routers
    app.include_router(health_router)
    app.include_router(v1_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
    )
