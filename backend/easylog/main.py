"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI

from easylog.config import get_settings
from easylog.infrastructure.database import Base, engine
from easylog.infrastructure.logging.log_config import setup_logging
from easylog.presentation.api.router import router as api_router
from easylog.presentation.cors import ScopedCORSMiddleware
from easylog.presentation.navigation import router as navigation_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging and create the storage table."""
    settings = get_settings()
    setup_logging()

    if settings.storage_backend == "database":
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Storage scope ready (database)")
    else:
        logger.warning("Using in-memory storage — journal data is lost on restart")

    yield

    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.include_router(api_router)
    app.include_router(navigation_router)

    # CORS middleware; the mock login answers any origin with its own headers
    app.add_middleware(
        ScopedCORSMiddleware,
        exempt_paths=[app.url_path_for("login")],
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "easylog.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
