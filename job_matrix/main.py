"""
FastAPI application entry point for the Job Leveling Matrix API.

This module configures logging, CORS, the database lifespan, and registers
the API routers.

Run locally with:
    python -m job_matrix.main
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from job_matrix import __version__
from job_matrix.api import api_router
from job_matrix.core.config import get_settings
from job_matrix.core.database import init_db, close_db, ensure_schema

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Lifespan context manager for FastAPI application startup and shutdown events.

    On startup:
        - Initialize database connection pool
        - Create the matrix tables if configured to

    On shutdown:
        - Close database connection pool
    """
    settings = get_settings()
    logging.getLogger().setLevel(settings.log_level.upper())

    logger.info("Job Leveling Matrix API starting")
    try:
        await init_db()
        logger.info("Database connection pool initialized")
        if settings.create_schema_on_startup:
            await ensure_schema()
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        # Keep serving: /health does not need the database

    yield

    logger.info("Job Leveling Matrix API shutting down")
    try:
        await close_db()
        logger.info("Database connection pool closed")
    except Exception as e:
        logger.error(f"Error closing database pool: {e}")


def create_app() -> FastAPI:
    """Build the FastAPI application with middleware and routers attached."""
    settings = get_settings()

    application = FastAPI(
        title="Job Leveling Matrix API",
        version=__version__,
        description=(
            "Engineering career levels and their criteria: list, search, "
            "filter, compare and navigate the leveling matrix."
        ),
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(api_router)

    @application.get("/health")
    async def health_check():
        """
        Health check endpoint for monitoring and load balancer probes.

        Returns:
            Dict with status 'ok' and the current UTC timestamp
        """
        return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}

    @application.get("/")
    async def root():
        """
        Root endpoint providing API information.

        Returns:
            Dict with API name and version
        """
        return {
            "name": "Job Leveling Matrix API",
            "version": __version__,
            "docs": "/docs",
            "openapi": "/openapi.json",
        }

    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "job_matrix.main:app",
        host=settings.server_host,
        port=settings.server_port,
        reload=True,
    )
