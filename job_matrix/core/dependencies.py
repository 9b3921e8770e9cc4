"""
FastAPI dependency injection module for the Job Leveling Matrix backend.

This module provides reusable FastAPI dependencies for database sessions,
the matrix store accessor, and configuration access. Endpoint handlers receive
a MatrixStore per request and pass it explicitly to the service functions, so
the services stay independent of FastAPI and of the pool.

Key Dependencies Provided:
- get_db_session: Async generator yielding database connections from the pool
- get_matrix_store: Async generator yielding a MatrixStore bound to one connection
- get_settings_dependency: Returns the cached Settings singleton
- SettingsDep / DBSessionDep / MatrixStoreDep: Annotated aliases for endpoints

Usage Examples:
    @router.get("/levels")
    async def list_levels(store: MatrixStoreDep) -> List[EngineeringLevelWithCriteria]:
        return await get_all_levels(store)

    # In tests, swap the store for a double:
    app.dependency_overrides[get_matrix_store] = lambda: fake_store
"""

from typing import AsyncGenerator, Annotated

from fastapi import Depends
from asyncpg import Connection

from job_matrix.core.config import Settings, get_settings
from job_matrix.core.database import get_db_pool
from job_matrix.core.store import MatrixStore


# =============================================================================
# Database Session Dependency
# =============================================================================

async def get_db_session() -> AsyncGenerator[Connection, None]:
    """
    Yield an async database connection from the pool.

    The connection is released back to the pool when the endpoint completes,
    regardless of whether the operation succeeded or raised an exception.

    Yields:
        asyncpg.Connection: An active database connection from the pool.

    Raises:
        asyncpg.PostgresError: If connection acquisition fails.
    """
    pool = await get_db_pool()
    async with pool.acquire() as connection:
        yield connection


async def get_matrix_store(
    connection: Annotated[Connection, Depends(get_db_session)],
) -> AsyncGenerator[MatrixStore, None]:
    """Yield a MatrixStore bound to the request's pooled connection."""
    yield MatrixStore(connection)


# =============================================================================
# Settings Dependency
# =============================================================================

def get_settings_dependency() -> Settings:
    """
    Return the Settings singleton instance.

    Thin wrapper around get_settings() so tests can override it:

        app.dependency_overrides[get_settings_dependency] = lambda: mock_settings
    """
    return get_settings()


# =============================================================================
# Type Aliases for Dependency Injection
# =============================================================================

SettingsDep = Annotated[Settings, Depends(get_settings_dependency)]

DBSessionDep = Annotated[Connection, Depends(get_db_session)]

MatrixStoreDep = Annotated[MatrixStore, Depends(get_matrix_store)]
