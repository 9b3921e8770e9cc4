"""
Core infrastructure package for the FastAPI backend.

Provides:
- Configuration management via pydantic-settings
- Async PostgreSQL connection pool via asyncpg
- MatrixStore, the per-request store accessor
- FastAPI dependency injection utilities
- The application exception hierarchy

This module re-exports key components from submodules so callers can write:

    from job_matrix.core import get_settings, MatrixStore, MatrixStoreDep

Instead of:

    from job_matrix.core.config import get_settings
    from job_matrix.core.store import MatrixStore
    from job_matrix.core.dependencies import MatrixStoreDep
"""

from job_matrix.core.config import Settings, get_settings
from job_matrix.core.database import init_db, close_db, get_db_pool, ensure_schema
from job_matrix.core.exceptions import MatrixError, LevelConflictError, LevelNotFoundError
from job_matrix.core.store import MatrixStore
from job_matrix.core.dependencies import (
    get_db_session,
    get_matrix_store,
    get_settings_dependency,
    SettingsDep,
    DBSessionDep,
    MatrixStoreDep,
)

__all__ = [
    # Configuration management (from config.py)
    'Settings',
    'get_settings',
    # Database pool lifecycle (from database.py)
    'init_db',
    'close_db',
    'get_db_pool',
    'ensure_schema',
    # Errors (from exceptions.py)
    'MatrixError',
    'LevelConflictError',
    'LevelNotFoundError',
    # Store accessor (from store.py)
    'MatrixStore',
    # FastAPI dependency injection (from dependencies.py)
    'get_db_session',
    'get_matrix_store',
    'get_settings_dependency',
    'SettingsDep',
    'DBSessionDep',
    'MatrixStoreDep',
]
