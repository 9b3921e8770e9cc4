"""
Level writer service.

Creates engineering levels and level criteria. Uniqueness of level ids and
the criterion -> level reference are enforced by the store's constraints; the
store reports violations as LevelConflictError / LevelNotFoundError and this
service logs and re-raises them.
"""

import logging

from job_matrix.core.exceptions import LevelConflictError, LevelNotFoundError
from job_matrix.core.store import MatrixStore
from job_matrix.models.schemas import (
    CreateEngineeringLevelInput,
    CreateLevelCriterionInput,
    EngineeringLevel,
    LevelCriterion,
)


logger = logging.getLogger(__name__)


async def create_engineering_level(
    store: MatrixStore,
    level_input: CreateEngineeringLevelInput,
) -> EngineeringLevel:
    """
    Insert a new engineering level.

    Args:
        store: Store accessor for the request.
        level_input: Id, title and the optional descriptive fields.

    Returns:
        The stored level, including the store-assigned created_at.

    Raises:
        LevelConflictError: If a level with this id already exists. Nothing
            is written.
        asyncpg.PostgresError: Any other store failure, unchanged.
    """
    try:
        row = await store.insert_level(level_input.model_dump())
    except LevelConflictError:
        logger.warning(f"Engineering level {level_input.id!r} already exists")
        raise
    except Exception:
        logger.exception("Engineering level creation failed")
        raise

    logger.info(f"Created engineering level {row['id']!r}")
    return EngineeringLevel(**row)


async def create_level_criterion(
    store: MatrixStore,
    criterion_input: CreateLevelCriterionInput,
) -> LevelCriterion:
    """
    Attach a new criterion to an existing level.

    Args:
        store: Store accessor for the request.
        criterion_input: Owning level id, category, sub-category, description.

    Returns:
        The stored criterion, including its generated id.

    Raises:
        LevelNotFoundError: If engineering_level_id matches no level. Nothing
            is written.
        asyncpg.PostgresError: Any other store failure, unchanged.
    """
    try:
        row = await store.insert_criterion(criterion_input.model_dump())
    except LevelNotFoundError:
        logger.warning(
            f"Cannot add criterion: level {criterion_input.engineering_level_id!r} does not exist"
        )
        raise
    except Exception:
        logger.exception("Level criterion creation failed")
        raise

    logger.info(
        f"Created criterion {row['id']} for level {row['engineering_level_id']!r} "
        f"({row['category']} / {row['sub_category']})"
    )
    return LevelCriterion(**row)
