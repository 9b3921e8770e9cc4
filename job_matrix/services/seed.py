"""
Sample dataset seeder.

Populates an empty matrix with a small but representative slice of the
engineering ladder: three IC levels and one engineering manager level, each
with Craft / Impact / Growth criteria.

The whole seed runs in one store transaction. If any seeded level id already
exists the insert fails with LevelConflictError, the transaction rolls back,
and nothing from the seed is written.
"""

import logging
from typing import List

from job_matrix.core.exceptions import LevelConflictError
from job_matrix.core.store import MatrixStore
from job_matrix.models.schemas import CreateEngineeringLevelInput, CreateLevelCriterionInput


logger = logging.getLogger(__name__)


# =============================================================================
# Sample Data
# =============================================================================

SEED_ENGINEERING_LEVELS: List[CreateEngineeringLevelInput] = [
    CreateEngineeringLevelInput(
        id="L1/L2",
        title="L1/L2",
        job_title=None,
        one_sentence_description="Entry level engineer learning fundamentals and contributing to small tasks",
        scope_of_influence_summary="Themselves and their tasks",
        ownership_summary="No ownership responsibility. Learning and being actively developed by others",
        trajectory_notes="Expected to progress to L3 within 1-2 years",
    ),
    CreateEngineeringLevelInput(
        id="L3",
        title="L3",
        job_title=None,
        one_sentence_description=None,
        scope_of_influence_summary="Their area and strategy",
        ownership_summary=(
            "Consistent record of very strong ownership for their area. "
            "Accountable for results in that area."
        ),
        trajectory_notes="We expect Engineers to remain at this level for 2 years on average",
    ),
    CreateEngineeringLevelInput(
        id="L5",
        title="L5",
        job_title=None,
        one_sentence_description=(
            "Leads projects and some cross-team efforts inside their team. "
            "An expert in the areas owned by their team. Mentors and guides juniors"
        ),
        scope_of_influence_summary="industry",
        ownership_summary=(
            "Fully responsible for all aspects of their area. This person is rare. "
            "This takes an exceptional level of dedication to the craft and is a big "
            "jump from Level 4. Very few companies will have someone at this skill level."
        ),
        trajectory_notes=(
            "Progression beyond this level is optional. L5 Engineers may follow "
            "the IC track (L6) or TL path (Lead Engineer)"
        ),
    ),
    CreateEngineeringLevelInput(
        id="EM1",
        title="EM1",
        job_title="Engineering Manager",
        one_sentence_description=(
            "An Eng Manager supports Lead Engineers, and is responsible for technical "
            "decisions and outcomes on their teams (target max reports: 3 TLs)"
        ),
        scope_of_influence_summary=None,
        ownership_summary=None,
        trajectory_notes="Promotion to EM and above requires there to be a business need for the role",
    ),
]

SEED_LEVEL_CRITERIA: List[CreateLevelCriterionInput] = [
    # L3
    CreateLevelCriterionInput(
        engineering_level_id="L3",
        category="Craft",
        sub_category="Technical Expertise",
        description=(
            "Has sufficient practical and foundational knowledge to be able to understand "
            "and implement features with guidance. Learns best-practices and tools"
        ),
    ),
    CreateLevelCriterionInput(
        engineering_level_id="L3",
        category="Craft",
        sub_category="Scope",
        description="Owns tasks and small projects",
    ),
    CreateLevelCriterionInput(
        engineering_level_id="L3",
        category="Impact",
        sub_category="Planning",
        description="Plans execution of their tasks to reliably deliver changes.",
    ),
    CreateLevelCriterionInput(
        engineering_level_id="L3",
        category="Impact",
        sub_category="Execution",
        description=(
            "Completes individual tasks or small features independently in a timely "
            "fashion; is productive and seeks support from team-members"
        ),
    ),
    CreateLevelCriterionInput(
        engineering_level_id="L3",
        category="Growth",
        sub_category="Mentoring & Feedback",
        description=(
            "Open to guidance and mentorship from others. Provides feedback to peers "
            "and Lead Eager to learn and expand responsibilities"
        ),
    ),
    # L5
    CreateLevelCriterionInput(
        engineering_level_id="L5",
        category="Craft",
        sub_category="Technical Expertise",
        description=(
            "A domain expert. Able to contribute across many teams areas of expertise. "
            "Follows relevant research Raises the bar of what we can achieve."
        ),
    ),
    CreateLevelCriterionInput(
        engineering_level_id="L5",
        category="Craft",
        sub_category="Scope",
        description="Large systems, aware of APIs and responsibility-boundaries between services",
    ),
    CreateLevelCriterionInput(
        engineering_level_id="L5",
        category="Impact",
        sub_category="Planning",
        description=(
            "Writes specs and scopes tasks for large systems and work break down for "
            "several people. Able to create RFCs and negotiate with stakeholders"
        ),
    ),
    CreateLevelCriterionInput(
        engineering_level_id="L5",
        category="Impact",
        sub_category="Execution",
        description=(
            "Can lead a medium or large project, supporting team members with guidance "
            "from their Lead Makes good decisions on prioritization"
        ),
    ),
    CreateLevelCriterionInput(
        engineering_level_id="L5",
        category="Growth",
        sub_category="Mentoring & Feedback",
        description=(
            "Mentors new hires and peers; other team members look up to their technical "
            "expertise to solve their challenges"
        ),
    ),
    # EM1
    CreateLevelCriterionInput(
        engineering_level_id="EM1",
        category="Craft",
        sub_category="Technical Expertise",
        description="As L5+",
    ),
    CreateLevelCriterionInput(
        engineering_level_id="EM1",
        category="Craft",
        sub_category="Scope",
        description="Owns the problem-domain of their teams",
    ),
    CreateLevelCriterionInput(
        engineering_level_id="EM1",
        category="Impact",
        sub_category="Planning",
        description=None,
    ),
    CreateLevelCriterionInput(
        engineering_level_id="EM1",
        category="Impact",
        sub_category="Execution",
        description=None,
    ),
    CreateLevelCriterionInput(
        engineering_level_id="EM1",
        category="Growth",
        sub_category="Mentoring & Feedback",
        description=(
            "Supports TLs in coaching and performance management, ensuring that verbal "
            "and written feedback is fair, delivered clearly and frequently alongside "
            "support-to-improve. Provides additional coaching through skip-levels Sets "
            "clear expectations, solicits, synthesizes and delivers feedback for growth. "
            "Demonstrates good judgement and ability when handling complex employee "
            "issues Conducts regular performance evaluations, offering constructive "
            "feedback for improvement."
        ),
    ),
]


# =============================================================================
# Seed Operation
# =============================================================================


async def seed_database(store: MatrixStore) -> None:
    """
    Insert the sample levels and criteria.

    Args:
        store: Store accessor for the request.

    Raises:
        LevelConflictError: If any seeded level id already exists. The
            transaction is rolled back, so nothing is written.
        asyncpg.PostgresError: Any other store failure, unchanged.
    """
    logger.info("Seeding database with initial job matrix data...")

    try:
        async with store.transaction():
            for level in SEED_ENGINEERING_LEVELS:
                await store.insert_level(level.model_dump())
            for criterion in SEED_LEVEL_CRITERIA:
                await store.insert_criterion(criterion.model_dump())
    except LevelConflictError as exc:
        logger.warning(f"Seed aborted, level {exc.level_id!r} already exists")
        raise
    except Exception:
        logger.exception("Seeding database failed")
        raise

    logger.info(
        f"Seeded {len(SEED_ENGINEERING_LEVELS)} levels and "
        f"{len(SEED_LEVEL_CRITERIA)} criteria"
    )
