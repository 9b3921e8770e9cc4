"""
Job Leveling Matrix Backend Package.

FastAPI service layer for the engineering job leveling matrix: a catalog of
career levels (L3, TL1, EM1, ...) and the categorized criteria attached to
each of them.

Subpackages:
    - api: FastAPI route handlers
    - core: Configuration, database pool, store accessor, dependencies, errors
    - models: Pydantic schemas and enums
    - services: Read/write operations over the matrix
    - sql: Parameterized SQL queries and schema DDL
"""

__version__ = "1.0.0"
