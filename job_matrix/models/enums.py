"""
Enumeration definitions for the Job Leveling Matrix backend.

All enums inherit from both `str` and `Enum` to ensure JSON serialization
compatibility with Pydantic models.
"""

from enum import Enum


class LevelGroup(str, Enum):
    """
    Career track a level id belongs to, derived from its naming convention.

    - IC: individual contributor levels ("L1/L2", "L3", "L5", ...)
    - TL: tech lead levels ("TL1", "TL2", ...)
    - EM: engineering manager levels ("EM1", "EM2", ...)

    Member order is the order the groups appear in the matrix overview.
    """
    IC = "IC"
    TL = "TL"
    EM = "EM"
