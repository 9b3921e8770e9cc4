"""Exception hierarchy for the leveling matrix data-access layer."""


class MatrixError(Exception):
    """Base application exception."""


class LevelConflictError(MatrixError):
    """Raised when an engineering level with the same id already exists."""

    def __init__(self, level_id: str) -> None:
        self.level_id = level_id
        super().__init__(f"Engineering level with ID '{level_id}' already exists")


class LevelNotFoundError(MatrixError):
    """Raised when a criterion references an engineering level that does not exist."""

    def __init__(self, level_id: str) -> None:
        self.level_id = level_id
        super().__init__(f"Engineering level with id '{level_id}' does not exist")


__all__ = [
    "LevelConflictError",
    "LevelNotFoundError",
    "MatrixError",
]
