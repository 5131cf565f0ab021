"""Errors raised when pagination parameters are invalid."""


class PaginationError(ValueError):
    """Base class for invalid pagination parameters."""

    def __init__(self, message: str, *, field: str, value: int) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class InvalidRangeError(PaginationError):
    """Negative page count, or a current page outside ``[1, num_pages]``."""


class NegativeContextError(PaginationError):
    """Negative edge or around-current page count."""
