"""Pagination sequences and inline keyboard pagination controls."""

from pagebar.core import (
    ELLIPSIS,
    ActivationEffect,
    EntryDescriptor,
    EntryRole,
    PaginationContainer,
    PaginationEntry,
    generate,
    paginate,
    render,
)
from pagebar.errors import InvalidRangeError, NegativeContextError, PaginationError

__version__ = "0.1.0"

__all__ = [
    "ELLIPSIS",
    "ActivationEffect",
    "EntryDescriptor",
    "EntryRole",
    "PaginationContainer",
    "PaginationEntry",
    "generate",
    "paginate",
    "render",
    "PaginationError",
    "InvalidRangeError",
    "NegativeContextError",
]
