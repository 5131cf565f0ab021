"""Pagination sequence generation.

Turns ``(cur_page, num_pages, num_pages_at_edges, num_pages_around_current)``
into the ordered list of page numbers and ``…`` gap markers shown in a
pagination bar, e.g. ``generate(5, 10, 2, 1)`` gives
``[1, 2, "…", 4, 5, 6, "…", 9, 10]``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from pagebar.errors import InvalidRangeError, NegativeContextError
from pagebar.logging import get_logger

logger = get_logger(__name__)

ELLIPSIS = "…"

Token = Union[int, str]


@dataclass(frozen=True)
class SequenceConfig:
    """Inputs of one sequence computation."""

    cur_page: int
    num_pages: int
    num_pages_at_edges: int = 2
    num_pages_around_current: int = 2

    def validate(self) -> None:
        """Raise if the parameters cannot describe a pagination bar.

        Out-of-range current pages are rejected rather than clamped, so a bar
        never highlights a page the caller did not ask for.
        """
        for name in ("cur_page", "num_pages", "num_pages_at_edges", "num_pages_around_current"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")

        if self.num_pages < 0:
            _reject(InvalidRangeError, "num_pages", self.num_pages, "num_pages must be >= 0")

        for name in ("num_pages_at_edges", "num_pages_around_current"):
            value = getattr(self, name)
            if value < 0:
                _reject(NegativeContextError, name, value, f"{name} must be >= 0")

        if self.num_pages >= 1 and not 1 <= self.cur_page <= self.num_pages:
            _reject(
                InvalidRangeError,
                "cur_page",
                self.cur_page,
                f"cur_page must be between 1 and {self.num_pages}",
            )


def _reject(error_cls: type, field: str, value: int, message: str) -> None:
    logger.debug("Rejected pagination parameters", field=field, value=value)
    raise error_cls(f"{message}, got {value}", field=field, value=value)


def _clipped(start: int, stop: int, num_pages: int) -> range:
    """Inclusive ``start..stop`` clipped to ``[1, num_pages]``."""
    return range(max(start, 1), min(stop, num_pages) + 1)


def must_show_pages(config: SequenceConfig) -> list[int]:
    """Sorted page numbers that are always visible for ``config``."""
    num_pages = config.num_pages
    edges = config.num_pages_at_edges
    around = config.num_pages_around_current

    pages: set[int] = set()
    pages.update(_clipped(1, edges, num_pages))
    pages.update(_clipped(num_pages - edges + 1, num_pages, num_pages))
    pages.update(_clipped(config.cur_page - around, config.cur_page + around, num_pages))
    return sorted(pages)


def generate_for(config: SequenceConfig) -> list[Token]:
    """Generate the token sequence for a validated ``config``."""
    config.validate()
    if config.num_pages == 0:
        return []

    sequence: list[Token] = []
    previous: int | None = None
    for page in must_show_pages(config):
        if previous is not None and page - previous > 1:
            sequence.append(ELLIPSIS)
        sequence.append(page)
        previous = page

    logger.debug(
        "Sequence generated",
        cur_page=config.cur_page,
        num_pages=config.num_pages,
        tokens=len(sequence),
    )
    return sequence


def generate(
    cur_page: int,
    num_pages: int,
    num_pages_at_edges: int = 2,
    num_pages_around_current: int = 2,
) -> list[Token]:
    """Generate a pagination sequence.

    Args:
        cur_page: Current page (1-indexed)
        num_pages: Total number of pages, 0 gives an empty sequence
        num_pages_at_edges: Pages always shown at the start and the end
        num_pages_around_current: Pages shown on each side of ``cur_page``

    Returns:
        Strictly increasing page numbers, with a single ``ELLIPSIS`` wherever
        consecutive pages are more than one apart

    Raises:
        InvalidRangeError: ``num_pages`` is negative or ``cur_page`` is out of range
        NegativeContextError: an edge or around-current count is negative
    """
    return generate_for(
        SequenceConfig(
            cur_page=cur_page,
            num_pages=num_pages,
            num_pages_at_edges=num_pages_at_edges,
            num_pages_around_current=num_pages_around_current,
        )
    )


def is_ellipsis(token: Token) -> bool:
    """Whether ``token`` is the gap marker."""
    return token == ELLIPSIS
