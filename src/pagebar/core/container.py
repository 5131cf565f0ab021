"""Pagination control composition: arrows around the generated sequence."""

from __future__ import annotations

from typing import Iterable

from pagebar.config import Settings, get_settings
from pagebar.core.entries import (
    Activation,
    EntryClickHandler,
    EntryDescriptor,
    EntryRole,
    PaginationEntry,
)
from pagebar.core.sequence import Token, generate, is_ellipsis
from pagebar.logging import get_logger

logger = get_logger(__name__)

# role -> (label, title)
ARROWS: dict[EntryRole, tuple[str, str]] = {
    EntryRole.FIRST: ("«", "Go to First Page"),
    EntryRole.PREV: ("‹", "Go to Previous Page"),
    EntryRole.NEXT: ("›", "Go to Next Page"),
    EntryRole.LAST: ("»", "Go to Last Page"),
}


def entry_key(token: Token, index: int) -> str:
    """Stable identity of a sequence entry.

    Pages are keyed by number; ellipses by their position, since a bar can
    hold two of them.
    """
    if is_ellipsis(token):
        return f"{token}-{index}"
    return f"page-{token}"


def _arrow(
    role: EntryRole, value: int, is_disabled: bool, on_entry_click: EntryClickHandler | None
) -> PaginationEntry:
    label, title = ARROWS[role]
    return PaginationEntry(
        value,
        on_entry_click=on_entry_click,
        label=label,
        title=title,
        is_disabled=is_disabled,
        role=role,
        key=role.value,
    )


class PaginationContainer:
    """Full pagination control: first/prev arrows, the sequence, next/last arrows."""

    def __init__(
        self,
        cur_page: int,
        num_pages: int,
        sequence: Iterable[Token],
        on_entry_click: EntryClickHandler | None = None,
        show_first_last_arrows: bool = True,
        show_next_prev_arrows: bool = True,
    ) -> None:
        self.cur_page = cur_page
        self.num_pages = num_pages

        # an empty range disables every arrow
        at_start = cur_page <= 1
        at_end = cur_page >= num_pages

        entries: list[PaginationEntry] = []
        if show_first_last_arrows:
            entries.append(_arrow(EntryRole.FIRST, 1, at_start, on_entry_click))
        if show_next_prev_arrows:
            entries.append(_arrow(EntryRole.PREV, cur_page - 1, at_start, on_entry_click))

        for index, token in enumerate(sequence):
            entries.append(
                PaginationEntry(
                    token,
                    on_entry_click=on_entry_click,
                    is_current=not is_ellipsis(token) and token == cur_page,
                    key=entry_key(token, index),
                )
            )

        if show_next_prev_arrows:
            entries.append(_arrow(EntryRole.NEXT, cur_page + 1, at_end, on_entry_click))
        if show_first_last_arrows:
            entries.append(_arrow(EntryRole.LAST, num_pages, at_end, on_entry_click))

        self.entries = entries
        self._by_key = {entry.descriptor.key: entry for entry in entries}

    @property
    def descriptors(self) -> list[EntryDescriptor]:
        return [entry.descriptor for entry in self.entries]

    def entry(self, key: str) -> PaginationEntry:
        """Look up an entry by key; raises ``KeyError`` for unknown keys."""
        return self._by_key[key]

    def activate(self, key: str) -> Activation:
        """Activate the entry with the given key."""
        return self.entry(key).activate()


def render(
    cur_page: int,
    num_pages: int,
    sequence: Iterable[Token],
    on_entry_click: EntryClickHandler | None = None,
    show_first_last_arrows: bool = True,
    show_next_prev_arrows: bool = True,
) -> list[EntryDescriptor]:
    """Describe the pagination control for an already generated sequence."""
    return PaginationContainer(
        cur_page,
        num_pages,
        sequence,
        on_entry_click=on_entry_click,
        show_first_last_arrows=show_first_last_arrows,
        show_next_prev_arrows=show_next_prev_arrows,
    ).descriptors


def paginate(
    cur_page: int,
    num_pages: int,
    on_entry_click: EntryClickHandler | None = None,
    settings: Settings | None = None,
) -> PaginationContainer:
    """Generate the sequence and compose the control using configured defaults.

    Args:
        cur_page: Current page (1-indexed)
        num_pages: Total number of pages
        on_entry_click: Called with the target page when an entry is activated
        settings: Overrides the cached application settings

    Returns:
        The composed PaginationContainer
    """
    settings = settings or get_settings()
    sequence = generate(
        cur_page,
        num_pages,
        settings.pages_at_edges,
        settings.pages_around_current,
    )
    logger.debug("Paginating", cur_page=cur_page, num_pages=num_pages, sequence=sequence)
    return PaginationContainer(
        cur_page,
        num_pages,
        sequence,
        on_entry_click=on_entry_click,
        show_first_last_arrows=settings.show_first_last_arrows,
        show_next_prev_arrows=settings.show_next_prev_arrows,
    )
