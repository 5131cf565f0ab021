"""Inline keyboard rendering of pagination controls."""

from __future__ import annotations

from typing import Sequence

from aiogram.filters.callback_data import CallbackData
from aiogram.utils.keyboard import InlineKeyboardBuilder

from pagebar.config import get_settings
from pagebar.core.entries import EntryDescriptor

# Telegram rejects inline keyboard rows wider than this
MAX_ROW_WIDTH = 8


class PageCallback(CallbackData, prefix="pg"):
    """Callback data of an enabled page or arrow button."""

    scope: str
    page: int


class NoopCallback(CallbackData, prefix="pgx"):
    """Callback data of disabled and ellipsis buttons, carries no page."""

    scope: str


def button_text(descriptor: EntryDescriptor, current_label_format: str | None = None) -> str:
    """Text shown on the button for ``descriptor``."""
    if descriptor.is_current:
        fmt = current_label_format or get_settings().current_label_format
        return fmt.format(label=descriptor.label)
    return descriptor.label


def build_pagination_keyboard(
    descriptors: Sequence[EntryDescriptor],
    scope: str = "page",
    row_width: int | None = None,
    current_label_format: str | None = None,
) -> InlineKeyboardBuilder:
    """Build an inline keyboard for a pagination control.

    Args:
        descriptors: Entries as returned by ``render`` or ``PaginationContainer``
        scope: Separates several pagination keyboards handled by one bot
        row_width: Buttons per row, defaults to the configured width or one row
        current_label_format: Overrides the configured current page format

    Returns:
        InlineKeyboardBuilder, call ``as_markup()`` to send it
    """
    builder = InlineKeyboardBuilder()

    for descriptor in descriptors:
        if descriptor.is_interactive:
            callback_data = PageCallback(scope=scope, page=descriptor.value).pack()
        else:
            callback_data = NoopCallback(scope=scope).pack()
        builder.button(
            text=button_text(descriptor, current_label_format),
            callback_data=callback_data,
        )

    if descriptors:
        width = row_width or get_settings().row_width or len(descriptors)
        builder.adjust(min(width, MAX_ROW_WIDTH))

    return builder
