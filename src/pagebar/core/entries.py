"""Single pagination entries: pages, arrows and ellipses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from pagebar.core.sequence import ELLIPSIS, Token, is_ellipsis

EntryClickHandler = Callable[[int], Any]


class EntryRole(str, Enum):
    """Position of an entry inside the pagination control."""
    FIRST = "first"
    PREV = "prev"
    NORMAL = "normal"
    NEXT = "next"
    LAST = "last"


class ActivationEffect(str, Enum):
    """Side effects the render layer performs when an entry is activated."""
    SUPPRESS_DEFAULT_NAVIGATION = "suppress_default_navigation"
    CLEAR_FOCUS = "clear_focus"


INTERACTIVE_EFFECTS: tuple[ActivationEffect, ...] = (
    ActivationEffect.SUPPRESS_DEFAULT_NAVIGATION,
    ActivationEffect.CLEAR_FOCUS,
)


def default_label_and_title(value: Token) -> tuple[str, str]:
    """Label and title used when an entry does not provide its own."""
    if is_ellipsis(value):
        return ELLIPSIS, ""
    return str(value), f"Go to page {value}"


@dataclass(frozen=True)
class EntryDescriptor:
    """Rendering-ready description of one pagination element."""

    value: Token
    label: str
    title: str
    role: EntryRole = EntryRole.NORMAL
    key: str = ""
    is_current: bool = False
    is_disabled: bool = False

    @property
    def is_ellipsis(self) -> bool:
        return is_ellipsis(self.value)

    @property
    def is_interactive(self) -> bool:
        return not (self.is_ellipsis or self.is_disabled)


@dataclass(frozen=True)
class Activation:
    """Outcome of activating an entry.

    ``result`` is whatever the click handler returned, so async callers can
    await a coroutine handler after the effects are known.
    """

    effects: tuple[ActivationEffect, ...] = ()
    result: Any = None

    @property
    def handled(self) -> bool:
        return bool(self.effects)


class PaginationEntry:
    """One entry of a pagination control."""

    def __init__(
        self,
        value: Token,
        *,
        on_entry_click: EntryClickHandler | None = None,
        label: str | None = None,
        title: str | None = None,
        is_current: bool = False,
        is_disabled: bool = False,
        role: EntryRole = EntryRole.NORMAL,
        key: str | None = None,
    ) -> None:
        default_label, default_title = default_label_and_title(value)

        self.value = value
        self.on_entry_click = on_entry_click
        self.descriptor = EntryDescriptor(
            value=value,
            label=label if label is not None else default_label,
            title=title if title is not None else default_title,
            role=role,
            key=key if key is not None else f"page-{value}",
            is_current=is_current,
            is_disabled=is_disabled,
        )

    @property
    def is_interactive(self) -> bool:
        return self.descriptor.is_interactive

    @property
    def effects(self) -> tuple[ActivationEffect, ...]:
        """Effects the render layer performs when this entry is activated."""
        return INTERACTIVE_EFFECTS if self.is_interactive else ()

    def activate(self) -> Activation:
        """Activate the entry, e.g. after a click.

        Ellipses and disabled entries do nothing. Interactive entries call
        ``on_entry_click`` with their page number exactly once and ask the
        render layer to suppress navigation and clear focus.
        """
        if not self.is_interactive:
            return Activation()

        result = None
        if self.on_entry_click is not None:
            result = self.on_entry_click(self.value)
        return Activation(effects=self.effects, result=result)

    def __repr__(self) -> str:
        return f"<PaginationEntry {self.descriptor.key} role={self.descriptor.role.value}>"
