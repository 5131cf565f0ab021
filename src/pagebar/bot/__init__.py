"""aiogram rendering of pagination controls."""

from pagebar.bot.keyboard import NoopCallback, PageCallback, build_pagination_keyboard
from pagebar.bot.router import apply_activation_effects, create_pagination_router

__all__ = [
    "PageCallback",
    "NoopCallback",
    "build_pagination_keyboard",
    "apply_activation_effects",
    "create_pagination_router",
]
