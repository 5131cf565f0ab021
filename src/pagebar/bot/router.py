"""Callback query handling for pagination keyboards."""

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, Iterable

from aiogram import F, Router
from aiogram.types import CallbackQuery

from pagebar.bot.keyboard import NoopCallback, PageCallback
from pagebar.core.entries import ActivationEffect, PaginationEntry
from pagebar.logging import get_logger

logger = get_logger(__name__)

# Receives the callback query and the selected page, may be a coroutine function
PageSelectedHandler = Callable[[CallbackQuery, int], Any]


async def apply_activation_effects(
    callback: CallbackQuery, effects: Iterable[ActivationEffect]
) -> bool:
    """Execute activation effects against a callback query.

    Answering releases the pressed button on the client (CLEAR_FOCUS). The
    answer never carries a url, so the client stays on the message
    (SUPPRESS_DEFAULT_NAVIGATION).

    Returns:
        Whether the query was answered
    """
    effects = set(effects)
    if ActivationEffect.CLEAR_FOCUS in effects or ActivationEffect.SUPPRESS_DEFAULT_NAVIGATION in effects:
        await callback.answer()
        return True
    return False


async def handle_page_callback(
    callback: CallbackQuery,
    callback_data: PageCallback,
    on_entry_click: PageSelectedHandler,
) -> None:
    """Activate the pressed page entry and run the caller's handler once.

    The query is answered before the handler runs, so a failing handler
    never leaves the button pressed.
    """
    entry = PaginationEntry(
        callback_data.page,
        on_entry_click=functools.partial(on_entry_click, callback),
    )

    logger.debug(
        "Page selected",
        scope=callback_data.scope,
        page=callback_data.page,
        user_id=callback.from_user.id if callback.from_user else None,
    )

    await apply_activation_effects(callback, entry.effects)

    try:
        activation = entry.activate()
        if inspect.isawaitable(activation.result):
            await activation.result
    except Exception as e:
        logger.error(
            "Page handler failed",
            scope=callback_data.scope,
            page=callback_data.page,
            error=str(e),
        )
        raise


async def handle_noop_callback(callback: CallbackQuery) -> None:
    """Disabled arrows and ellipses only release the pressed button."""
    await callback.answer()


def create_pagination_router(on_entry_click: PageSelectedHandler, scope: str = "page") -> Router:
    """Create a router handling the buttons of one pagination keyboard.

    Args:
        on_entry_click: Called as ``on_entry_click(callback, page)`` when an
            enabled entry is pressed. The query is already answered, so the
            handler must not answer it again.
        scope: Scope passed to ``build_pagination_keyboard``

    Returns:
        Router to include in the dispatcher
    """
    router = Router(name=f"pagination:{scope}")

    @router.callback_query(PageCallback.filter(F.scope == scope))
    async def on_page(callback: CallbackQuery, callback_data: PageCallback) -> None:
        await handle_page_callback(callback, callback_data, on_entry_click)

    @router.callback_query(NoopCallback.filter(F.scope == scope))
    async def on_noop(callback: CallbackQuery) -> None:
        await handle_noop_callback(callback)

    return router
