"""Pytest fixtures for pagebar tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from pagebar.config import Settings


@pytest.fixture
def settings():
    """Settings independent of the environment."""
    return Settings(
        _env_file=None,
        pages_at_edges=2,
        pages_around_current=1,
        show_first_last_arrows=True,
        show_next_prev_arrows=True,
        current_label_format="[{label}]",
        row_width=None,
    )


@pytest.fixture
def callback_query():
    """Mock aiogram CallbackQuery."""
    callback = AsyncMock()
    callback.answer = AsyncMock()
    callback.from_user = MagicMock(id=42)
    return callback


@pytest.fixture
def clicks():
    """Records pages passed to a click handler."""
    return []
