from __future__ import annotations

import pytest

from text_cursor import ConfigurationError, CursorConfig, TextCursor
from text_cursor.runtime.config import HISTORY_LIMIT_ENV


def test_defaults_are_unbounded() -> None:
    config = CursorConfig.from_env({})

    assert config.history_limit is None
    assert config.initial_text == ""


def test_history_limit_from_env() -> None:
    config = CursorConfig.from_env({HISTORY_LIMIT_ENV: " 3 "}, initial_text="seed")

    cursor = TextCursor.from_config(config)

    assert cursor.history_stack.limit == 3
    assert str(cursor) == "seed"
    assert cursor.cursor == 4


@pytest.mark.parametrize("raw", ["zero", "0", "-2", "1.5"])
def test_invalid_history_limit(raw: str) -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        CursorConfig.from_env({HISTORY_LIMIT_ENV: raw})

    assert excinfo.value.setting == HISTORY_LIMIT_ENV
    assert isinstance(excinfo.value, ValueError)


def test_direct_construction_validates_limit() -> None:
    with pytest.raises(ConfigurationError):
        CursorConfig(history_limit=0)
