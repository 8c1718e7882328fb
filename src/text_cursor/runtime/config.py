"""Environment-driven configuration for cursor instances."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from text_cursor.errors import ConfigurationError

from .telemetry import ENV_PREFIX

HISTORY_LIMIT_ENV = f"{ENV_PREFIX}HISTORY_LIMIT"


@dataclass(frozen=True, slots=True)
class CursorConfig:
    """Construction settings for a :class:`~text_cursor.buffer.TextCursor`.

    ``history_limit`` caps the committed history; ``None`` keeps it unbounded.
    """

    history_limit: Optional[int] = None
    initial_text: str = ""

    def __post_init__(self) -> None:
        if self.history_limit is not None and self.history_limit < 1:
            raise ConfigurationError("history_limit", str(self.history_limit))

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None, *, initial_text: str = ""
    ) -> "CursorConfig":
        env = os.environ if environ is None else environ
        raw = env.get(HISTORY_LIMIT_ENV, "").strip()
        if not raw:
            return cls(history_limit=None, initial_text=initial_text)
        try:
            limit = int(raw)
        except ValueError as exc:
            raise ConfigurationError(HISTORY_LIMIT_ENV, raw) from exc
        if limit < 1:
            raise ConfigurationError(HISTORY_LIMIT_ENV, raw)
        return cls(history_limit=limit, initial_text=initial_text)


__all__ = ["CursorConfig", "HISTORY_LIMIT_ENV"]
