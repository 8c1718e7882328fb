"""Exception hierarchy shared by the cursor engine."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from text_cursor.buffer.edits import Edit


class TextCursorError(RuntimeError):
    """Base class for errors raised by text_cursor."""


class HistoryReplayError(TextCursorError):
    """Raised when a history record no longer fits the buffer it is replayed on."""

    def __init__(self, message: str, *, edit: Optional["Edit"] = None) -> None:
        super().__init__(message)
        self.edit = edit


class ConfigurationError(TextCursorError, ValueError):
    """Raised for malformed ``TEXT_CURSOR_*`` settings."""

    def __init__(self, setting: str, value: str) -> None:
        super().__init__(f"Invalid value for {setting}: {value!r}")
        self.setting = setting
        self.value = value


__all__ = ["TextCursorError", "HistoryReplayError", "ConfigurationError"]
