"""UI-agnostic text cursor with batched undo/redo history."""

from .buffer import SynchronizedTextCursor, TextCursor
from .errors import ConfigurationError, HistoryReplayError, TextCursorError
from .runtime import CursorConfig

__all__ = [
    "buffer",
    "runtime",
    "TextCursor",
    "SynchronizedTextCursor",
    "CursorConfig",
    "TextCursorError",
    "HistoryReplayError",
    "ConfigurationError",
]

__version__ = "0.1.0"
