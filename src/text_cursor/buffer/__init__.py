"""Cursor engine, edit records, history and clipboard collaborators."""

from .batch import DeleteDirection, PendingBatch
from .clipboard import Clipboard, MemoryClipboard, SystemClipboard
from .cursor import TextCursor
from .edits import DeleteEdit, Edit, EditKind, ReplaceEdit, WriteEdit
from .history import EditHistory
from .state import BufferState, SelectionPair
from .sync import SynchronizedTextCursor
from .words import is_break_char

__all__ = [
    "TextCursor",
    "SynchronizedTextCursor",
    "BufferState",
    "SelectionPair",
    "PendingBatch",
    "DeleteDirection",
    "EditHistory",
    "Edit",
    "EditKind",
    "WriteEdit",
    "DeleteEdit",
    "ReplaceEdit",
    "Clipboard",
    "MemoryClipboard",
    "SystemClipboard",
    "is_break_char",
]
