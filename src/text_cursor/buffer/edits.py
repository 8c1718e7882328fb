"""Committed edit records and their forward/inverse application."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from .state import BufferState
from .validation import ensure_span


class EditKind(str, Enum):
    WRITE = "write"
    DELETE = "delete"
    REPLACE = "replace"


@dataclass(frozen=True, slots=True)
class WriteEdit:
    """``value`` was typed into ``[start, end)``."""

    kind: ClassVar[EditKind] = EditKind.WRITE

    start: int
    end: int
    value: str


@dataclass(frozen=True, slots=True)
class DeleteEdit:
    """``value`` was removed from ``[start, end)``."""

    kind: ClassVar[EditKind] = EditKind.DELETE

    start: int
    end: int
    value: str


@dataclass(frozen=True, slots=True)
class ReplaceEdit:
    """``previous`` was overwritten by ``value``, which now spans ``[start, end)``."""

    kind: ClassVar[EditKind] = EditKind.REPLACE

    start: int
    end: int
    value: str
    previous: str


Edit = Union[WriteEdit, DeleteEdit, ReplaceEdit]


def revert_edit(state: BufferState, edit: Edit) -> None:
    """Undo ``edit`` against ``state``; a reverted replace re-selects ``previous``."""

    if isinstance(edit, WriteEdit):
        ensure_span(state.text, edit.start, edit.end, edit)
        state.splice(edit.start, edit.end)
        state.cursor = edit.start
        state.clear_selection()
    elif isinstance(edit, DeleteEdit):
        ensure_span(state.text, edit.start, edit.start, edit)
        state.splice(edit.start, edit.start, edit.value)
        state.cursor = edit.end
        state.clear_selection()
    else:
        span_end = edit.start + len(edit.value)
        ensure_span(state.text, edit.start, span_end, edit)
        state.splice(edit.start, span_end, edit.previous)
        state.select(edit.start, edit.start + len(edit.previous))


def apply_edit(state: BufferState, edit: Edit) -> None:
    """Re-apply ``edit`` against ``state``; written text ends up selected."""

    if isinstance(edit, WriteEdit):
        ensure_span(state.text, edit.start, edit.start, edit)
        state.splice(edit.start, edit.start, edit.value)
        state.select(edit.start, edit.end)
    elif isinstance(edit, DeleteEdit):
        ensure_span(state.text, edit.start, edit.end, edit)
        state.splice(edit.start, edit.end)
        state.cursor = edit.start
        state.clear_selection()
    else:
        span_end = edit.start + len(edit.previous)
        ensure_span(state.text, edit.start, span_end, edit)
        state.splice(edit.start, span_end, edit.value)
        state.select(edit.start, edit.start + len(edit.value))


__all__ = [
    "EditKind",
    "WriteEdit",
    "DeleteEdit",
    "ReplaceEdit",
    "Edit",
    "apply_edit",
    "revert_edit",
]
