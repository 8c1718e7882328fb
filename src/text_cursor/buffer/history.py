"""Committed/undone edit stacks backing cancel and redo."""

from __future__ import annotations

from collections import deque
from typing import Deque, Optional, Tuple

from .edits import Edit


class EditHistory:
    """Two stacks of edit records, most recent last.

    ``limit`` bounds the committed stack; the oldest record is dropped once it
    is exceeded. The undone stack is never bounded because it can only hold
    records that were committed first.
    """

    def __init__(self, limit: Optional[int] = None) -> None:
        self._committed: Deque[Edit] = deque(maxlen=limit)
        self._undone: Deque[Edit] = deque()

    @property
    def limit(self) -> Optional[int]:
        return self._committed.maxlen

    def commit(self, edit: Edit) -> None:
        self._committed.append(edit)
        self._undone.clear()

    def can_cancel(self) -> bool:
        return bool(self._committed)

    def can_redo(self) -> bool:
        return bool(self._undone)

    @property
    def last_committed(self) -> Edit:
        return self._committed[-1]

    @property
    def last_undone(self) -> Edit:
        return self._undone[-1]

    # Callers replay the record first and only then move it, so a failed
    # replay leaves both stacks matching the buffer.

    def mark_canceled(self) -> None:
        self._undone.append(self._committed.pop())

    def mark_redone(self) -> None:
        self._committed.append(self._undone.pop())

    def clear_undone(self) -> None:
        self._undone.clear()

    @property
    def committed(self) -> Tuple[Edit, ...]:
        return tuple(self._committed)

    @property
    def undone(self) -> Tuple[Edit, ...]:
        return tuple(self._undone)

    def __len__(self) -> int:
        return len(self._committed)


__all__ = ["EditHistory"]
