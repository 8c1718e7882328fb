"""Cursor, selection, and text state owned by a single cursor engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


class SelectionPair(NamedTuple):
    """Ordered ``(start, end)`` bounds of a selection."""

    start: int
    end: int

    @classmethod
    def of(cls, first: int, second: int) -> "SelectionPair":
        if first > second:
            first, second = second, first
        return cls(first, second)

    @property
    def width(self) -> int:
        return self.end - self.start


@dataclass(slots=True)
class BufferState:
    """Mutable text + cursor + selection anchor.

    ``text`` is the raw content; a pending deletion batch may still hold a span
    of it that readers must skip (see ``PendingBatch``).
    """

    text: str = ""
    cursor: int = 0
    selecting: bool = False
    anchor: int = 0

    def splice(self, start: int, end: int, value: str = "") -> str:
        """Replace ``text[start:end]`` with ``value`` and return what was removed."""

        removed = self.text[start:end]
        self.text = self.text[:start] + value + self.text[end:]
        return removed

    def select(self, anchor: int, cursor: int) -> None:
        self.anchor = anchor
        self.cursor = cursor
        self.selecting = anchor != cursor

    def begin_selection(self) -> None:
        if not self.selecting:
            self.selecting = True
            self.anchor = self.cursor

    def normalize_selection(self) -> None:
        if self.selecting and self.cursor == self.anchor:
            self.selecting = False

    def clear_selection(self) -> None:
        self.selecting = False

    @property
    def selection(self) -> SelectionPair:
        if not self.selecting:
            return SelectionPair(self.cursor, self.cursor)
        return SelectionPair.of(self.cursor, self.anchor)
