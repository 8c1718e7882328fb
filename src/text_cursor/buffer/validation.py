"""Validation helpers guarding history replay."""

from __future__ import annotations

from typing import TYPE_CHECKING

from text_cursor.errors import HistoryReplayError

if TYPE_CHECKING:
    from .edits import Edit


def ensure_span(text: str, start: int, end: int, edit: "Edit") -> None:
    if start < 0 or end < start or end > len(text):
        raise HistoryReplayError(
            f"{edit.kind.value} record [{start}, {end}) does not fit a buffer of "
            f"{len(text)} characters",
            edit=edit,
        )


def clamp(position: int, size: int) -> int:
    return min(max(position, 0), size)


__all__ = ["ensure_span", "clamp"]
