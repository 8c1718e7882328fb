"""Pending (not yet committed) insert and deletion batches."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class DeleteDirection(str, Enum):
    BACKWARD = "backward"
    FORWARD = "forward"


@dataclass(slots=True)
class PendingBatch:
    """Keystrokes accumulated since the last flush.

    The pending deletion always covers ``[cursor, cursor + deletion)`` of the
    raw text: backward erases walk the cursor into the span, forward deletes
    grow it past the cursor.
    """

    insert: List[str] = field(default_factory=list)
    word: bool = False
    replaced: Optional[str] = None
    deletion: int = 0
    direction: DeleteDirection = DeleteDirection.BACKWARD

    @property
    def has_input(self) -> bool:
        return bool(self.insert)

    @property
    def has_deletion(self) -> bool:
        return self.deletion > 0

    def take_input(self) -> tuple[str, Optional[str]]:
        value = "".join(self.insert)
        replaced = self.replaced
        self.insert.clear()
        self.word = False
        self.replaced = None
        return value, replaced

    def take_deletion(self) -> int:
        count = self.deletion
        self.deletion = 0
        return count


__all__ = ["DeleteDirection", "PendingBatch"]
