"""Cursor engine: buffer, selection, edit batching and cancel/redo history."""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from text_cursor.runtime import telemetry
from text_cursor.runtime.config import CursorConfig

from .batch import DeleteDirection, PendingBatch
from .clipboard import Clipboard
from .edits import DeleteEdit, Edit, ReplaceEdit, WriteEdit, apply_edit, revert_edit
from .history import EditHistory
from .state import BufferState, SelectionPair
from .validation import clamp
from .words import is_break_char, scan_word_end, scan_word_start


class TextCursor:
    """Editable single-line text with a cursor, a selection and undo history.

    Keystrokes are batched: a run of word characters becomes one history
    record, closed when a break character is typed or when any navigation,
    selection or edit-kind change flushes the batch. Positions passed to
    navigation and selection methods are clamped into ``[0, size]``.
    """

    def __init__(
        self,
        text: str = "",
        *,
        clipboard: Optional[Clipboard] = None,
        history_limit: Optional[int] = None,
    ) -> None:
        self.state = BufferState(text=text, cursor=len(text))
        self.batch = PendingBatch()
        self.history_stack = EditHistory(limit=history_limit)
        self.clipboard = clipboard

    @classmethod
    def from_config(
        cls, config: CursorConfig, *, clipboard: Optional[Clipboard] = None
    ) -> "TextCursor":
        return cls(
            config.initial_text,
            clipboard=clipboard,
            history_limit=config.history_limit,
        )

    # ------------------------------------------------------------------ reads

    def __str__(self) -> str:
        text = self.state.text
        if not self.batch.deletion:
            return text
        cursor = self.state.cursor
        return text[:cursor] + text[cursor + self.batch.deletion :]

    def __repr__(self) -> str:
        return (
            f"TextCursor(text={str(self)!r}, cursor={self.cursor}, "
            f"selection={tuple(self.selection_pair)!r})"
        )

    @property
    def text(self) -> str:
        return str(self)

    @property
    def cursor(self) -> int:
        return self.state.cursor

    @property
    def size(self) -> int:
        return len(self.state.text) - self.batch.deletion

    @property
    def deletion(self) -> int:
        """Characters erased or deleted since the last flush."""

        return self.batch.deletion

    @property
    def history(self) -> Tuple[Edit, ...]:
        return self.history_stack.committed

    @property
    def history_size(self) -> int:
        return len(self.history_stack)

    @property
    def history_canceled_size(self) -> int:
        return len(self.history_stack.undone)

    @property
    def has_selection(self) -> bool:
        return self.state.selecting

    @property
    def selection_pair(self) -> SelectionPair:
        return self.state.selection

    @property
    def selection_size(self) -> int:
        return self.state.selection.width

    @property
    def selection_start(self) -> int:
        """Selection anchor, or ``-1`` when nothing is selected."""

        if not self.state.selecting:
            return -1
        return self.state.anchor

    @property
    def selected_text(self) -> str:
        if not self.state.selecting:
            return ""
        start, end = self.state.selection
        return self.state.text[start:end]

    def character_before(self) -> Optional[str]:
        cursor = self.state.cursor
        if cursor == 0:
            return None
        return self.state.text[cursor - 1]

    def character_after(self) -> Optional[str]:
        index = self.state.cursor + self.batch.deletion
        if index >= len(self.state.text):
            return None
        return self.state.text[index]

    # ---------------------------------------------------------------- editing

    def write(self, text: str) -> "TextCursor":
        """Type ``text`` one character at a time."""

        for char in text:
            self._write_char(char)
        return self

    def _write_char(self, char: str) -> None:
        state = self.state
        batch = self.batch
        self.stash_deletion()
        self.history_stack.clear_undone()

        if state.selecting:
            self.stash_input()
            start, end = state.selection
            batch.replaced = state.splice(start, end, char)
            batch.insert.append(char)
            batch.word = not is_break_char(char)
            state.cursor = start + 1
            state.clear_selection()
            return

        if is_break_char(char):
            if batch.word:
                self.stash_input()
        else:
            batch.word = True
        state.splice(state.cursor, state.cursor, char)
        state.cursor += 1
        batch.insert.append(char)

    def insert(self, text: str) -> None:
        """Insert ``text`` as a single history record, replacing any selection."""

        self.stash()
        if not text:
            return
        state = self.state
        if state.selecting:
            start, end = state.selection
            self.batch.replaced = state.splice(start, end, text)
            state.cursor = start + len(text)
            state.clear_selection()
        else:
            state.splice(state.cursor, state.cursor, text)
            state.cursor += len(text)
        self.batch.insert.extend(text)
        self.stash_input()

    def erase(self) -> bool:
        """Remove the character before the cursor (backspace)."""

        if self.state.selecting:
            self._delete_selection()
            return True
        self.stash_input()
        if self.batch.has_deletion and self.batch.direction is DeleteDirection.FORWARD:
            self.stash_deletion()
        if self.state.cursor == 0:
            return False
        self.batch.direction = DeleteDirection.BACKWARD
        self.batch.deletion += 1
        self.state.cursor -= 1
        self.history_stack.clear_undone()
        return True

    def delete(self) -> bool:
        """Remove the character after the cursor."""

        if self.state.selecting:
            self._delete_selection()
            return True
        self.stash_input()
        if self.batch.has_deletion and self.batch.direction is DeleteDirection.BACKWARD:
            self.stash_deletion()
        if self.state.cursor + self.batch.deletion >= len(self.state.text):
            return False
        self.batch.direction = DeleteDirection.FORWARD
        self.batch.deletion += 1
        self.history_stack.clear_undone()
        return True

    def erase_word(self) -> int:
        """Remove back to the previous word start; returns the count removed."""

        if self.state.selecting:
            removed = self.selection_size
            self._delete_selection()
            return removed
        self.stash()
        end = self.state.cursor
        start = scan_word_start(self.state.text, end)
        return self._delete_span(start, end)

    def delete_word(self) -> int:
        """Remove up to the next word end; returns the count removed."""

        if self.state.selecting:
            removed = self.selection_size
            self._delete_selection()
            return removed
        self.stash()
        start = self.state.cursor
        end = scan_word_end(self.state.text, start)
        return self._delete_span(start, end)

    def _delete_selection(self) -> None:
        self.stash()
        start, end = self.state.selection
        self.state.clear_selection()
        self._delete_span(start, end)

    def _delete_span(self, start: int, end: int) -> int:
        if start == end:
            return 0
        removed = self.state.splice(start, end)
        self.state.cursor = start
        self._commit(DeleteEdit(start, end, removed))
        return end - start

    # ---------------------------------------------------------------- flushing

    def stash(self) -> None:
        """Commit pending input, then pending deletion."""

        self.stash_input()
        self.stash_deletion()

    def stash_input(self) -> None:
        if not self.batch.has_input:
            return
        value, replaced = self.batch.take_input()
        end = self.state.cursor
        start = end - len(value)
        if replaced is not None:
            self._commit(ReplaceEdit(start, end, value, replaced))
        else:
            self._commit(WriteEdit(start, end, value))

    def stash_deletion(self) -> None:
        if not self.batch.has_deletion:
            return
        count = self.batch.take_deletion()
        start = self.state.cursor
        removed = self.state.splice(start, start + count)
        self._commit(DeleteEdit(start, start + count, removed))

    def _commit(self, edit: Edit) -> None:
        self.history_stack.commit(edit)
        telemetry.record_event(
            "history.commit",
            data={**_edit_data(edit), "history": len(self.history_stack)},
        )

    # -------------------------------------------------------------- navigation

    def go_to(self, position: int) -> int:
        self.stash()
        self.state.clear_selection()
        self.state.cursor = clamp(position, self.size)
        return self.state.cursor

    def move(self, offset: int) -> int:
        return self.go_to(self.state.cursor + offset)

    def move_left(self) -> int:
        self.stash()
        state = self.state
        if state.selecting:
            state.cursor = state.selection.start
            state.clear_selection()
        elif state.cursor > 0:
            state.cursor -= 1
        return state.cursor

    def move_right(self) -> int:
        self.stash()
        state = self.state
        if state.selecting:
            state.cursor = state.selection.end
            state.clear_selection()
        elif state.cursor < self.size:
            state.cursor += 1
        return state.cursor

    def go_to_start(self) -> int:
        return self.go_to(0)

    def go_to_end(self) -> int:
        return self.go_to(self.size)

    def go_to_word_start(self) -> int:
        self.stash()
        self.state.clear_selection()
        self.state.cursor = scan_word_start(self.state.text, self.state.cursor)
        return self.state.cursor

    def go_to_word_end(self) -> int:
        self.stash()
        self.state.clear_selection()
        self.state.cursor = scan_word_end(self.state.text, self.state.cursor)
        return self.state.cursor

    # --------------------------------------------------------------- selection

    def select_left(self) -> int:
        self.stash()
        if self.state.cursor > 0:
            self._extend_selection(self.state.cursor - 1)
        return self.selection_size

    def select_right(self) -> int:
        self.stash()
        if self.state.cursor < self.size:
            self._extend_selection(self.state.cursor + 1)
        return self.selection_size

    def select_to(self, position: int) -> int:
        self.stash()
        self._extend_selection(clamp(position, self.size))
        return self.selection_size

    def select_word_start(self) -> int:
        self.stash()
        self._extend_selection(scan_word_start(self.state.text, self.state.cursor))
        return self.selection_size

    def select_word_end(self) -> int:
        self.stash()
        self._extend_selection(scan_word_end(self.state.text, self.state.cursor))
        return self.selection_size

    def select_all(self) -> int:
        self.go_to_start()
        return self.select_to(self.size)

    def _extend_selection(self, position: int) -> None:
        self.state.begin_selection()
        self.state.cursor = position
        self.state.normalize_selection()

    # ----------------------------------------------------------------- history

    def cancel(self) -> bool:
        """Revert the most recent record; ``False`` when there is none."""

        self.stash()
        if not self.history_stack.can_cancel():
            return False
        edit = self.history_stack.last_committed
        with telemetry.span("history.cancel", data=_edit_data(edit)):
            revert_edit(self.state, edit)
        self.history_stack.mark_canceled()
        return True

    def redo(self) -> bool:
        """Re-apply the most recently canceled record; ``False`` when there is none."""

        # A pending batch implies an empty undone stack, so the flush below
        # cannot invalidate the record checked here.
        if not self.history_stack.can_redo():
            return False
        self.stash()
        edit = self.history_stack.last_undone
        with telemetry.span("history.redo", data=_edit_data(edit)):
            apply_edit(self.state, edit)
        self.history_stack.mark_redone()
        return True

    # --------------------------------------------------------------- clipboard

    def copy_to_clipboard(self) -> bool:
        self.stash()
        if self.clipboard is None or not self.state.selecting:
            return False
        return self.clipboard.write_text(self.selected_text)

    def cut_to_clipboard(self) -> bool:
        if not self.copy_to_clipboard():
            return False
        self.delete()
        return True

    def paste_from_clipboard(self) -> bool:
        self.stash()
        if self.clipboard is None:
            return False
        text = self.clipboard.read_text()
        if not text:
            return False
        self.insert(text)
        return True


def _edit_data(edit: Edit) -> Dict[str, object]:
    return {"kind": edit.kind.value, "start": edit.start, "end": edit.end}


__all__ = ["TextCursor"]
