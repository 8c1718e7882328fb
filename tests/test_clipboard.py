from __future__ import annotations

from typing import Optional

import pyperclip
import pytest

from text_cursor import TextCursor
from text_cursor.buffer import MemoryClipboard, SystemClipboard


class RefusingClipboard:
    def __init__(self) -> None:
        self.writes = 0

    def read_text(self) -> Optional[str]:
        return None

    def write_text(self, text: str) -> bool:
        self.writes += 1
        return False


def test_copy_requires_selection() -> None:
    clipboard = MemoryClipboard()
    cursor = TextCursor("hello", clipboard=clipboard)

    assert cursor.copy_to_clipboard() is False
    assert clipboard.read_text() is None


def test_copy_stores_selected_text() -> None:
    clipboard = MemoryClipboard()
    cursor = TextCursor("hello world", clipboard=clipboard)
    cursor.select_word_start()

    assert cursor.copy_to_clipboard() is True

    assert clipboard.read_text() == "world"
    assert str(cursor) == "hello world"
    assert cursor.has_selection


def test_cut_removes_selection_after_copy() -> None:
    clipboard = MemoryClipboard()
    cursor = TextCursor("hello world", clipboard=clipboard)
    cursor.select_word_start()

    assert cursor.cut_to_clipboard() is True

    assert clipboard.read_text() == "world"
    assert str(cursor) == "hello "
    assert cursor.history_size == 1


def test_cut_keeps_text_when_copy_fails() -> None:
    clipboard = RefusingClipboard()
    cursor = TextCursor("hello", clipboard=clipboard)
    cursor.select_all()

    assert cursor.cut_to_clipboard() is False

    assert clipboard.writes == 1
    assert str(cursor) == "hello"
    assert cursor.has_selection


def test_paste_inserts_one_record() -> None:
    clipboard = MemoryClipboard("big ")
    cursor = TextCursor("a world", clipboard=clipboard)
    cursor.go_to(2)

    assert cursor.paste_from_clipboard() is True

    assert str(cursor) == "a big world"
    assert cursor.cursor == 6
    assert cursor.history_size == 1
    cursor.cancel()
    assert str(cursor) == "a world"


def test_paste_replaces_selection() -> None:
    cursor = TextCursor("hello", clipboard=MemoryClipboard("J"))
    cursor.go_to_start()
    cursor.select_right()

    assert cursor.paste_from_clipboard() is True

    assert str(cursor) == "Jello"


def test_paste_fails_without_content() -> None:
    cursor = TextCursor("hello", clipboard=RefusingClipboard())

    assert cursor.paste_from_clipboard() is False
    assert cursor.history_size == 0


def test_clipboard_operations_without_collaborator() -> None:
    cursor = TextCursor("hello")
    cursor.select_all()

    assert cursor.copy_to_clipboard() is False
    assert cursor.cut_to_clipboard() is False
    assert cursor.paste_from_clipboard() is False
    assert str(cursor) == "hello"


def test_system_clipboard_round_trip(monkeypatch: pytest.MonkeyPatch) -> None:
    store: dict[str, str] = {}
    monkeypatch.setattr(pyperclip, "copy", lambda text: store.update(text=text))
    monkeypatch.setattr(pyperclip, "paste", lambda: store.get("text", ""))
    clipboard = SystemClipboard()

    assert clipboard.write_text("hi") is True
    assert clipboard.read_text() == "hi"


def test_system_clipboard_reports_unavailable_host(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def unavailable(*_args: object) -> None:
        raise pyperclip.PyperclipException("no clipboard mechanism")

    monkeypatch.setattr(pyperclip, "copy", unavailable)
    monkeypatch.setattr(pyperclip, "paste", unavailable)
    cursor = TextCursor("hello", clipboard=SystemClipboard())
    cursor.select_all()

    assert cursor.cut_to_clipboard() is False
    assert cursor.paste_from_clipboard() is False
    assert str(cursor) == "hello"
