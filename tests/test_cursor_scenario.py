from __future__ import annotations

from text_cursor import TextCursor
from text_cursor.buffer import SelectionPair


def make_typed_cursor() -> TextCursor:
    """Cursor holding ``"a  a "`` with three committed records."""

    cursor = TextCursor()
    cursor.write("a")
    cursor.go_to_end()
    cursor.write(" ").write(" ").write("a").write(" ")
    cursor.stash()
    return cursor


def test_empty_cursor_getters() -> None:
    cursor = TextCursor()

    assert cursor.cursor == 0
    assert cursor.deletion == 0
    assert cursor.history_size == 0
    assert cursor.history_canceled_size == 0
    assert cursor.selection_size == 0
    assert cursor.size == 0
    assert cursor.selection_start == -1
    assert cursor.selected_text == ""
    assert cursor.selection_pair == SelectionPair(0, 0)
    assert cursor.character_before() is None
    assert cursor.character_after() is None


def test_erasers_on_empty_cursor() -> None:
    cursor = TextCursor()

    assert cursor.erase() is False
    assert cursor.erase_word() == 0
    assert cursor.delete() is False
    assert cursor.delete_word() == 0
    assert cursor.history_size == 0


def test_write_single_character() -> None:
    cursor = TextCursor()

    cursor.write("a")

    assert cursor.cursor == 1
    assert cursor.size == 1
    assert cursor.selection_pair == SelectionPair(1, 1)
    assert str(cursor) == "a"


def test_moves_on_single_character() -> None:
    cursor = TextCursor()
    cursor.write("a")

    assert cursor.move_right() == 1
    assert cursor.move_left() == 0
    assert cursor.move_left() == 0
    assert cursor.move_right() == 1
    assert cursor.go_to_word_end() == 1
    assert cursor.go_to_word_start() == 0
    assert cursor.go_to_start() == 0
    assert cursor.go_to_end() == 1
    assert cursor.history_size == 1


def test_history_split_and_replay() -> None:
    cursor = TextCursor()
    cursor.write("a")
    cursor.go_to_end()
    assert cursor.history_size == 1

    cursor.write(" ").write(" ").write("a")
    assert cursor.history_size == 1
    cursor.write(" ")
    assert cursor.history_size == 2
    assert cursor.history_canceled_size == 0
    cursor.stash()
    assert cursor.history_size == 3
    assert [edit.value for edit in cursor.history] == ["a", "  a", " "]
    assert str(cursor) == "a  a "

    cursor.cancel()
    assert (cursor.history_size, cursor.history_canceled_size) == (2, 1)
    assert str(cursor) == "a  a"
    cursor.cancel()
    assert (cursor.history_size, cursor.history_canceled_size) == (1, 2)
    assert str(cursor) == "a"

    assert cursor.redo() is True
    assert (cursor.history_size, cursor.history_canceled_size) == (2, 1)
    assert str(cursor) == "a  a"
    assert cursor.selected_text == "  a"

    cursor.move_right()
    cursor.write(" ")
    assert cursor.history_size == 2
    assert cursor.history_canceled_size == 0
    assert str(cursor) == "a  a "


def test_select_around_typed_text() -> None:
    cursor = make_typed_cursor()

    cursor.select_left()
    assert cursor.selection_size == 1
    assert cursor.cursor == 4
    assert cursor.has_selection

    cursor.select_right()
    assert cursor.selection_size == 0
    assert cursor.cursor == 5
    assert not cursor.has_selection

    cursor.select_word_start()
    assert cursor.selection_size == 2
    assert cursor.selected_text == "a "
    assert cursor.cursor == 3
    assert cursor.selection_pair == SelectionPair(3, 5)

    cursor.select_to(0)
    assert cursor.cursor == 0
    assert cursor.size == 5
    assert cursor.selected_text == "a  a "
    assert cursor.selection_pair == SelectionPair(0, 5)

    cursor.move_right()
    assert cursor.cursor == 5
    assert cursor.selected_text == ""


def test_replace_whole_buffer_and_retype() -> None:
    cursor = make_typed_cursor()
    cursor.go_to_start()
    cursor.select_to(cursor.size)
    assert cursor.has_selection
    assert cursor.selection_size == 5

    cursor.write(" ")
    assert cursor.cursor == 1
    assert cursor.size == 1
    assert str(cursor) == " "
    assert cursor.history_size == 3

    cursor.cancel()
    assert cursor.history_canceled_size == 1
    assert cursor.size == 5
    assert cursor.selection_size == 5
    assert cursor.cursor == 5
    assert cursor.selected_text == "a  a "

    cursor.write("a  a ")
    assert cursor.history_size == 5
    assert cursor.select_all() == 5
    assert cursor.history_size == 6
