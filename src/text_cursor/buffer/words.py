"""Break-character classification and word-boundary scans."""

from __future__ import annotations

import string
import unicodedata

_ASCII_PUNCTUATION = frozenset(string.punctuation)


def is_break_char(char: str) -> bool:
    """Whitespace, ASCII punctuation/symbols, or any Unicode ``P*`` character."""

    if char.isspace() or char in _ASCII_PUNCTUATION:
        return True
    return unicodedata.category(char).startswith("P")


def scan_word_end(text: str, position: int) -> int:
    """Return the end of the next word run at or after ``position``.

    Leading break characters are skipped; the scan stops before the first break
    character that follows a word run, or at the end of ``text``.
    """

    end = len(text)
    in_word = False
    while position < end:
        if is_break_char(text[position]):
            if in_word:
                break
        else:
            in_word = True
        position += 1
    return position


def scan_word_start(text: str, position: int) -> int:
    """Mirror of :func:`scan_word_end` scanning towards the buffer start."""

    in_word = False
    while position > 0:
        if is_break_char(text[position - 1]):
            if in_word:
                break
        else:
            in_word = True
        position -= 1
    return position


__all__ = ["is_break_char", "scan_word_end", "scan_word_start"]
