"""Clipboard collaborators used by the cursor's copy/cut/paste composites."""

from __future__ import annotations

from typing import Optional, Protocol

import pyperclip

from text_cursor.runtime import telemetry


class Clipboard(Protocol):
    """Boundary between the cursor engine and a host clipboard."""

    def read_text(self) -> Optional[str]:
        """Return the clipboard text, or ``None`` when nothing can be read."""
        ...

    def write_text(self, text: str) -> bool:
        """Store ``text``; return ``False`` if the host refused it."""
        ...


class MemoryClipboard:
    """In-process clipboard shared by the cursors it is handed to."""

    def __init__(self, text: Optional[str] = None) -> None:
        self._text = text

    def read_text(self) -> Optional[str]:
        return self._text

    def write_text(self, text: str) -> bool:
        self._text = text
        return True


class SystemClipboard:
    """Host clipboard accessed through pyperclip.

    Missing clipboard utilities (xclip, wl-copy, pbcopy, ...) surface as
    ``PyperclipException``; they are reported as a failed read or write.
    """

    def read_text(self) -> Optional[str]:
        try:
            text = pyperclip.paste()
        except pyperclip.PyperclipException as exc:
            _report_failure("paste", exc)
            return None
        if not isinstance(text, str):
            return None
        return text

    def write_text(self, text: str) -> bool:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            _report_failure("copy", exc)
            return False
        return True


def _report_failure(operation: str, exc: Exception) -> None:
    telemetry.record_event(
        "clipboard.unavailable",
        level="warning",
        data={"operation": operation, "reason": str(exc)},
    )


__all__ = ["Clipboard", "MemoryClipboard", "SystemClipboard"]
