"""Lock decorator for sharing one cursor between threads."""

from __future__ import annotations

import functools
import threading
from contextlib import AbstractContextManager
from typing import TYPE_CHECKING, Any, Callable, Optional

from .cursor import TextCursor

if TYPE_CHECKING:
    from _thread import RLock


class SynchronizedTextCursor(AbstractContextManager["SynchronizedTextCursor"]):
    """Proxy that holds a re-entrant lock around every call on a ``TextCursor``.

    Reads are locked too: a read may observe state produced by a flush another
    thread triggered. Entering the proxy as a context manager holds the lock
    across several calls.
    """

    def __init__(
        self,
        cursor: Optional[TextCursor] = None,
        *,
        lock: Optional["RLock"] = None,
    ) -> None:
        self._cursor = cursor if cursor is not None else TextCursor()
        self._lock = lock if lock is not None else threading.RLock()

    @property
    def wrapped(self) -> TextCursor:
        return self._cursor

    def __getattr__(self, name: str) -> Any:
        if isinstance(getattr(type(self._cursor), name, None), property):
            with self._lock:
                return getattr(self._cursor, name)
        value = getattr(self._cursor, name)
        if callable(value):
            return self._locked(value)
        return value

    def _locked(self, method: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(method)
        def call(*args: Any, **kwargs: Any) -> Any:
            with self._lock:
                result = method(*args, **kwargs)
            return self if result is self._cursor else result

        return call

    def __str__(self) -> str:
        with self._lock:
            return str(self._cursor)

    def __enter__(self) -> "SynchronizedTextCursor":
        self._lock.acquire()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self._lock.release()
        return False


__all__ = ["SynchronizedTextCursor"]
