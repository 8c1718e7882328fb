"""Telelog-backed logging for the cursor engine.

The engine emits two kinds of records:

``record_event(name, ...)`` -- one structured ``event::<name>`` line, used for
history commits and clipboard failures
``span(name, data=...)`` -- profiles a history replay and reports it as an
event, or as ``<name>.failed`` when the replay raises
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Any, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "TEXT_CURSOR_"
LOGGER_NAME = "text_cursor"

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str) -> bool:
    return (_env(name) or "").lower() in {"1", "true", "yes", "on"}


def _config_from_env() -> Any:
    config = tl.Config()
    config.with_min_level((_env("LOG_LEVEL") or "WARNING").upper())
    config.with_console_output(not _env_flag("DISABLE_CONSOLE"))
    config.with_colored_output(not _env_flag("NO_COLOR"))
    if _env_flag("LOG_JSON"):
        config.with_json_format(True)
    log_file = _env("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)
    return config


def _quiet_config() -> Any:
    # Editing hosts own the terminal; only warnings reach a file, if any.
    config = tl.Config()
    config.with_min_level("WARNING")
    config.with_console_output(False)
    log_file = _env("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)
    return config


def configure(*, preset: Optional[str] = None) -> None:
    """Rebuild the telelog configuration.

    ``preset=None`` reads the ``TEXT_CURSOR_LOG_*`` environment variables;
    ``"quiet"`` disables console output.
    """

    global _ACTIVE_CONFIG
    if preset is None:
        _ACTIVE_CONFIG = _config_from_env()
    elif preset == "quiet":
        _ACTIVE_CONFIG = _quiet_config()
    else:
        raise ValueError(f"Unknown preset '{preset}'.")
    _LOGGER_CACHE.clear()


def get_logger(name: Optional[str] = None) -> Any:
    global _ACTIVE_CONFIG
    logger_name = name or LOGGER_NAME
    if logger_name not in _LOGGER_CACHE:
        if _ACTIVE_CONFIG is None:
            _ACTIVE_CONFIG = _config_from_env()
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
    return _LOGGER_CACHE[logger_name]


def record_event(
    name: str, *, level: str = "debug", data: Optional[Dict[str, Any]] = None
) -> None:
    """Emit ``event::<name>`` with ``data`` as key/value pairs."""

    log = get_logger()
    pairs = [("event", name)] + [(str(k), str(v)) for k, v in (data or {}).items()]
    with_data = getattr(log, f"{level}_with", None)
    if with_data is not None:
        with_data(f"event::{name}", pairs)
        return
    method = getattr(log, level, None)
    if method is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    method(f"event::{name} {dict(pairs)}")


@contextmanager
def span(name: str, *, data: Optional[Dict[str, Any]] = None) -> Iterator[None]:
    """Profile a history replay and report its outcome as an event."""

    payload = dict(data or {})
    with get_logger().profile(name):
        try:
            yield
        except Exception as exc:
            record_event(
                f"{name}.failed", level="error", data={**payload, "reason": exc}
            )
            raise
    record_event(name, data=payload)


__all__ = ["configure", "get_logger", "record_event", "span"]
