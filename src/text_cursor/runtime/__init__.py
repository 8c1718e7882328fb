"""Runtime services: configuration and telemetry."""

from .config import CursorConfig

__all__ = ["CursorConfig"]
