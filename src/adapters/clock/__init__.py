"""Clock adapters - Time sources."""

from .system import SystemClock

__all__ = ["SystemClock"]
