"""
System clock adapter - Implements Clock protocol.

This module provides the wall-clock implementation of the domain's
clock port, always reporting UTC.
"""

from datetime import UTC, datetime


class SystemClock:
    """
    Implements Clock protocol via the system time.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Stateless, so a single instance is shared across requests.
    """

    def now(self) -> datetime:
        """Return the current time as a timezone-aware UTC datetime."""
        return datetime.now(UTC)
