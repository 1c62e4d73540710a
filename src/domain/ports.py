"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    """Port interface for reading wall-clock time."""

    def now(self) -> datetime:
        """
        Return the current time.

        Returns:
            Timezone-aware datetime in UTC
        """
        ...
