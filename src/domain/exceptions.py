"""
Domain exceptions - Semantic error types for the PingMe service.

This module defines domain-specific exceptions that communicate
business rule violations without leaking transport details.
"""


class PingMeError(Exception):
    """Base class for PingMe domain errors."""

    pass


class EchoError(PingMeError):
    """Base class for echo rule violations."""

    pass


class EmptyMessage(EchoError):
    """Echo message decoded but is the empty string."""

    def __init__(self) -> None:
        super().__init__("Message field cannot be empty")
