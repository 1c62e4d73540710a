"""
PingMe domain service - Greeting, health and echo payloads.

This module contains the business logic behind the three endpoints.
Every payload is a fresh, request-scoped value; nothing here holds
state between calls.

Echo length
===========

``EchoPayload.length`` counts Unicode code points (``len(str)``), so
"Hello, World!" is 13 and "日本" is 2. It is not a UTF-8 byte count and
not a grapheme count.
"""

from dataclasses import dataclass
from datetime import datetime

from .exceptions import EmptyMessage
from .ports import Clock

GREETING = "Welcome to PingMe API!"
HEALTHY = "healthy"
ECHO_PREFIX = "Echo: "


@dataclass(frozen=True)
class GreetingPayload:
    """Payload for the greeting endpoint."""

    greeting: str
    timestamp: datetime


@dataclass(frozen=True)
class HealthPayload:
    """Payload for the health check endpoint."""

    status: str
    time: datetime


@dataclass(frozen=True)
class EchoPayload:
    """Payload for the echo endpoint."""

    original: str
    echoed: str
    length: int
    timestamp: datetime


@dataclass
class PingMeService:
    """
    Domain service for the PingMe endpoints.

    Builds payloads from the injected clock; performs no I/O.
    """

    clock: Clock

    def greet(self) -> GreetingPayload:
        """Build the greeting payload stamped with the current time."""
        return GreetingPayload(greeting=GREETING, timestamp=self.clock.now())

    def check_health(self) -> HealthPayload:
        """
        Build the liveness payload.

        Polled frequently by orchestrators, so it only reads the clock.
        """
        return HealthPayload(status=HEALTHY, time=self.clock.now())

    def echo(self, message: str) -> EchoPayload:
        """
        Echo a message back with the fixed prefix.

        Args:
            message: Message as decoded from the request, untrimmed

        Returns:
            EchoPayload with the original, prefixed copy and code point length

        Raises:
            EmptyMessage: If message is the empty string
        """
        if message == "":
            raise EmptyMessage()

        return EchoPayload(
            original=message,
            echoed=f"{ECHO_PREFIX}{message}",
            length=len(message),
            timestamp=self.clock.now(),
        )
