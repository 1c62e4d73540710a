"""
Domain layer - Pure business logic with zero framework imports.

This package contains the payload rules for the PingMe service. It defines
its own port interfaces for infrastructure abstraction, so the clock can be
swapped without touching the HTTP layer.
"""

from .exceptions import EchoError, EmptyMessage, PingMeError
from .pingme import (
    ECHO_PREFIX,
    GREETING,
    HEALTHY,
    EchoPayload,
    GreetingPayload,
    HealthPayload,
    PingMeService,
)
from .ports import Clock

__all__ = [
    "Clock",
    "ECHO_PREFIX",
    "EchoError",
    "EchoPayload",
    "EmptyMessage",
    "GREETING",
    "GreetingPayload",
    "HEALTHY",
    "HealthPayload",
    "PingMeError",
    "PingMeService",
]
