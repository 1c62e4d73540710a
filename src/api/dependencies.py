"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into handlers.
"""

from fastapi import Depends

from src.adapters.clock.system import SystemClock
from src.domain.pingme import PingMeService
from src.domain.ports import Clock

# Module-level singleton - SystemClock is stateless
_clock = SystemClock()


def get_clock() -> Clock:
    """Get system clock (singleton)."""
    return _clock


def get_pingme_service(clock: Clock = Depends(get_clock)) -> PingMeService:
    """
    Create the PingMe service with the injected clock.

    Built per request; the service holds no state of its own.
    """
    return PingMeService(clock=clock)
