"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A fixed clock for deterministic timestamps
- Test application and client setup
"""

from collections.abc import Generator
from datetime import UTC, datetime

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.dependencies import get_clock
from src.api.main import create_app
from src.config.settings import Settings

FIXED_NOW = datetime(2025, 1, 15, 12, 30, 45, 123456, tzinfo=UTC)


class FixedClock:
    """Clock that always reports the same instant."""

    def __init__(self, instant: datetime = FIXED_NOW) -> None:
        self.instant = instant

    def now(self) -> datetime:
        return self.instant


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock pinned to FIXED_NOW."""
    return FixedClock()


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None, port=8080)


@pytest.fixture
def app(settings: Settings, fixed_clock: FixedClock) -> Generator[FastAPI, None, None]:
    """Create test application with the fixed clock injected."""
    test_app = create_app(settings)
    test_app.dependency_overrides[get_clock] = lambda: fixed_clock
    yield test_app
    test_app.dependency_overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create test client for the application."""
    return TestClient(app)
