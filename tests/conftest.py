"""Pytest configuration for all tests."""

from typing import Sequence

import pytest
import structlog

from keysmith.application.services.password_service import get_password_service
from keysmith.core.config import Settings, get_settings


class SequenceRandom:
    """Deterministic random source replaying a fixed list of draws.

    Each draw is clamped into the requested range so tests only have to
    care about the values that matter to them.
    """

    def __init__(self, values: Sequence[int]) -> None:
        self.values = list(values)
        self.calls: list[tuple[int, int]] = []

    def uniform(self, minimum: int, maximum: int) -> int:
        self.calls.append((minimum, maximum))
        value = self.values.pop(0) if self.values else minimum
        return max(minimum, min(maximum, value))


class MinimumRandom:
    """Random source that always returns the lower bound."""

    def uniform(self, minimum: int, maximum: int) -> int:
        return minimum


@pytest.fixture(autouse=True)
def _clear_caches():
    """Reset cached settings, service and logging config around every test."""
    get_settings.cache_clear()
    get_password_service.cache_clear()
    yield
    get_settings.cache_clear()
    get_password_service.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def settings() -> Settings:
    """Settings for the testing environment."""
    return Settings(environment="testing")


@pytest.fixture
def sequence_random():
    """Factory for SequenceRandom stubs."""
    return SequenceRandom


@pytest.fixture
def minimum_random() -> MinimumRandom:
    """Random source that always returns the lower bound."""
    return MinimumRandom()
