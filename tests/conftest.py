"""
Shared fixtures for the simulator and fallback tests.

Time and randomness are pinned so the probabilistic branches of
``apply_to_job`` can be asserted exactly.
"""

import os
from datetime import datetime, timezone
from typing import Any

import pytest

os.environ.setdefault("CAREERPILOT_LOG_FILE", "0")

from careerpilot.remote import RemoteError, RemoteFunctions
from careerpilot.simulator import StateSimulator
from careerpilot.storage import MemoryStorage

NOW = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)

_ENV_KEYS = (
    "SUPABASE_URL",
    "SUPABASE_ANON_KEY",
    "REQUEST_TIMEOUT",
    "CAREERPILOT_STORAGE",
    "CAREERPILOT_DATA_DIR",
    "FOLLOW_UP_PROBABILITY",
    "LOG_LEVEL",
    "CAREERPILOT_LOG_DIR",
    "CAREERPILOT_LOG_FILE",
)


class StubRandom:
    """Deterministic stand-in for random.Random."""

    def __init__(self, value: float = 0.99, offset: int = 6):
        self.value = value
        self.offset = offset
        self.random_calls = 0

    def random(self) -> float:
        self.random_calls += 1
        return self.value

    def randint(self, a: int, b: int) -> int:
        return min(max(self.offset, a), b)


class FakeFunctions(RemoteFunctions):
    """Remote functions double: returns or raises a canned result per name."""

    def __init__(self, responses: dict[str, Any] | None = None):
        self.responses = responses or {}
        self.calls: list[tuple[str, dict]] = []

    def invoke(self, name: str, body: dict[str, Any]) -> Any:
        self.calls.append((name, body))
        result = self.responses.get(name, RemoteError(name, "service unavailable", status_code=503))
        if isinstance(result, BaseException):
            raise result
        return result


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep developer .env values out of config-dependent tests."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def rng():
    return StubRandom()


@pytest.fixture
def simulator(storage, rng):
    return StateSimulator(storage, rng=rng, clock=lambda: NOW)


@pytest.fixture
def offline_client():
    return FakeFunctions()
