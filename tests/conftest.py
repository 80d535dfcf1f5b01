"""Test configuration and fixtures."""

import pytest

from shamir256.config import get_settings
from shamir256.core.entropy import EntropySource, FixedEntropySource, SeededEntropySource
from shamir256.core.secret_sharing_engine import SecretSharingEngine


class ScriptedEntropySource(EntropySource):
    """Returns pre-recorded draws in order, recording each request."""

    def __init__(self, draws):
        self.draws = list(draws)
        self.requests = []

    def generate(self, length: int) -> bytes:
        self.requests.append(length)
        return self.draws.pop(0)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached process-wide; drop them around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def engine():
    """Sequential engine backed by the system CSPRNG."""
    return SecretSharingEngine(max_workers=1)


@pytest.fixture
def fixed_engine():
    """Engine whose random coefficients are all 0x41."""
    return SecretSharingEngine(entropy=FixedEntropySource(b"A"), max_workers=1)


@pytest.fixture
def seeded_entropy():
    """Reproducible entropy source."""
    return SeededEntropySource(1979)


@pytest.fixture
def scripted_entropy():
    """Factory for sources that replay the given draws in order."""
    return ScriptedEntropySource
