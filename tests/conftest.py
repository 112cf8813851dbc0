"""
Pytest fixtures for the seeder tests.

Provides:
- An in-memory store (no database needed)
- A small configuration with the fixture scenarios enabled
- A generator context with a fixed "now" and a seeded random source
"""

from dataclasses import replace
from datetime import datetime, timezone

import pytest

from lpg_seed.config import SPECIAL_CASES_CONFIG, SeedConfig
from lpg_seed.generators import GeneratorContext
from lpg_seed.randomization import RandomEngine
from lpg_seed.store import MemoryStore

NOW = datetime(2025, 6, 15, 12, 0, tzinfo=timezone.utc)
START_DATE = datetime(2023, 6, 15, tzinfo=timezone.utc)
SEED = 42


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def small_config() -> SeedConfig:
    """Special-cases preset with a fixed start date."""
    return replace(SPECIAL_CASES_CONFIG, start_date=START_DATE)


@pytest.fixture
def ctx(store, small_config) -> GeneratorContext:
    return GeneratorContext(
        config=small_config,
        store=store,
        random=RandomEngine(seed=SEED),
        now=NOW,
    )
