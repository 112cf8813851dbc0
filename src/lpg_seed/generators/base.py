"""
Base classes for entity generators.

This module provides:
- GeneratorContext: Shared state passed to every generator in a run
- BaseGenerator: Abstract base with the idempotency gate and batched persist

Design Principles:
- The context owns the store, the random source and the run's "now"
- Generators receive upstream collections as arguments and return their own
- A collection that already holds rows is fetched and returned unchanged
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime

from faker import Faker

from .. import console
from ..config import DEFAULT_BATCH_SIZE, SeedConfig
from ..helpers import utc_now
from ..randomization import RandomEngine
from ..store import Row, Store, write_batched


@dataclass
class GeneratorContext:
    """
    Shared state for all generators.

    Attributes:
        config: Counts, windows and probabilities for this run
        store: Persistence target
        random: Seeded random source (numbers, picks, Faker text)
        now: Reference time for the whole run; every "recent"/"future"
             window is measured from it
    """

    config: SeedConfig
    store: Store
    random: RandomEngine = field(default_factory=RandomEngine)
    now: datetime = field(default_factory=utc_now)

    @property
    def current_year(self) -> int:
        return self.now.year


class BaseGenerator(ABC):
    """
    Abstract base class for entity generators.

    Subclasses set COLLECTION and LABEL, and implement generate(), usually as:

        def generate(self, upstream) -> list[Row]:
            existing = self.fetch_existing()
            if existing is not None:
                return existing
            rows = [...]
            self.persist(rows)
            return rows
    """

    COLLECTION: str = ""
    LABEL: str = ""
    BATCH_SIZE: int = DEFAULT_BATCH_SIZE

    def __init__(self, ctx: GeneratorContext) -> None:
        self.ctx = ctx

    @abstractmethod
    def generate(self, *upstream: Sequence[Row]) -> list[Row]:
        """Generate, persist and return this generator's collection."""

    # =========================================================================
    # Idempotency gate and persistence
    # =========================================================================

    def fetch_existing(self, collection: str | None = None, label: str | None = None) -> list[Row] | None:
        """
        Return the stored collection if it was seeded before, else None.

        Raises:
            StoreError: If the existence check or the fetch fails
        """
        collection = collection or self.COLLECTION
        label = label or self.LABEL
        if not self.store.exists(collection):
            return None
        console.info(f"{label.capitalize()} already exist, fetching existing data...")
        rows = self.store.fetch_all(collection)
        console.success(f"Found {len(rows)} existing {label}")
        return rows

    def persist(
        self,
        records: Sequence[Row],
        collection: str | None = None,
        batch_size: int | None = None,
    ) -> int:
        """Write records in chunks; returns the number of chunks written."""
        return write_batched(
            self.store,
            collection or self.COLLECTION,
            records,
            batch_size or self.BATCH_SIZE,
        )

    # =========================================================================
    # Convenience accessors
    # =========================================================================

    @property
    def config(self) -> SeedConfig:
        return self.ctx.config

    @property
    def store(self) -> Store:
        return self.ctx.store

    @property
    def random(self) -> RandomEngine:
        return self.ctx.random

    @property
    def fake(self) -> Faker:
        return self.ctx.random.fake

    @property
    def now(self) -> datetime:
        return self.ctx.now

    def timestamp(self) -> datetime:
        """Random creation time between the configured start date and now."""
        return self.random.date_between(self.config.start_date, self.now)
