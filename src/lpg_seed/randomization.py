"""
RandomEngine - Seedable source of numbers, dates, picks and fake text.

Numbers and picks come from a NumPy Generator; human-readable strings come
from Faker. Both are seeded from the same value, so a seeded engine yields a
reproducible dataset.

Usage:
    rand = RandomEngine(seed=42)
    rand.between(1, 3)                       # 1, 2 or 3
    rand.pick_weighted([("past", 70), ("future", 10), ("recent", 20)])
    rand.fake.city()
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, TypeVar

import numpy as np
from faker import Faker

if TYPE_CHECKING:
    from numpy.random import Generator

T = TypeVar("T")


def weighted_choice(items: Sequence[tuple[T, float]], roll: float) -> T:
    """
    Select a value from (value, weight) pairs using a uniform roll in [0, 1).

    Weights are normalized by scaling the roll to their total. Each weight is
    subtracted in order and the first item that brings the remainder to zero
    or below wins. If rounding leaves a positive remainder after the last
    item, the first item is returned.

    Args:
        items: Non-empty sequence of (value, weight) with a positive total
        roll: Uniform sample in [0, 1)

    Returns:
        The selected value

    Raises:
        ValueError: If items is empty or weights do not sum to a positive total
    """
    if not items:
        raise ValueError("weighted_choice requires at least one item")
    total = sum(weight for _, weight in items)
    if total <= 0:
        raise ValueError("weighted_choice requires a positive total weight")

    remaining = roll * total
    for value, weight in items:
        remaining -= weight
        if remaining <= 0:
            return value

    # Fallback
    return items[0][0]


class RandomEngine:
    """
    Random source shared by every generator in a run.

    Attributes:
        seed: Seed used for both NumPy and Faker (None = unseeded)
        rng: NumPy random generator
        fake: Faker instance for names, addresses and prose
    """

    def __init__(self, seed: int | None = None, locale: str = "en_US") -> None:
        self.seed = seed
        self.rng: Generator = np.random.default_rng(seed)
        self.fake = Faker(locale)
        if seed is not None:
            self.fake.seed_instance(seed)

    def between(self, low: int, high: int) -> int:
        """
        Uniform integer in [low, high].

        Raises:
            ValueError: If high < low
        """
        if high < low:
            raise ValueError(f"between() needs low <= high, got {low} > {high}")
        return int(self.rng.integers(low, high + 1))

    def boolean(self, probability: float = 0.5) -> bool:
        """True with the given probability."""
        return bool(self.rng.random() < probability)

    def date_between(self, start: datetime, end: datetime) -> datetime:
        """Uniform timestamp between start and end (order-insensitive)."""
        if end < start:
            start, end = end, start
        span = (end - start).total_seconds()
        return start + timedelta(seconds=float(self.rng.random()) * span)

    def recent(self, days: int, now: datetime) -> datetime:
        """Timestamp within the last `days` days."""
        return self.date_between(now - timedelta(days=days), now)

    def soon(self, days: int, now: datetime) -> datetime:
        """Timestamp within the next `days` days."""
        return self.date_between(now, now + timedelta(days=days))

    def pick(self, items: Sequence[T]) -> T:
        """Uniformly pick one element."""
        if not items:
            raise ValueError("Cannot pick from an empty sequence")
        return items[int(self.rng.integers(len(items)))]

    def pick_weighted(self, items: Sequence[tuple[T, float]]) -> T:
        """Pick a value from (value, weight) pairs."""
        return weighted_choice(items, float(self.rng.random()))

    def pick_n(self, items: Sequence[T], n: int) -> list[T]:
        """
        Sample n distinct elements without replacement.

        n is clamped to len(items); an empty sequence yields an empty list.
        """
        n = max(0, min(n, len(items)))
        if n == 0:
            return []
        indices = self.rng.choice(len(items), size=n, replace=False)
        return [items[int(i)] for i in indices]

    def shuffle(self, items: Sequence[T]) -> list[T]:
        """Return a shuffled copy."""
        return [items[int(i)] for i in self.rng.permutation(len(items))]
