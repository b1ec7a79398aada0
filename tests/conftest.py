"""Shared pytest fixtures."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from stressless.errors import StorageError
from stressless.models import SensorSnapshot, StressEntry
from stressless.storage.base import KeyValueStore
from stressless.storage.memory import MemoryStore
from stressless.storage.repository import HistoryRepository

NOW = datetime(2026, 3, 15, 12, 0, tzinfo=timezone.utc)


class FixedRandom:
    """Deterministic stand-in for :class:`random.Random`."""

    def __init__(self, value: float = 0.0, randint_value: int = 0) -> None:
        self.value = value
        self.randint_value = randint_value
        self.calls: list[tuple[float, float]] = []

    def uniform(self, a: float, b: float) -> float:
        self.calls.append((a, b))
        return self.value

    def randint(self, a: int, b: int) -> int:
        return self.randint_value


class BrokenStore(KeyValueStore):
    """Store whose reads and/or writes always fail."""

    def __init__(
        self,
        *,
        fail_reads: bool = True,
        fail_writes: bool = True,
        initial: dict[str, str] | None = None,
    ) -> None:
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes
        self.data: dict[str, str] = dict(initial or {})
        self.writes = 0

    async def get_item(self, key: str) -> str | None:
        if self.fail_reads:
            raise StorageError("disk unavailable")
        return self.data.get(key)

    async def set_item(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise StorageError("disk full")
        self.writes += 1
        self.data[key] = value


def make_entry(
    score: float,
    *,
    when: datetime = NOW,
    entry_id: str | None = None,
    responses: dict[int, int] | None = None,
    heart_rate: float = 75.0,
) -> StressEntry:
    return StressEntry(
        id=entry_id or str(int(when.timestamp() * 1000)),
        timestamp=when,
        survey_responses=responses or {1: 5, 2: 5, 3: 5, 4: 5, 5: 5},
        sensor_data=SensorSnapshot(heart_rate=heart_rate, step_count=4200, timestamp=when),
        stress_score=score,
    )


def make_history(scores: list[float], *, end: datetime = NOW, step: timedelta = timedelta(hours=6)):
    """Entries in chronological order, the last one dated *end*."""
    count = len(scores)
    return [make_entry(s, when=end - step * (count - 1 - i)) for i, s in enumerate(scores)]


@pytest.fixture
def clock():
    return lambda: NOW


@pytest.fixture
def fixed_rng() -> FixedRandom:
    return FixedRandom()


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def repository(store: MemoryStore) -> HistoryRepository:
    return HistoryRepository(store)
