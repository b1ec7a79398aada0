"""Simulated sensor — heart-rate random walk and a fixed step count."""

from __future__ import annotations

import asyncio
import random
from collections.abc import Callable
from datetime import datetime
from typing import AsyncIterator

import structlog

from stressless.models import SensorSnapshot, utc_now
from stressless.sensors.base import BaseSensor

logger = structlog.get_logger(__name__)

DEFAULT_HEART_RATE = 75.0
DEFAULT_STEP_COUNT = 4200


class SimulatedSensor(BaseSensor):
    """Stands in for device sensors.

    Every :meth:`tick` moves the heart rate by -1, 0 or +1 BPM.  Reads do not
    tick; :meth:`stream` ticks once per interval after the first snapshot.
    """

    def __init__(
        self,
        heart_rate: float = DEFAULT_HEART_RATE,
        step_count: int = DEFAULT_STEP_COUNT,
        *,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._heart_rate = heart_rate
        self._step_count = step_count
        self._rng = rng or random.Random()
        self._clock = clock

    @property
    def heart_rate(self) -> float:
        return self._heart_rate

    @property
    def step_count(self) -> int:
        return self._step_count

    def tick(self) -> float:
        self._heart_rate += self._rng.randint(-1, 1)
        return self._heart_rate

    async def read(self) -> SensorSnapshot:
        return SensorSnapshot(
            heart_rate=self._heart_rate,
            step_count=self._step_count,
            timestamp=self._clock(),
        )

    async def stream(
        self,
        interval_seconds: float = 5.0,
        *,
        limit: int | None = None,
    ) -> AsyncIterator[SensorSnapshot]:
        emitted = 0
        while limit is None or emitted < limit:
            if emitted:
                await asyncio.sleep(interval_seconds)
                self.tick()
            snapshot = await self.read()
            logger.debug("sensor.snapshot", heart_rate=snapshot.heart_rate)
            yield snapshot
            emitted += 1
