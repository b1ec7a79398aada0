"""Abstract base class for sensor sources."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import AsyncIterator

from stressless.models import SensorSnapshot


class BaseSensor(ABC):
    """Contract for anything that can supply a :class:`SensorSnapshot`.

    A real implementation would wrap the device's heart-rate and pedometer
    APIs; this project ships only the simulated one.
    """

    @abstractmethod
    async def read(self) -> SensorSnapshot:
        """Return the current heart rate and step count."""

    async def stream(
        self,
        interval_seconds: float = 5.0,
        *,
        limit: int | None = None,
    ) -> AsyncIterator[SensorSnapshot]:
        """Yield a snapshot every *interval_seconds* (``limit`` caps the count)."""
        emitted = 0
        while limit is None or emitted < limit:
            if emitted:
                await asyncio.sleep(interval_seconds)
            yield await self.read()
            emitted += 1

    async def close(self) -> None:
        """Release any resources held by the sensor."""
