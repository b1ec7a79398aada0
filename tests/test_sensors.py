"""Tests for the simulated sensor."""

from __future__ import annotations

import pytest

from conftest import NOW, FixedRandom
from stressless.sensors.simulated import SimulatedSensor


class TestSimulatedSensor:
    def test_tick_moves_by_one_step(self):
        sensor = SimulatedSensor(rng=FixedRandom(randint_value=1))
        assert sensor.tick() == 76
        assert sensor.tick() == 77

    def test_random_walk_stays_within_steps(self):
        sensor = SimulatedSensor()
        previous = sensor.heart_rate
        for _ in range(200):
            current = sensor.tick()
            assert abs(current - previous) <= 1
            previous = current

    @pytest.mark.asyncio
    async def test_read_snapshot(self, clock):
        snapshot = await SimulatedSensor(heart_rate=82, step_count=900, clock=clock).read()
        assert snapshot.heart_rate == 82
        assert snapshot.step_count == 900
        assert snapshot.timestamp == NOW

    @pytest.mark.asyncio
    async def test_stream_ticks_between_snapshots(self, clock):
        sensor = SimulatedSensor(rng=FixedRandom(randint_value=-1), clock=clock)
        rates = [s.heart_rate async for s in sensor.stream(0, limit=3)]
        assert rates == [75, 74, 73]
