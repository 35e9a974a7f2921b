from __future__ import annotations

import random
from datetime import datetime, timedelta

import pytest

from ict_logmaker.config.settings import SimulatorSettings

START = datetime(2024, 2, 1, 12, 0, 0)


class ManualClock:
    def __init__(self, now: datetime = START) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> datetime:
        self.now += timedelta(seconds=seconds)
        return self.now


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def settings(tmp_path) -> SimulatorSettings:
    return SimulatorSettings(
        enabled=True,
        panel_count=5,
        test_interval_seconds=30,
        output_directory=tmp_path / "out",
        starting_sequence=1,
        test_yield_percent=99,
    )
