"""Synthetic measurement generation for catalog tests."""
from __future__ import annotations

import random
from dataclasses import dataclass

from .catalog import Capacitor, Pin, Resistor, TestDefinition


@dataclass(frozen=True)
class TestResult:
    passed: bool
    measured: float

    @property
    def status_short(self) -> str:
        return "0" if self.passed else "1"

    @property
    def status_long(self) -> str:
        return "00" if self.passed else "01"


class MeasurementSimulator:
    """Draws pass/fail decisions and matching measured values.

    ``rng`` is any object with the ``random.Random`` interface, so tests can
    pass a seeded generator or a scripted fake.
    """

    def __init__(self, rng: random.Random) -> None:
        self._rng = rng

    def should_pass(self, yield_percent: int) -> bool:
        return self._rng.randrange(100) < yield_percent

    def measure(self, test: TestDefinition, yield_percent: int) -> TestResult:
        passed = self.should_pass(yield_percent)
        match test.kind:
            case Pin():
                measured = 0.0
            case Capacitor(min=low, max=high) | Resistor(min=low, max=high):
                if passed:
                    measured = self._inside(low, high)
                else:
                    # Only "too low" failures are modeled
                    measured = self._below(low)
            case _:
                raise TypeError(f"Unknown test kind: {test.kind!r}")
        return TestResult(passed=passed, measured=measured)

    def _inside(self, low: float, high: float) -> float:
        while True:
            value = self._rng.uniform(low, high)
            if low < value < high:
                return value

    def _below(self, limit: float) -> float:
        while True:
            value = self._rng.uniform(0.0, limit)
            if 0.0 <= value < limit:
                return value
