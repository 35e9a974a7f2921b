"""Test catalog of the simulated ICT station.

The catalog is built once per run: a single pin contact test followed by
capacitor and resistor measurements with randomly chosen limits.
"""
from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import List, Tuple, Union

logger = logging.getLogger(__name__)

# Nominal value ranges, drawn log-uniformly
CAPACITANCE_RANGE = (1e-12, 1e-6)
RESISTANCE_RANGE = (1e0, 1e6)

# Tolerance factors applied to the nominal value: (min factor), (max factor)
CAPACITOR_TOLERANCE = ((0.7, 0.9), (1.1, 1.3))
RESISTOR_TOLERANCE = ((0.95, 0.99), (1.01, 1.05))

PIN_TEST_NAME = "pins"


@dataclass(frozen=True)
class Pin:
    """Contact test without analog limits."""


@dataclass(frozen=True)
class Capacitor:
    min: float
    nominal: float
    max: float

    def __post_init__(self) -> None:
        _check_limits(self.min, self.nominal, self.max)


@dataclass(frozen=True)
class Resistor:
    min: float
    nominal: float
    max: float

    def __post_init__(self) -> None:
        _check_limits(self.min, self.nominal, self.max)


TestKind = Union[Pin, Capacitor, Resistor]


@dataclass(frozen=True)
class TestDefinition:
    name: str
    kind: TestKind


def _check_limits(minimum: float, nominal: float, maximum: float) -> None:
    if not minimum < nominal < maximum:
        raise ValueError(
            f"Invalid limits: expected min < nominal < max, got {minimum!r}, {nominal!r}, {maximum!r}"
        )


def _draw_nominal(rng: random.Random, bounds: Tuple[float, float]) -> float:
    low, high = bounds
    return 10 ** rng.uniform(math.log10(low), math.log10(high))


def _draw_limits(
    rng: random.Random,
    bounds: Tuple[float, float],
    tolerance: Tuple[Tuple[float, float], Tuple[float, float]],
) -> Tuple[float, float, float]:
    (min_low, min_high), (max_low, max_high) = tolerance
    nominal = _draw_nominal(rng, bounds)
    minimum = nominal * rng.uniform(min_low, min_high)
    maximum = nominal * rng.uniform(max_low, max_high)
    return minimum, nominal, maximum


def build_catalog(
    rng: random.Random,
    capacitor_count: int = 10,
    resistor_count: int = 10,
) -> List[TestDefinition]:
    """Create the ordered list of tests executed on every board.

    Capacitors are named ``c01``, ``c02`` ... and resistors ``r01``, ``r02`` ...
    A count of zero simply leaves that kind out.
    """
    if capacitor_count < 0 or resistor_count < 0:
        raise ValueError("Test counts must not be negative")

    catalog: List[TestDefinition] = [TestDefinition(PIN_TEST_NAME, Pin())]
    for index in range(1, capacitor_count + 1):
        minimum, nominal, maximum = _draw_limits(rng, CAPACITANCE_RANGE, CAPACITOR_TOLERANCE)
        catalog.append(TestDefinition(f"c{index:02d}", Capacitor(minimum, nominal, maximum)))
    for index in range(1, resistor_count + 1):
        minimum, nominal, maximum = _draw_limits(rng, RESISTANCE_RANGE, RESISTOR_TOLERANCE)
        catalog.append(TestDefinition(f"r{index:02d}", Resistor(minimum, nominal, maximum)))

    logger.debug(
        "Test catalog built: %d capacitor, %d resistor tests",
        capacitor_count,
        resistor_count,
    )
    return catalog
