from __future__ import annotations

import random

import pytest

from ict_logmaker.catalog import Capacitor, Pin, Resistor, TestDefinition, build_catalog


def test_default_catalog_order_and_names(rng):
    catalog = build_catalog(rng)

    names = [test.name for test in catalog]
    assert names[0] == "pins"
    assert names[1:11] == [f"c{i:02d}" for i in range(1, 11)]
    assert names[11:] == [f"r{i:02d}" for i in range(1, 11)]
    assert isinstance(catalog[0].kind, Pin)
    assert all(isinstance(test.kind, Capacitor) for test in catalog[1:11])
    assert all(isinstance(test.kind, Resistor) for test in catalog[11:])


@pytest.mark.parametrize("seed", range(20))
def test_analog_limits_are_ordered_and_in_range(seed):
    catalog = build_catalog(random.Random(seed))

    for test in catalog[1:]:
        kind = test.kind
        assert kind.min < kind.nominal < kind.max
        if isinstance(kind, Capacitor):
            assert 1e-12 <= kind.nominal <= 1e-6
            assert 0.7 <= kind.min / kind.nominal <= 0.9
            assert 1.1 <= kind.max / kind.nominal <= 1.3
        else:
            assert 1.0 <= kind.nominal <= 1e6
            assert 0.95 <= kind.min / kind.nominal <= 0.99
            assert 1.01 <= kind.max / kind.nominal <= 1.05


def test_zero_counts_leave_only_pin_test(rng):
    catalog = build_catalog(rng, capacitor_count=0, resistor_count=0)

    assert catalog == [TestDefinition("pins", Pin())]


def test_custom_counts(rng):
    catalog = build_catalog(rng, capacitor_count=3, resistor_count=12)

    assert [test.name for test in catalog][-1] == "r12"
    assert len(catalog) == 16


def test_negative_count_is_rejected(rng):
    with pytest.raises(ValueError):
        build_catalog(rng, capacitor_count=-1)


@pytest.mark.parametrize("limits", [(1.0, 0.5, 2.0), (1.0, 2.0, 2.0), (2.0, 2.0, 2.0)])
def test_degenerate_limits_fail_at_construction(limits):
    with pytest.raises(ValueError):
        Capacitor(*limits)
    with pytest.raises(ValueError):
        Resistor(*limits)
