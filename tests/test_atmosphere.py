"""Tests for the ISA air density model."""

from __future__ import annotations

import pytest

from atmosphere import get_air_density, isa_density


def test_sea_level_density():
    assert get_air_density(0.0) == pytest.approx(1.225, abs=1e-3)


def test_density_decreases_with_altitude():
    assert get_air_density(0.0) > get_air_density(1000.0) > get_air_density(10000.0) > 0


def test_vacuum_above_40km():
    assert get_air_density(40001.0) == 0.0
    assert get_air_density(40000.0) > 0.0


def test_reference_density_calibrates_at_reference_altitude():
    assert get_air_density(300.0, reference_density=1.1, reference_altitude_m=300.0) == pytest.approx(1.1)


def test_reference_density_scales_whole_profile():
    factor = 1.1 / isa_density(0.0)
    calibrated = get_air_density(1000.0, reference_density=1.1, reference_altitude_m=0.0)
    assert calibrated == pytest.approx(isa_density(1000.0) * factor)


def test_implausible_reference_density_is_ignored():
    assert get_air_density(500.0, reference_density=0.05) == isa_density(500.0)
    assert get_air_density(500.0, reference_density=0.0) == isa_density(500.0)
