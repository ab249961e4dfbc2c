"""Shared test fixtures."""

from __future__ import annotations

import pytest

from flight_data import (
    DescentProfile,
    HeadingSource,
    LandingPolicy,
    TelemetrySample,
    WindField,
    WindLayer,
    WindMode,
)


@pytest.fixture
def descent():
    return DescentProfile(mass_kg=1.0, parachute_area_m2=0.5, drag_coefficient=1.5)


@pytest.fixture
def calm():
    return WindField(mode=WindMode.SINGLE, speed=0.0, direction=0.0)


@pytest.fixture
def northerly():
    """10 m/s wind blowing from the North."""
    return WindField(mode=WindMode.SINGLE, speed=10.0, direction=0.0)


@pytest.fixture
def gradient():
    return WindField(
        mode=WindMode.GRADIENT,
        layers=(
            WindLayer(0.0, 2.0, 45.0),
            WindLayer(500.0, 5.0, 90.0),
            WindLayer(1000.0, 12.0, 120.0),
        ),
    )


@pytest.fixture
def auto_policy():
    return LandingPolicy(heading_source=HeadingSource.AUTO, gps_weight=0.7)


@pytest.fixture
def descending_sample():
    return TelemetrySample(lat=45.0, lon=7.0, alt=100.0, vel_v=-5.0,
                           horiz_speed=0.0, heading=0.0)
