"""Tests for the telemetry history buffer and geodesy helpers."""

from __future__ import annotations

import pytest

from flight_data import TelemetrySample
from telemetry_buffer import TelemetryBuffer
from utils import calculate_distance, displace_coordinate

# Degrees of latitude per meter on the spherical Earth
DEG_PER_M = 1 / 111194.92664455873


def northbound(count, speed_mps=10.0, dt_ms=1000.0):
    return [
        TelemetrySample(lat=45.0 + i * speed_mps * (dt_ms / 1000.0) * DEG_PER_M,
                        lon=7.0, alt=300.0, timestamp_ms=i * dt_ms)
        for i in range(count)
    ]


def test_buffer_is_bounded():
    buffer = TelemetryBuffer(max_size=3)
    for sample in northbound(5):
        buffer.add_sample(sample)

    assert len(buffer) == 3
    assert [s.timestamp_ms for s in buffer.snapshot()] == [2000.0, 3000.0, 4000.0]
    assert buffer.latest().timestamp_ms == 4000.0


def test_snapshot_is_detached_from_buffer():
    buffer = TelemetryBuffer(max_size=5)
    samples = northbound(3)
    buffer.add_sample(samples[0])
    snap = buffer.snapshot()
    buffer.add_sample(samples[1])

    assert isinstance(snap, tuple)
    assert len(snap) == 1


def test_out_of_order_samples_are_dropped():
    buffer = TelemetryBuffer()
    first, second = northbound(2)
    assert buffer.add_sample(second) is True
    assert buffer.add_sample(first) is False
    assert buffer.snapshot() == (second,)


def test_empty_buffer():
    buffer = TelemetryBuffer()
    assert buffer.latest() is None
    assert buffer.get_total_distance() == 0.0
    assert buffer.get_smoothed_speed() == 0.0


def test_total_distance_matches_great_circle():
    buffer = TelemetryBuffer()
    samples = northbound(4)
    for sample in samples:
        buffer.add_sample(sample)

    expected = sum(calculate_distance(a.lat, a.lon, b.lat, b.lon) for a, b in zip(samples, samples[1:]))
    assert buffer.get_total_distance() == pytest.approx(expected)
    assert buffer.get_total_distance() == pytest.approx(30.0, rel=1e-6)


def test_smoothed_speed():
    buffer = TelemetryBuffer(max_size=20)
    for sample in northbound(10):
        buffer.add_sample(sample)
    assert buffer.get_smoothed_speed(window_size=5) == pytest.approx(10.0, rel=1e-6)


def test_smoothed_speed_needs_a_real_time_span():
    buffer = TelemetryBuffer()
    for sample in northbound(3, dt_ms=40.0):
        buffer.add_sample(sample)
    assert buffer.get_smoothed_speed() == 0.0


def test_distance_uses_predictor_sphere():
    # One degree of latitude on a 6371 km sphere
    assert calculate_distance(45.0, 7.0, 46.0, 7.0) == pytest.approx(111194.93, rel=1e-6)
    assert calculate_distance(45.0, 7.0, 45.0, 7.0) == 0.0


def test_displace_coordinate_round_trips_distance():
    lat, lon = displace_coordinate(45.0, 7.0, 300.0, 400.0)
    assert lat > 45.0
    assert lon > 7.0
    assert calculate_distance(45.0, 7.0, lat, lon) == pytest.approx(500.0, rel=1e-3)
