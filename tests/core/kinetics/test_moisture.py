"""Tests for packaging-dependent moisture diffusion."""

import pytest
from meatsim.core.kinetics.moisture import dry_moisture, moisture_rate


def test_moisture_rate_with_positive_driving_force():
    # Arrange - driving force 74 - 85 / 2 = 31.5, k_dry = 0.005 * 0.8
    # Act
    rate = moisture_rate(74.0, 85.0, 0.8)

    # Assert
    assert rate == pytest.approx(-0.004 * 31.5)


def test_moisture_rate_exactly_zero_at_zero_driving_force():
    # Act
    rate = moisture_rate(40.0, 80.0, 1.0)

    # Assert
    assert rate == 0.0
    assert not rate < 0


def test_moisture_rate_no_gain_from_humid_air():
    assert moisture_rate(30.0, 100.0, 1.0) == 0.0


def test_moisture_rate_hermetic_packaging_stops_drying():
    assert moisture_rate(74.0, 20.0, 0.0) == 0.0


def test_moisture_rate_scales_linearly_with_packaging():
    half = moisture_rate(74.0, 60.0, 0.5)
    full = moisture_rate(74.0, 60.0, 1.0)
    assert full == pytest.approx(2 * half)


def test_dry_moisture_euler_step():
    assert dry_moisture(74.0, 85.0, 0.8) == pytest.approx(74.0 - 0.126 * 0.5)
