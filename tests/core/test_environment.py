"""Tests for the virtual storage-room sensors."""

import math
from unittest.mock import Mock

import pytest
from meatsim.core.config import ScenarioKind, SimulationConfig
from meatsim.core.environment import EnvironmentSampler
from meatsim.core.noise import SequenceNoise, ZeroNoise


def make_config(**overrides) -> SimulationConfig:
    params = dict(
        initial_temp=4.0,
        target_env_temp=4.0,
        base_humidity=85.0,
        temp_fluctuation=0.5,
        packaging_factor=0.8,
        duration_hours=72.0,
    )
    params.update(overrides)
    return SimulationConfig(**params)


def test_sample_without_noise_returns_setpoints():
    # Arrange
    sampler = EnvironmentSampler(make_config(), ZeroNoise())

    # Act
    sample = sampler.sample(0.0)

    # Assert
    assert sample.env_temp == 4.0
    assert sample.humidity == 85.0


def test_sample_scales_noise_by_amplitude():
    # Arrange - unit draws +1.0 for temperature, -1.0 for humidity
    sampler = EnvironmentSampler(make_config(temp_fluctuation=2.0), SequenceNoise([1.0, -1.0]))

    # Act
    sample = sampler.sample(0.0)

    # Assert
    assert sample.env_temp == pytest.approx(6.0)
    assert sample.humidity == pytest.approx(80.0)


def test_sample_draw_order_outside_spike():
    # Arrange
    noise = Mock(return_value=0.0)
    sampler = EnvironmentSampler(make_config(temp_fluctuation=0.7), noise)

    # Act
    sampler.sample(1.0)

    # Assert
    assert [c.args[0] for c in noise.call_args_list] == [0.7, 5.0]


def test_sample_draw_order_inside_spike():
    # Arrange
    noise = Mock(return_value=0.0)
    config = make_config(temp_fluctuation=0.7, temp_spike_hour=12.0, temp_spike_value=15.0)
    sampler = EnvironmentSampler(config, noise)

    # Act
    sampler.sample(13.0)

    # Assert - base draw, spike draw, humidity draw
    assert [c.args[0] for c in noise.call_args_list] == [0.7, 0.5, 5.0]


@pytest.mark.parametrize("time", [12.0, 12.5, 14.0, 16.0])
def test_spike_replaces_base_temperature(time):
    # Arrange
    config = make_config(temp_spike_hour=12.0, temp_spike_value=15.0)
    sampler = EnvironmentSampler(config, ZeroNoise())

    # Act
    sample = sampler.sample(time)

    # Assert
    assert sample.env_temp == 15.0


@pytest.mark.parametrize("time", [0.0, 11.5, 16.5, 30.0])
def test_outside_spike_window_uses_target(time):
    config = make_config(temp_spike_hour=12.0, temp_spike_value=15.0)
    sampler = EnvironmentSampler(config, ZeroNoise())
    assert sampler.sample(time).env_temp == 4.0


def test_spike_noise_is_added_to_spike_value():
    # Arrange - base draw discarded, spike draw at full amplitude
    config = make_config(temp_spike_hour=12.0, temp_spike_value=15.0)
    sampler = EnvironmentSampler(config, SequenceNoise([1.0, 1.0, 0.0]))

    # Act
    sample = sampler.sample(12.0)

    # Assert
    assert sample.env_temp == pytest.approx(15.5)


def test_cyclic_fluctuation_is_additive():
    # Arrange
    config = make_config(scenario=ScenarioKind.FLUCTUATION, target_env_temp=6.0)
    sampler = EnvironmentSampler(config, ZeroNoise())

    # Act
    sample = sampler.sample(3.0)

    # Assert
    assert sample.env_temp == pytest.approx(6.0 + 3 * math.sin(1.5))


def test_cyclic_fluctuation_composes_with_spike():
    # Arrange
    config = make_config(
        scenario=ScenarioKind.FLUCTUATION,
        target_env_temp=6.0,
        temp_spike_hour=0.0,
        temp_spike_value=15.0,
    )
    sampler = EnvironmentSampler(config, ZeroNoise())

    # Act
    sample = sampler.sample(2.0)

    # Assert
    assert sample.env_temp == pytest.approx(15.0 + 3 * math.sin(1.0))


def test_non_cyclic_scenarios_ignore_sinusoid():
    config = make_config(scenario=ScenarioKind.COLD_STORAGE, target_env_temp=6.0)
    sampler = EnvironmentSampler(config, ZeroNoise())
    assert sampler.sample(3.0).env_temp == 6.0
