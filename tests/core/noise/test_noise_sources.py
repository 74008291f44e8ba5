"""Tests for noise source implementations."""

import numpy as np
import pytest
from meatsim.core.noise import SequenceNoise, UniformNoise, ZeroNoise


def test_uniform_noise_stays_within_amplitude():
    # Arrange
    noise = UniformNoise.from_seed(0)

    # Act
    draws = [noise(2.5) for _ in range(1000)]

    # Assert
    assert all(-2.5 <= d <= 2.5 for d in draws)
    assert min(draws) < 0 < max(draws)


def test_uniform_noise_same_seed_same_sequence():
    first = UniformNoise.from_seed(42)
    second = UniformNoise.from_seed(42)
    assert [first(1.0) for _ in range(20)] == [second(1.0) for _ in range(20)]


def test_uniform_noise_different_seeds_differ():
    first = UniformNoise.from_seed(1)
    second = UniformNoise.from_seed(2)
    assert [first(1.0) for _ in range(5)] != [second(1.0) for _ in range(5)]


def test_uniform_noise_accepts_generator():
    # Arrange
    rng = np.random.default_rng(7)
    expected = np.random.default_rng(7).uniform(-3.0, 3.0)

    # Act
    value = UniformNoise(rng)(3.0)

    # Assert
    assert value == pytest.approx(expected)


def test_uniform_noise_zero_amplitude():
    assert UniformNoise.from_seed(3)(0.0) == 0.0


def test_zero_noise_always_zero():
    noise = ZeroNoise()
    assert [noise(a) for a in (0.0, 0.5, 5.0)] == [0.0, 0.0, 0.0]


def test_sequence_noise_scales_and_cycles():
    # Arrange
    noise = SequenceNoise([0.5, -1.0])

    # Act
    draws = [noise(2.0), noise(2.0), noise(4.0)]

    # Assert
    assert draws == [1.0, -2.0, 2.0]


def test_sequence_noise_requires_values():
    with pytest.raises(ValueError, match="at least one value"):
        SequenceNoise([])


def test_sequence_noise_rejects_out_of_range_values():
    with pytest.raises(ValueError, match=r"\[-1, 1\]"):
        SequenceNoise([0.2, 1.5])
