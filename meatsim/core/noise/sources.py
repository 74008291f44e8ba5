from abc import ABC, abstractmethod
from itertools import cycle
from typing import Iterable, Optional

import numpy as np

from meatsim.core.noise.config import UniformNoiseConfig, ZeroNoiseConfig
from meatsim.core.noise.registry import register


class NoiseSource(ABC):
    """
    Single source of randomness for a simulation run.

    Calling the source with an amplitude `a` returns one draw from [-a, a].
    Every stochastic perturbation of a run goes through one instance, so
    substituting the instance makes a run reproducible.
    """

    @abstractmethod
    def __call__(self, amplitude: float) -> float:
        pass


@register(UniformNoiseConfig)
class UniformNoise(NoiseSource):
    """Uniform noise backed by a numpy Generator."""

    def __init__(self, rng: np.random.Generator):
        self._rng = rng

    @classmethod
    def from_seed(cls, seed: Optional[int] = None) -> "UniformNoise":
        return cls(np.random.default_rng(seed))

    @classmethod
    def from_config(cls, config: UniformNoiseConfig) -> "UniformNoise":
        return cls.from_seed(config.seed)

    def __call__(self, amplitude: float) -> float:
        return float(self._rng.uniform(-amplitude, amplitude))


@register(ZeroNoiseConfig)
class ZeroNoise(NoiseSource):
    @classmethod
    def from_config(cls, config: ZeroNoiseConfig) -> "ZeroNoise":
        return cls()

    def __call__(self, amplitude: float) -> float:
        return 0.0


class SequenceNoise(NoiseSource):
    """
    Replays a fixed sequence of unit draws, scaled by the requested amplitude.

    Values must lie in [-1, 1]; the sequence repeats once exhausted.
    """

    def __init__(self, values: Iterable[float]):
        values = list(values)
        if not values:
            raise ValueError("SequenceNoise requires at least one value.")
        if any(abs(v) > 1.0 for v in values):
            raise ValueError("Unit draws must lie in [-1, 1].")
        self._values = cycle(values)

    def __call__(self, amplitude: float) -> float:
        return next(self._values) * amplitude
