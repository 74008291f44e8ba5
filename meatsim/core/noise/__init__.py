from meatsim.core.noise.config import (
    NoiseSourceConfig,
    UniformNoiseConfig,
    ZeroNoiseConfig,
)
from meatsim.core.noise.sources import (
    NoiseSource,
    SequenceNoise,
    UniformNoise,
    ZeroNoise,
)
from meatsim.core.noise.factory import build_noise_source

__all__ = [
    "NoiseSourceConfig",
    "UniformNoiseConfig",
    "ZeroNoiseConfig",
    "NoiseSource",
    "UniformNoise",
    "ZeroNoise",
    "SequenceNoise",
    "build_noise_source",
]
