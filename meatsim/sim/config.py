from dataclasses import dataclass, field

from meatsim.core.config import SimulationConfig
from meatsim.core.noise.config import NoiseSourceConfig, UniformNoiseConfig


@dataclass(frozen=True, slots=True, kw_only=True)
class StorageExperimentConfig:
    simulation: SimulationConfig
    noise: NoiseSourceConfig = field(default_factory=UniformNoiseConfig)
