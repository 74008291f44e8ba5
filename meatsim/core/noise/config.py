from dataclasses import dataclass
from typing import Literal, Optional, Union


@dataclass(frozen=True, slots=True, kw_only=True)
class UniformNoiseConfig:
    """Uniform noise in [-a, a]. seed=None draws fresh OS entropy."""

    seed: Optional[int] = None

    type: Literal["uniform"] = "uniform"

    def __post_init__(self):
        if self.seed is not None and self.seed < 0:
            raise ValueError("Seed must be non-negative.")


@dataclass(frozen=True, slots=True, kw_only=True)
class ZeroNoiseConfig:
    """Noise disabled; every draw is exactly zero."""

    type: Literal["zero"] = "zero"


NoiseSourceConfig = Union[UniformNoiseConfig, ZeroNoiseConfig]
