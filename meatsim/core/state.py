from dataclasses import dataclass

from meatsim.core.config import SimulationConfig
from meatsim.core.constants import (
    INITIAL_FAT,
    INITIAL_MICROBES,
    INITIAL_MOISTURE,
    INITIAL_PROTEIN,
)


@dataclass(frozen=True, slots=True)
class SimulationState:
    """
    Running state of the product between two timesteps.

    The simulator replaces the whole object every step; values keep full
    precision; rounding only happens on the emitted step records.
    """

    env_temp: float  # °C
    product_temp: float  # °C
    microbes: float  # CFU/g
    moisture: float  # %
    protein: float  # % integrity
    fat: float  # % integrity

    @classmethod
    def initial(cls, config: SimulationConfig) -> "SimulationState":
        return cls(
            env_temp=config.target_env_temp,
            product_temp=config.initial_temp,
            microbes=INITIAL_MICROBES,
            moisture=INITIAL_MOISTURE,
            protein=INITIAL_PROTEIN,
            fat=INITIAL_FAT,
        )
