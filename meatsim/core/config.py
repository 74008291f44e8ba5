from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ScenarioKind(str, Enum):
    """Storage scenario tags. Only FLUCTUATION changes engine behaviour."""

    COLD_STORAGE = "COLD_STORAGE"
    LOW_TEMP = "LOW_TEMP"
    TEMP_ABUSE = "TEMP_ABUSE"
    FLUCTUATION = "FLUCTUATION"
    VACUUM = "VACUUM"
    CUSTOM = "CUSTOM"


@dataclass(frozen=True, slots=True, kw_only=True)
class SimulationConfig:
    """Storage conditions for a single simulation run."""

    scenario: ScenarioKind = ScenarioKind.CUSTOM
    initial_temp: float  # °C, product at t=0
    target_env_temp: float  # °C
    base_humidity: float  # %RH
    temp_fluctuation: float = 0.0  # ± °C, uniform
    packaging_factor: float  # 0 = vacuum, 1 = open
    duration_hours: float
    temp_spike_hour: Optional[float] = None
    temp_spike_value: Optional[float] = None  # °C

    name: str = ""
    description: str = ""

    def __post_init__(self):
        if self.duration_hours < 0:
            raise ValueError("Duration must be non-negative.")
        if not (0 <= self.packaging_factor <= 1):
            raise ValueError("Packaging factor must be between 0 and 1.")
        if self.temp_fluctuation < 0:
            raise ValueError("Temperature fluctuation must be non-negative.")
        if self.temp_spike_hour is not None and self.temp_spike_value is None:
            raise ValueError("Spike hour requires a spike temperature value.")

    @property
    def has_spike(self) -> bool:
        return self.temp_spike_hour is not None and self.temp_spike_value is not None

    @property
    def is_cyclic(self) -> bool:
        return self.scenario is ScenarioKind.FLUCTUATION
