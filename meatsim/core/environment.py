from dataclasses import dataclass

import numpy as np

from meatsim.core.config import SimulationConfig
from meatsim.core.constants import (
    CYCLE_AMPLITUDE,
    CYCLE_FREQUENCY,
    HUMIDITY_NOISE,
    SPIKE_DURATION_HOURS,
    SPIKE_NOISE,
)
from meatsim.core.noise import NoiseSource


@dataclass(frozen=True, slots=True)
class EnvironmentSample:
    """Storage air conditions read by the virtual sensors for one timestep."""

    env_temp: float  # °C
    humidity: float  # %RH


class EnvironmentSampler:
    """
    Virtual storage-room sensors.

    Produces the air temperature and humidity seen by the product at a given
    time: the noisy setpoint, optionally replaced by a temperature spike
    window and shifted by the cyclic fluctuation of the FLUCTUATION scenario.
    Noise is drawn in a fixed order (temperature, spike, humidity) so that a
    replayed noise sequence reproduces a run exactly.
    """

    def __init__(self, config: SimulationConfig, noise: NoiseSource):
        self.config = config
        self.noise = noise

    def in_spike_window(self, time: float) -> bool:
        if not self.config.has_spike:
            return False
        start = self.config.temp_spike_hour
        return start <= time <= start + SPIKE_DURATION_HOURS

    def sample(self, time: float) -> EnvironmentSample:
        env_temp = self.config.target_env_temp + self.noise(self.config.temp_fluctuation)

        if self.in_spike_window(time):
            env_temp = self.config.temp_spike_value + self.noise(SPIKE_NOISE)

        if self.config.is_cyclic:
            env_temp += CYCLE_AMPLITUDE * float(np.sin(CYCLE_FREQUENCY * time))

        humidity = self.config.base_humidity + self.noise(HUMIDITY_NOISE)
        return EnvironmentSample(env_temp=env_temp, humidity=humidity)
