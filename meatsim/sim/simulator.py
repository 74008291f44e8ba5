import logging
from typing import Iterator, Optional

from meatsim.core.config import SimulationConfig
from meatsim.core.constants import DT_HOURS
from meatsim.core.environment import EnvironmentSample, EnvironmentSampler
from meatsim.core.kinetics import (
    DecayTarget,
    decay_integrity,
    dry_moisture,
    grow_microbes,
    relax_temperature,
)
from meatsim.core.noise import NoiseSource, UniformNoise
from meatsim.core.quality import quality_index
from meatsim.core.state import SimulationState
from meatsim.sim.result import SimulationResult, SimulationStep

logger = logging.getLogger(__name__)


class MeatStorageSimulator:
    """
    Fixed-step simulator of meat quality during storage.

    Each timestep of DT_HOURS:
    1.  Environment sampling: air temperature and humidity from the virtual
        sensors (noise, spike window, cyclic fluctuation).
    2.  Product update: thermal relaxation first, then microbial growth,
        moisture loss and protein/fat decay, all driven by the *new*
        product temperature.
    3.  Record: the quality index is derived and a rounded step is emitted.

    The running state is replaced wholesale every step and is owned by this
    instance alone; independent instances share nothing.
    """

    def __init__(self, config: SimulationConfig, noise: NoiseSource, dt_hours: float = DT_HOURS):
        self.config = config
        self.noise = noise
        self.dt_hours = dt_hours
        self.sampler = EnvironmentSampler(config, noise)

        # Internal state, managed by step() and reset()
        self._time: float = 0.0
        self._state: Optional[SimulationState] = None
        self.is_done: bool = False

    @property
    def time(self) -> float:
        return self._time

    @property
    def state(self) -> Optional[SimulationState]:
        return self._state

    def reset(self) -> SimulationState:
        """Restore time zero and the initial product state."""
        self._time = 0.0
        self._state = SimulationState.initial(self.config)
        self.is_done = self._time > self.config.duration_hours
        logger.debug("Simulator reset for scenario %s", self.config.scenario.value)
        return self._state

    def step(self) -> SimulationStep:
        """
        Advance the simulation by one timestep.

        Returns:
            The record for the current time; the clock then moves on by dt.
        """
        if self._state is None:
            self.reset()
        if self.is_done:
            raise RuntimeError(
                "Simulation is finished. Call reset() to start a new run."
            )

        sample = self.sampler.sample(self._time)
        self._state = self._advance(self._state, sample)
        q = quality_index(self._state.microbes, self._state.protein, self._state.fat)
        record = SimulationStep.from_state(self._time, sample, self._state, q)

        self._time += self.dt_hours
        self.is_done = self._time > self.config.duration_hours
        return record

    def _advance(self, state: SimulationState, sample: EnvironmentSample) -> SimulationState:
        packaging = self.config.packaging_factor
        dt = self.dt_hours

        product_temp = relax_temperature(state.product_temp, sample.env_temp, dt)
        microbes = grow_microbes(product_temp, state.microbes, dt)
        moisture = dry_moisture(state.moisture, sample.humidity, packaging, dt)
        protein = decay_integrity(state.protein, product_temp, DecayTarget.PROTEIN, packaging, dt)
        fat = decay_integrity(state.fat, product_temp, DecayTarget.FAT, packaging, dt)

        return SimulationState(
            env_temp=sample.env_temp,
            product_temp=product_temp,
            microbes=microbes,
            moisture=moisture,
            protein=protein,
            fat=fat,
        )

    def iter_steps(self) -> Iterator[SimulationStep]:
        self.reset()
        while not self.is_done:
            yield self.step()

    def run(self) -> list[SimulationStep]:
        """Run from time zero to the configured duration (inclusive)."""
        steps = list(self.iter_steps())
        if not steps:
            logger.warning(
                "Configuration with duration %s h produced no steps",
                self.config.duration_hours,
            )
        return steps

    def run_result(self) -> SimulationResult:
        result = SimulationResult.from_steps(self.config, self.run())
        logger.info(
            "Simulated %d steps for %s, spoilage time: %s",
            len(result.steps),
            self.config.name or self.config.scenario.value,
            result.spoilage_time,
        )
        return result


def run_simulation(
    config: SimulationConfig, noise: Optional[NoiseSource] = None
) -> list[SimulationStep]:
    """
    Simulate one storage configuration end to end.

    Args:
        config: Storage conditions.
        noise: Noise source for the run; an entropy-seeded uniform source
               is used when omitted.

    Returns:
        Time-ascending step records spaced by DT_HOURS.
    """
    if noise is None:
        noise = UniformNoise.from_seed()
    return MeatStorageSimulator(config, noise).run()
