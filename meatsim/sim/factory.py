from meatsim.core.noise import build_noise_source
from meatsim.sim.config import StorageExperimentConfig
from meatsim.sim.simulator import MeatStorageSimulator


class SimulatorFactory:
    @staticmethod
    def create_simulator(config: StorageExperimentConfig) -> MeatStorageSimulator:
        """Create a simulator with its own noise source."""
        noise = build_noise_source(config.noise)
        return MeatStorageSimulator(config=config.simulation, noise=noise)
