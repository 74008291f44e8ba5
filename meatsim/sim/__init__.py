from meatsim.sim.config import StorageExperimentConfig
from meatsim.sim.result import SimulationResult, SimulationStep, find_spoilage_time
from meatsim.sim.simulator import MeatStorageSimulator, run_simulation
from meatsim.sim.factory import SimulatorFactory

__all__ = [
    "StorageExperimentConfig",
    "SimulationResult",
    "SimulationStep",
    "find_spoilage_time",
    "MeatStorageSimulator",
    "run_simulation",
    "SimulatorFactory",
]
