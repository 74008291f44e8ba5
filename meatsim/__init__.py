from meatsim.core.config import ScenarioKind, SimulationConfig
from meatsim.sim.factory import SimulatorFactory
from meatsim.sim.result import SimulationResult, SimulationStep
from meatsim.sim.simulator import MeatStorageSimulator, run_simulation

__all__ = [
 "ScenarioKind",
 "SimulationConfig",
 "SimulationStep",
 "SimulationResult",
 "MeatStorageSimulator",
 "SimulatorFactory",
 "run_simulation",
]
