from meatsim.core.config import ScenarioKind, SimulationConfig
from meatsim.core.state import SimulationState
from meatsim.core.environment import EnvironmentSample, EnvironmentSampler

__all__ = [
    "ScenarioKind",
    "SimulationConfig",
    "SimulationState",
    "EnvironmentSample",
    "EnvironmentSampler",
]
