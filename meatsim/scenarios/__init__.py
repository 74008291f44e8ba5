from meatsim.scenarios.catalog import SCENARIOS, customize, get_scenario
from meatsim.scenarios.loader import config_from_dict, load_config

__all__ = [
    "SCENARIOS",
    "get_scenario",
    "customize",
    "config_from_dict",
    "load_config",
]
