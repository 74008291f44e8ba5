"""Load storage experiments from YAML."""

from dataclasses import asdict
from enum import Enum
from typing import Any, Mapping

import yaml
from dacite import Config, from_dict

from meatsim.scenarios.catalog import get_scenario
from meatsim.sim.config import StorageExperimentConfig

DACITE_CONFIG = Config(cast=[Enum], type_hooks={float: float}, strict=True)


def config_from_dict(data: Mapping[str, Any]) -> StorageExperimentConfig:
    """
    Build an experiment config from a plain mapping.

    Two layouts are accepted::

        simulation: {initial_temp: 10, target_env_temp: 4, ...}
        noise: {type: uniform, seed: 42}

    or a reference into the built-in catalog with optional overrides::

        scenario: TEMP_ABUSE
        overrides: {target_env_temp: 6}
        noise: {type: zero}
    """
    data = dict(data)
    if "scenario" in data:
        if "simulation" in data:
            raise ValueError("Use either 'scenario' or 'simulation', not both.")
        base = get_scenario(data.pop("scenario"))
        overrides = data.pop("overrides", None) or {}
        data["simulation"] = {**asdict(base), **overrides}
    elif "simulation" not in data:
        raise ValueError("Config needs either a 'scenario' or a 'simulation' section.")

    return from_dict(StorageExperimentConfig, data, config=DACITE_CONFIG)


def load_config(path: str) -> StorageExperimentConfig:
    with open(path, "r") as file:
        yaml_cfg = yaml.safe_load(file)
    if not isinstance(yaml_cfg, dict):
        raise ValueError(f"Expected a mapping at the top level of {path}.")
    return config_from_dict(yaml_cfg)
