"""Built-in storage scenarios."""

from dataclasses import replace

from meatsim.core.config import ScenarioKind, SimulationConfig

COLD_STORAGE = SimulationConfig(
    scenario=ScenarioKind.COLD_STORAGE,
    name="Standard cold storage",
    description="Ideal conditions at +4 °C, a regular household refrigerator.",
    initial_temp=10.0,
    target_env_temp=4.0,
    base_humidity=85.0,
    temp_fluctuation=0.5,
    packaging_factor=0.8,
    duration_hours=168.0,  # 7 days
)

LOW_TEMP = SimulationConfig(
    scenario=ScenarioKind.LOW_TEMP,
    name="Superchilling",
    description="Storage just above freezing (0..1 °C), maximum freshness without freezing.",
    initial_temp=4.0,
    target_env_temp=0.5,
    base_humidity=85.0,
    temp_fluctuation=0.2,
    packaging_factor=0.8,
    duration_hours=240.0,  # 10 days
)

TEMP_ABUSE = SimulationConfig(
    scenario=ScenarioKind.TEMP_ABUSE,
    name="Temperature abuse",
    description="Refrigerator failure or door left open: jump to +15 °C at hour 12.",
    initial_temp=4.0,
    target_env_temp=4.0,
    base_humidity=85.0,
    temp_fluctuation=0.5,
    temp_spike_hour=12.0,
    temp_spike_value=15.0,
    packaging_factor=0.8,
    duration_hours=72.0,  # 3 days
)

VACUUM = SimulationConfig(
    scenario=ScenarioKind.VACUUM,
    name="Vacuum packaging",
    description="No air in the pack slows fat oxidation and moisture loss.",
    initial_temp=4.0,
    target_env_temp=4.0,
    base_humidity=85.0,
    temp_fluctuation=0.5,
    packaging_factor=0.05,  # near-perfect barrier
    duration_hours=336.0,  # 14 days
)

FLUCTUATION = SimulationConfig(
    scenario=ScenarioKind.FLUCTUATION,
    name="Unstable cooling",
    description="Old refrigerator with large hysteresis, temperature keeps drifting.",
    initial_temp=4.0,
    target_env_temp=6.0,  # mean above the norm
    base_humidity=80.0,
    temp_fluctuation=1.0,
    packaging_factor=0.8,
    duration_hours=120.0,  # 5 days
)

SCENARIOS: tuple[SimulationConfig, ...] = (
    COLD_STORAGE,
    LOW_TEMP,
    TEMP_ABUSE,
    VACUUM,
    FLUCTUATION,
)

_BY_KIND = {config.scenario: config for config in SCENARIOS}


def get_scenario(kind: ScenarioKind | str) -> SimulationConfig:
    kind = ScenarioKind(kind)
    if kind not in _BY_KIND:
        raise KeyError(f"No built-in scenario for '{kind.value}'.")
    return _BY_KIND[kind]


def customize(config: SimulationConfig, **overrides) -> SimulationConfig:
    """
    Copy of a scenario with some parameters changed, e.g. a different
    target temperature or humidity. The copy is validated again.
    """
    return replace(config, **overrides)
