from meatsim.core.kinetics.thermal import relax_temperature, temperature_rate
from meatsim.core.kinetics.microbial import (
    growth_coefficient,
    growth_rate,
    grow_microbes,
)
from meatsim.core.kinetics.moisture import dry_moisture, moisture_rate
from meatsim.core.kinetics.chemical import (
    DecayTarget,
    decay_coefficient,
    decay_integrity,
    oxygen_factor,
)

__all__ = [
    "temperature_rate",
    "relax_temperature",
    "growth_coefficient",
    "growth_rate",
    "grow_microbes",
    "moisture_rate",
    "dry_moisture",
    "DecayTarget",
    "oxygen_factor",
    "decay_coefficient",
    "decay_integrity",
]
