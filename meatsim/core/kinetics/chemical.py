from enum import Enum

import numpy as np

from meatsim.core.constants import DT_HOURS

ACTIVATION_TEMP = 4000.0  # K, Ea/R
PRE_EXPONENTIAL = 10000.0
KELVIN_OFFSET = 273.15


class DecayTarget(str, Enum):
    PROTEIN = "protein"
    FAT = "fat"


# fat oxidises ~5x faster per unit of base coefficient
_SCALE = {
    DecayTarget.PROTEIN: 0.01,
    DecayTarget.FAT: 0.05,
}


def oxygen_factor(target: DecayTarget, packaging_factor: float) -> float:
    """Protein hydrolysis ignores packaging; fat oxidation needs oxygen."""
    if target is DecayTarget.FAT:
        return 0.2 + 0.8 * packaging_factor
    return 1.0


def decay_coefficient(temp: float, target: DecayTarget, packaging_factor: float) -> float:
    """
    Arrhenius-style decay coefficient k in 1/h.

    Args:
        temp: Product temperature in °C.
        target: Which integrity value decays.
        packaging_factor: 0 = vacuum, 1 = open.
    """
    temp_kelvin = temp + KELVIN_OFFSET
    k = (
        float(np.exp(-ACTIVATION_TEMP / temp_kelvin))
        * PRE_EXPONENTIAL
        * oxygen_factor(target, packaging_factor)
    )
    return k * _SCALE[target]


def decay_integrity(
    integrity: float,
    temp: float,
    target: DecayTarget,
    packaging_factor: float,
    dt: float = DT_HOURS,
) -> float:
    # NOTE: no lower clamp, extreme runs may reach non-positive integrity
    k = decay_coefficient(temp, target, packaging_factor)
    return integrity - k * integrity * dt
