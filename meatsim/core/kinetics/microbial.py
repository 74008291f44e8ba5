import numpy as np

from meatsim.core.constants import DT_HOURS, INITIAL_MICROBES, MAX_MICROBES

MIN_GROWTH_TEMP = -2.0  # °C, growth stops below
MU_REF = 0.05  # 1/h at 0 °C
MU_TEMP_SLOPE = 0.12  # 1/°C


def growth_coefficient(temp: float) -> float:
    """
    Specific growth rate mu(T) in 1/h.

    Empirical Ratkowsky/Arrhenius-style fit: very slow around 0 °C,
    fast at 20-30 °C, zero below -2 °C.
    """
    if temp < MIN_GROWTH_TEMP:
        return 0.0
    return MU_REF * float(np.exp(MU_TEMP_SLOPE * temp))


def growth_rate(temp: float, microbes: float) -> float:
    """Logistic dN/dt with carrying capacity MAX_MICROBES."""
    logistic_factor = 1.0 - microbes / MAX_MICROBES
    return growth_coefficient(temp) * microbes * logistic_factor


def grow_microbes(temp: float, microbes: float, dt: float = DT_HOURS) -> float:
    """
    Advance the microbial density by one Euler step.

    `temp` is the product temperature *after* thermal relaxation for the
    same step. The population never drops below the initial seed density.
    """
    new_microbes = microbes + growth_rate(temp, microbes) * dt
    return max(new_microbes, INITIAL_MICROBES)
