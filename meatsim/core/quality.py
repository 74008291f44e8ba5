import numpy as np

from meatsim.core.constants import (
    CHEMICAL_WEIGHT,
    INITIAL_MICROBES,
    MICROBE_WEIGHT,
    SPOILAGE_THRESHOLD,
)


def microbe_index(microbes: float) -> float:
    """1.0 at the seed density, 0.0 at (and beyond) the spoilage threshold, log-linear."""
    log_n0 = np.log10(INITIAL_MICROBES)
    log_span = np.log10(SPOILAGE_THRESHOLD) - log_n0
    return max(0.0, float(1.0 - (np.log10(microbes) - log_n0) / log_span))


def chemical_index(protein: float, fat: float) -> float:
    return (protein + fat) / 200


def quality_index(microbes: float, protein: float, fat: float) -> float:
    """
    Aggregate quality Q in [0, 1]; 1 is fresh, 0 is spoiled.

    Microbial load dominates the score.
    """
    q = MICROBE_WEIGHT * microbe_index(microbes) + CHEMICAL_WEIGHT * chemical_index(
        protein, fat
    )
    return max(0.0, q)
