from dataclasses import asdict, dataclass, fields
from typing import Iterable, Optional, Sequence

import numpy as np
import pandas as pd

from meatsim.core.config import SimulationConfig
from meatsim.core.constants import SPOILAGE_THRESHOLD
from meatsim.core.environment import EnvironmentSample
from meatsim.core.state import SimulationState


@dataclass(frozen=True, slots=True)
class SimulationStep:
    """
    Output record for one time sample, rounded for presentation.

    Rounding applies to this record only; the simulator keeps the running
    state at full precision.
    """

    time: float  # h
    env_temp: float  # °C
    product_temp: float  # °C
    humidity: float  # %RH
    microbes: int  # CFU/g
    moisture: float  # %
    protein: float  # % integrity
    fat_oxidation: float  # %, 100 - fat integrity
    quality_index: float  # 0 spoiled .. 1 fresh

    @classmethod
    def from_state(
        cls,
        time: float,
        sample: EnvironmentSample,
        state: SimulationState,
        quality_index: float,
    ) -> "SimulationStep":
        return cls(
            time=round(time, 1),
            env_temp=round(sample.env_temp, 2),
            product_temp=round(state.product_temp, 2),
            humidity=round(sample.humidity, 1),
            microbes=int(round(state.microbes)),
            moisture=round(state.moisture, 2),
            protein=round(state.protein, 2),
            fat_oxidation=round(100 - state.fat, 2),
            quality_index=round(quality_index, 2),
        )


def find_spoilage_time(
    steps: Iterable[SimulationStep], threshold: float = SPOILAGE_THRESHOLD
) -> Optional[float]:
    """Time of the first step whose microbial density reaches the threshold."""
    for step in steps:
        if step.microbes >= threshold:
            return step.time
    return None


@dataclass(frozen=True, slots=True)
class SimulationResult:
    """A finished run together with its spoilage verdict."""

    config: SimulationConfig
    steps: tuple[SimulationStep, ...]
    spoilage_time: Optional[float] = None

    @classmethod
    def from_steps(
        cls, config: SimulationConfig, steps: Sequence[SimulationStep]
    ) -> "SimulationResult":
        steps = tuple(steps)
        return cls(config=config, steps=steps, spoilage_time=find_spoilage_time(steps))

    @property
    def is_spoiled(self) -> bool:
        return self.spoilage_time is not None

    @property
    def final_step(self) -> Optional[SimulationStep]:
        return self.steps[-1] if self.steps else None

    def summary(self) -> dict:
        """Final-step KPIs as shown on a dashboard."""
        last = self.final_step
        if last is None:
            return {"spoilage_time": self.spoilage_time}
        return {
            "final_product_temp": last.product_temp,
            "final_log10_microbes": float(np.log10(last.microbes)),
            "final_moisture": last.moisture,
            "final_quality_index": last.quality_index,
            "spoilage_time": self.spoilage_time,
        }

    def to_dataframe(self) -> pd.DataFrame:
        columns = [f.name for f in fields(SimulationStep)]
        df = pd.DataFrame([asdict(step) for step in self.steps], columns=columns)
        return df.set_index("time")

    def to_csv(self, path: str) -> None:
        self.to_dataframe().to_csv(path)
