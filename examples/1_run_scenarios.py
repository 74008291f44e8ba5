# Runs every built-in storage scenario with a fixed seed and prints the final KPIs.

import logging

from meatsim.core.noise import UniformNoise
from meatsim.scenarios import SCENARIOS
from meatsim.sim.simulator import MeatStorageSimulator

logging.basicConfig(level=logging.INFO)

for scenario in SCENARIOS:
    simulator = MeatStorageSimulator(scenario, UniformNoise.from_seed(42))
    result = simulator.run_result()
    summary = result.summary()
    spoilage = (
        f"{summary['spoilage_time']} h" if result.is_spoiled else "no spoilage"
    )
    print(
        f"{scenario.name:<24} "
        f"T={summary['final_product_temp']:6.2f} °C  "
        f"log10 N={summary['final_log10_microbes']:5.2f}  "
        f"Q={summary['final_quality_index']:.2f}  "
        f"{spoilage}"
    )
