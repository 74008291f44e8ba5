# Edits a catalog scenario the way the dashboard sliders do and compares packaging.

from meatsim.core.noise import ZeroNoise
from meatsim.scenarios import customize, get_scenario
from meatsim.sim.simulator import MeatStorageSimulator

base = get_scenario("COLD_STORAGE")

for packaging_factor in (0.05, 0.5, 1.0):
    config = customize(base, packaging_factor=packaging_factor, target_env_temp=6.0)
    result = MeatStorageSimulator(config, ZeroNoise()).run_result()
    last = result.final_step
    print(
        f"packaging={packaging_factor:.2f}  moisture={last.moisture:.2f} %  "
        f"fat oxidation={last.fat_oxidation:.2f} %  Q={last.quality_index:.2f}"
    )
