# Loads an experiment from YAML, runs it and writes the trace to CSV.

import logging

from meatsim.scenarios import load_config
from meatsim.sim.factory import SimulatorFactory

logging.basicConfig(level=logging.DEBUG)

experiment = load_config("examples/config/temp_abuse.yaml")
print("Storage experiment configuration loaded successfully.")

simulator = SimulatorFactory.create_simulator(experiment)
print("Storage simulator created successfully.")

simulator.reset()
for _ in range(10):
    step = simulator.step()
    print(f"Simulation output: {step}")

result = simulator.run_result()
print(result.to_dataframe().tail())
result.to_csv("temp_abuse_trace.csv")
print("Trace written to temp_abuse_trace.csv")
