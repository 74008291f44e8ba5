"""Fixed constants of the meat storage model."""

# integration
DT_HOURS = 0.5

# microbial population (CFU/g)
INITIAL_MICROBES = 1000.0
MAX_MICROBES = 1.0e8
SPOILAGE_THRESHOLD = 1.0e7

# initial product composition (%)
INITIAL_MOISTURE = 74.0
INITIAL_PROTEIN = 100.0
INITIAL_FAT = 100.0

# environment noise amplitudes
HUMIDITY_NOISE = 5.0
SPIKE_NOISE = 0.5
SPIKE_DURATION_HOURS = 4.0

# cyclic fluctuation: amplitude * sin(frequency * t)
CYCLE_AMPLITUDE = 3.0
CYCLE_FREQUENCY = 0.5

# quality index weights
MICROBE_WEIGHT = 0.8
CHEMICAL_WEIGHT = 0.2
