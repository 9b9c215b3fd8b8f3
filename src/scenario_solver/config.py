# Complexity ceiling: exhaustive guarantees are not attempted beyond this
MAX_EVENTS = 50

# Branch-and-bound safety cap (tuned for MAX_EVENTS)
DFS_MAX_ITERATIONS = 500_000

# Full hill-climbing sweeps before the optimizer gives up
OPTIMIZER_MAX_SWEEPS = 1_000

# Hybrid strategy, phase A
RANDOM_TRIALS = 2_000

# Minimum separation between adjacent final ranks
DEFAULT_MIN_MARGIN = 1

# Difficulty labels by share of events the desired leader must win outright.
# Checked in order; the first threshold the share does not exceed wins.
DIFFICULTY_THRESHOLDS = (
    (0.40, "easy"),
    (0.60, "moderate"),
    (0.80, "hard"),
)
HARDEST_DIFFICULTY = "very-hard"
