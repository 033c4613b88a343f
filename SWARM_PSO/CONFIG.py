# === Central Hyperparameter Definition ===
# --- Swarm Config ---
NUM_PARTICLES = 50
OMEGA = 0.5  # Inertia weight
PHI_P = 1.8  # Cognitive coefficient
PHI_G = 1.8  # Social coefficient
MAX_ITERATIONS = 1000  # Fixed iteration count, no early termination

# --- Objective Handling ---
# False keeps NaN/inf objective values silent (they never win a best update).
# True raises InvalidObjectiveValue on the first non-finite value.
REJECT_NON_FINITE_OBJECTIVE = False

# --- Logging Config ---
LOG_INTERVAL = 100  # Iterations between debug progress lines

# --- Benchmark Config ---
BENCHMARK_TOLERANCE = 0.01  # Allowed error on value and on each position coordinate
BENCHMARK_SEED = 12345  # None (or --no-seed on the command line) for an unseeded run

# --- Checkpoint/Output Config ---
CHECKPOINT_BASE_DIR = "Figures/"  # Relative path for convergence plots
