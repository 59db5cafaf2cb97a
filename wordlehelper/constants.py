import string
from pathlib import Path

# Puzzle shape
WORD_LENGTH = 5
ALPHABET = string.ascii_lowercase
VOWELS = "aeiou"

# Suggestion scoring. Entropy is in bits and dominates; the other terms are
# all within [0, 1] and only separate guesses of near-equal entropy.
ENTROPY_WEIGHT = 1.0
DIVERSITY_WEIGHT = 0.1
FREQUENCY_WEIGHT = 1.0
BALANCE_WEIGHT = 0.1
CANDIDATE_WEIGHT = 0.05
VOWEL_TARGET_RATIO = 0.4

# Opening guesses, best first
STARTERS = ["slate", "crane", "audio", "arise", "outer"]
SUGGESTION_LIMIT = 10

# Ranking below this many simulations (pool size * candidates) stays in-process
PARALLEL_THRESHOLD = 200_000
MAX_WORKERS = 4

# Benchmark
NUM_RUNS = 20
NUM_GUESSES = 6
LOG_DIR = Path("benchmarks/logs")
WANDB_PROJECT = "wordle-helper"
