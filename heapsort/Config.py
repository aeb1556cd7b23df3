from pathlib import Path

INPUT_SEPARATOR = ","

STATISTICS_NS = list(range(1, 10)) + list(range(10, 100, 10)) + list(range(100, 1001, 100))
MAX_SAMPLE_TIME_MS = 2000
SAMPLES_PER_N = 1000
SAMPLE_SEED = 42

RESULT_DIR = Path("logs/statistics.csv")
