"""
Default settings for the noise helpers and the throughput benchmark.
"""

DEFAULT_SEED = 0

DEFAULT_BENCH_SAMPLES = 200_000
DEFAULT_BENCH_REPEATS = 3
DEFAULT_BENCH_DIMENSIONS = (1, 2, 3, 4)
