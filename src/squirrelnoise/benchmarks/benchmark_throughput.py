"""
Benchmark scalar vs vectorized noise throughput.

Both paths hash the same coordinates; the benchmark checks they agree before
reporting timings.

Run:
    python -m squirrelnoise.benchmarks.benchmark_throughput

Optional env overrides:
    BENCH_SAMPLES, BENCH_REPEATS, BENCH_SEED, BENCH_DIMENSIONS, BENCH_LOG_DIR

Examples:
    BENCH_DIMENSIONS=2,3 BENCH_SAMPLES=50000 \
        python -m squirrelnoise.benchmarks.benchmark_throughput
"""

import os
import statistics
import time

import numpy as np

from squirrelnoise import defaults
from squirrelnoise.core.bits import sanitize_seed
from squirrelnoise.core.noise import NOISE_BY_DIMENSION
from squirrelnoise.engine.vectorized import noise_array
from squirrelnoise.runtime.logging_utils import setup_run_logger


def _env_int(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _env_dimensions(name, default):
    raw = os.getenv(name)
    if raw is None:
        return tuple(default)
    out = []
    for part in raw.split(","):
        token = part.strip()
        if not token:
            continue
        try:
            parsed = int(token)
        except ValueError:
            continue
        if parsed in NOISE_BY_DIMENSION and parsed not in out:
            out.append(parsed)
    return tuple(out) or tuple(default)


BENCH_SAMPLES = max(1, _env_int("BENCH_SAMPLES", defaults.DEFAULT_BENCH_SAMPLES))
BENCH_REPEATS = max(1, _env_int("BENCH_REPEATS", defaults.DEFAULT_BENCH_REPEATS))
BENCH_SEED = _env_int("BENCH_SEED", defaults.DEFAULT_SEED)
BENCH_DIMENSIONS = _env_dimensions(
    "BENCH_DIMENSIONS", defaults.DEFAULT_BENCH_DIMENSIONS
)


def _make_coords(dimensions, samples, seed):
    rng = np.random.default_rng(seed)
    return [
        rng.integers(-(2**31), 2**31, size=samples, dtype=np.int64)
        for _ in range(dimensions)
    ]


def _run_scalar(dimensions, coords, seed):
    func = NOISE_BY_DIMENSION[dimensions]
    columns = [col.tolist() for col in coords]
    t0 = time.perf_counter()
    values = [func(*point, seed) for point in zip(*columns)]
    return time.perf_counter() - t0, values


def _run_vectorized(coords, seed):
    t0 = time.perf_counter()
    values = noise_array(*coords, seed=seed)
    return time.perf_counter() - t0, values


def run_benchmark(dimensions, samples, repeats, seed, logger=None):
    """Time both paths for one dimensionality.

    Raises:
        RuntimeError: if scalar and vectorized outputs disagree.
    """
    scalar_times = []
    vector_times = []
    for repeat in range(repeats):
        # default_rng needs a non-negative seed.
        coords = _make_coords(dimensions, samples, sanitize_seed(seed) + repeat)
        scalar_sec, scalar_values = _run_scalar(dimensions, coords, seed)
        vector_sec, vector_values = _run_vectorized(coords, seed)
        if scalar_values != vector_values.tolist():
            raise RuntimeError(
                f"Scalar and vectorized noise disagree for {dimensions}D "
                f"(seed={seed}, repeat={repeat})"
            )
        scalar_times.append(scalar_sec)
        vector_times.append(vector_sec)
        if logger is not None:
            logger.info(
                "dims=%s repeat=%s scalar=%.4fs vectorized=%.4fs",
                dimensions,
                repeat,
                scalar_sec,
                vector_sec,
            )

    scalar_median = statistics.median(scalar_times)
    vector_median = statistics.median(vector_times)
    return {
        "dimensions": int(dimensions),
        "samples": int(samples),
        "scalar_median_sec": scalar_median,
        "vectorized_median_sec": vector_median,
        "speedup": (
            scalar_median / vector_median if vector_median > 0 else float("inf")
        ),
    }


def bench_settings():
    return {
        "samples": BENCH_SAMPLES,
        "repeats": BENCH_REPEATS,
        "seed": BENCH_SEED,
        "dimensions": ",".join(str(dims) for dims in BENCH_DIMENSIONS),
    }


def main():
    logger, log_path = setup_run_logger(
        os.getenv("BENCH_LOG_DIR"),
        name="squirrelnoise.benchmark",
        prefix="bench",
        settings=bench_settings(),
    )

    print("[BENCHMARK] scalar vs vectorized noise")
    print(
        f"samples={BENCH_SAMPLES} repeats={BENCH_REPEATS} seed={BENCH_SEED} "
        f"dimensions={BENCH_DIMENSIONS}"
    )

    print("\n[SUMMARY]")
    for dimensions in BENCH_DIMENSIONS:
        row = run_benchmark(
            dimensions, BENCH_SAMPLES, BENCH_REPEATS, BENCH_SEED, logger=logger
        )
        print(
            f"  dims={row['dimensions']} "
            f"scalar={row['scalar_median_sec']:.3f}s "
            f"vectorized={row['vectorized_median_sec']:.4f}s "
            f"speedup={row['speedup']:.1f}x"
        )
    print(f"log={log_path}")


if __name__ == "__main__":
    main()
