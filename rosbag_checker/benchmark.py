"""
Timing harness for the check pipeline.

Runs run_check() repeatedly and reports latency statistics. Every
iteration re-reads bag metadata and builds its own report; only the
immutable CheckConfig is shared.
"""

import time

import numpy as np

from .bag_reader import read_metadata
from .constants import DEFAULT_NUM_RUNS
from .errors import ConfigError
from .models import BenchmarkResult, CheckConfig
from .pipeline import MetadataReader, run_check


def summarize_latencies(samples: np.ndarray, report=None) -> BenchmarkResult:
    """Latency statistics (ms) over per-run samples."""
    return BenchmarkResult(
        num_runs=int(samples.size),
        total_ms=float(samples.sum()),
        mean_ms=float(samples.mean()),
        std_ms=float(samples.std(ddof=1)) if samples.size > 1 else 0.0,
        min_ms=float(samples.min()),
        max_ms=float(samples.max()),
        median_ms=float(np.median(samples)),
        p95_ms=float(np.percentile(samples, 95)),
        report=report,
    )


def time_check_bag(
    config: CheckConfig,
    num_runs: int = DEFAULT_NUM_RUNS,
    *,
    metadata_reader: MetadataReader = read_metadata,
) -> BenchmarkResult:
    """
    Time ``num_runs`` full checks of the same bag.

    Errors from the pipeline propagate unchanged on the first failing run.
    """
    if num_runs < 1:
        raise ConfigError(f"num_runs must be at least 1, got {num_runs}")

    samples = np.empty(num_runs, dtype=float)
    report = None

    for i in range(num_runs):
        t0 = time.perf_counter()
        report = run_check(config, metadata_reader=metadata_reader)
        samples[i] = (time.perf_counter() - t0) * 1000.0

    return summarize_latencies(samples, report)


def format_benchmark(result: BenchmarkResult) -> str:
    return (
        f"Check bag function took an average of {result.mean_ms:f} ms to run "
        f"(average over {result.num_runs} runs)\n"
        f"  median {result.median_ms:.4f} ms, p95 {result.p95_ms:.4f} ms, "
        f"min {result.min_ms:.4f} ms, max {result.max_ms:.4f} ms, "
        f"std {result.std_ms:.4f} ms"
    )
