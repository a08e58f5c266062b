"""
pytest plugin and launcher for the filter benchmarks.

Timing is done by pytest-benchmark in ``filter_bench.bench_filters``. This
plugin adds what it does not measure: bytes allocated by one traced call
of each operation (tracemalloc) and the process RSS over the session
(psutil), printed after pytest-benchmark's table.
"""

from __future__ import annotations

import gc
import tracemalloc
from typing import TYPE_CHECKING, Any

import psutil
import pytest

from filter_bench.config import Config, set_config
from filter_bench.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

logger = get_logger(__name__)

BENCH_MODULE = "filter_bench.bench_filters"

allocations_key = pytest.StashKey[dict[str, int]]()
rss_start_key = pytest.StashKey[int]()


def measure_allocation(func: Callable[[], Any]) -> int:
    """Return the peak bytes traced while ``func`` runs, its result included."""
    gc.collect()
    already_tracing = tracemalloc.is_tracing()
    if not already_tracing:
        tracemalloc.start()
    tracemalloc.reset_peak()
    start, _ = tracemalloc.get_traced_memory()
    try:
        result = func()
        _, peak = tracemalloc.get_traced_memory()
    finally:
        if not already_tracing:
            tracemalloc.stop()
    del result
    return max(peak - start, 0)


def record_allocation(config: pytest.Config, name: str, size: int) -> None:
    config.stash.setdefault(allocations_key, {})[name] = size
    logger.debug("allocation_measured", name=name, bytes=size)


def pytest_sessionstart(session: pytest.Session) -> None:
    session.config.stash[rss_start_key] = psutil.Process().memory_info().rss


def pytest_terminal_summary(terminalreporter: Any, exitstatus: int, config: pytest.Config) -> None:
    allocations = config.stash.get(allocations_key, {})
    if not allocations:
        return

    terminalreporter.write_sep("-", "allocated per call")
    width = max(len(name) for name in allocations)
    for name, size in sorted(allocations.items()):
        terminalreporter.write_line(f"{name:<{width}}  {size / 1024:>14,.2f} KB")

    rss_end = psutil.Process().memory_info().rss
    rss_start = config.stash.get(rss_start_key, rss_end)
    terminalreporter.write_line(
        f"process RSS: {rss_start / 1024**2:,.1f} MB -> {rss_end / 1024**2:,.1f} MB"
    )


def build_args(config: Config) -> list[str]:
    """Command line for a pytest run of the filter benchmarks."""
    args = [
        "--pyargs",
        BENCH_MODULE,
        "-p",
        __name__,
        "-p",
        "no:cacheprovider",
        f"--benchmark-columns={','.join(config.report.columns)}",
        f"--benchmark-sort={config.report.sort}",
    ]
    if config.benchmark.disable_gc:
        args.append("--benchmark-disable-gc")
    if config.report.json_path:
        args.append(f"--benchmark-json={config.report.json_path}")
    return args


def run(config: Config) -> int:
    """Run the benchmarks with ``config``; 0 when every check and measurement passed."""
    set_config(config)
    exit_code = pytest.main(build_args(config))
    return 0 if exit_code == pytest.ExitCode.OK else 1
