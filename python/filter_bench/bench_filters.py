"""
pytest-benchmark measurements of the two filters.

``filter-bench`` runs this module through ``filter_bench.harness``; it can
also be run by hand::

    pytest --pyargs filter_bench.bench_filters -p filter_bench.harness
"""

from __future__ import annotations

import pytest

from filter_bench.config import get_config
from filter_bench.filters import FilterBenchmark
from filter_bench.harness import measure_allocation, record_allocation


@pytest.fixture(scope="module")
def component() -> FilterBenchmark:
    """The dataset is generated once for all operations."""
    component = FilterBenchmark(get_config().dataset)
    component.setup()
    return component


def _measure(benchmark, request, operation) -> list[int]:
    settings = get_config().benchmark
    benchmark.group = "filter"
    result = benchmark.pedantic(
        operation,
        rounds=settings.iterations,
        warmup_rounds=settings.warmup_iterations,
        iterations=1,
    )
    if settings.collect_memory:
        allocated = measure_allocation(operation)
        benchmark.extra_info["allocated_bytes"] = allocated
        record_allocation(request.config, request.node.name, allocated)
    return result


def test_results_match(component: FilterBenchmark) -> None:
    assert component.with_pipeline() == component.with_loop()


def test_with_pipeline(benchmark, request, component: FilterBenchmark) -> None:
    assert isinstance(_measure(benchmark, request, component.with_pipeline), list)


def test_with_loop(benchmark, request, component: FilterBenchmark) -> None:
    assert isinstance(_measure(benchmark, request, component.with_loop), list)
