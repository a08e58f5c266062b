"""
Filter Bench - declarative pipeline versus manual loop

Benchmarks two equivalent ways of selecting the even values above 500
from a million random integers:
- ``declarative_filter``: ``filter`` with a predicate, materialized with ``list``
- ``manual_filter``: explicit loop with conditional ``append``

Timing comes from pytest-benchmark; allocation per call from tracemalloc.
"""

__version__ = "0.1.0"
__all__ = [
    "config",
    "exceptions",
    "filters",
    "harness",
    "logging",
]
