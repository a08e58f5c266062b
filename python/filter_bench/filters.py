"""
The two filter implementations under comparison.

Both select the even values greater than 500, keep source order and
return a new list on every call. ``FilterBenchmark`` holds the dataset
they are measured against.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from filter_bench.config import DatasetSettings
from filter_bench.exceptions import BenchmarkError
from filter_bench.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = get_logger(__name__)

THRESHOLD = 500


def is_selected(value: int) -> bool:
    """Return True for even values above the threshold."""
    return value % 2 == 0 and value > THRESHOLD


def declarative_filter(values: Iterable[int]) -> list[int]:
    """Filter with the ``filter`` builtin, materialized into a list."""
    return list(filter(is_selected, values))


def manual_filter(values: Iterable[int]) -> list[int]:
    """Filter with an explicit loop and conditional append."""
    result: list[int] = []
    for n in values:
        # inline condition, no per-element call
        if n % 2 == 0 and n > THRESHOLD:
            result.append(n)
    return result


def generate_dataset(settings: DatasetSettings) -> tuple[int, ...]:
    """Draw ``settings.size`` integers uniformly from ``[low, high)``."""
    rng = random.Random(settings.seed)
    numbers = tuple(rng.randrange(settings.low, settings.high) for _ in range(settings.size))
    logger.info("dataset_generated", size=len(numbers), seed=settings.seed)
    return numbers


class FilterBenchmark:
    """
    Compares ``declarative_filter`` against ``manual_filter``.

    ``setup`` creates the dataset once; it is never modified afterwards, so
    both operations can run any number of times in any order.
    """

    def __init__(self, dataset: DatasetSettings | None = None) -> None:
        self.dataset = dataset or DatasetSettings()
        self._numbers: tuple[int, ...] | None = None

    @property
    def numbers(self) -> tuple[int, ...]:
        if self._numbers is None:
            raise BenchmarkError.not_set_up(type(self).__name__)
        return self._numbers

    def setup(self) -> None:
        self._numbers = generate_dataset(self.dataset)

    def with_pipeline(self) -> list[int]:
        return declarative_filter(self.numbers)

    def with_loop(self) -> list[int]:
        return manual_filter(self.numbers)
