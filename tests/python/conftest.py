"""Pytest configuration for Python tests."""

import pytest

from filter_bench.config import BenchmarkSettings, Config, DatasetSettings, set_config
from filter_bench.logging import setup_logging

pytest_plugins = ["pytester"]


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")


@pytest.fixture(autouse=True)
def default_config() -> Config:
    """Install a fresh default configuration and stderr logging for every test."""
    config = Config()
    set_config(config)
    setup_logging(level="INFO", format="plain")
    return config


@pytest.fixture
def small_config() -> Config:
    """A configuration that benchmarks in well under a second."""
    return Config(
        dataset=DatasetSettings(size=2_000, seed=42),
        benchmark=BenchmarkSettings(warmup_iterations=2, iterations=3),
    )


@pytest.fixture
def small_dataset() -> list[int]:
    """The worked example used across filter tests."""
    return [1, 2, 501, 502, 600, 999]
