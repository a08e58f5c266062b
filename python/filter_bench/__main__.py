"""Entry point: benchmark the two filters with pytest-benchmark."""

from __future__ import annotations

import sys

from filter_bench import harness
from filter_bench.config import get_config
from filter_bench.exceptions import ConfigurationError
from filter_bench.logging import get_logger, setup_logging

logger = get_logger(__name__)


def main() -> None:
    """Console script entry point."""
    try:
        config = get_config()
    except ConfigurationError as e:
        setup_logging(level="INFO", format="plain")
        logger.error("invalid_configuration", **e.to_dict())
        sys.exit(1)

    setup_logging()
    logger.info(
        "filter_benchmark_starting",
        size=config.dataset.size,
        iterations=config.benchmark.iterations,
        warmup_iterations=config.benchmark.warmup_iterations,
    )
    exit_code = harness.run(config)
    logger.info("filter_benchmark_finished", exit_code=exit_code)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
