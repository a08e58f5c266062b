"""
Exception hierarchy for the filter benchmark.

Errors carry a machine-readable code and a context dict so they can be
logged as structured events.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Machine-readable error codes."""

    CONFIG_MISSING = "FILTERBENCH_1001"
    CONFIG_VALIDATION = "FILTERBENCH_1002"

    BENCH_NOT_SET_UP = "FILTERBENCH_2001"

    UNKNOWN = "FILTERBENCH_9999"


@dataclass
class FilterBenchError(Exception):
    """Base exception for all filter-bench errors."""

    message: str
    error_code: ErrorCode = ErrorCode.UNKNOWN
    context: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code.value}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Fields for a structured log event."""
        return {
            "error_type": type(self).__name__,
            "error_code": self.error_code.value,
            "message": self.message,
            **self.context,
        }


@dataclass
class ConfigurationError(FilterBenchError):
    """Raised when the configuration cannot be loaded."""

    error_code: ErrorCode = ErrorCode.CONFIG_VALIDATION

    @classmethod
    def missing_file(cls, path: str) -> ConfigurationError:
        return cls(
            message=f"Configuration file not found: {path}",
            error_code=ErrorCode.CONFIG_MISSING,
            context={"path": path},
        )

    @classmethod
    def validation_failed(cls, field: str, value: Any, reason: str) -> ConfigurationError:
        return cls(
            message=f"Invalid value for '{field}': {reason}",
            error_code=ErrorCode.CONFIG_VALIDATION,
            context={"field": field, "value": repr(value)},
        )


@dataclass
class BenchmarkError(FilterBenchError):
    """Raised when a benchmark component is used incorrectly."""

    error_code: ErrorCode = ErrorCode.BENCH_NOT_SET_UP

    @classmethod
    def not_set_up(cls, component: str) -> BenchmarkError:
        return cls(
            message=f"{component} was used before setup() ran",
            context={"component": component},
        )
