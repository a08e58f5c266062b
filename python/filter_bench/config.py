"""
Configuration for the filter benchmark.

Values come from a YAML file and ``FILTER_BENCH_`` environment variables
(``FILTER_BENCH_BENCHMARK__ITERATIONS=20``); the environment wins. Every
field is validated on load, before any data is generated.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from filter_bench.exceptions import ConfigurationError

Column = Literal["min", "max", "mean", "stddev", "median", "iqr", "outliers", "ops", "rounds"]
SortKey = Literal["min", "max", "mean", "stddev", "name", "fullname"]

CONFIG_FILES = ("filter-bench.yaml", "filter-bench.yml", ".filter-bench.yaml")


class DatasetSettings(BaseModel):
    """The generated integers."""

    size: int = Field(default=1_000_000, ge=0, description="Number of integers")
    low: int = Field(default=1, description="Smallest value (inclusive)")
    high: int = Field(default=1000, description="Upper bound (exclusive)")
    seed: int | None = Field(default=None, description="Random seed, None for unseeded")

    @model_validator(mode="after")
    def _check_range(self) -> DatasetSettings:
        if self.low >= self.high:
            raise ValueError(f"low ({self.low}) must be less than high ({self.high})")
        return self


class BenchmarkSettings(BaseModel):
    """How often each operation runs."""

    warmup_iterations: int = Field(default=3, ge=0, description="Unmeasured runs")
    iterations: int = Field(default=10, ge=1, description="Measured runs")
    disable_gc: bool = Field(default=True, description="Disable GC while timing")
    collect_memory: bool = Field(default=True, description="Trace allocations of one extra run")


class ReportSettings(BaseModel):
    """What pytest-benchmark prints and saves."""

    columns: list[Column] = Field(
        default_factory=lambda: ["mean", "stddev", "median", "min", "max", "rounds"]
    )
    sort: SortKey = "mean"
    json_path: str | None = Field(default=None, description="Also save results as JSON here")


class LoggingConfig(BaseModel):
    """Console logging."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["plain", "json"] = "plain"

    @field_validator("level", mode="before")
    @classmethod
    def _upper(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class Config(BaseSettings):
    """Main configuration for the filter benchmark."""

    model_config = SettingsConfigDict(
        env_prefix="FILTER_BENCH_",
        env_nested_delimiter="__",
        extra="forbid",
    )

    dataset: DatasetSettings = Field(default_factory=DatasetSettings)
    benchmark: BenchmarkSettings = Field(default_factory=BenchmarkSettings)
    report: ReportSettings = Field(default_factory=ReportSettings)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # init values come from the YAML file
        return env_settings, init_settings

    @classmethod
    def from_yaml(cls, path: str | Path) -> Config:
        """Load configuration from a YAML file, with environment overrides."""
        with Path(path).open() as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    @classmethod
    def load(cls, config_path: str | None = None) -> Config:
        """
        Load and validate the configuration.

        The file is ``config_path``, else ``$FILTER_BENCH_CONFIG``, else the
        first of ``CONFIG_FILES`` found in the working directory. Without a
        file only the environment and defaults apply.

        Raises:
            ConfigurationError: A named file is missing or a value is invalid.
        """
        config_path = config_path or os.getenv("FILTER_BENCH_CONFIG")
        if config_path and not Path(config_path).exists():
            raise ConfigurationError.missing_file(config_path)
        if not config_path:
            config_path = next((p for p in CONFIG_FILES if Path(p).exists()), None)

        try:
            return cls.from_yaml(config_path) if config_path else cls()
        except ValidationError as e:
            error = e.errors()[0]
            field = ".".join(str(part) for part in error["loc"]) or "config"
            raise ConfigurationError.validation_failed(field, error.get("input"), error["msg"]) from e


_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = Config.load()
    return _config


def set_config(config: Config) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config
