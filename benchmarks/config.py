"""Benchmark configuration."""

import logging
import os
from dataclasses import dataclass


@dataclass
class BenchmarkConfig:
    """Configuration for benchmark runs."""

    # Reproducibility
    seed: int = 42

    # Benchmark parameters
    sizes: list[int] = None
    distributions: list[str] = None

    # Execution control
    skip_warmup: bool = False

    # Logging
    log_level: str = "INFO"

    def __post_init__(self):
        if self.sizes is None:
            self.sizes = [100, 1000, 10000]
        if self.distributions is None:
            self.distributions = ["uniform", "sequential", "reversed", "clustered", "duplicates"]

    @property
    def log_level_value(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {self.log_level}")
        return level

    @classmethod
    def from_env(cls) -> "BenchmarkConfig":
        """Create config from environment variables."""
        sizes = os.environ.get("BENCHMARK_SIZES")
        return cls(
            seed=int(os.environ.get("BENCHMARK_SEED", "42")),
            sizes=[int(s) for s in sizes.split(",")] if sizes else None,
            skip_warmup=os.environ.get("BENCHMARK_SKIP_WARMUP", "").lower() == "true",
            log_level=os.environ.get("BENCHMARK_LOG_LEVEL", "INFO"),
        )
