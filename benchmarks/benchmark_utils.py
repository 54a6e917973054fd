"""
Benchmarking utilities for red-black trees.

This module provides common utilities and base classes for ASV benchmarking
that work with ASV's built-in timing and stabilization mechanisms.

Reproducibility:
    All random data generation uses deterministic seeds by default.
    The default seed can be overridden via the BENCHMARK_SEED environment variable.

Logging:
    Benchmarks refuse to run with the ``rb_trees`` logger at DEBUG, since
    per-operation debug output would dominate the measurement.
"""

import gc
import logging
from typing import List, Optional, Tuple

import numpy as np

from benchmarks.config import BenchmarkConfig
from rb_trees.factory import create_rbtree
from rb_trees.logging_config import PROJECT_LOGGER, setup_logging
from rb_trees.rb_tree_base import RBTreeBase

CONFIG = BenchmarkConfig.from_env()

# Default seed for deterministic benchmarking - can be overridden via BENCHMARK_SEED
DEFAULT_BENCHMARK_SEED = CONFIG.seed

DISTRIBUTIONS = ('uniform', 'sequential', 'reversed', 'clustered', 'duplicates')


class BenchmarkUtils:
    """Utility class for ASV benchmarking operations.

    Generates deterministic key sets and pre-built trees so the timed
    sections only measure tree operations.
    """

    @staticmethod
    def check_logging_level():
        """Raise if the project logger would emit DEBUG records."""
        effective_level = logging.getLogger(PROJECT_LOGGER).getEffectiveLevel()
        if effective_level <= logging.DEBUG:
            raise ValueError(
                f"Logging level is set to {logging.getLevelName(effective_level)}. "
                "Benchmarks require logging to be at INFO level or higher to avoid "
                "performance contamination from verbose debug output."
            )

    @staticmethod
    def generate_deterministic_keys(size: int,
                                    seed: Optional[int] = None,
                                    key_range: Tuple[int, int] = (1, 1000000),
                                    distribution: str = 'uniform') -> List[int]:
        """
        Generate deterministic keys for benchmarking.

        Args:
            size: Number of keys to generate
            seed: Random seed for reproducibility. If None, uses DEFAULT_BENCHMARK_SEED.
            key_range: Range of key values (min, max)
            distribution: One of ``DISTRIBUTIONS``

        Returns:
            List of plain Python ints
        """
        if seed is None:
            seed = DEFAULT_BENCHMARK_SEED
        rng = np.random.default_rng(seed)
        min_key, max_key = key_range

        if distribution == 'uniform':
            if size > max_key - min_key + 1:
                raise ValueError("Not enough unique keys available to generate desired size")
            return rng.choice(np.arange(min_key, max_key + 1), size=size, replace=False).tolist()
        elif distribution == 'sequential':
            return list(range(min_key, min_key + size))
        elif distribution == 'reversed':
            return list(range(min_key + size - 1, min_key - 1, -1))
        elif distribution == 'clustered':
            # Five hot spots spread over the key range
            centers = np.linspace(min_key, max_key, 5)
            picks = rng.choice(centers, size=size)
            keys = rng.normal(picks, (max_key - min_key) / 100)
            return np.clip(keys, min_key, max_key).astype(np.int64).tolist()
        elif distribution == 'duplicates':
            # Roughly sqrt(n) distinct keys, each repeated many times
            distinct = max(1, int(np.sqrt(size)))
            return rng.integers(min_key, min_key + distinct, size=size).tolist()
        else:
            raise ValueError(f"Unknown distribution: {distribution}")

    @staticmethod
    def build_tree(keys: List[int]) -> RBTreeBase:
        """Build a natural-order tree holding ``value_<key>`` for each key."""
        tree = create_rbtree()
        for key in keys:
            tree.insert(key, f"value_{key}")
        return tree

    @staticmethod
    def create_lookup_keys(insert_keys: List[int],
                           hit_ratio: float = 0.8,
                           seed: Optional[int] = None,
                           num_lookups: int = 1000) -> List[int]:
        """
        Create keys for lookup operations with specified hit ratio.

        Misses are drawn from the gaps of the inserted key set and from
        beyond its maximum, so every miss walks a full root-to-leaf path.
        """
        if seed is None:
            seed = DEFAULT_BENCHMARK_SEED
        rng = np.random.default_rng(seed)

        if not insert_keys:
            return rng.integers(1, 1000001, size=num_lookups).tolist()

        num_hits = int(num_lookups * hit_ratio)
        num_misses = num_lookups - num_hits

        hit_keys = rng.choice(insert_keys, size=num_hits).tolist() if num_hits else []

        present = set(insert_keys)
        min_key, max_key = min(insert_keys), max(insert_keys)
        miss_keys = []
        while len(miss_keys) < num_misses:
            for key in rng.integers(min_key, 2 * max_key + 2, size=num_misses * 3).tolist():
                if key not in present:
                    miss_keys.append(key)
                    if len(miss_keys) == num_misses:
                        break

        lookup_keys = hit_keys + miss_keys
        rng.shuffle(lookup_keys)
        return lookup_keys

    @staticmethod
    def create_range_bounds(insert_keys: List[int],
                            width_ratio: float,
                            seed: Optional[int] = None,
                            num_queries: int = 100) -> List[Tuple[int, int]]:
        """Create ``(low, high)`` pairs spanning ``width_ratio`` of the key span."""
        if seed is None:
            seed = DEFAULT_BENCHMARK_SEED
        rng = np.random.default_rng(seed)
        lo, hi = min(insert_keys), max(insert_keys)
        width = max(0, int((hi - lo) * width_ratio))
        lows = rng.integers(lo, max(lo, hi - width) + 1, size=num_queries).tolist()
        return [(low, low + width) for low in lows]


class BaseBenchmark:
    """Base class for ASV benchmarks.

    Subclasses prepare their data in ``setup`` after calling
    ``super().setup(...)`` and then call ``gc.collect()`` and
    ``gc.disable()``. ``teardown`` re-enables garbage collection.
    """

    params = []
    param_names = []

    warmup_time = 0.0 if CONFIG.skip_warmup else 0.1
    sample_time = 0.4

    def setup(self, *params):
        setup_logging(level=CONFIG.log_level_value)
        BenchmarkUtils.check_logging_level()

    def teardown(self, *params):
        if not gc.isenabled():
            gc.enable()
