"""
Benchmarks package for red-black trees.

This package contains ASV benchmarks for performance testing of:
- RBTreeBase batch construction via insert
- search() with configurable hit ratios
- delete() drain workloads
- range_query() over intervals of varying width

The benchmarks are designed to be robust against CPU and memory load variations
by using multiple iterations, deterministic test data, and garbage collection
disabled during the timed sections.
"""

from .benchmark_utils import BaseBenchmark, BenchmarkUtils

__all__ = ["BaseBenchmark", "BenchmarkUtils"]
