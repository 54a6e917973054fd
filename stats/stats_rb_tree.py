"""Statistics for red-black trees."""

import argparse
import logging
import math
import os
import time
from datetime import datetime
from statistics import mean

import numpy as np

from rb_trees.factory import create_rbtree
from rb_trees.invariants import assert_tree_invariants_raise
from rb_trees.logging_config import PROJECT_LOGGER
from rb_trees.rb_tree_base import RBTreeBase
from rb_trees.tree_stats import rbtree_stats_

logger = logging.getLogger(__name__)


def random_rbtree_of_size(n: int, rng: np.random.Generator, duplicates: bool = False) -> RBTreeBase:
    """Build a tree from ``n`` random keys, inserted in random order.

    Keys are distinct unless ``duplicates`` is set, in which case they are
    drawn with replacement from a range of ``n // 4 + 1`` values.
    """
    space = 1 << 24
    if space <= n:
        raise ValueError(f"Key-space too small! Required: {n + 1}, Available: {space}")

    if duplicates:
        keys = rng.integers(0, n // 4 + 1, size=n)
    else:
        keys = rng.choice(space, size=n, replace=False)

    tree = create_rbtree()
    tree_insert = tree.insert
    for key in keys.tolist():
        tree_insert(key, "val")
    return tree


def _avg_var(values):
    avg = mean(values)
    return avg, mean((v - avg) ** 2 for v in values)


def repeated_experiment(size: int, repetitions: int, rng: np.random.Generator, duplicates: bool = False) -> None:
    """
    Repeatedly builds random trees of ``size`` keys and logs the mean and
    variance of their shape next to the ``log2(n + 1)`` reference.
    """
    t_all_0 = time.perf_counter()

    results = []
    times_build = []
    times_stats = []

    for _ in range(repetitions):
        t0 = time.perf_counter()
        tree = random_rbtree_of_size(size, rng, duplicates)
        times_build.append(time.perf_counter() - t0)

        t0 = time.perf_counter()
        stats = rbtree_stats_(tree)
        times_stats.append(time.perf_counter() - t0)

        assert_tree_invariants_raise(tree, stats)
        results.append(stats)

    # Perfect height of a complete binary tree with ``size`` nodes
    perfect_height = math.log2(size + 1)

    avg_height, var_height = _avg_var([s.height for s in results])
    avg_bh, var_bh = _avg_var([s.black_height for s in results])
    avg_red, var_red = _avg_var([s.red_count / s.node_count if s.node_count else 0 for s in results])
    avg_amp, var_amp = _avg_var([s.height / perfect_height if perfect_height else 0 for s in results])

    rows = [
        ("Node count", size, None),
        ("Height", avg_height, var_height),
        ("Black height", avg_bh, var_bh),
        ("Red fraction", avg_red, var_red),
        ("log2(n + 1)", perfect_height, None),
        ("Height bound", 2 * perfect_height, None),
        ("Height amplification", avg_amp, var_amp),
    ]

    header = f"{'Metric':<20} {'Avg':>15} {'(Var)':>15}"
    sep_line = "-" * len(header)

    logger.info(header)
    logger.info(sep_line)
    for name, avg, var in rows:
        if var is None:
            logger.info(f"{name:<20} {avg:>15.2f}")
        else:
            var_str = f"({var:.2f})"
            logger.info(f"{name:<20} {avg:15.2f} {var_str:>15}")

    avg_build_time, var_build_time = _avg_var(times_build)
    avg_stats_time, var_stats_time = _avg_var(times_stats)
    sum_build = sum(times_build)
    sum_stats = sum(times_stats)
    total_sum = sum_build + sum_stats

    perf_rows = [
        ("Build time (s)", avg_build_time, var_build_time, sum_build,
         (sum_build / total_sum * 100) if total_sum else 0),
        ("Stats time (s)", avg_stats_time, var_stats_time, sum_stats,
         (sum_stats / total_sum * 100) if total_sum else 0),
    ]

    header = f"{'Metric':<20}{'Avg(s)':>13}{'Var(s)':>13}{'Total(s)':>13}{'%Total':>10}"
    sep = "-" * len(header)

    logger.info("")
    logger.info("Performance summary:")
    logger.info(header)
    logger.info(sep)
    for name, avg, var, total, pct in perf_rows:
        logger.info(f"{name:<20}{avg:13.6f}{var:13.6f}{total:13.6f}{pct:10.2f}%")

    logger.info(sep)
    logger.info("Execution time: %.3f seconds", time.perf_counter() - t_all_0)


def main():
    parser = argparse.ArgumentParser(description="Run shape statistics experiments for red-black trees.")
    parser.add_argument(
        "--sizes", type=int, nargs="+", default=[10, 100, 1000, 10_000], help="List of tree sizes to test."
    )
    parser.add_argument("--repetitions", type=int, default=10, help="Number of repetitions for each experiment.")
    parser.add_argument("--duplicates", action="store_true", help="Draw keys with heavy duplication.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility.")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="INFO",
        help="Set the logging level (default: INFO)",
    )
    args = parser.parse_args()

    rng = np.random.default_rng(args.seed)

    log_dir = os.path.join(os.getcwd(), "stats/logs/rb_tree_logs")
    os.makedirs(log_dir, exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_path = os.path.join(log_dir, f"run_{ts}.log")

    log_level = getattr(logging, args.log_level)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.FileHandler(log_path, mode="w"),
            logging.StreamHandler(),
        ],
        force=True,
    )
    logging.getLogger(PROJECT_LOGGER).setLevel(log_level)

    for n in args.sizes:
        logger.info("")
        logger.info(
            f"---------------- NOW RUNNING EXPERIMENT: n = {n}, repetitions = {args.repetitions} ----------------"
        )
        t0 = time.perf_counter()
        repeated_experiment(size=n, repetitions=args.repetitions, rng=rng, duplicates=args.duplicates)
        logger.info(f"Total experiment time: {time.perf_counter() - t0:.3f} seconds")


if __name__ == "__main__":
    main()
