#!/usr/bin/env python3
"""
Script to compare tree shape and rebalancing work across insertion orders.

For each key count and order the tree is built under cProfile, and the
resulting height, black-height and rotation count are printed next to
the ``2 * log2(n + 1)`` height bound.
"""
import argparse
import cProfile
import math
import pstats
import time
from typing import Dict, List

import numpy as np
from tqdm import tqdm

from rb_trees.factory import create_rbtree
from rb_trees.invariants import assert_tree_invariants_raise
from rb_trees.tree_stats import rbtree_stats_

ORDERS = ("ascending", "descending", "random", "duplicates")


def make_keys(order: str, count: int, rng: np.random.Generator) -> List[int]:
    if order == "ascending":
        return list(range(count))
    if order == "descending":
        return list(range(count - 1, -1, -1))
    if order == "random":
        return rng.permutation(count).tolist()
    if order == "duplicates":
        return rng.integers(0, max(1, count // 16), size=count).tolist()
    raise ValueError(f"Unknown insertion order: {order}")


def count_rotations(profiler: cProfile.Profile) -> int:
    ps = pstats.Stats(profiler)
    return sum(
        stat[1]
        for (_, _, func_name), stat in ps.stats.items()
        if func_name in ("rotate_left", "rotate_right")
    )


def analyze(order: str, count: int, rng: np.random.Generator) -> Dict[str, float]:
    keys = make_keys(order, count, rng)
    tree = create_rbtree()
    tree_insert = tree.insert

    profiler = cProfile.Profile()
    t0 = time.perf_counter()
    profiler.enable()
    for key in keys:
        tree_insert(key)
    profiler.disable()
    elapsed = time.perf_counter() - t0

    stats = rbtree_stats_(tree)
    assert_tree_invariants_raise(tree, stats)
    return {
        "height": stats.height,
        "black_height": stats.black_height,
        "red_count": stats.red_count,
        "rotations": count_rotations(profiler),
        "seconds": elapsed,
    }


def main():
    parser = argparse.ArgumentParser(description="Compare red-black tree shape across insertion orders.")
    parser.add_argument("--counts", type=int, nargs="+", default=[100, 1000, 10_000])
    parser.add_argument("--orders", nargs="+", choices=ORDERS, default=list(ORDERS))
    parser.add_argument("--seed", type=int, default=1)
    args = parser.parse_args()

    rng = np.random.default_rng(args.seed)
    rows = []
    for count in tqdm(args.counts, desc="Counts"):
        for order in tqdm(args.orders, desc=f"Orders for n={count}", leave=False):
            rows.append((count, order, analyze(order, count, rng)))

    header = f"{'n':>7} | {'order':<11} | {'height':>6} | {'bound':>6} | {'bh':>3} | {'red':>6} | {'rot':>7} | {'rot/n':>6} | {'time(s)':>8}"
    print(header)
    print("-" * len(header))
    for count, order, r in rows:
        bound = 2 * math.log2(count + 1)
        print(
            f"{count:7d} | {order:<11} | {r['height']:6d} | {bound:6.1f} | {r['black_height']:3d} | "
            f"{r['red_count']:6d} | {r['rotations']:7d} | {r['rotations'] / count:6.3f} | {r['seconds']:8.4f}"
        )


if __name__ == "__main__":
    main()
