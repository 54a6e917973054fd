"""Utility functions for testing red-black tree invariants."""

from typing import Optional

from rb_trees.invariants import TREE_FLAGS
from rb_trees.rb_tree_base import RBTreeBase
from rb_trees.tree_stats import Stats


def assert_tree_invariants_tc(tc, t: RBTreeBase, stats: Stats, err_msg: Optional[str] = "") -> None:
    """TestCase version: use inside unittest.TestCase methods."""
    for flag in TREE_FLAGS:
        tc.assertTrue(
            getattr(stats, flag),
            f"Invariant failed: {flag} is False \n\n{err_msg}"
        )

    tc.assertEqual(
        t.validate(), stats.black_height,
        f"Invariant failed: validate()={t.validate()} ≠ black_height={stats.black_height}\n\n{err_msg}"
    )

    if not t.is_empty():
        tc.assertGreater(
            stats.node_count, 0,
            f"Invariant failed: node_count={stats.node_count} ≤ 0 for non-empty tree\n\n{err_msg}"
        )
        tc.assertLessEqual(
            stats.height, 2 * stats.black_height,
            f"Invariant failed: height={stats.height} > 2 * black_height={stats.black_height}\n\n{err_msg}"
        )
        tc.assertIsNotNone(
            stats.least_item,
            f"Invariant failed: least_item is None for non-empty tree\n\n{err_msg}"
        )
        tc.assertIsNotNone(
            stats.greatest_item,
            f"Invariant failed: greatest_item is None for non-empty tree\n\n{err_msg}"
        )
        size = t.size()
        tc.assertEqual(size, stats.node_count,
                       f"Invariant failed: size()={size} ≠ node_count={stats.node_count}\n\n{err_msg}")
