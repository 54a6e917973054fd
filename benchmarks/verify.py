"""Correctness verification for benchmark data structures.

Nothing in here is timed; benchmarks call these helpers after the
measured section to make sure the tree they timed is still valid.
"""

import logging
from typing import List, Optional, Tuple

from rb_trees.invariants import TREE_FLAGS, check_keys_and_values
from rb_trees.rb_tree_base import RBTreeBase
from rb_trees.tree_stats import Stats, rbtree_stats_

logger = logging.getLogger(__name__)


def verify_invariants(tree: RBTreeBase, stats: Optional[Stats] = None) -> bool:
    """
    Check all tree invariants without raising.

    Args:
        tree: The tree to verify
        stats: Precomputed statistics; computed here when omitted

    Returns:
        True if all invariants pass, False otherwise
    """
    if stats is None:
        stats = rbtree_stats_(tree)
    all_passed = True

    for flag in TREE_FLAGS:
        if not getattr(stats, flag):
            logger.error("Invariant failed: %s is False", flag)
            all_passed = False

    if not tree.is_empty():
        if stats.node_count <= 0:
            logger.error(
                "Invariant failed: node_count=%d ≤ 0 for non-empty tree",
                stats.node_count
            )
            all_passed = False
        if stats.black_height is None or stats.height > 2 * stats.black_height:
            logger.error(
                "Invariant failed: height=%d exceeds twice black_height=%s",
                stats.height, stats.black_height
            )
            all_passed = False
        if stats.least_item is None or stats.greatest_item is None:
            logger.error("Invariant failed: missing extreme item for non-empty tree")
            all_passed = False

    return all_passed


def verify_keys(tree: RBTreeBase, expected_keys: Optional[List] = None) -> Tuple[List, bool]:
    """
    Verify key ordering and, if given, the exact key multiset.

    Returns:
        (keys, ok)
    """
    keys, presence_ok, order_ok = check_keys_and_values(tree, expected_keys)
    if not order_ok:
        logger.error("Keys out of order after benchmark run")
    if not presence_ok:
        logger.error(
            "Key multiset mismatch: got %d keys, expected %d",
            len(keys), len(expected_keys)
        )
    return keys, presence_ok and order_ok
