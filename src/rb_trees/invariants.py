"""Shared invariant-checking utilities.

This module provides tree invariant validation that can be used by the
debug hooks of :class:`RBTreeBase`, the stats scripts, the benchmarks and
the test suite alike.
"""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING, Any, List, Optional, Tuple

from rb_trees.logging_config import get_logger

logger = get_logger(__name__)

if TYPE_CHECKING:
    from rb_trees.rb_tree_base import RBTreeBase
    from rb_trees.tree_stats import Stats

TREE_FLAGS = (
    "colors_valid",
    "sentinel_black",
    "root_black",
    "is_search_tree",
    "no_red_red",
    "black_height_uniform",
    "parent_links_valid",
)


class InvariantError(Exception):
    """Raised when a red-black tree invariant is violated."""


def assert_tree_invariants_raise(
    t: RBTreeBase,
    stats: Stats,
) -> None:
    """Check all invariants, raising :class:`InvariantError` on the first failure."""
    for flag in TREE_FLAGS:
        if not getattr(stats, flag):
            logger.error("Invariant failed: %s is False", flag)
            raise InvariantError(f"Invariant failed: {flag} is False")

    if not t.is_empty():
        if stats.node_count <= 0:
            raise InvariantError(f"Invariant failed: node_count={stats.node_count} ≤ 0 for non-empty tree")
        if stats.height <= 0:
            raise InvariantError(f"Invariant failed: height={stats.height} ≤ 0 for non-empty tree")
        if stats.least_item is None:
            raise InvariantError("Invariant failed: least_item is None for non-empty tree")
        if stats.greatest_item is None:
            raise InvariantError("Invariant failed: greatest_item is None for non-empty tree")
        # a red-black tree is never more than twice as tall as its black-height
        if stats.height > 2 * stats.black_height:
            raise InvariantError(
                f"Invariant failed: height={stats.height} > 2 * black_height={stats.black_height}"
            )

    black_height = t.validate()
    if black_height != stats.black_height:
        raise InvariantError(
            f"Invariant failed: t.validate()={black_height} ≠ stats.black_height={stats.black_height}"
        )


def check_keys_and_values(
    tree: RBTreeBase,
    expected_keys: Optional[List[Any]] = None,
) -> Tuple[List[Any], bool, bool]:
    """Traverse the tree in order and validate keys.

    Keys must be hashable when ``expected_keys`` is given; duplicates are
    compared as a multiset.

    Returns
    -------
    (keys, presence_ok, order_ok)
    """
    less = tree.less
    keys: List[Any] = []
    order_ok = True

    prev_key = None
    for i, key in enumerate(tree.keys()):
        if i > 0 and less(key, prev_key):
            order_ok = False
        keys.append(key)
        prev_key = key

    presence_ok = True
    if expected_keys is not None:
        if len(keys) != len(expected_keys):
            presence_ok = False
        else:
            presence_ok = Counter(keys) == Counter(expected_keys)

    return keys, presence_ok, order_ok
