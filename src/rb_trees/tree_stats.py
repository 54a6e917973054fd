"""Statistics and invariant flags for red-black trees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from rb_trees.base import BLACK, RED, Item
from rb_trees.logging_config import get_logger

if TYPE_CHECKING:
    from rb_trees.rb_tree_base import RBTreeBase

logger = get_logger(__name__)


@dataclass
class Stats:
    """Aggregated statistics for a red-black tree."""

    node_count: int
    height: int
    black_height: Optional[int]
    red_count: int
    black_count: int
    least_item: Optional[Item]
    greatest_item: Optional[Item]
    colors_valid: bool
    sentinel_black: bool
    root_black: bool
    is_search_tree: bool
    no_red_red: bool
    black_height_uniform: bool
    parent_links_valid: bool


def rbtree_stats_(t: Optional[RBTreeBase]) -> Stats:
    """
    Returns aggregated statistics for a red-black tree in **O(n)** time.

    ``height`` counts nodes on the longest root-to-sentinel path;
    ``black_height`` counts black nodes (root included) on every such path
    and is None when the paths disagree.
    """
    # ---------- empty tree return ---------------------------------
    if t is None or t.is_empty():
        return Stats(
            node_count=0,
            height=0,
            black_height=0,
            red_count=0,
            black_count=0,
            least_item=None,
            greatest_item=None,
            colors_valid=True,
            sentinel_black=t is None or t.nil.color == BLACK,
            root_black=True,
            is_search_tree=True,
            no_red_red=True,
            black_height_uniform=True,
            parent_links_valid=True,
        )

    nil = t.nil
    less = t.less
    root = t.root

    node_count = 0
    red_count = 0
    black_count = 0
    height = 0
    colors_valid = True
    no_red_red = True
    parent_links_valid = root.parent is nil
    path_black_counts = set()

    # ---------- structural pass (pre-order, explicit stack) -------
    stack = [(root, 1, 1 if root.color == BLACK else 0)]
    while stack:
        node, depth, blacks = stack.pop()
        node_count += 1
        if depth > height:
            height = depth

        if node.color == RED:
            red_count += 1
        elif node.color == BLACK:
            black_count += 1
        else:
            colors_valid = False

        for child in (node.left, node.right):
            if child is nil:
                path_black_counts.add(blacks)
                continue
            if child.parent is not node:
                parent_links_valid = False
            if node.color == RED and child.color == RED:
                no_red_red = False
            stack.append((child, depth + 1, blacks + (1 if child.color == BLACK else 0)))

    black_height_uniform = len(path_black_counts) == 1

    # ---------- ordering pass (in-order) --------------------------
    is_search_tree = True
    least = None
    prev = None
    for node in t.iter_nodes():
        if prev is None:
            least = node
        elif less(node.key, prev.key):
            is_search_tree = False
        prev = node

    stats = Stats(
        node_count=node_count,
        height=height,
        black_height=next(iter(path_black_counts)) if black_height_uniform else None,
        red_count=red_count,
        black_count=black_count,
        least_item=least.item,
        greatest_item=prev.item,
        colors_valid=colors_valid,
        sentinel_black=nil.color == BLACK,
        root_black=root.color == BLACK,
        is_search_tree=is_search_tree,
        no_red_red=no_red_red,
        black_height_uniform=black_height_uniform,
        parent_links_valid=parent_links_valid,
    )
    logger.debug("rbtree_stats_: %s", stats)
    return stats
