"""
rb_trees — Red-black ordered key-value trees.

Quick-start imports::

    from rb_trees import create_rbtree

    tree = create_rbtree()
    tree.insert(15, "fifteen")
    tree.search(15)          # Item(key=15, value='fifteen')
"""

# Shared primitives
from rb_trees.base import BLACK, RED, AbstractSortedMap, Color, Item

# Display
from rb_trees.display import print_pretty, print_structure
from rb_trees.factory import (
    create_rbtree,
    create_rbtree_from_cmp,
    create_rbtree_from_key,
    make_rbtree_classes,
)

# Invariants & stats
from rb_trees.invariants import (
    InvariantError,
    assert_tree_invariants_raise,
    check_keys_and_values,
)

# Red-black tree
from rb_trees.rb_tree_base import NIL_KEY, RBNodeBase, RBTreeBase
from rb_trees.tree_stats import Stats, rbtree_stats_

__all__ = [
    # Primitives
    "BLACK",
    "NIL_KEY",
    "RED",
    "AbstractSortedMap",
    "Color",
    # Invariants & stats
    "InvariantError",
    "Item",
    # Red-black tree
    "RBNodeBase",
    "RBTreeBase",
    "Stats",
    "assert_tree_invariants_raise",
    "check_keys_and_values",
    "create_rbtree",
    "create_rbtree_from_cmp",
    "create_rbtree_from_key",
    "make_rbtree_classes",
    # Display
    "print_pretty",
    "print_structure",
    "rbtree_stats_",
]
