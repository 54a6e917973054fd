"""RBTree factory module."""

import operator
from typing import Any, Callable, Optional, Type

from rb_trees.base import EqualsFn, LessFn
from rb_trees.rb_tree_base import RBNodeBase, RBTreeBase


def make_rbtree_classes(name: str, node_slots: tuple = ()) -> tuple[Type[RBTreeBase], Type[RBNodeBase]]:
    """
    Factory function to generate a red-black tree class whose nodes carry
    extra per-node fields.

    Args:
        name: Suffix used for the generated class names
        node_slots: Additional ``__slots__`` for the node class

    Returns:
        RBTreeX: Subclass of RBTreeBase with NodeClass=RBNodeX
        RBNodeX: Subclass of RBNodeBase with the extra slots
    """
    RBNodeX = type(
        f"RBNode_{name}",
        (RBNodeBase,),
        {"__slots__": tuple(node_slots)},
    )
    RBTreeX = type(
        f"RBTree_{name}",
        (RBTreeBase,),
        {"NodeClass": RBNodeX, "__slots__": ()},
    )
    return RBTreeX, RBNodeX


def create_rbtree(
    equals: Optional[EqualsFn] = None,
    less: Optional[LessFn] = None,
    tree_class: Type[RBTreeBase] = RBTreeBase,
) -> RBTreeBase:
    """
    Create a new empty red-black tree.

    Args:
        equals: Key equality predicate (default: ``operator.eq``)
        less: Strict less-than predicate (default: ``operator.lt``)
        tree_class: RBTreeBase subclass to instantiate

    Returns:
        A new empty tree ordered by (equals, less)
    """
    if equals is None:
        equals = operator.eq
    if less is None:
        less = operator.lt
    return tree_class(equals, less)


def create_rbtree_from_cmp(cmp: Callable[[Any, Any], int]) -> RBTreeBase:
    """Create a tree ordered by a three-way comparator (negative, zero, positive)."""
    if not callable(cmp):
        raise TypeError(f"create_rbtree_from_cmp(): cmp must be callable, got {type(cmp).__name__}")
    return create_rbtree(
        equals=lambda a, b: cmp(a, b) == 0,
        less=lambda a, b: cmp(a, b) < 0,
    )


def create_rbtree_from_key(key: Callable[[Any], Any]) -> RBTreeBase:
    """Create a tree ordering keys by ``key(k)`` under the natural order."""
    if not callable(key):
        raise TypeError(f"create_rbtree_from_key(): key must be callable, got {type(key).__name__}")
    return create_rbtree(
        equals=lambda a, b: key(a) == key(b),
        less=lambda a, b: key(a) < key(b),
    )
