"""Ordered traversal and range queries for red-black trees.

All walks simulate the in-order recursion with an explicit stack, so a
malformed (overly deep) tree cannot exhaust the interpreter's recursion
limit. Generators are lazy and independent: every call starts a fresh walk
and no cursor state is kept on the tree.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterator, List, Optional

from rb_trees.base import Item, VisitFn

if TYPE_CHECKING:
    from rb_trees.rb_tree_base import RBNodeBase, RBTreeBase


class RBTraversalMixin:
    """Mixin that contributes iteration and range scans to *RBTreeBase*."""

    def iter_nodes(self: RBTreeBase, reverse: bool = False) -> Iterator[RBNodeBase]:
        """Yield every node in ascending (or descending) key order."""
        nil = self.nil
        stack = []
        node = self.root
        if not reverse:
            while stack or node is not nil:
                while node is not nil:
                    stack.append(node)
                    node = node.left
                node = stack.pop()
                yield node
                node = node.right
        else:
            while stack or node is not nil:
                while node is not nil:
                    stack.append(node)
                    node = node.right
                node = stack.pop()
                yield node
                node = node.left

    def iter_items(self: RBTreeBase, reverse: bool = False) -> Iterator[Item]:
        for node in self.iter_nodes(reverse):
            yield node.item

    def __iter__(self) -> Iterator[Item]:
        return self.iter_items()

    def __reversed__(self) -> Iterator[Item]:
        return self.iter_items(reverse=True)

    def items(self) -> Iterator[Item]:
        return self.iter_items()

    def keys(self: RBTreeBase) -> Iterator[Any]:
        for node in self.iter_nodes():
            yield node.key

    def values(self: RBTreeBase) -> Iterator[Any]:
        for node in self.iter_nodes():
            yield node.value

    def traverse(self: RBTreeBase, fn: VisitFn, reverse: bool = False) -> None:
        """Call ``fn(key, value)`` for every pair in key order."""
        for node in self.iter_nodes(reverse):
            fn(node.key, node.value)

    def iter_range(self: RBTreeBase, low, high) -> Iterator[Item]:
        """
        Lazily yield the pairs with ``low <= key <= high`` in ascending order.

        Subtrees lying entirely below ``low`` are never entered and the walk
        stops at the first key above ``high``, so the cost is O(h + m) for m
        matches. Nothing is yielded when ``high < low``.
        """
        for node in self._iter_range_nodes(low, high):
            yield node.item

    def range_query(self: RBTreeBase, fn: VisitFn, low, high) -> None:
        """Call ``fn(key, value)`` once per pair in the closed interval [low, high]."""
        for node in self._iter_range_nodes(low, high):
            fn(node.key, node.value)

    def list(self: RBTreeBase, low=None, high=None) -> List[Item]:
        """
        Materialize the pairs in [low, high] as a list. A missing bound
        defaults to the tree's smallest (largest) key.
        """
        if self.root is self.nil:
            return []
        if low is None:
            low = self._subtree_min(self.root).key
        if high is None:
            high = self._subtree_max(self.root).key
        return [node.item for node in self._iter_range_nodes(low, high)]

    def list_keys(self: RBTreeBase, low=None, high=None) -> List[Any]:
        return [item.key for item in self.list(low, high)]

    def iter_from(self: RBTreeBase, start: Optional[RBNodeBase] = None) -> Iterator[RBNodeBase]:
        """Walk forward from ``start`` (default: the minimum) using successor links."""
        node = self.min_node() if start is None else start
        while node is not None:
            yield node
            node = self.successor(node)

    # Private Methods
    def _iter_range_nodes(self: RBTreeBase, low, high) -> Iterator[RBNodeBase]:
        nil = self.nil
        less = self.less
        stack = []
        node = self.root
        while True:
            while node is not nil:
                if less(node.key, low):
                    # node and its whole left subtree lie below the interval
                    node = node.right
                else:
                    stack.append(node)
                    node = node.left
            if not stack:
                return
            node = stack.pop()
            if less(high, node.key):
                return
            yield node
            node = node.right
