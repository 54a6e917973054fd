"""Navigation helpers for red-black trees.

Provides :class:`RBNavigationMixin`, a mixin class that adds ``minimum``,
``maximum``, ``successor``, ``predecessor``, ``first_greater`` and
``first_at_least`` to :class:`RBTreeBase`.

+---------------------------------+------------------------------------+
| Operation                       | Time                               |
+=================================+====================================+
| ``minimum`` / ``maximum``       | O(h) descent along one spine       |
| ``successor`` / ``predecessor`` | O(h) worst case, O(1) amortized    |
|                                 | across a full in-order walk        |
| ``first_greater``               | O(h) single descent                |
| ``first_at_least``              | O(h) single descent                |
+---------------------------------+------------------------------------+

The node-level methods take and return :class:`RBNodeBase` handles so a
caller can keep stepping from a position; the key-level methods return
:class:`Item` pairs. Boundaries are reported as ``None``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from rb_trees.base import Item

if TYPE_CHECKING:
    from rb_trees.rb_tree_base import RBNodeBase, RBTreeBase


class RBNavigationMixin:
    """Mixin that contributes navigation / positional queries to *RBTreeBase*."""

    def minimum(self: RBTreeBase) -> Optional[Item]:
        """Smallest (key, value) pair, or None if the tree is empty."""
        node = self.min_node()
        return None if node is None else node.item

    def maximum(self: RBTreeBase) -> Optional[Item]:
        """Largest (key, value) pair, or None if the tree is empty."""
        node = self.max_node()
        return None if node is None else node.item

    def min_node(self: RBTreeBase) -> Optional[RBNodeBase]:
        if self.root is self.nil:
            return None
        return self._subtree_min(self.root)

    def max_node(self: RBTreeBase) -> Optional[RBNodeBase]:
        if self.root is self.nil:
            return None
        return self._subtree_max(self.root)

    def successor(self: RBTreeBase, node: RBNodeBase) -> Optional[RBNodeBase]:
        """
        Returns the node following ``node`` in key order, or None if ``node``
        holds the largest key.

        Args:
            node: A live node of this tree.

        Raises:
            ValueError: If ``node`` is None or the sentinel, or (in debug
                mode) does not belong to this tree.
        """
        self._check_live_node(node, "successor")
        nil = self.nil
        if node.right is not nil:
            return self._subtree_min(node.right)

        parent = node.parent
        while parent is not nil and node is parent.right:
            node = parent
            parent = parent.parent
        return None if parent is nil else parent

    def predecessor(self: RBTreeBase, node: RBNodeBase) -> Optional[RBNodeBase]:
        """
        Returns the node preceding ``node`` in key order, or None if ``node``
        holds the smallest key.
        """
        self._check_live_node(node, "predecessor")
        nil = self.nil
        if node.left is not nil:
            return self._subtree_max(node.left)

        parent = node.parent
        while parent is not nil and node is parent.left:
            node = parent
            parent = parent.parent
        return None if parent is nil else parent

    def first_greater(self: RBTreeBase, key) -> Optional[Item]:
        """
        Returns the smallest pair whose key is strictly greater than ``key``,
        skipping every pair equal to ``key``. ``key`` need not be present.
        """
        node = self._first_greater_node(key)
        return None if node is None else node.item

    def first_at_least(self: RBTreeBase, key) -> Optional[Item]:
        """
        Returns the smallest pair whose key is greater than or equal to
        ``key``. Among duplicates this is the leftmost one in key order.
        """
        node = self._first_at_least_node(key)
        return None if node is None else node.item

    # Private Methods
    def _subtree_min(self: RBTreeBase, node: RBNodeBase) -> RBNodeBase:
        nil = self.nil
        while node.left is not nil:
            node = node.left
        return node

    def _subtree_max(self: RBTreeBase, node: RBNodeBase) -> RBNodeBase:
        nil = self.nil
        while node.right is not nil:
            node = node.right
        return node

    def _first_greater_node(self: RBTreeBase, key) -> Optional[RBNodeBase]:
        nil = self.nil
        less = self.less
        best = None
        node = self.root
        while node is not nil:
            if less(key, node.key):
                best = node
                node = node.left
            else:
                node = node.right
        return best

    def _first_at_least_node(self: RBTreeBase, key) -> Optional[RBNodeBase]:
        nil = self.nil
        less = self.less
        best = None
        node = self.root
        while node is not nil:
            if less(node.key, key):
                node = node.right
            else:
                best = node
                node = node.left
        return best

    def _check_live_node(self: RBTreeBase, node: RBNodeBase, op: str) -> None:
        from rb_trees import rb_tree_base

        if node is None or node is self.nil:
            raise ValueError(f"{op}(): expected a live node, got {node!r}")
        if not rb_tree_base.DEBUG:
            return

        # climb until this tree's root, a detached node, or any sentinel
        cur = node
        while cur is not None and cur.key is not rb_tree_base.NIL_KEY:
            if cur is self.root:
                return
            cur = cur.parent
        raise ValueError(f"{op}(): node {node!r} does not belong to this tree")
