"""Red-black tree base implementation"""

from __future__ import annotations

import os
from typing import Any, Optional, Tuple, Type

from rb_trees.base import (
    BLACK,
    RED,
    AbstractSortedMap,
    Color,
    EqualsFn,
    Item,
    LessFn,
    debug_log,
)
from rb_trees.navigation import RBNavigationMixin
from rb_trees.traversal import RBTraversalMixin


class _NilKey:
    """Reserved key marker carried only by a tree's sentinel node."""
    __slots__ = ()

    def __repr__(self):
        return "NIL"


NIL_KEY = _NilKey()

# Re-check every invariant after each insert/delete when enabled
DEBUG = os.environ.get("RB_TREES_DEBUG", "").lower() in ("1", "true", "yes")


class RBNodeBase:
    """
    A red-black tree node. Links point to other nodes of the same tree or to
    that tree's sentinel, never to None while the node is live.
    """
    __slots__ = ("key", "value", "color", "left", "right", "parent")

    def __init__(
        self,
        key: Any,
        value: Any = None,
        color: Color = RED,
        nil: Optional[RBNodeBase] = None,
    ) -> None:
        self.key = key
        self.value = value
        self.color = color
        self.left = nil
        self.right = nil
        self.parent = nil

    @property
    def item(self) -> Item:
        return Item(self.key, self.value)

    def is_red(self) -> bool:
        return self.color == RED

    def is_black(self) -> bool:
        return self.color == BLACK

    def __repr__(self):
        return f"{self.__class__.__name__}(key={self.key!r}, value={self.value!r}, color={self.color.name})"


def _make_sentinel(NodeClass: Type[RBNodeBase]) -> RBNodeBase:
    nil = NodeClass(NIL_KEY, None, BLACK)
    nil.left = nil
    nil.right = nil
    nil.parent = nil
    return nil


class RBTreeBase(RBNavigationMixin, RBTraversalMixin, AbstractSortedMap):
    """
    A red-black tree ordered by an explicit (equals, less) predicate pair.

    Attributes:
        root (RBNodeBase): The root node, or ``nil`` when the tree is empty.
        nil (RBNodeBase): This tree's private sentinel. Always black.
        equals (Callable): Key equality predicate.
        less (Callable): Strict less-than predicate consistent with ``equals``.
    """
    __slots__ = ("root", "nil", "equals", "less")

    NodeClass: Type[RBNodeBase] = RBNodeBase

    def __init__(self, equals: EqualsFn, less: LessFn) -> None:
        if not callable(equals) or not callable(less):
            raise TypeError("RBTreeBase(): equals and less must be callable")
        self.nil: RBNodeBase = _make_sentinel(self.NodeClass)
        self.root: RBNodeBase = self.nil
        self.equals = equals
        self.less = less

    def is_empty(self) -> bool:
        return self.root is self.nil

    def __str__(self):
        return "Empty RBTree" if self.is_empty() else f"RBTree(root={self.root})"

    __repr__ = __str__

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key) -> bool:
        return self.find_node(key) is not None

    # Public API
    def search(self, key) -> Optional[Item]:
        """
        Public method (O(log n)): Look up a key.

        With duplicate keys this returns the first equal node met while
        descending from the root, which is not necessarily the one inserted
        first.

        Returns:
            Optional[Item]: The (key, value) pair if found, otherwise None.
        """
        node = self.find_node(key)
        return None if node is None else node.item

    def find_node(self, key) -> Optional[RBNodeBase]:
        """Return the node :meth:`search` would report, or None."""
        nil = self.nil
        equals = self.equals
        less = self.less
        node = self.root
        while node is not nil:
            if equals(key, node.key):
                return node
            node = node.left if less(key, node.key) else node.right
        return None

    def insert(self, key, value=None) -> None:
        """
        Public method (O(log n)): Insert a key-value pair.

        Equal keys are allowed; a new duplicate is placed to the right of the
        existing equal keys.
        """
        nil = self.nil
        less = self.less

        parent = nil
        cur = self.root
        go_left = False
        while cur is not nil:
            parent = cur
            go_left = less(key, cur.key)
            cur = cur.left if go_left else cur.right

        node = self.NodeClass(key, value, RED, nil)
        node.parent = parent
        if parent is nil:
            self.root = node
        elif go_left:
            parent.left = node
        else:
            parent.right = node

        self._insert_fixup(node)

        if DEBUG:
            self.check_invariants()

    def delete(self, key) -> Optional[Item]:
        """
        Public method (O(log n)): Remove one pair whose key equals ``key``.

        Returns:
            Optional[Item]: The removed (key, value) pair, or None if no such
            key exists (the tree is left unchanged).
        """
        z = self.find_node(key)
        if z is None:
            debug_log("delete(): key %r not found", key)
            return None

        removed = z.item
        self._delete_node(z)

        if DEBUG:
            self.check_invariants()
        return removed

    def rotate_left(self, x: RBNodeBase) -> None:
        """Re-root the subtree at ``x`` on its right child. Colours are untouched."""
        nil = self.nil
        y = x.right
        x.right = y.left
        if y.left is not nil:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is nil:
            self.root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def rotate_right(self, x: RBNodeBase) -> None:
        """Re-root the subtree at ``x`` on its left child. Colours are untouched."""
        nil = self.nil
        y = x.left
        x.left = y.right
        if y.right is not nil:
            y.right.parent = x
        y.parent = x.parent
        if x.parent is nil:
            self.root = y
        elif x is x.parent.right:
            x.parent.right = y
        else:
            x.parent.left = y
        y.right = x
        x.parent = y

    # Diagnostics
    def size(self) -> int:
        """Number of stored pairs, counted by a full traversal (O(n))."""
        count = 0
        for _ in self.iter_nodes():
            count += 1
        return count

    def depth(self) -> Tuple[int, int]:
        """
        Returns (max_depth, black_depth): the largest number of nodes and the
        largest number of black nodes on any root-to-sentinel path.
        """
        nil = self.nil
        if self.root is nil:
            return 0, 0

        max_depth = 0
        max_black = 0
        stack = [(self.root, 1, 1 if self.root.color == BLACK else 0)]
        while stack:
            node, d, b = stack.pop()
            if d > max_depth:
                max_depth = d
            if b > max_black:
                max_black = b
            for child in (node.left, node.right):
                if child is not nil:
                    stack.append((child, d + 1, b + (1 if child.color == BLACK else 0)))
        return max_depth, max_black

    def validate(self) -> Optional[int]:
        """
        Check that every node sees the same number of black nodes on all of
        its paths down to the sentinel.

        Returns:
            Optional[int]: The black-height of the root (root included), or
            None at the first mismatch found.
        """
        nil = self.nil
        root = self.root
        if root is nil:
            return 0

        heights = {}
        stack = [(root, False)]
        while stack:
            node, expanded = stack.pop()
            if not expanded:
                stack.append((node, True))
                if node.right is not nil:
                    stack.append((node.right, False))
                if node.left is not nil:
                    stack.append((node.left, False))
                continue

            left_h = heights.pop(node.left, 0)
            right_h = heights.pop(node.right, 0)
            if left_h != right_h:
                debug_log(
                    "validate(): black-height mismatch at key %r (left=%d, right=%d)",
                    node.key, left_h, right_h,
                )
                return None
            heights[node] = left_h + (1 if node.color == BLACK else 0)

        return heights[root]

    def check_invariants(self) -> None:
        """Verify all red-black invariants, raising InvariantError on failure."""
        # Lazy imports to break circular dependency
        from rb_trees.invariants import assert_tree_invariants_raise
        from rb_trees.tree_stats import rbtree_stats_

        assert_tree_invariants_raise(self, rbtree_stats_(self))

    def print_structure(self, indent: int = 0, max_depth: int = 64) -> str:
        from rb_trees.display import print_structure

        return print_structure(self, indent, max_depth)

    # Private Methods
    def _insert_fixup(self, x: RBNodeBase) -> None:
        """Restore the colour invariants after attaching the red node ``x``."""
        while x is not self.root and x.parent.color == RED:
            parent = x.parent
            grandparent = parent.parent
            if parent is grandparent.left:
                uncle = grandparent.right
                if uncle.color == RED:
                    parent.color = BLACK
                    uncle.color = BLACK
                    grandparent.color = RED
                    x = grandparent
                    continue
                if x is parent.right:
                    # inner child: turn it into an outer one first
                    x = parent
                    self.rotate_left(x)
                    parent = x.parent
                parent.color = BLACK
                grandparent.color = RED
                self.rotate_right(grandparent)
            else:
                uncle = grandparent.left
                if uncle.color == RED:
                    parent.color = BLACK
                    uncle.color = BLACK
                    grandparent.color = RED
                    x = grandparent
                    continue
                if x is parent.left:
                    x = parent
                    self.rotate_right(x)
                    parent = x.parent
                parent.color = BLACK
                grandparent.color = RED
                self.rotate_left(grandparent)

        self.root.color = BLACK

    def _delete_node(self, z: RBNodeBase) -> None:
        """Splice out ``z`` (or its successor, whose pair then moves into ``z``)."""
        nil = self.nil

        if z.left is nil or z.right is nil:
            y = z
        else:
            y = self._subtree_min(z.right)

        x = y.left if y.left is not nil else y.right

        # x may be the sentinel; its parent field then records where y was
        x.parent = y.parent
        if y.parent is nil:
            self.root = x
        elif y is y.parent.left:
            y.parent.left = x
        else:
            y.parent.right = x

        if y is not z:
            z.key = y.key
            z.value = y.value

        if y.color == BLACK:
            self._delete_fixup(x)

        nil.parent = nil
        y.left = y.right = y.parent = None

    def _delete_fixup(self, x: RBNodeBase) -> None:
        """Restore equal black-heights after a black node was removed above ``x``."""
        while x is not self.root and x.color == BLACK:
            parent = x.parent
            if x is parent.left:
                w = parent.right
                if w.color == RED:
                    w.color = BLACK
                    parent.color = RED
                    self.rotate_left(parent)
                    w = parent.right
                if w.left.color == BLACK and w.right.color == BLACK:
                    w.color = RED
                    x = parent
                else:
                    if w.right.color == BLACK:
                        w.left.color = BLACK
                        w.color = RED
                        self.rotate_right(w)
                        w = parent.right
                    w.color = parent.color
                    parent.color = BLACK
                    w.right.color = BLACK
                    self.rotate_left(parent)
                    x = self.root
            else:
                w = parent.left
                if w.color == RED:
                    w.color = BLACK
                    parent.color = RED
                    self.rotate_right(parent)
                    w = parent.left
                if w.right.color == BLACK and w.left.color == BLACK:
                    w.color = RED
                    x = parent
                else:
                    if w.left.color == BLACK:
                        w.right.color = BLACK
                        w.color = RED
                        self.rotate_left(w)
                        w = parent.left
                    w.color = parent.color
                    parent.color = BLACK
                    w.left.color = BLACK
                    self.rotate_right(parent)
                    x = self.root

        x.color = BLACK
