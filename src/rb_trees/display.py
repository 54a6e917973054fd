"""Pretty-printing and display utilities for red-black trees."""

from __future__ import annotations

import collections
from typing import TYPE_CHECKING, Any, List, Optional

from rb_trees.base import RED

if TYPE_CHECKING:
    from rb_trees.rb_tree_base import RBTreeBase


# ANSI colour codes
PRIMARY = '\033[31m'    # red nodes
SECONDARY = '\033[2m'   # dimmed depth labels
RESET = '\033[0m'


def print_pretty(tree: Optional[RBTreeBase], color: bool = True) -> str:
    """
    Renders a red-black tree so:
      • Lines go from the root (depth 0) downwards.
      • Every node sits in the column of its in-order position, so keys
        read left→right in sorted order and children fall under parents.
      • All columns have the same width.
      • Red nodes are printed in red (or suffixed with ``*`` when
        ``color`` is False); black nodes are plain.
    """
    from rb_trees.rb_tree_base import RBTreeBase

    if tree is None:
        return f"{type(tree).__name__}: None"

    if not isinstance(tree, RBTreeBase):
        raise TypeError(f"print_pretty() expects RBTreeBase, got {type(tree).__name__}")

    tree_type = type(tree).__name__
    if tree.is_empty():
        return f"{tree_type}: Empty"

    # 1) First pass: in-order walk recording (column, text, is_red) per depth
    nil = tree.nil
    layers_raw = collections.defaultdict(list)
    max_len = 0
    column = 0
    stack = []
    node, depth = tree.root, 0
    while stack or node is not nil:
        while node is not nil:
            stack.append((node, depth))
            node, depth = node.left, depth + 1
        node, depth = stack.pop()
        text = repr(node.key)
        if not color and node.color == RED:
            text += "*"
        layers_raw[depth].append((column, text, node.color == RED))
        max_len = max(max_len, len(text))
        column += 1
        node, depth = node.right, depth + 1

    # 2) Define a fixed column width: widest text + 1 space padding
    column_width = max_len + 1

    # 3) Build each line, padding before colouring so widths stay aligned
    label_width = len(f"Depth {max(layers_raw)}")
    out_lines = []
    for depth in sorted(layers_raw):
        cursor = 0
        parts = []
        for col, text, is_red in layers_raw[depth]:
            parts.append(" " * ((col - cursor) * column_width))
            cell = text.center(column_width)
            parts.append(f"{PRIMARY}{cell}{RESET}" if color and is_red else cell)
            cursor = col + 1
        label = f"Depth {depth}".ljust(label_width)
        if color:
            label = f"{SECONDARY}{label}{RESET}"
        out_lines.append(f"{label}: {''.join(parts).rstrip()}")

    return tree_type + "\n" + "\n".join(out_lines) + "\n"


def collect_keys(tree: RBTreeBase) -> List[Any]:
    """Collect all keys of a red-black tree in ascending order."""
    return list(tree.keys())


def print_structure(tree: Optional[RBTreeBase], indent: int = 0, max_depth: int = 64) -> str:
    """Return a debugging-oriented structural dump of a red-black tree.

    One node per line, children indented under their parent (left first),
    with colour and value. A sentinel child is shown as ``NIL`` when its
    sibling is a real node.
    """
    prefix = ' ' * indent
    if tree is None or tree.is_empty():
        return f"{prefix}Empty {tree.__class__.__name__}"

    nil = tree.nil
    lines = []
    stack = [(tree.root, 0, "Root")]
    while stack:
        node, depth, side = stack.pop()
        pad = prefix + "    " * depth
        if depth > max_depth:
            lines.append(f"{pad}... (max depth reached)")
            continue
        if node is nil:
            lines.append(f"{pad}{side}: NIL")
            continue
        lines.append(f"{pad}{side}: {node.key!r} ({node.color.name}) value={node.value!r}")
        if node.left is nil and node.right is nil:
            continue
        stack.append((node.right, depth + 1, "R"))
        stack.append((node.left, depth + 1, "L"))
    return "\n".join(lines)
