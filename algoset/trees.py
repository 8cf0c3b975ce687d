"""Binary trees: rebuilding from a depth-dashed preorder string and value recovery."""

from __future__ import annotations

import re
from dataclasses import dataclass

_ENTRY_PATTERN = re.compile(r"(-*)(\d+)")


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def _entries(traversal: str) -> list[tuple[int, int]]:
    entries = []
    position = 0
    while position < len(traversal):
        match = _ENTRY_PATTERN.match(traversal, position)
        if match is None:
            raise ValueError(f"malformed traversal at position {position}")
        entries.append((len(match.group(1)), int(match.group(2))))
        position = match.end()
    return entries


def recover_from_preorder(traversal: str) -> TreeNode | None:
    """Rebuild a tree from a preorder listing where each value follows as many dashes as its depth.

    A single child is always a left child. Parsing stops at the first entry
    that cannot be placed; an empty string gives None.
    """
    entries = _entries(traversal)
    if not entries or entries[0][0] != 0:
        return None
    root = TreeNode(entries[0][1])
    path = [root]
    for depth, value in entries[1:]:
        if depth == 0 or depth > len(path):
            break
        del path[depth:]
        parent = path[-1]
        node = TreeNode(value)
        if parent.left is None:
            parent.left = node
        elif parent.right is None:
            parent.right = node
        else:
            break
        path.append(node)
    return root


class ContaminatedTree:
    """Values of a tree relabelled as root 0, left child 2x+1 and right child 2x+2."""

    def __init__(self, root: TreeNode | None) -> None:
        self._values: set[int] = set()
        stack = [(root, 0)] if root is not None else []
        while stack:
            node, value = stack.pop()
            self._values.add(value)
            if node.left is not None:
                stack.append((node.left, 2 * value + 1))
            if node.right is not None:
                stack.append((node.right, 2 * value + 2))

    def find(self, target: int) -> bool:
        """Return whether ``target`` is a value of the recovered tree."""
        return target in self._values

    def __contains__(self, target: object) -> bool:
        return target in self._values

    def __len__(self) -> int:
        return len(self._values)