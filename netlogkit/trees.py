"""Binary trees, a binary search tree with level bookkeeping, and traversals."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, List, Optional, Union

__all__ = ["TraversalOrder", "TreeNode", "BinaryTree", "BST"]


class TraversalOrder(Enum):
    """The ways a tree can be walked, numbered as offered to users."""

    PRE_ORDER = 1
    IN_ORDER = 2
    POST_ORDER = 3
    LEVEL_BY_LEVEL = 4


@dataclass(eq=False, repr=False)
class TreeNode:
    """A tree cell with links to its children and parent.

    ``level`` is the depth of the node counted from 1 at the root; ``top``
    holds the rank the node was given in a ranking, 0 when unranked.
    """

    value: Any = None
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None
    parent: Optional["TreeNode"] = None
    level: int = 0
    top: int = 0

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def children(self) -> List["TreeNode"]:
        return [child for child in (self.left, self.right) if child is not None]

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"TreeNode({self.value!r})"


class BinaryTree:
    """A binary tree filled from the left when no ordering applies."""

    def __init__(self):
        self._root: Optional[TreeNode] = None

    @property
    def root(self) -> Optional[TreeNode]:
        return self._root

    def is_empty(self) -> bool:
        return self._root is None

    def insert_under(self, value, parent: Optional[TreeNode]) -> TreeNode:
        """Add ``value`` below ``parent`` and return its node.

        In an empty tree the value becomes the root. With no parent it becomes
        a new root holding the old root as its left child. Otherwise it takes
        the first free child slot of ``parent``, left before right; when both
        are taken it descends along left children until a free slot is found.
        """
        node = TreeNode(value)
        if self._root is None:
            self._root = node
        elif parent is None:
            node.left = self._root
            self._root.parent = node
            self._root = node
        else:
            target = parent
            while target.left is not None and target.right is not None:
                target = target.left
            if target.left is None:
                target.left = node
            else:
                target.right = node
            node.parent = target
        return node

    def clear(self) -> None:
        self._root = None

    def _pre_order_nodes(self) -> Iterator[TreeNode]:
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def _in_order_nodes(self) -> Iterator[TreeNode]:
        stack: List[TreeNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def _post_order_nodes(self) -> Iterator[TreeNode]:
        # Root-right-left order, reversed, gives left-right-root.
        collected: List[TreeNode] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            collected.append(node)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        return reversed(collected)

    def pre_order(self) -> List[Any]:
        return [node.value for node in self._pre_order_nodes()]

    def in_order(self) -> List[Any]:
        return [node.value for node in self._in_order_nodes()]

    def post_order(self) -> List[Any]:
        return [node.value for node in self._post_order_nodes()]

    def bottom_n(self, n: int = 4) -> List[Any]:
        """The first ``n`` values met in in-order (the smallest, in a search tree)."""
        if n < 0:
            raise ValueError(f"n must not be negative, got {n}")
        return [node.value for node in itertools.islice(self._in_order_nodes(), n)]

    def leaves(self) -> List[Any]:
        """Values of the nodes without children, from left to right."""
        return [node.value for node in self._pre_order_nodes() if node.is_leaf()]


class BST(BinaryTree):
    """A binary search tree that keeps track of node levels and its height.

    Values are located with ``==`` and ordered with ``>``: a value goes left
    of every node whose value is greater than it.
    """

    def __init__(self):
        super().__init__()
        self._height = 0

    def search(self, value) -> Optional[TreeNode]:
        """The node holding ``value``, or None when it is not in the tree."""
        node = self._root
        while node is not None:
            if node.value == value:
                return node
            node = node.left if node.value > value else node.right
        return None

    def insert(self, value) -> bool:
        """Insert ``value``; return False when an equal value is already present."""
        parent = None
        current = self._root
        while current is not None:
            if current.value == value:
                return False
            parent = current
            current = current.left if current.value > value else current.right
        node = TreeNode(value, parent=parent)
        if parent is None:
            self._root = node
            node.level = 1
        else:
            if parent.value > value:
                parent.left = node
            else:
                parent.right = node
            node.level = parent.level + 1
        self._height = max(self._height, node.level)
        return True

    def clear(self) -> None:
        super().clear()
        self._height = 0

    def _level_nodes(self) -> List[List[TreeNode]]:
        if self._root is None:
            return []
        result: List[List[TreeNode]] = []
        current = [self._root]
        while current:
            result.append(current)
            current = [child for node in current for child in node.children()]
        return result

    def set_levels(self) -> None:
        """Recompute the level of every node and the height of the tree."""
        rows = self._level_nodes()
        for depth, row in enumerate(rows, start=1):
            for node in row:
                node.level = depth
        self._height = len(rows)

    def height(self) -> int:
        """Number of levels in the tree; 0 when empty."""
        return self._height

    def ancestors(self, node: TreeNode) -> List[Any]:
        """Values from the parent of ``node`` up to the root."""
        result = []
        current = node.parent
        while current is not None:
            result.append(current.value)
            current = current.parent
        return result

    def level_of(self, node: TreeNode) -> int:
        """The level of ``node``, counted from 1 at the root."""
        return node.level

    def levels(self) -> List[List[Any]]:
        """Values grouped by level, the root's level first."""
        return [[node.value for node in row] for row in self._level_nodes()]

    def visit(self, order: Union[TraversalOrder, int]) -> List[Any]:
        """Values in the given traversal order; level order is flattened."""
        order = TraversalOrder(order)
        if order is TraversalOrder.PRE_ORDER:
            return self.pre_order()
        if order is TraversalOrder.IN_ORDER:
            return self.in_order()
        if order is TraversalOrder.POST_ORDER:
            return self.post_order()
        return [value for row in self.levels() for value in row]