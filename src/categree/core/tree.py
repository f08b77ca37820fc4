"""Category tree data structures.

This module provides the rose-tree node used by the presentation helpers
and by the in-memory tree service.

The tree supports:
- Exclusive ownership of children
- Non-owning parent links for depth and ancestor queries
- Uniform traversal (pre-order, post-order, level order)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generic, Iterator, TypeVar

V = TypeVar("V")


@dataclass(eq=False)
class TreeNode(Generic[V]):
    """A node in an ordered category tree.

    Attributes:
        value: The category carried by this node.
        children: Child nodes, in display order. Owned by this node.
        parent: The parent node, or None for a root. Not owned.
    """

    value: V
    children: list[TreeNode[V]] = field(default_factory=list)
    parent: TreeNode[V] | None = field(default=None, repr=False)

    def append(self, child: TreeNode[V]) -> TreeNode[V]:
        """Attach child as the last child of this node.

        Args:
            child: Node to attach. Must not already have a parent.

        Returns:
            The attached child.
        """
        if child.parent is not None:
            raise ValueError("Node already has a parent")
        child.parent = self
        self.children.append(child)
        return child

    @property
    def depth(self) -> int:
        """Depth from the root (1 for roots)."""
        depth = 1
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def root(self) -> TreeNode[V]:
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def walk(self, order: str = "pre") -> Iterator[TreeNode[V]]:
        """Iterate over this node and descendants.

        Args:
            order: Traversal order:
                - "pre": Parent first (depth-first, pre-order)
                - "post": Children first (depth-first, post-order)
                - "level": Breadth-first (level order)

        Yields:
            TreeNode instances in the specified order.
        """
        if order == "pre":
            yield from self._walk_preorder()
        elif order == "post":
            yield from self._walk_postorder()
        elif order == "level":
            yield from self._walk_level()
        else:
            raise ValueError(f"Unknown traversal order: {order}")

    def _walk_preorder(self) -> Iterator[TreeNode[V]]:
        """Pre-order traversal (parent before children)."""
        stack: list[TreeNode[V]] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def _walk_postorder(self) -> Iterator[TreeNode[V]]:
        """Post-order traversal (children before parent)."""
        stack: list[tuple[TreeNode[V], bool]] = [(self, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                yield node
                continue
            stack.append((node, True))
            stack.extend((child, False) for child in reversed(node.children))

    def _walk_level(self) -> Iterator[TreeNode[V]]:
        """Level-order (breadth-first) traversal."""
        queue: list[TreeNode[V]] = [self]
        while queue:
            node = queue.pop(0)
            yield node
            queue.extend(node.children)

    def ancestors(self) -> Iterator[TreeNode[V]]:
        """Iterate from the parent up to the root.

        Yields:
            Ancestor TreeNode instances, nearest first.
        """
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def path_from_root(self) -> list[TreeNode[V]]:
        """Return the nodes from the root down to this node, inclusive."""
        path = [self, *self.ancestors()]
        path.reverse()
        return path

    def find(self, predicate: Callable[[TreeNode[V]], bool]) -> Iterator[TreeNode[V]]:
        """Find all descendants matching predicate.

        Args:
            predicate: Function that returns True for matching nodes.

        Yields:
            Matching TreeNode instances.
        """
        for node in self.walk():
            if predicate(node):
                yield node
