"""Binary search tree with insertion, deletion, traversals and measurements."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional

from dsakit import tree
from dsakit.tree import Node


def _copy(root: Optional[Node]) -> Optional[Node]:
    """Return a structural copy of the tree rooted at ``root``."""
    if root is None:
        return None
    clone = Node(root.key)
    pending = [(root, clone)]
    while pending:
        source, target = pending.pop()
        if source.left is not None:
            target.left = Node(source.left.key)
            pending.append((source.left, target.left))
        if source.right is not None:
            target.right = Node(source.right.key)
            pending.append((source.right, target.right))
    return clone


class BinarySearchTree:
    """A binary search tree; keys equal to a node's key go to its right."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self.root: Optional[Node] = None
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> None:
        """Insert ``key`` by walking down from the root."""
        new = Node(key)
        if self.root is None:
            self.root = new
            return
        current = self.root
        while True:
            if key < current.key:
                if current.left is None:
                    current.left = new
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = new
                    return
                current = current.right

    def insert_recursive(self, key: Any) -> None:
        """Insert ``key`` recursively; the resulting shape matches ``insert``."""

        def attach(node: Optional[Node]) -> Node:
            if node is None:
                return Node(key)
            if key < node.key:
                node.left = attach(node.left)
            else:
                node.right = attach(node.right)
            return node

        self.root = attach(self.root)

    def delete(self, key: Any) -> bool:
        """Delete one node holding ``key``; return whether one was found.

        A node with two children takes its in-order successor's key.
        """
        removed = False

        def drop(node: Optional[Node], target: Any) -> Optional[Node]:
            nonlocal removed
            if node is None:
                return None
            if target < node.key:
                node.left = drop(node.left, target)
            elif target > node.key:
                node.right = drop(node.right, target)
            else:
                removed = True
                if node.left is None:
                    return node.right
                if node.right is None:
                    return node.left
                successor = node.right
                while successor.left is not None:
                    successor = successor.left
                node.key = successor.key
                node.right = drop(node.right, successor.key)
            return node

        self.root = drop(self.root, key)
        return removed

    def remove(self, key: Any) -> None:
        """Remove one node holding ``key``; raise KeyError if there is none."""
        parent: Optional[Node] = None
        current = self.root
        while current is not None and current.key != key:
            parent = current
            current = current.left if key < current.key else current.right
        if current is None:
            raise KeyError(key)
        if current.left is not None and current.right is not None:
            parent, successor = current, current.right
            while successor.left is not None:
                parent, successor = successor, successor.left
            current.key = successor.key
            current = successor
        child = current.left if current.left is not None else current.right
        if parent is None:
            self.root = child
        elif parent.left is current:
            parent.left = child
        else:
            parent.right = child

    def minimum(self) -> Any:
        """Return the smallest key."""
        if self.root is None:
            raise ValueError("minimum of an empty tree")
        current = self.root
        while current.left is not None:
            current = current.left
        return current.key

    def maximum(self) -> Any:
        """Return the largest key."""
        if self.root is None:
            raise ValueError("maximum of an empty tree")
        current = self.root
        while current.right is not None:
            current = current.right
        return current.key

    def inorder(self) -> list[Any]:
        """Keys in ascending order."""
        return tree.inorder(self.root)

    def preorder(self) -> list[Any]:
        """Keys in pre-order."""
        return tree.preorder(self.root)

    def postorder(self) -> list[Any]:
        """Keys in post-order."""
        return tree.postorder(self.root)

    def level_order(self) -> list[Any]:
        """Keys level by level."""
        return tree.level_order(self.root)

    def height(self) -> int:
        """Number of levels; 0 for an empty tree."""
        return tree.height(self.root)

    def is_balanced(self) -> bool:
        """True if subtree heights differ by at most one at every node."""
        return tree.is_balanced(self.root)

    def mirror(self) -> Optional[Node]:
        """Return a mirrored copy of the tree's nodes, leaving this tree intact."""
        return tree.mirror(_copy(self.root))

    def are_siblings(self, a: Any, b: Any) -> bool:
        """True if ``a`` and ``b`` are the two children of one node."""
        return tree.are_siblings(self.root, a, b)

    def total(self) -> Any:
        """Sum of all keys."""
        return tree.total(self.root)

    def __len__(self) -> int:
        return tree.count(self.root)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.inorder())

    def __contains__(self, key: Any) -> bool:
        current = self.root
        while current is not None:
            if key == current.key:
                return True
            current = current.left if key < current.key else current.right
        return False

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.inorder()!r})"