"""Binary tree nodes and traversals, measurements and transformations."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """A binary tree node holding a key and two optional children."""

    key: Any
    left: Optional[Node] = None
    right: Optional[Node] = None


def _children(node: Node) -> Iterator[Node]:
    if node.left is not None:
        yield node.left
    if node.right is not None:
        yield node.right


def _level_order_nodes(root: Optional[Node]) -> Iterator[Node]:
    if root is None:
        return
    queue = deque([root])
    while queue:
        node = queue.popleft()
        yield node
        queue.extend(_children(node))


def _postorder_nodes(root: Optional[Node]) -> list[Node]:
    """Post-order node list built with two stacks."""
    if root is None:
        return []
    pending = [root]
    collected: list[Node] = []
    while pending:
        node = pending.pop()
        collected.append(node)
        pending.extend(_children(node))
    collected.reverse()
    return collected


def inorder(root: Optional[Node]) -> list[Any]:
    """Return the keys in in-order, using an explicit stack."""
    keys: list[Any] = []
    stack: list[Node] = []
    current = root
    while current is not None or stack:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        keys.append(current.key)
        current = current.right
    return keys


def preorder(root: Optional[Node]) -> list[Any]:
    """Return the keys in pre-order, using an explicit stack."""
    if root is None:
        return []
    keys: list[Any] = []
    stack = [root]
    while stack:
        node = stack.pop()
        keys.append(node.key)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return keys


def postorder(root: Optional[Node]) -> list[Any]:
    """Return the keys in post-order."""
    return [node.key for node in _postorder_nodes(root)]


def level_order(root: Optional[Node]) -> list[Any]:
    """Return the keys level by level, left to right."""
    return [node.key for node in _level_order_nodes(root)]


def level_sizes(root: Optional[Node]) -> list[int]:
    """Return the number of nodes on each level, from the root down."""
    sizes: list[int] = []
    level = [root] if root is not None else []
    while level:
        sizes.append(len(level))
        level = [child for node in level for child in _children(node)]
    return sizes


def height(root: Optional[Node]) -> int:
    """Return the number of levels; an empty tree has height 0."""
    return len(level_sizes(root))


def count(root: Optional[Node]) -> int:
    """Return the number of nodes."""
    return sum(level_sizes(root))


def is_balanced(root: Optional[Node]) -> bool:
    """True if at every node the subtree heights differ by at most one."""
    heights: dict[int, int] = {}

    def height_of(node: Optional[Node]) -> int:
        return 0 if node is None else heights[id(node)]

    for node in _postorder_nodes(root):
        left, right = height_of(node.left), height_of(node.right)
        if abs(left - right) > 1:
            return False
        heights[id(node)] = max(left, right) + 1
    return True


def are_siblings(root: Optional[Node], a: Any, b: Any) -> bool:
    """True if some node has ``a`` and ``b`` as its two children, in either order."""
    if root is None:
        return False
    stack = [root]
    while stack:
        node = stack.pop()
        if node.left is not None and node.right is not None:
            pair = (node.left.key, node.right.key)
            if pair == (a, b) or pair == (b, a):
                return True
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return False


def total(root: Optional[Node]) -> Any:
    """Return the sum of all keys."""
    return sum(inorder(root))


def mirror(root: Optional[Node]) -> Optional[Node]:
    """Swap the children of every node in place and return the root."""
    if root is None:
        return None
    stack = [root]
    while stack:
        node = stack.pop()
        node.left, node.right = node.right, node.left
        stack.extend(_children(node))
    return root


def maximum(root: Optional[Node]) -> Any:
    """Return the largest key found by a level-order scan."""
    if root is None:
        raise ValueError("maximum of an empty tree")
    return max(node.key for node in _level_order_nodes(root))


def insert_level_order(root: Optional[Node], key: Any) -> Node:
    """Attach ``key`` at the first free child slot in level order; return the root."""
    new = Node(key)
    if root is None:
        return new
    queue = deque([root])
    while queue:
        node = queue.popleft()
        if node.left is None:
            node.left = new
            break
        queue.append(node.left)
        if node.right is None:
            node.right = new
            break
        queue.append(node.right)
    return root