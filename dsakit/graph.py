"""Breadth-first and depth-first traversal over an adjacency matrix."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


def _check_start(adjacency: Sequence[Sequence[int]], start: int) -> None:
    if not 0 <= start < len(adjacency):
        raise IndexError(f"start vertex {start} out of range")


def bfs(adjacency: Sequence[Sequence[int]], start: int) -> list[int]:
    """Return vertices in breadth-first order from ``start``.

    An edge exists where the matrix entry equals 1.
    """
    _check_start(adjacency, start)
    size = len(adjacency)
    visited = {start}
    order: list[int] = []
    queue = deque([start])
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for neighbour in range(size):
            if adjacency[vertex][neighbour] == 1 and neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def dfs(adjacency: Sequence[Sequence[int]], start: int) -> list[int]:
    """Return vertices in depth-first order from ``start``.

    Neighbours are explored in increasing index order, as a recursive
    traversal would, but without recursion.
    """
    _check_start(adjacency, start)
    size = len(adjacency)
    visited = {start}
    order = [start]
    stack = [(start, iter(range(size)))]
    while stack:
        vertex, candidates = stack[-1]
        for neighbour in candidates:
            if adjacency[vertex][neighbour] == 1 and neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                stack.append((neighbour, iter(range(size))))
                break
        else:
            stack.pop()
    return order