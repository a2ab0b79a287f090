"""Classic recursive problems: Fibonacci, gcd, Tower of Hanoi, permutations."""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with fib(0) = 0 and fib(1) = 1."""
    if n < 0:
        raise ValueError("n must not be negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def fibonacci_sequence(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers."""
    if count < 0:
        raise ValueError("count must not be negative")
    terms: list[int] = []
    current, following = 0, 1
    for _ in range(count):
        terms.append(current)
        current, following = following, current + following
    return terms


def _remainder(a: int, b: int) -> int:
    """Remainder of division truncated toward zero."""
    result = abs(a) % abs(b)
    return -result if a < 0 else result


def gcd(a: int, b: int) -> int:
    """Euclid's greatest common divisor; returns the other value when one is zero."""
    while True:
        if not a:
            return b
        if not b:
            return a
        a, b = b, _remainder(a, b)


class Move(NamedTuple):
    """One Tower of Hanoi move."""

    disk: int
    source: str
    target: str

    def __str__(self) -> str:
        return f"Move disk {self.disk} from {self.source} to {self.target}"


def hanoi_moves(n: int, source: str = "A", target: str = "C", auxiliary: str = "B") -> list[Move]:
    """Return the moves that carry ``n`` disks from ``source`` to ``target``."""
    if n < 0:
        raise ValueError("number of disks must not be negative")

    def solve(disks: int, src: str, dst: str, via: str) -> Iterator[Move]:
        if disks == 0:
            return
        yield from solve(disks - 1, src, via, dst)
        yield Move(disks, src, dst)
        yield from solve(disks - 1, via, dst, src)

    return list(solve(n, source, target, auxiliary))


def permutations(text: str) -> Iterator[str]:
    """Yield every arrangement of ``text`` in swap-and-backtrack order."""
    chars = list(text)
    last = len(chars) - 1

    def permute(left: int) -> Iterator[str]:
        if left == last:
            yield "".join(chars)
            return
        for i in range(left, last + 1):
            chars[left], chars[i] = chars[i], chars[left]
            yield from permute(left + 1)
            chars[left], chars[i] = chars[i], chars[left]

    if chars:
        yield from permute(0)