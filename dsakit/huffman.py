"""Huffman tree construction and code assignment."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union

Symbols = Union[Mapping[Any, float], Iterable[tuple[Any, float]]]


@dataclass
class HuffmanNode:
    """A Huffman tree node; leaves carry a symbol, internal nodes carry None."""

    key: Any
    weight: float
    left: Optional[HuffmanNode] = None
    right: Optional[HuffmanNode] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _two_smallest(slots: list[Optional[HuffmanNode]]) -> tuple[int, int]:
    """Indices of the lightest and second-lightest occupied slots; earlier wins ties."""
    first = second = -1
    for index, node in enumerate(slots):
        if node is None:
            continue
        if first == -1 or node.weight < slots[first].weight:
            first, second = index, first
        elif second == -1 or node.weight < slots[second].weight:
            second = index
    return first, second


def build_huffman_tree(symbols: Symbols) -> HuffmanNode:
    """Build a Huffman tree from ``(symbol, weight)`` pairs or a mapping."""
    pairs = symbols.items() if isinstance(symbols, Mapping) else symbols
    slots: list[Optional[HuffmanNode]] = [
        HuffmanNode(key, float(weight)) for key, weight in pairs
    ]
    if not slots:
        raise ValueError("no symbols given")
    for _ in range(len(slots) - 1):
        first, second = _two_smallest(slots)
        lighter, heavier = slots[first], slots[second]
        slots[first] = HuffmanNode(None, lighter.weight + heavier.weight, lighter, heavier)
        slots[second] = None
    return next(node for node in slots if node is not None)


def huffman_codes(symbols: Symbols) -> dict[Any, str]:
    """Map each symbol to its code; left edges are 0, right edges are 1."""
    pairs = list(symbols.items() if isinstance(symbols, Mapping) else symbols)
    if len({key for key, _ in pairs}) != len(pairs):
        raise ValueError("duplicate symbols")
    codes: dict[Any, str] = {}
    pending = [(build_huffman_tree(pairs), "")]
    while pending:
        node, code = pending.pop()
        if node.is_leaf:
            codes[node.key] = code
            continue
        if node.right is not None:
            pending.append((node.right, code + "1"))
        if node.left is not None:
            pending.append((node.left, code + "0"))
    return codes