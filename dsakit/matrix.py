"""Row-wise and column-wise sums of a rectangular matrix."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def _check_rectangular(matrix: Sequence[Sequence[Any]]) -> None:
    if len({len(row) for row in matrix}) > 1:
        raise ValueError("rows differ in length")


def row_sums(matrix: Sequence[Sequence[Any]]) -> list[Any]:
    """Return the sum of each row."""
    _check_rectangular(matrix)
    return [sum(row) for row in matrix]


def column_sums(matrix: Sequence[Sequence[Any]]) -> list[Any]:
    """Return the sum of each column."""
    _check_rectangular(matrix)
    return [sum(column) for column in zip(*matrix)]