import itertools
import math

import pytest

from dsakit.recursion import (
    Move,
    fibonacci,
    fibonacci_sequence,
    gcd,
    hanoi_moves,
    permutations,
)


def test_fibonacci_base_cases():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1


@pytest.mark.parametrize("n", range(2, 30))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_negative_raises():
    with pytest.raises(ValueError):
        fibonacci(-1)


def test_fibonacci_sequence_matches_terms():
    terms = fibonacci_sequence(15)
    assert len(terms) == 15
    assert terms == [fibonacci(i) for i in range(15)]
    assert fibonacci_sequence(0) == []


def test_fibonacci_sequence_negative_raises():
    with pytest.raises(ValueError):
        fibonacci_sequence(-2)


@pytest.mark.parametrize("a, b", [(12, 18), (17, 5), (100, 75), (81, 27), (1, 1), (7, 49)])
def test_gcd_matches_math_gcd(a, b):
    assert gcd(a, b) == math.gcd(a, b)
    assert gcd(b, a) == math.gcd(a, b)


def test_gcd_with_zero():
    assert gcd(0, 9) == 9
    assert gcd(9, 0) == 9
    assert gcd(0, 0) == 0


def _play(n, moves):
    pegs = {"A": list(range(n, 0, -1)), "B": [], "C": []}
    for move in moves:
        disk = pegs[move.source].pop()
        assert disk == move.disk
        assert not pegs[move.target] or pegs[move.target][-1] > disk
        pegs[move.target].append(disk)
    return pegs


@pytest.mark.parametrize("n", range(1, 8))
def test_hanoi_moves_solve_the_puzzle(n):
    moves = hanoi_moves(n)
    assert len(moves) == 2**n - 1
    pegs = _play(n, moves)
    assert pegs["C"] == list(range(n, 0, -1))
    assert pegs["A"] == [] and pegs["B"] == []


def test_hanoi_single_disk_message():
    moves = hanoi_moves(1)
    assert moves == [Move(1, "A", "C")]
    assert str(moves[0]) == "Move disk 1 from A to C"


def test_hanoi_custom_pegs():
    moves = hanoi_moves(3, "X", "Z", "Y")
    assert moves[-1].target == "Z"
    assert {m.source for m in moves} | {m.target for m in moves} == {"X", "Y", "Z"}


def test_hanoi_zero_and_negative():
    assert hanoi_moves(0) == []
    with pytest.raises(ValueError):
        hanoi_moves(-1)


def test_permutations_order():
    assert list(permutations("abc")) == ["abc", "acb", "bac", "bca", "cba", "cab"]


@pytest.mark.parametrize("text", ["a", "ab", "abcd", "wxyz"])
def test_permutations_cover_all_arrangements(text):
    result = list(permutations(text))
    assert len(result) == math.factorial(len(text))
    assert result[0] == text
    assert sorted(result) == sorted("".join(p) for p in itertools.permutations(text))


def test_permutations_keep_duplicates():
    result = list(permutations("aab"))
    assert len(result) == math.factorial(3)
    assert set(result) == {"aab", "aba", "baa"}


def test_permutations_of_empty_string():
    assert list(permutations("")) == []