"""
Tests for the brain teaser exercises.
"""

import pytest

from brainteasers.teasers import (
    divide_numbers,
    fibonacci,
    fibonacci_sequence,
    is_prime,
    parse_parts,
    prime_checker,
)


@pytest.mark.parametrize("n,expected", [(0, 0), (1, 1), (2, 1), (5, 5), (10, 55)])
def test_fibonacci(n, expected):
    assert fibonacci(n) == expected


@pytest.mark.parametrize("number,expected", [
    (-7, False), (0, False), (1, False), (2, True), (3, True), (4, False),
    (9, False), (17, True), (25, False), (29, True), (100, False), (7919, True),
])
def test_is_prime(number, expected):
    assert is_prime(number) is expected


def test_fibonacci_sequence_prints(capsys):
    fibonacci_sequence(10)
    output = capsys.readouterr().out
    assert "First 10 Fibonacci numbers:" in output
    assert "0 1 1 2 3 5 8 13 21 34" in output


def test_prime_checker_prints(capsys):
    prime_checker()
    output = capsys.readouterr().out
    assert "17 is prime" in output
    assert "25 is not prime" in output


def test_divide_numbers(capsys):
    divide_numbers(10, 2)
    assert "Solution: 5" in capsys.readouterr().out


def test_divide_by_zero_is_handled(capsys):
    divide_numbers(1, 0)
    output = capsys.readouterr().out
    assert "Error: " in output
    assert "Solution" not in output


class TestParseParts:

    def test_splits_on_semicolon(self):
        assert parse_parts("a;b;c") == ["a", "b", "c"]

    def test_none_rejected(self):
        with pytest.raises(TypeError):
            parse_parts(None)

    def test_empty_rejected(self):
        with pytest.raises(ValueError, match="Input cannot be empty"):
            parse_parts("")
