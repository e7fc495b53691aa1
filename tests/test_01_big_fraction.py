"""Exact rational scalar: construction, parsing, arithmetic and formatting."""
import pickle
import pytest
from fractions import Fraction
from rationalsolve import BigFraction


def test_lowest_terms_and_sign():
    value = BigFraction(6, -4)
    assert value.numerator == -3
    assert value.denominator == 2
    assert str(value) == "-3/2"


def test_whole_numbers_print_without_denominator():
    assert str(BigFraction(8, 4)) == "2"
    assert str(BigFraction(0, 5)) == "0"
    assert str(BigFraction(-7)) == "-7"


def test_zero_denominator():
    with pytest.raises(ArithmeticError):
        BigFraction(1, 0)
    with pytest.raises(ArithmeticError):
        BigFraction.value_of("3/0")


@pytest.mark.parametrize("literal,expected", [
    ("7", Fraction(7)),
    ("-3", Fraction(-3)),
    ("+4", Fraction(4)),
    ("3/4", Fraction(3, 4)),
    ("6/-4", Fraction(-3, 2)),
    ("  -10/15 ", Fraction(-2, 3)),
    ("123456789012345678901234567890", Fraction(123456789012345678901234567890)),
])
def test_value_of_literals(literal, expected):
    assert BigFraction.value_of(literal).to_fraction() == expected


@pytest.mark.parametrize("literal", ["", "abc", "1.5", "1/2/3", "1e3", "/2", "3/", "\u0663", "\uff11/2", "1/\u0662"])
def test_value_of_rejects_malformed_literals(literal):
    with pytest.raises(ValueError):
        BigFraction.value_of(literal)


def test_floats_are_rejected():
    with pytest.raises(TypeError):
        BigFraction(0.5)


def test_arithmetic_is_exact():
    a = BigFraction(1, 3)
    b = BigFraction(1, 6)
    assert a + b == BigFraction(1, 2)
    assert a - b == BigFraction(1, 6)
    assert a * b == BigFraction(1, 18)
    assert a / b == BigFraction(2)
    assert -a == BigFraction(-1, 3)
    assert abs(BigFraction(-2, 5)) == BigFraction(2, 5)
    assert 1 - a == BigFraction(2, 3)
    assert 2 * a == BigFraction(2, 3)
    assert 1 / a == BigFraction(3)


def test_invert():
    assert BigFraction(-2, 7).invert() == BigFraction(-7, 2)
    with pytest.raises(ArithmeticError):
        BigFraction.ZERO.invert()
    with pytest.raises(ArithmeticError):
        BigFraction.ONE / 0


def test_predicates_and_ordering():
    assert BigFraction.ZERO.is_zero()
    assert not BigFraction.ZERO
    assert BigFraction(3, 3).is_one()
    assert BigFraction(-1, 2).signum() == -1
    assert BigFraction(5, 1).is_integer()
    assert BigFraction(1, 3) < BigFraction(1, 2)
    assert BigFraction(2) == 2
    assert BigFraction(1, 2) == Fraction(1, 2)


def test_hash_matches_equality():
    assert hash(BigFraction(2, 4)) == hash(BigFraction(1, 2))
    assert len({BigFraction(2, 4), BigFraction(1, 2), BigFraction(3)}) == 2


def test_pickle_round_trip_keeps_value():
    value = BigFraction(-22, 7)
    assert pickle.loads(pickle.dumps(value)) == value
