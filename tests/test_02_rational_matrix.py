"""Rational matrix container: construction, shape checks, row operations and display."""
import numpy as np
import pytest
from fractions import Fraction
from rationalsolve import BigFraction, RationalMatrix, MatrixShapeError


def test_construction_converts_entries():
    matrix = RationalMatrix([[1, "1/2", Fraction(3, 4)], [BigFraction(-1), "-2/6", 0]])
    assert matrix.shape == (2, 3)
    assert matrix.get_value_at(0, 1) == BigFraction(1, 2)
    assert matrix.get_value_at(1, 1) == BigFraction(-1, 3)
    assert all(isinstance(v, BigFraction) for row in matrix.get_rows() for v in row)


def test_rendering_is_tab_separated_and_newline_terminated():
    matrix = RationalMatrix([[1, "-1/2", 0], [7, 3, "4/6"]])
    assert str(matrix) == "1\t-1/2\t0\n7\t3\t2/3\n"


def test_equality_is_exact_and_structural():
    assert RationalMatrix([[1, "2/4"]]) == RationalMatrix([["3/3", Fraction(1, 2)]])
    assert RationalMatrix([[1, 2]]) != RationalMatrix([[1, 3]])
    assert RationalMatrix([[1, 2]]) != RationalMatrix([[1], [2]])


@pytest.mark.parametrize("rows", [[], [[]], [[1, 2], [3]], [[1], [2, 3]]])
def test_validate_shape_rejects_malformed_matrices(rows):
    matrix = RationalMatrix(rows)
    with pytest.raises(MatrixShapeError):
        matrix.validate_shape()


def test_shape_error_is_a_value_error():
    assert issubclass(MatrixShapeError, ValueError)


def test_row_operations():
    matrix = RationalMatrix([[2, 4, 6], [1, 1, 1]])
    matrix.swap_rows(0, 1)
    assert matrix.get_row(0) == (BigFraction(1),) * 3
    matrix.multiply_row(1, "1/2")
    assert matrix == RationalMatrix([[1, 1, 1], [1, 2, 3]])
    matrix.set_value_at(0, 2, "5/3")
    assert str(matrix) == "1\t1\t5/3\n1\t2\t3\n"
    with pytest.raises(MatrixShapeError):
        matrix.set_row(0, [BigFraction.ONE])


def test_is_zero_row_with_column_limit():
    matrix = RationalMatrix([[0, 0, 5], [0, 0, 0]])
    assert not matrix.is_zero_row(0)
    assert matrix.is_zero_row(0, 2)
    assert matrix.is_zero_row(1)


def test_clone_is_independent():
    matrix = RationalMatrix([[1, 2], [3, 4]])
    copy = matrix.clone()
    copy.swap_rows(0, 1)
    copy.multiply_row(0, 2)
    assert matrix == RationalMatrix([[1, 2], [3, 4]])


def test_from_numpy():
    matrix = RationalMatrix.from_numpy(np.array([[1, -2], [3, 4]], dtype=np.int64))
    assert matrix == RationalMatrix([[1, -2], [3, 4]])
    assert matrix.to_fraction_rows() == [[Fraction(1), Fraction(-2)], [Fraction(3), Fraction(4)]]


def test_from_numpy_rejects_floats_and_wrong_dimensions():
    with pytest.raises(TypeError):
        RationalMatrix.from_numpy(np.array([[0.5, 1.0]]))
    with pytest.raises(MatrixShapeError):
        RationalMatrix.from_numpy(np.array([1, 2, 3]))
