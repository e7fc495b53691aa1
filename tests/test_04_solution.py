"""Solution interpreter: unique, parametric and inconsistent systems."""
import pytest
from rationalsolve import (BigFraction, RationalMatrix, LinearSystemSolution, gauss, interpret,
                           UNIQUE, PARAMETRIC, INCONSISTENT, NO_SOLUTION)


def test_unique_solution(example_system):
    gauss(example_system)
    solution = interpret(example_system)
    assert solution.status == UNIQUE
    assert solution.is_consistent and solution.is_unique
    assert solution.values == [BigFraction(3), BigFraction(5), BigFraction(4)]
    assert solution.get_lines() == ["x_1 = 3 , i.e. 3", "x_2 = 5 , i.e. 5", "x_3 = 4 , i.e. 4"]


def test_fractional_values():
    matrix = RationalMatrix([[2, 1, 1], [1, 3, 2]])
    gauss(matrix)
    assert str(LinearSystemSolution(matrix)) == "x_1 = 1/5 , i.e. 1/5\nx_2 = 3/5 , i.e. 3/5"


def test_free_variable(dependent_system):
    gauss(dependent_system)
    solution = interpret(dependent_system)
    assert solution.status == PARAMETRIC
    assert solution.free_variables == [2]
    assert solution.get_lines() == ["x_1 = 2 - 1 * x_2 , i.e. 2", "x_2 is free, i.e. 0"]
    assert solution.values == [BigFraction(2), BigFraction(0)]
    first, second = solution.variables
    assert first.pivot_column == 0 and first.terms == [(BigFraction(1), 2)]
    assert second.is_free and second.pivot_column is None


def test_negative_coefficients_keep_subtraction_phrasing():
    matrix = RationalMatrix([[1, -2, "1/2", 3], [2, -4, 1, 6], [0, 0, 0, 0]])
    gauss(matrix)
    solution = interpret(matrix)
    assert solution.get_lines()[0] == "x_1 = 3 - -2 * x_2 - 1/2 * x_3 , i.e. 3"
    assert solution.free_variables == [2, 3]


def test_inconsistent_system(inconsistent_system):
    gauss(inconsistent_system)
    solution = interpret(inconsistent_system)
    assert solution.status == INCONSISTENT
    assert not solution.is_consistent
    assert solution.variables == []
    assert str(solution) == NO_SOLUTION == "No solution"


def test_inconsistency_takes_priority_over_free_variables():
    matrix = RationalMatrix([[1, 1, 1, 1], [0, 0, 0, 0], [0, 0, 0, 7]])
    solution = interpret(matrix)
    assert solution.get_lines() == ["No solution"]


def test_interpreter_does_not_modify_matrix(dependent_system):
    gauss(dependent_system)
    before = dependent_system.clone()
    interpret(dependent_system)
    assert dependent_system == before


@pytest.mark.parametrize("rows", [[[1, 2], [3]], []])
def test_malformed_matrix(rows):
    with pytest.raises(ValueError):
        interpret(RationalMatrix(rows))
