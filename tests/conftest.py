import pytest
import sympy
from rationalsolve import RationalMatrix


def _to_sympy(matrix: RationalMatrix) -> sympy.Matrix:
    return sympy.Matrix([[sympy.Rational(v.numerator, v.denominator) for v in row] for row in matrix.get_rows()])


@pytest.fixture(scope="session")
def to_sympy():
    """Exact sympy copy of a RationalMatrix, used as an independent oracle"""
    return _to_sympy


@pytest.fixture(params=[1, 2], scope="session")
def processes(request: pytest.FixtureRequest) -> int:
    """Provide session-level fixture for the number of elimination processes."""
    return request.param


@pytest.fixture
def example_system() -> RationalMatrix:
    """3x3 system with the unique solution (3, 5, 4)."""
    return RationalMatrix([[3, 2, -5, -1], [2, -1, 3, 13], [1, 2, -1, 9]])


@pytest.fixture
def dependent_system() -> RationalMatrix:
    """Second equation is twice the first one."""
    return RationalMatrix([[1, 1, 2], [2, 2, 4]])


@pytest.fixture
def inconsistent_system() -> RationalMatrix:
    """Parallel planes: x + y = 2 and 2x + 2y = 5."""
    return RationalMatrix([[1, 1, 2], [2, 2, 5]])
