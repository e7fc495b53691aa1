#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Interpretation of a reduced augmented matrix (LinearSystemSolution)"""

from typing import List, Optional, Tuple
import logging

from .big_fraction import BigFraction
from .names import UNIQUE, PARAMETRIC, INCONSISTENT, NO_SOLUTION
from .rational_matrix import RationalMatrix


class VariableSolution(object):
    """Description of one unknown, derived from one row of the reduced matrix

    Attributes:
        index (int):
            1-based label of the unknown. Unknowns are labelled by the row they
            were read from.

        pivot_column (int or None):
            Column of the leading nonzero coefficient of the row, None for a
            row without coefficients (free unknown).

        value (BigFraction):
            Constant term of the row, 0 for a free unknown.

        terms (list of (BigFraction, int)):
            Coefficients of the later columns in the row together with the
            1-based label of the unknown they belong to.
    """

    def __init__(self, index: int, pivot_column: Optional[int], value: BigFraction,
                 terms: List[Tuple[BigFraction, int]]):
        self.index = index
        self.pivot_column = pivot_column
        self.value = value
        self.terms = terms

    @property
    def is_free(self) -> bool:
        return self.pivot_column is None

    def __str__(self) -> str:
        if self.is_free:
            return f"x_{self.index} is free, i.e. 0"
        answer = f"x_{self.index} = {self.value}"
        for coefficient, unknown in self.terms:
            answer += f" - {coefficient} * x_{unknown}"
        return answer + f" , i.e. {self.value}"

    def __repr__(self) -> str:
        return f"VariableSolution({str(self)!r})"


class LinearSystemSolution(object):
    """Solution set of a linear system in reduced row echelon form

    The matrix must already be reduced (see rationalsolve.gauss). The last
    column holds the constants, all other columns the coefficients.

    A row with only zero coefficients but a nonzero constant makes the system
    inconsistent; no unknowns are described then. Otherwise each row yields
    one VariableSolution: a row with a leading coefficient expresses an unknown
    through its constant minus the remaining coefficient terms, a zero row
    marks a free unknown with the representative value 0.

    Args:
        matrix (RationalMatrix):
            A reduced augmented matrix. It is not modified.

    Attributes:
        status (str):
            One of 'unique', 'parametric' or 'inconsistent'.

        variables (list of VariableSolution):
            One entry per row, empty for an inconsistent system.
    """

    def __init__(self, matrix: RationalMatrix):
        matrix.validate_shape()
        self.variables = []
        if self._is_inconsistent(matrix):
            self.status = INCONSISTENT
            logging.info('System is inconsistent.')
            return
        last = matrix.get_column_count() - 1
        for row_idx in range(matrix.get_row_count()):
            row = matrix.get_row(row_idx)
            lead = next((col for col in range(last) if not row[col].is_zero()), None)
            if lead is None:
                self.variables.append(VariableSolution(row_idx + 1, None, BigFraction.ZERO, []))
                continue
            terms = [(row[col], col + 1) for col in range(lead + 1, last) if not row[col].is_zero()]
            self.variables.append(VariableSolution(row_idx + 1, lead, row[last], terms))
        if all(not v.is_free and not v.terms for v in self.variables):
            self.status = UNIQUE
        else:
            self.status = PARAMETRIC
        logging.info('System is ' + self.status + ' (' + str(len(self.free_variables)) + ' free unknown(s)).')

    @staticmethod
    def _is_inconsistent(matrix: RationalMatrix) -> bool:
        last = matrix.get_column_count() - 1
        return any(not matrix.get_value_at(row, last).is_zero() and matrix.is_zero_row(row, last)
                   for row in range(matrix.get_row_count()))

    @property
    def is_consistent(self) -> bool:
        return self.status != INCONSISTENT

    @property
    def is_unique(self) -> bool:
        return self.status == UNIQUE

    @property
    def free_variables(self) -> List[int]:
        """Labels of the unknowns reported as free"""
        return [v.index for v in self.variables if v.is_free]

    @property
    def values(self) -> List[BigFraction]:
        """Representative values in row order, free unknowns set to 0"""
        return [v.value for v in self.variables]

    def get_lines(self) -> List[str]:
        """Report lines, either ['No solution'] or one line per unknown"""
        if not self.is_consistent:
            return [NO_SOLUTION]
        return [str(v) for v in self.variables]

    def __str__(self) -> str:
        return '\n'.join(self.get_lines())


def interpret(matrix: RationalMatrix) -> LinearSystemSolution:
    """Classify the solution set of a reduced augmented matrix"""
    return LinearSystemSolution(matrix)
