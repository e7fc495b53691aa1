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
"""
RationalMatrix - dense matrix of exact rational numbers.

The matrix is stored as a list of rows, each row a list of BigFraction values. Rows
are independent objects, so the reduction engine can swap them by reference and
replace a single row without touching the others. For an augmented system the
last column holds the right-hand side constants.
"""

from fractions import Fraction
from typing import Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from .big_fraction import BigFraction

Entry = Union[BigFraction, Fraction, int, str]


class MatrixShapeError(ValueError):
    """Raised when a matrix is not rectangular or has an empty dimension"""


class RationalMatrix:
    """
    Dense row-major matrix of BigFraction values.

    Construction converts every entry to BigFraction but performs no other
    normalization and no shape check. Call validate_shape() before relying on
    the matrix being rectangular; the reduction engine does so itself.

    Args:
        rows: Ordered sequence of rows. Entries may be BigFraction, Fraction,
              int or rational literal strings such as "3/4".
    """

    def __init__(self, rows: Iterable[Iterable[Entry]]):
        self._rows = [[BigFraction.value_of(value) for value in row] for row in rows]

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> 'RationalMatrix':
        """
        Create a matrix from a 2D numpy array of integers.

        Raises:
            TypeError: If the array does not hold integers
            MatrixShapeError: If the array is not two-dimensional
        """
        array = np.asarray(array)
        if array.ndim != 2:
            raise MatrixShapeError(f"Expected a 2D array, got {array.ndim} dimension(s)")
        if not np.issubdtype(array.dtype, np.integer):
            raise TypeError(f"Expected an integer array, got dtype {array.dtype}")
        return cls([[int(value) for value in row] for row in array.tolist()])

    def get_row_count(self) -> int:
        return len(self._rows)

    def get_column_count(self) -> int:
        """Number of columns, taken from the first row"""
        return len(self._rows[0]) if self._rows else 0

    @property
    def shape(self) -> Tuple[int, int]:
        return self.get_row_count(), self.get_column_count()

    def validate_shape(self) -> None:
        """
        Check that the matrix has at least one row and one column and that all
        rows have the same length.

        Raises:
            MatrixShapeError: If any of the conditions is violated
        """
        if not self._rows:
            raise MatrixShapeError("Matrix has no rows")
        columns = len(self._rows[0])
        if columns == 0:
            raise MatrixShapeError("Matrix has no columns")
        for idx, row in enumerate(self._rows):
            if len(row) != columns:
                raise MatrixShapeError(f"Row {idx} has {len(row)} entries, expected {columns}")

    def get_value_at(self, row: int, col: int) -> BigFraction:
        return self._rows[row][col]

    def set_value_at(self, row: int, col: int, value: Entry) -> None:
        self._rows[row][col] = BigFraction.value_of(value)

    def get_row(self, row: int) -> Tuple[BigFraction, ...]:
        """Immutable copy of a row"""
        return tuple(self._rows[row])

    def set_row(self, row: int, values: Sequence[BigFraction]) -> None:
        """Replace a whole row. The new row must keep the column count."""
        if len(values) != self.get_column_count():
            raise MatrixShapeError(f"Row has {len(values)} entries, expected {self.get_column_count()}")
        self._rows[row] = list(values)

    def get_rows(self) -> List[List[BigFraction]]:
        """All rows as a new 2D list"""
        return [list(row) for row in self._rows]

    def to_fraction_rows(self) -> List[List[Fraction]]:
        """All rows as fractions.Fraction values"""
        return [[value.to_fraction() for value in row] for row in self._rows]

    def swap_rows(self, row_a: int, row_b: int) -> None:
        if row_a != row_b:
            self._rows[row_a], self._rows[row_b] = self._rows[row_b], self._rows[row_a]

    def multiply_row(self, row: int, factor: Entry) -> None:
        """Multiply entire row by a rational factor"""
        factor = BigFraction.value_of(factor)
        self._rows[row] = [value * factor for value in self._rows[row]]

    def is_zero_row(self, row: int, end: Optional[int] = None) -> bool:
        """True if all entries of the row (up to column end, exclusive) are zero"""
        return not any(self._rows[row][:end])

    def clone(self) -> 'RationalMatrix':
        """Copy of the matrix. Entries are immutable and shared."""
        return RationalMatrix(self._rows)

    def __eq__(self, other) -> bool:
        if not isinstance(other, RationalMatrix):
            return NotImplemented
        return self._rows == other._rows

    def __str__(self) -> str:
        """Tab separated entries, one newline-terminated line per row"""
        return ''.join('\t'.join(str(value) for value in row) + '\n' for row in self._rows)

    def __repr__(self) -> str:
        return f"RationalMatrix({[[str(value) for value in row] for row in self._rows]})"
