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
"""Gauss-Jordan elimination to reduced row echelon form (Gauss)

The reduction works in place on a RationalMatrix with exact rational arithmetic.
Columns are scanned left to right and rows top to bottom. For each candidate
column the first row (at or below the current row) with a nonzero entry becomes
the pivot row, is swapped into place and normalized, and the column is then
cleared in all other rows.

Only the first min(rows, columns) columns are candidates for a pivot. For an
augmented n x (n+1) system this covers all coefficient columns, but for wide
matrices the trailing columns never receive a pivot.
"""

from functools import partial
from typing import List, Optional, Sequence, Tuple
import logging

from .big_fraction import BigFraction
from .configuration import Configuration
from .names import PROCESSES, PARALLEL_MIN_ROWS
from .pool import ReductionPool
from .rational_matrix import RationalMatrix

LOG = logging.getLogger(__name__)

Row = Tuple[BigFraction, ...]


def eliminate_row(pivot: Row, col: int, row: Sequence[BigFraction]) -> List[BigFraction]:
    """Subtract row[col] times the normalized pivot row from row

    After the update the entry in column col is zero. Entries where the pivot
    row is zero are copied unchanged.
    """
    factor = row[col]
    return [value - factor * p if p else value for value, p in zip(row, pivot)]


def eliminate_worker_compute(pivot: Row, col: int, tasks: List[Tuple[int, Row]]) -> List[Tuple[int, List[BigFraction]]]:
    """Helper function for parallel elimination

    Update a chunk of rows against the same pivot snapshot. Is executed on
    workers, not on the main process.

    Args:
        pivot (tuple of BigFraction):
            Normalized pivot row, identical for all workers.

        col (int):
            Pivot column.

        tasks (list of (int, tuple)):
            Row indices and row contents to update.
    """
    return [(idx, eliminate_row(pivot, col, row)) for idx, row in tasks]


class Gauss:
    """Reduction engine for augmented systems of linear equations

    Args:
        processes (int):
            (Default: Configuration().processes) Number of processes used for
            the row elimination step. With 1, everything runs in the calling
            process.

        parallel_min_rows (int):
            (Default: Configuration().parallel_min_rows) Matrices with fewer
            rows are reduced sequentially regardless of processes.
    """

    def __init__(self, processes: Optional[int] = None, parallel_min_rows: Optional[int] = None):
        config = Configuration()
        self.processes = config.processes if processes is None else int(processes)
        self.parallel_min_rows = config.parallel_min_rows if parallel_min_rows is None else int(parallel_min_rows)
        if self.processes < 1:
            raise ValueError(f"Number of processes must be positive, got {self.processes}.")

    def rref(self, matrix: RationalMatrix) -> List[Tuple[int, int]]:
        """Reduce matrix to reduced row echelon form in place

        Args:
            matrix (RationalMatrix):
                Matrix to reduce. It is modified in place.

        Returns:
            (list of tuples):
            The pivot positions (row, column) in the order they were assigned.
            Rows below the last pivot row received no pivot.

        Raises:
            MatrixShapeError: If the matrix is empty or rows differ in length.
        """
        matrix.validate_shape()
        rows = matrix.get_row_count()
        cols = matrix.get_column_count()
        processes = min(self.processes, rows)
        parallel = processes > 1 and rows >= self.parallel_min_rows
        LOG.info('Reducing ' + str(rows) + 'x' + str(cols) + ' matrix' +
                 (' with ' + str(processes) + ' processes.' if parallel else '.'))
        if parallel:
            with ReductionPool(processes) as pool:
                pivots = self._row_echelon(matrix, pool, processes)
        else:
            pivots = self._row_echelon(matrix)
        LOG.info('  ' + str(len(pivots)) + ' pivot(s) found.')
        return pivots

    def _row_echelon(self, matrix: RationalMatrix, pool: Optional[ReductionPool] = None,
                     processes: int = 1) -> List[Tuple[int, int]]:
        rows = matrix.get_row_count()
        cols = matrix.get_column_count()
        pivots = []
        current_row = 0

        for col in range(min(rows, cols)):
            pivot_row = self._find_pivot_row(matrix, current_row, col)
            if pivot_row == -1:
                LOG.debug('  No pivot in column ' + str(col) + '.')
                continue

            matrix.swap_rows(pivot_row, current_row)

            pivot_value = matrix.get_value_at(current_row, col)
            if not pivot_value.is_one():
                matrix.multiply_row(current_row, pivot_value.invert())

            if pool is None:
                self._eliminate_column(matrix, current_row, col)
            else:
                self._eliminate_column_parallel(matrix, current_row, col, pool, processes)

            pivots.append((current_row, col))
            current_row += 1

        return pivots

    @staticmethod
    def _find_pivot_row(matrix: RationalMatrix, start_row: int, col: int) -> int:
        """First row at or below start_row with a nonzero entry in col, -1 if none"""
        for row in range(start_row, matrix.get_row_count()):
            if not matrix.get_value_at(row, col).is_zero():
                return row
        return -1

    @staticmethod
    def _rows_to_eliminate(matrix: RationalMatrix, pivot_row: int, col: int) -> List[int]:
        return [row for row in range(matrix.get_row_count())
                if row != pivot_row and not matrix.get_value_at(row, col).is_zero()]

    def _eliminate_column(self, matrix: RationalMatrix, pivot_row: int, col: int):
        """Clear column col in every row but the pivot row"""
        pivot = matrix.get_row(pivot_row)
        for row in self._rows_to_eliminate(matrix, pivot_row, col):
            matrix.set_row(row, eliminate_row(pivot, col, matrix.get_row(row)))

    def _eliminate_column_parallel(self, matrix: RationalMatrix, pivot_row: int, col: int,
                                   pool: ReductionPool, processes: int):
        """Clear column col in every row but the pivot row, rows split across workers

        Every worker reads the same immutable pivot snapshot and returns new
        contents for its own rows only, so the write back order is irrelevant.
        """
        targets = self._rows_to_eliminate(matrix, pivot_row, col)
        if not targets:
            return
        pivot = matrix.get_row(pivot_row)
        tasks = [(row, matrix.get_row(row)) for row in targets]
        chunk_size = -(-len(tasks) // processes)
        chunks = [tasks[i:i + chunk_size] for i in range(0, len(tasks), chunk_size)]
        for result in pool.imap_unordered(partial(eliminate_worker_compute, pivot, col), chunks):
            for row, values in result:
                matrix.set_row(row, values)


def gauss(matrix: RationalMatrix, **kwargs) -> List[Tuple[int, int]]:
    """Reduce an augmented matrix to reduced row echelon form in place

    Example:
        matrix = RationalMatrix([[3, 2, -5, -1], [2, -1, 3, 13], [1, 2, -1, 9]])
        gauss(matrix)
        print(matrix)

    Args:
        matrix (RationalMatrix):
            The matrix to reduce. Modified in place.

        processes (optional (int)):
            Number of processes for the row elimination step.

        parallel_min_rows (optional (int)):
            Row count from which on the process pool is used.

    Returns:
        (list of tuples):
        Pivot positions (row, column).
    """
    return Gauss(processes=kwargs.get(PROCESSES), parallel_min_rows=kwargs.get(PARALLEL_MIN_ROWS)).rref(matrix)
