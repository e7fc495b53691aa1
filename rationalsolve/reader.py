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
"""Reading augmented matrices from text streams"""

from typing import List, Optional, TextIO
import logging

from .big_fraction import BigFraction
from .rational_matrix import RationalMatrix, MatrixShapeError


def parse_row(line: str, line_no: int = 1) -> List[BigFraction]:
    """Parse one line of whitespace separated rational literals

    Raises:
        ValueError: If a token is not an integer or 'numerator/denominator'
    """
    try:
        return [BigFraction.value_of(token) for token in line.split()]
    except (ValueError, ArithmeticError) as e:
        raise ValueError(f"Line {line_no}: {e}") from e


def read_matrix(stream: TextIO, rows: Optional[int] = None) -> RationalMatrix:
    """Read an augmented matrix, one row per line

    The column count is taken from the first line. Without an explicit row
    count, the system is taken to be square: a first line with n+1 entries is
    followed by n-1 further lines. Lines after the last expected row are not
    consumed.

    Args:
        stream (file-like):
            Text stream, e.g. sys.stdin.

        rows (optional (int)):
            Number of rows to read.

    Returns:
        (RationalMatrix):
        The matrix, checked to be rectangular.

    Raises:
        ValueError: For malformed literals.
        MatrixShapeError: For a row count below 1, missing lines or rows of
            different length.
    """
    if rows is not None and rows < 1:
        raise MatrixShapeError(f"Row count must be positive, got {rows}")
    first = parse_row(stream.readline(), 1)
    if not first:
        raise MatrixShapeError("First line contains no entries")
    if rows is None:
        rows = max(len(first) - 1, 1)
    data = [first]
    for line_no in range(2, rows + 1):
        line = stream.readline()
        if not line:
            raise MatrixShapeError(f"Expected {rows} rows, input ended after {line_no - 1}")
        data.append(parse_row(line, line_no))
    matrix = RationalMatrix(data)
    matrix.validate_shape()
    logging.debug('Read ' + str(matrix.get_row_count()) + 'x' + str(matrix.get_column_count()) + ' matrix.')
    return matrix
