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
"""Command line driver: read a system, reduce it, print the report"""

from argparse import ArgumentParser
from argparse import RawDescriptionHelpFormatter
from typing import List, Optional, TextIO
import sys
import logging

from .configuration import Configuration
from .gauss import Gauss
from .names import BANNER
from .rational_matrix import RationalMatrix, MatrixShapeError
from .reader import read_matrix
from .solution import LinearSystemSolution


def format_report(matrix: RationalMatrix, solution: LinearSystemSolution) -> str:
    """Banner-delimited reduced matrix followed by the solution lines"""
    return BANNER + '\n' + str(matrix) + BANNER + '\n' + str(solution) + '\n'


def solve(stream: TextIO, rows: Optional[int] = None, processes: Optional[int] = None) -> str:
    """Read an augmented matrix from stream, reduce it and return the report"""
    matrix = read_matrix(stream, rows)
    Gauss(processes=processes).rref(matrix)
    return format_report(matrix, LinearSystemSolution(matrix))


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point of the rationalsolve command. Reads the augmented matrix from a
    file or stdin and writes the report to stdout. Returns the exit status.
    """
    usage = '''example: echo "1 1 3\\n1 -1 1" | rationalsolve'''
    parser = ArgumentParser(prog='rationalsolve',
                            description='Solve a system of linear equations with exact rational arithmetic.\n'
                                        'Each input line holds one equation: the coefficients followed by the\n'
                                        'constant, as integers or fractions like 3/4.',
                            epilog=usage,
                            formatter_class=RawDescriptionHelpFormatter)
    parser.add_argument("-i", "--input", help="path to input file (default: stdin)")
    parser.add_argument("-r", "--rows", type=int,
                        help="number of equations to read (default: one less than the entries in the first line)")
    parser.add_argument("-p", "--processes", type=int, help="number of processes for the row updates")
    parser.add_argument("--parallel-min-rows", type=int,
                        help="use the process pool only for matrices with at least this many rows")
    parser.add_argument("-v", "--verbose", action='store_true', help="log progress to stderr")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        stream=sys.stderr, format='%(levelname)s: %(message)s')
    if args.parallel_min_rows is not None:
        Configuration().parallel_min_rows = args.parallel_min_rows

    try:
        if args.input:
            with open(args.input) as handle:
                report = solve(handle, args.rows, args.processes)
        else:
            report = solve(sys.stdin, args.rows, args.processes)
    except (ValueError, ArithmeticError, OSError) as e:
        kind = 'Malformed matrix' if isinstance(e, MatrixShapeError) else 'Invalid input'
        logging.error(kind + ': ' + str(e))
        return 1
    sys.stdout.write(report)
    return 0


def start_from_command_line():
    sys.exit(main())
