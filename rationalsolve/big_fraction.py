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
Exact rational scalar used for every matrix entry.

BigFraction is a thin wrapper around Python's fractions.Fraction. Fraction already
keeps numerator and denominator as arbitrary precision ints in lowest terms with a
positive denominator, so every arithmetic result is canonical without an explicit
reduction step.

The textual form matches the solver's output protocol: "n" for whole numbers and
"n/d" otherwise, with the sign carried by the numerator.
"""

from fractions import Fraction
from typing import Union, Optional
import re

# integer or "numerator/denominator" in ASCII digits, each side with an optional sign
_LITERAL = re.compile(r'^([+-]?\d+)(?:/([+-]?\d+))?$', re.ASCII)


class BigFraction:
    """
    Immutable exact rational number.

    Instances compare, hash and format exactly. Mixed arithmetic with Python ints
    and Fractions is supported; the result is always a BigFraction.
    """

    __slots__ = ('_fraction',)

    def __init__(self, numerator: Union[int, 'BigFraction', Fraction], denominator: Optional[int] = None):
        """
        Args:
            numerator: An integer numerator, or another BigFraction/Fraction to copy
            denominator: Optional denominator (default 1 if not provided)

        Raises:
            ArithmeticError: If the denominator is zero
            TypeError: If a float or another inexact value is passed
        """
        if denominator is None:
            if isinstance(numerator, BigFraction):
                self._fraction = numerator._fraction
            elif isinstance(numerator, Fraction):
                self._fraction = numerator
            elif isinstance(numerator, int) and not isinstance(numerator, bool):
                self._fraction = Fraction(numerator)
            else:
                raise TypeError(f"Cannot build an exact fraction from {type(numerator).__name__}")
        else:
            if denominator == 0:
                if numerator == 0:
                    raise ArithmeticError("Division undefined")
                raise ArithmeticError("Division by zero")
            self._fraction = Fraction(numerator, denominator)

    @property
    def numerator(self) -> int:
        return self._fraction.numerator

    @property
    def denominator(self) -> int:
        return self._fraction.denominator

    def to_fraction(self) -> Fraction:
        """Return the underlying fractions.Fraction"""
        return self._fraction

    def abs(self) -> 'BigFraction':
        return BigFraction(abs(self._fraction))

    def negate(self) -> 'BigFraction':
        return BigFraction(-self._fraction)

    def add(self, other) -> 'BigFraction':
        """Add two BigFractions"""
        return BigFraction(self._fraction + _coerce(other))

    def subtract(self, other) -> 'BigFraction':
        """Subtract two BigFractions"""
        return BigFraction(self._fraction - _coerce(other))

    def multiply(self, other) -> 'BigFraction':
        """Multiply two BigFractions"""
        return BigFraction(self._fraction * _coerce(other))

    def divide(self, other) -> 'BigFraction':
        """Divide two BigFractions"""
        other = _coerce(other)
        if other == 0:
            raise ArithmeticError("Division by zero")
        return BigFraction(self._fraction / other)

    def invert(self) -> 'BigFraction':
        """
        Return multiplicative inverse (1/this).

        Raises:
            ArithmeticError: If this fraction is zero
        """
        if self._fraction == 0:
            raise ArithmeticError("Division by zero")
        return BigFraction(1 / self._fraction)

    def signum(self) -> int:
        """Return sign: -1, 0, or 1"""
        if self._fraction < 0:
            return -1
        elif self._fraction > 0:
            return 1
        else:
            return 0

    def is_zero(self) -> bool:
        return self._fraction == 0

    def is_one(self) -> bool:
        return self._fraction == 1

    def is_integer(self) -> bool:
        return self._fraction.denominator == 1

    def __eq__(self, other) -> bool:
        if isinstance(other, BigFraction):
            return self._fraction == other._fraction
        if isinstance(other, (int, Fraction)) and not isinstance(other, bool):
            return self._fraction == other
        return NotImplemented

    def __lt__(self, other) -> bool:
        if isinstance(other, BigFraction):
            return self._fraction < other._fraction
        return NotImplemented

    def __le__(self, other) -> bool:
        if isinstance(other, BigFraction):
            return self._fraction <= other._fraction
        return NotImplemented

    def __gt__(self, other) -> bool:
        if isinstance(other, BigFraction):
            return self._fraction > other._fraction
        return NotImplemented

    def __ge__(self, other) -> bool:
        if isinstance(other, BigFraction):
            return self._fraction >= other._fraction
        return NotImplemented

    def __bool__(self) -> bool:
        return self._fraction != 0

    def __hash__(self) -> int:
        return hash(self._fraction)

    def __str__(self) -> str:
        if self._fraction.denominator == 1:
            return str(self._fraction.numerator)
        return f"{self._fraction.numerator}/{self._fraction.denominator}"

    def __repr__(self) -> str:
        return f"BigFraction({self._fraction.numerator}, {self._fraction.denominator})"

    # pickling support for pool workers (__slots__ without __dict__)
    def __getstate__(self):
        return (self._fraction.numerator, self._fraction.denominator)

    def __setstate__(self, state):
        self._fraction = Fraction(*state)

    def __add__(self, other):
        return self.add(other)

    def __radd__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.subtract(other)

    def __rsub__(self, other):
        return BigFraction(_coerce(other) - self._fraction)

    def __mul__(self, other):
        return self.multiply(other)

    def __rmul__(self, other):
        return self.multiply(other)

    def __truediv__(self, other):
        return self.divide(other)

    def __rtruediv__(self, other):
        return self.invert().multiply(other)

    def __neg__(self):
        return self.negate()

    def __abs__(self):
        return self.abs()

    @staticmethod
    def value_of(value: Union[int, str, Fraction, 'BigFraction']) -> 'BigFraction':
        """
        Factory method to create a BigFraction from an int, Fraction or literal.

        String literals are either integers ("7", "-3") or "numerator/denominator"
        ("6/-4" gives -3/2). Surrounding whitespace is ignored.

        Raises:
            ValueError: If a string is not a valid rational literal
            ArithmeticError: If a literal has a zero denominator
            TypeError: For floats and other inexact inputs
        """
        if isinstance(value, BigFraction):
            return value
        if isinstance(value, str):
            match = _LITERAL.match(value.strip())
            if match is None:
                raise ValueError(f"Invalid rational literal: {value!r}")
            numerator, denominator = match.groups()
            if denominator is None:
                return BigFraction(int(numerator))
            return BigFraction(int(numerator), int(denominator))
        return BigFraction(value)


def _coerce(other) -> Fraction:
    if isinstance(other, BigFraction):
        return other._fraction
    if isinstance(other, (int, Fraction)) and not isinstance(other, bool):
        return Fraction(other)
    raise TypeError(f"Unsupported operand type for BigFraction: {type(other).__name__}")


BigFraction.ZERO = BigFraction(0, 1)
BigFraction.ONE = BigFraction(1, 1)
