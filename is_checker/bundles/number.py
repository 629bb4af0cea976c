"""Numeric classification.

Predicates: number, numeral, nan, odd, even, finite, infinite, integer,
safe_integer.

A number is an int, a float or a numpy real scalar; booleans are not
numbers. NaN and the infinities are numbers. Python ints are unbounded,
so every int is finite.

A numeral string follows the numeric-literal grammar of JS Number(): an
optional sign with decimal digits, a fraction and an exponent, or an unsigned
0x / 0o / 0b literal, with surrounding whitespace allowed. Underscores and
non-ASCII digits are not part of it.

Example:
    is_.integer(4.0)        -> True
    is_.numeral(' 12.5 ')   -> True
    is_.safe_integer(2 ** 53) -> False
"""

import math
import re

import numpy as np

from is_checker.core.tags import UNDEFINED, kind_of, tag_of
from is_checker.core.types import Bundle

bundle = Bundle(name='number', help='Numeric classification: finite, integer, odd/even, NaN...')

MAX_SAFE_INTEGER = 2**53 - 1
MIN_SAFE_INTEGER = -MAX_SAFE_INTEGER

_WHITESPACE = r'[\t\n\v\f\r \xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]*'
_DECIMAL_LITERAL = re.compile(
    _WHITESPACE + r'([+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))' + _WHITESPACE
)
_RADIX_LITERAL = re.compile(_WHITESPACE + r'(0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+)' + _WHITESPACE)


def _is_int(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def _parse_numeral(text: str):
    """Parse text the way JS Number() parses a string, or return None."""
    match = _RADIX_LITERAL.fullmatch(text)
    if match:
        return int(match.group(1), 0)
    match = _DECIMAL_LITERAL.fullmatch(text)
    if match:
        return float(match.group(1))
    return None


def _remainder(number):
    """number % 2, with the sign of number: -3 gives -1."""
    remainder = abs(number) % 2
    return -remainder if number < 0 else remainder


@bundle.register
def register(util, is_) -> None:
    def number(value=UNDEFINED) -> bool:
        """Checks whether given value is a number."""
        return kind_of(value) == 'number'

    def numeral(value=UNDEFINED) -> bool:
        """Checks whether given value is a numeral, i.e:

        - a genuine finite number
        - or a string that represents a finite number
        """
        if tag_of(value) not in ('number', 'string'):
            return False
        if is_.empty_string(value):
            return False
        if _is_int(value):
            return True
        if isinstance(value, str):
            value = _parse_numeral(value)
        return value is not None and is_.finite(value)

    def nan(value=UNDEFINED) -> bool:
        """Checks whether given value is NaN."""
        return is_.number(value) and bool(value != value)

    def odd(number=UNDEFINED) -> bool:
        """Checks whether given value is an odd number."""
        return is_.integer(number) and bool(_remainder(number) == 1)

    def even(number=UNDEFINED) -> bool:
        """Checks whether given value is an even number."""
        return is_.integer(number) and bool(_remainder(number) == 0)

    def finite(number=UNDEFINED) -> bool:
        """Checks whether given value is a finite number."""
        return is_.number(number) and (_is_int(number) or math.isfinite(number))

    def infinite(number=UNDEFINED) -> bool:
        """Checks whether given value is +inf or -inf."""
        return is_.number(number) and not _is_int(number) and math.isinf(number)

    def integer(number=UNDEFINED) -> bool:
        """Checks whether given value is an integer (4 and 4.0 both are)."""
        return is_.finite(number) and (_is_int(number) or float(number).is_integer())

    def safe_integer(number=UNDEFINED) -> bool:
        """Checks whether given value is an integer within +/-(2**53 - 1)."""
        return is_.integer(number) and bool(MIN_SAFE_INTEGER <= number <= MAX_SAFE_INTEGER)

    util.add_predicate('number', number)
    util.add_predicate('numeral', numeral)
    util.add_predicate('nan', nan)
    util.add_predicate('odd', odd)
    util.add_predicate('even', even)
    util.add_predicate('finite', finite)
    util.add_predicate('infinite', infinite)
    util.add_predicate('integer', integer)
    util.add_predicate('safe_integer', safe_integer)
