"""Tag classifier: a normalized lowercase "kind" string for any value.

Two notions of type are used by the predicates:

  tag_of(value)   The fine-grained tag. Native values map onto a small
                  structural vocabulary (null, undefined, boolean, number,
                  string, array, object, set, map, regexp, date, error,
                  function, symbol). Instances of user-defined classes are
                  tagged with their class name, lowercased.
  kind_of(value)  The coarse, typeof-style kind: undefined, object, boolean,
                  number, string, symbol, function.

UNDEFINED is the absent value. Every predicate parameter the caller omits
defaults to it.
"""

import datetime
import decimal
import functools
import math
import re
import types
from collections.abc import Mapping

import numpy as np


class _Undefined:
    """The absent/uninitialized value. There is exactly one instance."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'UNDEFINED'

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()

# Modules whose classes are "native": they get the structural tag, never their own name
_NATIVE_MODULES = {'builtins', 'datetime', 're', 'types', 'functools', 'collections'}

_FUNCTION_TYPES = (
    type,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.MethodWrapperType,
    types.WrapperDescriptorType,
    types.MethodDescriptorType,
    functools.partial,
)

# Order matters: bool before int, dict before Mapping
_STRUCTURAL_TAGS: list[tuple[type | tuple[type, ...], str]] = [
    ((bool, np.bool_), 'boolean'),
    ((int, float, np.integer, np.floating), 'number'),
    (str, 'string'),
    ((list, tuple), 'array'),
    (dict, 'object'),
    ((set, frozenset), 'set'),
    (Mapping, 'map'),
    (re.Pattern, 'regexp'),
    (datetime.date, 'date'),
    (BaseException, 'error'),
    (_FUNCTION_TYPES, 'function'),
]


def _structural_tag(value) -> str:
    if type(value) is object:
        # Bare object() instances are the unique identity tokens of Python
        return 'symbol'
    for classes, tag in _STRUCTURAL_TAGS:
        if isinstance(value, classes):
            return tag
    return 'object'


def _is_native(cls: type) -> bool:
    return cls.__module__ in _NATIVE_MODULES or issubclass(cls, np.generic)


def tag_of(value) -> str:
    """Return the tag of any value. Never raises."""
    if value is None:
        return 'null'
    if value is UNDEFINED:
        return 'undefined'

    tag_from_structure = _structural_tag(value)

    cls = type(value)
    if isinstance(value, type) or _is_native(cls):
        return tag_from_structure

    tag_from_name = getattr(cls, '__name__', '')
    return (tag_from_name or tag_from_structure).lower()


def kind_of(value) -> str:
    """Return the typeof-style kind of any value."""
    if value is UNDEFINED:
        return 'undefined'
    if value is None:
        return 'object'
    tag = _structural_tag(value)
    if tag in ('boolean', 'number', 'string', 'symbol'):
        return tag
    if callable(value):
        return 'function'
    return 'object'


def _float_to_string(number: float) -> str:
    """Format a finite float like JS Number#toString: shortest round-trip digits,
    plain notation for magnitudes in [1e-6, 1e21), exponent notation outside.
    """
    if number == 0:
        return '0'
    sign = '-' if number < 0 else ''
    _, digit_tuple, exponent = decimal.Decimal(repr(abs(number))).as_tuple()
    digits = ''.join(map(str, digit_tuple))
    # Position of the decimal point relative to the start of digits
    point = len(digits) + exponent
    digits = digits.rstrip('0')
    count = len(digits)

    if count <= point <= 21:
        text = digits + '0' * (point - count)
    elif 0 < point <= 21:
        text = f'{digits[:point]}.{digits[point:]}'
    elif -6 < point <= 0:
        text = '0.' + '0' * -point + digits
    else:
        mantissa = digits if count == 1 else f'{digits[0]}.{digits[1:]}'
        text = f'{mantissa}e{point - 1:+d}'
    return sign + text


def stringify(value) -> str:
    """Coerce a value to the string form used by the string predicates."""
    if isinstance(value, str):
        return value
    if value is None:
        return 'null'
    if value is UNDEFINED:
        return 'undefined'
    if isinstance(value, (bool, np.bool_)):
        return 'true' if value else 'false'
    if isinstance(value, (float, np.floating)):
        if math.isnan(value):
            return 'NaN'
        if math.isinf(value):
            return 'Infinity' if value > 0 else '-Infinity'
        return _float_to_string(float(value))
    return str(value)
