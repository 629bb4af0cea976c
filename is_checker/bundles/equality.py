"""Equality checks.

Predicates: equal, deep_equal.

`equal` is SameValueZero: primitives of the same kind compare by value,
NaN equals NaN, 0 equals -0.0, and objects only equal themselves. Unlike
==, True and 1 are not equal.

`deep_equal` compares structurally:

- If the values are not of the same type, they are not equal.
- Primitives are compared with `equal`.
- Arrays must have the same length and deeply equal members.
- Otherwise the values must have the same set of own, enumerable, string
  keyed properties, all of which are deeply equal.

There is no cycle detection: comparing self-referencing structures
recurses until RecursionError.
"""

from is_checker.core.keys import get_property, has_own, own_keys
from is_checker.core.tags import UNDEFINED, kind_of
from is_checker.core.types import Bundle

bundle = Bundle(name='equality', help='Equality checks: SameValueZero and deep structural equality.')


@bundle.register
def register(util, is_) -> None:
    def equal(value=UNDEFINED, other=UNDEFINED) -> bool:
        """Checks whether given values are equal, using SameValueZero."""
        if value is other:
            return True
        if not (is_.primitive(value) and is_.primitive(other)) or kind_of(value) != kind_of(other):
            return False
        return bool(value == other) or (is_.nan(value) and is_.nan(other))

    def deep_equal(value=UNDEFINED, other=UNDEFINED) -> bool:
        """Checks whether given values are deeply equal."""
        if is_.not_.same_type(value, other):
            return False

        if is_.primitive(value):
            return is_.equal(value, other)

        if is_.array(value):
            if len(value) != len(other):
                return False
            return all(is_.deep_equal(a, b) for a, b in zip(value, other))

        keys = own_keys(value)
        if len(keys) != len(own_keys(other)):
            return False

        return all(
            has_own(other, key) and is_.deep_equal(get_property(value, key), get_property(other, key)) for key in keys
        )

    util.add_predicate('equal', equal)
    util.add_predicate('deep_equal', deep_equal)
