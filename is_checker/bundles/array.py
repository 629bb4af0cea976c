"""Array checks.

Predicates: array, array_like_object, in_array.

Lists and tuples are arrays. An object is array-like if it has a `length`
that is an integer in [0, 2**32 - 1]: every sequence qualifies through
len(), and so does a dict such as {'length': 2, '0': 'a'}. Functions are
never array-like. Indices missing from an array-like dict are holes and
are skipped by `in_array`.

Example:
    is_.in_array(3, [1, 2, 3, 4], 2)                 -> True
    is_.in_array(1, [1, 2, 3, 4], 2)                 -> False
    is_.in_array('A', ['a'], lambda v, e: v.lower() == e)  -> True
"""

from is_checker.core.keys import get_property, has_own, length_of
from is_checker.core.tags import UNDEFINED
from is_checker.core.types import Bundle

bundle = Bundle(name='array', help='Array checks: arrays, array-like objects, membership.')

MAX_ARRAY_LENGTH = 0xFFFFFFFF  # 32-bit unsigned int maximum


@bundle.register
def register(util, is_) -> None:
    def array(value=UNDEFINED) -> bool:
        """Checks whether given value is an array (a list or a tuple)."""
        return isinstance(value, (list, tuple))

    def array_like_object(value=UNDEFINED) -> bool:
        """Checks whether given value is an array-like object."""
        if is_.primitive(value) or is_.function(value):
            return False
        length = length_of(value)
        return is_.integer(length) and bool(0 <= length <= MAX_ARRAY_LENGTH)

    def in_array(value=UNDEFINED, array=UNDEFINED, offset=0, comparator=None) -> bool:
        """Checks whether an array or array-like object contains `value`.

        - value: The element to search.
        - array: The array or array-like object to search from.
        - offset: The index to search from, inclusive. Negative counts from the end.
        - comparator: Called as comparator(value, element). Defaults to `equal`.

        A callable passed as `offset` is taken as the comparator.
        """
        # Only works with genuine arrays or array-like objects.
        if is_.not_.array_like_object(array):
            return False

        if callable(offset):
            comparator = offset
            offset = 0
        else:
            offset = int(offset) if is_.integer(offset) else 0
            comparator = comparator if callable(comparator) else is_.equal

        length = int(length_of(array))

        # Allow negative offsets.
        if offset < 0:
            offset = length + offset

        if offset < 0 or offset >= length:
            return False

        for index in range(offset, length):
            # Skip holes in sparse array-likes.
            if not has_own(array, index):
                continue
            if comparator(value, get_property(array, index)):
                return True

        return False

    util.add_predicate('array', array)
    util.add_predicate('array_like_object', array_like_object)
    util.add_predicate('in_array', in_array)
