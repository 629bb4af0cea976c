"""Own-keys enumeration and property access over the Python value model.

Which properties a value has:

  dict        its keys, spelled as strings (the plain object): 1 -> '1'
  sequence    index strings '0'..'n-1', plus the inherited 'length'
  ndarray     as a sequence, over its first axis
  mapping     as a dict
  set         nothing
  instance    public attributes from __dict__ / __slots__ (names starting
              with '_' are not enumerable); inherited class attributes are
              reachable but not own
"""

from collections.abc import Mapping, Sequence

import numpy as np

from is_checker.core.errors import InvalidArgumentError
from is_checker.core.tags import UNDEFINED, stringify

_MISSING = object()


def _is_sequence(value) -> bool:
    return isinstance(value, (Sequence, np.ndarray)) and not isinstance(value, Mapping)


def _as_index(key, length: int) -> int | None:
    """Return key as a valid index into a sequence of given length, else None."""
    if isinstance(key, bool):
        return None
    if isinstance(key, (int, np.integer)):
        index = int(key)
    elif isinstance(key, str) and key.isdigit() and (key == '0' or not key.startswith('0')):
        index = int(key)
    else:
        return None
    return index if 0 <= index < length else None


def _mapping_key(mapping, key):
    """Return the key of mapping that property name key refers to, else _MISSING."""
    try:
        if key in mapping:
            return key
    except TypeError:
        return _MISSING
    name = stringify(key)
    for candidate in mapping:
        if stringify(candidate) == name:
            return candidate
    return _MISSING


def _slot_names(value) -> list[str]:
    names = []
    for cls in type(value).__mro__:
        slots = cls.__dict__.get('__slots__', ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name not in names and hasattr(value, name):
                names.append(name)
    return names


def _attribute_names(value) -> list[str]:
    names = list(getattr(value, '__dict__', {}))
    for name in _slot_names(value):
        if name not in names:
            names.append(name)
    return [name for name in names if isinstance(name, str)]


def _sequence_length(value) -> int:
    if isinstance(value, np.ndarray) and value.ndim == 0:
        return 0
    return len(value)


def own_keys(value) -> list[str]:
    """Return the own, enumerable, string-keyed property names of value."""
    if value is None or value is UNDEFINED:
        raise InvalidArgumentError('own_keys called on non-object')

    if isinstance(value, Mapping):
        names = []
        for key in value:
            name = stringify(key)
            if name not in names:
                names.append(name)
        return names
    if _is_sequence(value):
        return [str(index) for index in range(_sequence_length(value))]
    return [name for name in _attribute_names(value) if not name.startswith('_')]


def has_own(value, key) -> bool:
    """Whether key is an own property of value (enumerable or not)."""
    if value is None or value is UNDEFINED:
        return False
    if isinstance(value, Mapping):
        return _mapping_key(value, key) is not _MISSING
    if _is_sequence(value):
        return _as_index(key, _sequence_length(value)) is not None
    return isinstance(key, str) and key in _attribute_names(value)


def has_property(value, key) -> bool:
    """Whether key is a direct or inherited property of value."""
    if has_own(value, key):
        return True
    if isinstance(value, Mapping) or value is None or value is UNDEFINED:
        return False
    if _is_sequence(value):
        return key == 'length'
    return isinstance(key, str) and hasattr(value, key)


def get_property(value, key):
    """Look up key on value. Returns UNDEFINED for a missing property."""
    if isinstance(value, Mapping):
        found = _mapping_key(value, key)
        return UNDEFINED if found is _MISSING else value[found]
    if _is_sequence(value):
        if key == 'length':
            return _sequence_length(value)
        index = _as_index(key, _sequence_length(value))
        return UNDEFINED if index is None else value[index]
    if not isinstance(key, str) or value is None or value is UNDEFINED:
        return UNDEFINED
    return getattr(value, key, UNDEFINED)


def length_of(value):
    """The 'length' property of value, or UNDEFINED."""
    return get_property(value, 'length')
