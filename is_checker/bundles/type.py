"""Type checks built on the tag classifier.

Predicates: same_type, primitive, and one tag check per native kind:
date, error, function, map, regexp, set, symbol.

Primitives are None, UNDEFINED, numbers, strings, booleans and symbols
(bare object() sentinels). Everything else is an object.
"""

from is_checker.core.tags import UNDEFINED, kind_of, tag_of
from is_checker.core.types import Bundle

bundle = Bundle(name='type', help='Type checks: same_type, primitive, date, error, function, map, regexp, set, symbol.')

TAGS = ['date', 'error', 'function', 'map', 'regexp', 'set', 'symbol']


def _make_predicate(tag: str):
    def predicate(value=UNDEFINED) -> bool:
        return tag_of(value) == tag

    predicate.__name__ = tag
    predicate.__doc__ = f'Checks whether given value is tagged {tag!r}.'
    return predicate


@bundle.register
def register(util, is_) -> None:
    def same_type(value=UNDEFINED, other=UNDEFINED) -> bool:
        """Checks whether given values are of the same type."""
        return kind_of(value) == kind_of(other) and tag_of(value) == tag_of(other)

    def primitive(value=UNDEFINED) -> bool:
        """Checks whether given value is a primitive."""
        return is_.nil(value) or is_.number(value) or is_.string(value) or is_.boolean(value) or is_.symbol(value)

    util.add_predicate('same_type', same_type)
    util.add_predicate('primitive', primitive)

    for tag in TAGS:
        util.add_predicate(tag, _make_predicate(tag))
