"""Checks against the two absent values, None and UNDEFINED.

Predicates: null, undefined, exist, nil.

Example:
    is_.nil(None)          -> True
    is_.exist(0)           -> True
    is_.undefined()        -> True   (omitted arguments are UNDEFINED)
"""

from is_checker.core.tags import UNDEFINED
from is_checker.core.types import Bundle

bundle = Bundle(name='nil', help='Checks against None and UNDEFINED.')


@bundle.register
def register(util, is_) -> None:
    def null(value=UNDEFINED) -> bool:
        """Checks whether given value is None."""
        return value is None

    def undefined(value=UNDEFINED) -> bool:
        """Checks whether given value is UNDEFINED."""
        return value is UNDEFINED

    def exist(value=UNDEFINED) -> bool:
        """Checks whether given value exists, i.e. is neither None nor UNDEFINED."""
        return value is not None and value is not UNDEFINED

    def nil(value=UNDEFINED) -> bool:
        """Checks whether given value is either None or UNDEFINED."""
        return value is None or value is UNDEFINED

    util.add_predicate('null', null)
    util.add_predicate('undefined', undefined)
    util.add_predicate('exist', exist)
    util.add_predicate('nil', nil)
