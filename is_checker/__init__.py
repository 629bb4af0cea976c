"""is-checker — a minimalistic predicate library.

    from is_checker import is_

    is_.integer(4)                    -> True
    is_.not_.empty_string('  ')       -> False
    is_.deep_equal({'a': [1]}, {'a': [1]}) -> True

New predicates are added through bundles:

    def bundle(util, is_):
        util.add_predicate('positive', lambda value=UNDEFINED: is_.number(value) and value > 0)

    is_.use(bundle)
"""

from is_checker.core.errors import (
    DuplicateNameError,
    InvalidArgumentError,
    InvalidPredicateError,
    PredicateError,
    ReservedNameError,
)
from is_checker.core.keys import own_keys
from is_checker.core.tags import UNDEFINED, kind_of, tag_of
from is_checker.core.types import Bundle, PredicateSet, Registrar
from is_checker.registry import create, discover

is_ = discover()

__all__ = [
    'UNDEFINED',
    'Bundle',
    'DuplicateNameError',
    'InvalidArgumentError',
    'InvalidPredicateError',
    'PredicateError',
    'PredicateSet',
    'Registrar',
    'ReservedNameError',
    'create',
    'discover',
    'is_',
    'kind_of',
    'own_keys',
    'tag_of',
]
