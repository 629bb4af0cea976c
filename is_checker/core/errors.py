"""Exceptions raised while registering predicates or enumerating keys.

Predicate evaluation itself never raises: malformed input yields False.
"""


class PredicateError(Exception):
    """Base class for every error raised by is_checker."""


class ReservedNameError(PredicateError, ValueError):
    def __init__(self, name: str):
        super().__init__(f'"{name}" is a reserved name')
        self.name = name


class DuplicateNameError(PredicateError, ValueError):
    def __init__(self, name: str):
        super().__init__(f'predicate "{name}" already defined')
        self.name = name


class InvalidPredicateError(PredicateError, TypeError):
    """Registration target is not callable."""


class InvalidArgumentError(PredicateError, TypeError):
    """Key enumeration requested on None or UNDEFINED."""
