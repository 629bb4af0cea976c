"""Registry types for is-checker: PredicateSet, Registrar, Bundle."""

from __future__ import annotations

import functools
import logging
import threading
from collections.abc import Callable, Iterator

from is_checker.core.errors import DuplicateNameError, InvalidPredicateError, ReservedNameError

logger = logging.getLogger(__name__)

# `not` is a keyword, so the negated namespace is also reachable as `not_`
RESERVED_NAMES = frozenset({'not', 'use', 'not_', 'use_'})

Predicate = Callable[..., bool]


def _negate(name: str, predicate: Predicate) -> Predicate:
    @functools.wraps(predicate)
    def delegate(*args, **kwargs) -> bool:
        return not predicate(*args, **kwargs)

    delegate.__name__ = f'not_{name}'
    delegate.__doc__ = f'Negation of `{name}`.\n\n{predicate.__doc__ or ""}'.rstrip()
    return delegate


class _Namespace:
    """Read-only view of name -> predicate, with attribute and item access."""

    def __init__(self, label: str) -> None:
        self._label = label
        self._entries: dict[str, Predicate] = {}

    def __getattr__(self, name: str) -> Predicate:
        entries = self.__dict__.get('_entries', {})
        if name in entries:
            return entries[name]
        raise AttributeError(f'Unknown predicate: {self.__dict__.get("_label", "")}{name}')

    def __getitem__(self, name: str) -> Predicate:
        return self._entries[name]

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


class NegatedPredicates(_Namespace):
    """The `not` namespace of a PredicateSet."""

    def __init__(self) -> None:
        super().__init__('not.')


class PredicateSet(_Namespace):
    """A registry of predicates and their negations.

    Predicates are called as attributes or items:

        is_.integer(4)            -> True
        is_.not_.integer(4.5)     -> True
        is_['deep_equal'](a, b)

    New predicates only enter through a Registrar, which is handed to every
    bundle passed to use().
    """

    def __init__(self) -> None:
        super().__init__('')
        self._negated = NegatedPredicates()
        self._registrar = Registrar(self)

    def __getattr__(self, name: str) -> Predicate:
        if name == 'not':
            return self.__dict__['_negated']
        return super().__getattr__(name)

    def __repr__(self) -> str:
        return f'<PredicateSet: {len(self)} predicates>'

    @property
    def not_(self) -> NegatedPredicates:
        return self._negated

    def use(self, bundle: object) -> None:
        """Apply a bundle: call it with (registrar, self). Non-callables are ignored."""
        if not callable(bundle):
            logger.debug('Ignoring non-callable bundle %r', bundle)
            return
        logger.debug('Applying bundle %s', getattr(bundle, 'name', bundle))
        bundle(self._registrar, self)


class Registrar:
    """The registration capability handed to bundles."""

    def __init__(self, predicates: PredicateSet) -> None:
        self._predicates = predicates
        self._lock = threading.Lock()

    def add_predicate(self, name: str, predicate: Predicate) -> None:
        """Register predicate under name, together with its negation."""
        if not isinstance(name, str):
            raise InvalidPredicateError(f'predicate name must be a string, got {type(name).__name__}')
        # A predicate may not shadow the set's own attributes
        if name in RESERVED_NAMES or name.startswith('_') or hasattr(type(self._predicates), name):
            raise ReservedNameError(name)

        with self._lock:
            if name in self._predicates:
                raise DuplicateNameError(name)
            if not callable(predicate):
                raise InvalidPredicateError('predicate must be a function')

            self._predicates._entries[name] = predicate
            self._predicates.not_._entries[name] = _negate(name, predicate)

        logger.debug('Registered predicate %s', name)


class Bundle:
    """A self-registering collection of related predicates.

    Usage in a bundle module:

        bundle = Bundle(name='nil', help='Checks against None and UNDEFINED')

        @bundle.register
        def register(util, is_):
            util.add_predicate('null', lambda value=UNDEFINED: value is None)
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._register_fn: Callable | None = None

    def register(self, fn: Callable) -> Callable:
        """Decorator to set the registration function."""
        self._register_fn = fn
        return fn

    def __call__(self, util: Registrar, predicates: PredicateSet) -> None:
        if self._register_fn is None:
            raise RuntimeError(f'Bundle {self.name} has no register function')
        self._register_fn(util, predicates)

    def __repr__(self) -> str:
        return f'<Bundle {self.name}>'
