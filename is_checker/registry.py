"""Bundle discovery and the process-wide predicate set.

Imports the bundle modules under is_checker/bundles/ and applies each
module's `bundle` object to a PredicateSet. The core bundles are applied in
a fixed order (CORE_BUNDLES). Extra bundle modules found by pkgutil are
applied after them, sorted by module name.

discover() builds the process-wide set once and caches it. create() builds
a fresh, unshared set, for callers that want to register predicates of
their own without touching the shared one.
"""

import importlib
import logging
import pkgutil

from is_checker.core.types import Bundle, Predicate, PredicateSet

logger = logging.getLogger(__name__)

_default: PredicateSet | None = None

# Core bundle modules, in registration order
CORE_BUNDLES = [
    'nil',
    'number',
    'string',
    'boolean',
    'object',
    'array',
    'type',
    'equality',
]


def _bundle_modules() -> list[str]:
    import is_checker.bundles as pkg

    found = sorted(
        modname for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__) if not modname.startswith('_')
    )
    return CORE_BUNDLES + [modname for modname in found if modname not in CORE_BUNDLES]


def bundles() -> list[Bundle]:
    """Return the bundle objects of every bundle module, in application order."""
    found = []
    for modname in _bundle_modules():
        module = importlib.import_module(f'is_checker.bundles.{modname}')
        bundle = getattr(module, 'bundle', None)
        if isinstance(bundle, Bundle):
            found.append(bundle)
        else:
            logger.debug('Module is_checker.bundles.%s defines no bundle', modname)
    return found


def create() -> PredicateSet:
    """Build a new PredicateSet with every bundle applied."""
    predicates = PredicateSet()
    for bundle in bundles():
        predicates.use(bundle)
    logger.debug('Built %r', predicates)
    return predicates


def discover() -> PredicateSet:
    """Return the process-wide PredicateSet, building it on first call."""
    global _default
    if _default is None:
        _default = create()
    return _default


def get(name: str) -> Predicate:
    """Get a predicate by name."""
    predicates = discover()
    if name not in predicates:
        raise KeyError(f'Unknown predicate: {name}. Available: {", ".join(sorted(predicates))}')
    return predicates[name]


def all_predicates() -> dict[str, Predicate]:
    """Return all registered predicates."""
    predicates = discover()
    return {name: predicates[name] for name in predicates}
