"""Core predicate bundles.

Every module in this package that defines a `bundle` object of type Bundle
is applied by is_checker.registry.create(). The core bundles run in the
fixed order listed in is_checker.registry.CORE_BUNDLES; any other bundle
module dropped into this package runs after them, in name order.
"""
