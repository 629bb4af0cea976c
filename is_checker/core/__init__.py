"""is_checker.core — Foundation layer.

Contains the tag classifier, own-keys enumerator, errors, config and the
registry types. This module has NO dependencies on is_checker.bundles or
is_checker.registry. Only stdlib and numpy are allowed here.
"""
