"""Object checks.

Predicates: object, empty_object, property_defined, conforms.

An object is anything that is not a primitive: dicts, lists, sets,
functions, class instances...

`conforms` checks an object against a schema, a dict whose callable values
are validators taking these parameters (in order):

  value    The value of the current key in the object.
  key      The key itself.
  context  The object in question.

A validator is only given as many of these as it declares, so
`lambda v: v == 1` and the predicates themselves (`is_.string`) work too.

An object conforms to the schema if it has every validated key as an own
property and every validator returns True. In strict mode, the object and
the schema must also have the same number of own keys.

Example:
    is_.property_defined({'a': {'b': 1}}, 'a.b')                    -> True
    is_.conforms({'a': 1, 'b': 2}, {'a': lambda v: v == 1})           -> True
    is_.conforms({'a': 1, 'b': 2}, {'a': lambda v: v == 1}, True)     -> False
"""

import inspect

from is_checker.core.keys import get_property, has_own, has_property, own_keys
from is_checker.core.tags import UNDEFINED, stringify
from is_checker.core.types import Bundle

bundle = Bundle(name='object', help='Object checks: emptiness, dotted property paths, schemas.')

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def _call_validator(validator, *args):
    """Call validator with as many of args as its signature takes."""
    try:
        parameters = inspect.signature(validator).parameters.values()
    except (TypeError, ValueError):
        return validator(*args)
    if any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in parameters):
        return validator(*args)
    arity = sum(1 for p in parameters if p.kind in _POSITIONAL)
    return validator(*args[:arity])


@bundle.register
def register(util, is_) -> None:
    def object_(value=UNDEFINED) -> bool:
        """Checks whether given value is an object."""
        return is_.not_.primitive(value)

    def empty_object(object=UNDEFINED) -> bool:
        """Checks whether given value is an object without any own enumerable keys."""
        return is_.object(object) and not own_keys(object)

    def property_defined(object=UNDEFINED, path=UNDEFINED) -> bool:
        """Checks whether dotted `path` is a direct or inherited property of `object`."""
        context = object
        for key in stringify(path).split('.'):
            # An empty segment ends the walk
            if not key:
                break
            if is_.not_.object(context) or not has_property(context, key):
                return False
            context = get_property(context, key)
        return True

    def conforms(object=UNDEFINED, schema=UNDEFINED, strict=False) -> bool:
        """Checks whether `object` conforms to `schema`."""
        if is_.not_.object(object) or is_.not_.object(schema):
            return False

        keys = own_keys(schema)
        if strict and len(keys) != len(own_keys(object)):
            return False

        for key in keys:
            validator = get_property(schema, key)
            if not callable(validator):
                continue
            if not has_own(object, key) or not _call_validator(validator, get_property(object, key), key, object):
                return False

        return True

    util.add_predicate('object', object_)
    util.add_predicate('empty_object', empty_object)
    util.add_predicate('property_defined', property_defined)
    util.add_predicate('conforms', conforms)
