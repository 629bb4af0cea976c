"""String checks.

Predicates: string, empty_string, substring, prefix, suffix.

Affixes and substrings that are not strings are coerced first, so
is_.prefix(1, '1st') holds.

Example:
    is_.substring('lo', 'hello')       -> True
    is_.substring('lo', 'hello', 4)    -> False  (search starts past the match)
    is_.suffix('lo', 'hello')          -> True
"""

import re

from is_checker.core.tags import UNDEFINED, stringify, tag_of
from is_checker.core.types import Bundle

bundle = Bundle(name='string', help='String checks: blank strings, substrings, prefixes, suffixes.')

_BLANK = re.compile(r'\s*')


@bundle.register
def register(util, is_) -> None:
    def string(value=UNDEFINED) -> bool:
        """Checks whether given value is a string."""
        return isinstance(value, str)

    def empty_string(string=UNDEFINED) -> bool:
        """Checks whether given value is an empty string, i.e. a string with
        whitespace characters only.
        """
        return is_.string(string) and _BLANK.fullmatch(string) is not None

    def substring(substring=UNDEFINED, string=UNDEFINED, offset=0) -> bool:
        """Checks whether `substring` may be found within `string`, at or after `offset`.

        A negative offset counts from the end. An offset outside the string
        never matches.
        """
        if tag_of(string) != 'string':
            return False

        length = len(string)
        offset = int(offset) if is_.integer(offset) else 0

        # Allow negative offsets.
        if offset < 0:
            offset = length + offset

        if offset < 0 or offset >= length:
            return False

        return string.find(stringify(substring), offset) != -1

    def prefix(prefix=UNDEFINED, string=UNDEFINED) -> bool:
        """Checks whether `string` starts with `prefix`."""
        return tag_of(string) == 'string' and string.startswith(stringify(prefix))

    def suffix(suffix=UNDEFINED, string=UNDEFINED) -> bool:
        """Checks whether `string` ends with `suffix`."""
        return tag_of(string) == 'string' and string.endswith(stringify(suffix))

    util.add_predicate('string', string)
    util.add_predicate('empty_string', empty_string)
    util.add_predicate('substring', substring)
    util.add_predicate('prefix', prefix)
    util.add_predicate('suffix', suffix)
