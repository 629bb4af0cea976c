"""Boolean check.

Only True and False (and numpy booleans) qualify: 0, 1 and truthy values
do not.
"""

import numpy as np

from is_checker.core.tags import UNDEFINED
from is_checker.core.types import Bundle

bundle = Bundle(name='boolean', help='Checks whether a value is a boolean.')


@bundle.register
def register(util, is_) -> None:
    def boolean(value=UNDEFINED) -> bool:
        """Checks whether given value is a boolean."""
        return value is True or value is False or isinstance(value, np.bool_)

    util.add_predicate('boolean', boolean)
