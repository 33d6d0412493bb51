"""
funkit: small pure helpers layered on top of toolz.

The package namespace is the union of `toolz.curried` and every helper
defined here. Where a name exists in both, the local helper wins
(e.g. `funkit.count` counts items matching a predicate).

ARCHITECTURAL GUARANTEE:
------------------------
Every helper is a pure function:
    - No I/O
    - No shared mutable state
    - Inputs are never mutated

Submodules group helpers by the kind of value they work on:
    lists, objects, strings, maths, logic, relations, predicates,
    functions, monads, promises.
"""

from types import ModuleType

import toolz.curried as _toolz_curried
from toolz.curried import *  # noqa: F401,F403

from funkit.kinds import *  # noqa: F401,F403
from funkit.functions import *  # noqa: F401,F403
from funkit.lists import *  # noqa: F401,F403
from funkit.logic import *  # noqa: F401,F403
from funkit.maths import *  # noqa: F401,F403
from funkit.monads import *  # noqa: F401,F403
from funkit.objects import *  # noqa: F401,F403
from funkit.predicates import *  # noqa: F401,F403
from funkit.promises import *  # noqa: F401,F403
from funkit.relations import *  # noqa: F401,F403
from funkit.strings import *  # noqa: F401,F403
from funkit import (
    functions,
    kinds,
    lists,
    logic,
    maths,
    monads,
    objects,
    predicates,
    promises,
    relations,
    strings,
)

__version__ = "0.1.0"


_LOCAL_MODULES = (kinds, functions, lists, logic, maths, monads, objects, predicates, promises, relations, strings)

_TOOLZ_NAMES = [
    name
    for name in dir(_toolz_curried)
    if not name.startswith("_")
    and name in globals()
    and not isinstance(getattr(_toolz_curried, name), ModuleType)
]

__all__ = [*dict.fromkeys(_TOOLZ_NAMES + [name for module in _LOCAL_MODULES for name in module.__all__])]
