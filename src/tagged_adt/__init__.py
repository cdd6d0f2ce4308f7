"""tagged-adt: nominal Option and Result types for Python 3.13+.

Flat imports (preferred):
    from tagged_adt import Option, Some, Nothing, Result, Ok, Err
    from tagged_adt import safe, Ordering

Functional helpers live on the submodules:
    from tagged_adt import option, result
    option.compare(option.none(), option.some(3))  # Ordering.LESS
    result.equal(result.ok(1), result.ok(1))  # True
"""

from tagged_adt import option, result
from tagged_adt._config import AdtConfig, get_config, init
from tagged_adt.decorators import safe
from tagged_adt.errors import UnwrapError
from tagged_adt.option import Nothing, Option, Some
from tagged_adt.ordering import Ordering
from tagged_adt.result import Err, Ok, Result, collect
from tagged_adt.tag import Nominal, Tag, is_nominal, nominal, type_of, value_of

__all__ = [
    'AdtConfig',
    'Err',
    'Nominal',
    'Nothing',
    'Ok',
    'Option',
    'Ordering',
    'Result',
    'Some',
    'Tag',
    'UnwrapError',
    'collect',
    'get_config',
    'init',
    'is_nominal',
    'nominal',
    'option',
    'result',
    'safe',
    'type_of',
    'value_of',
]
