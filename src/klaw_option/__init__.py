"""klaw-option: Option type with absence diagnostics for Python 3.13+.

Flat imports (preferred):
    from klaw_option import Option, Some, Nothing, some, nothing
    from klaw_option import map_opt, flat_map_opt, filter_opt

Submodule imports (for organization):
    from klaw_option.types import Option, some
    from klaw_option.functions import map_opt
    from klaw_option.errors import NIL_VALUE, UnwrapError
"""

# Configuration
from klaw_option._config import OptionConfig, get_config, init

# Logging
from klaw_option._logging import configure_logging, get_logger

# Errors
from klaw_option.errors import (
    NIL_VALUE,
    NilValueError,
    OptionError,
    PredicateError,
    UnwrapError,
)

# Free functions
from klaw_option.functions import (
    filter_opt,
    flat_map_opt,
    is_nothing,
    is_some,
    map_opt,
)

# Types
from klaw_option.types import (
    Nothing,
    Option,
    Some,
    from_nullable,
    is_nil,
    nothing,
    some,
)

__all__ = [
    "NIL_VALUE",
    "NilValueError",
    "Nothing",
    "Option",
    "OptionConfig",
    "OptionError",
    "PredicateError",
    "Some",
    "UnwrapError",
    "configure_logging",
    "filter_opt",
    "flat_map_opt",
    "from_nullable",
    "get_config",
    "get_logger",
    "init",
    "is_nil",
    "is_nothing",
    "is_some",
    "map_opt",
    "nothing",
    "some",
]
