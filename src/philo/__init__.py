"""philo — structural pattern matching and validation for dynamic data.

All public names are exported from this module for flat imports:

    from philo import create, is_, lval, rval, match, rmatch, k, MatchVariable

Logging goes through loguru and is disabled by default; call
``logger.enable("philo")`` to see dispatch and binding events.
"""

from loguru import logger

__version__ = "0.1.0"

# Connectives
from philo._connectives import (
    And,
    Maybe,
    Not,
    Or,
    Strict,
    all_,
    any_,
    maybe,
    not_,
    strict,
)

# Config
from philo._config import (
    RegistryConfig,
    load_registry,
    load_registry_yaml,
    parse_registry_config,
)

# Dispatch
from philo._dispatch import (
    Action,
    Case,
    Dispatcher,
    KeySpec,
    descend,
    k,
    match,
    recurse,
    rmatch,
    spec_depth,
)

# Either algebra
from philo._either import (
    Either,
    Left,
    Right,
    is_left,
    is_right,
    left,
    lval,
    right,
    rval,
    to_either,
)

# Errors
from philo._errors import (
    ConfigParseError,
    InvalidConfigError,
    PhiloError,
    SpecError,
    TypeResolutionError,
)

# Matcher
from philo._matcher import create, is_

# Predicates
from philo._predicates import (
    Comparison,
    Membership,
    eq,
    gt,
    gte,
    identity,
    in_,
    is_bool,
    is_callable,
    is_float,
    is_int,
    is_list,
    is_mapping,
    is_namespace,
    is_null,
    is_numeric,
    is_scalar,
    is_string,
    is_url,
    lt,
    lte,
)

# Quantifiers
from philo._quantifiers import Every, Some, every, some

# Registry
from philo._registry import (
    MAX_TYPE_NAME_LENGTH,
    Registry,
    RegistryBuilder,
    current_registry,
    register_builtin_types,
)

from philo._types import Bindable, Handler, Key, Matchable, Predicate, TypeSpec, Value

# Value model
from philo._value import (
    MISSING,
    ContainerKind,
    child_key,
    container_kind,
    entries,
    is_container,
    key_path,
    lookup,
    null_shape,
    rebuild,
    strictly_equal,
)

# Logic variables
from philo._variable import Fanout, MatchVariable, fanout, variables

logger.disable("philo")

__all__ = [
    # Protocols and aliases
    "Bindable",
    "Handler",
    "Key",
    "Matchable",
    "Predicate",
    "TypeSpec",
    "Value",
    # Value model
    "MISSING",
    "ContainerKind",
    "container_kind",
    "is_container",
    "entries",
    "lookup",
    "rebuild",
    "null_shape",
    "strictly_equal",
    "key_path",
    "child_key",
    # Either algebra
    "Either",
    "Left",
    "Right",
    "left",
    "right",
    "is_left",
    "is_right",
    "lval",
    "rval",
    "to_either",
    # Matcher
    "create",
    "is_",
    # Connectives
    "And",
    "Or",
    "Not",
    "Maybe",
    "Strict",
    "all_",
    "any_",
    "not_",
    "maybe",
    "strict",
    # Quantifiers
    "Every",
    "Some",
    "every",
    "some",
    # Predicates
    "Comparison",
    "Membership",
    "eq",
    "gt",
    "gte",
    "lt",
    "lte",
    "in_",
    "is_bool",
    "is_int",
    "is_float",
    "is_numeric",
    "is_string",
    "is_scalar",
    "is_list",
    "is_mapping",
    "is_namespace",
    "is_callable",
    "is_null",
    "is_url",
    "identity",
    # Dispatch
    "Action",
    "Case",
    "Dispatcher",
    "KeySpec",
    "match",
    "rmatch",
    "recurse",
    "descend",
    "k",
    "spec_depth",
    # Logic variables
    "MatchVariable",
    "Fanout",
    "fanout",
    "variables",
    # Registry and config
    "Registry",
    "RegistryBuilder",
    "register_builtin_types",
    "current_registry",
    "MAX_TYPE_NAME_LENGTH",
    "RegistryConfig",
    "parse_registry_config",
    "load_registry",
    "load_registry_yaml",
    # Errors
    "PhiloError",
    "SpecError",
    "TypeResolutionError",
    "ConfigParseError",
    "InvalidConfigError",
]
