"""Config types for building a type registry from data.

Config-driven registry construction path:
  dict / YAML → parse_registry_config() → RegistryConfig → load_registry() → Registry

Expected shape::

    types:
      Animal: myapp.models.Animal
      Decimal: decimal:Decimal
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import yaml

from philo._errors import ConfigParseError
from philo._registry import Registry, RegistryBuilder, register_builtin_types


@dataclass(frozen=True, slots=True)
class RegistryConfig:
    """Type names mapped to dotted import paths.

    When builtins is true the abstract collection/number aliases from
    register_builtin_types() are included as well.
    """

    types: dict[str, str] = field(default_factory=dict)
    builtins: bool = False


def parse_registry_config(data: dict[str, Any]) -> RegistryConfig:
    """Parse a dict into a RegistryConfig.

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if not isinstance(data, dict):
        msg = f"expected dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    raw_types = data.get("types", {})
    if not isinstance(raw_types, dict):
        msg = f"'types' must be a dict, got {type(raw_types).__name__}"
        raise ConfigParseError(msg)

    types: dict[str, str] = {}
    for name, path in raw_types.items():
        if not isinstance(name, str):
            msg = f"type name must be a string, got {type(name).__name__}"
            raise ConfigParseError(msg)
        if not isinstance(path, str):
            msg = f"import path for {name!r} must be a string, got {type(path).__name__}"
            raise ConfigParseError(msg)
        types[name] = path

    builtins = data.get("builtins", False)
    if not isinstance(builtins, bool):
        msg = f"'builtins' must be a bool, got {type(builtins).__name__}"
        raise ConfigParseError(msg)

    return RegistryConfig(types=types, builtins=builtins)


def load_registry(config: RegistryConfig) -> Registry:
    """Build a Registry from a parsed config.

    Import paths are resolved lazily, on first match against the name.

    Raises:
        InvalidConfigError: a type name is empty or too long
    """
    builder = RegistryBuilder()
    if config.builtins:
        builder = register_builtin_types(builder)
    for name, path in config.types.items():
        builder.type(name, path)
    return builder.build()


def load_registry_yaml(text: str) -> Registry:
    """Parse YAML text and build a Registry from it."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        msg = f"invalid YAML: {e}"
        raise ConfigParseError(msg) from e
    return load_registry(parse_registry_config(data if data is not None else {}))
