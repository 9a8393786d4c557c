"""Type registry for resolving type-name strings to classes.

A string spec that names a registered type is matched with isinstance();
any other string is a plain literal. Which names are known is decided by
the *active* registry, so the same spec can be reused under different
registries:

    registry = (
        RegistryBuilder()
        .type("Animal", Animal)
        .type("Decimal", "decimal.Decimal")
        .build()
    )
    with registry.activate():
        is_("Animal", Dog())          # True
        is_("Animal", "Animal")       # False, it names a type now

Entries are either classes or dotted import paths ("pkg.mod.Class" or
"pkg.mod:Class") that are imported on first use.

Lifecycle:
- RegistryBuilder → .build() → Registry (immutable)
- no runtime registration after build
"""

from __future__ import annotations

import importlib
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from types import MappingProxyType

from loguru import logger

from philo._errors import InvalidConfigError, TypeResolutionError

MAX_TYPE_NAME_LENGTH = 256

type TypeEntry = type | str


class RegistryBuilder:
    """Builder for constructing a Registry.

    Register names with classes or dotted paths, then call build() to
    produce an immutable Registry.
    """

    def __init__(self) -> None:
        self._types: dict[str, TypeEntry] = {}

    def type(self, name: str, target: TypeEntry) -> RegistryBuilder:
        """Register a class (or a dotted path to one) under name."""
        if not name:
            msg = "type name must be a non-empty string"
            raise InvalidConfigError(msg)
        if len(name) > MAX_TYPE_NAME_LENGTH:
            msg = f"type name length {len(name)} exceeds maximum {MAX_TYPE_NAME_LENGTH}"
            raise InvalidConfigError(msg)
        self._types[name] = target
        return self

    def build(self) -> Registry:
        """Freeze the registry. No further registration is possible."""
        logger.debug("philo.registry.built types={}", sorted(self._types))
        return Registry(_types=MappingProxyType(dict(self._types)))


def register_builtin_types(builder: RegistryBuilder) -> RegistryBuilder:
    """Register aliases for the common abstract collection and number types.

    Opt-in: once registered, these strings stop being usable as literals.
    """
    return (
        builder.type("Mapping", "collections.abc.Mapping")
        .type("Sequence", "collections.abc.Sequence")
        .type("Iterable", "collections.abc.Iterable")
        .type("Callable", "collections.abc.Callable")
        .type("Hashable", "collections.abc.Hashable")
        .type("Number", "numbers.Number")
    )


@dataclass(frozen=True, slots=True)
class Registry:
    """Immutable mapping of type names to classes.

    Constructed via RegistryBuilder. Use activate() to make it the registry
    consulted by create()/is_() in the current context.
    """

    _types: MappingProxyType[str, TypeEntry] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @property
    def type_count(self) -> int:
        """Number of registered type names."""
        return len(self._types)

    def contains(self, name: str) -> bool:
        """Check if a type name is registered."""
        return name in self._types

    def type_names(self) -> list[str]:
        """Return all registered type names (sorted)."""
        return sorted(self._types.keys())

    def resolve(self, name: str) -> type:
        """Resolve a registered name to its class.

        Raises:
            TypeResolutionError: name unknown, import failed, or the target
                is not a class.
        """
        target = self._types.get(name)
        if target is None:
            raise TypeResolutionError(name, "not registered")
        if isinstance(target, str):
            target = _import_dotted(name, target)
        if not isinstance(target, type):
            raise TypeResolutionError(name, f"{target!r} is not a class")
        return target

    @contextmanager
    def activate(self) -> Iterator[Registry]:
        """Make this registry the active one for the duration of the block."""
        token = _active_registry.set(self)
        try:
            yield self
        finally:
            _active_registry.reset(token)


_EMPTY = Registry()

_active_registry: ContextVar[Registry] = ContextVar("philo_registry", default=_EMPTY)


def current_registry() -> Registry:
    """The registry consulted for type-name specs in this context."""
    return _active_registry.get()


def _import_dotted(name: str, path: str) -> object:
    """Import "pkg.mod.Attr" or "pkg.mod:Attr"."""
    if ":" in path:
        module_name, _, attr = path.partition(":")
    else:
        module_name, _, attr = path.rpartition(".")
    if not module_name or not attr:
        raise TypeResolutionError(name, f"malformed import path {path!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        logger.warning("philo.registry.import_failed name={} path={}", name, path)
        raise TypeResolutionError(name, f"cannot import {module_name!r}: {e}") from e
    try:
        target = getattr(module, attr)
    except AttributeError as e:
        logger.warning("philo.registry.import_failed name={} path={}", name, path)
        raise TypeResolutionError(name, f"{module_name!r} has no attribute {attr!r}") from e
    logger.debug("philo.registry.resolved name={} path={}", name, path)
    return target
