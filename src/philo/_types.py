"""Core protocols and type aliases for philo.

The type system has three seams:
- Value is whatever data is being matched (scalars, arrays, maps, field bags)
- Matchable is the custom-type port: any object with ``accepts(value)``
- Predicate and Handler are the canonical callable signatures; predicates
  always receive ``(value, key)`` and handlers ``(value, key, dispatch)``
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

# Scalars and containers alike. Containers are lists/tuples, mappings and
# SimpleNamespace field bags (see philo._value).
type Value = Any

# A single key (array index or field name) or an accumulated key path.
type Key = int | str | tuple[int | str, ...] | None

# Anything usable as a spec leaf or tree: literal, predicate, class, type
# name, container of specs, Matchable or MatchVariable.
type TypeSpec = Any


@runtime_checkable
class Matchable(Protocol):
    """A custom type that decides acceptance itself.

    Implementations return a plain bool; the matcher wraps it into
    Left(value) / Right(value).
    """

    def accepts(self, value: Value, /) -> bool: ...


class Predicate(Protocol):
    """A function spec. Returning False or a Left rejects; anything else accepts."""

    def __call__(self, value: Value, key: Key = None, /) -> Any: ...


class Handler(Protocol):
    """A dispatch handler.

    ``dispatch`` is the dispatcher that selected the handler, so handlers can
    recurse without naming it.
    """

    def __call__(self, value: Value, key: Key, dispatch: Any, /) -> Any: ...


@runtime_checkable
class Bindable(Protocol):
    """A spec leaf that records what it matched (see MatchVariable).

    Checked right after class objects: a logic variable is callable too,
    but must never be treated as a predicate.
    """

    def bind(self, value: Value, key: Key = None, /) -> Any: ...
