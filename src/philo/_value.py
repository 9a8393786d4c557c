"""Uniform view over scalars and containers.

Three container shapes are recognised:

| Kind   | Python types              | Keys                 |
|--------|---------------------------|----------------------|
| ARRAY  | list, tuple               | 0..n-1, ordered      |
| MAP    | any collections.abc.Mapping | hashable, insertion order |
| FIELDS | types.SimpleNamespace     | attribute names      |

Strings and bytes are scalars. Everything the matcher and dispatcher need
from a container goes through entries(), lookup() and rebuild(), so the
shape of every result mirrors the shape of its input.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator, Mapping
from types import SimpleNamespace
from typing import TYPE_CHECKING, Any, Final

if TYPE_CHECKING:
    from philo._types import Key, Value


class _Missing:
    """Sentinel for an absent key (distinct from a present None)."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


class ContainerKind(enum.Enum):
    ARRAY = "array"
    MAP = "map"
    FIELDS = "fields"


def container_kind(x: Value) -> ContainerKind | None:
    """Classify x, or return None for scalars."""
    if isinstance(x, (list, tuple)):
        return ContainerKind.ARRAY
    if isinstance(x, Mapping):
        return ContainerKind.MAP
    if isinstance(x, SimpleNamespace):
        return ContainerKind.FIELDS
    return None


def is_container(x: Value, key: Key = None, /) -> bool:
    return container_kind(x) is not None


def entries(x: Value) -> Iterator[tuple[Any, Value]]:
    """Iterate (key, value) pairs in stable order. Scalars yield nothing."""
    match container_kind(x):
        case ContainerKind.ARRAY:
            yield from enumerate(x)
        case ContainerKind.MAP:
            yield from x.items()
        case ContainerKind.FIELDS:
            yield from vars(x).items()


def lookup(x: Value, key: Any, default: Any = MISSING) -> Value:
    """Return the child of x stored under key, or default when absent."""
    match container_kind(x):
        case ContainerKind.ARRAY:
            if type(key) is int and 0 <= key < len(x):
                return x[key]
        case ContainerKind.MAP:
            try:
                if key in x:
                    return x[key]
            except TypeError:  # unhashable key
                return default
        case ContainerKind.FIELDS:
            if isinstance(key, str):
                return vars(x).get(key, default)
    return default


def rebuild(like: Value, pairs: Iterable[tuple[Any, Value]], fill: Any = None) -> Value:
    """Build a container shaped like `like` from (key, value) pairs.

    Arrays keep list/tuple-ness. Integer positions missing from `pairs` are
    filled with `fill`; an array that ends up with non-integer keys can only
    be represented as a dict.
    """
    slots = dict(pairs)
    match container_kind(like):
        case ContainerKind.ARRAY:
            if not all(type(k) is int and k >= 0 for k in slots):
                return slots
            size = max((k + 1 for k in slots), default=0)
            items = [slots.get(i, fill) for i in range(size)]
            return tuple(items) if isinstance(like, tuple) else items
        case ContainerKind.MAP:
            return slots
        case ContainerKind.FIELDS:
            return SimpleNamespace(**{str(k): v for k, v in slots.items()})
    msg = f"cannot rebuild a scalar of type {type(like).__name__}"
    raise TypeError(msg)


def null_shape(x: Value) -> Value:
    """Same shape as x with every leaf replaced by None."""
    if not is_container(x):
        return None
    return rebuild(x, ((k, null_shape(v)) for k, v in entries(x)))


def strictly_equal(a: Any, b: Any) -> bool:
    """Equality that also requires the same type (1 is neither True nor 1.0)."""
    return type(a) is type(b) and a == b


def key_path(key: Key) -> tuple[Any, ...]:
    """Normalize a key to a path tuple."""
    if key is None:
        return ()
    if isinstance(key, tuple):
        return key
    return (key,)


def child_key(parent: Key, key: Any) -> Key:
    """Key of a child: the bare key at the top level, else the extended path."""
    if parent is None:
        return key
    return (*key_path(parent), key)
