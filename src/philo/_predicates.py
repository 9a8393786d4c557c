"""Ready-made predicate specs.

Every predicate takes ``(value, key=None)`` so it can be used directly as a
spec leaf, and returns a plain bool.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from types import SimpleNamespace
from typing import TYPE_CHECKING, Any
from urllib.parse import urlsplit

import re2

from philo._value import entries, is_container, strictly_equal

if TYPE_CHECKING:
    from philo._types import Key, Value

_NUMERIC_STRING = re2.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")

_OPERATORS: dict[str, Callable[[Any, Any], Any]] = {
    "==": strictly_equal,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
}


@dataclass(frozen=True, slots=True)
class Comparison:
    """Compare the value against a fixed operand.

    Values that cannot be ordered against the operand are rejected rather
    than raising.
    """

    symbol: str
    operand: Any

    def __call__(self, value: Value, key: Key = None, /) -> bool:
        try:
            return bool(_OPERATORS[self.symbol](value, self.operand))
        except TypeError:
            return False


@dataclass(frozen=True, slots=True)
class Membership:
    """Value is one of a fixed set of options.

    strict membership requires the same type as well (1 is not in (True,)).
    """

    options: tuple[Any, ...]
    strict: bool = True

    def __call__(self, value: Value, key: Key = None, /) -> bool:
        if self.strict:
            return any(strictly_equal(option, value) for option in self.options)
        return value in self.options


def eq(operand: Any) -> Comparison:
    return Comparison("==", operand)


def gt(operand: Any) -> Comparison:
    return Comparison(">", operand)


def gte(operand: Any) -> Comparison:
    return Comparison(">=", operand)


def lt(operand: Any) -> Comparison:
    return Comparison("<", operand)


def lte(operand: Any) -> Comparison:
    return Comparison("<=", operand)


def in_(options: Iterable[Any], strict: bool = True) -> Membership:
    return Membership(tuple(options), strict)


# ── Type tests ────────────────────────────────────────────────────────────


def is_bool(value: Value, key: Key = None, /) -> bool:
    return isinstance(value, bool)


def is_int(value: Value, key: Key = None, /) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_float(value: Value, key: Key = None, /) -> bool:
    return isinstance(value, float)


def is_numeric(value: Value, key: Key = None, /) -> bool:
    """Numbers (not bools) and strings that spell a decimal number."""
    if isinstance(value, str):
        return _NUMERIC_STRING.search(value) is not None
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_string(value: Value, key: Key = None, /) -> bool:
    return isinstance(value, str)


def is_scalar(value: Value, key: Key = None, /) -> bool:
    return isinstance(value, (bool, int, float, str, bytes))


def is_list(value: Value, key: Key = None, /) -> bool:
    return isinstance(value, (list, tuple))


def is_mapping(value: Value, key: Key = None, /) -> bool:
    return isinstance(value, Mapping)


def is_namespace(value: Value, key: Key = None, /) -> bool:
    return isinstance(value, SimpleNamespace)


def is_callable(value: Value, key: Key = None, /) -> bool:
    return callable(value)


def is_null(value: Value, key: Key = None, /) -> bool:
    """None, or a container holding nothing but nulls (recursively)."""
    if is_container(value):
        return all(is_null(v) for _, v in entries(value))
    return value is None


def is_url(value: Value, key: Key = None, /) -> bool:
    """An absolute URL with a scheme and a network location."""
    if not isinstance(value, str) or any(c.isspace() for c in value):
        return False
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return bool(parts.scheme and parts.netloc)


def identity(value: Value, key: Key = None, dispatch: Any = None, /) -> Value:
    """Return the value unchanged. Doubles as a dispatch handler."""
    return value
