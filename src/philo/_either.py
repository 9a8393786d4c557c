"""Either algebra — Left (rejected) / Right (accepted) results.

Plain booleans are treated as isomorphic: False ~ Left, True ~ Right.

For a container spec the payload of the result is a container of the same
shape whose children are themselves Eithers, so partial failure and partial
success coexist at different paths of one result. lval() and rval() project
such a result onto its failing or accepted parts, keeping the shape intact:

    >>> from philo import create, is_bool, is_int, is_string, lval, rval
    >>> r = create([is_bool, is_string, is_int], [True, "a", "1"])
    >>> lval(r)
    [None, None, '1']
    >>> rval(r)
    [True, 'a', None]
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from philo._value import entries, is_container, null_shape, rebuild


@dataclass(frozen=True, slots=True)
class Left[T]:
    """A rejected value (or a container of per-key results)."""

    value: T


@dataclass(frozen=True, slots=True)
class Right[T]:
    """An accepted value (or a container of per-key results)."""

    value: T


type Either[T] = Left[T] | Right[T]


def left[T](x: T) -> Left[T]:
    return Left(x)


def right[T](x: T) -> Right[T]:
    return Right(x)


def is_left(x: Any) -> bool:
    return isinstance(x, Left) or x is False


def is_right(x: Any) -> bool:
    return isinstance(x, Right) or x is True


def to_either(outcome: Any, value: Any) -> Either[Any]:
    """Normalize a predicate outcome.

    Left/Right pass through untouched, False rejects `value`, and anything
    else (including None) accepts it.
    """
    match outcome:
        case Left() | Right():
            return outcome
        case False:
            return Left(value)
        case _:
            return Right(value)


def lval(x: Any) -> Any:
    """Project the failing part of a result.

    Left leaves surface their value; Right leaves become a None-filled
    complement of the same shape.
    """
    match x:
        case Left(value=v):
            return _project(v, keep=True, project=lval)
        case Right(value=v):
            return _project(v, keep=False, project=lval)
        case False:
            return False
        case True:
            return None
        case _:
            return null_shape(x)


def rval(x: Any) -> Any:
    """Project the accepted part of a result. Mirror image of lval()."""
    match x:
        case Right(value=v):
            return _project(v, keep=True, project=rval)
        case Left(value=v):
            return _project(v, keep=False, project=rval)
        case True:
            return True
        case False:
            return None
        case _:
            return x


def _is_structural(payload: Any) -> bool:
    """True when payload is a container of per-key Eithers."""
    return is_container(payload) and all(
        isinstance(v, (Left, Right)) for _, v in entries(payload)
    )


def _project(payload: Any, *, keep: bool, project: Callable[[Any], Any]) -> Any:
    if isinstance(payload, (Left, Right)):
        return project(payload)
    if _is_structural(payload):
        return rebuild(payload, ((k, project(v)) for k, v in entries(payload)))
    return payload if keep else null_shape(payload)
