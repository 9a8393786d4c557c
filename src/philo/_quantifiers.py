"""Quantifiers over the elements of a container: Every and Some.

Both are predicate specs. Each element is matched with its own key.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from philo._either import Either, Left, Right, is_left
from philo._matcher import create, is_
from philo._value import entries, is_container, rebuild

if TYPE_CHECKING:
    from philo._types import Key, TypeSpec, Value


@dataclass(frozen=True, slots=True)
class Every:
    """Every element must be accepted by spec.

    The payload is a container of per-element results, so lval() on a
    rejection points at exactly the offending elements. Every element is
    evaluated (no short-circuit). An empty container is accepted; None is
    accepted iff spec accepts None; any other scalar is rejected.
    """

    spec: TypeSpec

    def __call__(self, value: Value, key: Key = None, /) -> Either[Any]:
        if value is None:
            return Right(None) if is_(self.spec, None, key) else Left(None)
        if not is_container(value):
            return Left(value)
        results = [(k, create(self.spec, v, k)) for k, v in entries(value)]
        payload = rebuild(value, results)
        if any(is_left(r) for _, r in results):
            return Left(payload)
        return Right(payload)


@dataclass(frozen=True, slots=True)
class Some:
    """At least one element must be accepted by spec.

    Short-circuits on the first accepted element. The payload is always the
    original value. None is accepted iff spec accepts None.
    """

    spec: TypeSpec

    def __call__(self, value: Value, key: Key = None, /) -> Either[Any]:
        if value is None:
            return Right(None) if is_(self.spec, None, key) else Left(None)
        for k, v in entries(value):
            if is_(self.spec, v, k):
                return Right(value)
        return Left(value)


def every(spec: TypeSpec) -> Every:
    return Every(spec)


def some(spec: TypeSpec) -> Some:
    return Some(spec)
