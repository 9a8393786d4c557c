"""Logical connectives — And, Or, Not over specs, plus maybe/strict.

Each connective is a frozen dataclass that is itself a predicate spec
(callable as ``(value, key)``), so connectives nest freely inside container
specs, quantifiers and dispatch tables.

Result shapes are intentionally asymmetric:
- And rejects with Left(<the first failing sub-result>) and accepts with Right(value)
- Or accepts with Right(<the first accepting sub-result>) and rejects with Left(value)
- Not returns a plain bool (path detail is dropped)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from philo._either import Either, Left, Right, is_left, is_right
from philo._matcher import create, is_

if TYPE_CHECKING:
    from philo._types import Key, TypeSpec, Value


@dataclass(frozen=True, slots=True)
class And:
    """All specs must accept (logical AND).

    Short-circuits on the first Left. Empty And accepts (vacuous truth).
    """

    specs: tuple[TypeSpec, ...]

    def __call__(self, value: Value, key: Key = None, /) -> Either[Any]:
        for spec in self.specs:
            result = create(spec, value, key)
            if is_left(result):
                return Left(result)
        return Right(value)


@dataclass(frozen=True, slots=True)
class Or:
    """Any spec must accept (logical OR).

    Short-circuits on the first Right. Empty Or rejects.
    """

    specs: tuple[TypeSpec, ...]

    def __call__(self, value: Value, key: Key = None, /) -> Either[Any]:
        for spec in self.specs:
            result = create(spec, value, key)
            if is_right(result):
                return Right(result)
        return Left(value)


@dataclass(frozen=True, slots=True)
class Not:
    """Inverts the inner spec (logical NOT)."""

    spec: TypeSpec

    def __call__(self, value: Value, key: Key = None, /) -> bool:
        return not is_(self.spec, value, key)


@dataclass(frozen=True, slots=True)
class Maybe:
    """Accepts None, otherwise defers to the inner spec.

    Inside a container spec this makes a key optional.
    """

    spec: TypeSpec

    def __call__(self, value: Value, key: Key = None, /) -> Either[Any]:
        if value is None:
            return Right(None)
        return create(self.spec, value, key)


@dataclass(frozen=True, slots=True)
class Strict:
    """Container spec that also rejects keys it does not declare."""

    spec: TypeSpec

    def __call__(self, value: Value, key: Key = None, /) -> Either[Any]:
        return create(self.spec, value, key, strict=True)


def all_(*specs: TypeSpec) -> And:
    return And(specs)


def any_(*specs: TypeSpec) -> Or:
    return Or(specs)


def not_(spec: TypeSpec) -> Not:
    return Not(spec)


def maybe(spec: TypeSpec) -> Maybe:
    return Maybe(spec)


def strict(spec: TypeSpec) -> Strict:
    return Strict(spec)
