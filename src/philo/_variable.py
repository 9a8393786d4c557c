"""Logic variables — Prolog-esque capture slots for match specs.

A MatchVariable used as a spec leaf accepts whatever its constraint accepts
(everything, when unconstrained) and remembers the value. Reading it back is
a zero-argument call:

    >>> from philo import MatchVariable, is_
    >>> X = MatchVariable()
    >>> is_(["A", X, "Z"], ["A", "C", "Z"])
    True
    >>> X()
    'C'

Semantics are deliberately simple (no unification solver):
- every occurrence of a variable is an independent leaf; last write wins
- a failed constraint resets the variable to unbound
- bindings made in a branch that later fails are not rolled back

A variable is mutable, caller-owned state. Read it right after the match call
that bound it, and never share one across concurrent matches.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Self

from loguru import logger

from philo._either import Either, Left, Right, is_left
from philo._matcher import create
from philo._value import MISSING

if TYPE_CHECKING:
    from philo._types import Key, TypeSpec, Value


class MatchVariable:
    """A mutable, identity-bearing cell that binds to the value it matches."""

    __slots__ = ("_constraint", "_value", "name")

    def __init__(self, constraint: TypeSpec = None, name: str | None = None) -> None:
        self._constraint = constraint
        self._value: Any = MISSING
        self.name = name

    def __call__(self, *_context: Any) -> Value:
        """Return the bound value, or None while unbound.

        Extra positional arguments are ignored so a variable (or a fanout of
        variables) can be used directly as a dispatch handler.
        """
        return None if self._value is MISSING else self._value

    def __repr__(self) -> str:
        label = self.name or hex(id(self))
        if self._value is MISSING:
            return f"MatchVariable({label}, unbound)"
        return f"MatchVariable({label}, {self._value!r})"

    @property
    def bound(self) -> bool:
        return self._value is not MISSING

    @property
    def constraint(self) -> TypeSpec:
        return self._constraint

    def constrain(self, spec: TypeSpec) -> Self:
        """Only bind values accepted by spec. Returns self for chaining."""
        self._constraint = spec
        return self

    def bind(self, value: Value, key: Key = None, /) -> Either[Value]:
        """Match value against the constraint and record it on success."""
        if self._constraint is not None and is_left(create(self._constraint, value, key)):
            self.reset()
            return Left(value)
        self._value = value
        logger.debug("philo.variable.bound var={!r} key={!r}", self, key)
        return Right(value)

    def reset(self) -> None:
        """Forget the bound value."""
        if self._value is not MISSING:
            logger.debug("philo.variable.reset var={!r}", self)
        self._value = MISSING


def variables(n: int, constraint: TypeSpec = None) -> tuple[MatchVariable, ...]:
    """Create n independent variables sharing no state."""
    return tuple(MatchVariable(constraint) for _ in range(n))


@dataclass(frozen=True, slots=True)
class Fanout:
    """Apply several functions to the same arguments, collecting the results."""

    fns: tuple[Callable[..., Any], ...]

    def __call__(self, *args: Any) -> list[Any]:
        return [f(*args) for f in self.fns]


def fanout(*fns: Callable[..., Any]) -> Fanout:
    """Distribute one call to many functions.

    fanout(X, Y) used as a handler reads both variables at once.
    """
    return Fanout(fns)
