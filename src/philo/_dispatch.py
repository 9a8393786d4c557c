"""Dispatch — ordered (spec, handler) tables with first-match-wins semantics.

    >>> from philo import identity, match
    >>> f = match(
    ...     "a", "b",
    ...     2, lambda x, k, d: f":{x}",
    ...     "d", identity,
    ... )
    >>> f("a"), f(2), f("d"), f("z")
    ('b', ':2', 'd', None)

Handler forms:
- Action(v)              → v, verbatim (even when v is callable)
- callable               → handler(value, key, dispatcher)
- container template     → same container with every callable leaf replaced
                           by leaf(value, key)
- anything else          → returned verbatim

rmatch() appends recurse(), so a container no explicit case accepts is
re-dispatched child by child, with keys accumulated into paths.

INV: First-match-wins. Later cases are never evaluated once one accepts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from loguru import logger

from philo._connectives import And, Maybe, Not, Or, Strict
from philo._either import Left, Right
from philo._errors import SpecError
from philo._matcher import is_
from philo._quantifiers import Every, Some
from philo._value import child_key, entries, is_container, key_path, rebuild
from philo._variable import MatchVariable

if TYPE_CHECKING:
    from collections.abc import Callable

    from philo._types import Key, TypeSpec, Value


@dataclass(frozen=True, slots=True)
class Action[A]:
    """Return this value verbatim when the case matches.

    Use it for results that would otherwise be invoked or templated:
    functions, classes, containers holding callables.
    """

    value: A


@dataclass(frozen=True, slots=True)
class Case:
    """Pairs a spec with the handler to run when it accepts."""

    spec: TypeSpec
    handler: Any


@dataclass(frozen=True, slots=True)
class Dispatcher:
    """Ordered dispatch table.

    Calling it tests each case's spec against (value, key) in order and
    runs the first accepting case's handler. No match returns None.

    Handlers are validated at construction; a class object or an Either is
    rejected with SpecError.
    """

    cases: tuple[Case, ...]

    def __post_init__(self) -> None:
        self.validate()

    def __call__(self, value: Value, key: Key = None, dispatch: Any = None, /) -> Any:
        # dispatch is passed when this table is another table's handler; unused.
        for index, case in enumerate(self.cases):
            if is_(case.spec, value, key):
                logger.trace("philo.dispatch.matched case={} key={!r}", index, key)
                return _run_handler(case.handler, value, key, self)
        logger.trace("philo.dispatch.no_match key={!r}", key)
        return None

    def validate(self) -> None:
        """Reject handlers that cannot be run.

        Raises:
            SpecError: If a handler is a class or an Either.
        """
        for index, case in enumerate(self.cases):
            handler = case.handler
            if isinstance(handler, type):
                msg = (
                    f"case {index}: handler {handler.__name__} is a class; "
                    "wrap it in Action() to return it"
                )
                raise SpecError(msg)
            if isinstance(handler, (Left, Right)):
                msg = f"case {index}: handler {handler!r} is a match result, not a handler"
                raise SpecError(msg)

    def depth(self) -> int:
        """Nesting depth of the deepest spec in the table."""
        return 1 + max((spec_depth(case.spec) for case in self.cases), default=0)


def match(*args: Any) -> Dispatcher:
    """Build a dispatcher from alternating spec, handler arguments.

    Raises:
        SpecError: If a spec is left without a handler.
    """
    if len(args) % 2:
        msg = f"match() takes spec/handler pairs, got {len(args)} arguments"
        raise SpecError(msg)
    cases = tuple(Case(spec, handler) for spec, handler in zip(args[::2], args[1::2]))
    return Dispatcher(cases)


def recurse() -> tuple[Callable[..., bool], Callable[..., Any]]:
    """The (spec, handler) pair that descends into containers.

    Appending it to a dispatch table re-applies the same table to every
    child of a container no earlier case accepted.
    """
    return (is_container, descend)


def descend(value: Value, key: Key, dispatch: Callable[[Value, Key], Any]) -> Value:
    """Dispatch every child of value, keyed by its accumulated path."""
    return rebuild(value, ((k, dispatch(v, child_key(key, k))) for k, v in entries(value)))


def rmatch(*args: Any) -> Dispatcher:
    """match() with structural recursion as the final case."""
    return match(*args, *recurse())


@dataclass(frozen=True, slots=True)
class KeySpec:
    """A spec over the key (or key path) instead of the value.

    The key is sliced first (start/length follow array_slice rules: negative
    start counts from the end, negative length stops short of the end).
    A list/tuple path is compared segment by segment against the sliced key
    path, with the same length required; any other path is an ordinary spec
    applied to the sliced key.
    """

    path: TypeSpec
    start: int = 0
    length: int | None = None

    def __call__(self, value: Value, key: Key = None, /) -> bool:
        if isinstance(self.path, (list, tuple)):
            segment = _slice(key_path(key), self.start, self.length)
            return is_(list(self.path), segment, strict=True)
        return is_(self.path, self._slice_key(key))

    def _slice_key(self, key: Key) -> Any:
        if self.start == 0 and self.length is None:
            return key
        if isinstance(key, (str, tuple)):
            return _slice(key, self.start, self.length)
        return None


def k(path: TypeSpec, start: int = 0, length: int | None = None) -> KeySpec:
    return KeySpec(path, start, length)


def _slice[S: (str, tuple)](seq: S, start: int, length: int | None) -> S:
    size = len(seq)
    lo = start if start >= 0 else max(size + start, 0)
    if length is None:
        hi = size
    elif length >= 0:
        hi = lo + length
    else:
        hi = size + length
    return seq[lo:hi]


def spec_depth(spec: TypeSpec) -> int:
    """Calculate the nesting depth of a spec tree (a leaf is 1)."""
    match spec:
        case And(specs=specs) | Or(specs=specs):
            return 1 + max((spec_depth(s) for s in specs), default=0)
        case Not(spec=inner) | Maybe(spec=inner) | Strict(spec=inner):
            return 1 + spec_depth(inner)
        case Every(spec=inner) | Some(spec=inner):
            return 1 + spec_depth(inner)
        case KeySpec(path=path):
            return 1 + spec_depth(path)
        case MatchVariable() if spec.constraint is not None:
            return 1 + spec_depth(spec.constraint)
        case _ if is_container(spec):
            return 1 + max((spec_depth(v) for _, v in entries(spec)), default=0)
        case _:
            return 1


def _run_handler(handler: Any, value: Value, key: Key, dispatch: Dispatcher) -> Any:
    match handler:
        case Action(value=result):
            return result
        case _ if callable(handler):
            return handler(value, key, dispatch)
        case _ if is_container(handler):
            return _render(handler, value, key)
        case _:
            return handler


def _render(template: Any, value: Value, key: Key) -> Any:
    """Fill a container template: callable leaves are called with (value, key)."""

    def fill(leaf: Any) -> Any:
        match leaf:
            case Action(value=result):
                return result
            case type():
                return leaf
            case _ if callable(leaf):
                return leaf(value, key)
            case _ if is_container(leaf):
                return _render(leaf, value, key)
            case _:
                return leaf

    return rebuild(template, ((k, fill(v)) for k, v in entries(template)))
