"""Matcher — recursive structural comparison of a spec against a value.

create() returns an Either; is_() is its boolean projection. Spec variants
are tried in a fixed order:

1. class object         → isinstance(value, spec)
2. Bindable (variable)  → spec.bind(value, key)
3. container vs container → per-key recursion (see _create_container)
4. Matchable            → spec.accepts(value)
5. other callable       → predicate, called as spec(value, key)
6. registered type name → isinstance against the resolved class
7. anything else        → strict equality (same type, equal value)

Classes come first because they are callable (and may define bind/accepts
as plain methods), yet must never be invoked as predicates.

INV: type mismatches never raise; rejection is always a Left.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from philo._either import Either, Left, Right, is_left, is_right, to_either
from philo._registry import current_registry
from philo._types import Bindable, Matchable
from philo._value import MISSING, entries, is_container, lookup, rebuild, strictly_equal

if TYPE_CHECKING:
    from philo._types import Key, TypeSpec, Value


def create(spec: TypeSpec, value: Value, key: Key = None, strict: bool = False) -> Either[Any]:
    """Match value against spec, returning Right on acceptance and Left otherwise.

    For container specs the payload mirrors the value's shape with one
    Left/Right per key. strict=True additionally rejects keys the spec does
    not declare (only at this level; nested specs opt in with philo.strict).

    Raises:
        TypeResolutionError: spec names a registered type that cannot be
            imported.
    """
    if isinstance(spec, type):
        return Right(value) if isinstance(value, spec) else Left(value)
    if isinstance(spec, Bindable):
        return to_either(spec.bind(value, key), value)
    if is_container(spec) and is_container(value):
        return _create_container(spec, value, strict)
    if isinstance(spec, Matchable):
        return Right(value) if spec.accepts(value) else Left(value)
    if callable(spec):
        return to_either(spec(value, key), value)
    if isinstance(spec, str):
        registry = current_registry()
        if registry.contains(spec):
            cls = registry.resolve(spec)
            return Right(value) if isinstance(value, cls) else Left(value)
    return Right(value) if strictly_equal(spec, value) else Left(value)


def is_(spec: TypeSpec, value: Value, key: Key = None, strict: bool = False) -> bool:
    """True when create(spec, value, key, strict) is a Right."""
    return is_right(create(spec, value, key, strict))


def _create_container(spec: Any, value: Any, strict: bool) -> Either[Any]:
    """Structural match of a container spec against a container value.

    The payload has exactly the value's keys, in the value's order.

    - a declared key missing from the value is fine if its sub-spec accepts
      None (optional field); otherwise the match fails, with no payload entry
    - undeclared keys are Right(v), or Left(v) under strict
    - every key is evaluated; one Left anywhere makes the whole result Left
    """
    checked: dict[Any, Either[Any]] = {}
    missing_required = False
    for k, sub in entries(spec):
        child = lookup(value, k)
        if child is MISSING:
            if not is_(sub, None):
                missing_required = True
            continue
        checked[k] = create(sub, child, k)

    pairs: list[tuple[Any, Either[Any]]] = []
    for k, child in entries(value):
        if k in checked:
            pairs.append((k, checked[k]))
        else:
            pairs.append((k, Left(child) if strict else Right(child)))

    payload = rebuild(value, pairs)
    if missing_required or any(is_left(r) for _, r in pairs):
        return Left(payload)
    return Right(payload)
