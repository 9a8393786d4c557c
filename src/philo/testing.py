"""Test utilities for philo.

Small fixtures for tests and examples: a handler that records its calls,
and a tiny class hierarchy registered under type names. These are NOT part
of the matching engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from philo._registry import RegistryBuilder
    from philo._types import Key, Value


@dataclass
class Recorder:
    """A handler that records every (value, key) it is invoked with.

    >>> from philo import match
    >>> from philo.testing import Recorder
    >>> hits = Recorder(result="hit")
    >>> match(1, hits)(1, "k")
    'hit'
    >>> hits.calls
    [(1, 'k')]
    """

    result: Any = None
    calls: list[tuple[Value, Key]] = field(default_factory=list)

    def __call__(self, value: Value, key: Key, dispatch: Any = None, /) -> Any:
        self.calls.append((value, key))
        return self.result


class Shape:
    """Base class of the test hierarchy."""


@dataclass(frozen=True, slots=True)
class Circle(Shape):
    radius: float


@dataclass(frozen=True, slots=True)
class Square(Shape):
    side: float


def register(builder: RegistryBuilder) -> RegistryBuilder:
    """Register the test hierarchy by dotted path.

    Names: Shape, Circle, Square.
    """
    return (
        builder.type("Shape", "philo.testing.Shape")
        .type("Circle", "philo.testing.Circle")
        .type("Square", "philo.testing:Square")
    )
