"""Error types.

Rejection is never an error: it is a Left (or False) result. Exceptions are
reserved for programmer mistakes, i.e. malformed specs, dispatch tables and
registry configuration.
"""

from __future__ import annotations


class PhiloError(Exception):
    """Base class for all philo errors."""


class SpecError(PhiloError):
    """A spec, handler or dispatch table is malformed."""


class TypeResolutionError(PhiloError):
    """A registered type name could not be resolved to a class."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"cannot resolve type {name!r}: {reason}")


class ConfigParseError(PhiloError):
    """Error parsing a config dict into config types."""


class InvalidConfigError(PhiloError):
    """A config payload was semantically invalid."""

    def __init__(self, source: str) -> None:
        self.source = source
        super().__init__(f"invalid config: {source}")
