"""Shared fixtures for philo tests.

Loads YAML fixture documents from tests/fixtures/ and provides a registry
with the philo.testing class hierarchy.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
import yaml

from philo import Registry, RegistryBuilder
from philo.testing import register

FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures"


def load_yaml_documents(name: str) -> list[dict[str, Any]]:
    """Load every non-empty document of a multi-document fixture file."""
    with (FIXTURE_DIR / name).open() as f:
        return [doc for doc in yaml.safe_load_all(f) if doc is not None]


@pytest.fixture
def shape_registry() -> Registry:
    """A registry with Shape, Circle and Square registered by dotted path."""
    return register(RegistryBuilder()).build()


@pytest.fixture
def active_shapes(shape_registry: Registry) -> Iterator[Registry]:
    """Activate the shape registry for the duration of a test."""
    with shape_registry.activate():
        yield shape_registry


@pytest.fixture
def records() -> list[list[Any]]:
    """Candidate records for logic-variable queries."""
    return load_yaml_documents("records.yaml")[0]["records"]
