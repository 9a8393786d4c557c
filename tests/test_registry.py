"""Tests for the type registry (philo._registry).

Validates the builder → frozen registry → resolve pipeline and the
context-local active registry.
"""

import decimal
import numbers
from collections.abc import Mapping

import pytest

from philo import (
    MAX_TYPE_NAME_LENGTH,
    InvalidConfigError,
    Registry,
    RegistryBuilder,
    TypeResolutionError,
    current_registry,
    is_,
    register_builtin_types,
)
from philo.testing import Circle, Shape, Square, register


class TestRegistryBuilder:
    """Tests for RegistryBuilder."""

    def test_builder_registers_and_freezes(self) -> None:
        registry = RegistryBuilder().type("Shape", Shape).build()

        assert registry.type_count == 1
        assert registry.contains("Shape")
        assert not registry.contains("Circle")

    def test_register_helper(self, shape_registry: Registry) -> None:
        assert shape_registry.type_names() == ["Circle", "Shape", "Square"]

    def test_introspection_is_sorted(self) -> None:
        registry = RegistryBuilder().type("b", int).type("a", str).build()
        assert registry.type_names() == ["a", "b"]

    def test_later_registration_replaces(self) -> None:
        registry = RegistryBuilder().type("T", int).type("T", str).build()
        assert registry.resolve("T") is str

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(InvalidConfigError):
            RegistryBuilder().type("", int)

    def test_name_at_limit_accepted(self) -> None:
        name = "n" * MAX_TYPE_NAME_LENGTH
        assert RegistryBuilder().type(name, int).build().contains(name)

    def test_name_over_limit_rejected(self) -> None:
        with pytest.raises(InvalidConfigError, match="exceeds maximum"):
            RegistryBuilder().type("n" * (MAX_TYPE_NAME_LENGTH + 1), int)

    def test_built_registry_is_independent(self) -> None:
        builder = RegistryBuilder().type("A", int)
        registry = builder.build()
        builder.type("B", str)
        assert not registry.contains("B")


class TestResolve:
    """Tests for Registry.resolve()."""

    def test_class_target(self) -> None:
        assert RegistryBuilder().type("D", decimal.Decimal).build().resolve("D") is decimal.Decimal

    def test_dotted_paths(self, shape_registry: Registry) -> None:
        assert shape_registry.resolve("Shape") is Shape
        assert shape_registry.resolve("Circle") is Circle

    def test_colon_path(self, shape_registry: Registry) -> None:
        assert shape_registry.resolve("Square") is Square

    def test_unknown_name(self) -> None:
        with pytest.raises(TypeResolutionError, match="not registered"):
            Registry().resolve("Nope")

    def test_missing_module(self) -> None:
        registry = RegistryBuilder().type("X", "no_such_module_xyz.X").build()
        with pytest.raises(TypeResolutionError) as exc_info:
            registry.resolve("X")
        assert exc_info.value.name == "X"
        assert "no_such_module_xyz" in exc_info.value.reason

    def test_missing_attribute(self) -> None:
        registry = RegistryBuilder().type("X", "decimal.NoSuchThing").build()
        with pytest.raises(TypeResolutionError, match="no attribute"):
            registry.resolve("X")

    def test_malformed_path(self) -> None:
        registry = RegistryBuilder().type("X", "nodots").build()
        with pytest.raises(TypeResolutionError, match="malformed"):
            registry.resolve("X")

    def test_non_class_target(self) -> None:
        registry = RegistryBuilder().type("X", "decimal.getcontext").build()
        with pytest.raises(TypeResolutionError, match="not a class"):
            registry.resolve("X")


class TestActivation:
    """Tests for the active registry."""

    def test_default_is_empty(self) -> None:
        assert current_registry().type_count == 0

    def test_activate_scopes_the_registry(self, shape_registry: Registry) -> None:
        with shape_registry.activate() as active:
            assert active is shape_registry
            assert current_registry() is shape_registry
            assert is_("Shape", Circle(1.0))
        assert current_registry().type_count == 0
        assert is_("Shape", "Shape")

    def test_nested_activation(self, shape_registry: Registry) -> None:
        other = RegistryBuilder().type("Shape", int).build()
        with shape_registry.activate():
            with other.activate():
                assert is_("Shape", 3)
            assert is_("Shape", Square(1.0))

    def test_restored_after_error(self, shape_registry: Registry) -> None:
        with pytest.raises(RuntimeError), shape_registry.activate():
            raise RuntimeError
        assert current_registry().type_count == 0


class TestBuiltinTypes:
    def test_builtin_aliases(self) -> None:
        registry = register_builtin_types(RegistryBuilder()).build()
        assert registry.resolve("Mapping") is Mapping
        assert registry.resolve("Number") is numbers.Number
        with registry.activate():
            assert is_("Mapping", {})
            assert is_("Number", 1.5)
            assert is_("Sequence", (1,))
            assert not is_("Number", "1")

    def test_register_composes(self) -> None:
        registry = register(register_builtin_types(RegistryBuilder())).build()
        assert registry.type_count == 9
