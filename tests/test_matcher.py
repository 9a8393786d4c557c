"""Tests for create() and is_() (philo._matcher)."""

from __future__ import annotations

from dataclasses import dataclass
from types import SimpleNamespace

import pytest

from philo import (
    Left,
    Registry,
    RegistryBuilder,
    Right,
    TypeResolutionError,
    create,
    gt,
    is_,
    is_bool,
    is_int,
    is_left,
    is_right,
    is_string,
    lval,
    maybe,
    rval,
    strict,
)
from philo.testing import Circle, Shape, Square


class TestLiterals:
    def test_equal(self) -> None:
        assert create("a", "a") == Right("a")
        assert create(2, 2) == Right(2)
        assert create(None, None) == Right(None)

    def test_strict_equality(self) -> None:
        assert create(2, "2") == Left("2")
        assert is_(1, True) is False
        assert is_(1, 1.0) is False
        assert is_(True, 1) is False

    def test_container_spec_against_scalar(self) -> None:
        assert create([1, 2], 1) == Left(1)


class TestPredicates:
    def test_true_and_false(self) -> None:
        assert create(is_int, 9) == Right(9)
        assert create(is_int, "9") == Left("9")

    def test_none_return_accepts(self) -> None:
        assert is_(lambda x, k: None, "anything") is True

    def test_key_is_passed(self) -> None:
        seen: list[object] = []

        def spy(value: object, key: object) -> bool:
            seen.append(key)
            return True

        assert is_({"a": spy}, {"a": 1})
        assert seen == ["a"]

    def test_either_return_is_kept(self) -> None:
        assert create(lambda x, k: Left("why"), 1) == Left("why")


class TestCustomTypes:
    def test_matchable(self) -> None:
        @dataclass(frozen=True)
        class Prefix:
            prefix: str

            def accepts(self, value: object) -> bool:
                return isinstance(value, str) and value.startswith(self.prefix)

        assert create(Prefix("h"), "hi") == Right("hi")
        assert create(Prefix("h"), "ok") == Left("ok")
        assert not is_(Prefix("h"), 1)

    def test_duck_typed_accepts(self) -> None:
        class Even:
            def accepts(self, value: object) -> bool:
                return isinstance(value, int) and value % 2 == 0

        assert is_(Even(), 4)
        assert not is_(Even(), 3)


class TestClasses:
    def test_class_object(self) -> None:
        assert is_(Shape, Circle(1.0))
        assert is_(Circle, Circle(1.0))
        assert not is_(Square, Circle(1.0))

    def test_class_is_not_called(self) -> None:
        # int("5") would succeed as a predicate; a class spec is isinstance only.
        assert is_(int, "5") is False
        assert is_(int, 5) is True

    def test_unregistered_name_is_literal(self) -> None:
        assert is_("Shape", "Shape")
        assert not is_("Shape", Circle(1.0))

    def test_registered_name(self, active_shapes: Registry) -> None:
        assert is_("Shape", Circle(1.0))
        assert is_("Square", Square(2.0))
        assert not is_("Circle", Square(2.0))
        assert not is_("Shape", "Shape")

    def test_resolution_failure_raises(self) -> None:
        registry = RegistryBuilder().type("Ghost", "philo.nowhere.Ghost").build()
        with registry.activate(), pytest.raises(TypeResolutionError):
            create("Ghost", 1)


class TestContainers:
    def test_all_leaves_accept(self) -> None:
        x = create([is_bool, is_string, is_int], [True, "a", 1])
        assert is_right(x)
        assert x == Right([Right(True), Right("a"), Right(1)])

    def test_failures_do_not_stop_siblings(self) -> None:
        x = create({"a": is_int, "b": is_int, "c": is_int}, {"a": "1", "b": 2, "c": "3"})
        assert x == Left({"a": Left("1"), "b": Right(2), "c": Left("3")})

    def test_rval_reconstructs_and_lval_is_empty(self) -> None:
        value = {"id": 7, "tags": ["a", "b"], "owner": {"name": "ann"}}
        spec = {"id": is_int, "tags": [is_string, is_string], "owner": {"name": is_string}}
        x = create(spec, value)
        assert is_right(x)
        assert rval(x) == value
        assert lval(x) == {"id": None, "tags": [None, None], "owner": {"name": None}}

    def test_bools(self) -> None:
        assert is_right(create([is_bool, is_bool], [True, False]))

    def test_tuple_value_keeps_its_type(self) -> None:
        assert rval(create([is_int, is_int], (1, 2))) == (1, 2)

    def test_field_bag_value(self) -> None:
        assert is_({"name": is_string}, SimpleNamespace(name="ann"))

    def test_missing_required_key(self) -> None:
        x = create({"a": is_int, "b": is_int}, {"a": 1})
        assert x == Left({"a": Right(1)})
        assert rval(x) == {"a": 1}

    def test_missing_array_position(self) -> None:
        x = create([is_string, is_int], ["a"])
        assert x == Left([Right("a")])

    def test_missing_key_keeps_value_order(self) -> None:
        x = create({"b": is_int, "a": is_int, "c": is_int}, {"a": 1, "c": "3"})
        assert x == Left({"a": Right(1), "c": Left("3")})
        assert list(x.value) == ["a", "c"]

    def test_empty_spec_accepts_any_container(self) -> None:
        assert is_([], [1, 2])
        assert is_({}, {"a": 1})

    def test_literal_elements(self) -> None:
        assert not is_([1, 2], [])
        assert is_([1, 2], [1, 2])


class TestOptionalAndStrict:
    def test_maybe_in_array(self) -> None:
        spec = [is_string, maybe(is_int)]
        assert is_left(create(spec, ["1", "2"]))
        assert is_right(create(spec, ["1", 2]))
        assert is_right(create(spec, ["1"]))
        assert is_right(create(spec, ["1", None, 8]))

    def test_maybe_in_map(self) -> None:
        spec = {"a": is_int, "b": maybe(is_bool)}
        assert is_(spec, {"a": 1})
        assert is_(spec, {"a": 1, "b": False})
        assert is_(spec, {"a": 1, "c": 2})
        assert not is_(spec, {"a": 1, "b": 2})

    def test_accepted_missing_key_is_not_in_payload(self) -> None:
        x = create({"a": is_int, "b": maybe(is_int)}, {"a": 1})
        assert x == Right({"a": Right(1)})
        assert rval(x) == {"a": 1}

    def test_not_strict_by_default(self) -> None:
        x = create([is_string], ["1", 2])
        assert x == Right([Right("1"), Right(2)])

    def test_strict_flag(self) -> None:
        x = create([is_string], ["1", 2], strict=True)
        assert x == Left([Right("1"), Left(2)])
        assert lval(x) == [None, 2]

    def test_strict_wrapper(self) -> None:
        spec = strict([is_string])
        assert is_left(create(spec, ["1", 2]))

    def test_strict_with_maybe(self) -> None:
        spec = strict([is_string, maybe(is_int)])
        assert is_left(create(spec, ["1", "2"]))
        assert is_right(create(spec, ["1", 2]))
        assert is_right(create(spec, ["1"]))
        assert is_left(create(spec, ["1", None, 8]))

    def test_strict_only_applies_at_its_level(self) -> None:
        assert is_({"a": {"b": is_int}}, {"a": {"b": 1, "c": 2}}, strict=True)
        assert not is_({"a": strict({"b": is_int})}, {"a": {"b": 1, "c": 2}})


class TestProperties:
    SPECS = [
        is_int,
        "a",
        [is_int, gt(2)],
        {"a": maybe(is_string)},
        strict({"a": is_int}),
    ]
    VALUES = [3, "a", [1, 3], [1, 1], {"a": None}, {"a": 1, "b": 2}, None]

    @pytest.mark.parametrize("spec", SPECS)
    @pytest.mark.parametrize("value", VALUES)
    def test_is_agrees_with_create(self, spec: object, value: object) -> None:
        assert is_(spec, value) == is_right(create(spec, value))

    @pytest.mark.parametrize("spec", SPECS)
    @pytest.mark.parametrize("value", VALUES)
    def test_deterministic(self, spec: object, value: object) -> None:
        assert create(spec, value) == create(spec, value)
