"""스키마 빌더 테스트."""

from __future__ import annotations

import pytest

from via_dispatch.common import ParameterOption, ParameterSchema, SchemaError
from via_dispatch.dispatcher import Registry
from via_dispatch.schema import CommandBuilder


def _noop(request: object) -> int:
    return 0


def test_builder_produces_frozen_schema_in_declaration_order() -> None:
    builder = CommandBuilder("cleanup", _noop)
    builder.add_parameter("id", ParameterOption.DEFAULT, ParameterOption.MULTIPLE_VALUES)
    builder.add_parameter("layout").allowed_values("flat", "sharded").default_value("flat")

    schema = builder.build()

    assert schema.verb == "cleanup"
    assert schema.handler is _noop
    assert [item.title for item in schema.parameters] == ["id", "layout"]
    assert schema.parameters[1] == ParameterSchema(
        title="layout",
        options=frozenset(),
        allowed_values=("flat", "sharded"),
        default_value="flat",
    )
    assert schema.default_parameter() == schema.parameters[0]
    assert schema.find_parameter("missing") is None


def test_build_is_idempotent() -> None:
    builder = CommandBuilder("backup", _noop)
    assert builder.build() is builder.build()


def test_duplicate_parameter_title_is_rejected() -> None:
    builder = CommandBuilder("cleanup", _noop)
    builder.add_parameter("os")

    with pytest.raises(SchemaError, match="duplicate parameter"):
        builder.add_parameter("os", ParameterOption.MULTIPLE_VALUES)


def test_second_default_parameter_is_rejected() -> None:
    builder = CommandBuilder("cleanup", _noop)
    builder.add_parameter("id", ParameterOption.DEFAULT)

    with pytest.raises(SchemaError, match="default parameter -id"):
        builder.add_parameter("slug", ParameterOption.DEFAULT)


def test_boolean_default_parameter_is_rejected() -> None:
    builder = CommandBuilder("cleanup", _noop)

    with pytest.raises(SchemaError):
        builder.add_parameter("all", ParameterOption.DEFAULT, ParameterOption.BOOLEAN)


def test_boolean_parameter_cannot_declare_allowed_values() -> None:
    builder = CommandBuilder("cleanup", _noop)
    flag = builder.add_parameter("all", ParameterOption.BOOLEAN)

    with pytest.raises(SchemaError):
        flag.allowed_values("yes", "no")


def test_default_value_is_normalized_against_allowed_values() -> None:
    builder = CommandBuilder("cleanup", _noop)
    builder.add_parameter("layout").allowed_values("flat", "sharded").default_value("SH")

    assert builder.build().parameters[0].default_value == "sharded"


def test_default_value_outside_allowed_values_is_rejected() -> None:
    builder = CommandBuilder("cleanup", _noop)
    layout = builder.add_parameter("layout").allowed_values("flat", "sharded")

    with pytest.raises(SchemaError, match="invalid default value"):
        layout.default_value("bogus")


def test_allowed_values_declared_after_default_recheck_it() -> None:
    builder = CommandBuilder("cleanup", _noop)
    layout = builder.add_parameter("layout").default_value("Flat")

    with pytest.raises(SchemaError):
        layout.allowed_values("sharded")

    layout.allowed_values("flat", "sharded")
    assert builder.build().parameters[0].default_value == "flat"


@pytest.mark.parametrize("value", ["yes", ""])
def test_boolean_parameter_cannot_declare_default_value(value: str) -> None:
    builder = CommandBuilder("cleanup", _noop)
    flag = builder.add_parameter("all", ParameterOption.BOOLEAN)

    with pytest.raises(SchemaError):
        flag.default_value(value)


def test_empty_default_value_is_rejected() -> None:
    with pytest.raises(SchemaError):
        CommandBuilder("cleanup", _noop).add_parameter("slug").default_value("")


def test_invalid_defaults_never_reach_the_handler() -> None:
    received: list[object] = []
    registry = Registry(environ={})
    command = registry.register("cleanup", received.append)

    with pytest.raises(SchemaError):
        command.add_parameter("layout").allowed_values("flat", "sharded").default_value("bogus")
    with pytest.raises(SchemaError):
        command.add_parameter("all", ParameterOption.BOOLEAN).default_value("yes")

    registry.dispatch(["cleanup"])
    assert [request.as_dict() for request in received] == [{}]


@pytest.mark.parametrize("title", ["", "-os"])
def test_invalid_parameter_title_is_rejected(title: str) -> None:
    with pytest.raises(SchemaError):
        CommandBuilder("cleanup", _noop).add_parameter(title)


def test_mutation_after_build_is_rejected() -> None:
    builder = CommandBuilder("cleanup", _noop)
    layout = builder.add_parameter("layout")
    builder.build()

    assert builder.frozen
    with pytest.raises(SchemaError):
        builder.add_parameter("late")
    with pytest.raises(SchemaError):
        layout.default_value("flat")
    with pytest.raises(SchemaError):
        layout.allowed_values("flat")


def test_duplicate_verb_is_rejected() -> None:
    registry = Registry()
    registry.register("backup", _noop)

    with pytest.raises(SchemaError, match="duplicate command verb"):
        registry.register("backup", _noop)


def test_register_after_dispatch_started_is_rejected() -> None:
    registry = Registry()
    registry.register("backup", _noop)
    assert [command.verb for command in registry.commands] == ["backup"]

    with pytest.raises(SchemaError):
        registry.register("cleanup", _noop)
