"""Fluent builders for command and parameter schemas."""

from __future__ import annotations

from via_dispatch.common import (
    CommandSchema,
    Handler,
    ParameterOption,
    ParameterSchema,
    SchemaError,
    ValidationError,
)
from via_dispatch.parser.validator import check_value


class ParameterBuilder:
    """Handle returned by ``CommandBuilder.add_parameter``."""

    def __init__(self, owner: CommandBuilder, title: str, options: frozenset[ParameterOption]) -> None:
        self._owner = owner
        self.title = title
        self.options = options
        self._allowed_values: tuple[str, ...] = ()
        self._default_value: str | None = None

    def allowed_values(self, *values: str) -> ParameterBuilder:
        self._owner._ensure_mutable()
        if ParameterOption.BOOLEAN in self.options and values:
            raise SchemaError(f"{self._owner.verb}: boolean parameter -{self.title} cannot have values")
        self._allowed_values = tuple(values)
        if self._default_value is not None:
            self._default_value = self._checked_default(self._default_value)
        return self

    def default_value(self, value: str) -> ParameterBuilder:
        """Sets the fallback value, normalized the same way as a token."""
        self._owner._ensure_mutable()
        self._default_value = self._checked_default(value)
        return self

    def build(self) -> ParameterSchema:
        return ParameterSchema(
            title=self.title,
            options=self.options,
            allowed_values=self._allowed_values,
            default_value=self._default_value,
        )

    def _checked_default(self, value: str) -> str:
        try:
            return check_value(self.build(), value)
        except ValidationError as exc:
            raise SchemaError(f"{self._owner.verb}: invalid default value: {exc}") from exc


class CommandBuilder:
    """Collects parameters for one verb until the owning registry freezes it."""

    def __init__(self, verb: str, handler: Handler) -> None:
        self.verb = verb
        self.handler = handler
        self._parameters: list[ParameterBuilder] = []
        self._schema: CommandSchema | None = None

    @property
    def frozen(self) -> bool:
        return self._schema is not None

    def add_parameter(self, title: str, *options: ParameterOption) -> ParameterBuilder:
        """Declares a parameter. Duplicate titles and a second default parameter are rejected."""
        self._ensure_mutable()

        if not title or title.startswith("-"):
            raise SchemaError(f"{self.verb}: invalid parameter title {title!r}")
        if any(item.title == title for item in self._parameters):
            raise SchemaError(f"{self.verb}: duplicate parameter -{title}")

        option_set = frozenset(options)
        if ParameterOption.DEFAULT in option_set:
            if ParameterOption.BOOLEAN in option_set:
                raise SchemaError(f"{self.verb}: default parameter -{title} cannot be boolean")
            existing = next(
                (item for item in self._parameters if ParameterOption.DEFAULT in item.options),
                None,
            )
            if existing is not None:
                raise SchemaError(
                    f"{self.verb}: -{title} conflicts with default parameter -{existing.title}"
                )

        parameter = ParameterBuilder(self, title, option_set)
        self._parameters.append(parameter)
        return parameter

    def build(self) -> CommandSchema:
        """Freezes the builder and returns the immutable schema."""
        if self._schema is None:
            self._schema = CommandSchema(
                verb=self.verb,
                parameters=tuple(item.build() for item in self._parameters),
                handler=self.handler,
            )
        return self._schema

    def _ensure_mutable(self) -> None:
        if self.frozen:
            raise SchemaError(f"{self.verb}: schema is frozen once dispatch has started")
