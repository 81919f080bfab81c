"""Token parser: a two-state machine over the arguments following the verb."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from via_dispatch.common import (
    CaptureMapping,
    CommandSchema,
    MissingRequiredParameterError,
    NoActiveParameterError,
    NoDefaultParameterError,
    ParameterSchema,
    TooManyValuesError,
    UnknownParameterError,
)
from via_dispatch.parser.validator import check_value

FLAG_MARKER = "-"


class ParseState(Enum):
    EXPECTING_DEFAULT_OR_FLAG = "expecting_default_or_flag"
    EXPECTING_VALUE_OR_FLAG = "expecting_value_or_flag"


@dataclass
class ParseSession:
    """Per-call parser state. One session parses one token list."""

    command: CommandSchema
    state: ParseState = ParseState.EXPECTING_DEFAULT_OR_FLAG
    captures: CaptureMapping = field(default_factory=dict)
    active: ParameterSchema | None = None

    def feed(self, token: str) -> None:
        if token.startswith(FLAG_MARKER):
            self._open_parameter(token[len(FLAG_MARKER):])
        elif self.state is ParseState.EXPECTING_DEFAULT_OR_FLAG:
            self._capture_default(token)
        else:
            self._append_value(token)

    def _open_parameter(self, title: str) -> None:
        parameter = self.command.find_parameter(title)
        if parameter is None:
            raise UnknownParameterError(title)

        # reopening a parameter discards what it captured before
        self.captures[parameter.title] = []
        self.active = parameter
        self.state = ParseState.EXPECTING_VALUE_OR_FLAG

    def _capture_default(self, token: str) -> None:
        parameter = self.command.default_parameter()
        if parameter is None:
            raise NoDefaultParameterError(token)

        self.captures[parameter.title] = [check_value(parameter, token)]
        self.active = parameter
        self.state = ParseState.EXPECTING_VALUE_OR_FLAG

    def _append_value(self, token: str) -> None:
        parameter = self.active
        if parameter is None:
            raise NoActiveParameterError(token)

        value = check_value(parameter, token)
        captured = self.captures[parameter.title]
        if captured and not parameter.allows_multiple:
            raise TooManyValuesError(parameter.title, token)
        captured.append(value)


def parse_tokens(command: CommandSchema, tokens: Sequence[str]) -> CaptureMapping:
    """Parses tokens against a command schema and returns the capture mapping.

    Raises the first ``ParseError`` encountered; no partial mapping is returned.
    """

    session = ParseSession(command)
    for token in tokens:
        session.feed(token)
    return session.captures


def check_required(command: CommandSchema, captures: CaptureMapping) -> None:
    """Raises for the first required parameter that ended up without a value.

    A boolean parameter is satisfied by presence alone; any other parameter
    needs at least one captured value.
    """

    for parameter in command.parameters:
        if not parameter.is_required:
            continue
        if parameter.title not in captures:
            raise MissingRequiredParameterError(parameter.title)
        if not parameter.is_boolean and not captures[parameter.title]:
            raise MissingRequiredParameterError(parameter.title)
