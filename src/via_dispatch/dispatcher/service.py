"""Command registry and dispatch service."""

from __future__ import annotations

import os
from typing import Mapping, Sequence

from via_dispatch.common import (
    CommandSchema,
    Handler,
    MissingArgumentsError,
    SchemaError,
    UnknownCommandError,
)
from via_dispatch.config import DispatchSettings, default_settings
from via_dispatch.observability import get_logger
from via_dispatch.parser import parse_tokens
from via_dispatch.request import build_request
from via_dispatch.schema import CommandBuilder

logger = get_logger(__name__)


class Registry:
    """Holds registered commands and routes a token list to one of them.

    Commands are registered up front; the first dispatch freezes every schema
    so later builder calls fail instead of racing a parse.
    """

    def __init__(
        self,
        settings: DispatchSettings | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.settings = settings or default_settings()
        self._environ = environ
        self._builders: list[CommandBuilder] = []
        self._commands: tuple[CommandSchema, ...] | None = None

    def register(self, verb: str, handler: Handler) -> CommandBuilder:
        if self._commands is not None:
            raise SchemaError(f"cannot register {verb!r}: registry is frozen")
        if not verb or verb.startswith("-"):
            raise SchemaError(f"invalid command verb {verb!r}")
        if any(builder.verb == verb for builder in self._builders):
            raise SchemaError(f"duplicate command verb {verb!r}")

        builder = CommandBuilder(verb, handler)
        self._builders.append(builder)
        return builder

    @property
    def commands(self) -> tuple[CommandSchema, ...]:
        if self._commands is None:
            self._commands = tuple(builder.build() for builder in self._builders)
        return self._commands

    def find_command(self, verb: str) -> CommandSchema | None:
        for command in self.commands:
            if command.verb == verb:
                return command
        return None

    def dispatch(self, tokens: Sequence[str]) -> int:
        """Parses tokens and runs the matching handler, returning its exit status.

        Parse and request errors propagate unchanged and the handler is not
        called. Exceptions raised by the handler propagate as-is.
        """

        if not tokens:
            raise MissingArgumentsError()

        verb = tokens[0]
        command = self.find_command(verb)
        if command is None:
            raise UnknownCommandError(verb)

        captures = parse_tokens(command, tokens[1:])
        logger.debug("dispatch: verb=%s, parsed=%s", verb, list(captures))

        environ = self._environ if self._environ is not None else os.environ
        request = build_request(command, captures, settings=self.settings, environ=environ)

        status = command.handler(request)
        return 0 if status is None else int(status)
