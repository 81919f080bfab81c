"""Custom exceptions for dispatch and exit-code mapping."""

from __future__ import annotations


class SchemaError(Exception):
    """Raised when a command or parameter schema is registered inconsistently."""


class DispatchError(Exception):
    """Base class for errors caused by the user's command line."""

    exit_code = 64


class MissingArgumentsError(DispatchError):
    def __init__(self) -> None:
        super().__init__("missing arguments: expected a command verb")


class UnknownCommandError(DispatchError):
    exit_code = 65

    def __init__(self, verb: str) -> None:
        super().__init__(f"not a valid command verb: {verb}")
        self.verb = verb


class ParseError(DispatchError):
    """Raised by the token parser; parsing halts at the first one."""


class UnknownParameterError(ParseError):
    def __init__(self, title: str) -> None:
        super().__init__(f"parameter -{title} not found")
        self.title = title


class NoDefaultParameterError(ParseError):
    def __init__(self, token: str) -> None:
        super().__init__(f"value {token!r} given but command has no default parameter")
        self.token = token


class NoActiveParameterError(ParseError):
    def __init__(self, token: str) -> None:
        super().__init__(f"no parameter to set value {token!r} for")
        self.token = token


class MissingRequiredParameterError(ParseError):
    def __init__(self, title: str) -> None:
        super().__init__(f"required parameter -{title} has no value")
        self.title = title


class ValidationError(ParseError):
    """Raised when a candidate value is rejected for a parameter."""

    def __init__(self, title: str, message: str) -> None:
        super().__init__(message)
        self.title = title


class BooleanTakesNoValueError(ValidationError):
    def __init__(self, title: str, candidate: str) -> None:
        super().__init__(title, f"parameter -{title} is a flag and takes no value: {candidate!r}")
        self.candidate = candidate


class EmptyValueError(ValidationError):
    def __init__(self, title: str) -> None:
        super().__init__(title, f"empty value for parameter -{title}")


class InvalidValueError(ValidationError):
    def __init__(self, title: str, candidate: str) -> None:
        super().__init__(title, f"value {candidate!r} is not valid for -{title}")
        self.candidate = candidate


class TooManyValuesError(ValidationError):
    def __init__(self, title: str, candidate: str) -> None:
        super().__init__(title, f"parameter -{title} accepts a single value, got another: {candidate!r}")
        self.candidate = candidate
