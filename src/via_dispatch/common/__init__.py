"""Common models and exceptions."""

from .exceptions import (
    BooleanTakesNoValueError,
    DispatchError,
    EmptyValueError,
    InvalidValueError,
    MissingArgumentsError,
    MissingRequiredParameterError,
    NoActiveParameterError,
    NoDefaultParameterError,
    ParseError,
    SchemaError,
    TooManyValuesError,
    UnknownCommandError,
    UnknownParameterError,
    ValidationError,
)
from .models import CaptureMapping, CommandSchema, Handler, ParameterOption, ParameterSchema, Request

__all__ = [
    "BooleanTakesNoValueError",
    "CaptureMapping",
    "CommandSchema",
    "DispatchError",
    "EmptyValueError",
    "Handler",
    "InvalidValueError",
    "MissingArgumentsError",
    "MissingRequiredParameterError",
    "NoActiveParameterError",
    "NoDefaultParameterError",
    "ParameterOption",
    "ParameterSchema",
    "ParseError",
    "Request",
    "SchemaError",
    "TooManyValuesError",
    "UnknownCommandError",
    "UnknownParameterError",
    "ValidationError",
]
