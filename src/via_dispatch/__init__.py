"""Verb-based command dispatch and argument parsing."""

from via_dispatch.common import (
    CommandSchema,
    DispatchError,
    ParameterOption,
    ParameterSchema,
    Request,
    SchemaError,
)
from via_dispatch.dispatcher import Registry

__all__ = [
    "CommandSchema",
    "DispatchError",
    "ParameterOption",
    "ParameterSchema",
    "Registry",
    "Request",
    "SchemaError",
]
