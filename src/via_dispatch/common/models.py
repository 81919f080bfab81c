"""Shared data models for via-dispatch."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, Union
from urllib.parse import quote

Handler = Callable[["Request"], Union[int, None]]
CaptureMapping = dict[str, list[str]]


class ParameterOption(Enum):
    DEFAULT = "default"
    ENV_FALLBACK = "env_fallback"
    MULTIPLE_VALUES = "multiple_values"
    REQUIRED = "required"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class ParameterSchema:
    title: str
    options: frozenset[ParameterOption] = frozenset()
    allowed_values: tuple[str, ...] = ()
    default_value: str | None = None

    @property
    def is_default(self) -> bool:
        return ParameterOption.DEFAULT in self.options

    @property
    def is_boolean(self) -> bool:
        return ParameterOption.BOOLEAN in self.options

    @property
    def allows_multiple(self) -> bool:
        return ParameterOption.MULTIPLE_VALUES in self.options

    @property
    def is_required(self) -> bool:
        return ParameterOption.REQUIRED in self.options

    @property
    def has_env_fallback(self) -> bool:
        return ParameterOption.ENV_FALLBACK in self.options


@dataclass(frozen=True)
class CommandSchema:
    verb: str
    parameters: tuple[ParameterSchema, ...]
    handler: Handler

    def find_parameter(self, title: str) -> ParameterSchema | None:
        """Exact title lookup; the first declared parameter wins."""
        for parameter in self.parameters:
            if parameter.title == title:
                return parameter
        return None

    def default_parameter(self) -> ParameterSchema | None:
        for parameter in self.parameters:
            if parameter.is_default:
                return parameter
        return None


@dataclass(frozen=True)
class Request:
    """Finalized, fallback-resolved arguments handed to a command handler."""

    verb: str
    query: tuple[tuple[str, tuple[str, ...]], ...] = ()

    def __contains__(self, title: object) -> bool:
        return any(key == title for key, _ in self.query)

    def __iter__(self) -> Iterator[str]:
        return (key for key, _ in self.query)

    def values(self, title: str) -> tuple[str, ...]:
        for key, values in self.query:
            if key == title:
                return values
        return ()

    def value(self, title: str, default: str | None = None) -> str | None:
        values = self.values(title)
        return values[0] if values else default

    def flag(self, title: str) -> bool:
        return title in self

    def as_dict(self) -> dict[str, list[str]]:
        return {key: list(values) for key, values in self.query}

    def to_url(self) -> str:
        """Renders the request as ``via://<verb>?<title>=<value>&...``."""
        pairs: list[str] = []
        for key, values in self.query:
            encoded_key = quote(key, safe="-_.")
            if not values:
                pairs.append(encoded_key)
                continue
            pairs.extend(f"{encoded_key}={quote(value, safe='-_.')}" for value in values)

        url = f"via://{quote(self.verb, safe='-_.')}"
        if pairs:
            url += "?" + "&".join(pairs)
        return url
