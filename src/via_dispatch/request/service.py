"""Request construction: fallback resolution on top of a parsed capture mapping."""

from __future__ import annotations

from typing import Mapping

from via_dispatch.common import CaptureMapping, CommandSchema, ParameterSchema, Request
from via_dispatch.config import DispatchSettings, default_settings
from via_dispatch.observability import get_logger
from via_dispatch.parser import check_required, check_value

logger = get_logger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


def env_var_name(settings: DispatchSettings, title: str) -> str:
    """Environment variable consulted for a parameter, e.g. ``VIA_LANG_CODE``."""
    return settings.env_prefix + title.upper().replace("-", "_")


def build_request(
    command: CommandSchema,
    captures: CaptureMapping,
    settings: DispatchSettings | None = None,
    environ: Mapping[str, str] | None = None,
) -> Request:
    """Resolves untouched parameters from the environment or their default value.

    Captured values always win; the environment wins over a declared default.
    Required parameters are checked after resolution.
    """

    settings = settings or default_settings()
    environ = environ if environ is not None else {}

    resolved: CaptureMapping = {title: list(values) for title, values in captures.items()}

    for parameter in command.parameters:
        if parameter.title in resolved:
            continue

        if parameter.has_env_fallback:
            name = env_var_name(settings, parameter.title)
            raw = environ.get(name)
            if raw is not None:
                fallback = _values_from_env(settings, parameter, raw)
                if fallback is not None:
                    logger.debug("-%s resolved from %s", parameter.title, name)
                    resolved[parameter.title] = fallback
                    continue

        if parameter.default_value is not None:
            resolved[parameter.title] = [parameter.default_value]

    check_required(command, resolved)

    return Request(
        verb=command.verb,
        query=tuple((title, tuple(values)) for title, values in resolved.items()),
    )


def _values_from_env(
    settings: DispatchSettings,
    parameter: ParameterSchema,
    raw: str,
) -> list[str] | None:
    if parameter.is_boolean:
        return [] if raw.strip().lower() in _TRUTHY else None

    if parameter.allows_multiple:
        pieces = [item.strip() for item in raw.split(settings.env_list_separator)]
        values = [check_value(parameter, item) for item in pieces if item]
        return values or None

    # an empty variable counts as unset
    if not raw.strip():
        return None
    return [check_value(parameter, raw.strip())]
