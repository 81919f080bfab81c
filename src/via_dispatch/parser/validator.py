"""Value validation and enum normalization."""

from __future__ import annotations

from via_dispatch.common import (
    BooleanTakesNoValueError,
    EmptyValueError,
    InvalidValueError,
    ParameterSchema,
)


def check_value(schema: ParameterSchema, candidate: str) -> str:
    """Accepts a candidate value for a parameter and returns its normalized form.

    Allowed values are matched case-insensitively by prefix in declared order,
    so ``"l"`` against ``("Linux", "Lima")`` resolves to ``"Linux"``.
    """

    if schema.is_boolean:
        raise BooleanTakesNoValueError(schema.title, candidate)

    if candidate == "":
        raise EmptyValueError(schema.title)

    if not schema.allowed_values:
        return candidate

    lowered = candidate.lower()
    for allowed in schema.allowed_values:
        if allowed.lower().startswith(lowered):
            return allowed

    raise InvalidValueError(schema.title, candidate)
