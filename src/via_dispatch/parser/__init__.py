"""Token parser module."""

from .service import FLAG_MARKER, ParseSession, ParseState, check_required, parse_tokens
from .validator import check_value

__all__ = [
    "FLAG_MARKER",
    "ParseSession",
    "ParseState",
    "check_required",
    "check_value",
    "parse_tokens",
]
