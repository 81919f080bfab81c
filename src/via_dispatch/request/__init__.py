"""Request module."""

from .service import build_request, env_var_name

__all__ = ["build_request", "env_var_name"]
