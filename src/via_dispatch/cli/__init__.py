"""Command-line interface."""

from .parser import build_registry

__all__ = ["build_registry"]
