"""Schema builder module."""

from .builder import CommandBuilder, ParameterBuilder

__all__ = ["CommandBuilder", "ParameterBuilder"]
