"""Dispatcher module."""

from .service import Registry

__all__ = ["Registry"]
