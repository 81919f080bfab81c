"""CLI 커맨드 모듈."""

from __future__ import annotations

from types import ModuleType

from via_dispatch.cli.commands import backup, cleanup

COMMAND_MODULES: list[ModuleType] = [backup, cleanup]

__all__ = ["COMMAND_MODULES"]
