"""CLI 레지스트리 구성."""

from __future__ import annotations

from typing import Mapping

from via_dispatch.cli.commands import COMMAND_MODULES
from via_dispatch.config import DispatchSettings
from via_dispatch.dispatcher import Registry


def build_registry(
    settings: DispatchSettings | None = None,
    environ: Mapping[str, str] | None = None,
) -> Registry:
    """Registry 를 생성하고 커맨드 모듈을 등록한다."""
    registry = Registry(settings=settings, environ=environ)

    for module in COMMAND_MODULES:
        module.configure(registry)

    return registry
