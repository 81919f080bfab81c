"""backup 커맨드 핸들러."""

from __future__ import annotations

from via_dispatch.common import Request
from via_dispatch.dispatcher import Registry


def configure(registry: Registry) -> None:
    registry.register("backup", execute)


def execute(request: Request) -> int:
    print(f"[OK] {request.to_url()}")
    return 0
