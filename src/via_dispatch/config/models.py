"""설정 모델."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DispatchSettings:
    """디스패처 설정 (via.yaml)."""

    env_prefix: str = "VIA_"
    env_list_separator: str = ","
    log_level: str = "WARNING"
    logging_config: Path | None = None
