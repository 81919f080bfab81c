"""로깅 설정."""

from __future__ import annotations

import logging
import logging.config
from pathlib import Path
from typing import Any

import yaml

_DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
_PACKAGE_LOGGER = __name__.split(".")[0]


def setup_logging(config_path: Path | None = None, level: int | str | None = None) -> None:
    """로깅 초기화.

    config_path 의 dictConfig YAML 을 우선 적용하고, 로딩 실패 시 기본 포맷으로
    basicConfig 를 적용한다. level 은 숫자 또는 "DEBUG" 같은 레벨 이름이며,
    YAML 적용 후에도 패키지 로거 레벨로 덮어쓴다.
    """
    if config_path is not None:
        try:
            with open(config_path, encoding="utf-8") as f:
                config: dict[str, Any] = yaml.safe_load(f)
            logging.config.dictConfig(config)
        except Exception:
            pass
        else:
            if level is not None:
                logging.getLogger(_PACKAGE_LOGGER).setLevel(resolve_level(level))
            return

    logging.basicConfig(level=resolve_level(level), format=_DEFAULT_FORMAT)


def resolve_level(level: int | str | None) -> int:
    """레벨 이름/숫자를 logging 레벨로 변환. 알 수 없는 이름은 WARNING."""
    if level is None:
        return logging.WARNING
    if isinstance(level, int):
        return level

    resolved = logging.getLevelName(level.strip().upper())
    if isinstance(resolved, int):
        return resolved
    return logging.WARNING


def get_logger(name: str) -> logging.Logger:
    """표준 로거 반환."""
    return logging.getLogger(name)
