"""YAML 기반 디스패처 설정 로딩."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .models import DispatchSettings

logger = logging.getLogger(__name__)

_DEFAULT_SETTINGS = DispatchSettings()


def default_settings() -> DispatchSettings:
    return _DEFAULT_SETTINGS


def load_settings(config_path: Path | None) -> DispatchSettings:
    """via.yaml 로딩. 파일이 없거나 파싱 실패 시 기본값 반환."""
    if config_path is None:
        return _DEFAULT_SETTINGS

    data = _safe_load_yaml(config_path)
    if data is None:
        return _DEFAULT_SETTINGS

    try:
        dispatch: dict[str, Any] = data.get("dispatch", {}) or {}
        env_raw: dict[str, Any] = dispatch.get("env", {}) or {}
        logging_raw = dispatch.get("logging_config")

        separator = str(env_raw.get("list_separator", _DEFAULT_SETTINGS.env_list_separator))
        if not separator:
            raise ValueError("env.list_separator must not be empty")

        logging_config: Path | None = None
        if logging_raw:
            logging_config = Path(str(logging_raw))
            if not logging_config.is_absolute():
                logging_config = config_path.parent / logging_config

        return DispatchSettings(
            env_prefix=str(env_raw.get("prefix", _DEFAULT_SETTINGS.env_prefix)),
            env_list_separator=separator,
            log_level=str(dispatch.get("log_level", _DEFAULT_SETTINGS.log_level)).upper(),
            logging_config=logging_config,
        )
    except Exception:
        logger.warning("dispatch 설정 파싱 실패, 기본값 사용: %s", config_path)
        return _DEFAULT_SETTINGS


def _safe_load_yaml(path: Path) -> dict[str, Any] | None:
    """YAML 파일을 안전하게 로딩. 실패 시 None 반환."""
    try:
        with open(path, encoding="utf-8") as f:
            result = yaml.safe_load(f)
        if isinstance(result, dict):
            return result
        return None
    except Exception:
        logger.warning("YAML 로딩 실패: %s", path)
        return None
