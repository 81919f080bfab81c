"""디스패처 설정 모듈."""

from .loader import default_settings, load_settings
from .models import DispatchSettings

__all__ = [
    "DispatchSettings",
    "default_settings",
    "load_settings",
]
