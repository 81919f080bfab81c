"""cleanup 커맨드 핸들러."""

from __future__ import annotations

from via_dispatch.common import ParameterOption, Request
from via_dispatch.dispatcher import Registry

OS_VALUES = ("Windows", "macOS", "Linux")
LANG_CODES = ("en", "ru")
DOWNLOAD_TYPES = ("installer", "dlc", "extra")
DOWNLOADS_LAYOUTS = ("flat", "sharded")


def configure(registry: Registry) -> None:
    command = registry.register("cleanup", execute)

    command.add_parameter("id", ParameterOption.DEFAULT, ParameterOption.MULTIPLE_VALUES)
    command.add_parameter("slug", ParameterOption.MULTIPLE_VALUES)
    command.add_parameter(
        "os", ParameterOption.MULTIPLE_VALUES, ParameterOption.ENV_FALLBACK
    ).allowed_values(*OS_VALUES)
    command.add_parameter(
        "lang-code", ParameterOption.MULTIPLE_VALUES, ParameterOption.ENV_FALLBACK
    ).allowed_values(*LANG_CODES)
    command.add_parameter(
        "download-types", ParameterOption.MULTIPLE_VALUES, ParameterOption.ENV_FALLBACK
    ).allowed_values(*DOWNLOAD_TYPES)
    command.add_parameter("no-patches", ParameterOption.ENV_FALLBACK, ParameterOption.BOOLEAN)
    command.add_parameter(
        "downloads-layout", ParameterOption.ENV_FALLBACK
    ).allowed_values(*DOWNLOADS_LAYOUTS).default_value("flat")
    command.add_parameter("all", ParameterOption.BOOLEAN)
    command.add_parameter("test", ParameterOption.BOOLEAN)


def execute(request: Request) -> int:
    print(f"[OK] {request.to_url()}")
    if request.flag("test"):
        print(f"[TEST] ids={len(request.values('id'))}, layout={request.value('downloads-layout')}")
    return 0
