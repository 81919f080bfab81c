"""데모 레지스트리(backup, cleanup)에 대한 end-to-end 디스패치 테스트."""

from __future__ import annotations

import pytest

from via_dispatch.cli import build_registry
from via_dispatch.cli.commands import cleanup
from via_dispatch.common import (
    BooleanTakesNoValueError,
    MissingArgumentsError,
    Request,
    UnknownCommandError,
    UnknownParameterError,
)
from via_dispatch.dispatcher import Registry


@pytest.fixture()
def captured(monkeypatch: pytest.MonkeyPatch) -> list[Request]:
    """cleanup 핸들러를 가로채 전달된 Request 를 기록한다."""
    requests: list[Request] = []

    def _record(request: Request) -> int:
        requests.append(request)
        return 0

    monkeypatch.setattr(cleanup, "execute", _record)
    return requests


def _registry(environ: dict[str, str] | None = None) -> Registry:
    return build_registry(environ=environ or {})


def test_default_value_and_enum_flag(captured: list[Request]) -> None:
    _registry().dispatch(["cleanup", "myid", "-os", "Windows"])

    assert captured[0].values("id") == ("myid",)
    assert captured[0].values("os") == ("Windows",)


def test_enum_values_accumulate_and_normalize(captured: list[Request]) -> None:
    _registry().dispatch(["cleanup", "-os", "win", "lin", "-download-types", "INST", "d"])

    assert captured[0].values("os") == ("Windows", "Linux")
    assert captured[0].values("download-types") == ("installer", "dlc")


def test_boolean_flags_followed_by_flag_or_end(captured: list[Request]) -> None:
    _registry().dispatch(["cleanup", "-all", "-test"])

    assert captured[0].flag("all")
    assert captured[0].flag("test")
    assert captured[0].values("all") == ()


def test_boolean_flag_followed_by_value_fails(captured: list[Request]) -> None:
    with pytest.raises(BooleanTakesNoValueError):
        _registry().dispatch(["cleanup", "-all", "true"])
    assert captured == []


def test_layout_default_is_applied_when_untouched(captured: list[Request]) -> None:
    _registry().dispatch(["cleanup", "x"])

    assert captured[0].value("downloads-layout") == "flat"


def test_env_fallback_for_untouched_parameters(captured: list[Request]) -> None:
    environ = {
        "VIA_OS": "mac",
        "VIA_DOWNLOAD_TYPES": "extra",
        "VIA_DOWNLOADS_LAYOUT": "sharded",
        "VIA_NO_PATCHES": "1",
    }
    _registry(environ).dispatch(["cleanup", "-os", "lin"])

    request = captured[0]
    assert request.values("os") == ("Linux",)
    assert request.values("download-types") == ("extra",)
    assert request.value("downloads-layout") == "sharded"
    assert request.flag("no-patches")


def test_registry_errors() -> None:
    registry = _registry()

    with pytest.raises(MissingArgumentsError):
        registry.dispatch([])
    with pytest.raises(UnknownCommandError) as unknown_command:
        registry.dispatch(["launch"])
    with pytest.raises(UnknownParameterError) as unknown_parameter:
        registry.dispatch(["cleanup", "-bogus"])

    assert unknown_command.value.verb == "launch"
    assert unknown_parameter.value.title == "bogus"
