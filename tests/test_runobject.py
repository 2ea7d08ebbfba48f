import sys

import pytest

from ttkcommon.runobject import RunObject


@pytest.fixture
def runner():
    return RunObject("TTKWeather", "2.8.0.0", "TTKService")


def test_build_arguments_drops_application_and_quotes(runner):
    result = runner.build_arguments(["/opt/bin/TTKWeather", "-Open", "file.txt"])
    assert result == '"-Open" "file.txt" '


def test_build_arguments_empty(runner):
    assert runner.build_arguments([]) == ""


def test_build_arguments_escapes_only_first_quote(runner):
    result = runner.build_arguments(['x"y"z'])
    assert result == '"x\\"y"z" '


def test_build_arguments_keeps_names_not_ending_with_app(runner):
    result = runner.build_arguments(["TTKWeatherX", "TTKWeather"])
    assert result == '"TTKWeatherX" '


def test_build_arguments_keeps_empty_argument(runner):
    assert runner.build_arguments([""]) == '"" '


def test_build_arguments_each_argument_followed_by_space(runner):
    args = ["a", "b", "c"]
    result = runner.build_arguments(args)
    assert result.endswith(" ")
    assert result.count(" ") == len(args)


def test_service_path_is_next_to_launcher(runner, tmp_path, monkeypatch):
    launcher = tmp_path / "launcher"
    monkeypatch.setattr(sys, "argv", [str(launcher)])
    assert runner.service_path() == tmp_path.resolve() / "2.8.0.0" / "TTKService"


def test_service_path_without_launcher_uses_cwd(runner, tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "argv", [""])
    monkeypatch.chdir(tmp_path)
    assert runner.service_path() == tmp_path.resolve() / "2.8.0.0" / "TTKService"