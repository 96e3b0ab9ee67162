"""Tests for the funcdeck CLI."""

from __future__ import annotations

from collections.abc import Iterator
import sys

from loguru import logger
import pytest
from typer.testing import CliRunner

from funcdeck.ui.cli import app

runner = CliRunner()

SET_HOME_ENABLE = "0"
SET_VOLUME = "6"
GET_DEVICE_INFO = "8"


@pytest.fixture(autouse=True)
def _device_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setenv(
        "FUNCDECK_TARGETS", "funcdeck.targets.device_policy:create_target"
    )
    monkeypatch.setenv("FUNCDECK_LOG_LEVEL", "ERROR")
    yield
    # The CLI replaces loguru sinks with the runner's captured stderr.
    logger.remove()
    logger.add(sys.stderr)


class TestList:
    def test_lists_indexed_signatures(self) -> None:
        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0
        assert "  0  setHomeEnable(enable: boolean)" in result.output
        assert "  9  reboot(delay_seconds: int = 0)" in result.output

    def test_invalid_config_exits_2(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FUNCDECK_LOG_LEVEL", "LOUD")

        result = runner.invoke(app, ["list"])

        assert result.exit_code == 2
        assert "FUNCDECK_LOG_LEVEL" in result.output

    def test_unknown_target_exits_2(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FUNCDECK_TARGETS", "funcdeck.targets.missing")

        result = runner.invoke(app, ["list"])

        assert result.exit_code == 2
        assert "Cannot import" in result.output


class TestCall:
    def test_call_with_arguments(self) -> None:
        result = runner.invoke(app, ["call", SET_HOME_ENABLE, "true"])

        assert result.exit_code == 0
        assert "setHomeEnable: Done (no return value)" in result.output

    def test_call_bad_argument_exits_1(self) -> None:
        result = runner.invoke(app, ["call", SET_HOME_ENABLE, "notabool"])

        assert result.exit_code == 1
        assert "setHomeEnable failed [type_coercion]" in result.output

    def test_call_prompts_for_missing_arguments(self) -> None:
        result = runner.invoke(app, ["call", SET_VOLUME], input="5\n")

        assert result.exit_code == 0
        assert "level (int)" in result.output
        assert "setVolume: 5" in result.output

    def test_call_no_input_reports_arity_mismatch(self) -> None:
        result = runner.invoke(app, ["call", SET_VOLUME, "--no-input"])

        assert result.exit_code == 1
        assert "[arity_mismatch]" in result.output

    def test_call_cancelled_prompt(self) -> None:
        result = runner.invoke(app, ["call", SET_VOLUME], input="")

        assert result.exit_code == 0
        assert "setVolume: cancelled" in result.output

    def test_call_out_of_range_exits_2(self) -> None:
        result = runner.invoke(app, ["call", "99"])

        assert result.exit_code == 2
        assert "out of range" in result.output

    def test_execution_failure_exits_1(self) -> None:
        result = runner.invoke(app, ["call", SET_VOLUME, "99"])

        assert result.exit_code == 1
        assert "[execution_error]" in result.output


class TestShell:
    def test_select_and_quit(self) -> None:
        result = runner.invoke(app, ["shell"], input=f"{GET_DEVICE_INFO}\nq\n")

        assert result.exit_code == 0
        assert "getDeviceInfo: {" in result.output
        assert '"device_model": "FD-100"' in result.output

    def test_state_persists_between_selections(self) -> None:
        commands = f"{SET_VOLUME}\n11\n{GET_DEVICE_INFO}\nq\n"

        result = runner.invoke(app, ["shell"], input=commands)

        assert result.exit_code == 0
        assert "setVolume: 11" in result.output
        assert '"volume": 11' in result.output

    def test_rejects_non_index_input(self) -> None:
        result = runner.invoke(app, ["shell"], input="abc\n42\nq\n")

        assert result.exit_code == 0
        assert "Not a function index: abc" in result.output
        assert "out of range" in result.output

    def test_end_of_input_exits(self) -> None:
        result = runner.invoke(app, ["shell"], input="")

        assert result.exit_code == 0
