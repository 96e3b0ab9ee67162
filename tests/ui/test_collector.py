"""Tests for parameter collectors."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import typer

from funcdeck.registry.protocol import FunctionDescriptor, ParameterSpec, ParameterType
from funcdeck.ui.collector import ParameterCollector, PromptCollector, StaticCollector


def _descriptor() -> FunctionDescriptor:
    return FunctionDescriptor(
        name="reboot",
        target=None,
        function=lambda reason, delay_seconds: None,
        parameters=(
            ParameterSpec("reason", ParameterType.STRING),
            ParameterSpec(
                "delay_seconds", ParameterType.INT, required=False, default=0
            ),
        ),
    )


class TestPromptCollector:
    def test_prompts_each_parameter_with_hint(self) -> None:
        prompt = MagicMock(side_effect=["update", "5"])
        collector = PromptCollector(prompt=prompt)

        values = collector.collect(_descriptor())

        assert values == ["update", "5"]
        assert prompt.call_args_list[0].args == ("reason (string)",)
        assert prompt.call_args_list[1].args == ("delay_seconds (int, default 0)",)
        assert prompt.call_args_list[1].kwargs == {
            "default": "",
            "show_default": False,
        }

    def test_abort_cancels(self) -> None:
        def prompt(text: str, **kwargs: Any) -> str:
            raise typer.Abort()

        assert PromptCollector(prompt=prompt).collect(_descriptor()) is None

    def test_eof_cancels_midway(self) -> None:
        prompt = MagicMock(side_effect=["update", EOFError()])

        assert PromptCollector(prompt=prompt).collect(_descriptor()) is None


def test_static_collector_returns_copy() -> None:
    values = ["a", "b"]
    collector = StaticCollector(values)

    collected = collector.collect(_descriptor())

    assert collected == values
    assert collected is not values
    assert isinstance(collector, ParameterCollector)
