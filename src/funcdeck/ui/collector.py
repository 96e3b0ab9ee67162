"""Gather raw parameter values for a function before it is invoked."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Protocol, runtime_checkable

import typer

from funcdeck.registry.protocol import FunctionDescriptor, ParameterSpec


@runtime_checkable
class ParameterCollector(Protocol):
    """Returns one raw text value per parameter, or None when cancelled."""

    def collect(self, descriptor: FunctionDescriptor) -> list[str] | None: ...


class StaticCollector:
    """Collector returning pre-supplied values (non-interactive use)."""

    def __init__(self, values: Sequence[str]) -> None:
        self._values = list(values)

    def collect(self, descriptor: FunctionDescriptor) -> list[str] | None:
        return list(self._values)


Prompt = Callable[..., str]


class PromptCollector:
    """Ask for each parameter on the terminal.

    Optional parameters may be left blank to use their default. Ctrl-C or
    end of input cancels the whole entry.
    """

    def __init__(self, prompt: Prompt = typer.prompt) -> None:
        self._prompt = prompt

    def collect(self, descriptor: FunctionDescriptor) -> list[str] | None:
        values: list[str] = []
        for spec in descriptor.parameters:
            try:
                values.append(self._ask(spec))
            except (typer.Abort, EOFError, KeyboardInterrupt):
                return None
        return values

    def _ask(self, spec: ParameterSpec) -> str:
        if spec.required:
            return self._prompt(spec.hint)
        return self._prompt(spec.hint, default="", show_default=False)
