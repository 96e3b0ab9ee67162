"""Tests for the module-level system_info target."""

from __future__ import annotations

from funcdeck.invocation.outcome import Failure, Success
from funcdeck.registry.catalog import FunctionCatalog
from funcdeck.targets import system_info


def _catalog() -> FunctionCatalog:
    catalog = FunctionCatalog([system_info])
    catalog.init_function()
    return catalog


def test_module_functions_discovered() -> None:
    catalog = _catalog()

    assert [d.name for d in catalog.descriptors()] == [
        "getPlatformInfo",
        "echo",
        "currentTime",
    ]


def test_echo_with_default_times() -> None:
    catalog = _catalog()

    assert catalog.invoke(1, ["hi", ""]).text == "hi"  # type: ignore[union-attr]
    assert catalog.invoke(1, ["hi", "2"]).text == "hi\nhi"  # type: ignore[union-attr]


def test_echo_rejects_bad_repeat() -> None:
    outcome = _catalog().invoke(1, ["hi", "0"])

    assert isinstance(outcome, Failure)


def test_platform_info_keys() -> None:
    outcome = _catalog().invoke(0)

    assert isinstance(outcome, Success)
    assert set(outcome.value) == {"system", "release", "machine", "python"}
