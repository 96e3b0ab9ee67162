"""Tests for ResultFormatter."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
import json

from pydantic import BaseModel
import pytest

from funcdeck.invocation.formatter import UNIT_TEXT, ResultFormatter


@dataclass
class Package:
    name: str
    version_code: int


class Wifi(BaseModel):
    ssid: str
    connected: bool


class Opaque:
    def __str__(self) -> str:
        return "<opaque>"


class TestResultFormatter:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, UNIT_TEXT),
            ("plain text", "plain text"),
            ("", ""),
            (True, "true"),
            (False, "false"),
            (42, "42"),
            (0.25, "0.25"),
        ],
    )
    def test_primitives(self, value: object, expected: str) -> None:
        assert ResultFormatter().format(value) == expected

    def test_dataclass_rendered_as_indented_json(self) -> None:
        text = ResultFormatter(indent=2).format(Package("com.example", 3))

        assert text == '{\n  "name": "com.example",\n  "version_code": 3\n}'

    def test_pydantic_model(self) -> None:
        text = ResultFormatter(indent=None).format(Wifi(ssid="lab", connected=True))

        assert json.loads(text) == {"ssid": "lab", "connected": True}

    def test_nested_collections_and_datetimes(self) -> None:
        value = {
            "packages": [Package("a", 1)],
            "checked_at": datetime(2026, 1, 2, 3, 4, 5, tzinfo=UTC),
        }

        text = ResultFormatter(indent=None).format(value)

        assert json.loads(text) == {
            "packages": [{"name": "a", "version_code": 1}],
            "checked_at": "2026-01-02T03:04:05Z",
        }

    def test_unknown_leaf_uses_str(self) -> None:
        text = ResultFormatter(indent=None).format({"handle": Opaque()})

        assert json.loads(text) == {"handle": "<opaque>"}

    def test_non_ascii_kept(self) -> None:
        text = ResultFormatter(indent=None).format(["café"])

        assert text == '["café"]'
