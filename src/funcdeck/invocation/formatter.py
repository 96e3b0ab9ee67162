"""Render function return values as display text."""

from __future__ import annotations

import json
from typing import Any

from pydantic_core import to_jsonable_python

UNIT_TEXT = "Done (no return value)"


class ResultFormatter:
    """Turn any return value into human-readable text.

    Primitives render directly; composites (mappings, sequences, dataclasses,
    pydantic models, datetimes) are serialized to JSON.
    """

    def __init__(self, indent: int | None = 2) -> None:
        self._indent = indent

    def format(self, value: Any) -> str:
        """Render ``value``.

        Raises:
            ValueError: If a composite cannot be serialized (e.g. cycles).
            Errors raised by a value's own __str__ propagate unchanged.
        """
        if value is None:
            return UNIT_TEXT
        if isinstance(value, str):
            return value
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        jsonable = to_jsonable_python(value, fallback=str)
        return json.dumps(jsonable, indent=self._indent, ensure_ascii=False)
