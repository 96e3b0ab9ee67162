"""Convert raw text arguments to their declared parameter types."""

from __future__ import annotations

from collections.abc import Sequence
import math
from typing import Any

from funcdeck.errors import (
    ArityMismatchError,
    MissingRequiredParameterError,
    TypeCoercionError,
)
from funcdeck.registry.protocol import FunctionDescriptor, ParameterSpec, ParameterType

_INT_BOUNDS = {
    ParameterType.INT: (-(2**31), 2**31 - 1),
    ParameterType.LONG: (-(2**63), 2**63 - 1),
}

_TRUE_VALUES = frozenset({"true", "1"})
_FALSE_VALUES = frozenset({"false", "0"})


def _parse_integral(spec: ParameterSpec, raw: str) -> int:
    text = raw.strip()
    # int() also accepts "1_000" and non-ASCII digits; keep to plain base-10.
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not digits.isascii() or not digits.isdigit():
        raise TypeCoercionError(spec.name, spec.declared_type.value, raw)
    value = int(text)
    low, high = _INT_BOUNDS[spec.declared_type]
    if not low <= value <= high:
        raise TypeCoercionError(spec.name, spec.declared_type.value, raw)
    return value


def _parse_decimal(spec: ParameterSpec, raw: str) -> float:
    text = raw.strip()
    # float() accepts the same extras as int().
    if not text.isascii() or "_" in text:
        raise TypeCoercionError(spec.name, spec.declared_type.value, raw)
    try:
        value = float(text)
    except ValueError as e:
        raise TypeCoercionError(spec.name, spec.declared_type.value, raw) from e
    if not math.isfinite(value):
        raise TypeCoercionError(spec.name, spec.declared_type.value, raw)
    return value


def _parse_boolean(spec: ParameterSpec, raw: str) -> bool:
    text = raw.strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise TypeCoercionError(spec.name, spec.declared_type.value, raw)


def coerce_value(spec: ParameterSpec, raw: str | None) -> Any:
    """Coerce one raw value according to ``spec``.

    Absent (None) or empty values resolve to the declared default for
    optional parameters; strings pass through unchanged, so an optional
    string parameter accepts "".

    Raises:
        MissingRequiredParameterError: Required parameter with no value.
        TypeCoercionError: Value is not text or does not parse as the
            declared type.
    """
    if raw is not None and not isinstance(raw, str):
        raise TypeCoercionError(spec.name, spec.declared_type.value, raw)
    if raw is None or raw == "":
        if spec.required:
            raise MissingRequiredParameterError(spec.name)
        if raw is None or spec.declared_type is not ParameterType.STRING:
            return spec.default

    if spec.declared_type is ParameterType.STRING:
        return raw
    if spec.declared_type.is_integral:
        return _parse_integral(spec, raw)
    if spec.declared_type.is_decimal:
        return _parse_decimal(spec, raw)
    return _parse_boolean(spec, raw)


def coerce_arguments(
    descriptor: FunctionDescriptor, raw_args: Sequence[str | None] | None
) -> list[Any]:
    """Coerce a full raw argument list for ``descriptor``.

    Raises:
        ArityMismatchError: Argument count differs from the parameter count.
        MissingRequiredParameterError: See coerce_value.
        TypeCoercionError: See coerce_value.
    """
    values = () if raw_args is None else tuple(raw_args)
    if len(values) != descriptor.arity:
        raise ArityMismatchError(descriptor.arity, len(values))
    return [
        coerce_value(spec, raw)
        for spec, raw in zip(descriptor.parameters, values, strict=True)
    ]
