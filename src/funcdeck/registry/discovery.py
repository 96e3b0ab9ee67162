"""Build function descriptors from the ``@invokable`` members of a target.

Functions are ordered by declaration. For class instances, base classes come
first (reverse MRO) and an override keeps the position of the first
declaration. For modules, only functions defined in that module count.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import inspect
from typing import Annotated, Any, get_args, get_origin, get_type_hints

from funcdeck.registry.marker import invokable_name
from funcdeck.registry.protocol import (
    ANNOTATION_TYPES,
    NO_DEFAULT,
    DiscoveryWarning,
    FunctionDescriptor,
    ParameterSpec,
    ParameterType,
    target_name_of,
)

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


class _Excluded(Exception):
    """Internal signal that a marked function cannot be exposed."""


@dataclass(slots=True)
class DiscoveryResult:
    """Descriptors and warnings produced by scanning one target."""

    descriptors: list[FunctionDescriptor] = field(default_factory=list)
    warnings: list[DiscoveryWarning] = field(default_factory=list)


def resolve_parameter_type(hint: Any) -> ParameterType | None:
    """Map a resolved annotation to a ParameterType, or None if unsupported.

    An ``Annotated`` ParameterType marker only narrows within the base
    type's family: ``Annotated[int, LONG]`` is LONG, while
    ``Annotated[str, INT]`` is unsupported.
    """
    if get_origin(hint) is Annotated:
        base, *extras = get_args(hint)
        base_type = resolve_parameter_type(base)
        for extra in extras:
            if isinstance(extra, ParameterType):
                return extra if _same_family(extra, base_type) else None
        return base_type
    if not isinstance(hint, type):
        return None
    return ANNOTATION_TYPES.get(hint)


def _same_family(marker: ParameterType, base_type: ParameterType | None) -> bool:
    if base_type is None:
        return False
    if marker.is_integral or marker.is_decimal:
        return (marker.is_integral, marker.is_decimal) == (
            base_type.is_integral,
            base_type.is_decimal,
        )
    return marker is base_type


def marked_members(target: Any) -> list[tuple[str, str]]:
    """Return ``(attribute, display_name)`` pairs in declaration order."""
    if inspect.ismodule(target):
        members = []
        for attr, member in vars(target).items():
            name = invokable_name(member)
            if name and getattr(member, "__module__", None) == target.__name__:
                members.append((attr, name))
        return members

    positions: dict[str, None] = {}
    latest: dict[str, Any] = {}
    for cls in reversed(type(target).__mro__):
        if cls is object:
            continue
        for attr, member in vars(cls).items():
            positions.setdefault(attr, None)
            latest[attr] = member

    members = []
    for attr in positions:
        name = invokable_name(latest[attr])
        if name:
            members.append((attr, name))
    return members


def build_descriptor(target: Any, attr: str, name: str) -> FunctionDescriptor:
    """Assemble the descriptor for one marked member.

    Raises:
        _Excluded: If the member's signature cannot be exposed.
    """
    function = getattr(target, attr)
    if not callable(function):
        raise _Excluded("marked attribute is not callable")
    if inspect.iscoroutinefunction(function):
        raise _Excluded("coroutine functions are not invokable")

    try:
        hints = get_type_hints(function, include_extras=True)
        signature = inspect.signature(function)
    except (NameError, TypeError, ValueError) as e:
        raise _Excluded(f"cannot inspect signature: {e}") from e

    parameters: list[ParameterSpec] = []
    for param in signature.parameters.values():
        if param.kind not in _POSITIONAL_KINDS:
            raise _Excluded(f"parameter '{param.name}' is {param.kind.description}")
        if param.name not in hints:
            raise _Excluded(f"parameter '{param.name}' has no type annotation")
        declared_type = resolve_parameter_type(hints[param.name])
        if declared_type is None:
            raise _Excluded(
                f"parameter '{param.name}' has unsupported type {hints[param.name]!r}"
            )
        has_default = param.default is not inspect.Parameter.empty
        parameters.append(
            ParameterSpec(
                name=param.name,
                declared_type=declared_type,
                required=not has_default,
                default=param.default if has_default else NO_DEFAULT,
            )
        )

    return FunctionDescriptor(
        name=name,
        target=target,
        function=function,
        parameters=tuple(parameters),
        doc=inspect.getdoc(function) or "",
    )


def discover(target: Any) -> DiscoveryResult:
    """Scan one target for invokable functions.

    Never raises: every problem becomes a DiscoveryWarning that excludes
    the offending function (or the whole target if it cannot be scanned).
    """
    result = DiscoveryResult()
    target_name = target_name_of(target)

    try:
        members = marked_members(target)
    except Exception as e:  # noqa: BLE001
        result.warnings.append(
            DiscoveryWarning(target_name, "*", f"target cannot be scanned: {e}")
        )
        return result

    seen: set[str] = set()
    for attr, name in members:
        if name in seen:
            result.warnings.append(
                DiscoveryWarning(target_name, name, "duplicate function name")
            )
            continue
        try:
            descriptor = build_descriptor(target, attr, name)
        except _Excluded as e:
            result.warnings.append(DiscoveryWarning(target_name, name, str(e)))
            continue
        except Exception as e:  # noqa: BLE001
            result.warnings.append(
                DiscoveryWarning(target_name, name, f"discovery failed: {e}")
            )
            continue
        seen.add(name)
        result.descriptors.append(descriptor)

    return result
