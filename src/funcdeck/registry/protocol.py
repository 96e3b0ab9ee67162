"""Metadata records describing invokable functions and their parameters."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import enum
from typing import Any, Protocol, runtime_checkable


class ParameterType(enum.Enum):
    """Semantic type of a parameter, driving coercion and prompting."""

    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    BOOLEAN = "boolean"
    STRING = "string"

    @property
    def is_integral(self) -> bool:
        return self in (ParameterType.INT, ParameterType.LONG)

    @property
    def is_decimal(self) -> bool:
        return self in (ParameterType.FLOAT, ParameterType.DOUBLE)


# Plain annotations map to the narrow types. LONG and DOUBLE are declared
# with Annotated[int, ParameterType.LONG] / Annotated[float, ParameterType.DOUBLE].
ANNOTATION_TYPES: dict[type, ParameterType] = {
    int: ParameterType.INT,
    float: ParameterType.FLOAT,
    bool: ParameterType.BOOLEAN,
    str: ParameterType.STRING,
}


class _NoDefault:
    """Sentinel for parameters without a default value."""

    _instance: _NoDefault | None = None

    def __new__(cls) -> _NoDefault:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_DEFAULT"


NO_DEFAULT: Any = _NoDefault()


@dataclass(frozen=True, slots=True)
class ParameterSpec:
    """Metadata for one formal parameter of an invokable function."""

    name: str
    declared_type: ParameterType
    required: bool = True
    default: Any = NO_DEFAULT

    @property
    def hint(self) -> str:
        """Prompt hint, e.g. ``level (int, default 0)``."""
        if self.required:
            return f"{self.name} ({self.declared_type.value})"
        return f"{self.name} ({self.declared_type.value}, default {self.default!r})"


@dataclass(frozen=True, slots=True)
class FunctionDescriptor:
    """Metadata for a single invokable function.

    ``function`` is already bound to ``target`` (or is a module-level
    function when the target is a module), so it is called with the
    coerced parameter values only.
    """

    name: str
    target: Any
    function: Callable[..., Any]
    parameters: tuple[ParameterSpec, ...] = ()
    doc: str = ""

    @property
    def arity(self) -> int:
        return len(self.parameters)

    @property
    def signature(self) -> str:
        """Render ``name(param: type, ...)`` for listings."""
        params = ", ".join(
            f"{p.name}: {p.declared_type.value}"
            + ("" if p.required else f" = {p.default!r}")
            for p in self.parameters
        )
        return f"{self.name}({params})"


@dataclass(frozen=True, slots=True)
class DiscoveryWarning:
    """A function excluded from the catalog during discovery."""

    target_name: str
    function_name: str
    reason: str

    def __str__(self) -> str:
        return f"{self.target_name}.{self.function_name}: {self.reason}"


@runtime_checkable
class Target(Protocol):
    """Marker contract for objects handing invokable functions to a catalog.

    Only ``@invokable`` members are exposed. Objects that do not implement
    the protocol (plain instances, modules) are accepted too and named after
    their module or class.

    Example:
        class Flashlight:
            target_name = "flashlight"

            @invokable(name="setTorch")
            def set_torch(self, enable: bool) -> None:
                ...
    """

    @property
    def target_name(self) -> str:
        """Human-readable name of the target."""
        ...


def target_name_of(target: Any) -> str:
    """Return a display name for any target object."""
    name = getattr(target, "target_name", None)
    if isinstance(name, str) and name:
        return name
    module_name = getattr(target, "__name__", None)
    if isinstance(module_name, str):
        return module_name
    return type(target).__name__
