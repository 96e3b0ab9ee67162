"""Exception hierarchy for catalog, loading, and invocation errors."""

from __future__ import annotations


class FuncdeckError(Exception):
    """Base error for funcdeck."""


class ConfigError(FuncdeckError):
    """Missing or invalid configuration."""


class TargetLoadError(FuncdeckError):
    """A configured target import path could not be resolved."""


class DescriptorIndexError(FuncdeckError, IndexError):
    """Raised when a descriptor index is outside the catalog range."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Function index {index} out of range (catalog has {size})")


# ---------------------------------------------------------------------------
# Invocation errors
#
# Raised during argument coercion and converted to Failure outcomes by the
# engine. They never escape InvocationEngine.invoke().
# ---------------------------------------------------------------------------


class InvocationError(FuncdeckError):
    """Base error for a single invocation."""


class ArityMismatchError(InvocationError):
    """Wrong number of raw arguments for a descriptor."""

    def __init__(self, expected: int, received: int) -> None:
        self.expected = expected
        self.received = received
        super().__init__(f"expected {expected} argument(s), got {received}")


class TypeCoercionError(InvocationError):
    """A raw text value could not be converted to its declared type."""

    def __init__(self, parameter: str, type_name: str, raw: object) -> None:
        self.parameter = parameter
        self.type_name = type_name
        self.raw = raw
        super().__init__(f"{parameter}: expected {type_name}, got {raw!r}")


class MissingRequiredParameterError(InvocationError):
    """A required parameter was given no value."""

    def __init__(self, parameter: str) -> None:
        self.parameter = parameter
        super().__init__(f"{parameter}: a value is required")
