"""Outcome types returned by the invocation engine."""

from __future__ import annotations

from dataclasses import dataclass
import enum
from typing import Any


class FailureKind(enum.Enum):
    """Why an invocation did not succeed."""

    ARITY_MISMATCH = "arity_mismatch"
    TYPE_COERCION = "type_coercion"
    MISSING_REQUIRED_PARAMETER = "missing_required_parameter"
    EXECUTION_ERROR = "execution_error"


@dataclass(frozen=True, slots=True)
class Success:
    """The function ran and returned ``value``, rendered as ``text``."""

    function_name: str
    value: Any
    text: str

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Failure:
    """The invocation was rejected or the function raised.

    ``cause`` holds the original exception for diagnostics; it is not meant
    for display.
    """

    function_name: str
    kind: FailureKind
    message: str
    cause: BaseException | None = None

    @property
    def ok(self) -> bool:
        return False

    @property
    def summary(self) -> str:
        """Short end-user diagnostic, never a stack trace."""
        return f"{self.function_name} failed [{self.kind.value}]: {self.message}"


@dataclass(frozen=True, slots=True)
class Cancelled:
    """The user aborted parameter entry; the function was never invoked."""

    function_name: str


InvocationOutcome = Success | Failure
