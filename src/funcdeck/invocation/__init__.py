"""Argument coercion and failure-isolated invocation."""

from funcdeck.invocation.engine import InvocationEngine
from funcdeck.invocation.formatter import ResultFormatter
from funcdeck.invocation.outcome import (
    Cancelled,
    Failure,
    FailureKind,
    InvocationOutcome,
    Success,
)

__all__ = [
    "Cancelled",
    "Failure",
    "FailureKind",
    "InvocationEngine",
    "InvocationOutcome",
    "ResultFormatter",
    "Success",
]
