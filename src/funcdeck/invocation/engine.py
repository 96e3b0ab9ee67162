"""Invoke catalog functions with raw text arguments.

The engine coerces arguments to their declared types, calls the function,
and converts every failure into a Failure outcome. ``invoke()`` never
raises, so one misbehaving function cannot take down its caller.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
import threading
import time
from typing import Any

from funcdeck.errors import (
    ArityMismatchError,
    InvocationError,
    MissingRequiredParameterError,
    TypeCoercionError,
)
from funcdeck.invocation.coercion import coerce_arguments
from funcdeck.invocation.formatter import ResultFormatter
from funcdeck.invocation.logger import InvocationLogger
from funcdeck.invocation.outcome import Failure, FailureKind, InvocationOutcome, Success
from funcdeck.registry.protocol import FunctionDescriptor

_FAILURE_KINDS: dict[type[InvocationError], FailureKind] = {
    ArityMismatchError: FailureKind.ARITY_MISMATCH,
    TypeCoercionError: FailureKind.TYPE_COERCION,
    MissingRequiredParameterError: FailureKind.MISSING_REQUIRED_PARAMETER,
}


class InvocationEngine:
    """Single invocation path for every catalog function.

    Example:
        engine = InvocationEngine()
        outcome = engine.invoke(descriptor, ["true"])
        if outcome.ok:
            print(outcome.text)
        else:
            print(outcome.summary)
    """

    def __init__(
        self,
        formatter: ResultFormatter | None = None,
        *,
        serialize_invocations: bool = True,
        invocation_logger: InvocationLogger | None = None,
    ) -> None:
        self._formatter = formatter or ResultFormatter()
        self._serialize = serialize_invocations
        self._logger = invocation_logger or InvocationLogger()
        self._locks: dict[int, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def invoke(
        self,
        descriptor: FunctionDescriptor,
        raw_args: Sequence[str | None] | None = (),
    ) -> InvocationOutcome:
        """Coerce ``raw_args`` and call the descriptor's function.

        Args:
            descriptor: Function to call.
            raw_args: One raw text value per parameter, in order. None is
                treated as no arguments.

        Returns:
            Success with the return value and its text, or Failure.
        """
        name = descriptor.name
        self._logger.invocation_started(name, descriptor.arity)

        try:
            args = coerce_arguments(descriptor, raw_args)
        except InvocationError as e:
            kind = _FAILURE_KINDS[type(e)]
            self._logger.coercion_failed(name, kind.value, str(e))
            return Failure(function_name=name, kind=kind, message=str(e), cause=e)
        except Exception as e:  # noqa: BLE001
            kind = FailureKind.TYPE_COERCION
            message = _error_message(e)
            self._logger.coercion_failed(name, kind.value, message)
            return Failure(
                function_name=name,
                kind=kind,
                message=message,
                cause=e,
            )

        started = time.perf_counter()
        try:
            with self._target_lock(descriptor.target):
                value = descriptor.function(*args)
        except Exception as e:  # noqa: BLE001
            self._logger.execution_failed(name, e)
            return Failure(
                function_name=name,
                kind=FailureKind.EXECUTION_ERROR,
                message=_error_message(e),
                cause=e,
            )
        self._logger.invocation_succeeded(name, time.perf_counter() - started)

        return Success(function_name=name, value=value, text=self._render(name, value))

    def release(self) -> None:
        """Drop per-target locks; called when the owning catalog resets."""
        with self._locks_guard:
            self._locks.clear()

    def _render(self, name: str, value: Any) -> str:
        # The function already ran; rendering must not turn that into a raise.
        try:
            return self._formatter.format(value)
        except Exception as e:  # noqa: BLE001
            self._logger.formatting_fell_back(name, e)
        try:
            return repr(value)
        except Exception as e:  # noqa: BLE001
            self._logger.formatting_fell_back(name, e)
            return object.__repr__(value)

    @contextmanager
    def _target_lock(self, target: Any) -> Iterator[None]:
        if not self._serialize:
            yield
            return
        with self._locks_guard:
            lock = self._locks.setdefault(id(target), threading.Lock())
        with lock:
            yield


def _error_message(error: Exception) -> str:
    text = str(error)
    return f"{type(error).__name__}: {text}" if text else type(error).__name__
