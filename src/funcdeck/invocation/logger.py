"""Logging for function invocation.

Keeps logging calls out of the engine's business logic.
"""

from __future__ import annotations

import loguru
from loguru import logger


class InvocationLogger:
    """Handles all logging for InvocationEngine."""

    def __init__(self, logger_instance: loguru.Logger = logger) -> None:
        self._logger = logger_instance

    def invocation_started(self, function_name: str, arity: int) -> None:
        """Log an invocation at debug level."""
        self._logger.bind(function=function_name, arity=arity).debug(
            "Invoking {} ({} parameter(s))", function_name, arity
        )

    def coercion_failed(self, function_name: str, kind: str, message: str) -> None:
        """Log rejected arguments."""
        self._logger.bind(function=function_name, kind=kind).warning(
            "Rejected arguments for {} [{}]: {}", function_name, kind, message
        )

    def invocation_succeeded(self, function_name: str, duration: float) -> None:
        """Log a successful call."""
        self._logger.bind(function=function_name, duration=duration).info(
            "{} completed in {:.3f}s", function_name, duration
        )

    def execution_failed(self, function_name: str, error: Exception) -> None:
        """Log an underlying function failure; traceback at debug level."""
        self._logger.bind(function=function_name).warning(
            "{} failed: {}: {}", function_name, type(error).__name__, error
        )
        self._logger.opt(exception=error).debug(
            "Traceback for {} failure", function_name
        )

    def formatting_fell_back(self, function_name: str, error: Exception) -> None:
        """Log a result that could not be serialized."""
        self._logger.bind(function=function_name).debug(
            "Result of {} not serializable ({}), using repr", function_name, error
        )
