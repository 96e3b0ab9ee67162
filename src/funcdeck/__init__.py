"""Explicitly-marked function catalog with typed, failure-isolated invocation."""

from funcdeck.registry.marker import invokable

__all__ = ["invokable"]
