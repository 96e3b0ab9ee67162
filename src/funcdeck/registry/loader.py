"""Resolve configured import paths to target objects."""

from __future__ import annotations

from collections.abc import Iterable
import importlib
import inspect
from typing import Any

from funcdeck.errors import TargetLoadError


def load_target(path: str) -> Any:
    """Resolve one import path to a target.

    ``pkg.module`` yields the module itself. ``pkg.module:attr`` yields the
    attribute; classes and other callables are called with no arguments to
    produce the instance, anything else is used as-is.

    Raises:
        TargetLoadError: If the module or attribute cannot be resolved or the
            factory fails.
    """
    module_name, _, attr = path.partition(":")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise TargetLoadError(f"Cannot import target module '{module_name}': {e}") from e

    if not attr:
        return module

    try:
        obj = getattr(module, attr)
    except AttributeError as e:
        raise TargetLoadError(f"Module '{module_name}' has no attribute '{attr}'") from e

    if inspect.isclass(obj) or inspect.isfunction(obj):
        try:
            return obj()
        except Exception as e:
            raise TargetLoadError(f"Target factory '{path}' failed: {e}") from e
    return obj


def load_targets(paths: Iterable[str]) -> list[Any]:
    """Resolve import paths in order."""
    return [load_target(path) for path in paths]
