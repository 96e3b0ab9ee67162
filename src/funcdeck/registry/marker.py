"""The ``@invokable`` marker that exposes a function to the catalog."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, overload

F = TypeVar("F", bound=Callable[..., Any])

# Attribute set on marked functions; holds the display name.
INVOKABLE_ATTR = "__funcdeck_invokable__"


@overload
def invokable(func: F) -> F: ...


@overload
def invokable(*, name: str | None = None) -> Callable[[F], F]: ...


def invokable(func: Any = None, *, name: str | None = None) -> Any:
    """Mark a function or method as invokable through the catalog.

    Usable bare (``@invokable``) or with a display name override
    (``@invokable(name="setHomeEnable")``). Unmarked members of a target
    are never discovered.

    Args:
        func: Function being decorated when used without arguments.
        name: Display name; defaults to the function's ``__name__``.

    Returns:
        The same function, marked.
    """

    def mark(fn: F) -> F:
        inner = fn.__func__ if isinstance(fn, (staticmethod, classmethod)) else fn
        setattr(inner, INVOKABLE_ATTR, name or inner.__name__)
        return fn

    if func is not None:
        return mark(func)
    return mark


def invokable_name(member: Any) -> str | None:
    """Return the display name if ``member`` is marked, else None."""
    inner = member.__func__ if isinstance(member, (staticmethod, classmethod)) else member
    name = getattr(inner, INVOKABLE_ATTR, None)
    return name if isinstance(name, str) else None
