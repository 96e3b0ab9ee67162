"""Module-level functions exposing host information."""

from __future__ import annotations

from datetime import UTC, datetime
import platform

from funcdeck.registry.marker import invokable

target_name = "system_info"

MAX_ECHO_REPEAT = 100


@invokable(name="getPlatformInfo")
def get_platform_info() -> dict[str, str]:
    return {
        "system": platform.system(),
        "release": platform.release(),
        "machine": platform.machine(),
        "python": platform.python_version(),
    }


@invokable
def echo(text: str, times: int = 1) -> str:
    """Repeat ``text`` on separate lines."""
    if not 1 <= times <= MAX_ECHO_REPEAT:
        raise ValueError(f"times must be between 1 and {MAX_ECHO_REPEAT}")
    return "\n".join([text] * times)


@invokable(name="currentTime")
def current_time() -> datetime:
    return datetime.now(UTC)
