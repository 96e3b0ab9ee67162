"""Runtime configuration loaded from the environment."""

from __future__ import annotations

from dataclasses import dataclass
import os

from funcdeck.errors import ConfigError

DEFAULT_TARGETS = (
    "funcdeck.targets.device_policy:create_target",
    "funcdeck.targets.system_info",
)

_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True, slots=True)
class FuncdeckConfig:
    """Runtime configuration loaded at process startup."""

    targets: tuple[str, ...] = DEFAULT_TARGETS
    log_level: str = "WARNING"
    serialize_invocations: bool = True
    result_indent: int = 2


def _parse_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name, "").strip().lower()
    if not value:
        return default
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    raise ConfigError(f"{name} must be a boolean (true/false), got {value!r}")


def load_config_from_env() -> FuncdeckConfig:
    """Load config from env and validate it."""
    targets_value = os.environ.get("FUNCDECK_TARGETS", "").strip()
    if targets_value:
        targets = tuple(t.strip() for t in targets_value.split(",") if t.strip())
    else:
        targets = DEFAULT_TARGETS

    log_level = os.environ.get("FUNCDECK_LOG_LEVEL", "WARNING").strip().upper()
    if log_level not in _LOG_LEVELS:
        raise ConfigError(
            "FUNCDECK_LOG_LEVEL must be one of: " + ", ".join(sorted(_LOG_LEVELS))
        )

    indent_value = os.environ.get("FUNCDECK_RESULT_INDENT", "2").strip()
    if not indent_value.isdigit():
        raise ConfigError("FUNCDECK_RESULT_INDENT must be a non-negative integer")

    return FuncdeckConfig(
        targets=targets,
        log_level=log_level,
        serialize_invocations=_parse_bool("FUNCDECK_SERIALIZE_INVOCATIONS", True),
        result_indent=int(indent_value),
    )
