"""Configuration for the bundled logger middleware."""

from __future__ import annotations

import dataclasses
import logging
import os
from typing import Any

from pyredux._redact import DEFAULT_SENSITIVE_KEYS


_TRUTHY = frozenset({"1", "true", "yes", "on", "enabled"})
_FALSY = frozenset({"0", "false", "no", "off", "disabled"})


def _env_bool(value: str | None, default: bool) -> bool:
    """Parse a ``PYREDUX_*`` flag; unset or unrecognised values give *default*."""
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    return default


def _env_level(value: str) -> int:
    value = value.strip()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: {value!r}")
    return level


@dataclasses.dataclass(frozen=True)
class LoggerConfig:
    """Logger middleware configuration.

    Parameters
    ----------
    level : int
        Level used when entries are written to the stdlib logger.
    include_state : bool
        Record the state before and after each action.  States are
        redacted the same way as action payloads.
    max_string : int
        Strings longer than this are truncated in log entries.
    sensitive_keys : frozenset[str]
        Lower-cased keys whose values are replaced with ``<redacted>``.
    """

    level: int = logging.DEBUG
    include_state: bool = False
    max_string: int = 512
    sensitive_keys: frozenset[str] = DEFAULT_SENSITIVE_KEYS

    @classmethod
    def from_env(cls, **overrides: Any) -> LoggerConfig:
        """Create configuration from ``PYREDUX_LOG_*`` environment variables.

        Reads ``PYREDUX_LOG_LEVEL``, ``PYREDUX_LOG_STATE``,
        ``PYREDUX_LOG_MAX_STRING`` and ``PYREDUX_LOG_REDACT_KEYS`` (comma
        separated, added to the default set).  Explicit keyword arguments
        override environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        level_env = env.get("PYREDUX_LOG_LEVEL")
        if level_env is not None and "level" not in overrides:
            config_kwargs["level"] = _env_level(level_env)

        if "include_state" not in overrides:
            config_kwargs["include_state"] = _env_bool(env.get("PYREDUX_LOG_STATE"), False)

        max_string_env = env.get("PYREDUX_LOG_MAX_STRING")
        if max_string_env is not None and "max_string" not in overrides:
            config_kwargs["max_string"] = int(max_string_env)

        keys_env = env.get("PYREDUX_LOG_REDACT_KEYS")
        if keys_env is not None and "sensitive_keys" not in overrides:
            extra = {key.strip().lower() for key in keys_env.split(",") if key.strip()}
            config_kwargs["sensitive_keys"] = DEFAULT_SENSITIVE_KEYS | extra

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
