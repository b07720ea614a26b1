"""Helpers for safe debug logging.

Actions and state trees often carry credentials or large blobs.  This
module redacts sensitive fields before they are written to a log.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

DEFAULT_SENSITIVE_KEYS: frozenset[str] = frozenset(
    {
        "password",
        "passwd",
        "secret",
        "token",
        "accesstoken",
        "refreshtoken",
        "apikey",
        "authorization",
        "cookie",
        "session",
    }
)


def redact_for_log(
    value: Any,
    *,
    max_string: int = 512,
    sensitive_keys: frozenset[str] = DEFAULT_SENSITIVE_KEYS,
    _depth: int = 0,
) -> Any:
    """Return a redacted copy of *value* suitable for debug logs."""
    if _depth > 20:
        return "<max-depth>"

    if value is None:
        return None

    if isinstance(value, str):
        if len(value) > max_string:
            return f"{value[:max_string]}…<truncated>"
        return value

    if isinstance(value, (int, float, bool)):
        return value

    if isinstance(value, (bytes, bytearray)):
        return f"<bytes:{len(value)}b>"

    if isinstance(value, Mapping):
        redacted: dict[str, Any] = {}
        for k, v in value.items():
            key = str(k)
            if key.lower().replace("_", "") in sensitive_keys:
                redacted[key] = "<redacted>"
            else:
                redacted[key] = redact_for_log(
                    v, max_string=max_string, sensitive_keys=sensitive_keys, _depth=_depth + 1
                )
        return redacted

    if isinstance(value, Sequence):
        return [
            redact_for_log(v, max_string=max_string, sensitive_keys=sensitive_keys, _depth=_depth + 1)
            for v in value
        ]

    # Fallback: represent unknown objects without dumping internals.
    return repr(value)
