"""Logger middleware recording every dispatched action."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any

from pyredux._redact import redact_for_log
from pyredux.config import LoggerConfig
from pyredux.exceptions import IllegalStateAccessError
from pyredux.middleware import Interceptor, Middleware, MiddlewareAPI
from pyredux.models import ActionLogEntry
from pyredux.store import Dispatch

_logger = logging.getLogger(__name__)


def _action_type(action: Any) -> str | None:
    if isinstance(action, dict) and "type" in action:
        return str(action["type"])
    if callable(action):
        return f"<callable {getattr(action, '__name__', type(action).__name__)}>"
    return None


def create_logger(
    config: LoggerConfig | None = None,
    *,
    sink: Callable[[ActionLogEntry], None] | None = None,
    logger: logging.Logger | None = None,
) -> Middleware:
    """Create middleware that records each dispatch as an :class:`ActionLogEntry`.

    Entries go to *sink* when given, otherwise to *logger* (default: this
    module's logger) at ``config.level``.  Exceptions raised further down
    the chain are recorded and re-raised unchanged.
    """
    config = config or LoggerConfig()
    log = logger or _logger

    def _redact(value: Any) -> Any:
        return redact_for_log(value, max_string=config.max_string, sensitive_keys=config.sensitive_keys)

    def _emit(entry: ActionLogEntry) -> None:
        if sink is not None:
            sink(entry)
        elif log.isEnabledFor(config.level):
            log.log(config.level, "%s", entry.summary())

    def middleware(api: MiddlewareAPI) -> Interceptor:
        def wrap(next_dispatch: Dispatch) -> Dispatch:
            def dispatch(action: Any) -> Any:
                fields: dict[str, Any] = {
                    "action_type": _action_type(action),
                    "action": _redact(action),
                }
                if config.include_state:
                    try:
                        fields["prev_state"] = _redact(api.get_state())
                    except IllegalStateAccessError:
                        # Called from inside a reducer: let the store reject the
                        # dispatch itself so the error names the real violation.
                        pass

                started = time.perf_counter()
                try:
                    result = next_dispatch(action)
                except Exception as exc:
                    fields["duration_ms"] = (time.perf_counter() - started) * 1000.0
                    fields["error"] = f"{type(exc).__name__}: {exc}"
                    _emit(ActionLogEntry(**fields))
                    raise

                fields["duration_ms"] = (time.perf_counter() - started) * 1000.0
                if config.include_state:
                    fields["next_state"] = _redact(api.get_state())
                _emit(ActionLogEntry(**fields))
                return result

            return dispatch

        return wrap

    return middleware
