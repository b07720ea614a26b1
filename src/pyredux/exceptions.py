"""Custom exception hierarchy for pyredux."""

from __future__ import annotations

from typing import Any


class ReduxError(Exception):
    """Base exception for all pyredux errors."""


class InvalidArgumentError(ReduxError, TypeError):
    """A function was required but something else was supplied."""


class InvalidActionError(ReduxError, TypeError):
    """Dispatched action is not a plain dict or has no ``type`` key."""

    def __init__(self, message: str, *, action: Any = None) -> None:
        self.action = action
        super().__init__(message)


class IllegalStateAccessError(ReduxError, RuntimeError):
    """Store was used while the reducer is executing.

    Covers ``get_state()``, ``subscribe()``, ``unsubscribe()`` and nested
    ``dispatch()`` calls made from inside a reducer.
    """

    def __init__(self, message: str, *, operation: str = "") -> None:
        self.operation = operation
        super().__init__(message)


class PrematureDispatchError(ReduxError, RuntimeError):
    """Dispatch called while the middleware chain is still being built.

    Middleware factories receive the store API eagerly; they may keep a
    reference to ``dispatch`` but must not call it before returning.
    """
