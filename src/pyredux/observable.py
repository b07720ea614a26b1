"""Interop point for observable/reactive libraries.

The adapter only relies on the store's public ``subscribe`` and
``get_state`` operations, so it works for plain and enhanced stores alike.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pyredux.exceptions import InvalidArgumentError


class Subscription:
    """Handle returned by :meth:`StateObservable.subscribe`."""

    def __init__(self, unsubscribe: Callable[[], None]) -> None:
        self._unsubscribe = unsubscribe
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def unsubscribe(self) -> None:
        """Stop emitting values to the observer. Safe to call repeatedly."""
        if self._closed:
            return
        self._unsubscribe()
        self._closed = True


class StateObservable:
    """A minimal observable of state changes.

    Any object with a ``next`` method can be used as an observer; it is
    called with the current state right away and again after every
    dispatch.
    """

    def __init__(
        self,
        subscribe: Callable[[Callable[[], None]], Callable[[], None]],
        get_state: Callable[[], Any],
    ) -> None:
        self._subscribe = subscribe
        self._get_state = get_state

    def subscribe(self, observer: Any) -> Subscription:
        if observer is None:
            raise InvalidArgumentError("Expected the observer to be an object.")

        def observe_state() -> None:
            on_next = getattr(observer, "next", None)
            if callable(on_next):
                on_next(self._get_state())

        observe_state()
        return Subscription(self._subscribe(observe_state))

    def observable(self) -> StateObservable:
        """Return ``self`` so interop libraries can unwrap the source."""
        return self
