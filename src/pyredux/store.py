"""Synchronous store engine.

This is the only component allowed to replace the state tree.  The state
changes exclusively through ``dispatch()``, which runs the reducer and then
notifies every subscribed listener.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable
from typing import Any

from pyredux._constants import ActionTypes
from pyredux._plain import is_plain_object
from pyredux.exceptions import IllegalStateAccessError, InvalidActionError, InvalidArgumentError
from pyredux.observable import StateObservable

_logger = logging.getLogger(__name__)

Reducer = Callable[[Any, Any], Any]
Listener = Callable[[], None]
Unsubscribe = Callable[[], None]
Dispatch = Callable[[Any], Any]

# Distinguishes "no preloaded state" from an explicit ``None``.
_ABSENT: Any = object()


@dataclasses.dataclass(frozen=True)
class Store:
    """Public surface of a store.

    Enhancers return a modified copy (``dataclasses.replace``) so every
    field is a plain callable bound to the underlying engine.
    """

    dispatch: Dispatch
    get_state: Callable[[], Any]
    subscribe: Callable[[Listener], Unsubscribe]
    replace_reducer: Callable[[Reducer], None]
    observable: Callable[[], StateObservable]


StoreCreator = Callable[..., Store]
Enhancer = Callable[[StoreCreator], StoreCreator]


class _StoreEngine:
    """Owns the state tree, the reducer and the listener lists."""

    def __init__(self, reducer: Reducer, preloaded_state: Any) -> None:
        self._reducer = reducer
        self._state = preloaded_state
        self._current_listeners: list[Listener] = []
        self._next_listeners = self._current_listeners
        self._is_dispatching = False

    def _ensure_can_mutate_next_listeners(self) -> None:
        """Copy the pending listener list on the first write since the last commit.

        A round iterates the committed list; subscribe/unsubscribe calls made
        from listeners must not affect it.
        """
        if self._next_listeners is self._current_listeners:
            self._next_listeners = self._current_listeners.copy()

    def get_state(self) -> Any:
        """Return the current state tree."""
        if self._is_dispatching:
            raise IllegalStateAccessError(
                "You may not call get_state() while the reducer is executing. "
                "The reducer has already received the state as an argument.",
                operation="get_state",
            )
        return self._state

    def subscribe(self, listener: Listener) -> Unsubscribe:
        """Add a change listener, called after every dispatch.

        Listeners registered or removed while a round is notifying only
        take part from the next round on.  A listener should not expect to
        see every intermediate state: nested dispatches may update the
        state several times before it is called.
        """
        if not callable(listener):
            raise InvalidArgumentError("Expected the listener to be callable.")

        if self._is_dispatching:
            raise IllegalStateAccessError(
                "You may not call subscribe() while the reducer is executing. "
                "Subscribe from outside and call get_state() in the listener instead.",
                operation="subscribe",
            )

        is_subscribed = True

        self._ensure_can_mutate_next_listeners()
        self._next_listeners.append(listener)

        def unsubscribe() -> None:
            nonlocal is_subscribed
            if not is_subscribed:
                return

            if self._is_dispatching:
                raise IllegalStateAccessError(
                    "You may not unsubscribe from a store listener while the reducer is executing.",
                    operation="unsubscribe",
                )

            is_subscribed = False

            self._ensure_can_mutate_next_listeners()
            for index, registered in enumerate(self._next_listeners):
                if registered is listener:
                    del self._next_listeners[index]
                    break

        return unsubscribe

    def dispatch(self, action: Any) -> Any:
        """Run the reducer for *action* and notify listeners.

        Only plain dict actions with a ``type`` key are accepted; anything
        else has to be handled by middleware first.  Returns *action*.
        """
        if not is_plain_object(action):
            raise InvalidActionError(
                "Actions must be plain dicts. Use custom middleware for other action kinds.",
                action=action,
            )

        if "type" not in action:
            raise InvalidActionError(
                'Actions must have a "type" key. Have you misspelled a constant?',
                action=action,
            )

        if self._is_dispatching:
            raise IllegalStateAccessError("Reducers may not dispatch actions.", operation="dispatch")

        try:
            self._is_dispatching = True
            self._state = self._reducer(self._state, action)
        except Exception:
            _logger.debug("Reducer raised for action type %r", action["type"])
            raise
        finally:
            self._is_dispatching = False

        listeners = self._current_listeners = self._next_listeners
        for listener in listeners:
            listener()

        return action

    def replace_reducer(self, next_reducer: Reducer) -> None:
        """Swap the reducer and re-run a bootstrap round.

        Parts of the new reducer that also existed in the old one receive
        their previous state; new parts initialise themselves.
        """
        if not callable(next_reducer):
            raise InvalidArgumentError("Expected the next reducer to be callable.")

        self._reducer = next_reducer
        _logger.debug("Reducer replaced, dispatching %s", ActionTypes.REPLACE)
        self.dispatch({"type": ActionTypes.REPLACE})

    def observable(self) -> StateObservable:
        return StateObservable(self.subscribe, self.get_state)


def create_store(
    reducer: Reducer,
    preloaded_state: Any = _ABSENT,
    enhancer: Enhancer | None = None,
    *extra: Any,
) -> Store:
    """Create a store holding the state tree.

    Parameters
    ----------
    reducer : callable
        ``reducer(state, action) -> state``.  Receives ``None`` as state on
        the first call when no *preloaded_state* is given.
    preloaded_state : Any, optional
        Initial state.  A callable passed here with no *enhancer* is taken
        as the enhancer.
    enhancer : callable, optional
        Store enhancer such as :func:`pyredux.apply_middleware`.  Combine
        several enhancers with :func:`pyredux.compose` first.

    Returns
    -------
    Store
        The store, already bootstrapped with the ``INIT`` action.
    """
    if (callable(preloaded_state) and callable(enhancer)) or (
        callable(enhancer) and extra and callable(extra[0])
    ):
        raise InvalidArgumentError(
            "It looks like you are passing several store enhancers to create_store(). "
            "This is not supported. Compose them together into a single function instead."
        )

    if callable(preloaded_state) and enhancer is None:
        enhancer = preloaded_state
        preloaded_state = _ABSENT

    if enhancer is not None:
        if not callable(enhancer):
            raise InvalidArgumentError("Expected the enhancer to be callable.")
        return enhancer(create_store)(reducer, preloaded_state)

    if not callable(reducer):
        raise InvalidArgumentError("Expected the reducer to be callable.")

    engine = _StoreEngine(reducer, None if preloaded_state is _ABSENT else preloaded_state)
    store = Store(
        dispatch=engine.dispatch,
        get_state=engine.get_state,
        subscribe=engine.subscribe,
        replace_reducer=engine.replace_reducer,
        observable=engine.observable,
    )

    _logger.debug("Store created, dispatching %s", ActionTypes.INIT)
    engine.dispatch({"type": ActionTypes.INIT})
    return store
