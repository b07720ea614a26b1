"""Thunk middleware: dispatch callables that receive ``dispatch`` and ``get_state``."""

from __future__ import annotations

from typing import Any

from pyredux.middleware import Interceptor, Middleware, MiddlewareAPI
from pyredux.store import Dispatch


def create_thunk_middleware(extra_argument: Any = None) -> Middleware:
    """Create middleware that runs callable actions instead of forwarding them.

    A thunk is called as ``thunk(dispatch, get_state, extra_argument)`` and
    its return value is returned from ``dispatch``.  ``dispatch`` here is the
    fully augmented one, so thunks may dispatch further thunks.
    """

    def middleware(api: MiddlewareAPI) -> Interceptor:
        def wrap(next_dispatch: Dispatch) -> Dispatch:
            def dispatch(action: Any) -> Any:
                if callable(action):
                    return action(api.dispatch, api.get_state, extra_argument)
                return next_dispatch(action)

            return dispatch

        return wrap

    return middleware


thunk = create_thunk_middleware()
