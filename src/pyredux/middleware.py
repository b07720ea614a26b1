"""Middleware support: wrap ``dispatch`` in an ordered chain of interceptors.

A middleware is ``middleware(api) -> (next_dispatch -> dispatch)``.  The
first middleware passed to :func:`apply_middleware` sees every action first
and hands it on by calling ``next_dispatch``; the last one forwards to the
store's own ``dispatch``.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable
from typing import Any

from pyredux.compose import compose
from pyredux.exceptions import PrematureDispatchError
from pyredux.store import Dispatch, Enhancer, Reducer, Store, StoreCreator

_logger = logging.getLogger(__name__)

Interceptor = Callable[[Dispatch], Dispatch]


@dataclasses.dataclass(frozen=True)
class MiddlewareAPI:
    """Restricted store view handed to each middleware factory."""

    get_state: Callable[[], Any]
    dispatch: Dispatch


Middleware = Callable[[MiddlewareAPI], Interceptor]


def _dispatch_while_constructing(*_args: Any, **_kwargs: Any) -> Any:
    raise PrematureDispatchError(
        "Dispatching while constructing your middleware is not allowed. "
        "Other middleware would not be applied to this dispatch."
    )


class _DispatchCell:
    """One-slot indirection for the augmented dispatch.

    Middleware factories receive :meth:`forward` before the final chain
    exists.  Once the chain is built ``target`` is re-pointed at it, so any
    middleware holding ``forward`` reaches the whole chain.
    """

    def __init__(self) -> None:
        self.target: Dispatch = _dispatch_while_constructing

    def forward(self, action: Any, *args: Any, **kwargs: Any) -> Any:
        return self.target(action, *args, **kwargs)


def apply_middleware(*middlewares: Middleware) -> Enhancer:
    """Create a store enhancer that applies *middlewares* to ``dispatch``.

    Each middleware receives a :class:`MiddlewareAPI` exposing
    ``get_state`` and ``dispatch``.  Calling ``api.dispatch`` goes through
    the full chain again, which is how middleware re-dispatches derived
    actions.
    """

    def enhancer(create_store: StoreCreator) -> StoreCreator:
        def create_enhanced_store(reducer: Reducer, *args: Any) -> Store:
            store = create_store(reducer, *args)
            cell = _DispatchCell()

            api = MiddlewareAPI(get_state=store.get_state, dispatch=cell.forward)
            chain = [middleware(api) for middleware in middlewares]
            cell.target = compose(*chain)(store.dispatch)

            _logger.debug("Applied %d middleware to store dispatch", len(chain))
            return dataclasses.replace(store, dispatch=cell.target)

        return create_enhanced_store

    return enhancer
