from __future__ import annotations

from typing import Any

import pytest

from pyredux import (
    MiddlewareAPI,
    PrematureDispatchError,
    apply_middleware,
    compose,
    create_store,
)


def counter(state: int | None, action: dict[str, Any]) -> int:
    if state is None:
        state = 0
    if action["type"] == "INC":
        return state + action.get("by", 1)
    return state


def _tracing(name: str, calls: list[str]) -> Any:
    def middleware(api: MiddlewareAPI) -> Any:
        def wrap(next_dispatch: Any) -> Any:
            def dispatch(action: Any) -> Any:
                calls.append(name)
                return next_dispatch(action)

            return dispatch

        return wrap

    return middleware


def test_middleware_runs_in_order_before_raw_dispatch() -> None:
    calls: list[str] = []

    def reducer(state: Any, action: dict[str, Any]) -> Any:
        if action["type"] == "PING":
            calls.append("raw")
        return state

    store = create_store(reducer, apply_middleware(_tracing("A", calls), _tracing("B", calls)))
    store.dispatch({"type": "PING"})

    assert calls == ["A", "B", "raw"]


def test_enhanced_store_keeps_the_rest_of_the_api() -> None:
    store = create_store(counter, 3, apply_middleware())
    notified: list[int] = []
    store.subscribe(lambda: notified.append(store.get_state()))

    store.dispatch({"type": "INC"})

    assert store.get_state() == 4
    assert notified == [4]


def test_middleware_can_rewrite_actions() -> None:
    def double_increments(api: MiddlewareAPI) -> Any:
        def wrap(next_dispatch: Any) -> Any:
            def dispatch(action: Any) -> Any:
                if action.get("type") == "INC":
                    action = {**action, "by": action.get("by", 1) * 2}
                return next_dispatch(action)

            return dispatch

        return wrap

    store = create_store(counter, apply_middleware(double_increments))
    store.dispatch({"type": "INC"})
    assert store.get_state() == 2


def test_api_dispatch_goes_through_the_whole_chain() -> None:
    calls: list[str] = []

    def expand_batch(api: MiddlewareAPI) -> Any:
        def wrap(next_dispatch: Any) -> Any:
            def dispatch(action: Any) -> Any:
                if action.get("type") == "BATCH":
                    for item in action["items"]:
                        api.dispatch(item)
                    return action
                return next_dispatch(action)

            return dispatch

        return wrap

    store = create_store(counter, apply_middleware(_tracing("trace", calls), expand_batch))
    store.dispatch({"type": "BATCH", "items": [{"type": "INC"}, {"type": "INC", "by": 5}]})

    assert store.get_state() == 6
    assert calls == ["trace", "trace", "trace"]


def test_api_get_state_reads_the_store() -> None:
    observed: list[int] = []

    def spy(api: MiddlewareAPI) -> Any:
        def wrap(next_dispatch: Any) -> Any:
            def dispatch(action: Any) -> Any:
                result = next_dispatch(action)
                observed.append(api.get_state())
                return result

            return dispatch

        return wrap

    store = create_store(counter, apply_middleware(spy))
    store.dispatch({"type": "INC"})
    assert observed == [1]


def test_dispatch_during_middleware_construction_is_rejected() -> None:
    def eager(api: MiddlewareAPI) -> Any:
        api.dispatch({"type": "INC"})
        return lambda next_dispatch: next_dispatch

    with pytest.raises(PrematureDispatchError):
        create_store(counter, apply_middleware(eager))


def test_dispatch_returns_middleware_result() -> None:
    def swallow(api: MiddlewareAPI) -> Any:
        return lambda next_dispatch: lambda action: "swallowed"

    store = create_store(counter, apply_middleware(swallow))
    assert store.dispatch({"type": "INC"}) == "swallowed"
    assert store.get_state() == 0


def test_raw_dispatch_result_is_passed_back_through_chain() -> None:
    calls: list[str] = []
    store = create_store(counter, apply_middleware(_tracing("A", calls)))
    action = {"type": "INC"}
    assert store.dispatch(action) is action


def test_enhancers_compose() -> None:
    calls: list[str] = []

    def labelled(label: str) -> Any:
        def enhancer(create: Any) -> Any:
            def create_enhanced(*args: Any) -> Any:
                calls.append(label)
                return create(*args)

            return create_enhanced

        return enhancer

    store = create_store(
        counter,
        compose(apply_middleware(_tracing("mw", calls)), labelled("outer"), labelled("inner")),
    )
    store.dispatch({"type": "INC"})

    assert calls == ["outer", "inner", "mw"]
    assert store.get_state() == 1
