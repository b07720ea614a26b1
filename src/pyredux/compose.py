"""Right-to-left function composition."""

from __future__ import annotations

from collections.abc import Callable
from functools import reduce
from typing import Any

from pyredux.exceptions import InvalidArgumentError


def _identity(arg: Any) -> Any:
    return arg


def compose(*funcs: Callable[..., Any]) -> Callable[..., Any]:
    """Compose single-argument functions from right to left.

    The rightmost function may take any arguments since it provides the
    signature of the resulting callable; every other function receives the
    return value of its right neighbour.  ``compose(f, g, h)`` is
    equivalent to ``lambda *args, **kwargs: f(g(h(*args, **kwargs)))``.

    With no functions the identity function is returned; with a single
    function that function is returned as-is.
    """
    for func in funcs:
        if not callable(func):
            raise InvalidArgumentError(f"Expected every composed value to be callable, got {func!r}.")

    if not funcs:
        return _identity

    if len(funcs) == 1:
        return funcs[0]

    def _pair(outer: Callable[..., Any], inner: Callable[..., Any]) -> Callable[..., Any]:
        def composed(*args: Any, **kwargs: Any) -> Any:
            return outer(inner(*args, **kwargs))

        return composed

    return reduce(_pair, funcs)
