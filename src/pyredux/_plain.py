"""Plain-record predicate used to validate dispatched actions."""

from __future__ import annotations

from typing import Any


def is_plain_object(value: Any) -> bool:
    """Return ``True`` if *value* is a plain ``dict``.

    Subclasses of ``dict`` carry behaviour of their own and are rejected,
    as are ``None``, class instances, callables and primitives.
    """
    return type(value) is dict
