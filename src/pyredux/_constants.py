"""Reserved action types used for the store's internal bootstrap rounds."""

from __future__ import annotations

import secrets


def _random_suffix() -> str:
    return ".".join(secrets.token_hex(3))


class ActionTypes:
    """Private action types.

    Never handle these in a reducer directly.  For an unknown action a
    reducer must return its current state; for ``None`` state it must
    return its initial state.  The random suffix keeps the values distinct
    from any consumer-defined action type.
    """

    INIT: str = f"@@pyredux/INIT{_random_suffix()}"
    REPLACE: str = f"@@pyredux/REPLACE{_random_suffix()}"
