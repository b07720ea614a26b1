from __future__ import annotations

from pyredux._redact import redact_for_log


def test_redact_for_log_redacts_sensitive_keys() -> None:
    payload = {
        "type": "LOGIN",
        "password": "pw",
        "access_token": "abc",
        "profile": {"name": "ada", "apiKey": "k"},
        "items": [{"Authorization": "Bearer x"}],
    }

    redacted = redact_for_log(payload)
    assert redacted["type"] == "LOGIN"
    assert redacted["password"] == "<redacted>"
    assert redacted["access_token"] == "<redacted>"
    assert redacted["profile"] == {"name": "ada", "apiKey": "<redacted>"}
    assert redacted["items"] == [{"Authorization": "<redacted>"}]


def test_redact_for_log_truncates_long_strings() -> None:
    long_value = "x" * 600
    redacted = redact_for_log({"value": long_value}, max_string=10)
    assert redacted["value"].startswith("x" * 10)
    assert "<truncated>" in redacted["value"]


def test_redact_for_log_uses_custom_keys_and_reprs_unknown_objects() -> None:
    class Opaque:
        def __repr__(self) -> str:
            return "<Opaque>"

    redacted = redact_for_log(
        {"pin": "1234", "blob": b"\x00\x01", "obj": Opaque()},
        sensitive_keys=frozenset({"pin"}),
    )
    assert redacted == {"pin": "<redacted>", "blob": "<bytes:2b>", "obj": "<Opaque>"}
