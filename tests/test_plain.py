from __future__ import annotations

from collections import OrderedDict
from types import SimpleNamespace

from pyredux import is_plain_object


class _Payload:
    def __init__(self) -> None:
        self.type = "X"


def test_plain_dicts_are_accepted() -> None:
    assert is_plain_object({})
    assert is_plain_object({"type": "INC", "nested": {"a": 1}})
    assert is_plain_object(dict(type="INC"))


def test_non_records_are_rejected() -> None:
    assert not is_plain_object(None)
    assert not is_plain_object(1)
    assert not is_plain_object("INC")
    assert not is_plain_object([("type", "INC")])
    assert not is_plain_object(lambda: None)
    assert not is_plain_object(_Payload())
    assert not is_plain_object(SimpleNamespace(type="INC"))


def test_dict_subclasses_are_rejected() -> None:
    assert not is_plain_object(OrderedDict(type="INC"))
