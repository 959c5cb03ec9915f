from dataclasses import dataclass
from typing import List

import pytest
from pydantic import BaseModel

from restspec import InvalidArgumentError, register_param_fields, unregister_param_fields
from restspec._utils import is_value_sequence, iter_fields


@dataclass
class Query:
    keyword: str
    tags: List[str]


class Filter(BaseModel):
    status: str
    limit: int = 10


class Plain:
    category = "class-level"

    def __init__(self) -> None:
        self.name = "plain"
        self.ids = (1, 2)


class Slotted:
    __slots__ = ("x", "y")

    def __init__(self) -> None:
        self.x = 1
        self.y = 2


class Point:
    def __init__(self, x: int, y: int) -> None:
        self._x = x
        self._y = y


class TestIterFields:
    def test_dataclass(self):
        assert list(iter_fields(Query("term", ["a", "b"]))) == [
            ("keyword", "term"),
            ("tags", ["a", "b"]),
        ]

    def test_pydantic_model(self):
        assert list(iter_fields(Filter(status="open"))) == [
            ("status", "open"),
            ("limit", 10),
        ]

    def test_instance_attributes_only(self):
        assert dict(iter_fields(Plain())) == {"name": "plain", "ids": (1, 2)}

    def test_slots(self):
        assert list(iter_fields(Slotted())) == [("x", 1), ("y", 2)]

    def test_registered_enumerator_wins(self):
        @register_param_fields(Point)
        def _point_fields(point):
            yield "x", point._x
            yield "y", point._y

        try:
            assert list(iter_fields(Point(3, 4))) == [("x", 3), ("y", 4)]
        finally:
            unregister_param_fields(Point)

    def test_unenumerable_object(self):
        with pytest.raises(InvalidArgumentError, match="register_param_fields"):
            list(iter_fields(42))


@pytest.mark.parametrize(
    "value, expected",
    [
        ([1, 2], True),
        ((1,), True),
        ({1}, True),
        ("text", False),
        (b"bytes", False),
        ({"a": 1}, False),
        (1, False),
    ],
)
def test_is_value_sequence(value, expected):
    assert is_value_sequence(value) is expected
