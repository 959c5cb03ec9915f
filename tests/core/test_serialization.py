import pytest

from restspec import SerializationError
from restspec._utils import to_json_text
from tests.utils.models import Item, SampleBody


class Legacy:
    def __init__(self) -> None:
        self.code = "L1"
        self.values = [1, 2]


class TestToJsonText:
    def test_dataclass(self):
        body = SampleBody(id="testId", list=["a", "b", "c"])

        assert to_json_text(body) == '{"id":"testId","list":["a","b","c"]}'

    def test_pydantic_model_uses_aliases(self):
        item = Item(id=1, name="pen", display_name="Pen")

        assert to_json_text(item) == '{"id":1,"name":"pen","displayName":"Pen"}'

    def test_plain_object_is_written_as_its_fields(self):
        assert to_json_text(Legacy()) == '{"code":"L1","values":[1,2]}'

    def test_unserializable_body(self):
        with pytest.raises(SerializationError) as exc_info:
            to_json_text(object())

        assert exc_info.value.body_type is object
        assert exc_info.value.__cause__ is not None
