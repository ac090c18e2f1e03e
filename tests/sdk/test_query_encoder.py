from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

import pytest
from pydantic import BaseModel, Field

from restler import EncodingError, QueryEncoder


class IntArrayObject(BaseModel):
    id: int
    int_array: list[int] = Field(alias="intArray")


@dataclass
class Filter:
    name: str
    active: bool
    limit: Optional[int] = None


class Color(Enum):
    RED = "red"


@pytest.fixture
def encoder() -> QueryEncoder:
    return QueryEncoder()


class TestQueryEncoder:
    def test_string_value(self, encoder: QueryEncoder):
        assert encoder.encode({"value": "name"}) == [("value", "name")]

    def test_int_value(self, encoder: QueryEncoder):
        assert encoder.encode({"value": 123}) == [("value", "123")]

    def test_bool_value(self, encoder: QueryEncoder):
        assert encoder.encode({"value": True}) == [("value", "true")]
        assert encoder.encode({"value": False}) == [("value", "false")]

    def test_int_array_uses_plural_key_in_order(self, encoder: QueryEncoder):
        result = encoder.encode(IntArrayObject(id=1, intArray=[1, 5, 2]))

        assert result == [
            ("id", "1"),
            ("intArray[]", "1"),
            ("intArray[]", "5"),
            ("intArray[]", "2"),
        ]

    def test_dataclass_fields_in_declaration_order_skipping_none(self, encoder: QueryEncoder):
        assert encoder.encode(Filter(name="x", active=True)) == [
            ("name", "x"),
            ("active", "true"),
        ]

    def test_other_scalars(self, encoder: QueryEncoder):
        result = encoder.encode(
            {"price": 1.5, "day": date(2024, 1, 31), "color": Color.RED}
        )

        assert result == [("price", "1.5"), ("day", "2024-01-31"), ("color", "red")]

    def test_nested_object_is_sent_as_json(self, encoder: QueryEncoder):
        assert encoder.encode({"filter": {"a": 1}}) == [("filter", '{"a":1}')]

    def test_unsupported_object_raises(self, encoder: QueryEncoder):
        with pytest.raises(EncodingError):
            encoder.encode(42)

    def test_non_finite_float_raises(self, encoder: QueryEncoder):
        with pytest.raises(EncodingError):
            encoder.encode({"value": float("nan")})
