"""Unit tests for docshelf.engine.codec — canonical encoding and JSONDecoder."""

import json
import uuid
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Optional

import pytest
from pydantic import BaseModel, ValidationError

from docshelf.engine.codec import JSONDecoder, encode, encode_text, to_jsonable


class Address(BaseModel):
    zip: str
    city: str


class Person(BaseModel):
    name: str
    address: Address
    nicknames: List[str] = []


@dataclass
class Point:
    y: int
    x: int


def _key_orders(text: str) -> List[List[str]]:
    """Collect the key order of every object in a JSON document."""
    orders: List[List[str]] = []

    def hook(pairs):
        orders.append([k for k, _ in pairs])
        return dict(pairs)

    json.loads(text, object_pairs_hook=hook)
    return orders


class TestEncodeFormatting:

    def test_keys_sorted_at_every_level(self):
        value = {
            "zeta": {"b": 1, "a": {"y": 0, "x": 0}},
            "alpha": [{"d": 1, "c": 2}],
            "Mid": None,
        }
        orders = _key_orders(encode_text(value))
        assert orders
        for keys in orders:
            assert keys == sorted(keys)

    def test_solidus_not_escaped(self):
        text = encode_text({"url": "https://example.com/a/b", "path": "/tmp/x"})
        assert "\\/" not in text
        assert "https://example.com/a/b" in text

    def test_pretty_printed(self):
        assert encode_text({"a": [1]}) == '{\n  "a" : [\n    1\n  ]\n}'

    def test_scalars(self):
        assert encode_text("x") == '"x"'
        assert encode_text(3) == "3"
        assert encode_text(None) == "null"

    def test_non_ascii_literal(self):
        assert encode({"name": "café"}) == '{\n  "name" : "café"\n}'.encode("utf-8")

    def test_deterministic(self):
        a = encode({"b": 1, "a": 2})
        b = encode(dict(reversed(list({"b": 1, "a": 2}.items()))))
        assert a == b

    def test_nan_rejected(self):
        with pytest.raises(ValueError):
            encode(float("nan"))

    def test_infinity_rejected(self):
        with pytest.raises(ValueError):
            encode({"x": float("inf")})


class TestToJsonable:

    def test_model(self):
        p = Person(name="Ada", address=Address(zip="1", city="London"))
        assert to_jsonable(p) == {
            "name": "Ada",
            "address": {"zip": "1", "city": "London"},
            "nicknames": [],
        }

    def test_model_keys_sorted_in_output(self):
        p = Person(name="Ada", address=Address(zip="1", city="London"))
        for keys in _key_orders(encode_text(p)):
            assert keys == sorted(keys)

    def test_dataclass(self):
        assert to_jsonable(Point(y=2, x=1)) == {"y": 2, "x": 1}

    def test_rich_types(self):
        uid = uuid.UUID("12345678-1234-5678-1234-567812345678")
        assert to_jsonable({"id": uid, "day": date(2026, 10, 17)}) == {
            "id": "12345678-1234-5678-1234-567812345678",
            "day": "2026-10-17",
        }

    def test_tuple_becomes_list(self):
        assert to_jsonable((1, 2)) == [1, 2]

    def test_keys_become_strings(self):
        uid = uuid.UUID("12345678-1234-5678-1234-567812345678")
        assert to_jsonable({True: "t"}) == {"true": "t"}
        assert to_jsonable({1: "a", None: "n", 1.5: "f", uid: "u"}) == {
            "1": "a",
            "null": "n",
            "1.5": "f",
            "12345678-1234-5678-1234-567812345678": "u",
        }

    def test_mixed_keys_sort(self):
        assert encode_text({1: "a", "b": 2, "0": 3}) == '{\n  "0" : 3,\n  "1" : "a",\n  "b" : 2\n}'


class TestJSONDecoder:

    def test_no_target_returns_parsed(self):
        assert JSONDecoder()(None, b'{"a": [1, 2]}') == {"a": [1, 2]}

    def test_any_target_returns_parsed(self):
        assert JSONDecoder().decode(Any, b"[1]") == [1]

    def test_model_target(self):
        data = b'{"name": "Ada", "address": {"zip": "1", "city": "London"}}'
        p = JSONDecoder()(Person, data)
        assert isinstance(p, Person)
        assert p.address.city == "London"

    def test_dataclass_target(self):
        assert JSONDecoder()(Point, b'{"x": 1, "y": 2}') == Point(x=1, y=2)

    def test_generic_target(self):
        assert JSONDecoder()(Dict[str, Optional[int]], b'{"a": 1, "b": null}') == {"a": 1, "b": None}

    def test_invalid_json(self):
        with pytest.raises(json.JSONDecodeError):
            JSONDecoder()(dict, b"{")

    def test_wrong_shape(self):
        with pytest.raises(ValidationError):
            JSONDecoder()(Person, b'{"name": "Ada"}')

    def test_round_trip(self):
        p = Person(name="Ada", address=Address(zip="1", city="London"), nicknames=["a/b"])
        assert JSONDecoder()(Person, encode(p)) == p
