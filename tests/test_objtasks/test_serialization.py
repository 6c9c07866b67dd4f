"""Tests for the JSON helpers."""

from dataclasses import dataclass

import pytest

from objtasks import Rectangle, SerializationError, from_json, get_json


@dataclass
class Circle:
    radius: float


# ---------------------------------------------------------------------------
# get_json
# ---------------------------------------------------------------------------


class TestGetJson:
    def test_list(self):
        assert get_json([1, 2, 3]) == "[1,2,3]"

    def test_dict_keeps_key_order(self):
        assert get_json({"width": 10, "height": 20}) == '{"width":10,"height":20}'

    def test_dataclass(self):
        assert get_json(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_nested_dataclass(self):
        assert get_json({"shape": Circle(1)}) == '{"shape":{"radius":1}}'

    def test_unserializable(self):
        with pytest.raises(TypeError):
            get_json(object())


# ---------------------------------------------------------------------------
# from_json
# ---------------------------------------------------------------------------


class TestFromJson:
    def test_object_as_keywords(self):
        r = from_json(Rectangle, '{"height":20,"width":10}')
        assert r == Rectangle(width=10, height=20)
        assert r.area == 200

    def test_array_as_positional(self):
        assert from_json(Rectangle, "[10,20]") == Rectangle(10, 20)

    def test_scalar_as_single_argument(self):
        assert from_json(Circle, "10") == Circle(10)

    def test_get_json_output_is_readable(self):
        c = Circle(2.5)
        assert from_json(Circle, get_json(c)) == c

    def test_invalid_json(self):
        with pytest.raises(SerializationError) as exc_info:
            from_json(Circle, "{radius: 10")
        assert exc_info.value.cause is not None

    def test_payload_does_not_fit_type(self):
        with pytest.raises(SerializationError, match="Cannot build Circle"):
            from_json(Circle, '{"diameter":10}')
