import datetime

import pytest

from qs_dict.values import (
    MISSING,
    MapValue,
    SetValue,
    ValueKind,
    decode_value,
    encode_value,
    percent_decode,
    value_kind,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("b", "b"),
        ("1", 1),
        ("2.5", 2.5),
        ("true", True),
        ("null", None),
        ('"quoted"', "quoted"),
        ("", ""),
        ("1+1=2", "1+1=2"),
        ("NaN", "NaN"),
        ('{"theme":"dark","enabled":true}', {"theme": "dark", "enabled": True}),
        ('["electronics","books"]', ["electronics", "books"]),
    ],
)
def test_decode_value_scalars_and_json(raw: str, expected: object) -> None:
    assert decode_value(raw) == expected


def test_decode_value_map_and_set_wrappers() -> None:
    decoded_map = decode_value('map([["key1","value1"],["key2","value2"]])')
    assert isinstance(decoded_map, MapValue)
    assert list(decoded_map.items()) == [("key1", "value1"), ("key2", "value2")]

    decoded_set = decode_value('set(["value1","value2","value3"])')
    assert isinstance(decoded_set, SetValue)
    assert list(decoded_set) == ["value1", "value2", "value3"]


def test_decode_value_malformed_wrapper_stays_string() -> None:
    assert decode_value("map(oops)") == "map(oops)"
    assert decode_value("set([1,)") == "set([1,)"


def test_decode_value_map_requires_key_value_pairs() -> None:
    assert decode_value('map({"a":1})') == 'map({"a":1})'
    assert decode_value('map(["ab"])') == 'map(["ab"])'
    assert decode_value("map([[1,2,3]])") == "map([[1,2,3]])"
    assert decode_value("map([])") == MapValue()


def test_decode_value_percent_decoding() -> None:
    assert decode_value("!%40%23%24%25%5E%26*()_%2B") == "!@#$%^&*()_+"
    assert decode_value("100%") == "100%"
    assert decode_value("%FF") == "%FF"


def test_percent_decode_leaves_malformed_escapes_untouched() -> None:
    assert percent_decode("%zz%20") == "%zz%20"
    assert percent_decode("a%20b") == "a b"
    assert percent_decode("a+b") == "a+b"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (True, "true"),
        (False, "false"),
        (None, ""),
        (MISSING, ""),
        (123, "123"),
        (0.5, "0.5"),
        ("John", "John"),
        ("a&b", "a%26b"),
        ("x=y", "x%3Dy"),
        ("!@#$%^&*()_+", "!%40%23%24%25%5E%26*()_%2B"),
        (datetime.date(2023, 1, 1), "2023-01-01"),
        (datetime.datetime(2023, 1, 1, 12, 30), "2023-01-01T12:30:00"),
        ({"a": 1}, '{"a":1}'),
    ],
)
def test_encode_value(value: object, expected: str) -> None:
    assert encode_value(value) == expected


def test_encode_value_collections() -> None:
    assert encode_value(MapValue([("key1", "value1"), ("key2", "value2")])) == 'map([["key1","value1"],["key2","value2"]])'
    assert encode_value(SetValue(["value1", "value2"])) == 'set(["value1","value2"])'
    assert encode_value(MapValue([[[1, 2], "v"]])) == 'map([[[1,2],"v"]])'
    assert encode_value(MapValue([("when", datetime.date(2023, 1, 1))])) == 'map([["when","2023-01-01"]])'


def test_encode_value_encodes_wrapper_with_structural_characters() -> None:
    encoded = encode_value(SetValue(["a&b"]))
    assert "&" not in encoded
    assert decode_value(encoded) == SetValue(["a&b"])


def test_value_kind_classification() -> None:
    assert value_kind(MISSING) is ValueKind.MISSING
    assert value_kind(None) is ValueKind.NULL
    assert value_kind(True) is ValueKind.BOOLEAN
    assert value_kind(1) is ValueKind.NUMBER
    assert value_kind("") is ValueKind.STRING
    assert value_kind(datetime.datetime(2023, 1, 1)) is ValueKind.DATE
    assert value_kind(MapValue()) is ValueKind.MAP
    assert value_kind(frozenset()) is ValueKind.SET
    assert value_kind((1,)) is ValueKind.ARRAY
    assert value_kind({}) is ValueKind.OBJECT
    assert value_kind(object()) is ValueKind.OTHER
    assert ValueKind.OBJECT.is_container
    assert not ValueKind.MAP.is_container


def test_set_value_is_ordered_and_unique() -> None:
    values = SetValue(["b", "a", "b"])
    assert list(values) == ["b", "a"]
    assert values == {"a", "b"}
    assert len(SetValue([[1], [1]])) == 1
    assert "a" in values


def test_map_value_tuples_for_array_keys() -> None:
    mapping = MapValue([[[1, 2], "v"]])
    assert mapping[(1, 2)] == "v"
    assert MapValue({"a": 1}) == {"a": 1}
