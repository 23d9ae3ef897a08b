"""Typed values and their wire encoding."""

from .codec import decode_value, encode_value, json_decode, json_encode, percent_decode, percent_encode
from .types import MISSING, MapValue, SetValue, ValueKind, value_kind


__all__ = [
    "MISSING",
    "MapValue",
    "SetValue",
    "ValueKind",
    "decode_value",
    "encode_value",
    "json_decode",
    "json_encode",
    "percent_decode",
    "percent_encode",
    "value_kind",
]
