"""Encoding of single values to and from their query-string wire form."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Callable
from typing import Any
from urllib.parse import quote, unquote

from .types import MapValue, SetValue, ValueKind, value_kind


logger = logging.getLogger(__name__)

_MAP_OPEN = "map("
_SET_OPEN = "set("
_WRAPPER_CLOSE = ")"

_NEEDS_ENCODING = re.compile(r"[&=#]")
_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
# characters encodeURIComponent leaves alone
_URI_COMPONENT_SAFE = "-_.!~*'()"


def _json_default(value: Any) -> Any:
    kind = value_kind(value)
    if kind is ValueKind.MISSING:
        return None
    if kind is ValueKind.DATE:
        return value.isoformat()
    if kind is ValueKind.MAP:
        return [[key, item] for key, item in value.items()]
    if kind in (ValueKind.SET, ValueKind.ARRAY):
        return list(value)
    if kind is ValueKind.OBJECT:
        return dict(value)
    return str(value)


def _reject_constant(name: str) -> Any:
    msg = f"non-standard JSON constant: {name}"
    raise ValueError(msg)


def json_encode(value: Any) -> str:
    """Serialize ``value`` to compact JSON."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=_json_default)


def json_decode(text: str) -> Any:
    """Parse strict JSON text, refusing ``NaN`` and ``Infinity``."""
    return json.loads(text, parse_constant=_reject_constant)


def percent_decode(raw: str) -> str:
    """Decode ``%XX`` escapes once; malformed input is returned untouched."""
    if "%" not in raw or _MALFORMED_ESCAPE.search(raw):
        return raw
    try:
        return unquote(raw, errors="strict")
    except UnicodeDecodeError:
        logger.debug("value %r is not valid percent-encoded UTF-8, keeping it raw", raw)
        return raw


def percent_encode(text: str) -> str:
    """Percent-encode ``text`` when it holds a structural character."""
    if _NEEDS_ENCODING.search(text):
        return quote(text, safe=_URI_COMPONENT_SAFE)
    return text


def _map_value(decoded: Any) -> MapValue:
    if not isinstance(decoded, list) or not all(isinstance(pair, list) and len(pair) == 2 for pair in decoded):
        msg = "map payload must be a JSON array of [key, value] pairs"
        raise TypeError(msg)
    return MapValue(decoded)


def _unwrap(text: str, opening: str) -> str | None:
    if text.startswith(opening) and text.endswith(_WRAPPER_CLOSE) and len(text) > len(opening):
        return text[len(opening) : -len(_WRAPPER_CLOSE)]
    return None


def decode_value(raw: str, json_decoder: Callable[[str], Any] = json_decode) -> Any:
    """Turn a raw wire value into a typed Python value.

    Wrapped ``map(...)`` and ``set(...)`` payloads are checked before the
    generic JSON attempt. Anything that does not parse stays a string.
    """
    text = percent_decode(raw)
    for opening, factory in ((_MAP_OPEN, _map_value), (_SET_OPEN, SetValue)):
        if (payload := _unwrap(text, opening)) is None:
            continue
        try:
            return factory(json_decoder(payload))
        except (ValueError, TypeError):
            logger.debug("malformed %s...) payload %r, keeping the raw string", opening, payload)
            return text
    try:
        return json_decoder(text)
    except (ValueError, TypeError):
        return text


def _scalar_text(value: Any, kind: ValueKind, json_encoder: Callable[[Any], str]) -> str:
    if kind in (ValueKind.MISSING, ValueKind.NULL):
        return ""
    if kind is ValueKind.BOOLEAN:
        return "true" if value else "false"
    if kind is ValueKind.NUMBER:
        return json_encoder(value)
    if kind is ValueKind.STRING:
        return value
    if kind is ValueKind.DATE:
        return value.isoformat()
    if kind is ValueKind.MAP:
        return f"{_MAP_OPEN}{json_encoder([[key, item] for key, item in value.items()])}{_WRAPPER_CLOSE}"
    if kind is ValueKind.SET:
        return f"{_SET_OPEN}{json_encoder(list(value))}{_WRAPPER_CLOSE}"
    if kind is ValueKind.ARRAY:
        return json_encoder(list(value))
    if kind is ValueKind.OBJECT:
        return json_encoder(dict(value))
    return str(value)


def encode_value(value: Any, json_encoder: Callable[[Any], str] = json_encode) -> str:
    """Render ``value`` as its wire string, percent-encoded only when needed."""
    kind = value_kind(value)
    try:
        text = _scalar_text(value, kind, json_encoder)
    except (TypeError, ValueError):
        logger.debug("cannot JSON-encode %s value %r, using str()", kind.value, value)
        text = str(value)
    return percent_encode(text)

