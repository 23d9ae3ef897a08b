"""Parse query strings into nested values and stringify them back."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from qs_dict.key_mapping import decode_key, encode_path, reconstruct_nested
from qs_dict.options import QsOptions
from qs_dict.values import MISSING, ValueKind, decode_value, encode_value, value_kind


if TYPE_CHECKING:
    from collections.abc import Iterator

    from qs_dict.key_mapping.nested import PathSegment


logger = logging.getLogger(__name__)

_QUERY_MARK = "?"
_PAIR_SEP = "&"
_KEY_VALUE_SEP = "="


def parse(query: str | None, options: QsOptions | Mapping[str, Any] | None = None, **kwargs: Any) -> dict[str, Any]:
    """Parse ``query`` into a nested ``dict``.

    Keys are split into paths on ``.`` and ``[n]``; values are decoded from
    JSON, ``map(...)``/``set(...)`` wrappers or kept as strings. Malformed
    input never raises, it degrades to raw strings.

    >>> parse("?users[0].name=John&users[0].skills[0]=js")
    {'users': [{'name': 'John', 'skills': ['js']}]}
    """
    opts = QsOptions.coerce(options, **kwargs)
    if not query or not query.strip():
        return {}
    return reconstruct_nested(_decoded_pairs(query, opts))


def _decoded_pairs(query: str, opts: QsOptions) -> Iterator[tuple[list[str], Any]]:
    mapper = opts.key_mapper
    for pair in query.strip().lstrip(_QUERY_MARK).split(_PAIR_SEP):
        if not pair:
            continue
        key, _, raw_value = pair.partition(_KEY_VALUE_SEP)
        if not key:
            logger.debug("skipping pair with empty key: %r", pair)
            continue
        if not mapper.matches(key):
            logger.debug("skipping key without prefix %r: %r", mapper.prefix, key)
            continue

        yield decode_key(mapper.relative_key(key)), decode_value(raw_value, opts.json_decoder)


def _children(node: Any) -> Iterator[tuple[PathSegment, Any]]:
    if isinstance(node, Mapping):
        for key, value in node.items():
            yield str(key), value
    else:
        yield from enumerate(node)


def _leaf_pairs(node: Any, path: tuple[PathSegment, ...], opts: QsOptions) -> Iterator[str]:
    for segment, value in _children(node):
        child_path = (*path, segment)
        dotted_key = encode_path(child_path)
        if isinstance(segment, int):
            # array items are emitted as-is, only holes are skipped
            if value is MISSING:
                continue
        elif opts.omit_policy.omits(value, dotted_key):
            continue
        if value_kind(value).is_container:
            yield from _leaf_pairs(value, child_path, opts)
            continue
        wire_key = opts.key_mapper.full_key(dotted_key)
        yield f"{wire_key}{_KEY_VALUE_SEP}{encode_value(value, opts.json_encoder)}"


def stringify(value: Any, options: QsOptions | Mapping[str, Any] | None = None, **kwargs: Any) -> str:
    """Flatten ``value`` into a query string.

    Nested mappings become dotted keys and sequences become ``[n]`` indices.
    Omitted values, empty mappings and empty sequences contribute nothing.

    >>> stringify({"active": True, "age": None, "name": "John", "phone": ""})
    '?active=true&name=John'
    """
    opts = QsOptions.coerce(options, **kwargs)
    if not value or value_kind(value) not in (ValueKind.OBJECT, ValueKind.ARRAY):
        return ""

    pairs = list(_leaf_pairs(value, (), opts))
    if not pairs:
        return ""
    query = _PAIR_SEP.join(pairs)
    return f"{_QUERY_MARK}{query}" if opts.add_query_prefix else query
