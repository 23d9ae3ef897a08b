"""Dotted/bracketed key paths and nested structure reconstruction."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

from qs_dict.values import MISSING, MapValue


if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


logger = logging.getLogger(__name__)

_PATH_SEP = "."
_INDEX_GROUP = re.compile(r"\[([0-9]+)\]")

PathSegment = str | int


def encode_path(path: Sequence[PathSegment]) -> str:
    """Build a wire key from traversal segments.

    ``int`` segments are array indices and render as ``[n]`` glued to the
    previous segment; string segments are joined with dots. The first
    segment is always written literally.
    """
    if not path:
        return ""
    parts = [str(path[0])]
    for segment in path[1:]:
        if isinstance(segment, int):
            parts.append(f"[{segment}]")
        else:
            parts.append(f"{_PATH_SEP}{segment}")
    return "".join(parts)


def decode_key(key: str) -> list[str]:
    """Split a wire key into flat path elements.

    >>> decode_key("a.b[0].c[1][2]")
    ['a', 'b', '0', 'c', '1', '2']

    A bracket group with no base keeps an empty element in its place, so
    ``"[0]"`` decodes to ``['', '0']``.
    """
    elements: list[str] = []
    for segment in key.split(_PATH_SEP):
        if _INDEX_GROUP.search(segment):
            elements.extend(_INDEX_GROUP.sub(rf"{_PATH_SEP}\1", segment).split(_PATH_SEP))
        else:
            elements.append(segment)
    return elements


def is_index(element: str) -> bool:
    """Return True when a path element addresses an array position."""
    return element.isascii() and element.isdigit()


def _is_object(node: Any) -> bool:
    return isinstance(node, dict) and not isinstance(node, MapValue)


def _get_child(container: dict[str, Any] | list[Any], element: str) -> Any:
    if isinstance(container, list):
        index = int(element)
        return container[index] if index < len(container) else MISSING
    return container.get(element, MISSING)


def _set_child(container: dict[str, Any] | list[Any], element: str, value: Any) -> None:
    if isinstance(container, list):
        index = int(element)
        if index >= len(container):
            container.extend([MISSING] * (index + 1 - len(container)))
        container[index] = value
    else:
        container[element] = value


def write_path(target: dict[str, Any], path: Sequence[str], value: Any) -> dict[str, Any]:
    """Deep-set ``value`` at ``path`` inside ``target`` and return ``target``.

    Containers along the way are created on demand: a list when the next
    element is an index, a dict otherwise. A node of the wrong shape is
    replaced by a fresh container. Lists grow with ``MISSING`` holes.
    """
    if not path:
        return target

    node: dict[str, Any] | list[Any] = target
    for element, next_element in zip(path, path[1:], strict=False):
        wants_list = is_index(next_element)
        child = _get_child(node, element)
        if wants_list and not isinstance(child, list):
            if child is not MISSING:
                logger.debug("replacing %r at %r with a list", child, element)
            child = []
            _set_child(node, element, child)
        elif not wants_list and not _is_object(child):
            if child is not MISSING:
                logger.debug("replacing %r at %r with a dict", child, element)
            child = {}
            _set_child(node, element, child)
        node = child

    _set_child(node, path[-1], value)
    return target


def reconstruct_nested(items: Iterable[tuple[Sequence[str], Any]]) -> dict[str, Any]:
    """Reconstruct a nested object from path/value pairs.

    Pairs are applied in order, so a later pair overwrites an earlier one
    at the same path.
    """
    result: dict[str, Any] = {}
    for path, value in items:
        _ = write_path(result, path, value)
    return result
