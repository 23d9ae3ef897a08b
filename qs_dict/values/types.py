"""Python representations of the value variants carried by a query string."""

from __future__ import annotations

import datetime
import enum
from collections.abc import Iterable, Iterator, Mapping, Set
from typing import Any, override


class _Missing:
    """Marker for array positions that were never written."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @override
    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def _hashable(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(_hashable(item) for item in value)
    return value


class MapValue(dict[Any, Any]):
    """Ordered key/value collection serialized as ``map([[k, v], ...])``.

    Unlike a plain ``dict`` it is a leaf: stringify emits it as one pair
    instead of recursing into it. JSON array keys are stored as tuples.
    """

    def __init__(self, items: Iterable[Any] | Mapping[Any, Any] = (), /) -> None:
        super().__init__()
        pairs = items.items() if isinstance(items, Mapping) else items
        for pair in pairs:
            key, value = pair
            self[_hashable(key)] = value

    @override
    def __repr__(self) -> str:
        return f"MapValue({list(self.items())!r})"


class SetValue(Set[Any]):
    """Insertion-ordered set serialized as ``set([...])``.

    Elements may be unhashable JSON values (lists, dicts); uniqueness is
    decided by equality.
    """

    def __init__(self, items: Iterable[Any] = (), /) -> None:
        super().__init__()
        self._items: list[Any] = []
        for item in items:
            self.add(item)

    def add(self, item: Any) -> None:
        if item not in self._items:
            self._items.append(item)

    @override
    def __contains__(self, item: object) -> bool:
        return item in self._items

    @override
    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    @override
    def __len__(self) -> int:
        return len(self._items)

    @override
    def __eq__(self, other: object) -> bool:
        if isinstance(other, SetValue):
            return len(self) == len(other) and all(item in other for item in self._items)
        if isinstance(other, Set):
            return len(self) == len(other) and all(item in self._items for item in other)
        return NotImplemented

    @override
    def __repr__(self) -> str:
        return f"SetValue({self._items!r})"


class ValueKind(enum.Enum):
    """Category of a value, deciding how it is walked and encoded."""

    MISSING = "missing"
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    DATE = "date"
    MAP = "map"
    SET = "set"
    ARRAY = "array"
    OBJECT = "object"
    OTHER = "other"

    @property
    def is_container(self) -> bool:
        """True for kinds that stringify recurses into."""
        return self in (ValueKind.ARRAY, ValueKind.OBJECT)


def value_kind(value: Any) -> ValueKind:
    """Classify ``value`` into exactly one ``ValueKind``."""
    if value is MISSING:
        return ValueKind.MISSING
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int | float):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, datetime.date | datetime.time):
        return ValueKind.DATE
    if isinstance(value, MapValue):
        return ValueKind.MAP
    if isinstance(value, SetValue | set | frozenset):
        return ValueKind.SET
    if isinstance(value, list | tuple):
        return ValueKind.ARRAY
    if isinstance(value, Mapping):
        return ValueKind.OBJECT
    return ValueKind.OTHER
