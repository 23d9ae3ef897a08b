"""Decide which values stringify leaves out of the query string."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from qs_dict.values import MISSING, ValueKind, value_kind


OmitPredicate = Callable[[Any, str], bool]


def _strict_equals(left: Any, right: Any) -> bool:
    if left is right:
        return True
    if value_kind(left) is ValueKind.NUMBER and value_kind(right) is ValueKind.NUMBER:
        return left == right
    return type(left) is type(right) and left == right


def omit_by_default(value: Any, key: str) -> bool:  # noqa: ARG001
    """Omit ``None``, empty strings and empty map/set collections."""
    kind = value_kind(value)
    if kind in (ValueKind.MISSING, ValueKind.NULL):
        return True
    if kind in (ValueKind.STRING, ValueKind.MAP, ValueKind.SET):
        return len(value) == 0
    return False


class OmitPolicy:
    """Omission rule resolved once from the ``omit_values`` option.

    ``omit_values`` is either ``None`` (default rule), a predicate called
    with ``(value, dotted_key)``, or a collection of literals compared with
    strict equality. Array holes are always omitted.
    """

    def __init__(self, omit_values: OmitPredicate | Iterable[Any] | None = None) -> None:
        super().__init__()
        self._literals: tuple[Any, ...] = ()
        if omit_values is None:
            self._predicate: OmitPredicate = omit_by_default
        elif callable(omit_values):
            self._predicate = omit_values
        else:
            self._literals = tuple(omit_values)
            self._predicate = self._is_literal

    def _is_literal(self, value: Any, key: str) -> bool:  # noqa: ARG002
        return any(_strict_equals(value, literal) for literal in self._literals)

    def omits(self, value: Any, key: str) -> bool:
        """Return True when ``value`` at dotted ``key`` must be dropped."""
        if value is MISSING:
            return True
        return bool(self._predicate(value, key))
