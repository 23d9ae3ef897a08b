"""Key mapping between logical dotted paths and prefixed, cased wire keys."""

from __future__ import annotations

from typing import Literal

from .casing import CaseStyle, convert_case


_PATH_SEP = "."
_BRACKET = "["


def _coerce_style(value: CaseStyle | str | None, name: str) -> CaseStyle | None:
    if value is None:
        return None
    try:
        return CaseStyle(value)
    except ValueError:
        choices = ", ".join(style.value for style in CaseStyle)
        msg = f"{name} must be one of {choices}, got {value!r}"
        raise ValueError(msg) from None


def _transform_segments(key: str, style: CaseStyle | None) -> str:
    if style is None:
        return key
    parts: list[str] = []
    for segment in key.split(_PATH_SEP):
        base, bracket, rest = segment.partition(_BRACKET)
        if not base:
            parts.append(segment)
            continue
        parts.append(f"{convert_case(base, style)}{bracket}{rest}")
    return _PATH_SEP.join(parts)


class KeyMapper:
    """Map between logical dotted key paths and wire keys.

    Case conversion touches only the base of each dot-separated segment;
    ``[n]`` index groups pass through untouched.
    """

    def __init__(
        self,
        prefix: str = "",
        case: CaseStyle | str | None = None,
        restore_case: CaseStyle | str | Literal[False] | None = None,
    ) -> None:
        super().__init__()
        if not isinstance(prefix, str):
            msg = "prefix must be a string"
            raise TypeError(msg)

        self.prefix = prefix
        self.case = _coerce_style(case, "case")
        if restore_case is False:
            self.restore_case = None
        elif restore_case is None:
            self.restore_case = CaseStyle.CAMEL if self.case is not None else None
        else:
            self.restore_case = _coerce_style(restore_case, "restore_case")

    def transform_key(self, key: str) -> str:
        """Apply the outgoing case style to every segment of ``key``."""
        return _transform_segments(key, self.case)

    def restore_key(self, key: str) -> str:
        """Apply the restoring case style to every segment of ``key``."""
        return _transform_segments(key, self.restore_case)

    def full_key(self, key: str) -> str:
        """Build a wire key from a logical dotted key path."""
        return self.prefix + self.transform_key(key)

    def matches(self, wire_key: str) -> bool:
        """Return True when a wire key carries this mapper's prefix."""
        return wire_key.startswith(self.prefix)

    def relative_key(self, wire_key: str) -> str:
        """Convert a wire key back into a logical dotted key path."""
        if not self.matches(wire_key):
            msg = f"key does not match prefix: {wire_key}"
            raise ValueError(msg)
        return self.restore_key(wire_key.removeprefix(self.prefix))
