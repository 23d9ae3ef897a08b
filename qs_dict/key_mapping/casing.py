"""Case conversion for identifier-like key segments."""

from __future__ import annotations

import enum
import re


# alphanumeric runs; separators and underscores split words
_RUN = re.compile(r"[^\W_]+")


def _is_boundary(prev: str, char: str, following: str) -> bool:
    if prev.isdigit() != char.isdigit():
        return True
    if prev.islower() and char.isupper():
        return True
    # end of an acronym: XMLHttp -> XML, Http
    return prev.isupper() and char.isupper() and following.islower()


def _split_run(run: str) -> list[str]:
    parts: list[str] = []
    start = 0
    for index in range(1, len(run)):
        following = run[index + 1] if index + 1 < len(run) else ""
        if _is_boundary(run[index - 1], run[index], following):
            parts.append(run[start:index])
            start = index
    parts.append(run[start:])
    return parts


class CaseStyle(enum.StrEnum):
    """Key case styles understood by the codec."""

    CAMEL = "camelCase"
    SNAKE = "snake_case"
    KEBAB = "kebab-case"


def words(text: str) -> list[str]:
    """Split ``text`` into words on separators, case changes and digits."""
    return [word for run in _RUN.findall(text) for word in _split_run(run)]


def camel_case(text: str) -> str:
    """``"first-name"`` -> ``"firstName"``."""
    parts = [word.lower() for word in words(text)]
    if not parts:
        return ""
    return parts[0] + "".join(part[:1].upper() + part[1:] for part in parts[1:])


def snake_case(text: str) -> str:
    """``"firstName"`` -> ``"first_name"``."""
    return "_".join(word.lower() for word in words(text))


def kebab_case(text: str) -> str:
    """``"firstName"`` -> ``"first-name"``."""
    return "-".join(word.lower() for word in words(text))


_CONVERTERS = {
    CaseStyle.CAMEL: camel_case,
    CaseStyle.SNAKE: snake_case,
    CaseStyle.KEBAB: kebab_case,
}


def convert_case(text: str, style: CaseStyle | None) -> str:
    """Apply ``style`` to ``text``; ``None`` leaves it unchanged."""
    if style is None:
        return text
    return _CONVERTERS[style](text)
