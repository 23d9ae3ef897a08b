"""Options shared by parse and stringify."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field, fields
from typing import Any, Literal

from qs_dict.key_mapping import CaseStyle, KeyMapper
from qs_dict.omission import OmitPolicy, OmitPredicate
from qs_dict.values import json_decode, json_encode


# camelCase spellings accepted in option mappings
_OPTION_ALIASES = {
    "addQueryPrefix": "add_query_prefix",
    "restoreCase": "restore_case",
    "omitValues": "omit_values",
    "jsonEncoder": "json_encoder",
    "jsonDecoder": "json_decoder",
}


@dataclass(frozen=True)
class QsOptions:
    """Immutable configuration for ``parse`` and ``stringify``.

    Attributes
    ----------
    add_query_prefix
        Prepend ``?`` to non-empty stringify output.
    case
        Case style applied to keys on stringify.
    restore_case
        Case style applied to keys on parse. Defaults to camelCase when
        ``case`` is set; ``False`` keeps keys exactly as received.
    omit_values
        ``None`` for the default rule, a ``(value, key) -> bool`` predicate,
        or literals to drop.
    prefix
        Literal prefix added to every key on stringify and required (then
        stripped) on parse.
    json_encoder, json_decoder
        JSON callables used for structured values.
    """

    add_query_prefix: bool = True
    case: CaseStyle | str | None = None
    restore_case: CaseStyle | str | Literal[False] | None = None
    omit_values: OmitPredicate | Iterable[Any] | None = None
    prefix: str = ""
    json_encoder: Callable[[Any], str] = json_encode
    json_decoder: Callable[[str], Any] = json_decode
    key_mapper: KeyMapper = field(init=False, repr=False, compare=False)
    omit_policy: OmitPolicy = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.prefix is None:
            object.__setattr__(self, "prefix", "")
        mapper = KeyMapper(prefix=self.prefix, case=self.case, restore_case=self.restore_case)
        object.__setattr__(self, "case", mapper.case)
        if self.omit_values is not None and not callable(self.omit_values):
            object.__setattr__(self, "omit_values", tuple(self.omit_values))
        object.__setattr__(self, "key_mapper", mapper)
        object.__setattr__(self, "omit_policy", OmitPolicy(self.omit_values))

    @classmethod
    def coerce(cls, options: QsOptions | Mapping[str, Any] | None = None, **overrides: Any) -> QsOptions:
        """Build options from an instance, a mapping and/or keyword overrides.

        Mapping keys may use either the snake_case field names or their
        camelCase spellings (``addQueryPrefix``, ``restoreCase``, ...).
        """
        if isinstance(options, cls) and not overrides:
            return options

        values: dict[str, Any] = {}
        if isinstance(options, cls):
            values.update({item.name: getattr(options, item.name) for item in fields(cls) if item.init})
        elif options is not None:
            values.update(options)
        values.update(overrides)

        known = {item.name for item in fields(cls) if item.init}
        normalized: dict[str, Any] = {}
        for name, value in values.items():
            target = _OPTION_ALIASES.get(name, name)
            if target not in known:
                msg = f"unknown option: {name}"
                raise ValueError(msg)
            normalized[target] = value
        return cls(**normalized)
