"""qs-dict - nested, typed values in flat URL query strings"""

from ._version import version as __version__
from .key_mapping import CaseStyle, KeyMapper
from .omission import OmitPolicy
from .options import QsOptions
from .querystring import parse, stringify
from .values import MISSING, MapValue, SetValue, ValueKind


__all__ = [
    "MISSING",
    "CaseStyle",
    "KeyMapper",
    "MapValue",
    "OmitPolicy",
    "QsOptions",
    "SetValue",
    "ValueKind",
    "__version__",
    "parse",
    "stringify",
]
