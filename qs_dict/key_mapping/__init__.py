"""Key mapping and nested reconstruction utilities."""

from .casing import CaseStyle, convert_case
from .mapper import KeyMapper
from .nested import decode_key, encode_path, reconstruct_nested, write_path


__all__ = ["CaseStyle", "KeyMapper", "convert_case", "decode_key", "encode_path", "reconstruct_nested", "write_path"]
