"""Decoder package exports."""
from .base import CodeUnitDecoder
from .chars import Utf16Chars, Utf8Chars
from .utf8 import Utf8Decoded
from .utf16 import Utf16Decoded, utf16_units

__all__ = ["CodeUnitDecoder", "Utf8Decoded", "Utf16Decoded", "Utf8Chars", "Utf16Chars", "utf16_units"]
