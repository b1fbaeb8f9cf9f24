"""Decoded characters paired with their encoded byte length."""
from .decoders import CodeUnitDecoder, Utf8Chars, Utf8Decoded, Utf16Chars, Utf16Decoded, utf16_units
from .errors import DecodedCharError, EncodingError, InvalidSequence, TruncatedSequence
from .models import REPLACEMENT_CHARACTER, DecodedChar, Encoding, ErrorPolicy, Span
from .utils.text import byte_offsets, char_index, decode_bytes, decoded_chars, iter_spans
from .version import __version__

__all__ = [
    "CodeUnitDecoder",
    "DecodedChar",
    "DecodedCharError",
    "Encoding",
    "EncodingError",
    "ErrorPolicy",
    "InvalidSequence",
    "REPLACEMENT_CHARACTER",
    "Span",
    "TruncatedSequence",
    "Utf16Chars",
    "Utf16Decoded",
    "Utf8Chars",
    "Utf8Decoded",
    "__version__",
    "byte_offsets",
    "char_index",
    "decode_bytes",
    "decoded_chars",
    "iter_spans",
    "utf16_units",
]
