"""Utility exports."""
from .text import byte_offsets, char_index, decode_bytes, decoded_chars, iter_spans, normalize_encoding

__all__ = [
    "byte_offsets",
    "char_index",
    "decode_bytes",
    "decoded_chars",
    "iter_spans",
    "normalize_encoding",
]
