"""Helpers for feeding decoders and tracking byte spans."""
from __future__ import annotations

from bisect import bisect_left
from typing import Iterable, Iterator, List, Sequence, Tuple

from ..decoders import CodeUnitDecoder, Utf8Chars, Utf8Decoded, Utf16Decoded, utf16_units
from ..models import DecodedChar, ErrorPolicy, Span

_ALIASES = {
    "utf8": "utf-8",
    "utf-8": "utf-8",
    "utf16": "utf-16",
    "utf-16": "utf-16",
    "utf-16le": "utf-16-le",
    "utf-16-le": "utf-16-le",
    "utf-16be": "utf-16-be",
    "utf-16-be": "utf-16-be",
}

SUPPORTED_ENCODINGS = ("utf-8", "utf-16", "utf-16-le", "utf-16-be")


def normalize_encoding(name: str) -> str:
    key = name.strip().lower().replace("_", "-")
    try:
        return _ALIASES[key]
    except KeyError:
        raise ValueError(f"Unsupported encoding: {name}") from None


def decoded_chars(text: str) -> Utf8Chars:
    """Iterate over ``text`` as characters of a UTF-8 source."""
    return Utf8Chars(text)


def decode_bytes(
    data: bytes,
    encoding: str = "utf-8",
    errors: ErrorPolicy | str = ErrorPolicy.STRICT,
) -> CodeUnitDecoder:
    """Return the decoder matching ``encoding`` over raw ``data``.

    Plain ``utf-16`` picks the byte order from a leading BOM and falls back to
    little endian. The BOM itself is yielded as U+FEFF so offsets stay exact.
    """

    name = normalize_encoding(encoding)
    if name == "utf-8":
        return Utf8Decoded(data, errors)
    if name == "utf-16":
        byteorder = "big" if bytes(data[:2]) == b"\xfe\xff" else "little"
    else:
        byteorder = "big" if name == "utf-16-be" else "little"
    return Utf16Decoded(utf16_units(data, byteorder), errors)


def iter_spans(decoded: Iterable[DecodedChar], start: int = 0) -> Iterator[Tuple[Span, DecodedChar]]:
    offset = start
    for char in decoded:
        yield Span(start=offset, end=offset + char.len), char
        offset += char.len


def byte_offsets(decoded: Iterable[DecodedChar]) -> List[int]:
    offsets: List[int] = [0]
    byte_index = 0
    for char in decoded:
        byte_index += char.len
        offsets.append(byte_index)
    return offsets


def char_index(offsets: Sequence[int], byte_pos: int) -> int:
    """Map a byte offset back to the index of the character starting there."""
    index = bisect_left(offsets, byte_pos)
    if index >= len(offsets) or offsets[index] != byte_pos:
        raise ValueError(f"Byte offset {byte_pos} does not align to a character boundary")
    return index


__all__ = [
    "SUPPORTED_ENCODINGS",
    "byte_offsets",
    "char_index",
    "decode_bytes",
    "decoded_chars",
    "iter_spans",
    "normalize_encoding",
]
