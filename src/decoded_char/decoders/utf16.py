"""UTF-16 code-unit stream decoder."""
from __future__ import annotations

from typing import Iterator

from ..errors import TruncatedSequence
from ..models import DecodedChar, Encoding
from .base import CodeUnitDecoder

_HIGH_SURROGATES = range(0xD800, 0xDC00)
_LOW_SURROGATES = range(0xDC00, 0xE000)


def utf16_units(data: bytes, byteorder: str = "little") -> Iterator[int]:
    """Split raw UTF-16 bytes into 16-bit code units.

    A dangling final byte raises :class:`TruncatedSequence` once it is reached.
    """

    if byteorder not in ("little", "big"):
        raise ValueError(f"Unsupported byte order: {byteorder}")
    view = memoryview(data)
    pairs = len(view) // 2
    for index in range(pairs):
        yield int.from_bytes(view[2 * index : 2 * index + 2], byteorder)
    if len(view) % 2:
        raise TruncatedSequence(pairs, (view[-1],), Encoding.UTF16)


class Utf16Decoded(CodeUnitDecoder):
    """Decode an iterator of UTF-16 code units (``int`` 0..0xFFFF).

    ``len`` is reported in bytes: 2 for a character in the basic plane and 4
    for a surrogate pair, so offsets line up with the raw UTF-16 buffer.
    """

    encoding = Encoding.UTF16

    def _decode(self, unit: int, start: int) -> DecodedChar:
        if unit in _HIGH_SURROGATES:
            trail = self._pull()
            if trail is None:
                raise self._truncated(start, (unit,))
            if trail not in _LOW_SURROGATES:
                self._push_back(trail)
                return self._invalid(start, (unit, trail))
            codepoint = 0x10000 + ((unit - 0xD800) << 10) + (trail - 0xDC00)
            return DecodedChar(chr(codepoint), 2 * self.encoding.unit_size)
        if unit in _LOW_SURROGATES or not 0 <= unit <= 0xFFFF:
            return self._invalid(start, (unit,))
        return DecodedChar(chr(unit), self.encoding.unit_size)


__all__ = ["Utf16Decoded", "utf16_units"]
