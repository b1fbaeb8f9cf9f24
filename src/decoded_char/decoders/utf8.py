"""UTF-8 byte stream decoder."""
from __future__ import annotations

from typing import Dict, List, Tuple

from ..models import DecodedChar, Encoding
from .base import CodeUnitDecoder

_CONTINUATION: Tuple[int, int] = (0x80, 0xBF)

# Narrower ranges for the byte after these leads rule out overlong forms,
# surrogates and code points above U+10FFFF.
_FIRST_CONTINUATION: Dict[int, Tuple[int, int]] = {
    0xE0: (0xA0, 0xBF),
    0xED: (0x80, 0x9F),
    0xF0: (0x90, 0xBF),
    0xF4: (0x80, 0x8F),
}


def sequence_length(lead: int) -> int:
    """Return the encoded length announced by ``lead``, or 0 if it cannot start a character."""
    if 0x00 <= lead <= 0x7F:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


class Utf8Decoded(CodeUnitDecoder):
    """Decode an iterator of bytes (``int`` 0..255), yielding ``len`` in bytes."""

    encoding = Encoding.UTF8

    def _decode(self, lead: int, start: int) -> DecodedChar:
        width = sequence_length(lead)
        if width == 0:
            return self._invalid(start, (lead,))
        if width == 1:
            return DecodedChar(chr(lead), 1)

        buffer: List[int] = [lead]
        low, high = _FIRST_CONTINUATION.get(lead, _CONTINUATION)
        while len(buffer) < width:
            unit = self._pull()
            if unit is None:
                raise self._truncated(start, buffer)
            if not low <= unit <= high:
                self._push_back(unit)
                return self._invalid(start, [*buffer, unit])
            buffer.append(unit)
            low, high = _CONTINUATION
        return DecodedChar(bytes(buffer).decode("utf-8"), width)


__all__ = ["Utf8Decoded", "sequence_length"]
