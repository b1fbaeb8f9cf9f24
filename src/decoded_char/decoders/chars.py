"""Adapters over sources that are already decoded into characters."""
from __future__ import annotations

from typing import ClassVar, Iterable, Iterator

from ..models import DecodedChar, Encoding


class _DecodedChars(Iterator[DecodedChar]):
    encoding: ClassVar[Encoding]

    def __init__(self, chars: Iterable[str]) -> None:
        self._chars = iter(chars)

    def __iter__(self) -> "_DecodedChars":
        return self

    def __next__(self) -> DecodedChar:
        return DecodedChar.inherent(next(self._chars), self.encoding)


class Utf8Chars(_DecodedChars):
    """Wrap characters that were decoded from a UTF-8 source."""

    encoding = Encoding.UTF8


class Utf16Chars(_DecodedChars):
    """Wrap characters that were decoded from a UTF-16 source (``len`` in bytes)."""

    encoding = Encoding.UTF16


__all__ = ["Utf8Chars", "Utf16Chars"]
