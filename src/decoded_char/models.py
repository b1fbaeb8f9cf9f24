"""Shared value types used across decoded-char."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

REPLACEMENT_CHARACTER = "�"


class Encoding(str, Enum):
    UTF8 = "utf-8"
    UTF16 = "utf-16"

    @property
    def unit_size(self) -> int:
        """Width of one code unit in bytes."""
        return 1 if self is Encoding.UTF8 else 2

    def byte_length(self, char: str) -> int:
        if self is Encoding.UTF8:
            return len(char.encode("utf-8", errors="surrogatepass"))
        return len(char.encode("utf-16-le", errors="surrogatepass"))


class ErrorPolicy(str, Enum):
    STRICT = "strict"
    REPLACE = "replace"


@dataclass(frozen=True, slots=True, order=True)
class DecodedChar:
    """A character and its original byte length in the encoded source.

    ``len`` is taken verbatim from the caller. Use :meth:`inherent` for
    characters that do not come from the source (placeholders, replacement
    characters) so that the length is the character's own encoded size.
    """

    value: str
    len: int

    @classmethod
    def inherent(cls, value: str, encoding: Encoding = Encoding.UTF8) -> "DecodedChar":
        return cls(value, Encoding(encoding).byte_length(value))

    @classmethod
    def from_utf8(cls, value: str) -> "DecodedChar":
        return cls.inherent(value, Encoding.UTF8)

    @classmethod
    def from_utf16(cls, value: str) -> "DecodedChar":
        return cls.inherent(value, Encoding.UTF16)

    @property
    def codepoint(self) -> int:
        return ord(self.value)

    def __str__(self) -> str:
        return self.value

    def __int__(self) -> int:
        return ord(self.value)


@dataclass(slots=True)
class Span:
    start: int
    end: int

    def length(self) -> int:
        return self.end - self.start


__all__ = ["DecodedChar", "Encoding", "ErrorPolicy", "Span", "REPLACEMENT_CHARACTER"]
