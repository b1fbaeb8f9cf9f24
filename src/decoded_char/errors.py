"""Central exception hierarchy"""
from __future__ import annotations

from typing import Sequence, Tuple

from .models import Encoding


class DecodedCharError(Exception):
    """Base exception for decoded-char"""


class EncodingError(DecodedCharError):
    """Raised when encoded input cannot be assembled into a character"""

    def __init__(self, position: int, units: Sequence[int], encoding: Encoding | str, message: str | None = None) -> None:
        self.position = position
        self.units: Tuple[int, ...] = tuple(units)
        self.encoding: str = getattr(encoding, "value", encoding)
        super().__init__(message or self._default_message())

    def _default_message(self) -> str:
        return f"{self.describe()} at unit {self.position}: {self.hex_units()}"

    def describe(self) -> str:
        return f"{self.encoding} error"

    def hex_units(self) -> str:
        width = 2 if self.encoding == "utf-8" else 4
        return " ".join(f"{unit:0{width}X}" for unit in self.units) or "<none>"


class InvalidSequence(EncodingError):
    """Raised when code units do not form a valid encoded character"""

    def describe(self) -> str:
        return f"invalid {self.encoding} sequence"


class TruncatedSequence(EncodingError):
    """Raised when the input ends in the middle of a character"""

    def describe(self) -> str:
        return f"truncated {self.encoding} sequence"


__all__ = [
    "DecodedCharError",
    "EncodingError",
    "InvalidSequence",
    "TruncatedSequence",
]
