"""Forward-only cursor shared by the code-unit decoders."""
from __future__ import annotations

import logging
from typing import ClassVar, Iterable, Iterator, Optional, Sequence

import structlog

from ..errors import InvalidSequence, TruncatedSequence
from ..models import REPLACEMENT_CHARACTER, DecodedChar, Encoding, ErrorPolicy

# Backed by a stdlib logger so nothing is emitted until the application
# configures logging.
logger = structlog.wrap_logger(logging.getLogger(__name__))


class CodeUnitDecoder(Iterator[DecodedChar]):
    """Pull one :class:`DecodedChar` at a time out of an iterator of code units.

    Each call to ``next`` either yields one complete character or raises; a
    partially assembled character is never returned. A unit that breaks a
    sequence is pushed back and read again as the start of the next character.
    """

    encoding: ClassVar[Encoding]

    def __init__(self, units: Iterable[int], errors: ErrorPolicy | str = ErrorPolicy.STRICT) -> None:
        self._units = iter(units)
        self._pending: Optional[int] = None
        self._position = 0
        self.policy = ErrorPolicy(errors)

    @property
    def position(self) -> int:
        """Number of code units consumed so far."""
        return self._position

    @property
    def offset(self) -> int:
        """Number of source bytes consumed so far."""
        return self._position * self.encoding.unit_size

    def __iter__(self) -> "CodeUnitDecoder":
        return self

    def __next__(self) -> DecodedChar:
        start = self._position
        unit = self._pull()
        if unit is None:
            raise StopIteration
        return self._decode(unit, start)

    def _decode(self, unit: int, start: int) -> DecodedChar:  # pragma: no cover - abstract
        raise NotImplementedError

    def _pull(self) -> Optional[int]:
        if self._pending is not None:
            unit, self._pending = self._pending, None
        else:
            try:
                unit = next(self._units)
            except StopIteration:
                return None
        self._position += 1
        return unit

    def _push_back(self, unit: int) -> None:
        self._pending = unit
        self._position -= 1

    def _invalid(self, start: int, units: Sequence[int]) -> DecodedChar:
        if self.policy is ErrorPolicy.STRICT:
            raise InvalidSequence(start, units, self.encoding)
        logger.debug(
            "decoder.invalid_sequence.replaced",
            encoding=self.encoding.value,
            position=start,
            units=list(units),
        )
        return DecodedChar.inherent(REPLACEMENT_CHARACTER, self.encoding)

    def _truncated(self, start: int, units: Sequence[int]) -> TruncatedSequence:
        logger.debug(
            "decoder.truncated_sequence",
            encoding=self.encoding.value,
            position=start,
            units=list(units),
        )
        return TruncatedSequence(start, units, self.encoding)


__all__ = ["CodeUnitDecoder"]
