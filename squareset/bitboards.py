"""64-bit square sets.

Bit ``i`` of the wrapped integer marks square ``i`` (a1=0 ... h8=63). The
integer is the only state a ``BitBoard`` carries.
"""

from __future__ import annotations

import io
import logging
from typing import Iterator, TextIO

from .bitscan import EMPTY_SCAN, BitScan, get_default_bitscan
from .constants import MASK_64, MAX_SQUARE, File, Rank, square_from_file_rank
from .errors import Err, InvalidIndexError, Ok, Result, UnsetNonSetBitError

logger = logging.getLogger(__name__)


def _in_range(index: int) -> bool:
    if isinstance(index, bool):
        raise TypeError("BitBoard index must be an int, got bool")
    return 0 <= index <= MAX_SQUARE


def _invalid_index(index: int, operation: str) -> Err:
    logger.debug("%s rejected index %d", operation, index)
    return Err(InvalidIndexError(index, operation))


class BitBoard:
    __slots__ = ("_value",)

    def __init__(self, value: int = 0):
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"BitBoard value must be an int, got {type(value).__name__}")
        if not 0 <= value <= MASK_64:
            raise ValueError(f"BitBoard value out of 64-bit range: {value:#x}")
        self._value = value

    @classmethod
    def from_raw(cls, value: int) -> BitBoard:
        return cls(value)

    @classmethod
    def empty(cls) -> BitBoard:
        return cls(0)

    def to_raw(self) -> int:
        return self._value

    def copy(self) -> BitBoard:
        return BitBoard(self._value)

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> BitBoard:
        return self.copy()

    # -- bit algebra -------------------------------------------------------

    def count_bits(self) -> int:
        count = 0
        value = self._value
        while value:
            count += 1
            # Clears the lowest set bit.
            value &= value - 1
        return count

    def pop_bit(self, scan: BitScan | None = None) -> int | None:
        """Clear the lowest set bit and return its index, or ``None`` if empty."""
        scan = scan or get_default_bitscan()
        index = scan.lowest_index(self._value)
        if index == EMPTY_SCAN:
            return None
        if not 0 <= index <= MAX_SQUARE or not self._value & (1 << index):
            raise ValueError(f"Bit scan {scan.name!r} returned {index} for 0x{self._value:016X}")
        self._value ^= 1 << index
        return index

    def check_bit(self, index: int) -> Result[bool]:
        if not _in_range(index):
            return _invalid_index(index, "check_bit")
        return Ok(self._value & (1 << index) != 0)

    def set_bit(self, index: int) -> Result[int]:
        if not _in_range(index):
            return _invalid_index(index, "set_bit")
        self._value |= 1 << index
        return Ok(self._value)

    def unset_bit(self, index: int) -> Result[int]:
        """Clear the bit at ``index``.

        Unlike ``set_bit`` this is not idempotent: clearing a bit that is not
        set is reported as ``UnsetNonSetBitError``.
        """
        if not _in_range(index):
            return _invalid_index(index, "unset_bit")
        if not self._value & (1 << index):
            logger.debug("unset_bit on clear bit %d", index)
            return Err(UnsetNonSetBitError(index, "unset_bit"))
        # XOR toggles, so only reached when the bit is set.
        self._value ^= 1 << index
        return Ok(self._value)

    def is_empty(self) -> bool:
        return self._value == 0

    def squares(self) -> Iterator[int]:
        remaining = self.copy()
        while (index := remaining.pop_bit()) is not None:
            yield index

    def __len__(self) -> int:
        return self.count_bits()

    def __bool__(self) -> bool:
        return self._value != 0

    # -- conversion and rendering -------------------------------------------

    def __and__(self, other: object) -> BitBoard:
        if not isinstance(other, BitBoard):
            return NotImplemented
        return BitBoard(self._value & other._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitBoard):
            return NotImplemented
        return self._value == other._value

    # Mutable in place, so unhashable.
    __hash__ = None  # type: ignore[assignment]

    def render(self, stream: TextIO) -> None:
        """Write the board as 8 rows of ``0``/``1``, rank 1 first."""
        for rank in Rank:
            for file in File:
                index = square_from_file_rank(file, rank)
                stream.write("1" if self.check_bit(index).unwrap() else "0")
            stream.write("\n")

    def __str__(self) -> str:
        buffer = io.StringIO()
        self.render(buffer)
        return buffer.getvalue()

    def __repr__(self) -> str:
        return f"BitBoard(0x{self._value:016X})"
