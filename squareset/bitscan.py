"""Lowest-set-bit scan strategies.

Every strategy returns the index of the least significant set bit of a 64-bit
value, or ``EMPTY_SCAN`` (64) when no bit is set. They are interchangeable
behind ``BitScan``.
"""

from __future__ import annotations

import logging
import os
from typing import Protocol

from .constants import MASK_64, NUM_SQUARES

logger = logging.getLogger(__name__)

EMPTY_SCAN = NUM_SQUARES

DEBRUIJN_64 = 0x03F79D71B4CB0A89


class BitScan(Protocol):
    name: str

    def lowest_index(self, value: int) -> int:
        ...


class TrailingZeroScan:
    """Portable trailing-zero count using Python's ``int.bit_length``."""

    name = "portable"

    def lowest_index(self, value: int) -> int:
        if value == 0:
            return EMPTY_SCAN
        return (value & -value).bit_length() - 1


def _build_debruijn_table() -> list[int]:
    table = [0] * NUM_SQUARES
    for index in range(NUM_SQUARES):
        table[(((1 << index) * DEBRUIJN_64) & MASK_64) >> 58] = index
    return table


class DeBruijnScan:
    """Table lookup keyed by the top six bits of ``lsb * DEBRUIJN_64``."""

    name = "debruijn"

    def __init__(self) -> None:
        self._table = _build_debruijn_table()

    def lowest_index(self, value: int) -> int:
        if value == 0:
            return EMPTY_SCAN
        lsb = value & -value
        return self._table[((lsb * DEBRUIJN_64) & MASK_64) >> 58]


BITSCANS: dict[str, BitScan] = {
    TrailingZeroScan.name: TrailingZeroScan(),
    DeBruijnScan.name: DeBruijnScan(),
}


def get_bitscan(name: str) -> BitScan:
    try:
        return BITSCANS[name]
    except KeyError as exc:
        raise ValueError(f"Unknown bit scan strategy: {name}") from exc


def _resolve(scan: str | BitScan) -> BitScan:
    if isinstance(scan, str):
        return get_bitscan(scan)
    if not callable(getattr(scan, "lowest_index", None)):
        raise TypeError(f"Not a bit scan strategy: {scan!r}")
    return scan


_default_bitscan: BitScan = _resolve(os.environ.get("SQUARESET_BITSCAN", TrailingZeroScan.name))


def get_default_bitscan() -> BitScan:
    return _default_bitscan


def set_default_bitscan(scan: str | BitScan) -> BitScan:
    """Select the strategy used by ``BitBoard.pop_bit`` when none is passed.

    Returns the previously active strategy so callers can restore it.
    """
    global _default_bitscan
    previous = _default_bitscan
    _default_bitscan = _resolve(scan)
    logger.info("default bit scan: %s -> %s", previous.name, _default_bitscan.name)
    return previous
