"""Board coordinates and square helpers.

Canonical square indexing (little-endian rank-file):
    a1=0, b1=1, ..., h1=7
    a2=8, ..., h2=15
    ...
    a8=56, ..., h8=63
"""

from __future__ import annotations

from enum import IntEnum

NUM_SQUARES = 64
MAX_SQUARE = NUM_SQUARES - 1
MASK_64 = (1 << 64) - 1


class File(IntEnum):
    FILE_A = 0
    FILE_B = 1
    FILE_C = 2
    FILE_D = 3
    FILE_E = 4
    FILE_F = 5
    FILE_G = 6
    FILE_H = 7


class Rank(IntEnum):
    # Iteration order is RANK_1 first; rendering relies on it.
    RANK_1 = 0
    RANK_2 = 1
    RANK_3 = 2
    RANK_4 = 3
    RANK_5 = 4
    RANK_6 = 5
    RANK_7 = 6
    RANK_8 = 7


FILES = "abcdefgh"
RANKS = "12345678"

SQUARES = [f"{f}{r}" for r in RANKS for f in FILES]
SQUARE_TO_INDEX = {sq: idx for idx, sq in enumerate(SQUARES)}


def square_from_file_rank(file: int, rank: int) -> int:
    if not 0 <= file < 8:
        raise ValueError(f"File out of range: {file}")
    if not 0 <= rank < 8:
        raise ValueError(f"Rank out of range: {rank}")
    return rank * 8 + file


def _check_index(index: int) -> None:
    if not 0 <= index < NUM_SQUARES:
        raise ValueError(f"Square index out of range: {index}")


def file_of(index: int) -> File:
    _check_index(index)
    return File(index % 8)


def rank_of(index: int) -> Rank:
    _check_index(index)
    return Rank(index // 8)


def square_name(index: int) -> str:
    _check_index(index)
    return SQUARES[index]


def square_index(square: str) -> int:
    try:
        return SQUARE_TO_INDEX[square]
    except KeyError as exc:
        raise ValueError(f"Invalid square: {square}") from exc
