"""64-bit square sets for an 8x8 board engine."""

from .bitboards import BitBoard
from .bitscan import get_default_bitscan, set_default_bitscan
from .errors import Err, ErrorKind, InvalidIndexError, Ok, UnsetNonSetBitError

__all__ = [
    "BitBoard",
    "Err",
    "ErrorKind",
    "InvalidIndexError",
    "Ok",
    "UnsetNonSetBitError",
    "get_default_bitscan",
    "set_default_bitscan",
]
