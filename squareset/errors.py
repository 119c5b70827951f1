"""Error taxonomy and result values for square-set operations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, NoReturn, TypeVar, Union

T = TypeVar("T")


class ErrorKind(Enum):
    INVALID_INDEX = "invalid_index"
    UNSET_NON_SET_BIT = "unset_non_set_bit"


class BitBoardError(Exception):
    """Base class for caller-logic faults reported by BitBoard operations."""

    kind: ErrorKind

    def __init__(self, index: int, operation: str) -> None:
        self.index = index
        self.operation = operation
        super().__init__(self._describe())

    def _describe(self) -> str:
        return f"{self.operation}: {self.kind.value} {self.index}"


class InvalidIndexError(BitBoardError):
    kind = ErrorKind.INVALID_INDEX

    def _describe(self) -> str:
        return f"{self.operation}: index {self.index} is outside 0..63"


class UnsetNonSetBitError(BitBoardError):
    kind = ErrorKind.UNSET_NON_SET_BIT

    def _describe(self) -> str:
        return f"{self.operation}: bit {self.index} is not set"


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err:
    error: BitBoardError

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise self.error

    def unwrap_or(self, default: T) -> T:
        return default


Result = Union[Ok[T], Err]
