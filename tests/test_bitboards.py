import copy
import io

import pytest

from squareset.bitboards import BitBoard
from squareset.bitscan import BITSCANS
from squareset.errors import ErrorKind, InvalidIndexError, UnsetNonSetBitError


def test_render_white_pawn_rank() -> None:
    expected = "00000000\n11111111\n00000000\n00000000\n00000000\n00000000\n00000000\n00000000\n"
    assert str(BitBoard.from_raw(0xFF00)) == expected


def test_render_corners() -> None:
    board = BitBoard.from_raw((1 << 0) | (1 << 63))
    rows = str(board).splitlines()

    assert len(rows) == 8
    assert all(len(row) == 8 for row in rows)
    assert rows[0] == "10000000"
    assert rows[7] == "00000001"


def test_render_propagates_write_failure() -> None:
    class BrokenStream(io.StringIO):
        def write(self, text: str) -> int:
            raise OSError("destination unavailable")

    with pytest.raises(OSError, match="destination unavailable"):
        BitBoard.from_raw(0xFF00).render(BrokenStream())


def test_count_bits_starting_white_pawns() -> None:
    assert BitBoard.from_raw(0xFF00).count_bits() == 8


def test_count_bits_empty_and_full() -> None:
    assert BitBoard.empty().count_bits() == 0
    assert BitBoard.from_raw((1 << 64) - 1).count_bits() == 64
    assert len(BitBoard.from_raw(0b1011)) == 3


@pytest.mark.parametrize("index", range(64))
def test_set_then_check_only_that_bit(index: int) -> None:
    board = BitBoard()
    assert board.set_bit(index).unwrap() == 1 << index

    for other in range(64):
        assert board.check_bit(other).unwrap() is (other == index)


@pytest.mark.parametrize("index", range(64))
def test_check_bit_on_empty_board(index: int) -> None:
    assert BitBoard.empty().check_bit(index).unwrap() is False


def test_check_set_bit_valid_index() -> None:
    assert BitBoard.from_raw(0x0000_0000_0000_0100).check_bit(8).unwrap() is True


def test_check_non_set_bit_valid_index() -> None:
    assert BitBoard.from_raw(0x000F_0000_0000_0000).check_bit(8).unwrap() is False


def test_set_bit_is_idempotent() -> None:
    board = BitBoard.from_raw(0x100)
    assert board.set_bit(8).unwrap() == 0x100
    assert board.to_raw() == 0x100


@pytest.mark.parametrize("operation", ["check_bit", "set_bit", "unset_bit"])
@pytest.mark.parametrize("index", [64, 65, 255, -1])
def test_invalid_index_rejected_without_mutation(operation: str, index: int) -> None:
    board = BitBoard.from_raw(0x0C0F_00D0_0000_0100)

    result = getattr(board, operation)(index)

    assert result.is_err()
    assert isinstance(result.error, InvalidIndexError)
    assert result.error.kind is ErrorKind.INVALID_INDEX
    assert result.error.index == index
    assert result.error.operation == operation
    assert board.to_raw() == 0x0C0F_00D0_0000_0100


def test_invalid_index_unwrap_raises() -> None:
    with pytest.raises(InvalidIndexError, match="64"):
        BitBoard().set_bit(64).unwrap()


def test_unset_set_bit_valid_index() -> None:
    board = BitBoard.from_raw(0x100)
    assert board.unset_bit(8).unwrap() == 0
    assert board.is_empty()


def test_unset_non_set_bit_rejected_without_mutation() -> None:
    board = BitBoard.from_raw(0x00F0_0000_0000_0000)

    result = board.unset_bit(8)

    assert result.is_err()
    assert isinstance(result.error, UnsetNonSetBitError)
    assert result.error.kind is ErrorKind.UNSET_NON_SET_BIT
    assert result.error.index == 8
    assert board.to_raw() == 0x00F0_0000_0000_0000
    with pytest.raises(UnsetNonSetBitError):
        result.unwrap()


@pytest.mark.parametrize("scan", list(BITSCANS.values()), ids=list(BITSCANS))
def test_pop_bit_empty_board(scan) -> None:
    board = BitBoard.empty()
    assert board.pop_bit(scan) is None
    assert board.is_empty()


@pytest.mark.parametrize("scan", list(BITSCANS.values()), ids=list(BITSCANS))
@pytest.mark.parametrize("index", [0, 8, 31, 63])
def test_pop_bit_single_set_bit(scan, index: int) -> None:
    board = BitBoard.from_raw(1 << index)
    assert board.pop_bit(scan) == index
    assert board == BitBoard.empty()


@pytest.mark.parametrize("scan", list(BITSCANS.values()), ids=list(BITSCANS))
def test_pop_bit_multiple_set_bits(scan) -> None:
    board = BitBoard.from_raw(0x0C0F_00D0_0000_0100)
    assert board.pop_bit(scan) == 8
    assert board == BitBoard.from_raw(0x0C0F_00D0_0000_0000)


def test_pop_bit_drains_in_ascending_order() -> None:
    board = BitBoard()
    for sq in (11, 2, 5, 63):
        board.set_bit(sq)

    popped = []
    while (sq := board.pop_bit()) is not None:
        popped.append(sq)

    assert popped == [2, 5, 11, 63]
    assert not board


def test_squares_does_not_mutate() -> None:
    board = BitBoard.from_raw(0b1010_0101)
    assert list(board.squares()) == [0, 2, 5, 7]
    assert board.to_raw() == 0b1010_0101


@pytest.mark.parametrize("raw", [0, 1, 0xFF00, 0x0C0F_00D0_0000_0100, (1 << 64) - 1])
def test_raw_round_trip(raw: int) -> None:
    assert BitBoard.from_raw(raw).to_raw() == raw


@pytest.mark.parametrize("raw", [-1, 1 << 64])
def test_from_raw_rejects_values_outside_64_bits(raw: int) -> None:
    with pytest.raises(ValueError):
        BitBoard.from_raw(raw)


def test_from_raw_rejects_non_int() -> None:
    with pytest.raises(TypeError):
        BitBoard.from_raw("0xFF00")  # type: ignore[arg-type]


def test_intersection_commutative_and_idempotent() -> None:
    a = BitBoard.from_raw(0x0C0F_00D0_0000_0100)
    b = BitBoard.from_raw(0xFFFF_0000_0000_FF00)

    assert a & b == b & a
    assert (a & b).to_raw() == 0x0C0F_0000_0000_0100
    assert a & a == a


def test_intersection_with_bare_int_is_rejected() -> None:
    with pytest.raises(TypeError):
        BitBoard.from_raw(0xFF00) & 0xFF  # type: ignore[operator]
    with pytest.raises(TypeError):
        0xFF & BitBoard.from_raw(0xFF00)  # type: ignore[operator]


def test_no_implicit_int_conversion() -> None:
    board = BitBoard.from_raw(0xFF00)
    with pytest.raises(TypeError):
        int(board)  # type: ignore[call-overload]
    with pytest.raises(TypeError):
        board + 1  # type: ignore[operator]
    assert board != 0xFF00


def test_copies_are_independent() -> None:
    original = BitBoard.from_raw(0x100)
    for clone in (original.copy(), copy.copy(original), copy.deepcopy(original)):
        clone.set_bit(0)
        assert clone.to_raw() == 0x101
    assert original.to_raw() == 0x100


def test_unhashable_and_repr() -> None:
    with pytest.raises(TypeError):
        hash(BitBoard())
    with pytest.raises(TypeError):
        {BitBoard.from_raw(1)}
    assert repr(BitBoard.from_raw(0xFF00)) == "BitBoard(0x000000000000FF00)"


@pytest.mark.parametrize("reported", [64 + 6, 1, -1])
def test_pop_bit_rejects_bad_scan_index(reported: int) -> None:
    class BadScan:
        name = "bad"

        def lowest_index(self, value: int) -> int:
            return reported

    board = BitBoard.from_raw(1)

    with pytest.raises(ValueError, match="bad"):
        board.pop_bit(BadScan())
    assert board.to_raw() == 1


@pytest.mark.parametrize("operation", ["check_bit", "set_bit", "unset_bit"])
def test_bool_index_rejected(operation: str) -> None:
    board = BitBoard.from_raw(0b11)

    with pytest.raises(TypeError):
        getattr(board, operation)(True)
    assert board.to_raw() == 0b11


def test_rejections_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    board = BitBoard()
    with caplog.at_level("DEBUG", logger="squareset.bitboards"):
        board.set_bit(64)
        board.unset_bit(3)

    messages = [record.getMessage() for record in caplog.records]
    assert "set_bit rejected index 64" in messages
    assert "unset_bit on clear bit 3" in messages
