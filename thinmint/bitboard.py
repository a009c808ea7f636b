"""64-bit bitboards and square helpers.

Squares are numbered 0 (a1) through 63 (h8); bit ``n`` of a bitboard marks
square ``n``.
"""

from __future__ import annotations

from collections.abc import Iterator

BB_EMPTY = 0
BB_ALL = 0xFFFF_FFFF_FFFF_FFFF

BB_FILE_A = 0x0101_0101_0101_0101
BB_FILE_B = BB_FILE_A << 1
BB_FILE_C = BB_FILE_A << 2
BB_FILE_D = BB_FILE_A << 3
BB_FILE_E = BB_FILE_A << 4
BB_FILE_F = BB_FILE_A << 5
BB_FILE_G = BB_FILE_A << 6
BB_FILE_H = BB_FILE_A << 7

BB_RANK_1 = 0xFF
BB_RANK_2 = BB_RANK_1 << 8
BB_RANK_3 = BB_RANK_1 << 16
BB_RANK_4 = BB_RANK_1 << 24
BB_RANK_5 = BB_RANK_1 << 32
BB_RANK_6 = BB_RANK_1 << 40
BB_RANK_7 = BB_RANK_1 << 48
BB_RANK_8 = BB_RANK_1 << 56

BB_FILE = (BB_FILE_A, BB_FILE_B, BB_FILE_C, BB_FILE_D,
           BB_FILE_E, BB_FILE_F, BB_FILE_G, BB_FILE_H)
BB_RANK = (BB_RANK_1, BB_RANK_2, BB_RANK_3, BB_RANK_4,
           BB_RANK_5, BB_RANK_6, BB_RANK_7, BB_RANK_8)

FILE_NAMES = "abcdefgh"
RANK_NAMES = "12345678"

_NOT_FILE_A = BB_ALL & ~BB_FILE_A
_NOT_FILE_H = BB_ALL & ~BB_FILE_H


def _check_square(sq: int) -> None:
    if not 0 <= sq < 64:
        raise ValueError(f"square out of range: {sq}")


def square_bb(sq: int) -> int:
    """Return the bitboard holding only square ``sq``."""
    _check_square(sq)
    return 1 << sq


def popcount(bb: int) -> int:
    """Number of set squares."""
    return bb.bit_count()


def lsb_index(bb: int) -> int:
    """Index of the lowest set square."""
    if not bb:
        raise ValueError("empty bitboard has no least significant bit")
    return (bb & -bb).bit_length() - 1


def msb_index(bb: int) -> int:
    """Index of the highest set square."""
    if not bb:
        raise ValueError("empty bitboard has no most significant bit")
    return bb.bit_length() - 1


def iter_squares(bb: int) -> Iterator[int]:
    """Yield the set squares from lowest to highest."""
    while bb:
        low = bb & -bb
        yield low.bit_length() - 1
        bb ^= low


def file_of(sq: int) -> int:
    return sq & 7


def rank_of(sq: int) -> int:
    return sq >> 3


def make_square(file: int, rank: int) -> int:
    if not (0 <= file < 8 and 0 <= rank < 8):
        raise ValueError(f"file/rank out of range: {file}, {rank}")
    return rank * 8 + file


def square_from_name(name: str) -> int:
    """Parse an algebraic square name such as ``"e4"``."""
    if len(name) != 2 or name[0] not in FILE_NAMES or name[1] not in RANK_NAMES:
        raise ValueError(f"invalid square name: {name!r}")
    return make_square(FILE_NAMES.index(name[0]), RANK_NAMES.index(name[1]))


def shift_north(bb: int) -> int:
    return (bb << 8) & BB_ALL


def shift_south(bb: int) -> int:
    return bb >> 8


def shift_east(bb: int) -> int:
    return ((bb & _NOT_FILE_H) << 1) & BB_ALL


def shift_west(bb: int) -> int:
    return (bb & _NOT_FILE_A) >> 1


def shift_northeast(bb: int) -> int:
    return ((bb & _NOT_FILE_H) << 9) & BB_ALL


def shift_northwest(bb: int) -> int:
    return ((bb & _NOT_FILE_A) << 7) & BB_ALL


def shift_southeast(bb: int) -> int:
    return (bb & _NOT_FILE_H) >> 7


def shift_southwest(bb: int) -> int:
    return (bb & _NOT_FILE_A) >> 9