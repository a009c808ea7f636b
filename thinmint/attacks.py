"""Attack generation for every piece type."""

from __future__ import annotations

from .bitboard import (
    BB_EMPTY,
    BB_RANK_2,
    BB_RANK_7,
    file_of,
    make_square,
    rank_of,
    shift_north,
    shift_northeast,
    shift_northwest,
    shift_south,
    shift_southeast,
    shift_southwest,
    square_bb,
)
from .board import BoardState, Color, PieceType

_KNIGHT_DELTAS = ((1, 2), (2, 1), (2, -1), (1, -2), (-1, -2), (-2, -1), (-2, 1), (-1, 2))
_KING_DELTAS = ((0, 1), (1, 1), (1, 0), (1, -1), (0, -1), (-1, -1), (-1, 0), (-1, 1))
_BISHOP_DIRECTIONS = ((1, 1), (-1, 1), (1, -1), (-1, -1))
_ROOK_DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def _step_table(deltas) -> tuple[int, ...]:
    table = []
    for sq in range(64):
        f, r = file_of(sq), rank_of(sq)
        attacks = BB_EMPTY
        for df, dr in deltas:
            if 0 <= f + df < 8 and 0 <= r + dr < 8:
                attacks |= square_bb(make_square(f + df, r + dr))
        table.append(attacks)
    return tuple(table)


PAWN_ATTACKS = (
    tuple(shift_northeast(1 << sq) | shift_northwest(1 << sq) for sq in range(64)),
    tuple(shift_southeast(1 << sq) | shift_southwest(1 << sq) for sq in range(64)),
)
KNIGHT_ATTACKS = _step_table(_KNIGHT_DELTAS)
KING_ATTACKS = _step_table(_KING_DELTAS)


def pawn_attacks(sq: int, color: Color) -> int:
    return PAWN_ATTACKS[color][sq]


def knight_attacks(sq: int) -> int:
    return KNIGHT_ATTACKS[sq]


def king_attacks(sq: int) -> int:
    return KING_ATTACKS[sq]


def all_pawn_attacks(pawns: int, color: Color) -> int:
    """Squares attacked by every pawn in ``pawns``."""
    if color == Color.WHITE:
        return shift_northeast(pawns) | shift_northwest(pawns)
    return shift_southeast(pawns) | shift_southwest(pawns)


def _non_promoting(pawns: int, color: Color) -> int:
    return pawns & ~(BB_RANK_7 if color == Color.WHITE else BB_RANK_2)


def _promoting(pawns: int, color: Color) -> int:
    return pawns & (BB_RANK_7 if color == Color.WHITE else BB_RANK_2)


def _push(bb: int, color: Color) -> int:
    return shift_north(bb) if color == Color.WHITE else shift_south(bb)


def pawn_pushes(pawns: int, occupancy: int, color: Color) -> int:
    """Single-push targets that do not promote."""
    return _push(_non_promoting(pawns, color), color) & ~occupancy


def pawn_double_pushes(pawns: int, occupancy: int, color: Color) -> int:
    """Double-push targets from the starting rank; both squares must be empty."""
    start = pawns & (BB_RANK_2 if color == Color.WHITE else BB_RANK_7)
    first = _push(start, color) & ~occupancy
    return _push(first, color) & ~occupancy


def pawn_promotion_pushes(pawns: int, occupancy: int, color: Color) -> int:
    return _push(_promoting(pawns, color), color) & ~occupancy


def pawn_captures(pawns: int, enemy_pieces: int, color: Color) -> int:
    """Capture targets that do not promote."""
    return all_pawn_attacks(_non_promoting(pawns, color), color) & enemy_pieces


def pawn_promotion_captures(pawns: int, enemy_pieces: int, color: Color) -> int:
    return all_pawn_attacks(_promoting(pawns, color), color) & enemy_pieces


def _slide(sq: int, occupancy: int, directions) -> int:
    attacks = BB_EMPTY
    f0, r0 = file_of(sq), rank_of(sq)
    for df, dr in directions:
        f, r = f0 + df, r0 + dr
        while 0 <= f < 8 and 0 <= r < 8:
            bit = 1 << (r * 8 + f)
            attacks |= bit
            if bit & occupancy:
                break
            f += df
            r += dr
    return attacks


def bishop_attacks(sq: int, occupancy: int) -> int:
    """Diagonal attacks, stopping at (and including) the first blocker."""
    return _slide(sq, occupancy, _BISHOP_DIRECTIONS)


def rook_attacks(sq: int, occupancy: int) -> int:
    """Orthogonal attacks, stopping at (and including) the first blocker."""
    return _slide(sq, occupancy, _ROOK_DIRECTIONS)


def queen_attacks(sq: int, occupancy: int) -> int:
    return bishop_attacks(sq, occupancy) | rook_attacks(sq, occupancy)


def is_square_attacked(board: BoardState, sq: int, by_color: Color) -> bool:
    """Whether any piece of ``by_color`` attacks ``sq``."""
    def theirs(piece_type: PieceType) -> int:
        return board.pieces_of(by_color, piece_type)

    defender = Color.BLACK if by_color == Color.WHITE else Color.WHITE
    if pawn_attacks(sq, defender) & theirs(PieceType.PAWN):
        return True
    if KNIGHT_ATTACKS[sq] & theirs(PieceType.KNIGHT):
        return True
    if KING_ATTACKS[sq] & theirs(PieceType.KING):
        return True
    occupancy = board.all_occupancy
    queens = theirs(PieceType.QUEEN)
    if bishop_attacks(sq, occupancy) & (theirs(PieceType.BISHOP) | queens):
        return True
    return bool(rook_attacks(sq, occupancy) & (theirs(PieceType.ROOK) | queens))


def ep_square_from_double_push(to_sq: int, color: Color) -> int | None:
    """En passant target behind a double push landing on ``to_sq``, else None."""
    if color == Color.WHITE:
        return make_square(file_of(to_sq), 2) if rank_of(to_sq) == 3 else None
    return make_square(file_of(to_sq), 5) if rank_of(to_sq) == 4 else None