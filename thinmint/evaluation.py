"""Static evaluation terms: piece-square tables and positional heuristics."""

from __future__ import annotations

from enum import Enum

from .attacks import (
    bishop_attacks,
    king_attacks,
    knight_attacks,
    pawn_attacks,
    queen_attacks,
    rook_attacks,
)
from .bitboard import (
    BB_EMPTY,
    BB_FILE,
    BB_RANK,
    BB_RANK_2,
    BB_RANK_3,
    BB_RANK_4,
    BB_RANK_5,
    BB_RANK_6,
    BB_RANK_7,
    file_of,
    iter_squares,
    make_square,
    popcount,
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


class EvalPhase(Enum):
    OPENING = "opening"
    ENDGAME = "endgame"


CENTER_SQUARES = (
    square_bb(make_square(3, 3))
    | square_bb(make_square(4, 3))
    | square_bb(make_square(3, 4))
    | square_bb(make_square(4, 4))
)
WHITE_SPACE_AREA = BB_RANK_5 | BB_RANK_6 | BB_RANK_7
BLACK_SPACE_AREA = BB_RANK_2 | BB_RANK_3 | BB_RANK_4

TEMPO_BONUS = 10

# Tables are indexed by square from White's point of view: a1 first, h8 last.
PAWN_PST = (
      0,   0,   0,   0,   0,   0,   0,   0,
     50,  50,  50,  50,  50,  50,  50,  50,
     10,  10,  20,  30,  30,  20,  10,  10,
      5,   5,  10,  25,  25,  10,   5,   5,
      0,   0,   0,  20,  20,   0,   0,   0,
      5,  -5, -10,   0,   0, -10,  -5,   5,
      5,  10,  10, -20, -20,  10,  10,   5,
      0,   0,   0,   0,   0,   0,   0,   0,
)

KNIGHT_PST = (
    -50, -40, -30, -30, -30, -30, -40, -50,
    -40, -20,   0,   0,   0,   0, -20, -40,
    -30,   0,  10,  15,  15,  10,   0, -30,
    -30,   5,  15,  20,  20,  15,   5, -30,
    -30,   0,  15,  20,  20,  15,   0, -30,
    -30,   5,  10,  15,  15,  10,   5, -30,
    -40, -20,   0,   5,   5,   0, -20, -40,
    -50, -40, -30, -30, -30, -30, -40, -50,
)

BISHOP_PST = (
    -20, -10, -10, -10, -10, -10, -10, -20,
    -10,   0,   0,   0,   0,   0,   0, -10,
    -10,   0,   5,  10,  10,   5,   0, -10,
    -10,   5,   5,  10,  10,   5,   5, -10,
    -10,   0,  10,  10,  10,  10,   0, -10,
    -10,  10,  10,  10,  10,  10,  10, -10,
    -10,   5,   0,   0,   0,   0,   5, -10,
    -20, -10, -10, -10, -10, -10, -10, -20,
)

ROOK_PST = (
      0,   0,   0,   0,   0,   0,   0,   0,
      5,  10,  10,  10,  10,  10,  10,   5,
     -5,   0,   0,   0,   0,   0,   0,  -5,
     -5,   0,   0,   0,   0,   0,   0,  -5,
     -5,   0,   0,   0,   0,   0,   0,  -5,
     -5,   0,   0,   0,   0,   0,   0,  -5,
     -5,   0,   0,   0,   0,   0,   0,  -5,
      0,   0,   0,   5,   5,   0,   0,   0,
)

QUEEN_PST = (
    -20, -10, -10,  -5,  -5, -10, -10, -20,
    -10,   0,   0,   0,   0,   0,   0, -10,
    -10,   0,   5,   5,   5,   5,   0, -10,
     -5,   0,   5,   5,   5,   5,   0,  -5,
      0,   0,   5,   5,   5,   5,   0,  -5,
    -10,   5,   5,   5,   5,   5,   0, -10,
    -10,   0,   5,   0,   0,   0,   0, -10,
    -20, -10, -10,  -5,  -5, -10, -10, -20,
)

KING_PST = (
    -30, -40, -40, -50, -50, -40, -40, -30,
    -30, -40, -40, -50, -50, -40, -40, -30,
    -30, -40, -40, -50, -50, -40, -40, -30,
    -30, -40, -40, -50, -50, -40, -40, -30,
    -20, -30, -30, -40, -40, -30, -30, -20,
    -10, -20, -20, -20, -20, -20, -20, -10,
     20,  20,   0,   0,   0,   0,  20,  20,
     20,  30,  10,   0,   0,  10,  30,  20,
)

PAWN_ENDGAME_PST = (
      0,   0,   0,   0,   0,   0,   0,   0,
     10,  10,  10,  10,  10,  10,  10,  10,
     10,  10,  20,  25,  25,  20,  10,  10,
     15,  15,  25,  35,  35,  25,  15,  15,
     25,  25,  35,  45,  45,  35,  25,  25,
     40,  40,  50,  60,  60,  50,  40,  40,
     70,  70,  80,  90,  90,  80,  70,  70,
      0,   0,   0,   0,   0,   0,   0,   0,
)

KNIGHT_ENDGAME_PST = (
    -40, -30, -20, -20, -20, -20, -30, -40,
    -30, -10,   0,   5,   5,   0, -10, -30,
    -20,   0,  10,  15,  15,  10,   0, -20,
    -20,   5,  15,  20,  20,  15,   5, -20,
    -20,   5,  15,  20,  20,  15,   5, -20,
    -20,   0,  10,  15,  15,  10,   0, -20,
    -30, -10,   0,   5,   5,   0, -10, -30,
    -40, -30, -20, -20, -20, -20, -30, -40,
)

BISHOP_ENDGAME_PST = (
    -10, -10, -10, -10, -10, -10, -10, -10,
    -10,   5,   0,   0,   0,   0,   5, -10,
    -10,   0,  10,  10,  10,  10,   0, -10,
    -10,   0,  10,  15,  15,  10,   0, -10,
    -10,   0,  10,  15,  15,  10,   0, -10,
    -10,   0,  10,  10,  10,  10,   0, -10,
    -10,   5,   0,   0,   0,   0,   5, -10,
    -10, -10, -10, -10, -10, -10, -10, -10,
)

ROOK_ENDGAME_PST = (
      0,   0,   5,  10,  10,   5,   0,   0,
      5,  10,  10,  15,  15,  10,  10,   5,
      0,   5,  10,  10,  10,  10,   5,   0,
      0,   5,  10,  10,  10,  10,   5,   0,
      0,   5,  10,  10,  10,  10,   5,   0,
      0,   5,  10,  10,  10,  10,   5,   0,
      5,  10,  10,  15,  15,  10,  10,   5,
      0,   0,   5,  10,  10,   5,   0,   0,
)

QUEEN_ENDGAME_PST = (
    -10, -10,  -5,  -5,  -5,  -5, -10, -10,
    -10,   0,   0,   0,   0,   0,   0, -10,
     -5,   0,   5,   5,   5,   5,   0,  -5,
     -5,   0,   5,  10,  10,   5,   0,  -5,
     -5,   0,   5,  10,  10,   5,   0,  -5,
     -5,   0,   5,   5,   5,   5,   0,  -5,
    -10,   0,   0,   0,   0,   0,   0, -10,
    -10, -10,  -5,  -5,  -5,  -5, -10, -10,
)

KING_ENDGAME_PST = (
    -50, -30, -20, -10, -10, -20, -30, -50,
    -30, -10,  10,  20,  20,  10, -10, -30,
    -20,  10,  30,  40,  40,  30,  10, -20,
    -10,  20,  40,  50,  50,  40,  20, -10,
    -10,  20,  40,  50,  50,  40,  20, -10,
    -20,  10,  30,  40,  40,  30,  10, -20,
    -30, -10,  10,  20,  20,  10, -10, -30,
    -50, -30, -20, -10, -10, -20, -30, -50,
)

_PST = {
    EvalPhase.OPENING: {
        PieceType.PAWN: PAWN_PST,
        PieceType.KNIGHT: KNIGHT_PST,
        PieceType.BISHOP: BISHOP_PST,
        PieceType.ROOK: ROOK_PST,
        PieceType.QUEEN: QUEEN_PST,
        PieceType.KING: KING_PST,
    },
    EvalPhase.ENDGAME: {
        PieceType.PAWN: PAWN_ENDGAME_PST,
        PieceType.KNIGHT: KNIGHT_ENDGAME_PST,
        PieceType.BISHOP: BISHOP_ENDGAME_PST,
        PieceType.ROOK: ROOK_ENDGAME_PST,
        PieceType.QUEEN: QUEEN_ENDGAME_PST,
        PieceType.KING: KING_ENDGAME_PST,
    },
}

_NON_KING = (PieceType.PAWN, PieceType.KNIGHT, PieceType.BISHOP,
             PieceType.ROOK, PieceType.QUEEN)
_MOBILE = (PieceType.KNIGHT, PieceType.BISHOP, PieceType.ROOK, PieceType.QUEEN)

# Multiplier that turns a side's own score into White's point of view.
_SIGN = {Color.WHITE: 1, Color.BLACK: -1}


def _adjacent_files(file: int) -> int:
    files = BB_EMPTY
    if file > 0:
        files |= BB_FILE[file - 1]
    if file < 7:
        files |= BB_FILE[file + 1]
    return files


def _forward_ranks(rank: int, color: Color) -> int:
    ahead = range(rank + 1, 8) if color == Color.WHITE else range(rank - 1, -1, -1)
    ranks = BB_EMPTY
    for r in ahead:
        ranks |= BB_RANK[r]
    return ranks


def _attacks_for_piece(board: BoardState, sq: int, piece_type: PieceType, color: Color) -> int:
    occupancy = board.all_occupancy
    if piece_type == PieceType.PAWN:
        return pawn_attacks(sq, color)
    if piece_type == PieceType.KNIGHT:
        return knight_attacks(sq)
    if piece_type == PieceType.BISHOP:
        return bishop_attacks(sq, occupancy)
    if piece_type == PieceType.ROOK:
        return rook_attacks(sq, occupancy)
    if piece_type == PieceType.QUEEN:
        return queen_attacks(sq, occupancy)
    if piece_type == PieceType.KING:
        return king_attacks(sq)
    return BB_EMPTY


def _attacked_count(board: BoardState, color: Color, piece_types, target: int) -> int:
    return sum(
        popcount(_attacks_for_piece(board, sq, pt, color) & target)
        for pt in piece_types
        for sq in iter_squares(board.pieces_of(color, pt))
    )


def get_pst(piece_type: PieceType | None, phase: EvalPhase = EvalPhase.OPENING):
    """The piece-square table for a piece type and phase, or None if unknown."""
    return _PST[phase].get(piece_type)


def evaluate_piece_position(
    sq: int, piece_type: PieceType | None, is_white: bool, phase: EvalPhase = EvalPhase.OPENING
) -> int:
    """Table bonus for a piece on ``sq``; Black's squares are mirrored by rank."""
    pst = get_pst(piece_type, phase)
    if pst is None:
        return 0
    index = sq if is_white else (7 - rank_of(sq)) * 8 + file_of(sq)
    return pst[index]


def evaluate_position(board: BoardState, phase: EvalPhase = EvalPhase.OPENING) -> int:
    """Piece-square score, White minus Black."""
    score = 0
    for color in Color:
        is_white = color == Color.WHITE
        side = sum(
            evaluate_piece_position(sq, pt, is_white, phase)
            for pt in PieceType
            for sq in iter_squares(board.pieces_of(color, pt))
        )
        score += _SIGN[color] * side
    return score


def evaluate_pawn_structure(board: BoardState) -> int:
    """Doubled, isolated and passed pawn terms, White minus Black."""
    score = 0
    for color in Color:
        pawns = board.pieces_of(color, PieceType.PAWN)
        enemy_pawns = board.pieces_of(color.opponent(), PieceType.PAWN)
        color_score = 0

        for file_bb in BB_FILE:
            count = popcount(pawns & file_bb)
            if count > 1:
                color_score -= 15 * (count - 1)

        for sq in iter_squares(pawns):
            file, rank = file_of(sq), rank_of(sq)
            if not pawns & _adjacent_files(file):
                color_score -= 10
            passed_mask = (BB_FILE[file] | _adjacent_files(file)) & _forward_ranks(rank, color)
            if not enemy_pawns & passed_mask:
                advancement = rank if color == Color.WHITE else 7 - rank
                color_score += 20 + 5 * advancement

        score += _SIGN[color] * color_score
    return score


def evaluate_mobility(board: BoardState) -> int:
    """Reachable squares of minor and major pieces, White minus Black."""
    score = 0
    for color in Color:
        not_own = ~board.occupancy_of(color)
        mobility = _attacked_count(board, color, _MOBILE, not_own)
        score += _SIGN[color] * mobility * 2
    return score


def evaluate_center_control(board: BoardState) -> int:
    """Attacks on d4, e4, d5 and e5, White minus Black."""
    score = 0
    for color in Color:
        controlled = _attacked_count(board, color, tuple(PieceType), CENTER_SQUARES)
        score += _SIGN[color] * controlled * 5
    return score


def evaluate_king_safety(board: BoardState) -> int:
    """Pawn shield minus enemy pressure on the king ring, White minus Black."""
    score = 0
    for color in Color:
        king = board.king_square(color)
        if king is None:
            continue
        king_bb = square_bb(king)
        if color == Color.WHITE:
            shield = shift_north(king_bb) | shift_northeast(king_bb) | shift_northwest(king_bb)
        else:
            shield = shift_south(king_bb) | shift_southeast(king_bb) | shift_southwest(king_bb)
        shield_pawns = popcount(shield & board.pieces_of(color, PieceType.PAWN))
        pressure = _attacked_count(board, color.opponent(), _NON_KING, king_attacks(king))
        score += _SIGN[color] * (8 * shield_pawns - 6 * pressure)
    return score


def evaluate_space(board: BoardState) -> int:
    """Pieces in the opponent's half, White minus Black."""
    white_space = popcount(board.occupancy_of(Color.WHITE) & WHITE_SPACE_AREA)
    black_space = popcount(board.occupancy_of(Color.BLACK) & BLACK_SPACE_AREA)
    return (white_space - black_space) * 2


def evaluate_tempo(board: BoardState) -> int:
    """Bonus for the side to move, from White's point of view."""
    return TEMPO_BONUS * _SIGN[board.side_to_move]


def evaluate_positional_terms(board: BoardState) -> int:
    """Sum of the positional terms, from White's point of view."""
    return (
        evaluate_pawn_structure(board)
        + evaluate_mobility(board)
        + evaluate_center_control(board)
        + evaluate_king_safety(board)
        + evaluate_space(board)
        + evaluate_tempo(board)
    )