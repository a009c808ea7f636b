"""Chess position state held in bitboards."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, IntFlag

from .bitboard import BB_EMPTY, lsb_index, make_square, popcount, square_bb


class Color(IntEnum):
    WHITE = 0
    BLACK = 1

    def opponent(self) -> "Color":
        return Color.BLACK if self is Color.WHITE else Color.WHITE


class PieceType(IntEnum):
    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class CastlingRights(IntFlag):
    NONE = 0
    WHITE_KINGSIDE = 1
    WHITE_QUEENSIDE = 2
    BLACK_KINGSIDE = 4
    BLACK_QUEENSIDE = 8
    ALL = 15


START_POSITION_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_BACK_RANK = (
    PieceType.ROOK, PieceType.KNIGHT, PieceType.BISHOP, PieceType.QUEEN,
    PieceType.KING, PieceType.BISHOP, PieceType.KNIGHT, PieceType.ROOK,
)


def _empty_pieces() -> dict[tuple[Color, PieceType], int]:
    return {(c, pt): BB_EMPTY for c in Color for pt in PieceType}


@dataclass
class BoardState:
    """A chess position: piece bitboards plus game state."""

    pieces: dict = field(default_factory=_empty_pieces)
    white_occupancy: int = BB_EMPTY
    black_occupancy: int = BB_EMPTY
    all_occupancy: int = BB_EMPTY
    side_to_move: Color = Color.WHITE
    castling_rights: CastlingRights = CastlingRights.NONE
    en_passant_square: int | None = None
    halfmove_clock: int = 0
    fullmove_number: int = 1

    def clear(self) -> None:
        """Remove every piece and reset the game state."""
        self.pieces = _empty_pieces()
        self.white_occupancy = BB_EMPTY
        self.black_occupancy = BB_EMPTY
        self.all_occupancy = BB_EMPTY
        self.side_to_move = Color.WHITE
        self.castling_rights = CastlingRights.NONE
        self.en_passant_square = None
        self.halfmove_clock = 0
        self.fullmove_number = 1

    def reset_to_start_position(self) -> None:
        self.clear()
        for file, piece_type in enumerate(_BACK_RANK):
            self.put_piece(Color.WHITE, piece_type, make_square(file, 0))
            self.put_piece(Color.WHITE, PieceType.PAWN, make_square(file, 1))
            self.put_piece(Color.BLACK, PieceType.PAWN, make_square(file, 6))
            self.put_piece(Color.BLACK, piece_type, make_square(file, 7))
        self.castling_rights = CastlingRights.ALL

    def put_piece(self, color: Color, piece_type: PieceType, sq: int) -> None:
        """Place a piece on an empty square."""
        bit = square_bb(sq)
        if self.all_occupancy & bit:
            raise ValueError(f"square {sq} is already occupied")
        key = (Color(color), PieceType(piece_type))
        self.pieces[key] |= bit
        if key[0] is Color.WHITE:
            self.white_occupancy |= bit
        else:
            self.black_occupancy |= bit
        self.all_occupancy |= bit

    def remove_piece(self, sq: int) -> tuple[Color, PieceType]:
        """Take the piece off ``sq`` and return its colour and type."""
        bit = square_bb(sq)
        for (color, piece_type), bb in self.pieces.items():
            if bb & bit:
                self.pieces[(color, piece_type)] = bb & ~bit
                if color is Color.WHITE:
                    self.white_occupancy &= ~bit
                else:
                    self.black_occupancy &= ~bit
                self.all_occupancy &= ~bit
                return color, piece_type
        raise ValueError(f"square {sq} is empty")

    def pieces_of(self, color: Color, piece_type: PieceType) -> int:
        return self.pieces[(color, piece_type)]

    def occupancy_of(self, color: Color) -> int:
        return self.white_occupancy if color == Color.WHITE else self.black_occupancy

    def is_square_occupied(self, sq: int) -> bool:
        return bool(self.all_occupancy & square_bb(sq))

    def is_square_occupied_by(self, sq: int, color: Color) -> bool:
        return bool(self.occupancy_of(color) & square_bb(sq))

    def piece_type_at(self, sq: int) -> PieceType | None:
        bit = square_bb(sq)
        for (_, piece_type), bb in self.pieces.items():
            if bb & bit:
                return piece_type
        return None

    def color_at(self, sq: int) -> Color | None:
        bit = square_bb(sq)
        if self.white_occupancy & bit:
            return Color.WHITE
        if self.black_occupancy & bit:
            return Color.BLACK
        return None

    def is_empty(self) -> bool:
        return self.all_occupancy == BB_EMPTY

    def king_square(self, color: Color) -> int | None:
        kings = self.pieces_of(color, PieceType.KING)
        return lsb_index(kings) if kings else None

    def is_valid(self) -> bool:
        """Check one king per side, no overlapping pieces, consistent occupancy."""
        seen = BB_EMPTY
        by_color = {Color.WHITE: BB_EMPTY, Color.BLACK: BB_EMPTY}
        for (color, _), bb in self.pieces.items():
            if seen & bb:
                return False
            seen |= bb
            by_color[color] |= bb
        if any(popcount(self.pieces_of(c, PieceType.KING)) != 1 for c in Color):
            return False
        return (
            by_color[Color.WHITE] == self.white_occupancy
            and by_color[Color.BLACK] == self.black_occupancy
            and seen == self.all_occupancy
            and not (self.white_occupancy & self.black_occupancy)
        )

    def piece_count(self, color: Color | None = None, piece_type: PieceType | None = None) -> int:
        """Count all pieces, or those of one colour and type."""
        if color is None and piece_type is None:
            return popcount(self.all_occupancy)
        if color is None or piece_type is None:
            raise TypeError("color and piece_type must be given together")
        return popcount(self.pieces_of(color, piece_type))

    def toggle_side_to_move(self) -> None:
        self.side_to_move = Color(self.side_to_move).opponent()