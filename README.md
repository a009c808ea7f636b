# thinmint

A small chess core built on 64-bit bitboards held in Python integers. Square 0 is a1, square 7 is h1, square 56 is a8 and square 63 is h8. Bit `n` of a bitboard marks square `n`.

## Modules

### `thinmint.bitboard`

- Constants: `BB_EMPTY` and `BB_ALL`. `BB_FILE_A` … `BB_FILE_H` and `BB_RANK_1` … `BB_RANK_8` cover the files and ranks. The tuples `BB_FILE` and `BB_RANK` hold them in order.
- `square_bb(sq)` returns the bitboard of a single square. It raises `ValueError` if the square is outside 0–63.
- `popcount(bb)` counts the set squares.
- `lsb_index(bb)` and `msb_index(bb)` return the lowest and the highest set square. Both raise `ValueError` for an empty bitboard.
- `iter_squares(bb)` yields the set squares from lowest to highest.
- `file_of(sq)` and `rank_of(sq)` give the file and rank of a square. `make_square(file, rank)` builds a square from them. `square_from_name("e4")` parses a square name. The last two raise `ValueError` on bad input.
- `shift_north`, `shift_south`, `shift_east` and `shift_west` move a bitboard one step. So do `shift_northeast`, `shift_northwest`, `shift_southeast` and `shift_southwest`. Squares that would leave the board are dropped; none wrap to the other edge.

### `thinmint.board`

- `Color` has the members `WHITE` and `BLACK`. `Color.opponent()` gives the other colour.
- `PieceType` has the members `PAWN`, `KNIGHT`, `BISHOP`, `ROOK`, `QUEEN` and `KING`.
- `CastlingRights` is a flag enum: `NONE`, `WHITE_KINGSIDE`, `WHITE_QUEENSIDE`, `BLACK_KINGSIDE`, `BLACK_QUEENSIDE` and `ALL`.
- `START_POSITION_FEN` holds the standard starting position in FEN. It is a string constant only; the package does not parse FEN.
- `BoardState` is a dataclass. It holds a bitboard for each colour and piece type and the occupancy for White, for Black and for both. It also holds `side_to_move`, `castling_rights`, `en_passant_square` (`None` when unset), `halfmove_clock` and `fullmove_number`. Its methods:
  - `clear()` empties the board. `reset_to_start_position()` sets up the initial position with all castling rights.
  - `put_piece(color, piece_type, sq)` places a piece. It raises `ValueError` if the square is occupied. `remove_piece(sq)` takes a piece off and returns `(color, piece_type)`. It raises `ValueError` if the square is empty.
  - Queries:
    - `pieces_of(color, piece_type)` and `occupancy_of(color)` return bitboards.
    - `is_square_occupied(sq)`, `is_square_occupied_by(sq, color)` and `is_empty()` return booleans.
    - `piece_type_at(sq)` and `color_at(sq)` return `None` for an empty square.
    - `king_square(color)` returns `None` if that side has no king.
  - `is_valid()` checks three things: exactly one king per side, no overlapping pieces, and occupancy that matches the piece bitboards.
  - `piece_count()` counts all pieces. `piece_count(color, piece_type)` counts one kind.
  - `toggle_side_to_move()` passes the move to the other side.

### `thinmint.attacks`

- `pawn_attacks(sq, color)`, `knight_attacks(sq)` and `king_attacks(sq)` look up precomputed tables.
- `bishop_attacks(sq, occupancy)`, `rook_attacks(sq, occupancy)` and `queen_attacks(sq, occupancy)` compute sliding attacks. Each ray stops at the first blocker and includes it.
- Pawn targets for a whole set of pawns:
  - `all_pawn_attacks(pawns, color)` gives every square the pawns attack.
  - `pawn_pushes` gives single pushes that do not promote.
  - `pawn_double_pushes` gives double pushes from the starting rank. Both squares must be empty.
  - `pawn_promotion_pushes` gives pushes onto the last rank.
  - `pawn_captures` gives captures that do not promote.
  - `pawn_promotion_captures` gives captures onto the last rank.
- `is_square_attacked(board, sq, by_color)` tells whether any piece of `by_color` attacks the square.
- `ep_square_from_double_push(to_sq, color)` gives the en passant square behind a double push. It returns `None` if `to_sq` is not on the rank a double push lands on.

### `thinmint.evaluation`

All scores are in centipawns from White's point of view.

- `EvalPhase` has the members `OPENING` and `ENDGAME`.
- Piece-square tables:
  - `get_pst(piece_type, phase)` returns the table for a piece type and phase.
  - `evaluate_piece_position(sq, piece_type, is_white, phase)` reads one entry. Black's squares are mirrored by rank.
  - `evaluate_position(board, phase)` sums the table scores for both sides.
- Positional terms:
  - `evaluate_pawn_structure(board)` scores doubled, isolated and passed pawns.
  - `evaluate_mobility(board)` counts the squares that knights, bishops, rooks and queens reach, excluding squares held by their own side.
  - `evaluate_center_control(board)` counts attacks on d4, e4, d5 and e5.
  - `evaluate_king_safety(board)` weighs the pawn shield against enemy attacks on the squares around the king.
  - `evaluate_space(board)` counts pieces in the opponent's half.
  - `evaluate_tempo(board)` gives ±10 for the side to move.
  - `evaluate_positional_terms(board)` adds up all the positional terms.

## Example

```python
from thinmint.board import BoardState, Color, PieceType
from thinmint.bitboard import square_from_name, iter_squares
from thinmint.attacks import knight_attacks, is_square_attacked
from thinmint.evaluation import EvalPhase, evaluate_position, evaluate_positional_terms

board = BoardState()
board.reset_to_start_position()

g1 = square_from_name("g1")
print(sorted(iter_squares(knight_attacks(g1))))   # [12, 21, 23]

print(is_square_attacked(board, square_from_name("f3"), Color.WHITE))  # True
print(board.piece_count(Color.BLACK, PieceType.PAWN))                 # 8

print(evaluate_position(board, EvalPhase.OPENING))
print(evaluate_positional_terms(board))
```

## What it does not do

This is a core library, not a playing engine. It does not:

- parse or write FEN;
- generate move lists;
- make or unmake moves;
- count material or blend phases into one final score;
- search;
- speak a GUI protocol.

It has no command-line program. Positions are built with `reset_to_start_position()` or `put_piece()`.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```