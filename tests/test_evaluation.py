import pytest

from thinmint.bitboard import iter_squares, square_from_name
from thinmint.board import BoardState, Color, PieceType
from thinmint.evaluation import (
    EvalPhase,
    KNIGHT_PST,
    PAWN_ENDGAME_PST,
    evaluate_center_control,
    evaluate_king_safety,
    evaluate_mobility,
    evaluate_pawn_structure,
    evaluate_piece_position,
    evaluate_position,
    evaluate_positional_terms,
    evaluate_space,
    evaluate_tempo,
    get_pst,
)

W, B = Color.WHITE, Color.BLACK
P, N, BI, R, Q, K = (PieceType.PAWN, PieceType.KNIGHT, PieceType.BISHOP,
                     PieceType.ROOK, PieceType.QUEEN, PieceType.KING)


def make_board(placements, side=Color.WHITE):
    board = BoardState()
    for color, piece_type, name in placements:
        board.put_piece(color, piece_type, square_from_name(name))
    board.side_to_move = side
    return board


def mirror(board):
    flipped = BoardState()
    for (color, piece_type), bb in board.pieces.items():
        for sq in iter_squares(bb):
            flipped.put_piece(color.opponent(), piece_type, sq ^ 56)
    flipped.side_to_move = Color(board.side_to_move).opponent()
    return flipped


def start_board():
    board = BoardState()
    board.reset_to_start_position()
    return board


ASYMMETRIC = [
    (W, K, "g1"), (W, P, "f2"), (W, P, "g2"), (W, P, "h3"), (W, N, "e5"),
    (W, Q, "d3"), (W, R, "e1"), (W, P, "d4"), (W, P, "a2"), (W, P, "a3"),
    (B, K, "e8"), (B, P, "e6"), (B, P, "d5"), (B, BI, "c5"), (B, R, "a8"),
    (B, N, "f6"), (B, P, "b7"),
]

TERMS = [
    evaluate_pawn_structure,
    evaluate_mobility,
    evaluate_center_control,
    evaluate_king_safety,
    evaluate_space,
    evaluate_tempo,
    evaluate_positional_terms,
]


@pytest.mark.parametrize("phase", list(EvalPhase))
@pytest.mark.parametrize("piece_type", list(PieceType))
def test_pst_has_64_entries(piece_type, phase):
    assert len(get_pst(piece_type, phase)) == 64


def test_get_pst_defaults_to_opening_and_unknown_is_none():
    assert get_pst(N) is KNIGHT_PST
    assert get_pst(P, EvalPhase.ENDGAME) is PAWN_ENDGAME_PST
    assert get_pst(None) is None


def test_piece_position_unknown_type_is_zero():
    assert evaluate_piece_position(square_from_name("e4"), None, True) == 0


@pytest.mark.parametrize("phase", list(EvalPhase))
@pytest.mark.parametrize("piece_type", list(PieceType))
def test_piece_position_white_reads_table_black_mirrors(piece_type, phase):
    table = get_pst(piece_type, phase)
    for sq in range(64):
        assert evaluate_piece_position(sq, piece_type, True, phase) == table[sq]
        assert evaluate_piece_position(sq ^ 56, piece_type, False, phase) == table[sq]


def test_pawn_table_values_from_source():
    e2 = square_from_name("e2")
    assert evaluate_piece_position(e2, P, True) == 50
    assert evaluate_piece_position(square_from_name("e7"), P, False) == 50


@pytest.mark.parametrize("phase", list(EvalPhase))
def test_position_is_balanced_in_start_position(phase):
    board = start_board()
    assert evaluate_position(board, phase) == -evaluate_position(mirror(board), phase)
    assert evaluate_position(board, phase) == evaluate_position(mirror(board), phase)


@pytest.mark.parametrize("phase", list(EvalPhase))
def test_position_negates_under_mirror(phase):
    board = make_board(ASYMMETRIC)
    assert evaluate_position(mirror(board), phase) == -evaluate_position(board, phase)


def test_position_sums_piece_tables():
    board = make_board([(W, N, "e4"), (B, N, "a8")])
    expected = (evaluate_piece_position(square_from_name("e4"), N, True)
                - evaluate_piece_position(square_from_name("a8"), N, False))
    assert evaluate_position(board) == expected


@pytest.mark.parametrize("term", TERMS)
def test_terms_negate_under_mirror(term):
    board = make_board(ASYMMETRIC)
    assert term(mirror(board)) == -term(board)


@pytest.mark.parametrize("term", TERMS[:-2])
def test_terms_cancel_in_start_position(term):
    board = start_board()
    assert term(board) == term(mirror(board)) == -term(board)


def test_isolated_pawns_score_lower_than_connected():
    isolated = make_board([(W, P, "a2"), (W, P, "c2")])
    connected = make_board([(W, P, "a2"), (W, P, "b2")])
    assert evaluate_pawn_structure(isolated) < evaluate_pawn_structure(connected)


def test_doubled_pawns_score_lower():
    doubled = make_board([(W, P, "a2"), (W, P, "a3")])
    healthy = make_board([(W, P, "a2"), (W, P, "b3")])
    assert evaluate_pawn_structure(doubled) < evaluate_pawn_structure(healthy)


def test_advanced_passed_pawn_scores_higher():
    far = make_board([(W, P, "e6")])
    near = make_board([(W, P, "e3")])
    assert evaluate_pawn_structure(far) > evaluate_pawn_structure(near)


def test_blocked_pawn_is_not_passed():
    passed = make_board([(W, P, "e4"), (B, P, "a7")])
    blocked = make_board([(W, P, "e4"), (B, P, "d7")])
    assert evaluate_pawn_structure(passed) > evaluate_pawn_structure(blocked)


def test_black_passed_pawn_favours_black():
    board = make_board([(B, P, "e3")])
    assert evaluate_pawn_structure(board) < 0


def test_central_knight_more_mobile_than_corner():
    center = make_board([(W, N, "e4")])
    corner = make_board([(W, N, "a1")])
    assert evaluate_mobility(center) > evaluate_mobility(corner) > 0


def test_own_pieces_reduce_mobility():
    free = make_board([(W, R, "a1")])
    hemmed = make_board([(W, R, "a1"), (W, P, "a2"), (W, P, "b1")])
    assert evaluate_mobility(hemmed) < evaluate_mobility(free)


def test_center_control_counts_attacks():
    attacker = make_board([(W, N, "f3")])
    idle = make_board([(W, N, "a1")])
    assert evaluate_center_control(attacker) > evaluate_center_control(idle)


def test_pawn_shield_improves_king_safety():
    sheltered = make_board([(W, K, "g1"), (W, P, "f2"), (W, P, "g2"), (W, P, "h2"),
                            (B, K, "a8")])
    bare = make_board([(W, K, "g1"), (B, K, "a8")])
    assert evaluate_king_safety(sheltered) > evaluate_king_safety(bare)


def test_enemy_pressure_hurts_king_safety():
    pressured = make_board([(W, K, "g1"), (B, K, "a8"), (B, Q, "g4")])
    quiet = make_board([(W, K, "g1"), (B, K, "a8"), (B, Q, "a4")])
    assert evaluate_king_safety(pressured) < evaluate_king_safety(quiet)


def test_king_safety_skips_missing_kings():
    no_kings = make_board([(W, P, "e2"), (B, Q, "d1")])
    with_pawn_only = make_board([(W, P, "e2")])
    assert evaluate_king_safety(no_kings) == evaluate_king_safety(with_pawn_only)


def test_space_rewards_advanced_pieces():
    advanced = make_board([(W, P, "e5")])
    home = make_board([(W, P, "e4")])
    assert evaluate_space(advanced) > evaluate_space(home)
    assert evaluate_space(make_board([(B, P, "e4")])) < evaluate_space(home)


def test_tempo_favours_side_to_move():
    white = start_board()
    black = start_board()
    black.toggle_side_to_move()
    assert evaluate_tempo(white) == 10
    assert evaluate_tempo(black) == -evaluate_tempo(white)


def test_positional_terms_is_sum_of_parts():
    board = make_board(ASYMMETRIC, side=Color.BLACK)
    parts = sum(term(board) for term in TERMS[:-1])
    assert evaluate_positional_terms(board) == parts