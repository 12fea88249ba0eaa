"""Tests for per-piece move generation and the legality filter."""

import pytest

from checkbuddy.core.board import BoardMap
from checkbuddy.core.enums import Color, PieceType
from checkbuddy.core.move_generator import MoveGenerator
from checkbuddy.core.notation import STARTING_FEN, board_from_fen
from checkbuddy.core.piece import Piece
from checkbuddy.core.types import (
    A1, A2, A3, A4, A5, A6, A7, A8, B1, B8, D1, D2, D4, D5, D6, D7,
    E1, E2, E3, E4, E5, E6, E7, E8, F1, F2, H1, H8, G7,
)

_SAMPLE_FENS = (
    STARTING_FEN,
    "r1bqkbnr/pppp1ppp/2n5/4p3/2B1P3/5N2/PPPP1PPP/RNBQK2R b KQkq - 3 3",
    "k3r3/8/8/8/8/8/4R3/4K3 w - - 0 1",
    "k7/8/8/b7/8/8/3N4/4K3 w - - 0 1",
    "4k3/8/8/3q4/8/8/8/4K3 b - - 0 1",
)


def _lone(piece_type: PieceType, sq: tuple[int, int], color: Color = Color.WHITE) -> BoardMap:
    board = BoardMap()
    board[sq] = Piece(piece_type, color)
    return board


class TestSliding:
    def test_rook_blocked_at_start(self) -> None:
        board = BoardMap.starting()
        assert board.gen_moves(A1) == []
        assert board.gen_legal_moves(A1) == []

    def test_rook_open_file_after_pawn_removed(self) -> None:
        board = BoardMap.starting()
        board[A2] = None
        assert board.gen_legal_moves(A1) == [A2, A3, A4, A5, A6, A7]

    def test_rook_empty_board(self) -> None:
        assert len(_lone(PieceType.ROOK, D4).gen_moves(D4)) == 14

    def test_bishop_empty_board(self) -> None:
        assert len(_lone(PieceType.BISHOP, D4).gen_moves(D4)) == 13

    def test_queen_empty_board(self) -> None:
        assert len(_lone(PieceType.QUEEN, D4).gen_moves(D4)) == 27

    def test_bishop_corner_does_not_wrap(self) -> None:
        moves = _lone(PieceType.BISHOP, H1).gen_moves(H1)
        assert len(moves) == 7
        assert set(moves) == {(i, 7 - i) for i in range(1, 8)}

    def test_capture_stops_ray(self) -> None:
        board = _lone(PieceType.ROOK, A1)
        board[A4] = Piece(PieceType.KNIGHT, Color.BLACK)
        board[B1] = Piece(PieceType.PAWN, Color.WHITE)
        assert board.gen_moves(A1) == [A2, A3, A4]


class TestKing:
    def test_center(self) -> None:
        assert len(_lone(PieceType.KING, E4).gen_moves(E4)) == 8

    def test_corners_do_not_wrap(self) -> None:
        assert set(_lone(PieceType.KING, A1).gen_moves(A1)) == {A2, B1, (1, 1)}
        assert set(_lone(PieceType.KING, H1).gen_moves(H1)) == {(0, 6), (1, 7), (1, 6)}
        assert set(_lone(PieceType.KING, A8).gen_moves(A8)) == {B8, A7, (6, 1)}

    def test_king_avoids_attacked_squares(self) -> None:
        board = board_from_fen("3rk3/8/8/8/8/8/8/4K3 w - - 0 1")
        assert board.gen_moves(E1) == [E2, D1, F1, D2, F2]
        assert board.gen_legal_moves(E1) == [E2, F1, F2]

    def test_own_piece_excluded(self) -> None:
        board = BoardMap.starting()
        assert board.gen_moves(E1) == []


class TestKnight:
    def test_cornered_knight(self) -> None:
        board = _lone(PieceType.KNIGHT, B1)
        assert set(board.gen_legal_moves(B1)) == {(1, 3), (2, 0), (2, 2)}
        assert len(board.gen_legal_moves(B1)) == 3

    def test_start_position(self) -> None:
        board = BoardMap.starting()
        assert set(board.gen_legal_moves(B1)) == {A3, (2, 2)}

    def test_capture_included(self) -> None:
        board = _lone(PieceType.KNIGHT, B1)
        board[(2, 2)] = Piece(PieceType.PAWN, Color.BLACK)
        board[A3] = Piece(PieceType.PAWN, Color.WHITE)
        assert set(board.gen_moves(B1)) == {D2, (2, 2)}


class TestPawn:
    def test_white_double_step(self) -> None:
        board = BoardMap.starting()
        assert board.gen_moves(E2) == [E3, E4]

    def test_black_double_step(self) -> None:
        board = BoardMap.starting()
        assert board.gen_moves(D7) == [D6, D5]

    def test_blocked_pawn_has_no_pushes(self) -> None:
        board = BoardMap.starting()
        board[E3] = Piece(PieceType.KNIGHT, Color.BLACK)
        moves = board.gen_moves(E2)
        assert E3 not in moves
        assert E4 not in moves

    def test_double_step_destination_not_checked(self) -> None:
        board = BoardMap.starting()
        board[E4] = Piece(PieceType.PAWN, Color.WHITE)
        assert board.gen_moves(E2) == [E3, E4]

    def test_single_step_off_start_rank(self) -> None:
        board = _lone(PieceType.PAWN, E3)
        assert board.gen_moves(E3) == [E4]

    def test_diagonal_captures(self) -> None:
        board = board_from_fen("4k3/8/8/3p1n2/4P3/8/8/4K3 w - - 0 1")
        assert board.gen_moves(E4) == [E5, D5, (4, 5)]

    def test_no_capture_of_own_piece(self) -> None:
        board = board_from_fen("4k3/8/8/3P4/4P3/8/8/4K3 w - - 0 1")
        assert board.gen_moves(E4) == [E5]

    def test_edge_file_no_wraparound(self) -> None:
        board = board_from_fen("4k3/8/8/8/7p/P7/8/4K3 w - - 0 1")
        assert board.gen_moves((2, 0)) == [(3, 0)]

    def test_last_rank_pawn_generates_nothing(self) -> None:
        board = _lone(PieceType.PAWN, E8)
        assert board.gen_moves(E8) == []


class TestLegality:
    def test_pinned_rook_cannot_leave_file(self) -> None:
        board = board_from_fen("k3r3/8/8/8/8/8/4R3/4K3 w - - 0 1")
        raw = board.gen_moves(E2)
        legal = board.gen_legal_moves(E2)
        assert D2 in raw
        assert D2 not in legal
        assert legal == [E3, E4, E5, E6, E7, E8]

    def test_pinned_knight_has_no_moves(self) -> None:
        board = board_from_fen("k7/8/8/b7/8/8/3N4/4K3 w - - 0 1")
        assert len(board.gen_moves(D2)) == 6
        assert board.gen_legal_moves(D2) == []

    def test_missing_king_permits_everything(self) -> None:
        board = _lone(PieceType.ROOK, A1)
        board[H8] = Piece(PieceType.QUEEN, Color.BLACK)
        assert board.gen_legal_moves(A1) == board.gen_moves(A1)

    @pytest.mark.parametrize("fen", _SAMPLE_FENS)
    def test_legal_is_subset_of_raw(self, fen: str) -> None:
        board = board_from_fen(fen)
        for rank in range(8):
            for file in range(8):
                sq = (rank, file)
                assert set(board.gen_legal_moves(sq)) <= set(board.gen_moves(sq))

    @pytest.mark.parametrize("fen", _SAMPLE_FENS)
    def test_legal_probe_leaves_board_untouched(self, fen: str) -> None:
        board = board_from_fen(fen)
        before = board.copy()
        for rank in range(8):
            for file in range(8):
                board.gen_legal_moves((rank, file))
        assert board == before
        assert board.render() == before.render()

    def test_legal_order_follows_generator(self) -> None:
        board = board_from_fen("4k3/8/8/3q4/8/8/8/4K3 b - - 0 1")
        raw = board.gen_moves(D5)
        legal = board.gen_legal_moves(D5)
        assert legal == raw
        assert len(legal) == 27


class TestOpponentMoves:
    def test_start_position_white_replies(self) -> None:
        board = BoardMap.starting()
        replies = MoveGenerator(board).gen_opponent_moves(Color.BLACK)
        # 8 pawns x 2 pushes + 2 knights x 2 hops
        assert len(replies) == 20

    def test_defaults_to_active_color(self) -> None:
        board = BoardMap.starting()
        assert sorted(board.gen_opponent_moves()) == sorted(
            MoveGenerator(board).gen_opponent_moves(Color.WHITE)
        )
        assert all(rank >= 4 for rank, _ in board.gen_opponent_moves())


class TestStartPosition:
    def test_empty_square_has_no_moves(self) -> None:
        board = BoardMap.starting()
        assert board.gen_moves(E4) == []
        assert board.gen_legal_moves(E4) == []

    def test_start_knight_g8(self) -> None:
        board = BoardMap.starting()
        assert set(board.gen_legal_moves((7, 6))) == {(5, 5), (5, 7)}
        assert G7 not in board.gen_legal_moves((7, 6))

    def test_d1_queen_blocked(self) -> None:
        board = BoardMap.starting()
        assert board.gen_legal_moves(D1) == []

    def test_f1_bishop_after_e_pawn(self) -> None:
        board = BoardMap.starting()
        board[E2] = None
        assert board.gen_legal_moves(F1) == [E2, (2, 3), (3, 2), (4, 1), A6]
