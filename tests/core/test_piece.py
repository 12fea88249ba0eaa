"""Tests for Piece and the square helpers."""

import pytest

from checkbuddy.core.enums import Color, PieceType
from checkbuddy.core.move import Move
from checkbuddy.core.piece import Piece
from checkbuddy.core.types import A1, B1, E2, E4, H8, parse_square, square_name, square_shade


class TestPieceQueries:
    def test_empty(self) -> None:
        piece = Piece.empty()
        assert not piece.is_piece()
        assert not piece.is_white()
        assert not piece.is_black()
        assert piece.get_type() is None

    def test_white_piece(self) -> None:
        piece = Piece(PieceType.QUEEN, Color.WHITE)
        assert piece.is_piece()
        assert piece.is_white()
        assert not piece.is_black()
        assert piece.get_color() == Color.WHITE
        assert not piece.get_color()
        assert piece.get_type() == PieceType.QUEEN

    def test_black_piece(self) -> None:
        piece = Piece(PieceType.KNIGHT, Color.BLACK)
        assert piece.is_black()
        assert not piece.is_white()
        assert piece.get_color()

    def test_black_shaded_empty_is_not_black(self) -> None:
        assert not Piece.empty(Color.BLACK).is_black()

    def test_value_semantics(self) -> None:
        assert Piece(PieceType.ROOK, Color.WHITE) == Piece(PieceType.ROOK, Color.WHITE)
        assert Piece(PieceType.ROOK, Color.WHITE) != Piece(PieceType.ROOK, Color.BLACK)


class TestPieceChars:
    def test_from_char(self) -> None:
        assert Piece.from_char("K") == Piece(PieceType.KING, Color.WHITE)
        assert Piece.from_char("n") == Piece(PieceType.KNIGHT, Color.BLACK)

    def test_str(self) -> None:
        assert str(Piece(PieceType.BISHOP, Color.WHITE)) == "B"
        assert str(Piece(PieceType.PAWN, Color.BLACK)) == "p"
        assert str(Piece.empty()) == "."

    def test_invalid_char_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x")

    def test_invalid_char_lenient(self) -> None:
        assert not Piece.from_char("x", strict=False).is_piece()

    def test_symbol(self) -> None:
        assert Piece(PieceType.KNIGHT, Color.BLACK).symbol == "♞"
        assert Piece.empty().symbol == "·"


class TestSquares:
    def test_parse_and_name(self) -> None:
        assert parse_square("e4") == E4 == (3, 4)
        assert square_name(H8) == "h8"

    def test_parse_invalid(self) -> None:
        with pytest.raises(ValueError):
            parse_square("i9")

    def test_shade(self) -> None:
        assert square_shade(A1) == Color.BLACK
        assert square_shade(B1) == Color.WHITE
        assert square_shade(H8) == Color.BLACK


class TestMove:
    def test_str(self) -> None:
        assert str(Move(E2, E4)) == "e2e4"

    def test_from_uci(self) -> None:
        assert Move.from_uci("e2e4") == Move(E2, E4)

    def test_from_uci_invalid(self) -> None:
        with pytest.raises(ValueError):
            Move.from_uci("e2e")
