"""BoardMap - piece placement, side to move and turn enforcement."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from checkbuddy.core.enums import Color, MoveStatus, PieceType
from checkbuddy.core.move_generator import MoveGenerator
from checkbuddy.core.piece import Piece
from checkbuddy.core.types import Square, is_valid_square, square_shade

_LOGGER = logging.getLogger(__name__)

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def _empty_grid() -> list[list[Piece]]:
    return [
        [Piece.empty(square_shade((rank, file))) for file in range(8)]
        for rank in range(8)
    ]


class BoardMap:
    """Mutable 8x8 grid of :class:`Piece` values plus the active color.

    ``active_color`` is :attr:`Color.WHITE` (falsy) when white is to move
    and :attr:`Color.BLACK` (truthy) when black is to move. Empty squares
    hold a shaded empty marker, see :func:`square_shade`.

    Only :meth:`move_turn` / :meth:`try_move` enforce the rules;
    :meth:`make_move` is the bare relocation used for legality probes.
    """

    __slots__ = ("_squares", "_active_color")

    def __init__(self, active_color: Color = Color.WHITE) -> None:
        self._squares: list[list[Piece]] = _empty_grid()
        self._active_color = active_color

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece:
        assert is_valid_square(sq), f"square off board: {sq}"
        return self._squares[sq[0]][sq[1]]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        """Place *piece* on *sq*; ``None`` clears it to the shaded marker."""
        assert is_valid_square(sq), f"square off board: {sq}"
        if piece is None or not piece.is_piece():
            piece = Piece.empty(square_shade(sq))
        self._squares[sq[0]][sq[1]] = piece

    def get_piece(self, sq: Square) -> Piece:
        return self[sq]

    def is_empty(self, sq: Square) -> bool:
        return not self[sq].is_piece()

    @property
    def active_color(self) -> Color:
        return self._active_color

    @active_color.setter
    def active_color(self, color: Color) -> None:
        self._active_color = Color(color)

    def get_active_color(self) -> Color:
        return self._active_color

    # -- Query helpers ------------------------------------------------------

    def squares(self) -> Iterator[tuple[Square, Piece]]:
        """All 64 squares with their contents, rank 0 first."""
        for rank in range(8):
            for file in range(8):
                yield (rank, file), self._squares[rank][file]

    def pieces(self, color: Color) -> list[Square]:
        """Squares occupied by *color*."""
        return [
            sq
            for sq, piece in self.squares()
            if piece.is_piece() and piece.get_color() == color
        ]

    def find_king(self, color: Color) -> Square | None:
        """Square of *color*'s king, or ``None`` if it is missing."""
        for sq, piece in self.squares():
            if piece.get_type() == PieceType.KING and piece.get_color() == color:
                return sq
        return None

    # -- Move generation ----------------------------------------------------

    def gen_moves(self, from_sq: Square) -> list[Square]:
        return MoveGenerator(self).gen_moves(from_sq)

    def gen_legal_moves(self, from_sq: Square) -> list[Square]:
        return MoveGenerator(self).gen_legal_moves(from_sq)

    def gen_opponent_moves(self, color: Color | None = None) -> list[Square]:
        """Moves of every piece not of *color* (default: the active color)."""
        if color is None:
            color = self._active_color
        return MoveGenerator(self).gen_opponent_moves(color)

    def is_valid_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Whether the piece on *from_sq* may legally go to *to_sq*."""
        mover = self[from_sq]
        target = self[to_sq]
        if target.is_piece() and target.get_color() == mover.get_color():
            return False
        return to_sq in self.gen_legal_moves(from_sq)

    # -- Mutation -----------------------------------------------------------

    def try_move(self, from_sq: Square, to_sq: Square) -> MoveStatus:
        """Apply a move for the side to move, reporting why it was refused."""
        piece = self[from_sq]
        if not piece.is_piece():
            _LOGGER.debug("Rejected %s->%s: origin is empty", from_sq, to_sq)
            return MoveStatus.EMPTY_ORIGIN
        if piece.get_color() != self._active_color:
            _LOGGER.debug("Rejected %s->%s: piece is not yours", from_sq, to_sq)
            return MoveStatus.NOT_YOUR_PIECE
        if not self.is_valid_move(from_sq, to_sq):
            _LOGGER.debug("Rejected %s->%s: move is invalid", from_sq, to_sq)
            return MoveStatus.ILLEGAL_MOVE

        self.make_move(from_sq, to_sq)
        self._active_color = self._active_color.opposite
        return MoveStatus.OK

    def move_turn(self, from_sq: Square, to_sq: Square) -> bool:
        """Apply a move for the side to move. Returns True if it was made."""
        return self.try_move(from_sq, to_sq) is MoveStatus.OK

    def make_move(self, from_sq: Square, to_sq: Square) -> None:
        """Relocate a piece without any rule checks or turn change."""
        self[to_sq] = self[from_sq]
        self[from_sq] = None

    def undo_move(self, from_sq: Square, to_sq: Square, captured: Piece) -> None:
        """Revert :meth:`make_move`, putting *captured* back on *to_sq*."""
        self._squares[from_sq[0]][from_sq[1]] = self[to_sq]
        self._squares[to_sq[0]][to_sq[1]] = captured

    def copy(self) -> BoardMap:
        b = BoardMap(self._active_color)
        b._squares = [row.copy() for row in self._squares]
        return b

    def clear(self) -> None:
        self._squares = _empty_grid()
        self._active_color = Color.WHITE

    # -- Factory ------------------------------------------------------------

    @classmethod
    def starting(cls) -> BoardMap:
        """Standard starting position."""
        b = cls()
        for f in range(8):
            b[1, f] = Piece(PieceType.PAWN, Color.WHITE)
            b[6, f] = Piece(PieceType.PAWN, Color.BLACK)

        for f, pt in enumerate(_BACK_RANK):
            b[0, f] = Piece(pt, Color.WHITE)
            b[7, f] = Piece(pt, Color.BLACK)
        return b

    @classmethod
    def from_fen(cls, fen: str, *, strict: bool = True) -> BoardMap:
        from checkbuddy.core.notation import board_from_fen

        return board_from_fen(fen, strict=strict)

    def get_fen(self) -> str:
        from checkbuddy.core.notation import board_to_fen

        return board_to_fen(self)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardMap):
            return NotImplemented
        return (
            self._squares == other._squares
            and self._active_color == other._active_color
        )

    def render(self, *, symbols: bool = False) -> str:
        """Human-readable dump: ranks 8..1, file footer and side to move.

        With ``symbols=True`` pieces are drawn as Unicode glyphs instead of
        FEN letters.
        """
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = " ".join(p.symbol if symbols else str(p) for p in self._squares[rank])
            rows.append(f"{rank + 1} {row}")
        rows.append("  a b c d e f g h")
        rows.append(f"{self._active_color}'s turn")
        return "\n".join(rows)

    __str__ = render

    def __repr__(self) -> str:
        return f"BoardMap({self.get_fen()!r})"
