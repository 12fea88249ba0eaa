"""Raw and legal move generation for a single square."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from checkbuddy.core.enums import Color, PieceType
from checkbuddy.core.geometry import (
    BISHOP_DIRECTIONS,
    DIRECTION_OFFSETS,
    KNIGHT_OFFSETS,
    QUEEN_DIRECTIONS,
    ROOK_DIRECTIONS,
    Direction,
    len_to_edge,
)
from checkbuddy.core.types import Square, square_from_index, square_index

if TYPE_CHECKING:
    from checkbuddy.core.board import BoardMap

_LOGGER = logging.getLogger(__name__)

_SLIDING_DIRECTIONS: dict[PieceType, tuple[Direction, ...]] = {
    PieceType.BISHOP: BISHOP_DIRECTIONS,
    PieceType.ROOK: ROOK_DIRECTIONS,
    PieceType.QUEEN: QUEEN_DIRECTIONS,
}


class MoveGenerator:
    """Generates destination squares for the piece on a given square.

    Legality probing works on a private copy of the board, so the board
    passed in is never modified.
    """

    __slots__ = ("_board",)

    def __init__(self, board: BoardMap) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def gen_legal_moves(self, from_sq: Square) -> list[Square]:
        """Moves from *from_sq* that do not leave the mover's king attacked."""
        scratch = self._board.copy()
        probe = MoveGenerator(scratch)
        moves = probe.gen_moves(from_sq)
        _LOGGER.debug("moves %s", moves)

        moving_color = scratch[from_sq].get_color()
        legal: list[Square] = []
        for to_sq in moves:
            captured = scratch[to_sq]
            scratch.make_move(from_sq, to_sq)
            replies = probe.gen_opponent_moves(moving_color)
            if not any(_is_king_of(scratch, sq, moving_color) for sq in replies):
                legal.append(to_sq)
            scratch.undo_move(from_sq, to_sq, captured)

        _LOGGER.debug("legal moves %s", legal)
        return legal

    def gen_moves(self, from_sq: Square) -> list[Square]:
        """All geometric moves (may leave own king attacked)."""
        piece_type = self._board[from_sq].get_type()
        if piece_type is None:
            return []
        if piece_type == PieceType.PAWN:
            return self._gen_pawn(from_sq)
        if piece_type == PieceType.KNIGHT:
            return self._gen_knight(from_sq)
        if piece_type == PieceType.KING:
            return self._gen_king(from_sq)
        return self._gen_sliding(from_sq, _SLIDING_DIRECTIONS[piece_type])

    def gen_opponent_moves(self, color: Color) -> list[Square]:
        """Every square reachable by a piece not of *color*."""
        board = self._board
        replies: list[Square] = []
        for rank in range(8):
            for file in range(8):
                piece = board[rank, file]
                if piece.is_piece() and piece.get_color() != color:
                    replies.extend(self.gen_moves((rank, file)))
        return replies

    # -- Piece-specific generators (private) -------------------------------

    def _gen_sliding(
        self, sq: Square, directions: tuple[Direction, ...]
    ) -> list[Square]:
        board = self._board
        color = board[sq].get_color()
        index = square_index(sq)
        moves: list[Square] = []
        for direction in directions:
            offset = DIRECTION_OFFSETS[direction]
            for n in range(1, len_to_edge(sq, direction) + 1):
                to_sq = square_from_index(index + offset * n)
                target = board[to_sq]
                if target.is_piece() and target.get_color() == color:
                    break
                moves.append(to_sq)
                if target.is_piece():
                    break
        return moves

    def _gen_king(self, sq: Square) -> list[Square]:
        board = self._board
        color = board[sq].get_color()
        index = square_index(sq)
        moves: list[Square] = []
        for direction in QUEEN_DIRECTIONS:
            if len_to_edge(sq, direction) == 0:
                continue
            to_sq = square_from_index(index + DIRECTION_OFFSETS[direction])
            target = board[to_sq]
            if target.is_piece() and target.get_color() == color:
                continue
            moves.append(to_sq)
        return moves

    def _gen_knight(self, sq: Square) -> list[Square]:
        board = self._board
        color = board[sq].get_color()
        rank, file = sq
        moves: list[Square] = []
        for dr, df in KNIGHT_OFFSETS:
            to_rank = rank + dr
            to_file = file + df
            if not (0 <= to_rank < 8 and 0 <= to_file < 8):
                continue
            target = board[to_rank, to_file]
            if target.is_piece() and target.get_color() == color:
                continue
            moves.append((to_rank, to_file))
        return moves

    def _gen_pawn(self, sq: Square) -> list[Square]:
        board = self._board
        color = board[sq].get_color()
        rank, file = sq
        shift = -1 if color == Color.BLACK else 1
        start_rank = 6 if color == Color.BLACK else 1
        moves: list[Square] = []

        ahead = rank + shift
        if not 0 <= ahead < 8:
            return moves

        # The two-step square itself is not checked for occupancy.
        blocked = board[ahead, file].is_piece()
        if not blocked:
            moves.append((ahead, file))
            if rank == start_rank:
                moves.append((rank + 2 * shift, file))

        for to_file in (file - 1, file + 1):
            if not 0 <= to_file < 8:
                continue
            target = board[ahead, to_file]
            if target.is_piece() and target.get_color() != color:
                moves.append((ahead, to_file))
        return moves


def _is_king_of(board: BoardMap, sq: Square, color: Color) -> bool:
    piece = board[sq]
    return piece.get_type() == PieceType.KING and piece.get_color() == color
