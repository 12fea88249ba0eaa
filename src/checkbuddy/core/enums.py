"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum, auto


class Color(IntEnum):
    """Side color.

    ``WHITE`` is ``0`` so a color can be used directly as the board's
    active-color flag: falsy for white to move, truthy for black.
    """

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class MoveStatus(IntEnum):
    """Outcome of a move attempt."""

    OK = 0
    EMPTY_ORIGIN = auto()
    NOT_YOUR_PIECE = auto()
    ILLEGAL_MOVE = auto()
