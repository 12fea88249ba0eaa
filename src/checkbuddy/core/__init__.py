"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from checkbuddy.core import BoardMap, parse_square

    board = BoardMap.starting()
    print(board.gen_legal_moves(parse_square("g1")))
    board.move_turn(parse_square("e2"), parse_square("e4"))
"""

from checkbuddy.core.board import BoardMap
from checkbuddy.core.enums import Color, MoveStatus, PieceType
from checkbuddy.core.geometry import (
    DIRECTION_OFFSETS,
    KNIGHT_OFFSETS,
    Direction,
    len_to_edge,
)
from checkbuddy.core.move import Move
from checkbuddy.core.move_generator import MoveGenerator
from checkbuddy.core.notation import (
    STARTING_FEN,
    FenError,
    board_from_fen,
    board_to_fen,
)
from checkbuddy.core.piece import Piece
from checkbuddy.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
    square_shade,
)

__all__ = [
    # Enums
    "Color",
    "MoveStatus",
    "PieceType",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    "square_shade",
    # Geometry
    "DIRECTION_OFFSETS",
    "Direction",
    "KNIGHT_OFFSETS",
    "len_to_edge",
    # Domain objects
    "BoardMap",
    "Move",
    "MoveGenerator",
    "Piece",
    # Notation
    "STARTING_FEN",
    "FenError",
    "board_from_fen",
    "board_to_fen",
]
