"""FEN parsing and serialisation.

Only the placement and side-to-move fields are consumed. Castling,
en-passant and clock fields are accepted and ignored on input, and
emitted as ``- - 0 1`` on output.
"""

from __future__ import annotations

from checkbuddy.core.board import BoardMap
from checkbuddy.core.enums import Color
from checkbuddy.core.piece import Piece

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_FEN_SUFFIX = "- - 0 1"


class FenError(ValueError):
    """Raised when a FEN string cannot be parsed."""


def board_from_fen(fen: str, *, strict: bool = True) -> BoardMap:
    """Parse a FEN string into a :class:`BoardMap`.

    With ``strict=False`` unknown piece letters become empty squares and a
    missing or unrecognised side-to-move field means white. Rank overflow
    is rejected in both modes.
    """
    parts = fen.split()
    if not parts:
        raise FenError(f"Invalid FEN (empty): {fen!r}")
    if strict and len(parts) < 2:
        raise FenError(f"Invalid FEN (missing side-to-move field): {fen!r}")

    # 1. Piece placement
    ranks = parts[0].split("/")
    if strict and len(ranks) != 8:
        raise FenError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    if len(ranks) > 8:
        raise FenError(f"Invalid FEN board (too many ranks): {fen!r}")

    board = BoardMap()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if strict and not (1 <= step <= 8):
                    raise FenError(f"Invalid FEN digit {ch!r}: {fen!r}")
                file += step
            else:
                if file >= 8:
                    raise FenError(f"Invalid FEN rank width: {fen!r}")
                try:
                    board[rank, file] = Piece.from_char(ch, strict=strict)
                except ValueError as exc:
                    raise FenError(f"{exc} in FEN {fen!r}") from None
                file += 1
            if file > 8:
                raise FenError(f"Invalid FEN rank width: {fen!r}")
        if strict and file != 8:
            raise FenError(f"Invalid FEN rank width: {fen!r}")

    # 2. Side to move
    side_part = parts[1] if len(parts) > 1 else "w"
    if side_part == "w":
        board.active_color = Color.WHITE
    elif side_part == "b":
        board.active_color = Color.BLACK
    elif strict:
        raise FenError(f"Invalid FEN side-to-move field: {side_part!r}")
    else:
        board.active_color = Color.WHITE

    return board


def board_to_fen(board: BoardMap) -> str:
    """Serialise a :class:`BoardMap` to FEN."""
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = board[rank, file]
            if not piece.is_piece():
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    side_str = "w" if board.active_color == Color.WHITE else "b"

    return f"{board_str} {side_str} {_FEN_SUFFIX}"
