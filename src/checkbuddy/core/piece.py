"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from checkbuddy.core.enums import Color, PieceType

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable content of one board square.

    ``piece_type is None`` marks an empty square. For empty squares
    ``color`` only records the checkerboard shade and carries no meaning
    for move generation.
    """

    piece_type: PieceType | None = None
    color: Color = Color.WHITE

    @classmethod
    def empty(cls, shade: Color = Color.WHITE) -> Piece:
        return cls(None, shade)

    # ── Queries ──────────────────────────────────────────────────────────

    def is_piece(self) -> bool:
        return self.piece_type is not None

    def get_color(self) -> Color:
        return self.color

    def is_white(self) -> bool:
        return self.piece_type is not None and self.color == Color.WHITE

    def is_black(self) -> bool:
        return self.piece_type is not None and self.color == Color.BLACK

    def get_type(self) -> PieceType | None:
        return self.piece_type

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black), '.' if empty."""
        if self.piece_type is None:
            return "."
        return _FEN_CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str, *, strict: bool = True) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight.

        With ``strict=False`` an unknown character yields an empty
        placeholder instead of raising.
        """
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            if not strict:
                return cls.empty()
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(ptype, color)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        if self.piece_type is None:
            return "·"
        return _UNICODE[(self.color, self.piece_type)]
