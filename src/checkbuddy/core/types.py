"""Square type alias and coordinate helpers.

Squares are ``(rank, file)`` pairs, both 0–7:
    a1=(0, 0), b1=(0, 1), ..., h1=(0, 7)
    ...
    a8=(7, 0), ..., h8=(7, 7)

The linear index used by the direction offsets is ``rank * 8 + file``.
"""

from __future__ import annotations

from typing import TypeAlias

from checkbuddy.core.enums import Color

Square: TypeAlias = tuple[int, int]  # (rank, file)


def make_square(rank: int, file: int) -> Square:
    """Create square from rank (0–7) and file (0–7)."""
    return (rank, file)


def rank_of(sq: Square) -> int:
    """Rank index 0–7 (1–8)."""
    return sq[0]


def file_of(sq: Square) -> int:
    """File index 0–7 (a–h)."""
    return sq[1]


def square_index(sq: Square) -> int:
    """Linear index 0–63."""
    return sq[0] * 8 + sq[1]


def square_from_index(index: int) -> Square:
    """Inverse of :func:`square_index`."""
    return (index // 8, index % 8)


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (0, 0) → 'a1', (7, 7) → 'h8'."""
    return chr(ord("a") + file_of(sq)) + str(rank_of(sq) + 1)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → (3, 4)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return make_square(int(name[1]) - 1, ord(name[0]) - ord("a"))


def is_valid_square(sq: Square) -> bool:
    """Check whether both coordinates lie on the board."""
    return 0 <= sq[0] < 8 and 0 <= sq[1] < 8


def square_shade(sq: Square) -> Color:
    """Checkerboard color of *sq* (a1 is dark)."""
    return Color.BLACK if (sq[0] + sq[1]) % 2 == 0 else Color.WHITE


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = ((0, f) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = ((1, f) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = ((2, f) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = ((3, f) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = ((4, f) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = ((5, f) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = ((6, f) for f in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = ((7, f) for f in range(8))
