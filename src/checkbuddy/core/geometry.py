"""Direction and offset tables for piece movement."""

from __future__ import annotations

from enum import IntEnum

from checkbuddy.core.types import Square


class Direction(IntEnum):
    """Compass directions; the value indexes :data:`DIRECTION_OFFSETS`.

    The four orthogonal directions come first so rook generation can take
    ``[0:4]`` and bishop generation ``[4:8]``.
    """

    NORTH = 0
    SOUTH = 1
    WEST = 2
    EAST = 3
    NORTH_WEST = 4
    SOUTH_EAST = 5
    NORTH_EAST = 6
    SOUTH_WEST = 7


# Linear index deltas (index = rank * 8 + file).
DIRECTION_OFFSETS: tuple[int, ...] = (8, -8, -1, 1, 7, -7, 9, -9)

ROOK_DIRECTIONS: tuple[Direction, ...] = tuple(Direction)[0:4]
BISHOP_DIRECTIONS: tuple[Direction, ...] = tuple(Direction)[4:8]
QUEEN_DIRECTIONS: tuple[Direction, ...] = tuple(Direction)

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)


def len_to_edge(sq: Square, direction: Direction) -> int:
    """Number of squares between *sq* and the board edge along *direction*."""
    rank, file = sq
    north = 7 - rank
    south = rank
    west = file
    east = 7 - file

    if direction == Direction.NORTH:
        return north
    if direction == Direction.SOUTH:
        return south
    if direction == Direction.WEST:
        return west
    if direction == Direction.EAST:
        return east
    if direction == Direction.NORTH_WEST:
        return min(north, west)
    if direction == Direction.SOUTH_EAST:
        return min(south, east)
    if direction == Direction.NORTH_EAST:
        return min(north, east)
    return min(south, west)
