"""GameSession — the single owner of a board during one game.

Serialises every mutation behind a lock and emits events via simple
callbacks so a presentation layer / tests can subscribe.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field

from checkbuddy.core.board import BoardMap
from checkbuddy.core.enums import Color, MoveStatus
from checkbuddy.core.move import Move
from checkbuddy.core.notation import board_from_fen, board_to_fen
from checkbuddy.core.piece import Piece
from checkbuddy.core.types import Square

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, BoardMap], None]  # move, board after
RejectedCallback = Callable[[Move, MoveStatus], None]
ResetCallback = Callable[[BoardMap], None]


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession:
    """Owns one :class:`BoardMap` and the list of moves played on it.

    Args:
        fen: Start position; ``None`` for the standard one.
        strict_fen: Reject malformed FEN instead of reading it leniently.

    Callbacks run on the calling thread after the lock is released.
    """

    __slots__ = ("_board", "_history", "_lock", "_strict_fen", "events")

    def __init__(self, fen: str | None = None, *, strict_fen: bool = True) -> None:
        self._strict_fen = strict_fen
        self._lock = threading.Lock()
        self._board = self._load(fen)
        self._history: list[Move] = []
        self.events = SessionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> BoardMap:
        """A copy of the current board."""
        with self._lock:
            return self._board.copy()

    @property
    def active_color(self) -> Color:
        with self._lock:
            return self._board.active_color

    @property
    def history(self) -> list[Move]:
        with self._lock:
            return list(self._history)

    # ── Queries ──────────────────────────────────────────────────────────

    def piece_at(self, sq: Square) -> Piece:
        with self._lock:
            return self._board[sq]

    def legal_moves(self, sq: Square) -> list[Square]:
        with self._lock:
            return self._board.gen_legal_moves(sq)

    def fen(self) -> str:
        with self._lock:
            return board_to_fen(self._board)

    # ── Commands ─────────────────────────────────────────────────────────

    def reset(self, fen: str | None = None) -> None:
        """Start over from *fen* (standard position if ``None``)."""
        board = self._load(fen)
        with self._lock:
            self._board = board
            self._history.clear()
            snapshot = board.copy()
        _LOGGER.info("Session reset to %s", board_to_fen(snapshot))
        for cb in self.events.on_reset:
            cb(snapshot)

    def submit_move(self, from_sq: Square, to_sq: Square) -> MoveStatus:
        """Try to play *from_sq* → *to_sq* for the side to move."""
        move = Move(from_sq, to_sq)
        with self._lock:
            status = self._board.try_move(from_sq, to_sq)
            if status is MoveStatus.OK:
                self._history.append(move)
            snapshot = self._board.copy()

        if status is MoveStatus.OK:
            for cb in self.events.on_move:
                cb(move, snapshot)
        else:
            _LOGGER.debug("Move %s rejected: %s", move.uci, status.name)
            for cb in self.events.on_rejected:
                cb(move, status)
        return status

    def submit_uci(self, text: str) -> MoveStatus:
        """Like :meth:`submit_move` for long-algebraic text such as ``'e2e4'``.

        Raises:
            ValueError: If *text* is not a well-formed move.
        """
        move = Move.from_uci(text)
        return self.submit_move(move.from_sq, move.to_sq)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _load(self, fen: str | None) -> BoardMap:
        if fen is None:
            return BoardMap.starting()
        return board_from_fen(fen, strict=self._strict_fen)
