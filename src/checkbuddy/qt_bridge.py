"""Qt bridge exposing a game session to a presentation layer."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from checkbuddy.core.board import BoardMap
from checkbuddy.core.enums import MoveStatus
from checkbuddy.core.move import Move
from checkbuddy.core.notation import FenError, board_to_fen
from checkbuddy.core.piece import Piece
from checkbuddy.core.types import Square, is_valid_square
from checkbuddy.game.session import GameSession


class BoardBridge(QObject):
    """Main-thread facade: slots take requests, signals report outcomes.

    Square arguments are ``(rank, file)`` tuples passed as ``object``.
    """

    move_applied = pyqtSignal(object, object)  # from_sq, to_sq
    move_rejected = pyqtSignal(object, object, int)  # from_sq, to_sq, MoveStatus
    turn_changed = pyqtSignal(int)  # Color
    legal_moves_ready = pyqtSignal(object, object)  # square, list of squares
    board_reset = pyqtSignal(str)  # FEN
    reset_failed = pyqtSignal(str)  # error message

    def __init__(
        self,
        session: GameSession | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._session = session if session is not None else GameSession()
        self._session.events.on_move.append(self._on_move)
        self._session.events.on_rejected.append(self._on_rejected)
        self._session.events.on_reset.append(self._on_reset)

    @property
    def session(self) -> GameSession:
        return self._session

    # ── Queries ──────────────────────────────────────────────────────────

    def piece_at(self, sq: Square) -> Piece:
        return self._session.piece_at(sq)

    def active_color(self) -> int:
        return int(self._session.active_color)

    # ── Slots ────────────────────────────────────────────────────────────

    @pyqtSlot(object)
    def request_legal_moves(self, sq: object) -> None:
        """Emit the legal destinations of *sq* for highlighting."""
        if not _is_square(sq):
            self.legal_moves_ready.emit(sq, [])
            return
        self.legal_moves_ready.emit(sq, self._session.legal_moves(sq))

    @pyqtSlot(object, object)
    def request_move(self, from_sq: object, to_sq: object) -> None:
        """Attempt a move; the outcome arrives via signals."""
        if not (_is_square(from_sq) and _is_square(to_sq)):
            self.move_rejected.emit(from_sq, to_sq, int(MoveStatus.ILLEGAL_MOVE))
            return
        self._session.submit_move(from_sq, to_sq)

    @pyqtSlot(object)
    def new_game(self, fen: object = None) -> None:
        """Reset to *fen* (a string) or the standard start position.

        A malformed FEN leaves the session untouched and emits
        ``reset_failed``.
        """
        try:
            self._session.reset(fen if isinstance(fen, str) else None)
        except FenError as exc:
            self.reset_failed.emit(str(exc))

    # ── Session callbacks ────────────────────────────────────────────────

    def _on_move(self, move: Move, board: BoardMap) -> None:
        self.move_applied.emit(move.from_sq, move.to_sq)
        self.turn_changed.emit(int(board.active_color))

    def _on_rejected(self, move: Move, status: MoveStatus) -> None:
        self.move_rejected.emit(move.from_sq, move.to_sq, int(status))

    def _on_reset(self, board: BoardMap) -> None:
        self.board_reset.emit(board_to_fen(board))
        self.turn_changed.emit(int(board.active_color))


def _is_square(value: object) -> bool:
    return (
        isinstance(value, tuple)
        and len(value) == 2
        and all(isinstance(v, int) for v in value)
        and is_valid_square(value)
    )
