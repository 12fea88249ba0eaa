"""Game management layer — one session owning one board.

Quick start::

    from checkbuddy.core import parse_square
    from checkbuddy.game import GameSession

    session = GameSession()
    session.events.on_move.append(lambda move, board: print(move))
    session.submit_move(parse_square("e2"), parse_square("e4"))
"""

from checkbuddy.game.session import GameSession, SessionEvents

__all__ = [
    "GameSession",
    "SessionEvents",
]
