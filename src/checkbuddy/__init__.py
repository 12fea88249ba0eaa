"""Chess rules engine: board state, legal moves and turn enforcement."""

__version__ = "0.1.0"
