"""チェス (chess) — rules provided by python-chess."""

from minimax_alpha_beta.game.chess_game.state import MATE_SCORE, TEMPO_BONUS, ChessGame

__all__ = [
    "ChessGame",
    "MATE_SCORE",
    "TEMPO_BONUS",
]
