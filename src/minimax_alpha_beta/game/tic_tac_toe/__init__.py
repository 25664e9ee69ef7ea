"""三目並べ (tic-tac-toe) — square board of any size."""

from minimax_alpha_beta.game.tic_tac_toe.display import board_to_str, format_move
from minimax_alpha_beta.game.tic_tac_toe.state import TicTacToe
from minimax_alpha_beta.game.tic_tac_toe.types import (
    DEFAULT_SIZE,
    EMPTY,
    MAXIMIZER,
    MINIMIZER,
    WIN_SCORE,
)

__all__ = [
    "DEFAULT_SIZE",
    "EMPTY",
    "MAXIMIZER",
    "MINIMIZER",
    "TicTacToe",
    "WIN_SCORE",
    "board_to_str",
    "format_move",
]
