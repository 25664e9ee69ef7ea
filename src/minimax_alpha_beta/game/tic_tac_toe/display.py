"""Terminal display for tic-tac-toe boards.

三目並べの盤面をターミナルに表示するためのモジュール。
"""

from __future__ import annotations

from minimax_alpha_beta.game.tic_tac_toe.state import TicTacToe


def board_to_str(game: TicTacToe) -> str:
    """Convert a board to a human-readable string.

    盤面を1行ずつの文字列に変換する。

    Example output (3×3, 最大化側が中央、最小化側が左上):
        x--
        -o-
        ---
    """
    board = game.get_board()
    n = game.size
    return "\n".join("".join(board[n * row : n * (row + 1)]) for row in range(n))


def format_move(move: int, size: int) -> str:
    """Format a move as ``"7 (row 2, col 1)"``.

    マス番号を「番号 (行, 列)」の形式に変換する。
    """
    return f"{move} (row {move // size}, col {move % size})"
