"""GameState implementation for 三目並べ (tic-tac-toe).

三目並べの対局状態。任意サイズの正方形盤面で、
一辺の長さと同じ数だけ同じ記号を縦・横・斜めに並べた側が勝ち。
"""

from __future__ import annotations

from minimax_alpha_beta.game.tic_tac_toe.types import (
    DEFAULT_SIZE,
    EMPTY,
    MAXIMIZER,
    MINIMIZER,
    WIN_SCORE,
)


class TicTacToe:
    """Mutable game state for tic-tac-toe.

    三目並べの対局状態。GameState プロトコルを実装する。

    play() / clear() は盤面をその場で書き換える。
    探索エンジンは「指す → 再帰 → 戻す」でこのオブジェクトを使い回す。

    Terminal conditions（終局条件）:
    1. 一列揃い: 縦・横・斜めのいずれかを同じ記号で埋めた側の勝ち
    2. 空きマスなし: 勝者がいなければ引き分け
    """

    def __init__(
        self,
        size: int = DEFAULT_SIZE,
        default_char: str = EMPTY,
        maximizer: str = MAXIMIZER,
        minimizer: str = MINIMIZER,
    ) -> None:
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}")
        self.size = size
        self.default_char = default_char
        self.maximizer = maximizer
        self.minimizer = minimizer
        self.board: list[str] = [default_char] * (size * size)

        # 勝ち筋（マス番号の列）は盤面サイズだけで決まるので先に作っておく
        n = size
        self._diagonals = [
            [n * i + i for i in range(n)],            # 主対角線（左上→右下）
            [n * (n - 1 - i) + i for i in range(n)],  # 反対角線（左下→右上）
        ]
        self._rows_and_cols = [[n * r + c for c in range(n)] for r in range(n)]
        self._rows_and_cols += [[n * r + c for r in range(n)] for c in range(n)]

    def __repr__(self) -> str:
        return f"TicTacToe(size={self.size}, board={''.join(self.board)!r})"

    # ------------------------------------------------------------------
    # 勝敗判定
    # ------------------------------------------------------------------

    def _owns_line(self, mark: str, line: list[int]) -> bool:
        return all(self.board[idx] == mark for idx in line)

    def get_winner(self) -> str | None:
        """勝者の記号を返す。対局中または引き分けは None。

        判定順序:
        1. 斜め2本（最大化側 → 最小化側）
        2. 各行（行ごとに最大化側 → 最小化側）
        3. 各列（同上）
        """
        for mark in (self.maximizer, self.minimizer):
            if any(self._owns_line(mark, line) for line in self._diagonals):
                return mark
        for line in self._rows_and_cols:
            for mark in (self.maximizer, self.minimizer):
                if self._owns_line(mark, line):
                    return mark
        return None

    def is_game_tied(self) -> bool:
        """勝者なしで盤面が埋まっていれば True。"""
        return self.get_winner() is None and self.default_char not in self.board

    def is_game_complete(self) -> bool:
        """勝者がいるか、空きマスがなければ True。"""
        return self.default_char not in self.board or self.get_winner() is not None

    def evaluate(self) -> float:
        """局面の静的評価値（最大化側の勝ち +1000、最小化側の勝ち -1000）。

        引き分け・対局中は 0。
        """
        winner = self.get_winner()
        if winner is None:
            return 0.0
        if winner == self.maximizer:
            return WIN_SCORE
        return -WIN_SCORE

    # ------------------------------------------------------------------
    # 手の生成と適用
    # ------------------------------------------------------------------

    def get_available_moves(self) -> list[int]:
        """空きマスの番号を昇順で返す。終局後は空リスト。"""
        if self.get_winner() is not None:
            return []
        return [idx for idx, cell in enumerate(self.board) if cell == self.default_char]

    def play(self, move: int, maximizer: bool) -> None:
        """マス move に手番側の記号を置く。"""
        self.board[move] = self.maximizer if maximizer else self.minimizer

    def clear(self, move: int) -> None:
        """マス move を空きに戻す。"""
        self.board[move] = self.default_char

    def get_board(self) -> tuple[str, ...]:
        """盤面の読み取り専用ビュー（タプル）を返す。"""
        return tuple(self.board)

    def is_a_valid_move(self, move: int) -> bool:
        """盤面内の空きマスなら True。"""
        return 0 <= move < len(self.board) and self.board[move] == self.default_char

    def get_a_sentinel_move(self) -> int:
        """盤面外のマス番号を番兵として返す。"""
        return self.size * self.size + 1
