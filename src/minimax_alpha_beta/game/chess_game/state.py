"""GameState implementation for chess, backed by python-chess.

チェスの対局状態。ルール（合法手生成・終局判定）は python-chess に任せ、
このクラスは GameState プロトコルへの橋渡しと静的評価だけを担当する。
白が最大化側、黒が最小化側。
"""

from __future__ import annotations

import chess

# 駒の価値テーブル（材料評価に使用、単位はセンチポーン）
# キングは盤上から消えないので評価に含めない
# すべて 10 の倍数なので、材料差に TEMPO_BONUS を足した値は 0 にならない
_PIECE_VALUES = {
    chess.PAWN: 100,
    chess.KNIGHT: 320,
    chess.BISHOP: 330,
    chess.ROOK: 500,
    chess.QUEEN: 900,
}

# 手番側に与える小さなボーナス。引き分け以外の局面を 0 にしない
TEMPO_BONUS = 5

# チェックメイトの評価値（材料差よりも十分大きい値）
MATE_SCORE = 100000.0


class ChessGame:
    """Mutable chess position.

    チェスの対局状態。GameState プロトコルを実装する。

    play() は python-chess の move stack に手を積み、clear() はそれを
    取り出すので、後入れ先出しの順で呼べば局面は完全に元へ戻る。
    """

    def __init__(self, fen: str | None = None) -> None:
        self.board = chess.Board(fen) if fen else chess.Board()

    def __repr__(self) -> str:
        return f"ChessGame(fen={self.board.fen()!r})"

    def evaluate(self) -> float:
        """Evaluate a position from white's perspective.

        局面を白の視点から数値評価する（静的評価関数）。

        Scoring:
        - Checkmate: ±MATE_SCORE
        - Draw (stalemate, insufficient material, ...): 0
        - Otherwise: material balance in centipawns (white minus black)
          plus TEMPO_BONUS for the side to move, so it is never 0
        """
        outcome = self.board.outcome()
        if outcome is not None:
            if outcome.winner is None:
                return 0.0  # 引き分け
            return MATE_SCORE if outcome.winner == chess.WHITE else -MATE_SCORE

        score = TEMPO_BONUS if self.board.turn == chess.WHITE else -TEMPO_BONUS
        for piece in self.board.piece_map().values():
            value = _PIECE_VALUES.get(piece.piece_type, 0)
            score += value if piece.color == chess.WHITE else -value
        return float(score)

    def get_winner(self) -> chess.Color | None:
        """勝者の色（chess.WHITE / chess.BLACK）を返す。対局中・引き分けは None。"""
        outcome = self.board.outcome()
        return outcome.winner if outcome is not None else None

    def is_game_tied(self) -> bool:
        outcome = self.board.outcome()
        return outcome is not None and outcome.winner is None

    def is_game_complete(self) -> bool:
        return self.board.outcome() is not None

    def get_available_moves(self) -> list[chess.Move]:
        """python-chess の生成順で合法手を返す。"""
        return list(self.board.legal_moves)

    def play(self, move: chess.Move | None, maximizer: bool) -> None:
        """手を指す。手番と指す側が一致しなければ ValueError。"""
        if move is None:
            raise ValueError("Cannot play the sentinel move")
        expected = chess.WHITE if maximizer else chess.BLACK
        if self.board.turn != expected:
            side = "white" if maximizer else "black"
            raise ValueError(f"It is not {side}'s turn to move")
        self.board.push(move)

    def clear(self, move: chess.Move | None) -> None:
        """直前の手を取り消す。move が直前の手でなければ ValueError。"""
        if move is None:
            raise ValueError("Cannot clear the sentinel move")
        if not self.board.move_stack:
            raise ValueError("No moves to undo")
        if self.board.peek() != move:
            raise ValueError(f"{move} is not the most recently played move")
        self.board.pop()

    def get_board(self) -> chess.Board:
        """盤面のコピーを返す（履歴は含まない）。"""
        return self.board.copy(stack=False)

    def is_a_valid_move(self, move: chess.Move | None) -> bool:
        return move is not None and self.board.is_legal(move)

    def get_a_sentinel_move(self) -> None:
        return None
