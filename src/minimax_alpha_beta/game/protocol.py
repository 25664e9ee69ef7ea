"""GameState protocol — all games implement this interface.

ゲーム状態の共通インタフェース（プロトコル）。

三目並べ・チェス・その他のゲームがこのプロトコルを実装することで、
αβミニマックス探索エンジンがゲームに依存せず動作できる。
これを「ポリモーフィズム」または「ダックタイピング」と呼ぶ。
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable  # isinstance() でのランタイムチェックを有効にする
class GameState(Protocol):
    """Common interface for all two-player, zero-sum game states.

    すべての二人零和ゲームが実装すべき共通インタフェース。
    このプロトコルを実装したクラスなら何でもミニマックス探索で使える。

    重要: play() / clear() は状態をその場で書き換える（ミュータブル設計）。
    探索エンジンは「指す → 再帰 → 戻す」を繰り返すため、
    play(m) の直後の clear(m) は局面を完全に元へ戻さなければならない。
    clear() は必ず直前に play() した手を後入れ先出しの順で受け取る。
    """

    def evaluate(self) -> float:
        """局面の静的評価値を返す（大きいほど最大化側が有利）。

        0 は引き分け（中立）の局面にだけ使うこと。
        探索は 0 以外の値を「勝ち負け」として手数補正するため。
        """
        ...

    def get_winner(self) -> Any | None:
        """勝者を返す。引き分けや対局中は None。"""
        ...

    def is_game_tied(self) -> bool:
        """勝者なしで終局していれば True を返す。"""
        ...

    def is_game_complete(self) -> bool:
        """勝敗が決したか、合法手がなければ True を返す。"""
        ...

    def get_available_moves(self) -> list[Any]:
        """合法手のリストを返す。順序は探索の同点処理に影響する。"""
        ...

    def play(self, move: Any, maximizer: bool) -> None:
        """手を指す（maximizer=True なら最大化側として）。"""
        ...

    def clear(self, move: Any) -> None:
        """直前に指した手 move を取り消す。"""
        ...

    def get_board(self) -> Any:
        """盤面の読み取り専用ビューを返す（表示用、探索では使わない）。"""
        ...

    def is_a_valid_move(self, move: Any) -> bool:
        """move が現局面で合法なら True を返す。"""
        ...

    def get_a_sentinel_move(self) -> Any:
        """決して合法にならない番兵の手（「指す手なし」の印）を返す。"""
        ...
