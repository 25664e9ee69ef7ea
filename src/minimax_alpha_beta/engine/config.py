"""Search configuration presets.

探索設定の定義。
盤面サイズと探索深さは用途（CLI・ライブラリ）によって既定値が異なるため、
設定クラスで管理する。
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SearchConfig:
    """Configuration for a game against the search engine.

    Attributes:
        board_size: 盤面の一辺のマス数（3 なら 3×3）
        max_depth:  探索深さ（手数、プライ単位）。深いほど強いが遅い
    """

    board_size: int = 3
    max_depth: int = 6


# コマンドラインツール用: 3×3 なら深さ9で完全読み
CLI_CONFIG = SearchConfig(board_size=3, max_depth=9)

# ライブラリの簡易関数用: 大きな盤面でも応答が速いよう浅めに設定
LIBRARY_CONFIG = SearchConfig(board_size=3, max_depth=6)
