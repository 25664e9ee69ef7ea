"""Types and constants for 三目並べ (tic-tac-toe).

三目並べの基本定数定義。
盤面は size × size のマスを1次元リストで表し、マス番号は row * size + col。
"""

# 既定の盤面サイズ: 3 × 3
DEFAULT_SIZE = 3

# マスの表示文字
EMPTY = "-"      # 空きマス
MAXIMIZER = "o"  # 最大化側の記号（評価値 +1000 で勝ち）
MINIMIZER = "x"  # 最小化側の記号（評価値 -1000 で勝ち）

# 終局時の評価値（引き分けは 0）
WIN_SCORE = 1000.0
