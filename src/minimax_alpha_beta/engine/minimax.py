"""Minimax search with alpha-beta pruning for any GameState."""

from __future__ import annotations

import logging
from typing import Any

from minimax_alpha_beta.game.protocol import GameState

logger = logging.getLogger(__name__)

# 探索の初期値に使う無限大（定数なので状態は持たない）
INF = float("inf")
NEG_INF = float("-inf")


def _window_for_max(alpha: float, beta: float, shift: int) -> tuple[float, float]:
    """最大化ノードの窓 (alpha, beta) を、手数補正前の値の空間に写す。

    このノードは子の最大値 v を v - shift（v == 0 なら 0）にして返す。
    返り値が beta 以上になるのは v >= beta + shift のとき、alpha 以下に
    なるのは v <= alpha + shift のとき。ただし -shift <= alpha < 0 では
    v = 0 が alpha を超えるので、下限は alpha のまま残す。
    """
    low = alpha if -shift <= alpha < 0 else alpha + shift
    return low, beta + shift


def _window_for_min(alpha: float, beta: float, shift: int) -> tuple[float, float]:
    """最小化ノードの窓を写す。_window_for_max の符号を反転したもの。"""
    high = beta if 0 < beta <= shift else beta - shift
    return alpha - shift, high


def minimax_score(
    state: GameState,
    depth: int,
    is_maximizing: bool,
    alpha: float,
    beta: float,
    max_depth: int,
) -> float:
    """Minimax search with alpha-beta pruning.

    ミニマックス法 + αβ枝刈りによる局面の評価値。

    ミニマックス法とは:
    最大化側は評価値が最大になる手を、最小化側は最小になる手を選ぶと仮定して
    木を再帰的に評価する手法。

    αβ枝刈りとは:
    探索不要な枝を切り捨て、ミニマックスと同じ結果をより速く得る手法。
    alpha: 最大化側が保証できる最低スコア
    beta:  最小化側が保証できる最高スコア

    局面 state はその場で書き換えられるが、各手は再帰の後に必ず
    clear() で戻されるので、呼び出し後の局面は呼び出し前と同じになる。

    Returns the score of ``state`` with ``is_maximizing`` to move. Non-zero
    scores are shifted by the number of plies already searched so that faster
    wins and slower losses are preferred; a draw (0) is never shifted.

    ``alpha`` and ``beta`` bound the *shifted* value this call returns. They
    are mapped back into the unshifted space of the children before the loop,
    so every cutoff gives the same root result as a search without pruning.
    """
    moves = state.get_available_moves()
    # 葉ノード: 深さ0・終局・合法手なしなら静的評価をそのまま返す
    if depth == 0 or state.is_game_complete() or not moves:
        return state.evaluate()

    shift = max_depth - depth
    if is_maximizing:
        alpha, beta = _window_for_max(alpha, beta, shift)
        value = NEG_INF
        for move in moves:
            state.play(move, True)
            score = minimax_score(state, depth - 1, False, alpha, beta, max_depth)
            state.clear(move)
            value = max(value, score)
            alpha = max(alpha, score)
            if beta <= alpha:
                break  # βカットオフ: 最小化側はこの枝を選ばない
        # 手数補正: 浅い（早い）勝ちほど高く評価する
        if value != 0:
            return value - shift
        return value

    alpha, beta = _window_for_min(alpha, beta, shift)
    value = INF
    for move in moves:
        state.play(move, False)
        score = minimax_score(state, depth - 1, True, alpha, beta, max_depth)
        state.clear(move)
        value = min(value, score)
        beta = min(beta, score)
        if beta <= alpha:
            break  # αカットオフ: 最大化側はこの枝を選ばない
    if value != 0:
        return value + shift
    return value


def search(
    state: GameState,
    max_depth: int,
    is_maximizing: bool,
) -> tuple[Any, float]:
    """Return ``(best_move, score)`` for the side to move.

    ``is_maximizing`` names the side that replies to the chosen move; the
    engine itself moves as ``not is_maximizing``. When maximizing replies the
    engine picks the lowest-scoring candidate, and vice versa.

    同点の手が複数あるときは、生成順で後の手を選ぶ（<= / >= で比較）。
    終局局面では探索せず番兵の手を返す。
    """
    best_move = state.get_a_sentinel_move()
    best_score = INF if is_maximizing else NEG_INF

    if state.is_game_complete():
        return best_move, best_score

    for move in state.get_available_moves():
        state.play(move, not is_maximizing)
        score = minimax_score(state, max_depth, is_maximizing, NEG_INF, INF, max_depth)
        state.clear(move)
        if is_maximizing:
            if score <= best_score:
                best_score = score
                best_move = move
        elif score >= best_score:
            best_score = score
            best_move = move

    logger.debug(
        "best move %r (score %s) at depth %d, replying side %s",
        best_move,
        best_score,
        max_depth,
        "maximizer" if is_maximizing else "minimizer",
    )
    return best_move, best_score


def best_move(state: GameState, max_depth: int, is_maximizing: bool) -> Any:
    """Return the best move using alpha-beta minimax search.

    αβミニマックス探索で最善手を返す。
    3×3 の三目並べなら max_depth=9 で完全読みになる。
    """
    move, _ = search(state, max_depth, is_maximizing)
    return move
