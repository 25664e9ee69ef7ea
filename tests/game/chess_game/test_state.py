"""Tests for ChessGame (python-chess wrapper).

チェスでも三目並べと同じ GameState プロトコルで探索できることを確認する。
"""

from __future__ import annotations

import chess
import pytest

from minimax_alpha_beta.engine.minimax import best_move, search
from minimax_alpha_beta.game.chess_game import MATE_SCORE, TEMPO_BONUS, ChessGame
from minimax_alpha_beta.game.protocol import GameState

# 1.e4 e5 2.Bc4 Nc6 3.Qh5 Nf6 — 白は Qxf7# で詰み
SCHOLARS_MATE_FEN = "r1bqkb1r/pppp1ppp/2n2n2/4p2Q/2B1P3/8/PPPP1PPP/RNB1K1NR w KQkq - 4 4"


def _fools_mate() -> ChessGame:
    """1.f3 e5 2.g4 Qh4# — 黒の勝ち。"""
    game = ChessGame()
    for uci, maximizer in (("f2f3", True), ("e7e5", False), ("g2g4", True), ("d8h4", False)):
        game.play(chess.Move.from_uci(uci), maximizer)
    return game


class TestProtocolCompliance:
    def test_implements_game_state(self) -> None:
        assert isinstance(ChessGame(), GameState)


class TestInitialPosition:
    def test_white_to_move(self) -> None:
        assert ChessGame().board.turn == chess.WHITE

    def test_balanced_material_is_not_scored_as_draw(self) -> None:
        # 0 は引き分け専用。駒が同数でも手番ボーナスの分だけずれる
        game = ChessGame()
        assert not game.is_game_tied()
        assert game.evaluate() == TEMPO_BONUS
        game.play(chess.Move.from_uci("e2e4"), True)
        assert game.evaluate() == -TEMPO_BONUS

    def test_twenty_legal_moves(self) -> None:
        assert len(ChessGame().get_available_moves()) == 20

    def test_not_complete(self) -> None:
        game = ChessGame()
        assert not game.is_game_complete()
        assert not game.is_game_tied()
        assert game.get_winner() is None


class TestEvaluate:
    def test_material_advantage(self) -> None:
        # 黒のクイーンがない局面
        game = ChessGame("rnb1kbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1")
        assert game.evaluate() == 900 + TEMPO_BONUS

    def test_minor_piece_trade_off_is_not_zero(self) -> None:
        # 白はビショップ、黒はナイトを1枚ずつ失った局面（差は 10 センチポーン）
        game = ChessGame("r1bqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RN1QKBNR b KQkq - 0 1")
        assert game.evaluate() == 320 - 330 - TEMPO_BONUS
        assert game.evaluate() != 0.0

    def test_only_draws_score_zero(self) -> None:
        positions = [
            ChessGame(),
            ChessGame(SCHOLARS_MATE_FEN),
            ChessGame("7k/5Q2/6K1/8/8/8/8/8 b - - 0 1"),
            ChessGame("8/8/8/4k3/8/8/8/4K3 w - - 0 1"),
            _fools_mate(),
        ]
        for game in positions:
            assert (game.evaluate() == 0.0) == game.is_game_tied(), game

    def test_checkmate(self) -> None:
        game = _fools_mate()
        assert game.is_game_complete()
        assert game.get_winner() == chess.BLACK
        assert game.evaluate() == -MATE_SCORE

    def test_stalemate_is_draw(self) -> None:
        game = ChessGame("7k/5Q2/6K1/8/8/8/8/8 b - - 0 1")
        assert game.is_game_tied()
        assert game.get_winner() is None
        assert game.evaluate() == 0.0


class TestPlayAndClear:
    def test_round_trip_restores_position(self) -> None:
        game = ChessGame(SCHOLARS_MATE_FEN)
        fen = game.board.fen()
        for move in game.get_available_moves():
            score = game.evaluate()
            game.play(move, True)
            game.clear(move)
            assert game.board.fen() == fen
            assert game.evaluate() == score
            assert not game.is_game_complete()

    def test_wrong_side_raises(self) -> None:
        game = ChessGame()
        with pytest.raises(ValueError):
            game.play(chess.Move.from_uci("e7e5"), False)

    def test_sentinel_cannot_be_played(self) -> None:
        game = ChessGame()
        with pytest.raises(ValueError):
            game.play(game.get_a_sentinel_move(), True)

    def test_clear_without_history_raises(self) -> None:
        game = ChessGame()
        with pytest.raises(ValueError):
            game.clear(chess.Move.from_uci("e2e4"))

    def test_clear_out_of_order_raises(self) -> None:
        game = ChessGame()
        game.play(chess.Move.from_uci("e2e4"), True)
        game.play(chess.Move.from_uci("e7e5"), False)
        with pytest.raises(ValueError):
            game.clear(chess.Move.from_uci("e2e4"))


class TestMoves:
    def test_sentinel_is_none(self) -> None:
        game = ChessGame()
        assert game.get_a_sentinel_move() is None
        assert not game.is_a_valid_move(None)

    def test_valid_move(self) -> None:
        game = ChessGame()
        assert game.is_a_valid_move(chess.Move.from_uci("e2e4"))
        assert not game.is_a_valid_move(chess.Move.from_uci("e2e5"))

    def test_board_view_is_a_copy(self) -> None:
        game = ChessGame()
        view = game.get_board()
        view.push(chess.Move.from_uci("e2e4"))
        assert game.board.fen() == chess.STARTING_FEN


class TestSearch:
    def test_finds_mate_in_one(self) -> None:
        game = ChessGame(SCHOLARS_MATE_FEN)
        # 白（最大化側）が指し、黒が応手する
        move = best_move(game, 1, False)
        assert move == chess.Move.from_uci("h5f7")
        assert game.board.fen() == SCHOLARS_MATE_FEN

    def test_checkmated_position_returns_sentinel(self) -> None:
        assert best_move(_fools_mate(), 2, True) is None

    def test_depth_three_prefers_immediate_mate(self) -> None:
        # Qa7 と Kg6 で h8 の黒キングを追い詰めている。即詰みは遅い詰みより高く評価される
        game = ChessGame("7k/Q7/6K1/8/8/8/8/8 w - - 0 1")
        fen = game.board.fen()
        move, score = search(game, 3, False)
        assert score == MATE_SCORE
        assert game.board.fen() == fen
        game.play(move, True)
        assert game.board.is_checkmate()
