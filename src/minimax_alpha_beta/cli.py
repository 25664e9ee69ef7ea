"""CLI entry point — Human vs alpha-beta minimax AI at tic-tac-toe.

コマンドラインで動く三目並べ対局プログラム。
プレイヤー（最大化側 "o"）対ミニマックスAI（最小化側 "x"）で対局できる。

起動方法: `uv run ttt-cli --size 3 --depth 9`
"""

from __future__ import annotations

import argparse
import logging

from minimax_alpha_beta.engine.config import CLI_CONFIG, LIBRARY_CONFIG
from minimax_alpha_beta.engine.minimax import best_move
from minimax_alpha_beta.game.tic_tac_toe import TicTacToe, board_to_str, format_move


def _announce_result(game: TicTacToe) -> None:
    print("Game is complete.")
    if game.is_game_tied():
        print("Game Tied!")
    else:
        print(f"{game.get_winner()} wins!")


def play_against_computer(size: int) -> None:
    """Play a game in a REPL against the engine at the library's default depth.

    既定の深さ（6）なら大きめの盤面でも AI の応答が速い。
    """
    play_against_computer_with_depth(size, LIBRARY_CONFIG.max_depth)


def play_against_computer_with_depth(size: int, depth: int) -> None:
    """Play a game of any size in a REPL against the engine.

    深さが大きいほど AI は強くなるが、考える時間も長くなる。

    ゲームの流れ:
    1. 盤面を表示（終局していれば結果を表示して終了）
    2. マス番号の入力を求める（数字以外や EOF で対局終了）
    3. プレイヤーの手を指し、AI が応答する
    4. 終局まで繰り返す
    """
    game = TicTacToe(size)
    example = min(7, size * size - 1)

    while True:
        print(f"Board:\n{board_to_str(game)}")
        print()

        if game.is_game_complete():
            _announce_result(game)
            return

        try:
            choice = input(f"Enter a move. (e.g. {format_move(example, size)}): ")
            move = int(choice.strip())
        except ValueError:
            print("Not a number. Game aborted.")
            return
        except (EOFError, KeyboardInterrupt):
            print("\nGame aborted.")
            return

        if not game.is_a_valid_move(move):
            print(f"Invalid: {move} is not an empty square")
            continue

        print(f"Move played by you: {format_move(move, size)}")
        game.play(move, True)

        # AI（最小化側）の番: 応手する側は最大化側なので is_maximizing=True
        ai_move = best_move(game, depth, True)
        if ai_move == game.get_a_sentinel_move():
            continue  # 人間の手で終局した（次のループで結果を表示）
        print(f"Move played by AI: {format_move(ai_move, size)}")
        game.play(ai_move, False)


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and run a Human vs AI game."""
    parser = argparse.ArgumentParser(
        description=(
            "Play a game of Tic Tac Toe with a computer opponent "
            "that uses the Alpha-Beta Minimax Engine."
        ),
    )
    parser.add_argument(
        "--size", type=int, default=CLI_CONFIG.board_size, help="The size of the board."
    )
    parser.add_argument(
        "--depth", type=int, default=CLI_CONFIG.max_depth, help="The depth of the search."
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for engine diagnostics.",
    )
    args = parser.parse_args(argv)

    if args.size < 1:
        parser.error("--size must be positive")
    if args.depth < 0:
        parser.error("--depth must not be negative")

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    play_against_computer_with_depth(args.size, args.depth)


if __name__ == "__main__":
    main()
