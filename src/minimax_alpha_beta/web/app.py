"""FastAPI web application for playing tic-tac-toe against the AI.

FastAPI を使った三目並べ AI Web アプリケーション。
ブラウザから αβミニマックス AI と対戦できる REST API を提供する。

エンドポイント:
  GET  /               — フロントエンドの HTML を返す
  POST /api/new-game   — 新規対局を開始（ゲームIDを返す）
  POST /api/move       — プレイヤーが手を指す（AIが応答して次局面を返す）
  GET  /api/state/{id} — 現在の局面情報を取得
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from pathlib import Path
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

from minimax_alpha_beta.engine.config import LIBRARY_CONFIG
from minimax_alpha_beta.engine.minimax import best_move
from minimax_alpha_beta.engine.random_player import random_move
from minimax_alpha_beta.game.tic_tac_toe import TicTacToe, board_to_str

logger = logging.getLogger(__name__)

# 静的ファイル（HTML）のディレクトリ
STATIC_DIR = Path(__file__).parent / "static"

app = FastAPI(title="Tic-Tac-Toe AI")
# /static/ 以下で静的ファイルを配信
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

# 対局情報のインメモリストレージ（サーバ再起動で消える簡易実装）
# 上限を超えたら古い対局から捨てる
MAX_STORED_GAMES = 1000
_games: dict[str, dict[str, Any]] = {}

# 1リクエストで走る探索の大きさの上限
MAX_BOARD_SIZE = 4
MAX_DEPTH = 9


class NewGameRequest(BaseModel):
    """新規対局リクエストのスキーマ。"""

    size: int = LIBRARY_CONFIG.board_size  # 盤面の一辺のマス数
    depth: int = LIBRARY_CONFIG.max_depth  # AI の探索深さ
    ai_type: str = "minimax"  # AI種別: "minimax" or "random"


class MoveRequest(BaseModel):
    """指し手リクエストのスキーマ。"""

    game_id: str  # 対局ID（/api/new-game で取得）
    move: int  # マス番号（row * size + col）


def _get_ai_fn(ai_type: str, depth: int) -> Callable[[TicTacToe], int]:
    """Get the AI move function based on type.

    AI種別に応じた手選択関数を返す。AI は常に最小化側として指す。
    """
    if ai_type == "random":
        return lambda game: random_move(game)
    if ai_type == "minimax":
        # 応手するのは人間（最大化側）なので is_maximizing=True
        return lambda game: best_move(game, depth, True)
    msg = f"Unknown AI type: {ai_type}"
    raise ValueError(msg)


def _state_to_dict(game: TicTacToe) -> dict[str, Any]:
    """Convert game state to JSON-serializable dict.

    局面情報を JSON 形式（辞書）に変換する。
    """
    return {
        "board": list(game.get_board()),  # マスの記号（size * size 要素）
        "size": game.size,
        "available_moves": game.get_available_moves(),  # 合法手リスト
        "is_complete": game.is_game_complete(),  # 終局フラグ
        "is_tied": game.is_game_tied(),
        "winner": game.get_winner(),  # 勝者の記号（None=対局中/引き分け）
        "board_display": board_to_str(game),  # テキスト形式の盤面表示
    }


@app.get("/", response_class=HTMLResponse)
async def index() -> HTMLResponse:
    """フロントエンドの HTML を配信する。"""
    index_path = STATIC_DIR / "index.html"
    return HTMLResponse(content=index_path.read_text(encoding="utf-8"))


@app.post("/api/new-game")
async def new_game(req: NewGameRequest) -> dict[str, Any]:
    """新規対局を開始する。

    対局IDと初期局面情報を返す。
    対局IDはその後の手番送信（/api/move）で使用する。
    """
    if not 1 <= req.size <= MAX_BOARD_SIZE:
        msg = f"Board size must be between 1 and {MAX_BOARD_SIZE}: {req.size}"
        raise HTTPException(400, msg)
    if not 0 <= req.depth <= MAX_DEPTH:
        msg = f"Depth must be between 0 and {MAX_DEPTH}: {req.depth}"
        raise HTTPException(400, msg)
    try:
        ai_fn = _get_ai_fn(req.ai_type, req.depth)
    except ValueError as exc:
        raise HTTPException(400, str(exc)) from exc

    game_id = str(uuid.uuid4())[:8]  # 短いIDを生成
    game = TicTacToe(req.size)
    if len(_games) >= MAX_STORED_GAMES:
        oldest = next(iter(_games))
        del _games[oldest]
        logger.info("evicted game %s", oldest)
    _games[game_id] = {"game": game, "ai_fn": ai_fn}
    logger.info(
        "new game %s: size=%d depth=%d ai=%s", game_id, req.size, req.depth, req.ai_type
    )

    return {
        "game_id": game_id,
        "state": _state_to_dict(game),
    }


@app.post("/api/move")
def make_move(req: MoveRequest) -> dict[str, Any]:
    """プレイヤーの手を受け取り、AIが応答して次の局面を返す。

    探索はブロッキング処理なので、通常の def にしてスレッドプールで実行させる。

    処理フロー:
    1. プレイヤーの手を検証して適用（最大化側）
    2. AI がミニマックスで最善手を計算
    3. AI の手を適用して新局面を返す（最小化側）
    """
    entry = _games.get(req.game_id)
    if entry is None:
        raise HTTPException(404, "Game not found")

    game: TicTacToe = entry["game"]

    if game.is_game_complete():
        raise HTTPException(400, "Game is already over")

    if not game.is_a_valid_move(req.move):
        raise HTTPException(400, f"Illegal move: {req.move}")

    game.play(req.move, True)

    # ゲームが終わっていなければ AI が応答
    ai_move = None
    if not game.is_game_complete():
        ai_move = entry["ai_fn"](game)
        game.play(ai_move, False)

    logger.info("game %s: player %d, ai %s", req.game_id, req.move, ai_move)
    return {
        "state": _state_to_dict(game),
        "player_move": req.move,
        "ai_move": ai_move,
    }


@app.get("/api/state/{game_id}")
async def get_state(game_id: str) -> dict[str, Any]:
    """現在の局面情報を取得する（ページ再読み込み時などに使用）。"""
    entry = _games.get(game_id)
    if entry is None:
        raise HTTPException(404, "Game not found")
    return _state_to_dict(entry["game"])


def main() -> None:
    """Run the web server.

    `uv run ttt-web` または `python -m minimax_alpha_beta.web.app` で起動する。
    ブラウザで http://localhost:8000 にアクセスして対局できる。
    """
    import uvicorn

    logging.basicConfig(level=logging.INFO)
    uvicorn.run(app, host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
