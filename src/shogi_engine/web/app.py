"""FastAPI web application for playing shogi against the CPU.

FastAPI を使った将棋 Web API。ブラウザのフロントエンド（盤面描画・ドラッグ操作）は
この API だけを使って局面を取得し、手を送る。

エンドポイント:
  POST /api/new-game          — 新規対局を開始（ゲームIDを返す）
  POST /api/move              — プレイヤーが手を指す（CPU が応答して次局面を返す）
  POST /api/auto-move/{id}    — 手番側の CPU に1手指させる（CPU 同士の観戦用）
  GET  /api/state/{id}        — 現在の局面情報を取得
  POST /api/undo/{id}         — 1手戻す
  POST /api/redo/{id}         — 戻した手をやり直す

手は JSON オブジェクトでやり取りする:
  {"type": "board", "from": [r, c], "to": [r, c], "promote": false}
  {"type": "drop", "piece_type": "PAWN", "to": [r, c]}
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from typing import Any, Literal

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from shogi_engine.engine.greedy import greedy_move
from shogi_engine.engine.random_player import random_move
from shogi_engine.game.shogi.display import format_board
from shogi_engine.game.shogi.moves import BoardMove, DropMove, Move
from shogi_engine.game.shogi.notation import format_move
from shogi_engine.game.shogi.state import Position, initial_position
from shogi_engine.game.shogi.types import COLS, HAND_PIECE_TYPES, ROWS, PieceType, Side
from shogi_engine.web.config import ServerConfig

logger = logging.getLogger(__name__)

app = FastAPI(title="Shogi Engine")

# 対局情報のインメモリストレージ（サーバ再起動で消える）
_games: dict[str, dict[str, Any]] = {}

# 保持する対局数の上限。超えたら最も古い対局から捨てる
MAX_GAMES = 1000

CpuFn = Callable[[Position], Move]


class NewGameRequest(BaseModel):
    """新規対局リクエストのスキーマ。"""

    ai_type: str = "greedy"  # 後手の CPU 種別: "greedy" or "random"
    sente_type: str = "human"  # 先手の種別: "human" or CPU 種別（観戦モード）


class MovePayload(BaseModel):
    """1手分の JSON 表現。"""

    model_config = ConfigDict(populate_by_name=True)

    type: Literal["board", "drop"]
    from_square: tuple[int, int] | None = Field(default=None, alias="from")
    to: tuple[int, int]
    promote: bool = False
    piece_type: str | None = None


class MoveRequest(BaseModel):
    """指し手リクエストのスキーマ。"""

    game_id: str  # 対局ID（/api/new-game で取得）
    move: MovePayload


def _get_ai_fn(ai_type: str) -> CpuFn:
    """Get the CPU move function based on type."""
    if ai_type == "greedy":
        return lambda position: greedy_move(position)
    if ai_type == "random":
        return lambda position: random_move(position)
    msg = f"Unknown AI type: {ai_type}"
    raise ValueError(msg)


def move_to_dict(move: Move) -> dict[str, Any]:
    """Move → JSON 用の辞書。"""
    if isinstance(move, DropMove):
        return {
            "type": "drop",
            "piece_type": move.piece_type.name,
            "to": list(move.to_square),
        }
    return {
        "type": "board",
        "from": list(move.from_square),
        "to": list(move.to_square),
        "promote": move.promote,
    }


def payload_to_move(payload: MovePayload) -> Move:
    """Convert a request payload to a Move.

    形式が不正なら ValueError。合法かどうかはここでは判定しない。
    """
    to = (payload.to[0], payload.to[1])
    if payload.type == "drop":
        if payload.piece_type is None:
            raise ValueError("Drop move needs piece_type")
        try:
            piece_type = PieceType[payload.piece_type.upper()]
        except KeyError:
            msg = f"Unknown piece type: {payload.piece_type}"
            raise ValueError(msg) from None
        return DropMove(piece_type, to)
    if payload.from_square is None:
        raise ValueError("Board move needs from")
    return BoardMove((payload.from_square[0], payload.from_square[1]), to, payload.promote)


def _state_to_dict(game: dict[str, Any]) -> dict[str, Any]:
    """Convert the current position of a game to a JSON-serializable dict.

    フロントエンドの JavaScript がこの形式を受け取って盤面を描画する。
    """
    position: Position = game["position"]
    squares: list[dict[str, Any] | None] = []
    for piece in position.board.squares:
        if piece is None:
            squares.append(None)
        else:
            squares.append(
                {
                    "type": piece.piece_type.name,  # 駒種（文字列）
                    "owner": piece.owner.value,  # 所有者（0=先手, 1=後手）
                    "promoted": piece.promoted,
                }
            )
    hands = [
        {pt.name: position.hand(side).count(pt) for pt in HAND_PIECE_TYPES}
        for side in Side
    ]
    legal = position.legal_moves()
    is_terminal = not legal

    return {
        "current_player": position.current_player,  # 手番（0=先手, 1=後手）
        "is_terminal": is_terminal,
        "winner": position.turn.opponent.value if is_terminal else None,
        "in_check": position.in_check,
        "legal_moves": [move_to_dict(m) for m in legal],
        "squares": squares,  # 81要素（行優先）
        "hands": hands,
        "rows": ROWS,
        "cols": COLS,
        "kifu": list(game["kifu"]),
        "can_undo": bool(game["past"]),
        "can_redo": bool(game["future"]),
        "board_display": format_board(position),  # テキスト形式の盤面表示
    }


def _get_game(game_id: str) -> dict[str, Any]:
    game = _games.get(game_id)
    if game is None:
        raise HTTPException(404, "Game not found")
    return game


def _cpu_for(game: dict[str, Any], position: Position) -> CpuFn | None:
    """手番側の CPU 関数。人間の手番なら None。"""
    return game["sente_fn"] if position.turn == Side.SENTE else game["gote_fn"]


def _play(game: dict[str, Any], move: Move) -> str:
    """Apply move to the game, recording history. Returns the kifu text."""
    position: Position = game["position"]
    text = format_move(position, move)
    game["past"].append((position, text))
    game["future"].clear()
    game["position"] = position.apply_move(move)
    game["kifu"].append(text)
    logger.info("game %s: %s", game["id"], text)
    if game["position"].is_terminal:
        logger.info(
            "game %s finished, winner=%s",
            game["id"],
            game["position"].turn.opponent.name,
        )
    return text


@app.post("/api/new-game")
async def new_game(req: NewGameRequest) -> dict[str, Any]:
    """新規対局を開始する。対局IDと初期局面情報を返す。"""
    try:
        sente_fn = None if req.sente_type == "human" else _get_ai_fn(req.sente_type)
        gote_fn = _get_ai_fn(req.ai_type)
    except ValueError as e:
        raise HTTPException(400, str(e)) from e

    while len(_games) >= MAX_GAMES:
        evicted = next(iter(_games))
        del _games[evicted]
        logger.info("game %s evicted", evicted)

    game_id = str(uuid.uuid4())[:8]  # 短いIDを生成
    _games[game_id] = {
        "id": game_id,
        "position": initial_position(),
        "sente_fn": sente_fn,  # None = 人間
        "gote_fn": gote_fn,
        "past": [],  # (局面, 棋譜文字列) のスタック
        "future": [],
        "kifu": [],
    }
    logger.info("game %s created (sente=%s, gote=%s)", game_id, req.sente_type, req.ai_type)

    return {"game_id": game_id, "state": _state_to_dict(_games[game_id])}


@app.post("/api/move")
async def make_move(req: MoveRequest) -> dict[str, Any]:
    """プレイヤーの手を受け取り、CPU が応答して次の局面を返す。

    処理フロー:
    1. 手を Move に変換し、合法手リストの要素と一致するか検証して適用
    2. 対局が続いていて相手が CPU なら、CPU の手を適用
    """
    game = _get_game(req.game_id)
    position: Position = game["position"]

    legal = position.legal_moves()
    if not legal:
        raise HTTPException(400, "Game is already over")
    if _cpu_for(game, position) is not None:
        raise HTTPException(400, "Current player is CPU, use /api/auto-move instead")

    try:
        move = payload_to_move(req.move)
    except ValueError as e:
        raise HTTPException(400, str(e)) from e
    if move not in legal:
        raise HTTPException(400, f"Illegal move: {move_to_dict(move)}")

    player_text = _play(game, move)

    # 対局が終わっていなければ相手の CPU が応答
    ai_move = None
    ai_text = None
    position = game["position"]
    fn = _cpu_for(game, position)
    if fn is not None and not position.is_terminal:
        ai_move = fn(position)
        ai_text = _play(game, ai_move)

    return {
        "state": _state_to_dict(game),
        "player_move": player_text,
        "ai_move": move_to_dict(ai_move) if ai_move is not None else None,
        "ai_move_text": ai_text,
    }


@app.post("/api/auto-move/{game_id}")
async def auto_move(game_id: str) -> dict[str, Any]:
    """手番側の CPU に1手指させる（CPU 同士の観戦モード用）。"""
    game = _get_game(game_id)
    position: Position = game["position"]

    if position.is_terminal:
        raise HTTPException(400, "Game is already over")

    moved_by = position.current_player
    fn = _cpu_for(game, position)
    if fn is None:
        raise HTTPException(400, "Current player is human, use /api/move instead")

    move = fn(position)
    text = _play(game, move)
    return {
        "state": _state_to_dict(game),
        "move": move_to_dict(move),
        "move_text": text,
        "moved_by": moved_by,
    }


@app.get("/api/state/{game_id}")
async def get_state(game_id: str) -> dict[str, Any]:
    """現在の局面情報を取得する（ページ再読み込み時などに使用）。"""
    return _state_to_dict(_get_game(game_id))


@app.post("/api/undo/{game_id}")
async def undo(game_id: str) -> dict[str, Any]:
    """1手戻す。局面はイミュータブルなのでスタックの参照を入れ替えるだけ。"""
    game = _get_game(game_id)
    if not game["past"]:
        raise HTTPException(400, "Nothing to undo")
    previous, text = game["past"].pop()
    game["future"].append((game["position"], text))
    game["position"] = previous
    game["kifu"].pop()
    logger.info("game %s: undo %s", game_id, text)
    return _state_to_dict(game)


@app.post("/api/redo/{game_id}")
async def redo(game_id: str) -> dict[str, Any]:
    """戻した手をやり直す。"""
    game = _get_game(game_id)
    if not game["future"]:
        raise HTTPException(400, "Nothing to redo")
    following, text = game["future"].pop()
    game["past"].append((game["position"], text))
    game["position"] = following
    game["kifu"].append(text)
    logger.info("game %s: redo %s", game_id, text)
    return _state_to_dict(game)


def main() -> None:
    """Run the web server.

    `shogi-web` または `python -m shogi_engine.web.app` で起動する。
    """
    import uvicorn

    config = ServerConfig.from_env()
    logging.basicConfig(level=config.log_level)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
