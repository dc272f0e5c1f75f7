"""Random player — selects a legal move uniformly at random.

ランダムプレイヤー: 合法手の中からランダムに手を選ぶ。

用途:
- ルール実装の動作確認（ランダム対局が最後まで例外なく進むか）
- CPU プレイヤーの比較対象
"""

from __future__ import annotations

import random
from typing import Any

from shogi_engine.game.protocol import GameState


def random_move(state: GameState, rng: random.Random | None = None) -> Any:
    """Return a random legal move.

    合法手の中から一様ランダムで1手を返す。
    合法手がない場合は ValueError を送出する（終局局面では呼ばれないはず）。
    """
    moves = state.legal_moves()
    if not moves:
        raise ValueError("No legal moves available")
    return (rng or random).choice(moves)  # 一様ランダムサンプリング
