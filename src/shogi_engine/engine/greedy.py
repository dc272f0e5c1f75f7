"""Greedy CPU player — one-ply capture scorer.

貪欲法の CPU: 探索はせず、各合法手を「取る駒の価値 + 成りボーナス」で
採点して最高点の手を選ぶ。同点の手は小さな乱数で崩す。
打ちは常に0点。
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from shogi_engine.game.shogi.moves import BoardMove, Move
from shogi_engine.game.shogi.state import Position
from shogi_engine.game.shogi.types import PieceType


def _default_values() -> dict[PieceType, float]:
    return {
        PieceType.KING: 1000.0,
        PieceType.ROOK: 9.0,
        PieceType.BISHOP: 8.0,
        PieceType.GOLD: 5.0,
        PieceType.SILVER: 4.0,
        PieceType.KNIGHT: 3.0,
        PieceType.LANCE: 3.0,
        PieceType.PAWN: 1.0,
    }


@dataclass(frozen=True)
class GreedyConfig:
    """Scoring parameters for the greedy player.

    Attributes:
        piece_values:    取った駒の価値（成り駒は元の駒種の価値）
        promotion_bonus: 成る手に加える点
        jitter:          同点崩し用の乱数の最大値（0 なら決定的）
    """

    piece_values: dict[PieceType, float] = field(default_factory=_default_values)
    promotion_bonus: float = 0.5
    jitter: float = 0.1


def score_move(position: Position, move: Move, config: GreedyConfig) -> float:
    """Score a move without randomness."""
    if not isinstance(move, BoardMove):
        return 0.0
    score = 0.0
    target = position.board.piece_at(*move.to_square)
    if target is not None:
        score += config.piece_values.get(target.piece_type, 0.0)
    if move.promote:
        score += config.promotion_bonus
    return score


def greedy_move(
    position: Position,
    config: GreedyConfig | None = None,
    rng: random.Random | None = None,
) -> Move:
    """Return the highest-scoring legal move.

    合法手がない場合は ValueError を送出する。
    """
    config = config or GreedyConfig()
    rng = rng or random.Random()
    moves = position.legal_moves()
    if not moves:
        raise ValueError("No legal moves available")
    return max(
        moves,
        key=lambda m: score_move(position, m, config) + rng.random() * config.jitter,
    )
