"""Position — the unit of game state for 本将棋.

局面（盤面・両者の持ち駒・手番）。ゲームツリーのノードでもある。
apply_move() は常に新しい Position を返すので、過去の局面を履歴として
そのまま保持できる（Undo/Redo は呼び出し側が局面のスタックを持つだけでよい）。
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shogi_engine.game.shogi.board import Board, Hand
from shogi_engine.game.shogi.moves import Move
from shogi_engine.game.shogi.moves import apply_move as _apply_move
from shogi_engine.game.shogi.moves import is_checkmate_or_stalemate
from shogi_engine.game.shogi.moves import is_in_check
from shogi_engine.game.shogi.moves import legal_moves as _legal_moves
from shogi_engine.game.shogi.types import Side


@dataclass(frozen=True)
class Position:
    """Immutable game state for 本将棋 (9x9).

    GameState プロトコルを実装する。

    Terminal condition（終局条件）:
    合法手がなければ手番側の負け（詰み。将棋には引き分けのステイルメイトはない）。
    千日手・連続王手の千日手は判定しない。
    """

    board: Board = field(default_factory=Board.initial)
    hands: tuple[Hand, Hand] = (Hand(), Hand())
    turn: Side = Side.SENTE

    def hand(self, side: Side) -> Hand:
        """その側の持ち駒を返す。"""
        return self.hands[side.value]

    @property
    def current_player(self) -> int:
        """現在の手番プレイヤー（0=先手, 1=後手）。"""
        return self.turn.value

    @property
    def in_check(self) -> bool:
        """手番側の玉に王手がかかっていれば True。"""
        return is_in_check(self.board, self.turn)

    @property
    def is_terminal(self) -> bool:
        """手番側に合法手がなければ True。"""
        return is_checkmate_or_stalemate(self)

    @property
    def winner(self) -> int | None:
        """勝者を返す。対局中は None。

        合法手なし → 現プレイヤーの負け。
        """
        if self.is_terminal:
            return self.turn.opponent.value
        return None

    def legal_moves(self) -> list[Move]:
        """合法手のリストを返す。"""
        return _legal_moves(self)

    def apply_move(self, move: Move) -> Position:
        """手を適用して新しい局面を返す。"""
        return _apply_move(self, move)


def initial_position() -> Position:
    """Standard starting array, empty hands, Sente to move."""
    return Position()
