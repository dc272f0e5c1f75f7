"""GameState protocol — the interface players and front ends consume.

局面の共通インタフェース（プロトコル）。

CPU プレイヤー・CLI・Web API はこのプロトコルだけに依存する。
これを「ポリモーフィズム」または「ダックタイピング」と呼ぶ。
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable  # isinstance() でのランタイムチェックを有効にする
class GameState(Protocol):
    """Common interface for board game states.

    重要: apply_move() は新しい状態を返す（イミュータブル設計）。
    イミュータブルにすることで、過去の局面を履歴として安全に共有できる。
    """

    @property
    def current_player(self) -> int:
        """現在手番のプレイヤー（0=先手, 1=後手）を返す。"""
        ...

    @property
    def is_terminal(self) -> bool:
        """ゲームが終了していれば True を返す。"""
        ...

    @property
    def winner(self) -> int | None:
        """勝者（0 or 1）を返す。対局中は None。"""
        ...

    def legal_moves(self) -> list[Any]:
        """合法手のリストを返す。"""
        ...

    def apply_move(self, move: Any) -> GameState:
        """手を適用した新しい状態を返す（元の状態は変化しない）。"""
        ...
