"""CLI entry point for shogi-engine — Human vs CPU.

コマンドラインで動く本将棋の対局プログラム。
プレイヤー（先手）対 CPU（後手）で対局できる。

起動方法: `shogi-cli` （`--cpu random` でランダム CPU）
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable

from shogi_engine.engine.greedy import greedy_move
from shogi_engine.engine.random_player import random_move
from shogi_engine.game.shogi.display import format_board
from shogi_engine.game.shogi.moves import Move
from shogi_engine.game.shogi.notation import format_move
from shogi_engine.game.shogi.state import Position, initial_position
from shogi_engine.game.shogi.types import Side

logger = logging.getLogger(__name__)

_CPUS: dict[str, Callable[[Position], Move]] = {
    "greedy": greedy_move,
    "random": random_move,
}


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play shogi against the CPU.")
    parser.add_argument("--cpu", choices=sorted(_CPUS), default="greedy")
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Run a Human (SENTE) vs CPU (GOTE) game.

    ゲームの流れ:
    1. 盤面を表示
    2. 合法手一覧を表示して番号入力を求める
    3. CPU が応答する
    4. 合法手がなくなるまで繰り返す
    """
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())
    cpu = _CPUS[args.cpu]

    print("=== 本将棋 ===")
    print("You are SENTE (▲). CPU is GOTE (△, shown with 'v').")
    print()

    position = initial_position()
    ply = 0

    while True:
        legal = position.legal_moves()
        if not legal:
            break

        print(format_board(position))
        if position.in_check:
            print("王手!")
        print()

        if position.turn == Side.SENTE:
            print("Legal moves:")
            for i, m in enumerate(legal):
                print(f"  {i}: {format_move(position, m)}")
            print()

            # 入力検証ループ（正しい番号が入力されるまで繰り返す）
            while True:
                try:
                    choice = input("Your move (number): ")
                    idx = int(choice)
                    if 0 <= idx < len(legal):
                        move = legal[idx]
                        break
                    print(f"Invalid: choose 0-{len(legal) - 1}")
                except ValueError:
                    print("Enter a number.")
                except (EOFError, KeyboardInterrupt):
                    print("\nGame aborted.")
                    return
        else:
            move = cpu(position)
            print(f"CPU plays: {format_move(position, move)}")

        ply += 1
        logger.info("%d %s", ply, format_move(position, move))
        position = position.apply_move(move)
        print()

    # 終局: 合法手がない側の負け
    print(format_board(position))
    print()
    winner = position.turn.opponent
    reason = "詰み" if position.in_check else "指す手なし"
    logger.info("game over after %d moves: %s wins (%s)", ply, winner.name, reason)
    if winner == Side.SENTE:
        print(f"You win! ({reason})")
    else:
        print(f"CPU wins! ({reason})")


if __name__ == "__main__":
    main()
