"""Kifu-style move text (棋譜表記).

例: ▲７六 歩 / △３三 角x成 / ▲５五 金打

筋は盤の左端（列0）が９、右端が１。段は上端（行0）が一。
"""

from __future__ import annotations

from shogi_engine.game.shogi.display import FILE_LABELS, PIECE_CHARS, RANK_LABELS, piece_char
from shogi_engine.game.shogi.moves import DropMove, Move
from shogi_engine.game.shogi.state import Position
from shogi_engine.game.shogi.types import Side


def side_mark(side: Side) -> str:
    return "▲" if side == Side.SENTE else "△"


def square_label(row: int, col: int) -> str:
    """(row, col) → "７六" のような筋・段の表記。"""
    return f"{FILE_LABELS[col]}{RANK_LABELS[row]}"


def format_move(before: Position, move: Move) -> str:
    """Format a move relative to the position it is played from.

    before は手を指す前の局面（動かす駒の種類や取りの有無を調べるのに使う）。
    """
    to_row, to_col = move.to_square
    prefix = f"{side_mark(before.turn)}{square_label(to_row, to_col)}"

    if isinstance(move, DropMove):
        return f"{prefix} {PIECE_CHARS[move.piece_type]}打"

    piece = before.board.piece_at(*move.from_square)
    if piece is None:
        msg = f"No piece at {move.from_square}"
        raise ValueError(msg)
    capture = "x" if before.board.piece_at(to_row, to_col) is not None else ""
    promote = "成" if move.promote else ""
    return f"{prefix} {piece_char(piece)}{capture}{promote}"


def format_game(moves: list[Move], start: Position | None = None) -> list[str]:
    """Replay moves from start and return one kifu line per move."""
    position = start if start is not None else Position()
    lines: list[str] = []
    for i, move in enumerate(moves, start=1):
        lines.append(f"{i:>3} {format_move(position, move)}")
        position = position.apply_move(move)
    return lines
