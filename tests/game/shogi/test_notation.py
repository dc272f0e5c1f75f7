"""Tests for kifu-style move text."""

from __future__ import annotations

from shogi_engine.game.shogi.board import Board, Hand, Piece
from shogi_engine.game.shogi.moves import BoardMove, DropMove
from shogi_engine.game.shogi.notation import format_game, format_move, square_label
from shogi_engine.game.shogi.state import Position, initial_position
from shogi_engine.game.shogi.types import PieceType, Side


def test_square_label() -> None:
    assert square_label(0, 0) == "９一"
    assert square_label(8, 8) == "１九"
    assert square_label(5, 2) == "７六"


def test_opening_pawn_push() -> None:
    assert format_move(initial_position(), BoardMove((6, 2), (5, 2))) == "▲７六 歩"


def test_gote_move_mark() -> None:
    position = Position(turn=Side.GOTE)
    assert format_move(position, BoardMove((2, 6), (3, 6))) == "△３四 歩"


def test_capture_and_promotion() -> None:
    position = Position(
        board=Board.from_pieces([
            (3, 2, Piece(PieceType.PAWN, Side.SENTE)),
            (2, 2, Piece(PieceType.SILVER, Side.GOTE)),
        ]),
    )
    assert format_move(position, BoardMove((3, 2), (2, 2), True)) == "▲７三 歩x成"


def test_promoted_piece_uses_promoted_glyph() -> None:
    position = Position(
        board=Board.from_pieces([(4, 4, Piece(PieceType.ROOK, Side.SENTE, True))]),
    )
    assert format_move(position, BoardMove((4, 4), (4, 0))) == "▲９五 龍"


def test_drop() -> None:
    position = Position(hands=(Hand.of(GOLD=1), Hand()))
    assert format_move(position, DropMove(PieceType.GOLD, (4, 4))) == "▲５五 金打"


def test_format_game_numbers_moves() -> None:
    lines = format_game([BoardMove((6, 2), (5, 2)), BoardMove((2, 6), (3, 6))])
    assert lines == ["  1 ▲７六 歩", "  2 △３四 歩"]
