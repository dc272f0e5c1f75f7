"""Tests for the terminal display."""

from __future__ import annotations

from shogi_engine.game.shogi.board import Board, Hand, Piece
from shogi_engine.game.shogi.display import format_board, format_hand, piece_char
from shogi_engine.game.shogi.state import Position, initial_position
from shogi_engine.game.shogi.types import PieceType, Side


def test_initial_board_layout() -> None:
    text = format_board(initial_position())
    lines = text.split("\n")
    assert lines[0] == "後手持駒: なし"
    assert lines[-1] == "先手持駒: なし"
    assert lines[3] == "|v香|v桂|v銀|v金|v玉|v金|v銀|v桂|v香| 一"
    assert lines[-3] == "| 香| 桂| 銀| 金| 玉| 金| 銀| 桂| 香| 九"


def test_promoted_pieces() -> None:
    assert piece_char(Piece(PieceType.PAWN, Side.SENTE, promoted=True)) == "と"
    assert piece_char(Piece(PieceType.ROOK, Side.GOTE, promoted=True)) == "龍"
    assert piece_char(Piece(PieceType.BISHOP, Side.GOTE, promoted=True)) == "馬"


def test_hand_formatting() -> None:
    assert format_hand(Hand()) == "なし"
    assert format_hand(Hand.of(PAWN=3, BISHOP=1)) == "歩3 角"


def test_hands_shown_for_both_sides() -> None:
    position = Position(
        board=Board.from_pieces([(4, 4, Piece(PieceType.KING, Side.SENTE))]),
        hands=(Hand.of(GOLD=1), Hand.of(PAWN=2)),
    )
    text = format_board(position)
    assert "後手持駒: 歩2" in text
    assert "先手持駒: 金" in text
