"""本将棋 (Shogi) — 9x9 rules core."""

from shogi_engine.game.shogi.board import Board, Hand, Piece
from shogi_engine.game.shogi.display import format_board
from shogi_engine.game.shogi.errors import InvariantViolation
from shogi_engine.game.shogi.moves import (
    BoardMove,
    DropMove,
    Move,
    apply_move,
    generate_pseudo_moves,
    is_checkmate_or_stalemate,
    is_in_check,
    is_square_attacked,
    legal_moves,
)
from shogi_engine.game.shogi.state import Position, initial_position
from shogi_engine.game.shogi.types import COLS, ROWS, PieceType, Side

__all__ = [
    "Board",
    "BoardMove",
    "COLS",
    "DropMove",
    "Hand",
    "InvariantViolation",
    "Move",
    "Piece",
    "PieceType",
    "Position",
    "ROWS",
    "Side",
    "apply_move",
    "format_board",
    "generate_pseudo_moves",
    "initial_position",
    "is_checkmate_or_stalemate",
    "is_in_check",
    "is_square_attacked",
    "legal_moves",
]
