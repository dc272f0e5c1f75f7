"""Terminal display for 本将棋."""

from __future__ import annotations

from shogi_engine.game.shogi.board import Hand, Piece
from shogi_engine.game.shogi.state import Position
from shogi_engine.game.shogi.types import COLS, ROWS, PieceType, Side

# 未成駒の表示文字
PIECE_CHARS: dict[PieceType, str] = {
    PieceType.PAWN: "歩",
    PieceType.LANCE: "香",
    PieceType.KNIGHT: "桂",
    PieceType.SILVER: "銀",
    PieceType.GOLD: "金",
    PieceType.BISHOP: "角",
    PieceType.ROOK: "飛",
    PieceType.KING: "玉",
}

# 成り駒の表示文字
PROMOTED_CHARS: dict[PieceType, str] = {
    PieceType.PAWN: "と",
    PieceType.LANCE: "杏",
    PieceType.KNIGHT: "圭",
    PieceType.SILVER: "全",
    PieceType.BISHOP: "馬",
    PieceType.ROOK: "龍",
}

FILE_LABELS = ["９", "８", "７", "６", "５", "４", "３", "２", "１"]
RANK_LABELS = ["一", "二", "三", "四", "五", "六", "七", "八", "九"]


def piece_char(piece: Piece) -> str:
    """駒1文字の表示（成り駒は成り駒の文字）。"""
    if piece.promoted:
        return PROMOTED_CHARS[piece.piece_type]
    return PIECE_CHARS[piece.piece_type]


def format_board(position: Position) -> str:
    """Format the position for terminal display."""
    lines: list[str] = []

    lines.append(f"後手持駒: {format_hand(position.hand(Side.GOTE))}")
    lines.append("  " + " ".join(FILE_LABELS))
    lines.append("+--+--+--+--+--+--+--+--+--+")

    for r in range(ROWS):
        row_str = "|"
        for c in range(COLS):
            piece = position.board.piece_at(r, c)
            if piece is None:
                row_str += "  |"
            elif piece.owner == Side.GOTE:
                row_str += f"v{piece_char(piece)}|"
            else:
                row_str += f" {piece_char(piece)}|"
        lines.append(f"{row_str} {RANK_LABELS[r]}")
        lines.append("+--+--+--+--+--+--+--+--+--+")

    lines.append(f"先手持駒: {format_hand(position.hand(Side.SENTE))}")

    return "\n".join(lines)


def format_hand(hand: Hand) -> str:
    """持ち駒を「歩2 角」のような文字列にする。持ち駒なしは「なし」。"""
    items = hand.items()
    if not items:
        return "なし"
    pieces: list[str] = []
    for pt, count in items:
        char = PIECE_CHARS[pt]
        pieces.append(char if count == 1 else f"{char}{count}")
    return " ".join(pieces)
