"""Move generation, check detection and move application for 本将棋.

指し手は2種類のイミュータブルなデータクラスで表す:
  BoardMove: 盤上の駒を動かす手（from_square → to_square、成りフラグ付き）
  DropMove:  持ち駒を空きマスに打つ手（打った駒は常に未成）

同じフィールドを持つ手は等しい（dataclass の __eq__）。UI はドラッグ操作から
作った手を legal_moves() の要素と比較して合法かどうかを判定できる。

合法手の判定は「指してみて自玉に王手がかかっていないか調べる」総当たり方式。
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Union

from shogi_engine.game.shogi.board import Board, Hand, Piece
from shogi_engine.game.shogi.errors import InvariantViolation
from shogi_engine.game.shogi.types import (
    COLS,
    HAND_PIECE_TYPES,
    ROWS,
    PieceType,
    Side,
    extra_step_vectors,
    in_promotion_zone,
    is_dead_end,
    is_promotion_eligible,
    is_slider,
    movement_vectors,
    orient,
)

if TYPE_CHECKING:
    from shogi_engine.game.shogi.state import Position

Square = tuple[int, int]


@dataclass(frozen=True)
class BoardMove:
    """盤上の駒の移動。promote=True なら移動後に成る。"""

    from_square: Square
    to_square: Square
    promote: bool = False


@dataclass(frozen=True)
class DropMove:
    """持ち駒を打つ手。"""

    piece_type: PieceType
    to_square: Square


Move = Union[BoardMove, DropMove]


def legal_moves(position: Position) -> list[Move]:
    """Generate all legal moves (excluding moves that leave own king in check)."""
    return [m for m in generate_pseudo_moves(position) if _is_legal(position, m)]


def is_checkmate_or_stalemate(position: Position) -> bool:
    """True if the side to move has no legal move.

    将棋には引き分けとしてのステイルメイトがないため、詰みと区別しない。
    どちらの場合も手番側の負け。
    """
    return not any(_is_legal(position, m) for m in generate_pseudo_moves(position))


def _is_legal(position: Position, move: Move) -> bool:
    # 判定は手を指した側（新しい手番ではない）の玉で行う
    after = apply_move(position, move)
    return not is_in_check(after.board, position.turn)


def generate_pseudo_moves(position: Position) -> list[Move]:
    """Generate pseudo-legal moves (may leave own king in check)."""
    moves: list[Move] = []
    _generate_board_moves(position.board, position.turn, moves)
    _generate_drop_moves(position, moves)
    return moves


def _on_board(row: int, col: int) -> bool:
    return 0 <= row < ROWS and 0 <= col < COLS


def _destinations(board: Board, row: int, col: int, piece: Piece) -> Iterator[Square]:
    """Yield every square the piece at (row, col) can reach.

    遠距離駒は各方向に1マスずつ進み、空きマスと最初の敵駒のマスを返す。
    味方の駒に当たったらそのマスは含めずに打ち切る。
    """
    side = piece.owner
    vectors = orient(movement_vectors(piece.piece_type, piece.promoted), side)

    if is_slider(piece.piece_type, piece.promoted):
        for dr, dc in vectors:
            nr, nc = row + dr, col + dc
            while _on_board(nr, nc):
                target = board.piece_at(nr, nc)
                if target is not None and target.owner == side:
                    break
                yield nr, nc
                if target is not None:
                    break  # Captured, stop sliding
                nr, nc = nr + dr, nc + dc
        steps = orient(extra_step_vectors(piece.piece_type, piece.promoted), side)
    else:
        steps = vectors

    # Step moves (including the knight's jump)
    for dr, dc in steps:
        nr, nc = row + dr, col + dc
        if _on_board(nr, nc):
            target = board.piece_at(nr, nc)
            if target is None or target.owner != side:
                yield nr, nc


def _promotion_options(piece: Piece, from_row: int, to_row: int) -> tuple[bool, ...]:
    """Return the promote flags to emit for one raw board move.

    - 成れない駒（金・玉）: 不成のみ
    - 成り駒も駒種で判定する（成り済みの駒に promote=True を付けても成り駒のまま）
    - 行き所のない段への移動: 成りのみ（強制成り）
    - 移動元か移動先が敵陣: 成り・不成の両方
    - それ以外: 不成のみ
    """
    if not is_promotion_eligible(piece.piece_type):
        return (False,)
    if is_dead_end(piece.piece_type, piece.owner, to_row):
        return (True,)
    if in_promotion_zone(piece.owner, from_row) or in_promotion_zone(piece.owner, to_row):
        return (True, False)
    return (False,)


def _generate_board_moves(board: Board, side: Side, moves: list[Move]) -> None:
    """Generate board moves (step, slide, knight) with promotion variants."""
    for row, col, piece in board.pieces(side):
        for to_row, to_col in _destinations(board, row, col, piece):
            for promote in _promotion_options(piece, row, to_row):
                moves.append(BoardMove((row, col), (to_row, to_col), promote))


def _generate_drop_moves(position: Position, moves: list[Move]) -> None:
    """Generate drop moves with nifu (二歩) and dead-piece restrictions."""
    board = position.board
    side = position.turn
    hand = position.hand(side)

    for pt in HAND_PIECE_TYPES:
        if hand.count(pt) == 0:
            continue
        for row in range(ROWS):
            for col in range(COLS):
                if board.piece_at(row, col) is not None:
                    continue

                # 二歩: 同じ筋に自分の未成の歩がある
                if pt == PieceType.PAWN and board.has_unpromoted_pawn(side, col):
                    continue

                # 行き所のない駒: 歩・香は最奥段、桂は奥2段に打てない
                if is_dead_end(pt, side, row):
                    continue

                moves.append(DropMove(pt, (row, col)))


def is_square_attacked(board: Board, by_side: Side, row: int, col: int) -> bool:
    """Check if any board piece of by_side can move to (row, col).

    持ち駒は関係しない（打ちで駒を取ることはできないため）。
    """
    for r, c, piece in board.pieces(by_side):
        for dest in _destinations(board, r, c, piece):
            if dest == (row, col):
                return True
    return False


def is_in_check(board: Board, side: Side) -> bool:
    """Check if side's king is under attack.

    王将が盤上にない局面は不整合なので InvariantViolation を送出する。
    """
    king = board.find_king(side)
    if king is None:
        msg = f"{side.name} king is not on the board"
        raise InvariantViolation(msg)
    return is_square_attacked(board, side.opponent, *king)


def apply_move(position: Position, move: Move) -> Position:
    """Return the position after move; the original position is unchanged."""
    if isinstance(move, DropMove):
        return _apply_drop(position, move)
    return _apply_board_move(position, move)


def _apply_board_move(position: Position, move: BoardMove) -> Position:
    """Apply a board move (with or without promotion)."""
    side = position.turn
    from_row, from_col = move.from_square
    to_row, to_col = move.to_square

    piece = position.board.piece_at(from_row, from_col)
    if piece is None or piece.owner != side:
        msg = f"No {side.name} piece at {move.from_square}"
        raise InvariantViolation(msg)

    # Capture: 取った駒は成りを解除して自分の持ち駒にする
    hands = position.hands
    target = position.board.piece_at(to_row, to_col)
    if target is not None:
        if target.owner == side:
            msg = f"Cannot capture own piece at {move.to_square}"
            raise InvariantViolation(msg)
        hands = _with_hand(hands, side, hands[side].add(target.demote().piece_type))

    moving = piece.promote() if move.promote else piece
    board = position.board.set_piece(from_row, from_col, None)
    board = board.set_piece(to_row, to_col, moving)
    return replace(position, board=board, hands=hands, turn=side.opponent)


def _apply_drop(position: Position, move: DropMove) -> Position:
    """Apply a drop move."""
    side = position.turn
    to_row, to_col = move.to_square
    if position.board.piece_at(to_row, to_col) is not None:
        msg = f"Cannot drop onto occupied square {move.to_square}"
        raise InvariantViolation(msg)

    hands = _with_hand(position.hands, side, position.hand(side).remove(move.piece_type))
    board = position.board.set_piece(to_row, to_col, Piece(move.piece_type, side))
    return replace(position, board=board, hands=hands, turn=side.opponent)


def _with_hand(hands: tuple[Hand, Hand], side: Side, hand: Hand) -> tuple[Hand, Hand]:
    if side == Side.SENTE:
        return (hand, hands[1])
    return (hands[0], hand)
