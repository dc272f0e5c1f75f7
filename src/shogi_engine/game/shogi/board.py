"""Board and hand representation for 本将棋 (9x9).

9×9盤の盤面データ構造と持ち駒。
イミュータブルなデータクラスで、変更メソッドは新しいオブジェクトを返す。
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from shogi_engine.game.shogi.errors import InvariantViolation
from shogi_engine.game.shogi.types import (
    COLS,
    HAND_PIECE_TYPES,
    NUM_SQUARES,
    ROWS,
    PieceType,
    Side,
    is_promotion_eligible,
)

# 後段の並び: 香桂銀金王金銀桂香
_BACK_RANK = (
    PieceType.LANCE, PieceType.KNIGHT, PieceType.SILVER,
    PieceType.GOLD, PieceType.KING, PieceType.GOLD,
    PieceType.SILVER, PieceType.KNIGHT, PieceType.LANCE,
)


@dataclass(frozen=True)
class Piece:
    """A piece on the board.

    盤面上の駒。駒種・所有者・成りフラグを持つ。
    成りフラグは成ることができる駒種でのみ True になりうる。
    """

    piece_type: PieceType
    owner: Side
    promoted: bool = False

    def __post_init__(self) -> None:
        if self.promoted and not is_promotion_eligible(self.piece_type):
            msg = f"{self.piece_type.name} cannot be promoted"
            raise InvariantViolation(msg)

    def promote(self) -> Piece:
        """成った駒を返す。"""
        return Piece(self.piece_type, self.owner, promoted=True)

    def demote(self) -> Piece:
        """Return the captured form: unpromoted, owned by the opponent.

        取られた駒は成りが解除され、所有者が相手側に移る。
        """
        return Piece(self.piece_type, self.owner.opponent)


@dataclass(frozen=True)
class Board:
    """Immutable 9x9 grid.

    squares: 81要素のタプル（行優先）。squares[row * COLS + col] でアクセス。
    Row 0 = 後手の後段（上端）、Row 8 = 先手の後段（下端）。
    """

    squares: tuple[Piece | None, ...] = (None,) * NUM_SQUARES

    @classmethod
    def initial(cls) -> Board:
        """Return the standard starting array (平手).

        本将棋の標準初期配置を返す。
        列0が左端（9筋）になる点に注意。
        """
        squares: list[Piece | None] = [None] * NUM_SQUARES

        for c, pt in enumerate(_BACK_RANK):
            squares[0 * COLS + c] = Piece(pt, Side.GOTE)
            squares[8 * COLS + c] = Piece(pt, Side.SENTE)

        # 飛角: 後手は飛車が左・角行が右、先手はその鏡像
        squares[1 * COLS + 1] = Piece(PieceType.ROOK, Side.GOTE)
        squares[1 * COLS + 7] = Piece(PieceType.BISHOP, Side.GOTE)
        squares[7 * COLS + 1] = Piece(PieceType.BISHOP, Side.SENTE)
        squares[7 * COLS + 7] = Piece(PieceType.ROOK, Side.SENTE)

        for c in range(COLS):
            squares[2 * COLS + c] = Piece(PieceType.PAWN, Side.GOTE)
            squares[6 * COLS + c] = Piece(PieceType.PAWN, Side.SENTE)

        return cls(squares=tuple(squares))

    @classmethod
    def from_pieces(
        cls,
        pieces: list[tuple[int, int, Piece]],
    ) -> Board:
        """(row, col, Piece) のリストから盤面を作る。テストや局面編集用。"""
        squares: list[Piece | None] = [None] * NUM_SQUARES
        for row, col, piece in pieces:
            squares[row * COLS + col] = piece
        return cls(squares=tuple(squares))

    def piece_at(self, row: int, col: int) -> Piece | None:
        """マス(row, col)の駒を返す。駒がなければ None。"""
        return self.squares[row * COLS + col]

    def set_piece(self, row: int, col: int, piece: Piece | None) -> Board:
        """マス(row, col)の駒を変更した新しい Board を返す。"""
        squares = list(self.squares)
        squares[row * COLS + col] = piece
        return Board(squares=tuple(squares))

    def pieces(self, side: Side) -> Iterator[tuple[int, int, Piece]]:
        """Yield (row, col, piece) for every piece owned by side."""
        for idx, piece in enumerate(self.squares):
            if piece is not None and piece.owner == side:
                yield idx // COLS, idx % COLS, piece

    def find_king(self, side: Side) -> tuple[int, int] | None:
        """その側の王将のマス (row, col) を返す。王将がなければ None。"""
        for row, col, piece in self.pieces(side):
            if piece.piece_type == PieceType.KING:
                return row, col
        return None

    def has_unpromoted_pawn(self, side: Side, col: int) -> bool:
        """Whether the file already holds an unpromoted pawn of side (二歩判定).

        と金（成り歩）は数えない。
        """
        for r in range(ROWS):
            p = self.piece_at(r, col)
            if (
                p is not None
                and p.owner == side
                and p.piece_type == PieceType.PAWN
                and not p.promoted
            ):
                return True
        return False


@dataclass(frozen=True)
class Hand:
    """Captured pieces held in reserve (持ち駒).

    counts は HAND_PIECE_TYPES と同じ順序（歩・香・桂・銀・金・角・飛）の枚数。
    """

    counts: tuple[int, ...] = (0,) * len(HAND_PIECE_TYPES)

    @classmethod
    def of(cls, **pieces: int) -> Hand:
        """Hand.of(PAWN=2, ROOK=1) のように駒種名で作る。"""
        counts = [0] * len(HAND_PIECE_TYPES)
        for name, count in pieces.items():
            counts[HAND_PIECE_TYPES.index(PieceType[name])] = count
        return cls(counts=tuple(counts))

    def count(self, piece_type: PieceType) -> int:
        if piece_type not in HAND_PIECE_TYPES:
            return 0
        return self.counts[HAND_PIECE_TYPES.index(piece_type)]

    def add(self, piece_type: PieceType) -> Hand:
        """1枚追加した新しい Hand を返す。"""
        idx = HAND_PIECE_TYPES.index(piece_type)
        counts = list(self.counts)
        counts[idx] += 1
        return Hand(counts=tuple(counts))

    def remove(self, piece_type: PieceType) -> Hand:
        """1枚取り除いた新しい Hand を返す。0枚なら InvariantViolation。"""
        if self.count(piece_type) == 0:
            msg = f"No {piece_type.name} in hand"
            raise InvariantViolation(msg)
        idx = HAND_PIECE_TYPES.index(piece_type)
        counts = list(self.counts)
        counts[idx] -= 1
        return Hand(counts=tuple(counts))

    def items(self) -> list[tuple[PieceType, int]]:
        """枚数が1以上の (駒種, 枚数) のリスト。"""
        return [(pt, n) for pt, n in zip(HAND_PIECE_TYPES, self.counts) if n > 0]

    def total(self) -> int:
        return sum(self.counts)
