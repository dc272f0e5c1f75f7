"""Types, constants and piece geometry for 本将棋 (9x9).

本将棋（9×9盤）の基本型・定数・駒の動き定義。
駒は8種類の基本駒種 + 成りフラグで表現する（成り駒を別の駒種にしない）。
"""

from __future__ import annotations

from enum import IntEnum, unique

ROWS = 9
COLS = 9
NUM_SQUARES = ROWS * COLS  # 81マス

Vector = tuple[int, int]


@unique
class Side(IntEnum):
    """Side identifiers.

    先手（SENTE）は下側から上に向かって進む（row 8 → row 0）。
    後手（GOTE）は上側から下に向かって進む（row 0 → row 8）。
    """

    SENTE = 0  # 先手
    GOTE = 1   # 後手

    @property
    def opponent(self) -> Side:
        """相手側を返す。"""
        return Side(1 - self.value)


@unique
class PieceType(IntEnum):
    """Base piece types in 本将棋（8種類）.

    成り駒は Piece.promoted フラグで表す。
    値の順序は持ち駒の並び順（歩→飛）に対応し、王将は最後。
    """

    PAWN = 0    # 歩
    LANCE = 1   # 香
    KNIGHT = 2  # 桂
    SILVER = 3  # 銀
    GOLD = 4    # 金
    BISHOP = 5  # 角
    ROOK = 6    # 飛
    KING = 7    # 玉/王


# 持ち駒として使える駒種（王以外の7種）
HAND_PIECE_TYPES: tuple[PieceType, ...] = (
    PieceType.PAWN, PieceType.LANCE, PieceType.KNIGHT,
    PieceType.SILVER, PieceType.GOLD, PieceType.BISHOP, PieceType.ROOK,
)

# 成ることができる駒種（金・玉は成れない）
PROMOTABLE_TYPES: frozenset[PieceType] = frozenset({
    PieceType.ROOK, PieceType.BISHOP, PieceType.SILVER,
    PieceType.KNIGHT, PieceType.LANCE, PieceType.PAWN,
})

_ORTHOGONAL: tuple[Vector, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
_DIAGONAL: tuple[Vector, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
_GOLD: tuple[Vector, ...] = ((-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, 0))

# 先手視点の移動ベクトル（前 = 行インデックス減少方向）
# 後手はベクトル全体を反転して使う（orient() を参照）
BASE_VECTORS: dict[PieceType, tuple[Vector, ...]] = {
    PieceType.PAWN: ((-1, 0),),                                        # 歩: 1マス前
    PieceType.LANCE: ((-1, 0),),                                       # 香: 前方に遠距離
    PieceType.KNIGHT: ((-2, -1), (-2, 1)),                             # 桂: 2前1横へ跳ぶ
    PieceType.SILVER: ((-1, -1), (-1, 0), (-1, 1), (1, -1), (1, 1)),  # 銀: 前3方向+斜め後
    PieceType.GOLD: _GOLD,                                             # 金: 6方向
    PieceType.BISHOP: _DIAGONAL,                                       # 角: 斜め遠距離
    PieceType.ROOK: _ORTHOGONAL,                                       # 飛: 縦横遠距離
    PieceType.KING: _ORTHOGONAL + _DIAGONAL,                           # 玉: 全8方向1マス
}

_BASE_SLIDERS: frozenset[PieceType] = frozenset({
    PieceType.LANCE, PieceType.BISHOP, PieceType.ROOK,
})

# 馬（成り角）は縦横1マス、龍（成り飛）は斜め1マスを追加で動ける
_PROMOTED_EXTRA_STEPS: dict[PieceType, tuple[Vector, ...]] = {
    PieceType.BISHOP: _ORTHOGONAL,
    PieceType.ROOK: _DIAGONAL,
}


def is_promotion_eligible(piece_type: PieceType) -> bool:
    """成ることができる駒種なら True。"""
    return piece_type in PROMOTABLE_TYPES


def is_slider(piece_type: PieceType, promoted: bool = False) -> bool:
    """Whether the piece walks its vectors until blocked.

    遠距離駒（香・角・飛・馬・龍）なら True。成香は金と同じ動きになるので False。
    """
    if promoted:
        return piece_type in _PROMOTED_EXTRA_STEPS
    return piece_type in _BASE_SLIDERS


def movement_vectors(piece_type: PieceType, promoted: bool = False) -> tuple[Vector, ...]:
    """Return movement vectors oriented for Sente.

    先手視点の移動ベクトルを返す。遠距離駒の場合は「方向」を表す。
    成り角・成り飛は元の遠距離方向を保ち、その他の成り駒は金の動きになる。
    """
    if promoted and piece_type not in _PROMOTED_EXTRA_STEPS:
        return _GOLD
    return BASE_VECTORS[piece_type]


def extra_step_vectors(piece_type: PieceType, promoted: bool = False) -> tuple[Vector, ...]:
    """One-step moves a promoted slider gains (馬・龍の追加1マス移動)."""
    if promoted:
        return _PROMOTED_EXTRA_STEPS.get(piece_type, ())
    return ()


def orient(vectors: tuple[Vector, ...], side: Side) -> tuple[Vector, ...]:
    """Flip vectors for Gote.

    盤の向きの非対称性はここでだけ扱う。後手は全ベクトルを反転する。
    """
    if side == Side.SENTE:
        return vectors
    return tuple((-dr, -dc) for dr, dc in vectors)


def last_rank(side: Side) -> int:
    """その側から見た最奥の段（先手=0、後手=8）。"""
    return 0 if side == Side.SENTE else ROWS - 1


def in_promotion_zone(side: Side, row: int) -> bool:
    """Check if a row is in the promotion zone (敵陣3段)."""
    if side == Side.SENTE:
        return row <= 2
    return row >= ROWS - 3


def is_dead_end(piece_type: PieceType, side: Side, row: int) -> bool:
    """Whether an unpromoted piece of this type would have no further moves.

    行き所のない駒: 歩・香は最奥の段、桂は奥の2段で動けなくなる。
    盤上の移動では強制成り、打ちでは禁止の判定に使う。
    """
    if piece_type == PieceType.PAWN or piece_type == PieceType.LANCE:
        return row == last_rank(side)
    if piece_type == PieceType.KNIGHT:
        if side == Side.SENTE:
            return row <= 1
        return row >= ROWS - 2
    return False
