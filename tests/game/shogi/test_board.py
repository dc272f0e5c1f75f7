"""Tests for shogi board and hands."""

from __future__ import annotations

import pytest

from shogi_engine.game.shogi.board import Board, Hand, Piece
from shogi_engine.game.shogi.errors import InvariantViolation
from shogi_engine.game.shogi.types import COLS, NUM_SQUARES, PieceType, Side


class TestInitialPosition:
    def test_81_squares(self) -> None:
        board = Board.initial()
        assert len(board.squares) == NUM_SQUARES

    def test_kings(self) -> None:
        board = Board.initial()
        assert board.piece_at(8, 4) == Piece(PieceType.KING, Side.SENTE)
        assert board.piece_at(0, 4) == Piece(PieceType.KING, Side.GOTE)

    def test_rooks_and_bishops(self) -> None:
        board = Board.initial()
        assert board.piece_at(7, 7) == Piece(PieceType.ROOK, Side.SENTE)
        assert board.piece_at(7, 1) == Piece(PieceType.BISHOP, Side.SENTE)
        assert board.piece_at(1, 1) == Piece(PieceType.ROOK, Side.GOTE)
        assert board.piece_at(1, 7) == Piece(PieceType.BISHOP, Side.GOTE)

    def test_pawns(self) -> None:
        board = Board.initial()
        for c in range(COLS):
            assert board.piece_at(6, c) == Piece(PieceType.PAWN, Side.SENTE)
            assert board.piece_at(2, c) == Piece(PieceType.PAWN, Side.GOTE)

    def test_empty_squares_in_middle(self) -> None:
        board = Board.initial()
        for r in range(3, 6):
            for c in range(COLS):
                assert board.piece_at(r, c) is None

    def test_piece_count(self) -> None:
        board = Board.initial()
        assert len(list(board.pieces(Side.SENTE))) == 20
        assert len(list(board.pieces(Side.GOTE))) == 20

    def test_nothing_promoted(self) -> None:
        board = Board.initial()
        assert not any(p.promoted for p in board.squares if p is not None)

    def test_default_board_is_empty(self) -> None:
        assert all(p is None for p in Board().squares)


class TestPiece:
    def test_gold_cannot_be_promoted(self) -> None:
        with pytest.raises(InvariantViolation):
            Piece(PieceType.GOLD, Side.SENTE, promoted=True)

    def test_king_cannot_be_promoted(self) -> None:
        with pytest.raises(InvariantViolation):
            Piece(PieceType.KING, Side.GOTE, promoted=True)

    def test_demote_flips_owner_and_clears_promotion(self) -> None:
        dragon = Piece(PieceType.ROOK, Side.GOTE, promoted=True)
        assert dragon.demote() == Piece(PieceType.ROOK, Side.SENTE)

    def test_promote(self) -> None:
        assert Piece(PieceType.PAWN, Side.SENTE).promote().promoted


class TestBoardOperations:
    def test_set_piece(self) -> None:
        board = Board.initial()
        new_board = board.set_piece(4, 4, Piece(PieceType.GOLD, Side.SENTE))
        assert new_board.piece_at(4, 4) is not None
        assert board.piece_at(4, 4) is None  # Original unchanged

    def test_find_king(self) -> None:
        board = Board.initial()
        assert board.find_king(Side.SENTE) == (8, 4)
        assert board.find_king(Side.GOTE) == (0, 4)

    def test_find_king_missing(self) -> None:
        assert Board().find_king(Side.SENTE) is None

    def test_has_unpromoted_pawn(self) -> None:
        board = Board.initial()
        assert board.has_unpromoted_pawn(Side.SENTE, 4)
        assert board.has_unpromoted_pawn(Side.GOTE, 4)

    def test_promoted_pawn_does_not_count(self) -> None:
        board = Board.from_pieces([(3, 2, Piece(PieceType.PAWN, Side.SENTE, promoted=True))])
        assert not board.has_unpromoted_pawn(Side.SENTE, 2)

    def test_enemy_pawn_does_not_count(self) -> None:
        board = Board.from_pieces([(3, 2, Piece(PieceType.PAWN, Side.GOTE))])
        assert not board.has_unpromoted_pawn(Side.SENTE, 2)


class TestHand:
    def test_empty(self) -> None:
        hand = Hand()
        assert hand.total() == 0
        assert hand.items() == []

    def test_add_and_count(self) -> None:
        hand = Hand().add(PieceType.PAWN).add(PieceType.PAWN).add(PieceType.ROOK)
        assert hand.count(PieceType.PAWN) == 2
        assert hand.count(PieceType.ROOK) == 1
        assert hand.items() == [(PieceType.PAWN, 2), (PieceType.ROOK, 1)]

    def test_of(self) -> None:
        assert Hand.of(PAWN=2, ROOK=1) == Hand().add(PieceType.ROOK).add(PieceType.PAWN).add(
            PieceType.PAWN
        )

    def test_remove(self) -> None:
        hand = Hand.of(GOLD=1)
        assert hand.remove(PieceType.GOLD).count(PieceType.GOLD) == 0
        assert hand.count(PieceType.GOLD) == 1  # Original unchanged

    def test_remove_underflow(self) -> None:
        with pytest.raises(InvariantViolation):
            Hand().remove(PieceType.SILVER)

    def test_king_count_is_zero(self) -> None:
        assert Hand().count(PieceType.KING) == 0
