"""Tests for move application and position sequences."""

import logging

import pytest

from pgnreplay.core.board import Board
from pgnreplay.core.enums import Color, GameResult, MoveFlag, PieceType
from pgnreplay.core.move import Move
from pgnreplay.core.notation import MoveRecord, board_from_fen, board_to_fen
from pgnreplay.core.piece import Piece
from pgnreplay.core.types import (
    A8, B8, C6, C8, D5, D6, D7, D8, E1, E2, E4, E5, E7, E8,
    F1, F3, F6, G1, H1,
)
from pgnreplay.replay.reconstruct import (
    apply_move,
    calculate_positions,
    make_move,
    replay_moves,
    replay_pgn,
    resolve_san,
)

RUY_LOPEZ_FINAL_PLACEMENT = "r4rk1/2qbbppp/p2p1n2/npp1p3/3PP3/2P2N1P/PPBN1PP1/R1BQR1K1"

WP = Piece(Color.WHITE, PieceType.PAWN)
BP = Piece(Color.BLACK, PieceType.PAWN)


class TestApplyMove:
    def test_e4_e5(self, initial_board: Board) -> None:
        after_e4 = apply_move(initial_board, "e4", Color.WHITE)
        board = apply_move(after_e4, "e5", Color.BLACK)
        assert board[E4] == WP
        assert board.is_empty(E2)
        assert board[E5] == BP
        assert board.is_empty(E7)

    def test_nf3(self, initial_board: Board) -> None:
        board = apply_move(initial_board, "Nf3", Color.WHITE)
        assert board[F3] == Piece(Color.WHITE, PieceType.KNIGHT)
        assert board.is_empty(G1)

    def test_input_board_untouched(self, initial_board: Board) -> None:
        snapshot = Board(initial_board[sq] for sq in range(64))
        apply_move(initial_board, "Nf3", Color.WHITE)
        assert initial_board == snapshot

    def test_kingside_castle(self, initial_board: Board) -> None:
        board = initial_board.with_changes({F1: None, G1: None})
        after = apply_move(board, "O-O", Color.WHITE)
        assert after[G1] == Piece(Color.WHITE, PieceType.KING)
        assert after[F1] == Piece(Color.WHITE, PieceType.ROOK)
        assert after.is_empty(E1)
        assert after.is_empty(H1)

    def test_queenside_castle_black(self, initial_board: Board) -> None:
        board = initial_board.with_changes({B8: None, C8: None, D8: None})
        after = apply_move(board, "0-0-0", Color.BLACK)
        assert after[C8] == Piece(Color.BLACK, PieceType.KING)
        assert after[D8] == Piece(Color.BLACK, PieceType.ROOK)
        assert after.is_empty(E8)
        assert after.is_empty(A8)

    def test_castle_with_check_suffix(self, initial_board: Board) -> None:
        board = initial_board.with_changes({F1: None, G1: None})
        assert apply_move(board, "O-O+", Color.WHITE) == apply_move(board, "O-O", Color.WHITE)

    def test_promotion(self) -> None:
        board = board_from_fen("7k/4P3/8/8/8/8/8/4K3")
        after = apply_move(board, "e8=Q+", Color.WHITE)
        assert after[E8] == Piece(Color.WHITE, PieceType.QUEEN)
        assert after.is_empty(E7)

    def test_underpromotion_black(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/p7/4K3")
        after = apply_move(board, "a1=N", Color.BLACK)
        assert board_to_fen(after) == "4k3/8/8/8/8/8/8/n3K3"

    def test_capture_promotion(self) -> None:
        board = board_from_fen("3r3k/4P3/8/8/8/8/8/4K3")
        after = apply_move(board, "exd8=Q+", Color.WHITE)
        assert after[D8] == Piece(Color.WHITE, PieceType.QUEEN)
        assert after.is_empty(E7)

    def test_en_passant(self) -> None:
        board = board_from_fen("4k3/8/8/3pP3/8/8/8/4K3")
        after = apply_move(board, "exd6", Color.WHITE)
        assert after[D6] == WP
        assert after.is_empty(D5)
        assert after.is_empty(E5)

    def test_ordinary_pawn_capture(self, initial_board: Board) -> None:
        board = apply_move(initial_board, "e4", Color.WHITE)
        board = apply_move(board, "d5", Color.BLACK)
        board = apply_move(board, "exd5", Color.WHITE)
        assert board[D5] == WP
        assert board.is_empty(E4)
        assert board.count(Color.BLACK) == 15

    def test_disambiguated_knight(self) -> None:
        board = board_from_fen("rn2kb1r/8/5n2/8/8/8/8/4K3")
        after = apply_move(board, "Nbd7", Color.BLACK)
        assert after[D7] == Piece(Color.BLACK, PieceType.KNIGHT)
        assert after.is_empty(B8)
        assert after[F6] == Piece(Color.BLACK, PieceType.KNIGHT)

    @pytest.mark.parametrize(
        "san", ["Ke5", "Nf6", "Bc4", "exd5", "", "Z9", "Nabc3", "e8=K", "x", "O"]
    )
    def test_unresolved_leaves_board_unchanged(
        self, initial_board: Board, san: str
    ) -> None:
        assert apply_move(initial_board, san, Color.WHITE) == initial_board


class TestResolveAndMake:
    def test_resolve_pawn_double_push(self, initial_board: Board) -> None:
        assert resolve_san(initial_board, "e4", Color.WHITE) == Move(E2, E4)

    def test_resolve_castle_does_not_look_at_board(self) -> None:
        move = resolve_san(Board(), "O-O", Color.WHITE)
        assert move == Move(E1, G1, MoveFlag.CASTLE_KINGSIDE)

    def test_resolve_flags_en_passant(self) -> None:
        board = board_from_fen("4k3/8/8/3pP3/8/8/8/4K3")
        move = resolve_san(board, "exd6", Color.WHITE)
        assert move is not None
        assert move.flag == MoveFlag.EN_PASSANT

    def test_resolve_promotion(self) -> None:
        board = board_from_fen("7k/4P3/8/8/8/8/8/4K3")
        move = resolve_san(board, "e8=R", Color.WHITE)
        assert move == Move(E7, E8, MoveFlag.PROMOTION, PieceType.ROOK)
        assert str(move) == "e7e8r"

    def test_resolve_unresolved(self, initial_board: Board) -> None:
        assert resolve_san(initial_board, "Qh5", Color.WHITE) is None

    def test_make_move_from_empty_square_raises(self) -> None:
        with pytest.raises(ValueError, match="No piece on e2"):
            make_move(Board(), Move(E2, E4), Color.WHITE)


class TestPositionSequence:
    def test_empty_moves(self, initial_board: Board) -> None:
        assert calculate_positions([]) == [initial_board]

    def test_one_board_per_present_ply(self) -> None:
        positions = calculate_positions(
            [MoveRecord(1, "e4", "e5"), MoveRecord(2, "Nf3", None)]
        )
        assert len(positions) == 4
        assert positions[3][F3] == Piece(Color.WHITE, PieceType.KNIGHT)

    def test_white_slot_missing_is_skipped(self, initial_board: Board) -> None:
        positions = calculate_positions([MoveRecord(1, None, "e5")])
        assert len(positions) == 2
        assert positions[1][E5] == BP

    def test_earlier_positions_not_mutated(self, initial_board: Board) -> None:
        positions = calculate_positions([MoveRecord(1, "e4", "e5")])
        assert positions[0] == initial_board
        assert positions[1][E4] == WP and positions[1].is_empty(E5)
        assert positions[2][E5] == BP

    def test_full_game(self, ruy_lopez_pgn: str) -> None:
        replay = replay_pgn(ruy_lopez_pgn)
        assert len(replay.positions) == 25
        assert replay.unresolved == []
        assert board_to_fen(replay.final_board) == RUY_LOPEZ_FINAL_PLACEMENT
        assert replay.headers["Event"] == "Test Game"
        assert replay.result_token == "1-0"
        assert replay.result == GameResult.WHITE_WINS

    def test_result_without_token(self) -> None:
        replay = replay_pgn("1. e4 e5")
        assert replay.result_token == "*"
        assert replay.result == GameResult.IN_PROGRESS

    def test_deterministic(self, ruy_lopez_pgn: str) -> None:
        first = replay_pgn(ruy_lopez_pgn)
        second = replay_pgn(ruy_lopez_pgn)
        assert first.positions == second.positions

    def test_unresolved_ply_recorded_and_logged(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        records = [MoveRecord(1, "e4", "e5"), MoveRecord(2, "Ke5", "Nc6")]
        with caplog.at_level(logging.WARNING, logger="pgnreplay.replay.reconstruct"):
            replay = replay_moves(records)

        assert len(replay.positions) == 5
        assert replay.positions[3] == replay.positions[2]
        assert replay.positions[4][C6] == Piece(Color.BLACK, PieceType.KNIGHT)
        assert [ply.label for ply in replay.unresolved] == ["2. Ke5"]
        assert "2. Ke5" in caplog.text

    def test_plies_carry_resolved_moves(self) -> None:
        replay = replay_moves([MoveRecord(1, "Nf3", "d5")])
        assert [ply.move for ply in replay.plies] == [
            Move(G1, F3),
            Move(D7, D5),
        ]
        assert replay.plies[1].color == Color.BLACK
        assert replay.plies[1].label == "1... d5"
        assert replay.plies[1].board is replay.positions[2]
