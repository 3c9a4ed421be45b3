"""Core domain layer: boards, pieces and notation, with zero external dependencies.

Quick start::

    from pgnreplay.core import Board, parse_move_records

    records = parse_move_records("1. e4 e5 2. Nf3 Nc6")
    board = Board.initial()
"""

from pgnreplay.core.board import INITIAL_BOARD, Board
from pgnreplay.core.enums import Color, GameResult, MoveFlag, PieceType
from pgnreplay.core.move import Move
from pgnreplay.core.notation import (
    MoveRecord,
    ParsedPgn,
    SanMove,
    board_from_fen,
    board_to_fen,
    parse_move_records,
    parse_pgn,
    parse_san,
)
from pgnreplay.core.piece import Piece
from pgnreplay.core.types import (
    SCAN_ORDER,
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums / flags
    "Color",
    "GameResult",
    "MoveFlag",
    "PieceType",
    # Types / helpers
    "SCAN_ORDER",
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "INITIAL_BOARD",
    "Board",
    "Move",
    "Piece",
    # Notation
    "MoveRecord",
    "ParsedPgn",
    "SanMove",
    "board_from_fen",
    "board_to_fen",
    "parse_move_records",
    "parse_pgn",
    "parse_san",
]
