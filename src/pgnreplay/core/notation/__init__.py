"""Notation package: FEN placement, SAN tokens and PGN movetext."""

from pgnreplay.core.notation.fen import STARTING_PLACEMENT, board_from_fen, board_to_fen
from pgnreplay.core.notation.models import MoveRecord, ParsedPgn, SanMove
from pgnreplay.core.notation.pgn import (
    clean_movetext,
    extract_result_token,
    game_result_from_pgn,
    parse_headers,
    parse_move_records,
    parse_pgn,
    split_games,
)
from pgnreplay.core.notation.san import castle_flag, destination_name, parse_san

__all__ = [
    "STARTING_PLACEMENT",
    "MoveRecord",
    "ParsedPgn",
    "SanMove",
    "board_from_fen",
    "board_to_fen",
    "castle_flag",
    "clean_movetext",
    "destination_name",
    "extract_result_token",
    "game_result_from_pgn",
    "parse_headers",
    "parse_move_records",
    "parse_pgn",
    "parse_san",
    "split_games",
]
