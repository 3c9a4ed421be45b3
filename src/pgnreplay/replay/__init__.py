"""Rebuilding board positions from SAN movetext."""

from pgnreplay.replay.models import LastMoveSquares, Ply, Replay
from pgnreplay.replay.reconstruct import (
    apply_move,
    calculate_positions,
    make_move,
    replay_moves,
    replay_pgn,
    resolve_san,
)
from pgnreplay.replay.render import (
    ClassifiedMoveRecord,
    PieceOnSquare,
    board_to_pieces,
    last_move_squares,
    mark_brilliant_moves,
)
from pgnreplay.replay.resolver import can_reach, find_origin, is_path_clear

__all__ = [
    "ClassifiedMoveRecord",
    "LastMoveSquares",
    "PieceOnSquare",
    "Ply",
    "Replay",
    "apply_move",
    "board_to_pieces",
    "calculate_positions",
    "can_reach",
    "find_origin",
    "is_path_clear",
    "last_move_squares",
    "make_move",
    "mark_brilliant_moves",
    "replay_moves",
    "replay_pgn",
    "resolve_san",
]
