"""Origin-square resolution for SAN moves.

There is no legal-move generator here. A piece "can reach" a square when
its movement pattern fits and, for sliders, nothing stands in between.
Checks, pins and castling rights are not considered.
"""

from __future__ import annotations

from pgnreplay.core.board import Board
from pgnreplay.core.enums import Color, PieceType
from pgnreplay.core.piece import Piece
from pgnreplay.core.types import SCAN_ORDER, Square, file_of, make_square, rank_of

_FORWARD = {Color.WHITE: 1, Color.BLACK: -1}
_START_RANK = {Color.WHITE: 1, Color.BLACK: 6}
# Rank a pawn must stand on to capture en passant (rank 5 / rank 4).
_EN_PASSANT_RANK = {Color.WHITE: 4, Color.BLACK: 3}


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def is_path_clear(board: Board, from_sq: Square, to_sq: Square) -> bool:
    """Whether every square strictly between the two squares is empty.

    The squares must share a line or diagonal; the endpoints themselves are
    not looked at.
    """
    step_file = _sign(file_of(to_sq) - file_of(from_sq))
    step_rank = _sign(rank_of(to_sq) - rank_of(from_sq))

    file = file_of(from_sq) + step_file
    rank = rank_of(from_sq) + step_rank
    while (file, rank) != (file_of(to_sq), rank_of(to_sq)):
        if not board.is_empty(make_square(file, rank)):
            return False
        file += step_file
        rank += step_rank
    return True


def _pawn_can_reach(
    board: Board, from_sq: Square, to_sq: Square, color: Color
) -> bool:
    d_file = file_of(to_sq) - file_of(from_sq)
    d_rank = rank_of(to_sq) - rank_of(from_sq)
    forward = _FORWARD[color]

    if d_file == 0:
        if d_rank == forward:
            return board.is_empty(to_sq)
        if d_rank == 2 * forward and rank_of(from_sq) == _START_RANK[color]:
            skipped = make_square(file_of(from_sq), rank_of(from_sq) + forward)
            return board.is_empty(skipped) and board.is_empty(to_sq)
        return False

    if abs(d_file) != 1 or d_rank != forward:
        return False

    target = board[to_sq]
    if target is not None:
        return target.color != color

    # En passant: the pawn beside us on the destination file is taken.
    # Whether it just made a double step is not known here.
    if rank_of(from_sq) != _EN_PASSANT_RANK[color]:
        return False
    beside = board[make_square(file_of(to_sq), rank_of(from_sq))]
    return (
        beside is not None
        and beside.color != color
        and beside.piece_type == PieceType.PAWN
    )


def can_reach(
    board: Board,
    piece_type: PieceType,
    from_sq: Square,
    to_sq: Square,
    color: Color,
) -> bool:
    """Whether a *color* *piece_type* on *from_sq* could move to *to_sq*."""
    if from_sq == to_sq:
        return False

    d_file = abs(file_of(to_sq) - file_of(from_sq))
    d_rank = abs(rank_of(to_sq) - rank_of(from_sq))

    if piece_type == PieceType.PAWN:
        return _pawn_can_reach(board, from_sq, to_sq, color)
    if piece_type == PieceType.KNIGHT:
        return {d_file, d_rank} == {1, 2}
    if piece_type == PieceType.BISHOP:
        return d_file == d_rank and is_path_clear(board, from_sq, to_sq)
    if piece_type == PieceType.ROOK:
        return (d_file == 0 or d_rank == 0) and is_path_clear(board, from_sq, to_sq)
    if piece_type == PieceType.QUEEN:
        straight = d_file == 0 or d_rank == 0
        return (straight or d_file == d_rank) and is_path_clear(board, from_sq, to_sq)
    if piece_type == PieceType.KING:
        # Two files sideways is castling written as a king move.
        return (d_file <= 1 and d_rank <= 1) or (d_rank == 0 and d_file == 2)
    return False


def find_origin(
    board: Board,
    piece_type: PieceType,
    to_sq: Square,
    color: Color,
    from_file: int | None = None,
    from_rank: int | None = None,
) -> Square | None:
    """Square of the *color* *piece_type* that moves to *to_sq*.

    Squares are tried rank 8 to rank 1, file a to file h. Origin hints
    filter before reachability is tested; when more than one piece still
    qualifies the first one in that order is returned.
    """
    target = Piece(color, piece_type)
    for sq in SCAN_ORDER:
        if board[sq] != target:
            continue
        if from_file is not None and file_of(sq) != from_file:
            continue
        if from_rank is not None and rank_of(sq) != from_rank:
            continue
        if can_reach(board, piece_type, sq, to_sq, color):
            return sq
    return None
