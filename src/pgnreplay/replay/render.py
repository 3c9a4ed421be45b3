"""Views over replay output for board widgets and move lists."""

from __future__ import annotations

from collections.abc import Collection, Iterable
from dataclasses import dataclass

from pgnreplay.core.board import Board
from pgnreplay.core.enums import Color, MoveFlag
from pgnreplay.core.notation.models import MoveRecord
from pgnreplay.core.notation.san import castle_flag, destination_name
from pgnreplay.core.types import square_name
from pgnreplay.replay.models import LastMoveSquares

BRILLIANT = "brilliant"

_CASTLED_KING_SQUARE: dict[tuple[Color, MoveFlag], str] = {
    (Color.WHITE, MoveFlag.CASTLE_KINGSIDE): "g1",
    (Color.WHITE, MoveFlag.CASTLE_QUEENSIDE): "c1",
    (Color.BLACK, MoveFlag.CASTLE_KINGSIDE): "g8",
    (Color.BLACK, MoveFlag.CASTLE_QUEENSIDE): "c8",
}


@dataclass(frozen=True, slots=True)
class PieceOnSquare:
    """A piece as a board widget wants it: ``code`` like ``'wn'``, ``square`` like ``'g1'``."""

    code: str
    square: str


@dataclass(frozen=True, slots=True)
class ClassifiedMoveRecord:
    record: MoveRecord
    classification: str | None = None


def board_to_pieces(board: Board) -> list[PieceOnSquare]:
    """Flatten *board* into piece codes with square names, rank 8 first."""
    return [PieceOnSquare(piece.code, square_name(sq)) for sq, piece in board]


def last_move_squares(moves: list[MoveRecord], ply_index: int) -> LastMoveSquares:
    """Destination square of the ply leading to position *ply_index*.

    Reads the SAN text only, so the origin is never known. Assumes every
    record before the ply holds both moves. Castling highlights the square
    the king lands on.
    """
    if ply_index <= 0:
        return LastMoveSquares()

    move_index, is_black = divmod(ply_index - 1, 2)
    if move_index >= len(moves):
        return LastMoveSquares()

    record = moves[move_index]
    san = record.black if is_black else record.white
    if not san:
        return LastMoveSquares()

    flag = castle_flag(san)
    if flag is not None:
        color = Color.BLACK if is_black else Color.WHITE
        return LastMoveSquares(to_square=_CASTLED_KING_SQUARE[(color, flag)])
    return LastMoveSquares(to_square=destination_name(san))


def mark_brilliant_moves(
    moves: Iterable[MoveRecord], brilliant_numbers: Collection[int]
) -> list[ClassifiedMoveRecord]:
    return [
        ClassifiedMoveRecord(
            record, BRILLIANT if record.index in brilliant_numbers else None
        )
        for record in moves
    ]
