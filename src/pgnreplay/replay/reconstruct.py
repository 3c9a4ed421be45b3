"""Applying SAN moves to boards and folding a game into positions."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pgnreplay.core.board import Board
from pgnreplay.core.enums import Color, MoveFlag, PieceType
from pgnreplay.core.move import Move
from pgnreplay.core.notation.models import MoveRecord
from pgnreplay.core.notation.pgn import parse_pgn
from pgnreplay.core.notation.san import parse_san
from pgnreplay.core.piece import Piece
from pgnreplay.core.types import file_of, make_square, rank_of, square_name
from pgnreplay.replay.models import Ply, Replay
from pgnreplay.replay.resolver import find_origin

_LOGGER = logging.getLogger(__name__)

_BACK_RANK = {Color.WHITE: 0, Color.BLACK: 7}
# (king from, king to, rook from, rook to) files.
_CASTLE_FILES: dict[MoveFlag, tuple[int, int, int, int]] = {
    MoveFlag.CASTLE_KINGSIDE: (4, 6, 7, 5),
    MoveFlag.CASTLE_QUEENSIDE: (4, 2, 0, 3),
}


def resolve_san(board: Board, san: str, color: Color) -> Move | None:
    """Work out which move *san* denotes for *color* on *board*.

    Castling is taken at face value: the king goes from the e-file to the
    g- or c-file without looking at the board. Returns ``None`` when the
    token is unreadable or no piece fits.
    """
    parsed = parse_san(san)
    if parsed is None:
        return None

    if parsed.is_castle:
        king_from, king_to, _, _ = _CASTLE_FILES[parsed.flag]
        rank = _BACK_RANK[color]
        return Move(make_square(king_from, rank), make_square(king_to, rank), parsed.flag)

    to_sq = parsed.to_sq
    assert to_sq is not None
    from_sq = find_origin(
        board,
        parsed.piece_type,
        to_sq,
        color,
        from_file=parsed.from_file,
        from_rank=parsed.from_rank,
    )
    if from_sq is None:
        return None

    flag = parsed.flag
    if (
        parsed.piece_type == PieceType.PAWN
        and file_of(from_sq) != file_of(to_sq)
        and board.is_empty(to_sq)
    ):
        flag = MoveFlag.EN_PASSANT
    return Move(from_sq, to_sq, flag, parsed.promotion)


def make_move(board: Board, move: Move, color: Color) -> Board:
    """Return the board after *color* plays *move*; *board* is left as it was."""
    if move.is_castle:
        _, _, rook_from, rook_to = _CASTLE_FILES[move.flag]
        rank = rank_of(move.from_sq)
        return board.with_changes(
            {
                move.from_sq: None,
                make_square(rook_from, rank): None,
                move.to_sq: Piece(color, PieceType.KING),
                make_square(rook_to, rank): Piece(color, PieceType.ROOK),
            }
        )

    piece = board[move.from_sq]
    if piece is None:
        raise ValueError(f"No piece on {square_name(move.from_sq)} for {move}")

    changes: dict[int, Piece | None] = {move.from_sq: None}
    if move.flag == MoveFlag.EN_PASSANT:
        # The captured pawn sits beside the origin, on the destination file.
        changes[make_square(file_of(move.to_sq), rank_of(move.from_sq))] = None
    piece_type = move.promotion or piece.piece_type
    changes[move.to_sq] = Piece(color, piece_type)
    return board.with_changes(changes)


def apply_move(board: Board, san: str, color: Color) -> Board:
    """Play *san* for *color*; an unresolvable move leaves *board* as it was."""
    move = resolve_san(board, san, color)
    if move is None:
        return board
    return make_move(board, move, color)


def replay_moves(
    moves: Iterable[MoveRecord],
    *,
    headers: dict[str, str] | None = None,
    result_token: str = "*",
) -> Replay:
    """Fold *moves* over the starting position, one board per present ply."""
    records = list(moves)
    board = Board.initial()
    positions = [board]
    plies: list[Ply] = []

    for record in records:
        for color, san in ((Color.WHITE, record.white), (Color.BLACK, record.black)):
            if not san:
                continue
            move = resolve_san(board, san, color)
            if move is None:
                _LOGGER.warning(
                    "Could not find %s piece for %s%s %s; board left unchanged",
                    color,
                    record.index,
                    "." if color == Color.WHITE else "...",
                    san,
                )
                _LOGGER.debug("Board at unresolved move:\n%r", board)
            else:
                board = make_move(board, move, color)
                _LOGGER.debug("Applied %s. %s (%s) as %s", record.index, san, color, move)
            positions.append(board)
            plies.append(Ply(record.index, color, san, move, board))

    _LOGGER.debug(
        "Calculated %d positions for %d moves", len(positions), len(records)
    )
    return Replay(
        moves=records,
        positions=positions,
        plies=plies,
        headers=dict(headers or {}),
        result_token=result_token,
    )


def calculate_positions(moves: Iterable[MoveRecord]) -> list[Board]:
    """Boards after each ply of *moves*, starting with the initial position."""
    return replay_moves(moves).positions


def replay_pgn(pgn_text: str) -> Replay:
    """Tokenize a single PGN game and replay it."""
    parsed = parse_pgn(pgn_text)
    return replay_moves(
        parsed.moves,
        headers=parsed.headers,
        result_token=parsed.result_token,
    )
