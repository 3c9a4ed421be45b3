"""Data models produced by replaying movetext."""

from __future__ import annotations

from dataclasses import dataclass, field

from pgnreplay.core.board import Board
from pgnreplay.core.enums import Color, GameResult
from pgnreplay.core.move import Move
from pgnreplay.core.notation.models import MoveRecord
from pgnreplay.core.notation.pgn import game_result_from_pgn
from pgnreplay.core.types import square_name


@dataclass(frozen=True, slots=True)
class Ply:
    """One side's move as replayed: its text, what it resolved to, and the result."""

    number: int
    color: Color
    san: str
    move: Move | None
    board: Board

    @property
    def resolved(self) -> bool:
        return self.move is not None

    @property
    def label(self) -> str:
        """Move number and text, e.g. ``'12. Nf3'`` or ``'12... Nc6'``."""
        dots = "." if self.color == Color.WHITE else "..."
        return f"{self.number}{dots} {self.san}"


@dataclass(frozen=True, slots=True)
class LastMoveSquares:
    """Squares to highlight for a ply; either may be unknown."""

    from_square: str | None = None
    to_square: str | None = None


@dataclass(slots=True)
class Replay:
    """Positions reconstructed from a game, plus the records they came from.

    ``positions[0]`` is the starting position and ``positions[i]`` the board
    after ``plies[i - 1]``.
    """

    moves: list[MoveRecord]
    positions: list[Board]
    plies: list[Ply]
    headers: dict[str, str] = field(default_factory=dict)
    result_token: str = "*"

    @property
    def final_board(self) -> Board:
        return self.positions[-1]

    @property
    def result(self) -> GameResult:
        return game_result_from_pgn(self.result_token)

    @property
    def unresolved(self) -> list[Ply]:
        """Plies whose moving piece could not be found."""
        return [ply for ply in self.plies if not ply.resolved]

    def highlight(self, ply_index: int) -> LastMoveSquares:
        """Origin and destination of the move leading to ``positions[ply_index]``."""
        if ply_index <= 0 or ply_index > len(self.plies):
            return LastMoveSquares()
        move = self.plies[ply_index - 1].move
        if move is None:
            return LastMoveSquares()
        return LastMoveSquares(square_name(move.from_sq), square_name(move.to_sq))
