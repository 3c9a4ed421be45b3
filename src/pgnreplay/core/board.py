"""Board - immutable piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence

from pgnreplay.core.enums import Color, PieceType
from pgnreplay.core.piece import Piece
from pgnreplay.core.types import SCAN_ORDER, Square, coordinates_to_square, make_square

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Snapshot of 64 squares.

    A board is never modified after construction. Applying a move goes
    through :meth:`with_changes`, which returns a new board and leaves the
    original untouched, so earlier snapshots can be shared freely.
    """

    __slots__ = ("_squares",)

    def __init__(self, squares: Iterable[Piece | None] | None = None) -> None:
        if squares is None:
            self._squares: tuple[Piece | None, ...] = (None,) * 64
            return
        cells = tuple(squares)
        if len(cells) != 64:
            raise ValueError(f"Board needs exactly 64 squares, got {len(cells)}")
        self._squares = cells

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    def __iter__(self) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares with their pieces, in scan order (rank 8 first)."""
        for sq in SCAN_ORDER:
            piece = self._squares[sq]
            if piece is not None:
                yield sq, piece

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*, in scan order."""
        target = Piece(color, piece_type)
        return [sq for sq in SCAN_ORDER if self._squares[sq] == target]

    def count(self, color: Color | None = None) -> int:
        """Number of pieces on the board, optionally for one side only."""
        return sum(1 for _, p in self if color is None or p.color == color)

    # -- Derivation ---------------------------------------------------------

    def with_changes(self, changes: Mapping[Square, Piece | None]) -> Board:
        """Return a new board with *changes* applied in insertion order."""
        cells = list(self._squares)
        for sq, piece in changes.items():
            cells[sq] = piece
        return Board(cells)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        return INITIAL_BOARD

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str | None]]) -> Board:
        """Build from an 8x8 grid of FEN letters, row 0 being rank 8."""
        if len(rows) != 8 or any(len(row) != 8 for row in rows):
            raise ValueError("Board grid must be 8 rows of 8 cells")
        cells: list[Piece | None] = [None] * 64
        for row_idx, row in enumerate(rows):
            for col_idx, char in enumerate(row):
                if char:
                    cells[coordinates_to_square(row_idx, col_idx)] = Piece.from_char(char)
        return cls(cells)

    def rows(self) -> list[list[str | None]]:
        """8x8 grid of FEN letters (``None`` for empty), row 0 being rank 8."""
        grid: list[list[str | None]] = []
        for rank in range(7, -1, -1):
            row = [self._squares[make_square(file, rank)] for file in range(8)]
            grid.append([str(p) if p else None for p in row])
        return grid

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(self._squares)

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self[make_square(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)


def _build_initial() -> Board:
    cells: list[Piece | None] = [None] * 64
    for f in range(8):
        cells[make_square(f, 1)] = Piece(Color.WHITE, PieceType.PAWN)
        cells[make_square(f, 6)] = Piece(Color.BLACK, PieceType.PAWN)
    for f, pt in enumerate(_BACK_RANK):
        cells[make_square(f, 0)] = Piece(Color.WHITE, pt)
        cells[make_square(f, 7)] = Piece(Color.BLACK, pt)
    return Board(cells)


INITIAL_BOARD = _build_initial()
