"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass

from pgnreplay.core.enums import MoveFlag, PieceType
from pgnreplay.core.types import Square


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """One numbered move: white's SAN and black's SAN, either possibly absent."""

    index: int
    white: str | None
    black: str | None = None


@dataclass(slots=True)
class ParsedPgn:
    """Structured PGN payload: tag pairs, numbered moves and the result token."""

    headers: dict[str, str]
    moves: list[MoveRecord]
    result_token: str


@dataclass(frozen=True, slots=True)
class SanMove:
    """A SAN token broken into its parts.

    ``from_file`` / ``from_rank`` are origin hints (0–7) and are ``None``
    when the token does not carry them. For castling tokens ``to_sq`` is
    ``None`` and ``flag`` names the side.
    """

    piece_type: PieceType
    to_sq: Square | None
    from_file: int | None = None
    from_rank: int | None = None
    is_capture: bool = False
    promotion: PieceType | None = None
    flag: MoveFlag = MoveFlag.NORMAL

    @property
    def is_castle(self) -> bool:
        return self.flag in (MoveFlag.CASTLE_KINGSIDE, MoveFlag.CASTLE_QUEENSIDE)
