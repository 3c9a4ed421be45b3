"""SAN (Standard Algebraic Notation) token parsing."""

from __future__ import annotations

from pgnreplay.core.enums import MoveFlag, PieceType
from pgnreplay.core.notation.models import SanMove
from pgnreplay.core.piece import SAN_PIECE_LETTERS
from pgnreplay.core.types import FILES, RANKS, parse_square

_SYMBOLS = str.maketrans("", "", "+#!?")
_KINGSIDE = ("O-O", "0-0")
_QUEENSIDE = ("O-O-O", "0-0-0")

# "P" is not standard SAN but shows up in hand-typed movetext.
_MOVING_PIECE: dict[str, PieceType] = {**SAN_PIECE_LETTERS, "P": PieceType.PAWN}
_PROMOTION_PIECE: dict[str, PieceType] = {
    letter: ptype
    for letter, ptype in SAN_PIECE_LETTERS.items()
    if ptype != PieceType.KING
}


def strip_symbols(san: str) -> str:
    """Remove check, mate and annotation glyphs from *san*."""
    return san.strip().translate(_SYMBOLS)


def castle_flag(san: str) -> MoveFlag | None:
    """Castling side named by *san*, or ``None`` for any other move."""
    bare = strip_symbols(san)
    if bare in _KINGSIDE:
        return MoveFlag.CASTLE_KINGSIDE
    if bare in _QUEENSIDE:
        return MoveFlag.CASTLE_QUEENSIDE
    return None


def parse_san(san: str) -> SanMove | None:
    """Break a SAN token into a :class:`SanMove`.

    Returns ``None`` when the token cannot be read: no destination square,
    an unknown piece or promotion letter, or origin text longer than a
    full square.
    """
    flag = castle_flag(san)
    if flag is not None:
        return SanMove(PieceType.KING, None, flag=flag)

    original = san.strip()
    move = strip_symbols(san)
    if not move:
        return None

    is_capture = "x" in move
    move = move.replace("x", "", 1)

    # Promotion: "e8=Q", or the older "e8Q".
    promotion: PieceType | None = None
    if "=" in move:
        move, _, promo_text = move.partition("=")
        promotion = _PROMOTION_PIECE.get(promo_text.upper())
        if promotion is None:
            return None
    elif len(move) >= 3 and move[-2] in "18" and move[-1] in _PROMOTION_PIECE:
        promotion = _PROMOTION_PIECE[move[-1]]
        move = move[:-1]

    # Piece type
    piece_type = PieceType.PAWN
    if move and move[0].isupper():
        moving = _MOVING_PIECE.get(move[0])
        if moving is None:
            return None
        piece_type = moving
        move = move[1:]

    # Destination (last two chars)
    if len(move) < 2:
        return None
    try:
        to_sq = parse_square(move[-2:])
    except ValueError:
        return None

    # Disambiguation
    origin = move[:-2]
    from_file: int | None = None
    from_rank: int | None = None
    if len(origin) == 1:
        if origin in FILES:
            from_file = FILES.index(origin)
        elif origin in RANKS:
            from_rank = RANKS.index(origin)
        else:
            return None
    elif len(origin) == 2:
        if origin[0] not in FILES or origin[1] not in RANKS:
            return None
        from_file = FILES.index(origin[0])
        from_rank = RANKS.index(origin[1])
    elif len(origin) > 2:
        return None

    # Pawn captures always lead with the origin file.
    if piece_type == PieceType.PAWN and is_capture and from_file is None:
        if original[0] not in FILES:
            return None
        from_file = FILES.index(original[0])

    return SanMove(
        piece_type=piece_type,
        to_sq=to_sq,
        from_file=from_file,
        from_rank=from_rank,
        is_capture=is_capture,
        promotion=promotion,
        flag=MoveFlag.PROMOTION if promotion is not None else MoveFlag.NORMAL,
    )


def destination_name(san: str) -> str | None:
    """Destination square name read straight off the text of *san*.

    Used for highlighting only: piece letters and symbols are dropped and
    the last two characters kept, without consulting a board. Castling
    names no square, so it gives ``None``.
    """
    if castle_flag(san) is not None:
        return None
    clean = san.translate(str.maketrans("", "", "+#!?x=KQRBN"))
    to = clean[-2:]
    return to or None
