"""PGN tag capture, movetext tokenizing and result tokens."""

from __future__ import annotations

import re

from pgnreplay.core.enums import GameResult
from pgnreplay.core.notation.models import MoveRecord, ParsedPgn

_PGN_HEADER_RE = re.compile(r'\[(\w+)\s+"((?:[^"\\]|\\.)*)"\]')
_TAG_RE = re.compile(r"\[[^\]]*\]")
_COMMENT_RE = re.compile(r"\{[^}]*\}")
_LINE_COMMENT_RE = re.compile(r";[^\n\r]*")
_VARIATION_RE = re.compile(r"\([^()]*\)")
_BLACK_MARKER_RE = re.compile(r"\d+\.\.\.")
_NAG_RE = re.compile(r"\$\d+")
_EN_PASSANT_RE = re.compile(r"(?<!\S)e\.p\.(?!\S)")
_RESULT_RE = re.compile(r"(?<!\S)(?:1-0|0-1|1/2-1/2|\*)(?!\S)")
_WHITESPACE_RE = re.compile(r"\s+")

# Two or more SAN characters; the lookahead keeps "12." from being read as a move.
_SAN_TOKEN = r"(?!\d+\.)[a-zA-Z0-9][a-zA-Z0-9+#=\-!?]+"
_MOVE_RE = re.compile(rf"(\d+)\.\s*({_SAN_TOKEN})(?:\s+({_SAN_TOKEN}))?")

_RESULTS: dict[str, GameResult] = {
    "1-0": GameResult.WHITE_WINS,
    "0-1": GameResult.BLACK_WINS,
    "1/2-1/2": GameResult.DRAW,
}


def game_result_from_pgn(token: str) -> GameResult:
    """Outcome named by a PGN result token; anything else is still in progress."""
    return _RESULTS.get(token.strip(), GameResult.IN_PROGRESS)


def parse_headers(pgn_text: str) -> dict[str, str]:
    """Collect ``[Name "value"]`` tag pairs; later duplicates win."""
    headers: dict[str, str] = {}
    for key, raw_value in _PGN_HEADER_RE.findall(pgn_text):
        headers[key] = raw_value.replace('\\"', '"').replace("\\\\", "\\")
    return headers


def _strip_annotations(text: str) -> str:
    """Drop tags, comments and variations, keeping only mainline text."""
    text = _TAG_RE.sub(" ", text)
    text = _COMMENT_RE.sub(" ", text)
    text = _LINE_COMMENT_RE.sub(" ", text)
    previous = None
    while previous != text:
        previous = text
        text = _VARIATION_RE.sub(" ", text)
    return text


def extract_result_token(pgn_text: str) -> str:
    """Return the last result token of the mainline, or ``"*"``."""
    tokens = _RESULT_RE.findall(_strip_annotations(pgn_text))
    return tokens[-1] if tokens else "*"


def clean_movetext(pgn_text: str) -> str:
    """Reduce *pgn_text* to numbered mainline moves on a single line."""
    text = _strip_annotations(pgn_text)
    text = _BLACK_MARKER_RE.sub(" ", text)
    text = _NAG_RE.sub(" ", text)
    text = _EN_PASSANT_RE.sub(" ", text)
    text = _RESULT_RE.sub(" ", text)
    return _WHITESPACE_RE.sub(" ", text).strip()


def parse_move_records(pgn_text: str) -> list[MoveRecord]:
    """Split movetext into numbered white/black move pairs.

    Records come back in the order they appear. A black move that is
    missing from the text is ``None``.
    """
    records: list[MoveRecord] = []
    for match in _MOVE_RE.finditer(clean_movetext(pgn_text)):
        number, white, black = match.groups()
        # A bare number in black's slot is the next move number.
        if black is not None and black.isdigit():
            black = None
        records.append(MoveRecord(index=int(number), white=white, black=black))
    return records


def parse_pgn(pgn_text: str) -> ParsedPgn:
    """Parse a single PGN game into headers, move records and result token."""
    return ParsedPgn(
        headers=parse_headers(pgn_text),
        moves=parse_move_records(pgn_text),
        result_token=extract_result_token(pgn_text),
    )


def split_games(pgn_text: str) -> list[str]:
    """Split a multi-game PGN document into one text chunk per game.

    A tag line that follows movetext starts a new game.
    """
    games: list[list[str]] = []
    current: list[str] = []
    seen_movetext = False

    for raw_line in pgn_text.splitlines():
        line = raw_line.strip()
        if line.startswith("[") and seen_movetext:
            games.append(current)
            current = []
            seen_movetext = False
        if line and not line.startswith("["):
            seen_movetext = True
        current.append(raw_line)

    if any(line.strip() for line in current):
        games.append(current)
    return ["\n".join(lines).strip() for lines in games]
