"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from pgnreplay.core.board import Board

RUY_LOPEZ_PGN = """
[Event "Test Game"]
[White "Player1"]
[Black "Player2"]
[Result "1-0"]

1. e4 e5 2. Nf3 Nc6 3. Bb5 a6 4. Ba4 Nf6 5. O-O Be7 6. Re1 b5
7. Bb3 d6 8. c3 O-O 9. h3 Na5 10. Bc2 c5 11. d4 Qc7 12. Nbd2 Bd7 1-0
"""


@pytest.fixture
def initial_board() -> Board:
    return Board.initial()


@pytest.fixture
def ruy_lopez_pgn() -> str:
    """Twelve full moves of the closed Ruy Lopez, ending on black's move."""
    return RUY_LOPEZ_PGN
