"""Command-line entry point: replay a PGN file and print its positions."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pgnreplay.core.enums import Color
from pgnreplay.core.notation import board_to_fen, split_games
from pgnreplay.replay import Replay, replay_pgn

_LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_UNRESOLVED = 1
EXIT_USAGE = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pgnreplay",
        description="Rebuild the board after every move of a PGN game.",
    )
    parser.add_argument("path", type=Path, help="PGN file to read")
    parser.add_argument(
        "--game",
        type=int,
        default=1,
        metavar="K",
        help="1-based index of the game in a multi-game file (default: 1)",
    )
    parser.add_argument(
        "--ply",
        type=int,
        default=None,
        metavar="N",
        help="print only the position after ply N (0 = starting position)",
    )
    parser.add_argument(
        "--fen",
        action="store_true",
        help="print FEN piece placement instead of diagrams",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log every applied move and a summary of the game",
    )
    return parser


def _render(replay: Replay, index: int, as_fen: bool) -> str:
    board = replay.positions[index]
    if as_fen:
        return board_to_fen(board)
    title = "Start" if index == 0 else replay.plies[index - 1].label
    return f"{title}\n{board!r}"


def _log_summary(replay: Replay) -> None:
    final = replay.final_board
    _LOGGER.info(
        "Replayed %d plies (%d unresolved); result %s, %s; %d white and %d black pieces left",
        len(replay.plies),
        len(replay.unresolved),
        replay.result_token,
        replay.result.name.lower().replace("_", " "),
        final.count(Color.WHITE),
        final.count(Color.BLACK),
    )


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        text = args.path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        _LOGGER.error("Cannot read %s: %s", args.path, exc)
        return EXIT_USAGE

    games = split_games(text)
    if not 1 <= args.game <= len(games):
        _LOGGER.error(
            "%s holds %d game(s); --game %d is out of range",
            args.path,
            len(games),
            args.game,
        )
        return EXIT_USAGE

    replay = replay_pgn(games[args.game - 1])
    _log_summary(replay)

    if args.ply is not None:
        if not 0 <= args.ply < len(replay.positions):
            _LOGGER.error(
                "Ply %d is out of range (0-%d)", args.ply, len(replay.positions) - 1
            )
            return EXIT_USAGE
        indices = [args.ply]
    else:
        indices = list(range(len(replay.positions)))

    separator = "\n" if args.fen else "\n\n"
    print(separator.join(_render(replay, i, args.fen) for i in indices))

    for ply in replay.unresolved:
        print(f"unresolved: {ply.label}", file=sys.stderr)
    return EXIT_UNRESOLVED if replay.unresolved else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
