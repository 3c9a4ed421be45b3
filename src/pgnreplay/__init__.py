"""pgnreplay: turn SAN movetext into the board after every ply."""

__version__ = "0.1.0"
