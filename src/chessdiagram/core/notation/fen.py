"""FEN piece-placement parsing and serialization.

Only the first field of a FEN record is read; side to move, castling rights,
en passant and clocks are irrelevant to a static diagram.
"""

from __future__ import annotations

from chessdiagram.core.board import BoardState
from chessdiagram.core.errors import MalformedFEN
from chessdiagram.core.piece import Piece
from chessdiagram.core.types import Square

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
EMPTY_PLACEMENT = "8/8/8/8/8/8/8/8"


def placement_field(fen: str) -> str:
    """Return the piece-placement field of *fen*."""
    parts = fen.split()
    if not parts:
        raise MalformedFEN("Invalid FEN: empty string")
    return parts[0]


def board_from_fen(fen: str) -> BoardState:
    """Parse the piece placement of *fen* into a :class:`BoardState`."""
    placement = placement_field(fen)

    ranks = placement.split("/")
    if len(ranks) != 8:
        raise MalformedFEN(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = BoardState()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isascii() and ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise MalformedFEN(f"Invalid FEN digit {ch!r}: {fen!r}")
                file += step
            else:
                if file >= 8:
                    raise MalformedFEN(f"Invalid FEN rank width: {fen!r}")
                board[Square(file, rank)] = Piece.from_char(ch)
                file += 1
            if file > 8:
                raise MalformedFEN(f"Invalid FEN rank width: {fen!r}")
        if file != 8:
            raise MalformedFEN(f"Invalid FEN rank width: {fen!r}")

    return board


def board_to_fen(board: BoardState) -> str:
    """Serialise *board* to a FEN piece-placement field."""
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = board[Square(file, rank)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)
