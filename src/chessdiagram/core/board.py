"""BoardState - static piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from chessdiagram.core.piece import Piece
from chessdiagram.core.types import ALL_SQUARES, Square


class BoardState:
    """64-cell grid, each cell empty or holding a :class:`Piece`."""

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: dict[Square, Piece] = {}

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._cells.get(sq)

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        if piece is None:
            self._cells.pop(sq, None)
        else:
            self._cells[sq] = piece

    def is_empty(self, sq: Square) -> bool:
        return sq not in self._cells

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` from rank 8 to rank 1, file a to h."""
        for sq in ALL_SQUARES:
            piece = self._cells.get(sq)
            if piece is not None:
                yield sq, piece

    def piece_count(self) -> int:
        return len(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        from chessdiagram.core.notation.fen import board_to_fen

        return f"BoardState({board_to_fen(self)!r})"
