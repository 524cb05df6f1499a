"""Core enumerations for the diagram domain."""

from __future__ import annotations

from enum import Enum, IntEnum

from chessdiagram.core.errors import InvalidOrientation


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class Orientation(str, Enum):
    """Which side sits at the bottom of the rendered image."""

    WHITE = "white"
    BLACK = "black"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> Orientation:
        """Parse ``'white'`` / ``'black'``; anything else is rejected."""
        try:
            return cls(text)
        except ValueError:
            raise InvalidOrientation(f"Unknown orientation {text!r}") from None
