"""Diagram model: placement, orientation and ordered annotations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

from chessdiagram.core.board import BoardState
from chessdiagram.core.enums import Orientation
from chessdiagram.core.types import Square, as_square


@dataclass(frozen=True, slots=True)
class Highlight:
    """Overlay marking a single square."""

    square: Square

    @classmethod
    def of(cls, square: str | Square) -> Highlight:
        return cls(as_square(square))


@dataclass(frozen=True, slots=True)
class Arrow:
    """Overlay marking a directed segment between two squares."""

    start: Square
    end: Square

    @classmethod
    def of(cls, start: str | Square, end: str | Square) -> Arrow:
        return cls(as_square(start), as_square(end))


Annotation: TypeAlias = Highlight | Arrow


@dataclass(frozen=True, slots=True)
class Diagram:
    """Immutable render request.

    *fen* keeps the text as given; :meth:`board` parses its placement field.
    Annotations render in tuple order, later ones on top.
    """

    fen: str
    orientation: Orientation = Orientation.WHITE
    annotations: tuple[Annotation, ...] = field(default_factory=tuple)

    def board(self) -> BoardState:
        from chessdiagram.core.notation.fen import board_from_fen

        return board_from_fen(self.fen)
