"""Tagged draw operations.

A rendered diagram is an ordered tuple of these ops; any vector backend can
replay them in sequence, later ops painting over earlier ones.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, TypeAlias

from chessdiagram.core.piece import Piece
from chessdiagram.core.types import Square
from chessdiagram.render.geometry import ArrowOutline, Point, Rect
from chessdiagram.render.style import Rgba


@dataclass(frozen=True, slots=True)
class SquareOp:
    kind: ClassVar[str] = "square"

    square: Square
    rect: Rect
    light: bool
    fill: Rgba


@dataclass(frozen=True, slots=True)
class PieceOp:
    kind: ClassVar[str] = "piece"

    square: Square
    piece: Piece
    rect: Rect
    glyph: str
    glyph_box: float


@dataclass(frozen=True, slots=True)
class HighlightOp:
    kind: ClassVar[str] = "highlight"

    square: Square
    rect: Rect
    fill: Rgba


@dataclass(frozen=True, slots=True)
class ArrowOp:
    kind: ClassVar[str] = "arrow"

    start: Square
    end: Square
    tail: Point
    tip: Point
    outline: ArrowOutline
    width: float
    stroke: Rgba


DrawOp: TypeAlias = SquareOp | PieceOp | HighlightOp | ArrowOp
