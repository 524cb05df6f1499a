"""Board geometry: algebraic squares ↔ pixel cells for an orientation.

Every visual layer goes through :class:`BoardGeometry`, so squares, pieces,
highlights and arrow endpoints stay aligned under either orientation.
"""

from __future__ import annotations

import math
from typing import NamedTuple

from chessdiagram.core.enums import Orientation
from chessdiagram.core.types import Square


BOARD_SIZE = 320
"""Side of the fixed board coordinate space (the SVG viewBox)."""


class Point(NamedTuple):
    x: float
    y: float


class Rect(NamedTuple):
    x: float
    y: float
    width: float
    height: float


class ArrowOutline(NamedTuple):
    """Shaft segment plus the three corners of the arrowhead."""

    shaft_start: Point
    shaft_end: Point
    head: tuple[Point, Point, Point]


class BoardGeometry:
    """Maps squares to pixel cells on a ``size`` × ``size`` board."""

    __slots__ = ("orientation", "size")

    def __init__(
        self, orientation: Orientation = Orientation.WHITE, size: float = BOARD_SIZE
    ) -> None:
        self.orientation = orientation
        self.size = size

    @property
    def tile(self) -> float:
        return self.size / 8

    # ── Square → pixels ──────────────────────────────────────────────────

    def visual_coords(self, sq: Square) -> tuple[int, int]:
        """Convert a square to visual (column, row), row 0 at the top."""
        if self.orientation is Orientation.BLACK:
            return 7 - sq.file, sq.rank
        return sq.file, 7 - sq.rank

    def origin(self, sq: Square) -> Point:
        col, row = self.visual_coords(sq)
        return Point(col * self.tile, row * self.tile)

    def rect(self, sq: Square) -> Rect:
        x, y = self.origin(sq)
        return Rect(x, y, self.tile, self.tile)

    def center(self, sq: Square) -> Point:
        x, y = self.origin(sq)
        half = self.tile / 2
        return Point(x + half, y + half)

    # ── Pixels → square ──────────────────────────────────────────────────

    def square_at(self, x: float, y: float) -> Square | None:
        """Board square under pixel ``(x, y)``, or ``None`` off the board."""
        if not (0 <= x < self.size and 0 <= y < self.size):
            return None
        col = int(x // self.tile)
        row = int(y // self.tile)
        if self.orientation is Orientation.BLACK:
            return Square(7 - col, row)
        return Square(col, 7 - row)

    # ── Arrows ───────────────────────────────────────────────────────────

    def arrow_outline(self, start: Square, end: Square, width: float) -> ArrowOutline:
        """Shaft and head for an arrow whose tip sits on the centre of *end*.

        A zero-length arrow (``start == end``) collapses to its centre point.
        """
        tail = self.center(start)
        tip = self.center(end)
        dx, dy = tip.x - tail.x, tip.y - tail.y
        length = math.hypot(dx, dy)
        if length == 0:
            return ArrowOutline(tail, tip, (tip, tip, tip))

        ux, uy = dx / length, dy / length
        head_length = min(width * 2.5, length)
        half_base = width * 1.5
        base = Point(tip.x - ux * head_length, tip.y - uy * head_length)
        left = Point(_round(base.x - uy * half_base), _round(base.y + ux * half_base))
        right = Point(_round(base.x + uy * half_base), _round(base.y - ux * half_base))
        shaft_end = Point(_round(base.x), _round(base.y))
        return ArrowOutline(tail, shaft_end, (tip, left, right))


def _round(value: float) -> float:
    # Keep serialised coordinates short and platform-stable.
    return round(value, 3)
