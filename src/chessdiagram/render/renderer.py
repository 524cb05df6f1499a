"""Renderer — builder that turns a position plus annotations into draw ops."""

from __future__ import annotations

import logging

from chessdiagram.core.board import BoardState
from chessdiagram.core.diagram import Annotation, Arrow, Diagram, Highlight
from chessdiagram.core.enums import Orientation
from chessdiagram.core.notation.fen import board_from_fen
from chessdiagram.core.types import ALL_SQUARES, Square
from chessdiagram.render.geometry import BoardGeometry
from chessdiagram.render.ops import ArrowOp, DrawOp, HighlightOp, PieceOp, SquareOp
from chessdiagram.render.style import DiagramStyle

_LOGGER = logging.getLogger(__name__)


class Renderer:
    """Accumulates annotations on a parsed board and renders them.

    ``draw()`` has no side effects; calling it again on an unchanged
    renderer yields identical ops.
    """

    def __init__(
        self,
        board: BoardState,
        *,
        orientation: Orientation = Orientation.WHITE,
        style: DiagramStyle | None = None,
    ) -> None:
        self._board = board
        self._orientation = orientation
        self._style = style if style is not None else DiagramStyle.default()
        self._geometry = BoardGeometry(orientation)
        self._annotations: list[Annotation] = []

    @classmethod
    def from_fen(
        cls,
        fen: str,
        *,
        orientation: Orientation = Orientation.WHITE,
        style: DiagramStyle | None = None,
    ) -> Renderer:
        """Parse *fen* and bind a new renderer to it (raises ``MalformedFEN``)."""
        return cls(board_from_fen(fen), orientation=orientation, style=style)

    @classmethod
    def from_diagram(cls, diagram: Diagram, style: DiagramStyle | None = None) -> Renderer:
        renderer = cls(diagram.board(), orientation=diagram.orientation, style=style)
        renderer._annotations.extend(diagram.annotations)
        return renderer

    # ── Builder API ──────────────────────────────────────────────────────

    def highlight(self, square: str | Square) -> Renderer:
        """Mark *square* with a translucent overlay."""
        self._annotations.append(Highlight.of(square))
        return self

    def add_arrow(self, start: str | Square, end: str | Square) -> Renderer:
        """Draw an arrow from the centre of *start* to the centre of *end*."""
        self._annotations.append(Arrow.of(start, end))
        return self

    @property
    def annotations(self) -> tuple[Annotation, ...]:
        return tuple(self._annotations)

    @property
    def orientation(self) -> Orientation:
        return self._orientation

    @property
    def style(self) -> DiagramStyle:
        return self._style

    @property
    def geometry(self) -> BoardGeometry:
        return self._geometry

    # ── Rendering ────────────────────────────────────────────────────────

    def draw(self) -> tuple[DrawOp, ...]:
        """Squares, then pieces, then annotations in the order they were added."""
        ops: list[DrawOp] = []
        ops.extend(self._square_ops())
        ops.extend(self._piece_ops())
        for annotation in self._annotations:
            ops.append(self._annotation_op(annotation))
        _LOGGER.debug(
            "Rendered %d ops (%d annotations, orientation=%s)",
            len(ops),
            len(self._annotations),
            self._orientation,
        )
        return tuple(ops)

    def to_svg(self) -> str:
        from chessdiagram.render.svg import render_svg

        return render_svg(self.draw(), self._style)

    def _square_ops(self) -> list[SquareOp]:
        style = self._style
        return [
            SquareOp(
                sq,
                self._geometry.rect(sq),
                sq.is_light,
                style.light_square if sq.is_light else style.dark_square,
            )
            for sq in ALL_SQUARES
        ]

    def _piece_ops(self) -> list[PieceOp]:
        style = self._style
        return [
            PieceOp(sq, piece, self._geometry.rect(sq), style.glyph(piece), style.glyph_box)
            for sq, piece in self._board.occupied()
        ]

    def _annotation_op(self, annotation: Annotation) -> DrawOp:
        if isinstance(annotation, Highlight):
            return HighlightOp(
                annotation.square,
                self._geometry.rect(annotation.square),
                self._style.highlight,
            )
        width = self._geometry.tile * self._style.arrow_width_ratio
        return ArrowOp(
            annotation.start,
            annotation.end,
            self._geometry.center(annotation.start),
            self._geometry.center(annotation.end),
            self._geometry.arrow_outline(annotation.start, annotation.end, width),
            width,
            self._style.arrow,
        )
