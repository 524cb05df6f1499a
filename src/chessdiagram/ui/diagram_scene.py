"""DiagramScene — QGraphicsScene that replays diagram draw ops."""

from __future__ import annotations

from collections.abc import Iterable

from PyQt6.QtCore import QByteArray, QLineF, QObject, QPointF, QRectF, Qt
from PyQt6.QtGui import QBrush, QColor, QPen, QPolygonF
from PyQt6.QtSvg import QSvgRenderer
from PyQt6.QtSvgWidgets import QGraphicsSvgItem
from PyQt6.QtWidgets import QGraphicsItem, QGraphicsScene

from chessdiagram.core.diagram import Diagram
from chessdiagram.render.geometry import BOARD_SIZE
from chessdiagram.render.ops import ArrowOp, DrawOp, HighlightOp, PieceOp, SquareOp
from chessdiagram.render.renderer import Renderer
from chessdiagram.render.style import DiagramStyle, Rgba
from chessdiagram.render.svg import glyph_document

# Cache SVG renderers (one per glyph markup)
_renderers: dict[tuple[str, float], QSvgRenderer] = {}


def qcolor(rgba: Rgba) -> QColor:
    return QColor(*rgba)


def glyph_renderer(markup: str, box: float) -> QSvgRenderer:
    """Load and cache the QSvgRenderer for one piece glyph."""
    key = (markup, box)
    if key not in _renderers:
        data = QByteArray(glyph_document(markup, box).encode("utf-8"))
        renderer = QSvgRenderer(data)
        if not renderer.isValid():
            raise ValueError(f"Invalid SVG glyph markup: {markup[:40]!r}")
        _renderers[key] = renderer
    return _renderers[key]


class DiagramScene(QGraphicsScene):
    """Renders a static diagram; item z-values follow draw-op order."""

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._style = DiagramStyle.default()
        self._items: list[QGraphicsItem] = []
        self.setSceneRect(0, 0, BOARD_SIZE, BOARD_SIZE)

    # ── Public API ───────────────────────────────────────────────────────

    def set_style(self, style: DiagramStyle) -> None:
        self._style = style

    def set_diagram(self, diagram: Diagram) -> None:
        """Render *diagram* (raises on malformed input)."""
        self.set_ops(Renderer.from_diagram(diagram, style=self._style).draw())

    def set_ops(self, ops: Iterable[DrawOp]) -> None:
        """Replace the scene contents with *ops*."""
        self.clear_diagram()
        for z, op in enumerate(ops):
            item = self._make_item(op)
            item.setZValue(z)
            self._items.append(item)

    def clear_diagram(self) -> None:
        for item in self._items:
            self.removeItem(item)
        self._items.clear()

    @property
    def diagram_items(self) -> list[QGraphicsItem]:
        return list(self._items)

    # ── Item factories ───────────────────────────────────────────────────

    def _make_item(self, op: DrawOp) -> QGraphicsItem:
        if isinstance(op, (SquareOp, HighlightOp)):
            return self.addRect(
                QRectF(*op.rect), QPen(Qt.PenStyle.NoPen), QBrush(qcolor(op.fill))
            )
        if isinstance(op, PieceOp):
            return self._make_piece(op)
        if isinstance(op, ArrowOp):
            return self._make_arrow(op)
        raise TypeError(f"Unsupported draw op: {op!r}")

    def _make_piece(self, op: PieceOp) -> QGraphicsItem:
        item = QGraphicsSvgItem()
        item.setSharedRenderer(glyph_renderer(op.glyph, op.glyph_box))
        bounds = item.boundingRect()
        width = float(bounds.width()) or op.glyph_box
        item.setScale(op.rect.width / width)
        item.setPos(op.rect.x, op.rect.y)
        self.addItem(item)
        return item

    def _make_arrow(self, op: ArrowOp) -> QGraphicsItem:
        outline = op.outline
        color = qcolor(op.stroke)
        pen = QPen(color)
        pen.setWidthF(op.width)
        pen.setCapStyle(Qt.PenCapStyle.FlatCap)
        group = self.createItemGroup([])
        line = self.addLine(
            QLineF(
                QPointF(*outline.shaft_start),
                QPointF(*outline.shaft_end),
            ),
            pen,
        )
        head = self.addPolygon(
            QPolygonF([QPointF(*p) for p in outline.head]),
            QPen(Qt.PenStyle.NoPen),
            QBrush(color),
        )
        group.addToGroup(line)
        group.addToGroup(head)
        return group
