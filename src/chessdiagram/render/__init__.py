"""Rendering layer: geometry, draw ops, styles and the SVG backend."""

from chessdiagram.render.geometry import BoardGeometry, Point, Rect
from chessdiagram.render.ops import ArrowOp, DrawOp, HighlightOp, PieceOp, SquareOp
from chessdiagram.render.renderer import Renderer
from chessdiagram.render.style import DiagramStyle
from chessdiagram.render.svg import VIEWBOX_SIZE, render_svg

__all__ = [
    "ArrowOp",
    "BoardGeometry",
    "DiagramStyle",
    "DrawOp",
    "HighlightOp",
    "PieceOp",
    "Point",
    "Rect",
    "Renderer",
    "SquareOp",
    "VIEWBOX_SIZE",
    "render_svg",
]
