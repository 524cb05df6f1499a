"""SVG backend: replays draw ops as a self-contained ``<svg>`` fragment."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterable

from chessdiagram.render.geometry import BOARD_SIZE, Point
from chessdiagram.render.ops import ArrowOp, DrawOp, HighlightOp, PieceOp, SquareOp
from chessdiagram.render.style import DiagramStyle, Rgba, hex_color, opacity

SVG_NS = "http://www.w3.org/2000/svg"
VIEWBOX_SIZE = BOARD_SIZE


def glyph_element(markup: str) -> ET.Element:
    """Parse glyph markup, dropping ids so repeated pieces stay valid SVG."""
    element = ET.fromstring(markup)
    for node in element.iter():
        node.attrib.pop("id", None)
    return element


def glyph_document(markup: str, box: float) -> str:
    """Standalone ``<svg>`` for one glyph, for backends that load SVG files."""
    root = ET.Element("svg", {"xmlns": SVG_NS, "viewBox": f"0 0 {_num(box)} {_num(box)}"})
    root.append(glyph_element(markup))
    return ET.tostring(root, encoding="unicode")


def _num(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def _paint(element: ET.Element, attr: str, rgba: Rgba) -> None:
    element.set(attr, hex_color(rgba))
    alpha = opacity(rgba)
    if alpha < 1:
        element.set(f"{attr}-opacity", _num(alpha))


def _points(points: Iterable[Point]) -> str:
    return " ".join(f"{_num(p.x)},{_num(p.y)}" for p in points)


def _square(parent: ET.Element, op: SquareOp) -> None:
    rect = ET.SubElement(
        parent,
        "rect",
        {
            "class": "square " + ("light" if op.light else "dark") + f" {op.square}",
            "x": _num(op.rect.x),
            "y": _num(op.rect.y),
            "width": _num(op.rect.width),
            "height": _num(op.rect.height),
        },
    )
    _paint(rect, "fill", op.fill)


def _piece(parent: ET.Element, op: PieceOp) -> None:
    scale = op.rect.width / op.glyph_box
    group = ET.SubElement(
        parent,
        "g",
        {
            "class": f"piece {op.piece}",
            "transform": f"translate({_num(op.rect.x)} {_num(op.rect.y)}) scale({_num(scale)})",
        },
    )
    group.append(glyph_element(op.glyph))


def _highlight(parent: ET.Element, op: HighlightOp) -> None:
    rect = ET.SubElement(
        parent,
        "rect",
        {
            "class": f"highlight {op.square}",
            "x": _num(op.rect.x),
            "y": _num(op.rect.y),
            "width": _num(op.rect.width),
            "height": _num(op.rect.height),
        },
    )
    _paint(rect, "fill", op.fill)


def _arrow(parent: ET.Element, op: ArrowOp) -> None:
    group = ET.SubElement(parent, "g", {"class": f"arrow {op.start}-{op.end}"})
    outline = op.outline
    line = ET.SubElement(
        group,
        "line",
        {
            "x1": _num(outline.shaft_start.x),
            "y1": _num(outline.shaft_start.y),
            "x2": _num(outline.shaft_end.x),
            "y2": _num(outline.shaft_end.y),
            "stroke-width": _num(op.width),
            "stroke-linecap": "butt",
        },
    )
    _paint(line, "stroke", op.stroke)
    head = ET.SubElement(group, "polygon", {"points": _points(outline.head)})
    _paint(head, "fill", op.stroke)


def render_element(ops: Iterable[DrawOp], style: DiagramStyle | None = None) -> ET.Element:
    """Build the ``<svg>`` element tree for *ops*."""
    style = style if style is not None else DiagramStyle.default()
    root = ET.Element(
        "svg",
        {
            "xmlns": SVG_NS,
            "viewBox": f"0 0 {VIEWBOX_SIZE} {VIEWBOX_SIZE}",
            "width": str(style.size),
            "height": str(style.size),
            "style": "display: block",
        },
    )
    board = ET.SubElement(root, "g", {"class": "chessdiagram"})
    for op in ops:
        if isinstance(op, SquareOp):
            _square(board, op)
        elif isinstance(op, PieceOp):
            _piece(board, op)
        elif isinstance(op, HighlightOp):
            _highlight(board, op)
        elif isinstance(op, ArrowOp):
            _arrow(board, op)
        else:
            raise TypeError(f"Unsupported draw op: {op!r}")
    return root


def render_svg(ops: Iterable[DrawOp], style: DiagramStyle | None = None) -> str:
    """Serialise *ops* to SVG markup."""
    return ET.tostring(render_element(ops, style), encoding="unicode")
