"""Visual style configuration for rendered diagrams."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

import chess.svg

from chessdiagram.core.piece import Piece

Rgba: TypeAlias = tuple[int, int, int, int]
GlyphSet: TypeAlias = tuple[tuple[str, str], ...]

# FEN letter -> SVG <g> markup drawn in a GLYPH_BOX x GLYPH_BOX cell.
DEFAULT_GLYPHS: GlyphSet = tuple(sorted(chess.svg.PIECES.items()))
GLYPH_BOX = chess.svg.SQUARE_SIZE


def hex_color(rgba: Rgba) -> str:
    """``(240, 217, 181, 255)`` → ``'#f0d9b5'`` (alpha dropped)."""
    r, g, b, _ = rgba
    return f"#{r:02x}{g:02x}{b:02x}"


def opacity(rgba: Rgba) -> float:
    """Alpha channel as a 0..1 fraction, rounded for stable output."""
    return round(rgba[3] / 255, 3)


@dataclass(frozen=True)
class DiagramStyle:
    """Colour scheme, board size and glyph set for a diagram."""

    light_square: Rgba
    dark_square: Rgba
    highlight: Rgba = (255, 255, 0, 100)  # yellow transparent
    arrow: Rgba = (21, 120, 27, 170)  # green transparent
    arrow_width_ratio: float = 0.2  # of a tile
    size: int = 320  # displayed width/height; the viewBox stays fixed
    glyphs: GlyphSet = DEFAULT_GLYPHS
    glyph_box: float = GLYPH_BOX  # side of the cell the glyph markup is drawn in

    def glyph(self, piece: Piece) -> str:
        """SVG markup for *piece* from this style's glyph set."""
        symbol = str(piece)
        for key, markup in self.glyphs:
            if key == symbol:
                return markup
        raise KeyError(f"No glyph for piece {symbol!r}")

    @classmethod
    def default(cls) -> DiagramStyle:
        return cls(
            light_square=(240, 217, 181, 255),  # tan
            dark_square=(181, 136, 99, 255),  # brown
        )

    @classmethod
    def blue(cls) -> DiagramStyle:
        return cls(
            light_square=(222, 227, 230, 255),
            dark_square=(140, 162, 173, 255),
        )

    @classmethod
    def green(cls) -> DiagramStyle:
        return cls(
            light_square=(236, 238, 220, 255),
            dark_square=(112, 149, 120, 255),
        )

    @classmethod
    def walnut(cls) -> DiagramStyle:
        return cls(
            light_square=(228, 210, 184, 255),
            dark_square=(118, 74, 47, 255),
        )

    @classmethod
    def slate(cls) -> DiagramStyle:
        return cls(
            light_square=(224, 226, 231, 255),
            dark_square=(101, 110, 122, 255),
        )

    @classmethod
    def named(cls, name: str) -> DiagramStyle:
        """Look up a theme by name, falling back to :meth:`default`."""
        factory = THEMES.get(name.strip().lower())
        return factory() if factory is not None else cls.default()


THEMES = {
    "classic": DiagramStyle.default,
    "default": DiagramStyle.default,
    "blue": DiagramStyle.blue,
    "green": DiagramStyle.green,
    "walnut": DiagramStyle.walnut,
    "slate": DiagramStyle.slate,
}
