"""Error taxonomy for decoding and rendering diagrams."""

from __future__ import annotations


class DiagramError(ValueError):
    """Base class for every failure contained to a single render request."""


class MalformedFEN(DiagramError):
    """Piece placement does not decompose into 8 ranks of 8 files."""


class InvalidOrientation(DiagramError):
    """Orientation other than ``white`` or ``black``."""


class InvalidSquare(DiagramError):
    """Coordinate outside a-h / 1-8."""


class UnknownAnnotationSigil(DiagramError):
    """Legacy annotation token with neither an ``H`` nor an ``A`` prefix."""
