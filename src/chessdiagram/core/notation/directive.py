"""Primary directive codec: ``<fen>@<orientation>@<tokens>``.

Orientation and tokens are optional::

    rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR@white@e2-e4 g7

A token with a dash is an arrow, anything else a highlighted square.
"""

from __future__ import annotations

from chessdiagram.core.diagram import Annotation, Arrow, Diagram, Highlight
from chessdiagram.core.enums import Orientation
from chessdiagram.core.errors import InvalidOrientation

SEPARATOR = "@"


def parse_tokens(text: str) -> tuple[Annotation, ...]:
    """Decode a space-separated annotation list, preserving token order."""
    annotations: list[Annotation] = []
    for token in text.split(" "):
        if not token:
            continue
        if "-" in token:
            start, end = token.split("-", 1)
            annotations.append(Arrow.of(start, end))
        else:
            annotations.append(Highlight.of(token))
    return tuple(annotations)


def format_tokens(annotations: tuple[Annotation, ...]) -> str:
    parts: list[str] = []
    for annotation in annotations:
        if isinstance(annotation, Arrow):
            parts.append(f"{annotation.start}-{annotation.end}")
        else:
            parts.append(str(annotation.square))
    return " ".join(parts)


def decode_directive(text: str) -> Diagram | None:
    """Decode directive *text* into a :class:`Diagram`.

    Returns ``None`` when the orientation field is neither ``white`` nor
    ``black``; the directive is skipped without reporting anything.
    Invalid squares raise :class:`~chessdiagram.core.errors.InvalidSquare`.
    """
    fields = text.strip().split(SEPARATOR)
    fen = fields[0].strip()
    tokens = fields[2] if len(fields) > 2 else ""

    # The default applies only when the field is absent; "" or " black" is rejected.
    orientation = Orientation.WHITE
    if len(fields) > 1:
        try:
            orientation = Orientation.parse(fields[1])
        except InvalidOrientation:
            return None

    return Diagram(fen, orientation, parse_tokens(tokens))


def encode_directive(diagram: Diagram) -> str:
    """Serialise *diagram* back to directive text (defaults omitted)."""
    tokens = format_tokens(diagram.annotations)
    if tokens:
        return SEPARATOR.join((diagram.fen, str(diagram.orientation), tokens))
    if diagram.orientation is not Orientation.WHITE:
        return SEPARATOR.join((diagram.fen, str(diagram.orientation)))
    return diagram.fen
