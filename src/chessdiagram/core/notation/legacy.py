"""Legacy multi-line codec.

Format::

    fen: 8/8/8/4k3/8/8/8/4K3
    orientation: black
    annotations: He4 Ae2-e4

The ``fen: `` prefix is optional. Annotation tokens carry a one-letter sigil:
``H`` for a highlight, ``A`` for an arrow. Tokens with any other sigil are
dropped.
"""

from __future__ import annotations

import logging
import re

from chessdiagram.core.diagram import Annotation, Arrow, Diagram, Highlight
from chessdiagram.core.enums import Orientation
from chessdiagram.core.errors import InvalidSquare, UnknownAnnotationSigil

_LOGGER = logging.getLogger(__name__)

_LINE_RE = re.compile(r"\r?\n")

FEN_PREFIX = "fen: "
ORIENTATION_PREFIX = "orientation: "
ANNOTATIONS_PREFIX = "annotations: "


def _parse_token(token: str) -> Annotation:
    sigil, body = token[0], token[1:]
    if sigil == "H":
        return Highlight.of(body)
    if sigil == "A":
        start, sep, end = body.partition("-")
        if not sep:
            raise InvalidSquare(f"Arrow token without end square: {token!r}")
        return Arrow.of(start, end)
    raise UnknownAnnotationSigil(f"Unknown annotation sigil {sigil!r} in {token!r}")


def _parse_annotations(line: str) -> list[Annotation]:
    annotations: list[Annotation] = []
    for token in line.split(" "):
        if not token:
            continue
        try:
            annotations.append(_parse_token(token))
        except UnknownAnnotationSigil as exc:
            _LOGGER.debug("Dropping annotation: %s", exc)
    return annotations


def decode_legacy(text: str) -> Diagram:
    """Decode legacy multi-line *text* into a :class:`Diagram`.

    Raises :class:`~chessdiagram.core.errors.InvalidOrientation` for an
    orientation other than ``white`` / ``black``.
    """
    lines = _LINE_RE.split(text)
    fen = lines[0].strip()
    if fen.startswith(FEN_PREFIX.rstrip()):
        fen = fen[len(FEN_PREFIX.rstrip()) :].strip()

    orientation = Orientation.WHITE
    annotations: list[Annotation] = []
    for line in lines[1:]:
        if not line.strip():
            continue
        if line.startswith(ORIENTATION_PREFIX):
            # Value is taken verbatim: "black  " is not an orientation.
            orientation = Orientation.parse(line[len(ORIENTATION_PREFIX) :])
        elif line.startswith(ANNOTATIONS_PREFIX):
            annotations.extend(_parse_annotations(line[len(ANNOTATIONS_PREFIX) :]))
        else:
            _LOGGER.debug("Ignoring unrecognised line: %r", line)

    return Diagram(fen, orientation, tuple(annotations))


def encode_legacy(diagram: Diagram) -> str:
    """Serialise *diagram* to the legacy multi-line form."""
    lines = [FEN_PREFIX + diagram.fen, ORIENTATION_PREFIX + str(diagram.orientation)]
    tokens: list[str] = []
    for annotation in diagram.annotations:
        if isinstance(annotation, Arrow):
            tokens.append(f"A{annotation.start}-{annotation.end}")
        else:
            tokens.append(f"H{annotation.square}")
    if tokens:
        lines.append(ANNOTATIONS_PREFIX + " ".join(tokens))
    return "\n".join(lines)
