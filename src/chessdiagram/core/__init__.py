"""Core domain layer — diagram model and notation with zero external dependencies.

Quick start::

    from chessdiagram.core import decode_directive

    diagram = decode_directive("8/8/8/4k3/8/8/8/4K3@black@e1-e8 d4")
    board = diagram.board()
"""

from chessdiagram.core.board import BoardState
from chessdiagram.core.diagram import Annotation, Arrow, Diagram, Highlight
from chessdiagram.core.enums import Color, Orientation, PieceType
from chessdiagram.core.errors import (
    DiagramError,
    InvalidOrientation,
    InvalidSquare,
    MalformedFEN,
    UnknownAnnotationSigil,
)
from chessdiagram.core.notation import (
    EMPTY_PLACEMENT,
    STARTING_PLACEMENT,
    board_from_fen,
    board_to_fen,
    decode,
    decode_directive,
    decode_legacy,
    encode_directive,
    encode_legacy,
)
from chessdiagram.core.piece import Piece
from chessdiagram.core.types import Square, as_square, parse_square

__all__ = [
    # Enums
    "Color",
    "Orientation",
    "PieceType",
    # Errors
    "DiagramError",
    "InvalidOrientation",
    "InvalidSquare",
    "MalformedFEN",
    "UnknownAnnotationSigil",
    # Types / helpers
    "Square",
    "as_square",
    "parse_square",
    # Domain objects
    "Annotation",
    "Arrow",
    "BoardState",
    "Diagram",
    "Highlight",
    "Piece",
    # Notation
    "EMPTY_PLACEMENT",
    "STARTING_PLACEMENT",
    "board_from_fen",
    "board_to_fen",
    "decode",
    "decode_directive",
    "decode_legacy",
    "encode_directive",
    "encode_legacy",
]
