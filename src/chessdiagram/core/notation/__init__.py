"""Notation package: FEN placement and diagram directive codecs."""

from chessdiagram.core.diagram import Diagram
from chessdiagram.core.notation.directive import (
    decode_directive,
    encode_directive,
    format_tokens,
    parse_tokens,
)
from chessdiagram.core.notation.fen import (
    EMPTY_PLACEMENT,
    STARTING_PLACEMENT,
    board_from_fen,
    board_to_fen,
    placement_field,
)
from chessdiagram.core.notation.legacy import decode_legacy, encode_legacy


def is_legacy(text: str) -> bool:
    """Whether *text* uses the multi-line ``fen:`` form."""
    stripped = text.strip()
    return "\n" in stripped or stripped.startswith("fen:")


def decode(text: str) -> Diagram | None:
    """Decode *text* with whichever codec its shape calls for."""
    if is_legacy(text):
        return decode_legacy(text.strip())
    return decode_directive(text)


__all__ = [
    "EMPTY_PLACEMENT",
    "STARTING_PLACEMENT",
    "board_from_fen",
    "board_to_fen",
    "placement_field",
    "decode",
    "is_legacy",
    "decode_directive",
    "encode_directive",
    "parse_tokens",
    "format_tokens",
    "decode_legacy",
    "encode_legacy",
]
