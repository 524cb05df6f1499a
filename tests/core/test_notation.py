"""Tests for the directive and legacy diagram codecs."""

import logging

import pytest

from chessdiagram.core.diagram import Arrow, Diagram, Highlight
from chessdiagram.core.enums import Orientation
from chessdiagram.core.errors import InvalidOrientation, InvalidSquare
from chessdiagram.core.notation import (
    STARTING_PLACEMENT,
    decode,
    decode_directive,
    decode_legacy,
    encode_directive,
    encode_legacy,
    is_legacy,
)


class TestDirectiveDecoding:
    def test_fen_only_defaults(self) -> None:
        diagram = decode_directive("8/8/8/8/8/8/8/8")
        assert diagram == Diagram("8/8/8/8/8/8/8/8", Orientation.WHITE, ())

    def test_full_directive(self) -> None:
        diagram = decode_directive(f"{STARTING_PLACEMENT}@white@e2-e4 g7")
        assert diagram is not None
        assert diagram.fen == STARTING_PLACEMENT
        assert diagram.orientation is Orientation.WHITE
        assert diagram.annotations == (Arrow.of("e2", "e4"), Highlight.of("g7"))

    def test_black_orientation(self) -> None:
        diagram = decode_directive(f"{STARTING_PLACEMENT}@black")
        assert diagram is not None
        assert diagram.orientation is Orientation.BLACK
        assert diagram.annotations == ()

    def test_unknown_orientation_is_skipped(self) -> None:
        assert decode_directive(f"{STARTING_PLACEMENT}@purple@e4") is None

    def test_empty_orientation_is_skipped(self) -> None:
        assert decode_directive(f"{STARTING_PLACEMENT}@@e4") is None

    @pytest.mark.parametrize("field", [" black", "black ", " white ", "White"])
    def test_padded_orientation_is_skipped(self, field: str) -> None:
        assert decode_directive(f"{STARTING_PLACEMENT}@{field}@e4") is None

    def test_absent_orientation_means_default(self) -> None:
        diagram = decode_directive(STARTING_PLACEMENT)
        assert diagram is not None
        assert diagram.orientation is Orientation.WHITE

    def test_token_order_preserved(self) -> None:
        diagram = decode_directive("8/8/8/8/8/8/8/8@white@g7 e2-e4 a1 h1-a8")
        assert diagram is not None
        assert diagram.annotations == (
            Highlight.of("g7"),
            Arrow.of("e2", "e4"),
            Highlight.of("a1"),
            Arrow.of("h1", "a8"),
        )

    def test_repeated_spaces_skipped(self) -> None:
        diagram = decode_directive("8/8/8/8/8/8/8/8@white@ e4  d5 ")
        assert diagram is not None
        assert diagram.annotations == (Highlight.of("e4"), Highlight.of("d5"))

    def test_invalid_square_raises(self) -> None:
        with pytest.raises(InvalidSquare):
            decode_directive("8/8/8/8/8/8/8/8@white@z9")

    def test_invalid_arrow_end_raises(self) -> None:
        with pytest.raises(InvalidSquare):
            decode_directive("8/8/8/8/8/8/8/8@white@e2-e4-e6")

    def test_fen_is_not_parsed_by_decoder(self) -> None:
        diagram = decode_directive("not-a-fen")
        assert diagram is not None
        assert diagram.fen == "not-a-fen"


class TestDirectiveEncoding:
    def test_defaults_omitted(self) -> None:
        assert encode_directive(Diagram(STARTING_PLACEMENT)) == STARTING_PLACEMENT

    def test_orientation_kept_when_black(self) -> None:
        diagram = Diagram(STARTING_PLACEMENT, Orientation.BLACK)
        assert encode_directive(diagram) == f"{STARTING_PLACEMENT}@black"

    def test_inverse_of_decode(self) -> None:
        text = f"{STARTING_PLACEMENT}@black@e2-e4 g7"
        diagram = decode_directive(text)
        assert diagram is not None
        assert encode_directive(diagram) == text


class TestLegacyDecoding:
    def test_prefixed_fen(self) -> None:
        diagram = decode_legacy(f"fen: {STARTING_PLACEMENT}")
        assert diagram.fen == STARTING_PLACEMENT
        assert diagram.orientation is Orientation.WHITE
        assert diagram.annotations == ()

    def test_unprefixed_fen(self) -> None:
        assert decode_legacy(STARTING_PLACEMENT).fen == STARTING_PLACEMENT

    def test_orientation_and_annotations(self) -> None:
        text = "\r\n".join(
            [
                f"fen: {STARTING_PLACEMENT}",
                "",
                "orientation: black",
                "annotations: He4 Ae2-e4 Hd5",
            ]
        )
        diagram = decode_legacy(text)
        assert diagram.orientation is Orientation.BLACK
        assert diagram.annotations == (
            Highlight.of("e4"),
            Arrow.of("e2", "e4"),
            Highlight.of("d5"),
        )

    def test_invalid_orientation_raises(self) -> None:
        with pytest.raises(InvalidOrientation, match="purple"):
            decode_legacy(f"{STARTING_PLACEMENT}\norientation: purple")

    def test_unknown_sigil_dropped(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="chessdiagram.core.notation.legacy"):
            diagram = decode_legacy(f"{STARTING_PLACEMENT}\nannotations: Xe4 He5")
        assert diagram.annotations == (Highlight.of("e5"),)
        assert "Xe4" in caplog.text

    def test_arrow_without_end_raises(self) -> None:
        with pytest.raises(InvalidSquare):
            decode_legacy(f"{STARTING_PLACEMENT}\nannotations: Ae2")

    def test_multiple_annotation_lines_accumulate(self) -> None:
        diagram = decode_legacy(
            f"{STARTING_PLACEMENT}\nannotations: He4\nannotations: Aa1-h8"
        )
        assert diagram.annotations == (Highlight.of("e4"), Arrow.of("a1", "h8"))

    def test_trailing_spaces_in_orientation_rejected(self) -> None:
        with pytest.raises(InvalidOrientation):
            decode_legacy(f"{STARTING_PLACEMENT}\norientation: black  \nannotations: He4")


class TestLegacyEncoding:
    def test_inverse_of_decode(self) -> None:
        diagram = Diagram(
            STARTING_PLACEMENT,
            Orientation.BLACK,
            (Highlight.of("e4"), Arrow.of("e2", "e4")),
        )
        text = encode_legacy(diagram)
        assert text.splitlines() == [
            f"fen: {STARTING_PLACEMENT}",
            "orientation: black",
            "annotations: He4 Ae2-e4",
        ]
        assert decode_legacy(text) == diagram

    def test_codecs_share_one_model(self) -> None:
        primary = decode_directive(f"{STARTING_PLACEMENT}@white@e2-e4 g7")
        assert primary is not None
        assert decode_legacy(encode_legacy(primary)) == primary


class TestDecodeDispatch:
    def test_single_line_uses_directive_codec(self) -> None:
        assert not is_legacy(f"{STARTING_PLACEMENT}@white@e4")
        assert decode(f"{STARTING_PLACEMENT}@purple") is None

    def test_fen_prefix_uses_legacy_codec(self) -> None:
        assert is_legacy(f"fen: {STARTING_PLACEMENT}")
        diagram = decode(f"fen: {STARTING_PLACEMENT}")
        assert diagram is not None
        assert diagram.fen == STARTING_PLACEMENT

    def test_multi_line_uses_legacy_codec(self) -> None:
        with pytest.raises(InvalidOrientation):
            decode(f"{STARTING_PLACEMENT}\norientation: purple")
