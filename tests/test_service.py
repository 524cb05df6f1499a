"""Tests for the host boundary."""

import logging
import xml.etree.ElementTree as ET

import pytest

from chessdiagram import render_directive
from chessdiagram.core.diagram import Diagram, Highlight
from chessdiagram.core.notation import STARTING_PLACEMENT
from chessdiagram.service import (
    diagram_cache_key,
    fen_cache_key,
    render_diagram,
    strip_type_tag,
)

NS = {"svg": "http://www.w3.org/2000/svg"}


def _board_children(svg: str) -> list[ET.Element]:
    board = ET.fromstring(svg).find("svg:g", NS)
    assert board is not None
    return list(board)


class TestRenderDirective:
    def test_empty_board(self) -> None:
        result = render_directive("8/8/8/8/8/8/8/8")
        assert result is not None
        children = _board_children(result.svg)
        assert len(children) == 64
        assert all("square" in (el.get("class") or "") for el in children)

    def test_opening_with_annotations(self) -> None:
        result = render_directive(f"{STARTING_PLACEMENT}@white@e2-e4 g7")
        assert result is not None
        children = _board_children(result.svg)
        assert len(children) == 64 + 32 + 2
        assert children[-2].get("class") == "arrow e2-e4"
        assert children[-1].get("class") == "highlight g7"

    def test_unknown_orientation_renders_nothing_silently(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="chessdiagram"):
            assert render_directive(f"{STARTING_PLACEMENT}@purple") is None
        assert caplog.records == []

    def test_malformed_fen_is_logged_and_suppressed(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="chessdiagram"):
            result = render_directive("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBN")
        assert result is None
        assert "rank width" in caplog.text

    def test_invalid_square_is_logged_and_suppressed(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="chessdiagram"):
            assert render_directive("8/8/8/8/8/8/8/8@white@k9") is None
        assert "k9" in caplog.text

    def test_legacy_invalid_orientation_is_reported(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="chessdiagram"):
            assert render_directive("fen: 8/8/8/8/8/8/8/8\norientation: purple") is None
        assert "purple" in caplog.text

    def test_legacy_directive_renders(self) -> None:
        result = render_directive(
            f"fen: {STARTING_PLACEMENT}\norientation: black\nannotations: He4"
        )
        assert result is not None
        assert result.diagram.annotations == (Highlight.of("e4"),)

    def test_unexpected_error_never_escapes(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        def _boom(*_args: object, **_kwargs: object) -> None:
            raise RuntimeError("backend exploded")

        monkeypatch.setattr("chessdiagram.service.render_diagram", _boom)
        with caplog.at_level(logging.ERROR, logger="chessdiagram"):
            assert render_directive("8/8/8/8/8/8/8/8") is None
        assert "backend exploded" in caplog.text

    @pytest.mark.parametrize("prefix", ["chess ", ":chess ", "  chess "])
    def test_type_tag_is_stripped(self, prefix: str) -> None:
        result = render_directive(prefix + "8/8/8/8/8/8/8/8@black")
        assert result is not None
        assert result.diagram.fen == "8/8/8/8/8/8/8/8"


class TestCacheKeys:
    def test_fen_key_is_md5_of_fen(self) -> None:
        assert fen_cache_key("") == "chess-d41d8cd98f00b204e9800998ecf8427e"

    def test_fen_key_ignores_annotations(self) -> None:
        a = render_directive(f"{STARTING_PLACEMENT}@white@e4")
        b = render_directive(f"{STARTING_PLACEMENT}@black@d4")
        assert a is not None and b is not None
        assert a.fen_key == b.fen_key

    def test_diagram_key_covers_annotations(self) -> None:
        a = render_directive(f"{STARTING_PLACEMENT}@white@e4")
        b = render_directive(f"{STARTING_PLACEMENT}@white@d4")
        assert a is not None and b is not None
        assert a.key != b.key

    def test_diagram_key_ignores_extra_fen_fields(self) -> None:
        plain = Diagram(STARTING_PLACEMENT)
        full = Diagram(STARTING_PLACEMENT + " w KQkq - 0 1")
        assert diagram_cache_key(plain) == diagram_cache_key(full)

    def test_render_diagram_populates_result(self) -> None:
        diagram = Diagram(STARTING_PLACEMENT)
        result = render_diagram(diagram)
        assert result.diagram is diagram
        assert result.key.startswith("chess-")
        assert result.svg.startswith("<svg")


class TestStripTypeTag:
    def test_untagged_text_unchanged(self) -> None:
        assert strip_type_tag("8/8/8/8/8/8/8/8") == "8/8/8/8/8/8/8/8"

    def test_tag_removed(self) -> None:
        assert strip_type_tag(":chess 8/8/8/8/8/8/8/8") == "8/8/8/8/8/8/8/8"
