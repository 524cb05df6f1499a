"""Command-line entry point: render a directive to SVG or preview it."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from chessdiagram.render.style import THEMES, DiagramStyle
from chessdiagram.service import RenderResult, render_directive

_LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessdiagram",
        description="Render a chess diagram directive (fen@orientation@annotations) as SVG.",
    )
    parser.add_argument(
        "directive",
        nargs="?",
        help="directive text; read from stdin when omitted",
    )
    parser.add_argument("-o", "--output", type=Path, help="write SVG to this file")
    parser.add_argument(
        "--theme",
        default="classic",
        choices=sorted(THEMES),
        help="board colour theme",
    )
    parser.add_argument(
        "--show", action="store_true", help="open a window previewing the diagram"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log progress")
    return parser


def _show(result: RenderResult, style: DiagramStyle) -> int:
    from PyQt6.QtWidgets import QApplication

    from chessdiagram.ui.diagram_view import DiagramView

    app = QApplication.instance() or QApplication(sys.argv)
    view = DiagramView()
    view.diagram_scene.set_style(style)
    view.diagram_scene.set_diagram(result.diagram)
    view.setWindowTitle(f"chessdiagram: {result.diagram.fen}")
    view.show()
    return app.exec()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    text = args.directive if args.directive is not None else sys.stdin.read()
    style = DiagramStyle.named(args.theme)
    result = render_directive(text, style=style)
    if result is None:
        _LOGGER.info("Nothing rendered for %r", text)
        return 1

    if args.output is not None:
        args.output.write_text(result.svg + "\n", encoding="utf-8")
        _LOGGER.info("Wrote %s (%s)", args.output, result.key)
    elif not args.show:
        sys.stdout.write(result.svg + "\n")

    if args.show:
        return _show(result, style)
    return 0


if __name__ == "__main__":
    sys.exit(main())
