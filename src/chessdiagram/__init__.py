"""chessdiagram — render chess diagram directives as SVG."""

from chessdiagram.service import RenderResult, render_directive

__all__ = ["RenderResult", "render_directive"]
