"""Host boundary: directive text in, SVG fragment out, never an exception."""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass

from chessdiagram.core.diagram import Diagram
from chessdiagram.core.errors import DiagramError
from chessdiagram.core.notation import decode, encode_directive, placement_field
from chessdiagram.render.renderer import Renderer
from chessdiagram.render.style import DiagramStyle

_LOGGER = logging.getLogger(__name__)

TYPE_TAGS = (":chess ", "chess ")
KEY_PREFIX = "chess-"


@dataclass(frozen=True, slots=True)
class RenderResult:
    """A rendered diagram ready to splice into a host slot."""

    svg: str
    key: str
    fen_key: str
    diagram: Diagram


def strip_type_tag(text: str) -> str:
    """Drop a leading ``chess`` type tag if the host left it in place."""
    stripped = text.lstrip()
    for tag in TYPE_TAGS:
        if stripped.startswith(tag):
            return stripped[len(tag) :]
    return text


def fen_cache_key(fen: str) -> str:
    """Identity key over the FEN text only.

    Diagrams that differ only in orientation or annotations share this key.
    """
    return KEY_PREFIX + hashlib.md5(fen.encode("utf-8")).hexdigest()


def diagram_cache_key(diagram: Diagram) -> str:
    """Identity key over the whole diagram, orientation and annotations included."""
    canonical = Diagram(
        placement_field(diagram.fen), diagram.orientation, diagram.annotations
    )
    payload = encode_directive(canonical).encode("utf-8")
    return KEY_PREFIX + hashlib.md5(payload).hexdigest()


def render_diagram(diagram: Diagram, *, style: DiagramStyle | None = None) -> RenderResult:
    """Render *diagram*; errors propagate."""
    renderer = Renderer.from_diagram(diagram, style=style)
    return RenderResult(
        svg=renderer.to_svg(),
        key=diagram_cache_key(diagram),
        fen_key=fen_cache_key(diagram.fen),
        diagram=diagram,
    )


def render_directive(text: str, *, style: DiagramStyle | None = None) -> RenderResult | None:
    """Decode and render directive *text*.

    Returns ``None`` when nothing should be shown: an unknown orientation in
    the single-line grammar (silently), or any failure (logged).
    """
    try:
        diagram = decode(strip_type_tag(text))
        if diagram is None:
            return None
        return render_diagram(diagram, style=style)
    except DiagramError as exc:
        _LOGGER.warning("Chess diagram rendering failed: %s", exc)
    except Exception:
        _LOGGER.exception("Chess diagram rendering failed unexpectedly")
    return None
