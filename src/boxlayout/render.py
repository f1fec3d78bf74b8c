"""Rendering of box trees into fixed-width lines of text."""
from __future__ import annotations

import logging
from itertools import zip_longest
from typing import List, Optional, Sequence

from rich.console import Console

from . import content
from .alignment import Alignment, take_p, take_pa
from .box import Blank, Box, Col, Leaf, Row, SubBox

logger = logging.getLogger(__name__)

__all__ = [
    "print_box",
    "render",
    "render_box",
    "resize_box",
    "resize_box_aligned",
]


def render(box: Box) -> str:
    """Render *box* to text, one newline-terminated line per row."""

    logger.debug("Rendering %dx%d box", box.rows, box.cols)
    return content.unlines(render_box(box))


def render_box(box: Box) -> List[str]:
    """
    Render *box* as a list of exactly ``box.rows`` lines of ``box.cols`` characters.

    ``Row`` and ``Col`` children are re-rendered with the parent's height or
    width forced onto them before recursing, so nested alignment and sub-box
    decisions see the stretched size.
    """
    r, c, body = box.rows, box.cols, box.content
    if isinstance(body, Blank):
        return resize_box(r, c, [content.EMPTY])
    if isinstance(body, Leaf):
        return resize_box(r, c, [body.text])
    if isinstance(body, Row):
        rendered = [render_box(child.resized(rows=r)) for child in body.boxes]
        merged = [
            content.EMPTY.join(parts)
            for parts in zip_longest(*rendered, fillvalue=content.EMPTY)
        ]
        return resize_box(r, c, merged)
    if isinstance(body, Col):
        stacked: List[str] = []
        for child in body.boxes:
            stacked.extend(render_box(child.resized(cols=c)))
        return resize_box(r, c, stacked)
    if isinstance(body, SubBox):
        return resize_box_aligned(r, c, body.halign, body.valign, render_box(body.box))
    raise TypeError(f"Unsupported box content: {body!r}")


def resize_box(rows: int, cols: int, lines: Sequence[str]) -> List[str]:
    """Left-justify every line to *cols* and keep or pad (at the bottom) to *rows* lines."""

    fitted = [content.justify(Alignment.FIRST, " ", cols, line) for line in lines]
    return take_p(content.blanks(cols), rows, fitted)


def resize_box_aligned(
    rows: int,
    cols: int,
    halign: Alignment,
    valign: Alignment,
    lines: Sequence[str],
) -> List[str]:
    """Resize rendered *lines* to *rows* x *cols*, distributing padding and cropping by alignment."""

    fitted = [content.justify(halign, " ", cols, line) for line in lines]
    return take_pa(valign, content.blanks(cols), rows, fitted)


def print_box(box: Box, console: Optional[Console] = None) -> None:
    """
    Write the rendered *box* to the terminal.

    Output goes through :meth:`rich.console.Console.out` so the text is written
    verbatim: no markup, no highlighting and no re-wrapping at the console width.
    """
    target = console if console is not None else Console()
    target.out(render(box), end="", highlight=False)
