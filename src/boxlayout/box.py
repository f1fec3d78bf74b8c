"""Box tree data model and the combinators that build it.

A :class:`Box` is an immutable value with a declared size and some content.
Sizes are inferred once, when a box is constructed from its children; the
renderer honours the declared size by padding or cropping.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from itertools import chain
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from . import content
from .alignment import Alignment, bottom, left, right, top
from .flow import flow

__all__ = [
    "Blank",
    "Box",
    "Col",
    "Content",
    "Leaf",
    "Row",
    "SubBox",
    "above",
    "above_spaced",
    "align",
    "align_horiz",
    "align_vert",
    "beside",
    "beside_spaced",
    "char",
    "cols",
    "columns",
    "empty_box",
    "hcat",
    "hsep",
    "move_down",
    "move_left",
    "move_right",
    "move_up",
    "null_box",
    "para",
    "punctuate_h",
    "punctuate_v",
    "rows",
    "text",
    "text_lines",
    "vcat",
    "vsep",
]


@dataclass(frozen=True)
class Blank:
    """No content."""


@dataclass(frozen=True)
class Leaf:
    """A single line of raw text."""

    text: str


@dataclass(frozen=True)
class Row:
    """Sub-boxes laid out left to right."""

    boxes: Tuple["Box", ...]


@dataclass(frozen=True)
class Col:
    """Sub-boxes laid out top to bottom."""

    boxes: Tuple["Box", ...]


@dataclass(frozen=True)
class SubBox:
    """A box re-framed at its parent's declared size with the given alignments."""

    halign: Alignment
    valign: Alignment
    box: "Box"


Content = Union[Blank, Leaf, Row, Col, SubBox]


@dataclass(frozen=True)
class Box:
    """A rectangular layout unit with a declared size."""

    rows: int
    cols: int
    content: Content

    def resized(self, *, rows: Optional[int] = None, cols: Optional[int] = None) -> "Box":
        """Return a copy of this box with an overridden declared size."""

        return replace(
            self,
            rows=self.rows if rows is None else rows,
            cols=self.cols if cols is None else cols,
        )

    def __or__(self, other: "Box") -> "Box":
        return beside(self, other)

    def __truediv__(self, other: "Box") -> "Box":
        return above(self, other)


def rows(box: Box) -> int:
    return box.rows


def cols(box: Box) -> int:
    return box.cols


def null_box() -> Box:
    """The box with no content and no size."""

    return empty_box(0, 0)


def empty_box(r: int, c: int) -> Box:
    """
    An empty box of *r* rows and *c* columns.

    Handy as a spacer between other boxes for fine-grained positioning.
    """
    return Box(r, c, Blank())


def char(ch: str) -> Box:
    """A 1x1 box holding a single character."""

    return Box(1, 1, Leaf(content.singleton(ch)))


def text(t: str) -> Box:
    """
    A one-row box holding *t*, as wide as *t* is long.

    Raises:
        ValueError: If *t* contains a line break; split multi-line text first
            (see :func:`text_lines`).
    """
    if t.splitlines() != ([t] if t else []):
        raise ValueError("text() takes a single line; use text_lines() for multi-line input")
    return Box(1, content.length(t), Leaf(t))


def text_lines(a: Alignment, t: str) -> Box:
    """Stack the lines of a multi-line string, each aligned with *a*."""

    return vcat(a, [text(line) for line in t.splitlines()])


def hcat(a: Alignment, boxes: Iterable[Box]) -> Box:
    """Glue boxes together horizontally, aligning them vertically with *a*."""

    items = list(boxes)
    width = sum(box.cols for box in items)
    height = max((box.rows for box in items), default=0)
    return Box(height, width, Row(tuple(align_vert(a, height, box) for box in items)))


def vcat(a: Alignment, boxes: Iterable[Box]) -> Box:
    """Glue boxes together vertically, aligning them horizontally with *a*."""

    items = list(boxes)
    height = sum(box.rows for box in items)
    width = max((box.cols for box in items), default=0)
    return Box(height, width, Col(tuple(align_horiz(a, width, box) for box in items)))


def _intersperse(sep: Box, boxes: Iterable[Box]) -> List[Box]:
    items = list(boxes)
    if not items:
        return []
    return [items[0], *chain.from_iterable((sep, box) for box in items[1:])]


def punctuate_h(a: Alignment, punct: Box, boxes: Iterable[Box]) -> Box:
    """Lay out *boxes* horizontally with a copy of *punct* between each pair."""

    return hcat(a, _intersperse(punct, boxes))


def punctuate_v(a: Alignment, punct: Box, boxes: Iterable[Box]) -> Box:
    """Vertical version of :func:`punctuate_h`."""

    return vcat(a, _intersperse(punct, boxes))


def hsep(sep: int, a: Alignment, boxes: Iterable[Box]) -> Box:
    """Lay out *boxes* horizontally with *sep* blank columns between each pair."""

    return punctuate_h(a, empty_box(0, sep), boxes)


def vsep(sep: int, a: Alignment, boxes: Iterable[Box]) -> Box:
    """Lay out *boxes* vertically with *sep* blank rows between each pair."""

    return punctuate_v(a, empty_box(sep, 0), boxes)


def beside(l: Box, r: Box) -> Box:
    """Paste two boxes side by side, top aligned."""

    return hcat(top, [l, r])


def beside_spaced(l: Box, r: Box) -> Box:
    """Paste two boxes side by side with one blank column between them."""

    return hcat(top, [l, empty_box(0, 1), r])


def above(t: Box, b: Box) -> Box:
    """Stack *t* above *b*, left aligned."""

    return vcat(left, [t, b])


def above_spaced(t: Box, b: Box) -> Box:
    """Stack *t* above *b* with one blank row between them."""

    return vcat(left, [t, empty_box(1, 0), b])


# Alignment -------------------------------------------------------------------


def align(ha: Alignment, va: Alignment, r: int, c: int, box: Box) -> Box:
    """An *r* x *c* box holding *box*, aligned horizontally by *ha* and vertically by *va*."""

    return Box(r, c, SubBox(ha, va, box))


def align_horiz(a: Alignment, c: int, box: Box) -> Box:
    """A box of width *c* with the height and contents of *box*, aligned by *a*."""

    return align(a, Alignment.FIRST, box.rows, c, box)


def align_vert(a: Alignment, r: int, box: Box) -> Box:
    """A box of height *r* with the width and contents of *box*, aligned by *a*."""

    return align(Alignment.FIRST, a, r, box.cols, box)


def move_up(n: int, box: Box) -> Box:
    """Add *n* rows below *box*. See :func:`move_left` for the caveat."""

    return align_vert(top, box.rows + n, box)


def move_down(n: int, box: Box) -> Box:
    """Add *n* rows above *box*. See :func:`move_left` for the caveat."""

    return align_vert(bottom, box.rows + n, box)


def move_left(n: int, box: Box) -> Box:
    """
    Add *n* columns to the right of *box*.

    The name is a white lie: the box only appears moved left by *n* when the
    result is placed in a larger, right-aligned context. On its own it just
    grows with trailing blank columns. The other ``move_*`` helpers behave the
    same way along their own edge.
    """
    return align_horiz(left, box.cols + n, box)


def move_right(n: int, box: Box) -> Box:
    """Add *n* columns to the left of *box*. See :func:`move_left` for the caveat."""

    return align_horiz(right, box.cols + n, box)


# Paragraph flowing -----------------------------------------------------------


def _para_box(a: Alignment, width: int, n: int, lines: Sequence[str]) -> Box:
    # Widening the column lets each line align across the full width.
    stacked = vcat(a, [text(line) for line in lines]).resized(cols=width)
    return align_vert(top, n, stacked)


def para(a: Alignment, width: int, t: str) -> Box:
    """A box of width *width* holding *t* flowed to fit, each line aligned by *a*."""

    lines = flow(width, t)
    return _para_box(a, width, len(lines), lines)


def columns(a: Alignment, width: int, height: int, t: str) -> List[Box]:
    """
    Flow *t* into as many boxes as needed, each *width* wide and at most *height* lines.

    Every box is declared *height* rows tall; the last one is padded with blank
    rows at the bottom when the text runs out.

    Raises:
        ValueError: If *height* is not positive.
    """
    if height <= 0:
        raise ValueError(f"columns() height must be positive, got {height}")
    lines = flow(width, t)
    return [
        _para_box(a, width, height, lines[start:start + height])
        for start in range(0, len(lines), height)
    ]
