"""A pretty-printing library for laying out text in two dimensions, using a simple box model."""

from __future__ import annotations

from .alignment import Alignment, bottom, center1, center2, left, right, top
from .box import (
    Box,
    above,
    above_spaced,
    align,
    align_horiz,
    align_vert,
    beside,
    beside_spaced,
    char,
    cols,
    columns,
    empty_box,
    hcat,
    hsep,
    move_down,
    move_left,
    move_right,
    move_up,
    null_box,
    para,
    punctuate_h,
    punctuate_v,
    rows,
    text,
    text_lines,
    vcat,
    vsep,
)
from .flow import flow
from .render import print_box, render, render_box

__all__ = (
    "Alignment",
    "Box",
    "above",
    "above_spaced",
    "align",
    "align_horiz",
    "align_vert",
    "beside",
    "beside_spaced",
    "bottom",
    "center1",
    "center2",
    "char",
    "cols",
    "columns",
    "empty_box",
    "flow",
    "hcat",
    "hsep",
    "left",
    "move_down",
    "move_left",
    "move_right",
    "move_up",
    "null_box",
    "para",
    "print_box",
    "punctuate_h",
    "punctuate_v",
    "render",
    "render_box",
    "right",
    "rows",
    "text",
    "text_lines",
    "top",
    "vcat",
    "vsep",
)
