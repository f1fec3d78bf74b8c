"""Text operations the layout engine needs from its content type.

Boxes carry plain ``str`` content. Every character counts as one column.
"""
from __future__ import annotations

from typing import Iterable, List

from .alignment import Alignment, take_pa

__all__ = [
    "EMPTY",
    "blanks",
    "justify",
    "length",
    "singleton",
    "take",
    "unlines",
    "unwords",
    "words",
]

EMPTY = ""


def length(text: str) -> int:
    return len(text)


def singleton(ch: str) -> str:
    """Return a one-character string, rejecting anything else."""

    if len(ch) != 1:
        raise ValueError(f"Expected a single character, got {ch!r}")
    return ch


def take(n: int, text: str) -> str:
    """Return the first *n* characters of *text* (never pads)."""

    if n <= 0:
        return EMPTY
    return text[:n]


def words(text: str) -> List[str]:
    return text.split()


def unwords(items: Iterable[str]) -> str:
    return " ".join(items)


def unlines(lines: Iterable[str]) -> str:
    """Join *lines* with newlines, terminating the last one as well."""

    return "".join(f"{line}\n" for line in lines)


def justify(align: Alignment, pad: str, width: int, text: str) -> str:
    """
    Pad or crop *text* to exactly *width* characters according to *align*.

    Padding and cropping are both distributed between the leading and trailing
    side using the alignment weights, e.g. ``justify(CENTER1, " ", 5, "ab")``
    gives ``"  ab "`` and ``justify(LAST, " ", 2, "abcd")`` keeps ``"cd"``.
    A non-positive *width* yields the empty string.

    Parameters:
        align (Alignment): Which side receives the padding or loses characters.
        pad (str): Single fill character.
        width (int): Target width.
        text (str): Text to fit.

    Returns:
        str: The justified text.
    """
    if width <= 0:
        return EMPTY
    return EMPTY.join(take_pa(align, pad, width, text))


def blanks(n: int) -> str:
    """Return a line of *n* spaces."""

    return justify(Alignment.CENTER1, " ", n, EMPTY)
