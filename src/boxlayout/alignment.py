"""Alignment model and the padded-take arithmetic built on it."""
from __future__ import annotations

from enum import Enum
from typing import List, Sequence, TypeVar

T = TypeVar("T")

__all__ = [
    "Alignment",
    "bottom",
    "center1",
    "center2",
    "left",
    "num_fwd",
    "num_rev",
    "parse_alignment",
    "right",
    "take_p",
    "take_pa",
    "top",
]


class Alignment(str, Enum):
    """Directional bias used when padding, cropping, or centering boxes."""

    FIRST = "first"
    LAST = "last"
    CENTER1 = "center1"
    CENTER2 = "center2"


top = Alignment.FIRST
left = Alignment.FIRST
bottom = Alignment.LAST
right = Alignment.LAST
center1 = Alignment.CENTER1
center2 = Alignment.CENTER2

_ALIASES = {
    "top": Alignment.FIRST,
    "left": Alignment.FIRST,
    "bottom": Alignment.LAST,
    "right": Alignment.LAST,
    "center": Alignment.CENTER1,
    "centre": Alignment.CENTER1,
}


def parse_alignment(value: object) -> Alignment:
    """
    Coerce a user-facing alignment name into an :class:`Alignment`.

    Accepts enum members, canonical values (``first``, ``last``, ``center1``,
    ``center2``) and the positional aliases ``top``/``left``/``bottom``/``right``
    and ``center``. Matching ignores case and surrounding whitespace.

    Raises:
        ValueError: If *value* does not name an alignment.
    """
    if isinstance(value, Alignment):
        return value
    normalized = str(value).strip().lower()
    if normalized in _ALIASES:
        return _ALIASES[normalized]
    try:
        return Alignment(normalized)
    except ValueError:
        choices = ", ".join([member.value for member in Alignment] + sorted(_ALIASES))
        raise ValueError(f"Unknown alignment {value!r} (expected one of: {choices})") from None


def num_fwd(align: Alignment, n: int) -> int:
    """Share of *n* that goes to the trailing (bottom/right) side."""

    if align is Alignment.FIRST:
        return n
    if align is Alignment.LAST:
        return 0
    if align is Alignment.CENTER1:
        return n // 2
    return (n + 1) // 2


def num_rev(align: Alignment, n: int) -> int:
    """Share of *n* that goes to the leading (top/left) side."""

    if align is Alignment.FIRST:
        return 0
    if align is Alignment.LAST:
        return n
    if align is Alignment.CENTER1:
        return (n + 1) // 2
    return n // 2


def take_p(fill: T, n: int, items: Sequence[T]) -> List[T]:
    """Return the first *n* items, padded with *fill* when *items* is too short."""

    if n <= 0:
        return []
    head = list(items[:n])
    return head + [fill] * (n - len(head))


def take_pa(align: Alignment, fill: T, n: int, items: Sequence[T]) -> List[T]:
    """
    Padded take with alignment.

    Imagine *items* extended infinitely on both sides with *fill* and a window
    of size *n* placed so that *items* has the requested alignment inside it.
    The leading part is measured backwards from the split point, so cropping
    removes items from the side the alignment points away from.
    """
    split = num_rev(align, len(items))
    leading = list(items[:split])
    leading.reverse()
    trailing = items[split:]
    head = take_p(fill, num_rev(align, n), leading)
    head.reverse()
    return head + take_p(fill, num_fwd(align, n), trailing)
