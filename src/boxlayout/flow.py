"""Greedy paragraph flowing."""
from __future__ import annotations

from dataclasses import dataclass, field
from functools import reduce
from typing import List, Tuple

from . import content

__all__ = ["Line", "Paragraph", "Word", "flow"]


@dataclass(frozen=True)
class Word:
    """A single token together with its measured length."""

    length: int
    text: str

    @classmethod
    def of(cls, text: str) -> "Word":
        return cls(content.length(text), text)


@dataclass(frozen=True)
class Line:
    """Words collected for one output line, most recently added first."""

    length: int = 0
    words: Tuple[Word, ...] = ()

    @classmethod
    def start(cls, word: Word) -> "Line":
        return cls(word.length, (word,))

    def add(self, word: Word) -> "Line":
        return Line(self.length + word.length + 1, (word, *self.words))

    def render(self) -> str:
        return content.unwords(word.text for word in reversed(self.words))


@dataclass(frozen=True)
class Paragraph:
    """Flow state: closed lines (newest first) and the line being filled."""

    width: int
    full_lines: Tuple[Line, ...] = ()
    last_line: Line = field(default_factory=Line)

    def fits(self, word: Word) -> bool:
        """A word fits on an empty line, or when the line plus a space plus the word is within width."""

        return self.last_line.length == 0 or self.last_line.length + word.length + 1 <= self.width

    def add_word(self, word: Word) -> "Paragraph":
        if self.last_line.length == 0:
            return Paragraph(self.width, self.full_lines, Line.start(word))
        if self.fits(word):
            return Paragraph(self.width, self.full_lines, self.last_line.add(word))
        return Paragraph(self.width, (self.last_line, *self.full_lines), Line.start(word))

    def lines(self) -> List[str]:
        closed = self.full_lines if self.last_line.length == 0 else (self.last_line, *self.full_lines)
        return [line.render() for line in reversed(closed)]


def flow(width: int, text: str) -> List[str]:
    """
    Flow *text* into lines of at most *width* characters.

    Words are never broken: a word longer than *width* sits on a line of its
    own and is hard-truncated to *width*, losing its tail.
    """
    tokens = [Word.of(token) for token in content.words(text)]
    paragraph = reduce(Paragraph.add_word, tokens, Paragraph(width))
    return [content.take(width, line) for line in paragraph.lines()]
