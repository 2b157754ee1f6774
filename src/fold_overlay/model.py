"""Data model for folded regions and the editor state they are drawn against."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class DocumentLine:
    """A single line of a document.

    ``offset`` and ``length`` describe the line's text only; the line
    delimiter is not included.
    """

    line_number: int
    offset: int
    length: int

    @property
    def end_offset(self) -> int:
        return self.offset + self.length


@dataclass(frozen=True)
class FoldedRegion:
    """A collapsed region spanning ``start_line`` to ``end_line`` (inclusive)."""

    start_line: DocumentLine
    end_line: DocumentLine


@dataclass(frozen=True)
class SyntaxMode:
    """Highlighting mode handed to the line layout service."""

    name: str


PLAIN_MODE = SyntaxMode("plain")


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle in device pixels."""

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class ViewportState:
    """Read-only snapshot of the scroll, zoom and allocation of an editor view.

    ``x_offset`` is the left edge of the text area (nothing is drawn left of
    it) and ``text_start`` the extra indent before the first text column.
    ``h_upper``/``v_upper`` are the scrollable content bounds.
    """

    width: int
    height: int
    line_height: float
    zoom: float = 1.0
    h_value: float = 0.0
    h_upper: float = 0.0
    v_value: float = 0.0
    v_upper: float = 0.0
    x_offset: float = 0.0
    text_start: float = 0.0


@dataclass
class TextDocument:
    """Plain-text document split into lines."""

    text: str
    syntax_mode: SyntaxMode | None = None
    lines: list[DocumentLine] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.lines = []
        offset = 0
        number = 1
        for match in _LINE_BREAK.finditer(self.text):
            self.lines.append(DocumentLine(number, offset, match.start() - offset))
            offset = match.end()
            number += 1
        self.lines.append(DocumentLine(number, offset, len(self.text) - offset))

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def get_line(self, line_number: int) -> DocumentLine:
        """Return the 1-based ``line_number``; raises IndexError if it doesn't exist."""
        if line_number < 1 or line_number > len(self.lines):
            raise IndexError(
                f"line {line_number} out of range (document has {len(self.lines)} lines)"
            )
        return self.lines[line_number - 1]

    def get_text(self, offset: int, length: int) -> str:
        return self.text[offset:offset + length]

    def line_text(self, line: DocumentLine) -> str:
        return self.get_text(line.offset, line.length)

    def line_to_y(self, line_number: int, line_height: float) -> float:
        """Top edge of a line in document pixels.

        Lines that don't exist (including the one after the last line)
        map to 0.
        """
        if line_number < 1 or line_number > len(self.lines):
            return 0.0
        return (line_number - 1) * line_height

    def fold(self, start: int, end: int) -> FoldedRegion:
        """Build a FoldedRegion from 1-based start/end line numbers."""
        return FoldedRegion(self.get_line(start), self.get_line(end))
