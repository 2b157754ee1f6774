"""Line layout: mapping character indices in a line to pixel positions.

The renderer only needs the ``LayoutService`` contract. Real editors back
it with their text shaper; ``MonospaceLayoutService`` is a fixed-pitch
implementation used for previews and tests.
"""

from __future__ import annotations

__all__ = ["LayoutService", "LineLayout", "MonospaceLayoutService", "MonospaceLineLayout"]

from typing import Protocol

from fold_overlay.layout.constants import CHAR_WIDTH, TAB_SIZE
from fold_overlay.model import DocumentLine, SyntaxMode, TextDocument


class LineLayout(Protocol):
    """A laid-out line of text."""

    text: str

    def index_to_pos(self, index: int) -> tuple[float, float]: ...


class LayoutService(Protocol):
    """Produces line layouts for a (mode, line, offset, length) request."""

    def layout(
        self,
        mode: SyntaxMode,
        line: DocumentLine,
        offset: int,
        length: int,
    ) -> LineLayout: ...


class MonospaceLineLayout:
    """Fixed-pitch layout of one line, with tab stops."""

    def __init__(
        self,
        text: str,
        char_width: float = CHAR_WIDTH,
        tab_size: int = TAB_SIZE,
    ) -> None:
        self.text = text
        self.char_width = char_width
        self.tab_size = tab_size
        # columns[i] is the visual column where character i starts
        self._columns: list[int] = []
        col = 0
        for ch in text:
            self._columns.append(col)
            if ch == "\t":
                col += tab_size - col % tab_size if tab_size > 0 else 1
            else:
                col += 1
        self._end_column = col

    def column(self, index: int) -> int:
        """Visual column of character ``index``; past-the-end clamps to line end."""
        if index < 0:
            return 0
        if index >= len(self._columns):
            return self._end_column
        return self._columns[index]

    def index_to_pos(self, index: int) -> tuple[float, float]:
        return (self.column(index) * self.char_width, 0.0)

    @property
    def width(self) -> float:
        return self._end_column * self.char_width


class MonospaceLayoutService:
    """LayoutService over a TextDocument using a fixed character advance.

    The syntax mode does not change glyph advances in a monospace font, so
    it is accepted and ignored.
    """

    def __init__(
        self,
        document: TextDocument,
        char_width: float = CHAR_WIDTH,
        tab_size: int = TAB_SIZE,
    ) -> None:
        self.document = document
        self.char_width = char_width
        self.tab_size = tab_size

    def layout(
        self,
        mode: SyntaxMode,
        line: DocumentLine,
        offset: int,
        length: int,
    ) -> MonospaceLineLayout:
        text = self.document.get_text(offset, length)
        return MonospaceLineLayout(text, self.char_width, self.tab_size)

    def content_width(self) -> float:
        """Pixel width of the widest line in the document."""
        widest = 0.0
        for line in self.document.lines:
            text = self.document.line_text(line)
            widest = max(widest, MonospaceLineLayout(text, self.char_width, self.tab_size).width)
        return widest
