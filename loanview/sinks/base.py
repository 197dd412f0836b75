"""Document sink interface shared by all report outputs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from loanview.config import LayoutConfig
from loanview.models.report import PageDecoration, TableBlock, TextStyle


class DocumentSink(ABC):
    """Paginated drawing surface used by the report pipeline.

    Positions are millimetres from the top edge of the current page. The
    sink owns page breaks inside tables and long text; the pipeline decides
    where sections start.

    Parameters
    ----------
    layout : LayoutConfig | None
        Page geometry; defaults to A4 portrait.
    """

    def __init__(self, layout: LayoutConfig | None = None) -> None:
        self.layout = layout or LayoutConfig()
        self.page_count = 1
        self.decoration: PageDecoration | None = None
        self._cursor_y = self.layout.content_top

    @property
    def page_width(self) -> float:
        return self.layout.page_width

    @property
    def page_height(self) -> float:
        return self.layout.page_height

    @property
    def content_bottom(self) -> float:
        """Lowest y at which content may be placed."""
        return self.layout.page_height - self.layout.bottom_margin

    def current_cursor_y(self) -> float:
        """Vertical position after the last drawing command."""
        return self._cursor_y

    def new_page(self) -> float:
        """Start a new page and return the y where content begins."""
        self._start_page()
        self.page_count += 1
        self._cursor_y = self.layout.content_top
        return self._cursor_y

    def draw_text(self, paragraphs: list[str], y: float, style: TextStyle) -> float:
        """Draw wrapped paragraphs separated by a blank line.

        Returns
        -------
        float
            The y below the last line.
        """
        lines: list[str] = []
        for index, paragraph in enumerate(paragraphs):
            if index:
                lines.append("")
            lines.extend(self._wrap(paragraph, style) or [""])

        for line in lines:
            if y > self.content_bottom:
                y = self.new_page()
            if line:
                self._draw_line(line, y, style)
            y += self.layout.line_height

        self._cursor_y = y
        return y

    def decorate(self, decoration: PageDecoration) -> None:
        """Set the header and footer drawn on every page."""
        self.decoration = decoration

    @abstractmethod
    def draw_table(self, table: TableBlock, start_y: float) -> float:
        """Draw a table, continuing on new pages if needed; return the y below it."""

    @abstractmethod
    def save(self, path: str | Path) -> None:
        """Write the document. Raises ``SinkError`` on failure."""

    @abstractmethod
    def _wrap(self, paragraph: str, style: TextStyle) -> list[str]:
        """Split a paragraph into lines that fit the content width."""

    @abstractmethod
    def _draw_line(self, line: str, y: float, style: TextStyle) -> None:
        """Draw a single line of text with its baseline at ``y``."""

    @abstractmethod
    def _start_page(self) -> None:
        """Close the current page and open a new one."""
