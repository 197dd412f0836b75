"""In-memory sink that records drawing commands for tests and debugging."""

import json
import textwrap
from pathlib import Path
from typing import Any

from loanview.config import LayoutConfig
from loanview.exceptions import SinkError
from loanview.models.report import PageDecoration, TableBlock, TextStyle
from loanview.sinks.base import DocumentSink
from loanview.sinks.serialization import dataclass_to_dict, serialize_value


class RecordingSink(DocumentSink):
    """Record drawing commands instead of rendering them.

    Layout is estimated: every table row is ``layout.table_row_height``
    tall and text wraps at a fixed number of characters.
    """

    def __init__(self, layout: LayoutConfig | None = None, chars_per_line: int = 110) -> None:
        """Initialize recording sink.

        Parameters
        ----------
        layout : LayoutConfig | None
            Page geometry.
        chars_per_line : int
            Characters per wrapped text line.
        """
        super().__init__(layout)
        self.chars_per_line = chars_per_line
        self.commands: list[dict[str, Any]] = []

    @property
    def texts(self) -> list[str]:
        """All text lines drawn, in order."""
        return [c["text"] for c in self.commands if c["op"] == "text"]

    @property
    def tables(self) -> list[dict[str, Any]]:
        """All table segments drawn, in order."""
        return [c for c in self.commands if c["op"] == "table"]

    def draw_table(self, table: TableBlock, start_y: float) -> float:
        """Record a table, splitting it across pages like a real renderer."""
        row_height = self.layout.table_row_height
        head_height = row_height if table.head else 0.0

        segment_top = start_y
        cursor = segment_top + head_height
        segment: list[list[str]] = []

        for row in table.body:
            if cursor + row_height > self.content_bottom:
                if segment:
                    self._record_table(table, segment, segment_top)
                if segment or segment_top > self.layout.content_top:
                    segment_top = self.new_page()
                    cursor = segment_top + head_height
                    segment = []
            segment.append(row)
            cursor += row_height

        self._record_table(table, segment, segment_top)
        self._cursor_y = cursor
        return cursor

    def decorate(self, decoration: PageDecoration) -> None:
        """Record the header and footer once per page."""
        super().decorate(decoration)
        for page in range(1, self.page_count + 1):
            self.commands.append(
                {
                    "op": "decorate",
                    "page": page,
                    "page_count": self.page_count,
                    "decoration": dataclass_to_dict(decoration),
                }
            )

    def save(self, path: str | Path) -> None:
        """Write the recorded commands as JSON."""
        file_path = Path(path)
        try:
            with open(file_path, "w", encoding="utf-8") as f:
                json.dump(serialize_value(self.commands), f, indent=2, ensure_ascii=False)
        except OSError as exc:
            raise SinkError(f"Cannot write command log to {file_path}: {exc}") from exc

    def _record_table(self, table: TableBlock, rows: list[list[str]], top: float) -> None:
        self.commands.append(
            {
                "op": "table",
                "page": self.page_count,
                "y": top,
                "theme": table.theme,
                "head": list(table.head) if table.head else None,
                "body": [list(row) for row in rows],
            }
        )

    def _wrap(self, paragraph: str, style: TextStyle) -> list[str]:
        return textwrap.wrap(paragraph, self.chars_per_line)

    def _draw_line(self, line: str, y: float, style: TextStyle) -> None:
        self.commands.append(
            {
                "op": "text",
                "page": self.page_count,
                "y": y,
                "text": line,
                "style": dataclass_to_dict(style),
            }
        )

    def _start_page(self) -> None:
        self.commands.append({"op": "new_page", "page": self.page_count + 1})
