"""PDF sink rendering reports with ReportLab."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Callable

from reportlab.lib import colors
from reportlab.lib.units import mm
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFError, TTFont
from reportlab.pdfgen import canvas
from reportlab.platypus import Table, TableStyle

from loanview.config import FontConfig, LayoutConfig
from loanview.exceptions import ConfigurationError, SinkError
from loanview.models.enums import TableTheme
from loanview.models.report import TableBlock, TextStyle
from loanview.report.formatting import format_date
from loanview.report.styles import (
    BORDER_COLOR,
    HEADER_COLOR,
    MUTED_COLOR,
    PRIMARY_COLOR,
    STRIPE_COLOR,
    TEXT_COLOR,
)
from loanview.sinks.base import DocumentSink

logger = logging.getLogger(__name__)

FONT = "Helvetica"
FONT_BOLD = "Helvetica-Bold"
EMBEDDED_FONT_PREFIX = "LoanView"
CELL_PADDING = 2  # points
TITLE_RULE_LENGTH = 50  # mm

PageDecorator = Callable[[canvas.Canvas, int, int], None]


def register_fonts(fonts: FontConfig | None) -> tuple[str, str]:
    """Register the configured TrueType faces and return (regular, bold) font names.

    Without a regular face the standard Helvetica fonts are used, which only
    cover Latin-1 text. A missing bold face falls back to the regular one.

    Raises
    ------
    ConfigurationError
        If a font file cannot be loaded.
    """
    if fonts is None or not fonts.regular_path:
        return FONT, FONT_BOLD

    regular = _register_font(fonts.regular_path)
    bold = _register_font(fonts.bold_path) if fonts.bold_path else regular
    return regular, bold


def _register_font(path: str) -> str:
    name = f"{EMBEDDED_FONT_PREFIX}-{Path(path).stem}"
    try:
        pdfmetrics.registerFont(TTFont(name, path))
    except (TTFError, OSError) as exc:
        raise ConfigurationError(f"Cannot load font {path}: {exc}") from exc
    return name


class _DecoratedCanvas(canvas.Canvas):
    """Canvas that holds pages back until the total page count is known."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._page_states: list[dict] = []

    def showPage(self) -> None:
        self._page_states.append(dict(self.__dict__))
        self._startPage()

    def finish(self, decorate: PageDecorator | None) -> None:
        """Emit every held page, decorating each, and close the document."""
        page_count = len(self._page_states)
        for page_number, state in enumerate(self._page_states, start=1):
            self.__dict__.update(state)
            if decorate is not None:
                decorate(self, page_number, page_count)
            canvas.Canvas.showPage(self)
        canvas.Canvas.save(self)


class PdfSink(DocumentSink):
    """Render report sections to a PDF document.

    The document is built in memory and written by ``save``.
    """

    def __init__(
        self,
        layout: LayoutConfig | None = None,
        document_title: str = "",
        fonts: FontConfig | None = None,
    ) -> None:
        """Initialize PDF sink.

        Parameters
        ----------
        layout : LayoutConfig | None
            Page geometry.
        document_title : str
            Title stored in the PDF metadata.
        fonts : FontConfig | None
            TrueType faces to embed; Helvetica when omitted.
        """
        super().__init__(layout)
        self._font, self._font_bold = register_fonts(fonts)
        self._buffer = io.BytesIO()
        self._canvas = _DecoratedCanvas(
            self._buffer,
            pagesize=(self.layout.page_width * mm, self.layout.page_height * mm),
        )
        if document_title:
            self._canvas.setTitle(document_title)
        self._saved = False

    def draw_table(self, table: TableBlock, start_y: float) -> float:
        """Draw a table, splitting it over pages with the head row repeated."""
        data: list[list[str]] = ([list(table.head)] if table.head else []) + [list(r) for r in table.body]
        if not data:
            return start_y

        col_widths = self._column_widths(table, len(data[0]))
        wrapped = [
            [self._wrap_cell(cell, width, table.font_size) for cell, width in zip(row, col_widths)]
            for row in data
        ]
        flowable = Table(
            wrapped,
            colWidths=[w * mm for w in col_widths],
            repeatRows=1 if table.head else 0,
            hAlign="LEFT",
        )
        flowable.setStyle(self._table_style(table))

        width = self.layout.content_width * mm
        y = start_y
        while True:
            available = (self.content_bottom - y) * mm
            _, height = flowable.wrapOn(self._canvas, width, available)
            if height <= available:
                self._place(flowable, y, height)
                y += height / mm
                break

            parts = flowable.split(width, available)
            if len(parts) >= 2:
                first, flowable = parts[0], parts[1]
                _, first_height = first.wrapOn(self._canvas, width, available)
                self._place(first, y, first_height)
            elif y <= self.layout.content_top:
                # Does not fit on an empty page and cannot be split
                self._place(flowable, y, height)
                y += height / mm
                break
            y = self.new_page()

        self._cursor_y = y
        return y

    def save(self, path: str | Path) -> None:
        """Decorate every page and write the PDF to ``path``."""
        if self._saved:
            raise SinkError("PDF document has already been saved")

        self._canvas.showPage()
        self._canvas.finish(self._draw_decoration if self.decoration else None)
        self._saved = True

        file_path = Path(path)
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_bytes(self._buffer.getvalue())
        except OSError as exc:
            raise SinkError(f"Cannot write report to {file_path}: {exc}") from exc
        logger.debug("Saved %d-page PDF to %s", self.page_count, file_path)

    def _to_pdf_y(self, y: float) -> float:
        """Convert millimetres-from-top to ReportLab points-from-bottom."""
        return (self.layout.page_height - y) * mm

    def _place(self, flowable: Table, top: float, height: float) -> None:
        flowable.drawOn(self._canvas, self.layout.left_margin * mm, self._to_pdf_y(top) - height)

    def _column_widths(self, table: TableBlock, columns: int) -> list[float]:
        content_width = self.layout.content_width
        if table.theme == TableTheme.PLAIN and columns == 2:
            return [content_width * 0.35, content_width * 0.65]
        return [content_width / columns] * columns

    def _wrap_cell(self, text: str, width: float, font_size: float) -> str:
        usable = width * mm - 2 * CELL_PADDING
        return "\n".join(simpleSplit(str(text), self._font_bold, font_size, usable))

    def _table_style(self, table: TableBlock) -> TableStyle:
        body_start = 1 if table.head else 0
        commands: list[tuple] = [
            ("FONTNAME", (0, 0), (-1, -1), self._font),
            ("FONTSIZE", (0, 0), (-1, -1), table.font_size),
            ("LEADING", (0, 0), (-1, -1), table.font_size * 1.2),
            ("TEXTCOLOR", (0, 0), (-1, -1), colors.HexColor(TEXT_COLOR)),
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ("TOPPADDING", (0, 0), (-1, -1), CELL_PADDING),
            ("BOTTOMPADDING", (0, 0), (-1, -1), CELL_PADDING),
            ("LEFTPADDING", (0, 0), (-1, -1), CELL_PADDING),
            ("RIGHTPADDING", (0, 0), (-1, -1), CELL_PADDING),
        ]

        if table.theme == TableTheme.GRID:
            commands.append(("GRID", (0, 0), (-1, -1), 0.1 * mm, colors.HexColor(BORDER_COLOR)))

        if table.body:
            if table.bold_first_column:
                commands.append(("FONTNAME", (0, body_start), (0, -1), self._font_bold))
            if table.theme == TableTheme.STRIPED:
                commands.append(
                    (
                        "ROWBACKGROUNDS",
                        (0, body_start),
                        (-1, -1),
                        [colors.white, colors.HexColor(STRIPE_COLOR)],
                    )
                )

        if table.head:
            commands.extend(
                [
                    ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor(HEADER_COLOR)),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                    ("FONTNAME", (0, 0), (-1, 0), self._font_bold),
                    ("FONTSIZE", (0, 0), (-1, 0), 10),
                ]
            )

        return TableStyle(commands)

    def _wrap(self, paragraph: str, style: TextStyle) -> list[str]:
        font = self._font_bold if style.bold else self._font
        return simpleSplit(paragraph, font, style.font_size, self.layout.content_width * mm)

    def _draw_line(self, line: str, y: float, style: TextStyle) -> None:
        c = self._canvas
        layout = self.layout
        left = layout.left_margin * mm
        right = (layout.page_width - layout.right_margin) * mm
        baseline = self._to_pdf_y(y)

        c.setFont(self._font_bold if style.bold else self._font, style.font_size)
        c.setFillColor(colors.HexColor(style.color))
        if style.align == "right":
            c.drawRightString(right, baseline, line)
        elif style.align == "center":
            c.drawCentredString((left + right) / 2, baseline, line)
        else:
            c.drawString(left, baseline, line)

        if style.underline:
            c.setStrokeColor(colors.HexColor(PRIMARY_COLOR))
            c.setLineWidth(0.5 * mm)
            rule_y = self._to_pdf_y(y + 2)
            c.line(left, rule_y, left + TITLE_RULE_LENGTH * mm, rule_y)

    def _start_page(self) -> None:
        self._canvas.showPage()

    def _draw_decoration(self, c: canvas.Canvas, page_number: int, page_count: int) -> None:
        decoration = self.decoration
        layout = self.layout
        left = layout.left_margin * mm
        right = (layout.page_width - layout.right_margin) * mm

        c.setFont(self._font, 18)
        c.setFillColor(colors.HexColor(PRIMARY_COLOR))
        c.drawString(left, self._to_pdf_y(layout.header_baseline), decoration.title)

        c.setFont(self._font, 10)
        c.setFillColor(colors.HexColor(MUTED_COLOR))
        c.drawRightString(
            right,
            self._to_pdf_y(layout.header_top),
            f"Report generated: {format_date(decoration.generated_at)}",
        )
        c.drawRightString(right, self._to_pdf_y(layout.header_baseline), f"Page {page_number} / {page_count}")

        c.setStrokeColor(colors.HexColor(BORDER_COLOR))
        c.setLineWidth(0.2 * mm)
        c.line(left, self._to_pdf_y(layout.header_rule), right, self._to_pdf_y(layout.header_rule))

        c.setFont(self._font, 8)
        c.drawCentredString(
            layout.page_width / 2 * mm,
            self._to_pdf_y(layout.page_height - layout.footer_offset),
            decoration.copyright,
        )
