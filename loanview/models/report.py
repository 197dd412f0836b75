"""Report layout models shared by the pipeline and the sinks."""

from dataclasses import dataclass, field
from datetime import datetime

from loanview.models.enums import SectionKind, TableTheme


@dataclass(frozen=True)
class TextStyle:
    """Font settings for a run of text."""

    font_size: float = 9.0
    color: str = "#333333"
    bold: bool = False
    underline: bool = False  # Short rule under the text (section titles)
    align: str = "left"  # left, right, center


@dataclass
class TableBlock:
    """A table with an optional head row."""

    body: list[list[str]]
    head: list[str] | None = None
    theme: TableTheme = TableTheme.GRID
    bold_first_column: bool = False
    font_size: float = 9.0


@dataclass
class TextBlock:
    """Free text; each paragraph is wrapped by the sink."""

    paragraphs: list[str]
    style: TextStyle = field(default_factory=TextStyle)


@dataclass
class ReportSection:
    """A titled block of layout instructions.

    ``min_space`` is the remaining page height below which the section
    starts on a new page. ``space_after`` is the gap left
    before the next section.
    """

    kind: SectionKind
    title: str
    blocks: list[TableBlock | TextBlock] = field(default_factory=list)
    min_space: float = 0.0
    space_after: float = 0.0


@dataclass(frozen=True)
class PageDecoration:
    """Header and footer content repeated on every page."""

    title: str
    generated_at: datetime
    copyright: str
