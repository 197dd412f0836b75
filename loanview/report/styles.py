"""Colors and text styles used on reports."""

from loanview.models.report import TextStyle

PRIMARY_COLOR = "#008080"
HEADER_COLOR = "#2F4F4F"
TEXT_COLOR = "#333333"
BORDER_COLOR = "#CCCCCC"
MUTED_COLOR = "#969696"
STRIPE_COLOR = "#F5F5F5"

SECTION_TITLE = TextStyle(font_size=14, color=HEADER_COLOR, underline=True)
BODY_TEXT = TextStyle(font_size=9, color=TEXT_COLOR)
BODY_TEXT_BOLD = TextStyle(font_size=9, color=TEXT_COLOR, bold=True)
