"""Configuration management for loanview."""

from dataclasses import dataclass, field, fields
from pathlib import Path

from loanview.exceptions import ConfigurationError


@dataclass
class LayoutConfig:
    """Page layout used by the report pipeline.

    All distances are millimetres on an A4 portrait page, measured from the
    top edge.
    """

    page_width: float = 210.0
    page_height: float = 297.0
    left_margin: float = 15.0
    right_margin: float = 15.0
    content_top: float = 40.0
    title_height: float = 10.0
    section_gap: float = 15.0
    paragraph_gap: float = 10.0
    table_gap: float = 5.0
    line_height: float = 4.0
    key_facts_min_space: float = 80.0
    section_min_space: float = 60.0
    closing_min_space: float = 30.0
    bottom_margin: float = 20.0
    table_row_height: float = 7.0
    header_top: float = 15.0
    header_baseline: float = 20.0
    header_rule: float = 25.0
    footer_offset: float = 10.0

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if value < 0:
                raise ConfigurationError(f"Layout value {f.name} must be >= 0, got {value}")
        if self.content_top >= self.page_height:
            raise ConfigurationError("content_top must lie inside the page")

    @property
    def content_width(self) -> float:
        """Usable width between the side margins."""
        return self.page_width - self.left_margin - self.right_margin


@dataclass
class BrandingConfig:
    """Names and contact details printed on reports."""

    app_name: str = "LoanView"
    currency: str = "INR"
    helpline: str = "1-800-LOAN-VIEW"
    copyright_holder: str = "LoanView"


@dataclass
class FontConfig:
    """TrueType font files embedded in PDF reports.

    Leave ``regular_path`` empty to use Helvetica, which cannot show text
    outside Latin-1 (for example names written in Devanagari).
    """

    regular_path: str = ""
    bold_path: str = ""


@dataclass
class OutputConfig:
    """Output configuration."""

    output_dir: Path = field(default_factory=lambda: Path("output"))


@dataclass
class LoanViewConfig:
    """Main configuration for loanview."""

    layout: LayoutConfig = field(default_factory=LayoutConfig)
    branding: BrandingConfig = field(default_factory=BrandingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    fonts: FontConfig = field(default_factory=FontConfig)
    default_loan_type: str = "home"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "LoanViewConfig":
        """Create config from environment variables."""
        import os

        branding = BrandingConfig(
            app_name=os.getenv("LOANVIEW_APP_NAME", "LoanView"),
            currency=os.getenv("LOANVIEW_CURRENCY", "INR"),
            helpline=os.getenv("LOANVIEW_HELPLINE", "1-800-LOAN-VIEW"),
            copyright_holder=os.getenv("LOANVIEW_APP_NAME", "LoanView"),
        )

        output = OutputConfig(
            output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
        )

        fonts = FontConfig(
            regular_path=os.getenv("LOANVIEW_FONT", ""),
            bold_path=os.getenv("LOANVIEW_FONT_BOLD", ""),
        )

        return cls(
            branding=branding,
            output=output,
            fonts=fonts,
            default_loan_type=os.getenv("DEFAULT_LOAN_TYPE", "home"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
