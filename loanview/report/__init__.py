"""Loan report assembly."""

from loanview.report.comparison import ComparisonRow, market_comparison
from loanview.report.formatting import report_filename
from loanview.report.pipeline import ReportAssembler, sample_loan_details
from loanview.report.schedule import display_schedule

__all__ = [
    "ComparisonRow",
    "ReportAssembler",
    "display_schedule",
    "market_comparison",
    "report_filename",
    "sample_loan_details",
]
