"""LoanView: loan calculation engine and report generation."""

from loanview.catalog import Catalog, default_catalog
from loanview.engine import calculate_loan_details, generate_amortization_schedule
from loanview.report import ReportAssembler

__all__ = [
    "Catalog",
    "ReportAssembler",
    "calculate_loan_details",
    "default_catalog",
    "generate_amortization_schedule",
]

__version__ = "0.1.0"
