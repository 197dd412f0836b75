"""Domain models for loan calculation and reporting."""

from loanview.models.application import ApplicationData, LoanRequirement, PersonalDetails
from loanview.models.catalog import Bank, LoanProduct, LoanType
from loanview.models.enums import BankCategory, RateType, SectionKind, TableTheme
from loanview.models.loan import AmortizationRow, LoanDetails, LoanRequest
from loanview.models.report import (
    PageDecoration,
    ReportSection,
    TableBlock,
    TextBlock,
    TextStyle,
)

__all__ = [
    "AmortizationRow",
    "ApplicationData",
    "Bank",
    "BankCategory",
    "LoanDetails",
    "LoanProduct",
    "LoanRequest",
    "LoanRequirement",
    "LoanType",
    "PageDecoration",
    "PersonalDetails",
    "RateType",
    "ReportSection",
    "SectionKind",
    "TableBlock",
    "TableTheme",
    "TextBlock",
    "TextStyle",
]
