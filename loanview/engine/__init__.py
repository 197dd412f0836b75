"""Loan calculation engine."""

from loanview.engine.amortization import AmortizationSchedule, generate_amortization_schedule
from loanview.engine.calculator import calculate, calculate_emi, calculate_loan_details

__all__ = [
    "AmortizationSchedule",
    "calculate",
    "calculate_emi",
    "calculate_loan_details",
    "generate_amortization_schedule",
]
