"""Amortization schedule generation."""

from decimal import Decimal
from typing import Iterator

from loanview.models.loan import AmortizationRow, LoanDetails

ZERO = Decimal("0")

# Final-period drift below one paisa is treated as fully repaid
RESIDUE_TOLERANCE = Decimal("0.01")


class AmortizationSchedule:
    """Period-by-period breakdown of a loan's installments.

    The schedule is lazy and restartable: every iteration recomputes the
    rows from the loan details, so it holds no state between passes.
    """

    def __init__(self, details: LoanDetails) -> None:
        self.details = details

    def __len__(self) -> int:
        return self.details.tenure_months

    def __iter__(self) -> Iterator[AmortizationRow]:
        details = self.details
        rate = details.monthly_rate
        last_period = details.tenure_months
        balance = details.principal

        for period in range(1, last_period + 1):
            interest = balance * rate
            principal_component = details.emi - interest
            balance -= principal_component

            if period == last_period and abs(balance) < RESIDUE_TOLERANCE:
                balance = ZERO
            balance = max(ZERO, balance)

            yield AmortizationRow(
                period=period,
                principal_component=principal_component,
                interest_component=interest,
                remaining_balance=balance,
            )


def generate_amortization_schedule(details: LoanDetails) -> AmortizationSchedule:
    """Build the full amortization schedule for a calculated loan."""
    return AmortizationSchedule(details)
