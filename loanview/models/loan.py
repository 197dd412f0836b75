"""Loan calculation models."""

from dataclasses import dataclass
from decimal import Decimal

from loanview.exceptions import InvalidInputError


@dataclass(frozen=True)
class LoanRequest:
    """Input to a loan calculation."""

    principal: Decimal
    annual_rate_percent: Decimal
    tenure_months: int

    def __post_init__(self) -> None:
        if isinstance(self.tenure_months, bool) or not isinstance(self.tenure_months, int):
            raise InvalidInputError(f"Tenure must be a whole number of months, got {self.tenure_months!r}")
        if self.tenure_months < 1:
            raise InvalidInputError(f"Tenure must be at least 1 month, got {self.tenure_months}")

        for name in ("principal", "annual_rate_percent"):
            value = getattr(self, name)
            if not isinstance(value, Decimal) or not value.is_finite():
                raise InvalidInputError(f"{name} must be a finite Decimal, got {value!r}")
            if value < 0:
                raise InvalidInputError(f"{name} must be >= 0, got {value}")


@dataclass(frozen=True)
class LoanDetails:
    """Result of a loan calculation.

    Amounts keep full decimal precision; rounding is a presentation concern.
    """

    emi: Decimal
    principal: Decimal
    total_interest: Decimal
    total_payment: Decimal
    annual_rate_percent: Decimal
    tenure_months: int
    monthly_rate: Decimal  # e.g. 0.00708333... for 8.5% p.a.


@dataclass(frozen=True)
class AmortizationRow:
    """One period of an amortization schedule."""

    period: int  # 1, 2, 3, ...
    principal_component: Decimal
    interest_component: Decimal
    remaining_balance: Decimal
