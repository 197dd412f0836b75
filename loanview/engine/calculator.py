"""Fixed-rate loan calculations (EMI and totals)."""

from decimal import Decimal, InvalidOperation
from typing import Union

from loanview.exceptions import InvalidInputError
from loanview.models.loan import LoanDetails, LoanRequest

Number = Union[Decimal, int, float, str]

ZERO = Decimal("0")
MONTHS_PER_YEAR = Decimal("12")
HUNDRED = Decimal("100")


def to_decimal(value: Number, name: str) -> Decimal:
    """Convert a user-supplied number to Decimal.

    Floats go through ``str`` so that 8.5 becomes Decimal("8.5") rather
    than its binary expansion.
    """
    if isinstance(value, bool):
        raise InvalidInputError(f"{name} must be a number, got {value!r}")
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise InvalidInputError(f"{name} must be a number, got {value!r}") from exc


def monthly_rate_for(annual_rate_percent: Decimal) -> Decimal:
    """Convert an annual percentage rate to a monthly fraction."""
    return annual_rate_percent / MONTHS_PER_YEAR / HUNDRED


def calculate_emi(principal: Decimal, monthly_rate: Decimal, tenure_months: int) -> Decimal:
    """Equated monthly installment for a fixed-rate loan.

    A zero rate is a plain division; the annuity formula would divide by
    zero. The same applies to rates so small that ``(1 + r) ** n`` rounds
    to exactly 1 at the current decimal precision.
    """
    if monthly_rate == ZERO:
        return principal / tenure_months

    growth = (1 + monthly_rate) ** tenure_months
    if growth == 1:
        return principal / tenure_months
    return principal * monthly_rate * growth / (growth - 1)


def calculate(request: LoanRequest) -> LoanDetails:
    """Compute EMI and totals for a validated request."""
    monthly_rate = monthly_rate_for(request.annual_rate_percent)
    emi = calculate_emi(request.principal, monthly_rate, request.tenure_months)
    total_payment = emi * request.tenure_months
    total_interest = total_payment - request.principal

    return LoanDetails(
        emi=emi,
        principal=request.principal,
        total_interest=total_interest,
        total_payment=total_payment,
        annual_rate_percent=request.annual_rate_percent,
        tenure_months=request.tenure_months,
        monthly_rate=monthly_rate,
    )


def calculate_loan_details(
    principal: Number,
    annual_rate_percent: Number,
    tenure_months: int,
) -> LoanDetails:
    """Calculate EMI, total interest and total payment.

    Parameters
    ----------
    principal : Decimal | int | float | str
        Amount borrowed, >= 0.
    annual_rate_percent : Decimal | int | float | str
        Annual interest rate in percent (8.5 for 8.5% p.a.), >= 0.
    tenure_months : int
        Number of monthly installments, >= 1.

    Returns
    -------
    LoanDetails
        Calculation result with ``total_payment == principal + total_interest``.

    Raises
    ------
    InvalidInputError
        If any argument is negative, non-numeric, or the tenure is below 1.
    """
    request = LoanRequest(
        principal=to_decimal(principal, "principal"),
        annual_rate_percent=to_decimal(annual_rate_percent, "annual_rate_percent"),
        tenure_months=tenure_months,
    )
    return calculate(request)
