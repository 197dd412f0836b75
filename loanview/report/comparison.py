"""Market comparison of a loan type across banks."""

from dataclasses import dataclass
from decimal import Decimal

from loanview.catalog.store import Catalog
from loanview.engine.calculator import calculate_loan_details
from loanview.models.enums import RateType


@dataclass(frozen=True)
class ComparisonRow:
    """One bank's offer priced for the requested loan."""

    bank_id: str
    bank_name: str
    interest_rate: Decimal
    rate_type: RateType
    emi: Decimal
    application_url: str = ""


def market_comparison(
    catalog: Catalog,
    loan_type_id: str,
    principal: Decimal,
    tenure_months: int,
) -> list[ComparisonRow]:
    """Price a loan at every bank offering the loan type.

    Banks without a product of that type are left out. Rows are ordered by
    interest rate, lowest first; banks quoting the same rate keep catalog
    order.

    Parameters
    ----------
    catalog : Catalog
        Bank and loan-type reference data.
    loan_type_id : str
        Loan type to compare (e.g., ``"home"``).
    principal : Decimal
        Requested amount.
    tenure_months : int
        Requested tenure.

    Returns
    -------
    list[ComparisonRow]
        Offers sorted by interest rate.
    """
    rows = [
        ComparisonRow(
            bank_id=bank.bank_id,
            bank_name=bank.name,
            interest_rate=product.interest_rate,
            rate_type=product.rate_type,
            emi=calculate_loan_details(principal, product.interest_rate, tenure_months).emi,
            application_url=bank.application_url,
        )
        for bank, product in catalog.products_of_type(loan_type_id)
    ]
    return sorted(rows, key=lambda row: row.interest_rate)
