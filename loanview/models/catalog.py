"""Bank and loan-type reference data."""

from dataclasses import dataclass
from decimal import Decimal

from loanview.models.enums import BankCategory, RateType


@dataclass(frozen=True)
class LoanType:
    """A kind of loan offered across the market (home, personal, ...)."""

    loan_type_id: str
    name: str
    interest_rate: Decimal  # Indicative annual rate in percent
    rate_type: RateType
    min_tenure_months: int
    max_tenure_months: int
    max_amount: Decimal


@dataclass(frozen=True)
class LoanProduct:
    """A bank's offer for one loan type."""

    loan_type_id: str
    interest_rate: Decimal  # Annual rate in percent (e.g., 8.60)
    rate_type: RateType


@dataclass(frozen=True)
class Bank:
    """Lender with its ordered loan products."""

    bank_id: str
    name: str
    category: BankCategory
    loan_products: tuple[LoanProduct, ...] = ()
    application_url: str = ""

    def product_for(self, loan_type_id: str) -> LoanProduct | None:
        """Return this bank's product for a loan type, if it offers one."""
        for product in self.loan_products:
            if product.loan_type_id == loan_type_id:
                return product
        return None
