"""Immutable catalog of banks and loan types."""

from dataclasses import dataclass
from typing import Iterator

from loanview.exceptions import ConfigurationError, MissingCatalogEntryError
from loanview.models.catalog import Bank, LoanProduct, LoanType


@dataclass(frozen=True)
class Catalog:
    """Read-only bank and loan-type reference data.

    Built once and passed to whoever needs it. Construction checks that
    every product points at a known loan type.
    """

    loan_types: tuple[LoanType, ...]
    banks: tuple[Bank, ...]

    def __post_init__(self) -> None:
        # Accept lists from callers but store tuples
        object.__setattr__(self, "loan_types", tuple(self.loan_types))
        object.__setattr__(self, "banks", tuple(self.banks))

        type_ids = [lt.loan_type_id for lt in self.loan_types]
        if len(set(type_ids)) != len(type_ids):
            raise ConfigurationError(f"Duplicate loan type ids in catalog: {type_ids}")

        for loan_type in self.loan_types:
            if loan_type.interest_rate < 0:
                raise ConfigurationError(f"Loan type {loan_type.loan_type_id} has a negative rate")
            if loan_type.min_tenure_months > loan_type.max_tenure_months:
                raise ConfigurationError(
                    f"Loan type {loan_type.loan_type_id} has min tenure above max tenure"
                )

        bank_ids = [bank.bank_id for bank in self.banks]
        if len(set(bank_ids)) != len(bank_ids):
            raise ConfigurationError(f"Duplicate bank ids in catalog: {bank_ids}")

        known_types = set(type_ids)
        for bank in self.banks:
            seen: set[str] = set()
            for product in bank.loan_products:
                if product.loan_type_id not in known_types:
                    raise ConfigurationError(
                        f"Bank {bank.bank_id} offers unknown loan type {product.loan_type_id}"
                    )
                if product.loan_type_id in seen:
                    raise ConfigurationError(
                        f"Bank {bank.bank_id} offers loan type {product.loan_type_id} twice"
                    )
                if product.interest_rate < 0:
                    raise ConfigurationError(
                        f"Bank {bank.bank_id} has a negative rate for {product.loan_type_id}"
                    )
                seen.add(product.loan_type_id)

    def get_bank(self, bank_id: str) -> Bank:
        """Get a bank by id."""
        for bank in self.banks:
            if bank.bank_id == bank_id:
                return bank
        raise MissingCatalogEntryError(f"Bank {bank_id} not found")

    def get_loan_type(self, loan_type_id: str) -> LoanType:
        """Get a loan type by id."""
        loan_type = self.find_loan_type(loan_type_id)
        if loan_type is None:
            raise MissingCatalogEntryError(f"Loan type {loan_type_id} not found")
        return loan_type

    def find_loan_type(self, loan_type_id: str) -> LoanType | None:
        """Get a loan type by id, or None if the catalog has no such type."""
        for loan_type in self.loan_types:
            if loan_type.loan_type_id == loan_type_id:
                return loan_type
        return None

    def products_of_type(self, loan_type_id: str) -> Iterator[tuple[Bank, LoanProduct]]:
        """Yield (bank, product) for every bank offering a loan type, in catalog order."""
        for bank in self.banks:
            product = bank.product_for(loan_type_id)
            if product is not None:
                yield bank, product
