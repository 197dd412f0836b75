"""Tests for the bank catalog and market comparison."""

from decimal import Decimal

import pytest

from loanview.catalog import Catalog
from loanview.engine import calculate_loan_details
from loanview.exceptions import ConfigurationError, MissingCatalogEntryError
from loanview.models import Bank, BankCategory, LoanProduct, LoanType, RateType
from loanview.report import market_comparison


def _loan_type(loan_type_id: str = "car", **overrides) -> LoanType:
    values = {
        "loan_type_id": loan_type_id,
        "name": f"{loan_type_id.title()} Loan",
        "interest_rate": Decimal("9.0"),
        "rate_type": RateType.FIXED,
        "min_tenure_months": 12,
        "max_tenure_months": 84,
        "max_amount": Decimal("1000000"),
    }
    values.update(overrides)
    return LoanType(**values)


class TestCatalog:
    """Tests for Catalog lookups and validation."""

    def test_default_catalog_contents(self, catalog: Catalog) -> None:
        """The default catalog ships six loan types and seven banks."""
        assert [lt.loan_type_id for lt in catalog.loan_types] == [
            "home",
            "personal",
            "education",
            "vehicle",
            "business",
            "gold",
        ]
        assert len(catalog.banks) == 7

    def test_get_loan_type(self, catalog: Catalog) -> None:
        home = catalog.get_loan_type("home")

        assert home.name == "Home Loan"
        assert home.interest_rate == Decimal("8.5")

    def test_get_bank(self, catalog: Catalog) -> None:
        bank = catalog.get_bank("sbi")

        assert bank.product_for("home").interest_rate == Decimal("8.60")

    def test_missing_loan_type(self, catalog: Catalog) -> None:
        with pytest.raises(MissingCatalogEntryError):
            catalog.get_loan_type("crypto")

    def test_missing_bank(self, catalog: Catalog) -> None:
        with pytest.raises(MissingCatalogEntryError):
            catalog.get_bank("nowhere")

    def test_find_loan_type_returns_none(self, catalog: Catalog) -> None:
        assert catalog.find_loan_type("crypto") is None

    def test_product_for_absent_type(self, catalog: Catalog) -> None:
        """HDFC offers no education loan."""
        assert catalog.get_bank("hdfc").product_for("education") is None

    def test_accepts_lists(self) -> None:
        """Lists passed in are stored as tuples."""
        built = Catalog(loan_types=[_loan_type()], banks=[])

        assert isinstance(built.loan_types, tuple)
        assert isinstance(built.banks, tuple)

    def test_is_immutable(self, small_catalog: Catalog) -> None:
        with pytest.raises(AttributeError):
            small_catalog.banks = ()

    def test_unknown_product_type_rejected(self) -> None:
        bank = Bank("x", "X Bank", BankCategory.PRIVATE_SECTOR, (LoanProduct("boat", Decimal("9"), RateType.FIXED),))

        with pytest.raises(ConfigurationError):
            Catalog(loan_types=(_loan_type(),), banks=(bank,))

    def test_duplicate_loan_type_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            Catalog(loan_types=(_loan_type(), _loan_type()), banks=())

    def test_duplicate_bank_rejected(self) -> None:
        bank = Bank("x", "X Bank", BankCategory.PRIVATE_SECTOR)

        with pytest.raises(ConfigurationError):
            Catalog(loan_types=(_loan_type(),), banks=(bank, bank))

    def test_product_offered_twice_rejected(self) -> None:
        product = LoanProduct("car", Decimal("9"), RateType.FIXED)
        bank = Bank("x", "X Bank", BankCategory.PRIVATE_SECTOR, (product, product))

        with pytest.raises(ConfigurationError):
            Catalog(loan_types=(_loan_type(),), banks=(bank,))

    def test_negative_rate_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            Catalog(loan_types=(_loan_type(interest_rate=Decimal("-1")),), banks=())

    def test_inverted_tenure_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            Catalog(loan_types=(_loan_type(min_tenure_months=90),), banks=())


class TestMarketComparison:
    """Tests for market_comparison."""

    def test_home_loans_sorted_by_rate(self, catalog: Catalog) -> None:
        """Equal rates keep catalog order."""
        rows = market_comparison(catalog, "home", Decimal("2500000"), 240)

        assert [r.bank_id for r in rows] == ["bob", "pnb", "sbi", "hdfc", "kotak", "icici", "axis"]

    def test_banks_without_product_excluded(self, catalog: Catalog) -> None:
        rows = market_comparison(catalog, "education", Decimal("1000000"), 84)

        assert [r.bank_id for r in rows] == ["pnb", "bob", "sbi", "icici"]

    def test_rates_non_decreasing(self, catalog: Catalog) -> None:
        for loan_type in catalog.loan_types:
            rows = market_comparison(catalog, loan_type.loan_type_id, Decimal("100000"), 24)
            rates = [r.interest_rate for r in rows]
            assert rates == sorted(rates)

    def test_emi_uses_bank_rate(self, small_catalog: Catalog) -> None:
        """Each row is priced at the bank's own rate."""
        rows = market_comparison(small_catalog, "car", Decimal("500000"), 60)

        assert [r.bank_name for r in rows] == ["Gamma Bank", "Alpha Bank"]
        assert rows[0].rate_type == RateType.FLOATING
        assert rows[0].emi == calculate_loan_details(500000, Decimal("8.75"), 60).emi
        assert rows[1].emi > rows[0].emi

    def test_unknown_type_gives_empty_list(self, small_catalog: Catalog) -> None:
        assert market_comparison(small_catalog, "boat", Decimal("100"), 12) == []
