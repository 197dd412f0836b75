"""Pytest configuration and fixtures."""

from datetime import datetime
from decimal import Decimal

import pytest

from loanview.catalog import Catalog, default_catalog
from loanview.config import LoanViewConfig
from loanview.models import (
    ApplicationData,
    Bank,
    BankCategory,
    LoanProduct,
    LoanRequirement,
    LoanType,
    PersonalDetails,
    RateType,
)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def catalog() -> Catalog:
    """The default bank catalog."""
    return default_catalog()


@pytest.fixture
def small_catalog() -> Catalog:
    """Three banks, one of which does not offer car loans."""
    car = LoanType(
        loan_type_id="car",
        name="Car Loan",
        interest_rate=Decimal("9.0"),
        rate_type=RateType.FIXED,
        min_tenure_months=12,
        max_tenure_months=84,
        max_amount=Decimal("2000000"),
    )
    gold = LoanType(
        loan_type_id="gold",
        name="Gold Loan",
        interest_rate=Decimal("7.0"),
        rate_type=RateType.FIXED,
        min_tenure_months=6,
        max_tenure_months=36,
        max_amount=Decimal("500000"),
    )
    banks = (
        Bank(
            bank_id="alpha",
            name="Alpha Bank",
            category=BankCategory.PUBLIC_SECTOR,
            loan_products=(
                LoanProduct("car", Decimal("9.50"), RateType.FIXED),
                LoanProduct("gold", Decimal("7.25"), RateType.FIXED),
            ),
        ),
        Bank(
            bank_id="beta",
            name="Beta Finance",
            category=BankCategory.NBFC,
            loan_products=(LoanProduct("gold", Decimal("8.00"), RateType.FIXED),),
        ),
        Bank(
            bank_id="gamma",
            name="Gamma Bank",
            category=BankCategory.FOREIGN_BANK,
            loan_products=(LoanProduct("car", Decimal("8.75"), RateType.FLOATING),),
        ),
    )
    return Catalog(loan_types=(car, gold), banks=banks)


@pytest.fixture
def config() -> LoanViewConfig:
    """Default configuration."""
    return LoanViewConfig()


@pytest.fixture
def generated_at() -> datetime:
    """Fixed report timestamp."""
    return datetime(2026, 10, 19, 9, 30, 0)


@pytest.fixture
def sample_application() -> ApplicationData:
    """A home loan application with a couple of blank fields."""
    return ApplicationData(
        personal_details=PersonalDetails(
            full_name="Asha Verma",
            father_husband_name="Ramesh Verma",
            dob="1990-04-12",
            gender="Female",
            marital_status="Married",
            phone="+91 98765 43210",
            email="asha.verma@example.com",
            id_number="ABCDE1234F",
            current_address="12 MG Road, Bengaluru 560001",
            permanent_address="",
        ),
        loan_requirement=LoanRequirement(
            purpose="Purchase of a flat",
            amount="INR 2,500,000",
            repayment_period="240 months",
            loan_type="home",
        ),
    )
