"""Default market data: loan types and the banks offering them."""

from decimal import Decimal

from loanview.catalog.store import Catalog
from loanview.models.catalog import Bank, LoanProduct, LoanType
from loanview.models.enums import BankCategory, RateType

FIXED = RateType.FIXED
FLOATING = RateType.FLOATING

# (id, name, indicative rate %, rate type, min tenure, max tenure, max amount INR)
LOAN_TYPE_ROWS = [
    ("home", "Home Loan", "8.5", FLOATING, 60, 360, 7_500_000),
    ("personal", "Personal Loan", "11.2", FIXED, 12, 60, 1_000_000),
    ("education", "Education Loan", "9.0", FIXED, 24, 180, 4_000_000),
    ("vehicle", "Vehicle Loan", "9.5", FIXED, 12, 84, 2_000_000),
    ("business", "Business Loan", "12.5", FLOATING, 12, 120, 10_000_000),
    ("gold", "Gold Loan", "7.0", FIXED, 6, 36, 5_000_000),
]

# Rates by bank and loan type (annual %)
BANK_ROWS = [
    (
        "sbi",
        "State Bank of India",
        BankCategory.PUBLIC_SECTOR,
        "https://sbi.co.in/web/personal-banking/loans",
        [
            ("home", "8.60", FLOATING),
            ("personal", "11.15", FIXED),
            ("vehicle", "8.85", FIXED),
            ("education", "9.20", FIXED),
            ("business", "12.00", FLOATING),
            ("gold", "7.50", FIXED),
        ],
    ),
    (
        "hdfc",
        "HDFC Bank",
        BankCategory.PRIVATE_SECTOR,
        "https://www.hdfcbank.com/personal/borrow",
        [
            ("home", "8.70", FLOATING),
            ("personal", "10.50", FIXED),
            ("vehicle", "9.40", FIXED),
            ("business", "11.50", FLOATING),
            ("gold", "9.00", FIXED),
        ],
    ),
    (
        "icici",
        "ICICI Bank",
        BankCategory.PRIVATE_SECTOR,
        "https://www.icicibank.com/personal-banking/loans",
        [
            ("home", "8.75", FLOATING),
            ("personal", "10.75", FIXED),
            ("vehicle", "9.00", FIXED),
            ("education", "9.50", FIXED),
            ("business", "12.25", FLOATING),
            ("gold", "8.00", FIXED),
        ],
    ),
    (
        "axis",
        "Axis Bank",
        BankCategory.PRIVATE_SECTOR,
        "https://www.axisbank.com/retail/loans",
        [
            ("home", "8.80", FLOATING),
            ("personal", "10.99", FIXED),
            ("vehicle", "9.20", FIXED),
            ("business", "11.75", FLOATING),
        ],
    ),
    (
        "pnb",
        "Punjab National Bank",
        BankCategory.PUBLIC_SECTOR,
        "https://www.pnbindia.in/loans-we-offer.html",
        [
            ("home", "8.50", FLOATING),
            ("personal", "11.80", FIXED),
            ("education", "8.90", FIXED),
            ("business", "12.50", FLOATING),
            ("gold", "7.75", FIXED),
        ],
    ),
    (
        "kotak",
        "Kotak Mahindra Bank",
        BankCategory.PRIVATE_SECTOR,
        "https://www.kotak.com/en/personal-banking/loans.html",
        [
            ("home", "8.70", FLOATING),
            ("personal", "10.99", FIXED),
            ("vehicle", "9.50", FIXED),
            ("business", "11.90", FLOATING),
            ("gold", "8.25", FIXED),
        ],
    ),
    (
        "bob",
        "Bank of Baroda",
        BankCategory.PUBLIC_SECTOR,
        "https://www.bankofbaroda.in/personal-banking/loans",
        [
            ("home", "8.40", FLOATING),
            ("personal", "11.50", FIXED),
            ("vehicle", "8.75", FIXED),
            ("education", "9.15", FIXED),
            ("gold", "7.85", FIXED),
        ],
    ),
]


def default_catalog() -> Catalog:
    """Build the catalog of Indian banks shipped with LoanView."""
    loan_types = [
        LoanType(
            loan_type_id=type_id,
            name=name,
            interest_rate=Decimal(rate),
            rate_type=rate_type,
            min_tenure_months=min_tenure,
            max_tenure_months=max_tenure,
            max_amount=Decimal(max_amount),
        )
        for type_id, name, rate, rate_type, min_tenure, max_tenure, max_amount in LOAN_TYPE_ROWS
    ]

    banks = [
        Bank(
            bank_id=bank_id,
            name=name,
            category=category,
            application_url=url,
            loan_products=tuple(
                LoanProduct(loan_type_id=type_id, interest_rate=Decimal(rate), rate_type=rate_type)
                for type_id, rate, rate_type in products
            ),
        )
        for bank_id, name, category, url, products in BANK_ROWS
    ]

    return Catalog(loan_types=tuple(loan_types), banks=tuple(banks))
