"""Enumeration types for loan catalog and report entities."""

from enum import Enum


class RateType(str, Enum):
    FIXED = "fixed"
    FLOATING = "floating"


class BankCategory(str, Enum):
    PUBLIC_SECTOR = "Public Sector"
    PRIVATE_SECTOR = "Private Sector"
    SMALL_FINANCE_BANK = "Small Finance Bank"
    FOREIGN_BANK = "Foreign Bank"
    NBFC = "NBFC"


class TableTheme(str, Enum):
    PLAIN = "plain"
    GRID = "grid"
    STRIPED = "striped"


class SectionKind(str, Enum):
    """Report sections, declared in the order they are emitted."""

    APPLICATION_SUMMARY = "application_summary"
    KEY_FACTS = "key_facts"
    MARKET_COMPARISON = "market_comparison"
    AMORTIZATION_SCHEDULE = "amortization_schedule"
    NEXT_STEPS = "next_steps"
    DISCLAIMERS = "disclaimers"
    SUPPORT_CONTACT = "support_contact"
