"""Number, date and filename formatting for reports."""

import re
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, localcontext

CENT = Decimal("0.01")
UNIT = Decimal("1")

_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-zA-Z0-9_.-]")


def round_amount(value: Decimal, decimals: int = 2) -> Decimal:
    """Round half away from zero, the way receipts and bank statements do."""
    quantum = UNIT if decimals == 0 else Decimal(1).scaleb(-decimals)
    with localcontext() as ctx:
        # quantize fails when the result has more digits than the context allows
        ctx.prec = max(ctx.prec, value.adjusted() + decimals + 2)
        rounded = value.quantize(quantum, rounding=ROUND_HALF_UP)
    # Avoid printing "-0.00" for tiny negative drift
    return abs(rounded) if rounded == 0 else rounded


def format_currency(value: Decimal, currency: str = "INR", decimals: int = 2) -> str:
    """Format an amount as ``INR 10,258.27``."""
    return f"{currency} {round_amount(value, decimals):,}"


def format_percent(value: Decimal) -> str:
    """Format a rate as ``8.50%``."""
    return f"{round_amount(value, 2)}%"


def format_tenure(tenure_months: int) -> str:
    """Express a tenure in years (``5 years``, ``2.5 years``, ``1 year``)."""
    years = round_amount(Decimal(tenure_months) / 12, 2).normalize()
    label = "year" if years == 1 else "years"
    return f"{years:f} {label}"


def format_date(value: datetime) -> str:
    """Format a date as MM/DD/YYYY."""
    return value.strftime("%m/%d/%Y")


def report_filename(app_name: str, generated_at: datetime) -> str:
    """Build a filesystem-safe report filename.

    Every character outside ``[A-Za-z0-9_.-]`` becomes an underscore, so
    ``LoanView_Report_10/19/2026.pdf`` is written as
    ``LoanView_Report_10_19_2026.pdf``.
    """
    filename = f"{app_name}_Report_{format_date(generated_at)}.pdf"
    return _UNSAFE_FILENAME_CHARS.sub("_", filename)
