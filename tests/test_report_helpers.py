"""Tests for schedule truncation and report formatting."""

from datetime import datetime
from decimal import Decimal

import pytest

from loanview.engine import calculate_loan_details, generate_amortization_schedule
from loanview.report import display_schedule, report_filename
from loanview.report.formatting import (
    format_currency,
    format_date,
    format_percent,
    format_tenure,
    round_amount,
)


def _schedule(tenure: int) -> list:
    details = calculate_loan_details(100000, 9, tenure)
    return display_schedule(generate_amortization_schedule(details), tenure)


class TestDisplaySchedule:
    """Tests for display_schedule."""

    @pytest.mark.parametrize("tenure", [1, 12, 24, 25])
    def test_short_schedule_shown_in_full(self, tenure: int) -> None:
        shown = _schedule(tenure)

        assert None not in shown
        assert [r.period for r in shown] == list(range(1, tenure + 1))

    def test_long_schedule_truncated(self) -> None:
        """26 months and up keep the first and last twelve rows."""
        shown = _schedule(60)

        assert len(shown) == 25
        assert shown[12] is None
        assert [r.period for r in shown[:12]] == list(range(1, 13))
        assert [r.period for r in shown[13:]] == list(range(49, 61))

    def test_boundary_tenure(self) -> None:
        shown = _schedule(26)

        assert shown.count(None) == 1
        assert [r.period for r in shown if r is not None] == list(range(1, 13)) + list(range(15, 27))

    def test_thirty_year_schedule(self) -> None:
        shown = _schedule(360)

        assert len(shown) == 25
        assert shown[-1].period == 360
        assert shown[-1].remaining_balance == 0


class TestFormatting:
    """Tests for number, date and filename formatting."""

    def test_round_half_up(self) -> None:
        assert round_amount(Decimal("2.345")) == Decimal("2.35")
        assert round_amount(Decimal("2.5"), 0) == Decimal("3")

    def test_no_negative_zero(self) -> None:
        assert str(round_amount(Decimal("-0.001"))) == "0.00"

    def test_format_currency(self) -> None:
        assert format_currency(Decimal("10258.2734")) == "INR 10,258.27"
        assert format_currency(Decimal("10258.5"), "USD", decimals=0) == "USD 10,259"

    def test_format_percent(self) -> None:
        assert format_percent(Decimal("8.5")) == "8.50%"

    @pytest.mark.parametrize(
        "months, expected",
        [(60, "5 years"), (30, "2.5 years"), (12, "1 year"), (120, "10 years"), (1, "0.08 years")],
    )
    def test_format_tenure(self, months: int, expected: str) -> None:
        assert format_tenure(months) == expected

    def test_format_date(self, generated_at: datetime) -> None:
        assert format_date(generated_at) == "10/19/2026"

    def test_report_filename(self, generated_at: datetime) -> None:
        assert report_filename("LoanView", generated_at) == "LoanView_Report_10_19_2026.pdf"

    def test_report_filename_sanitizes_app_name(self, generated_at: datetime) -> None:
        assert report_filename("Loan View!", generated_at) == "Loan_View__Report_10_19_2026.pdf"

    def test_round_beyond_default_precision(self) -> None:
        """Amounts with more than 28 digits after rounding still format."""
        assert round_amount(Decimal("1e27")) == Decimal("1e27")
        assert format_currency(Decimal("123456789012345678901234567.891")).endswith(",567.89")
