"""Truncated amortization schedule for display."""

from typing import Iterable

from loanview.models.loan import AmortizationRow

# Schedules up to this many periods are shown in full
FULL_SCHEDULE_LIMIT = 25
HEAD_PERIODS = 12
TAIL_PERIODS = 12


def display_schedule(
    rows: Iterable[AmortizationRow],
    tenure_months: int,
) -> list[AmortizationRow | None]:
    """Pick the rows to print from a full schedule.

    Long schedules keep the first and last twelve periods; ``None`` marks
    the single elided stretch between them.
    """
    if tenure_months <= FULL_SCHEDULE_LIMIT:
        return list(rows)

    head_end = min(HEAD_PERIODS, tenure_months)
    tail_start = max(head_end + 1, tenure_months - TAIL_PERIODS + 1)

    shown: list[AmortizationRow | None] = []
    for row in rows:
        if row.period <= head_end or row.period >= tail_start:
            shown.append(row)
        elif row.period == head_end + 1:
            shown.append(None)
    return shown
