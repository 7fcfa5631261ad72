"""Map a continuous chart position back to a schedule month.

Called on every pointer move, so lookups bisect instead of scanning.
"""

from bisect import bisect_left
from decimal import Decimal

from mortgage_calc.models.schedule import PaymentRecord


def nearest_period(schedule: list[PaymentRecord], query_month: float | Decimal) -> PaymentRecord:
    """Return the record whose month is closest to query_month.

    The schedule must be sorted by month. Queries outside the schedule clamp
    to the first or last record, and an exact midpoint resolves to the
    earlier month.
    """
    if not schedule:
        raise ValueError("Cannot look up a period in an empty schedule")

    idx = bisect_left(schedule, query_month, key=lambda p: p.month)
    if idx == 0:
        return schedule[0]
    if idx == len(schedule):
        return schedule[-1]

    before = schedule[idx - 1]
    after = schedule[idx]
    if query_month - before.month > after.month - query_month:
        return after
    return before
