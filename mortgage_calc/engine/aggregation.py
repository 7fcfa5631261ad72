"""Aggregate views over a finished schedule: lifetime totals, PMI timeline, running sums.

Pure functions. No I/O.
"""

from collections.abc import Callable, Iterable
from dataclasses import replace
from decimal import Decimal

from mortgage_calc.models.inputs import InputSnapshot
from mortgage_calc.models.schedule import PaymentRecord, check_categories


def count_satisfying(records: Iterable[PaymentRecord], predicate: Callable[[PaymentRecord], bool]) -> int:
    return sum(1 for p in records if predicate(p))


def count_pmi_months(schedule: list[PaymentRecord]) -> int:
    """Number of months in which PMI is charged."""
    return count_satisfying(schedule, lambda p: p.pmi != 0)


def pmi_total_paid(schedule: list[PaymentRecord]) -> Decimal:
    return sum((p.pmi for p in schedule), Decimal("0"))


def lifetime_payment(schedule: list[PaymentRecord], monthly_payment: Decimal) -> Decimal:
    """Total P&I plus PMI paid over the life of the loan.

    P&I recombines to the level payment every month, so it is counted as
    periods x payment. PMI varies and is summed explicitly. Down payment and
    closing costs are not included.
    """
    return len(schedule) * monthly_payment + pmi_total_paid(schedule)


def cumulative_sum_by_fields(
    schedule: list[PaymentRecord],
    fields: Iterable[str],
) -> list[PaymentRecord]:
    """Running totals for the given categories; other categories pass through.

    cumulative[0] equals schedule[0] for every category. For i > 0, each
    accumulated category is cumulative[i - 1] + schedule[i].
    """
    fields = check_categories(fields)
    results: list[PaymentRecord] = []
    for idx, p in enumerate(schedule):
        if idx == 0:
            results.append(p)
            continue
        prev = results[idx - 1]
        carried = {key: prev.value(key) + p.value(key) for key in fields}
        results.append(replace(p, **carried))
    return results


def debt_to_income(snapshot: InputSnapshot, principal_and_interest: Decimal) -> Decimal | None:
    """Monthly obligations over monthly income, PMI included.

    Returns None when there is no income to compare against.
    """
    if snapshot.annual_income == 0:
        return None
    monthly_obligation = (
        snapshot.monthly_debt
        + principal_and_interest
        + snapshot.monthly_extras
        + snapshot.pmi_monthly
    )
    return monthly_obligation * 12 / snapshot.annual_income
