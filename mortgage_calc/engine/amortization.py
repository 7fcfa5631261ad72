"""Amortization schedule computation.

Pure functions: snapshot in, list of PaymentRecord out. No I/O.

Equity starts at the down payment and grows by each period's principal.
PMI for a period is decided on the equity held at the start of that period,
so it drops off the month after the threshold is reached.
"""

from decimal import Decimal

from mortgage_calc.models.inputs import InputSnapshot
from mortgage_calc.models.schedule import PaymentRecord


def build_schedule(snapshot: InputSnapshot, monthly_payment: Decimal) -> list[PaymentRecord]:
    """Generate one payment record per month of the term.

    Args:
        snapshot: Loan inputs for this recompute
        monthly_payment: Level principal + interest payment

    Values are left unrounded so running totals stay consistent.
    A non-positive period count yields an empty schedule.
    """
    r = snapshot.periodic_rate
    pmi_target = snapshot.pmi_equity_target
    no_pmi = Decimal("0")

    schedule: list[PaymentRecord] = []
    equity = snapshot.down_payment

    for month in range(1, snapshot.period_count + 1):
        outstanding = snapshot.price - equity
        interest = r * outstanding
        principal_paid = monthly_payment - interest
        pmi = snapshot.pmi_monthly if equity < pmi_target else no_pmi

        schedule.append(PaymentRecord(
            month=month,
            interest=interest,
            principal=principal_paid,
            pmi=pmi,
            hoa=snapshot.hoa,
            property_tax=snapshot.property_tax,
            homeowners_insurance=snapshot.homeowners_insurance,
        ))

        equity += principal_paid

    return schedule


def equity_by_month(snapshot: InputSnapshot, schedule: list[PaymentRecord]) -> list[Decimal]:
    """Equity held at the end of each month of a schedule."""
    equity = snapshot.down_payment
    result: list[Decimal] = []
    for p in schedule:
        equity += p.principal
        result.append(equity)
    return result
