"""Level monthly payment for a fixed-rate loan.

Pure functions: Decimal in, Decimal out. No I/O.
"""

from decimal import Decimal

from mortgage_calc.models.inputs import InputSnapshot


class InvalidInputError(ValueError):
    """Raised when the payment formula is called outside its domain."""


def monthly_payment(principal: Decimal, periodic_rate: Decimal, periods: int) -> Decimal:
    """Calculate the fixed principal + interest payment that amortizes a loan.

    Args:
        principal: Loan amount
        periodic_rate: Interest rate per period (annual rate / 12)
        periods: Number of payments

    Not rounded; callers round at presentation time.
    """
    if principal < 0:
        raise InvalidInputError(f"principal must be non-negative, got {principal}")
    if periodic_rate < 0:
        raise InvalidInputError(f"periodic rate must be non-negative, got {periodic_rate}")
    if periods <= 0:
        raise InvalidInputError(f"period count must be positive, got {periods}")

    principal = Decimal(principal)
    if periodic_rate == 0:
        return principal / periods

    r = Decimal(periodic_rate)
    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + r) ** periods
    return principal * r * factor / (factor - 1)


def principal_and_interest(snapshot: InputSnapshot) -> Decimal:
    """Monthly P&I for a snapshot. Exactly zero when the home is paid in full."""
    if snapshot.down_payment == snapshot.price:
        return Decimal("0")
    return monthly_payment(
        snapshot.loan_amount, snapshot.periodic_rate, snapshot.period_count,
    )
