from dataclasses import dataclass, field
from decimal import Decimal

from mortgage_calc.models.inputs import InputSnapshot
from mortgage_calc.models.schedule import PaymentRecord


@dataclass(frozen=True)
class MortgageSummary:
    loan_amount: Decimal
    principal_and_interest: Decimal  # Level monthly P&I payment

    # Monthly
    monthly_payment: Decimal  # P&I + HOA + tax + insurance
    monthly_payment_with_pmi: Decimal
    show_pmi: bool

    # PMI timeline
    pmi_months: int
    pmi_total: Decimal

    # Lifetime
    lifetime_payment: Decimal  # All P&I + PMI over the term
    purchase_payment: Decimal  # Down payment + closing cost

    debt_to_income: Decimal | None = None  # None without income


@dataclass(frozen=True)
class MortgageAnalysis:
    snapshot: InputSnapshot
    summary: MortgageSummary
    schedule: list[PaymentRecord] = field(default_factory=list)
    cumulative: list[PaymentRecord] = field(default_factory=list)
    cumulative_categories: tuple[str, ...] = ()
