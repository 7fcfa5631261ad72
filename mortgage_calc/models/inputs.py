import math
from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class InputSnapshot:
    """Validated, clamped loan inputs captured once per recompute."""

    # Purchase
    price: Decimal
    down_payment: Decimal = Decimal("0")
    closing_cost: Decimal = Decimal("0")
    home_value: Decimal = Decimal("0")  # 0 = assessed at purchase price

    # Financing
    annual_rate: Decimal = Decimal("0")  # e.g. 0.06 for 6%
    term_years: Decimal = Decimal("30")  # May be fractional, e.g. 15.5

    # Monthly extras
    hoa: Decimal = Decimal("0")
    property_tax: Decimal = Decimal("0")
    homeowners_insurance: Decimal = Decimal("0")

    # PMI
    pmi_monthly: Decimal = Decimal("0")
    pmi_equity_threshold: Decimal = Decimal("0.22")  # Fraction of price

    # Debt-to-income
    annual_income: Decimal = Decimal("0")
    monthly_debt: Decimal = Decimal("0")

    @property
    def loan_amount(self) -> Decimal:
        return self.price - self.down_payment

    @property
    def period_count(self) -> int:
        # A partial final month still gets a payment
        return math.ceil(12 * self.term_years)

    @property
    def periodic_rate(self) -> Decimal:
        return self.annual_rate / 12

    @property
    def monthly_extras(self) -> Decimal:
        return self.hoa + self.property_tax + self.homeowners_insurance

    @property
    def down_payment_pct(self) -> Decimal:
        if self.price == 0:
            return Decimal("0")
        return self.down_payment / self.price

    @property
    def assessed_value(self) -> Decimal:
        return self.home_value or self.price

    @property
    def pmi_equity_target(self) -> Decimal:
        """Equity at which PMI stops being charged."""
        return self.pmi_equity_threshold * self.price


@dataclass(frozen=True)
class RawInputs:
    """Form values as entered. None means the field was left blank.

    Percentages are whole numbers (6 for 6%), as typed by the user.
    """
    price: Decimal | None = None
    home_value: Decimal | None = None
    hoa: Decimal | None = None
    down_payment_pct: Decimal | None = None
    down_payment_amount: Decimal | None = None
    interest_rate_pct: Decimal | None = None
    pmi_monthly: Decimal | None = None
    pmi_equity_pct: Decimal | None = None
    property_tax: Decimal | None = None  # Monthly
    property_tax_pct: Decimal | None = None  # Annual, of home value
    homeowners_insurance: Decimal | None = None
    closing_cost: Decimal | None = None
    mortgage_term: Decimal | None = None  # Years
    annual_income: Decimal | None = None
    monthly_debt: Decimal | None = None
