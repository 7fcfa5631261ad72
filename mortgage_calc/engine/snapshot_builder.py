"""Snapshot builder: turns raw form values into a clamped InputSnapshot.

Sits between the input form and the pure engine:
    RawInputs → InputSnapshot

Blank or non-numeric fields count as zero. Nothing here raises; out-of-range
values are clamped so the engine only ever sees a valid snapshot.
"""

from decimal import Decimal, InvalidOperation

from mortgage_calc.config import Settings, settings as default_settings
from mortgage_calc.models.inputs import InputSnapshot, RawInputs

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def _or_zero(value) -> Decimal:
    if value is None:
        return ZERO
    try:
        value = Decimal(str(value).strip())
    except InvalidOperation:
        return ZERO
    if not value.is_finite():
        return ZERO
    return value


def _non_negative(value) -> Decimal:
    return max(ZERO, _or_zero(value))


def _clamp(value, low: Decimal, high: Decimal) -> Decimal:
    return max(low, min(high, _or_zero(value)))


def _pct(value) -> Decimal:
    """Whole-number percentage (0-100) as a fraction."""
    return _clamp(value, ZERO, HUNDRED) / HUNDRED


def build_snapshot(raw: RawInputs, settings: Settings | None = None) -> InputSnapshot:
    """Build an InputSnapshot from form values.

    Percentage fields win over their absolute counterparts when both are set:
    down payment % over down payment amount, and a monthly property tax
    amount over the annual property tax %.
    """
    cfg = settings or default_settings

    price = _non_negative(raw.price)
    home_value = _non_negative(raw.home_value)
    assessed_value = home_value or price

    down_payment = _pct(raw.down_payment_pct) * price
    if down_payment == 0:
        down_payment = _clamp(raw.down_payment_amount, ZERO, price)

    property_tax = _non_negative(raw.property_tax)
    if property_tax == 0:
        property_tax = _pct(raw.property_tax_pct) * assessed_value / 12

    term_years = _clamp(raw.mortgage_term, ZERO, Decimal(cfg.max_term_years))
    if term_years == 0:
        term_years = Decimal(cfg.default_term_years)
    pmi_equity_threshold = _pct(raw.pmi_equity_pct) or cfg.default_pmi_equity_pct

    return InputSnapshot(
        price=price,
        down_payment=down_payment,
        closing_cost=_non_negative(raw.closing_cost),
        home_value=home_value,
        annual_rate=_pct(raw.interest_rate_pct),
        term_years=term_years,
        hoa=_non_negative(raw.hoa),
        property_tax=property_tax,
        homeowners_insurance=_non_negative(raw.homeowners_insurance),
        pmi_monthly=_non_negative(raw.pmi_monthly),
        pmi_equity_threshold=Decimal(pmi_equity_threshold),
        annual_income=_non_negative(raw.annual_income),
        monthly_debt=_non_negative(raw.monthly_debt),
    )
