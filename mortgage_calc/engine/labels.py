"""Presentation strings for summary labels, input hints and tooltips.

The only place values are rounded.
"""

from collections.abc import Iterable
from decimal import Decimal, ROUND_HALF_UP, localcontext

from mortgage_calc.models.inputs import InputSnapshot
from mortgage_calc.models.results import MortgageSummary
from mortgage_calc.models.schedule import PaymentCategory, PaymentRecord, check_categories

TWO_PLACES = Decimal("0.01")
WHOLE = Decimal("1")


def _round(value: Decimal, exp: Decimal) -> Decimal:
    """Round half up to exp, widening precision so large amounts fit."""
    value = Decimal(value)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() - exp.adjusted() + 2)
        return value.quantize(exp, ROUND_HALF_UP)


def format_currency(value: Decimal) -> str:
    amount = _round(value, TWO_PLACES)
    sign = "-" if amount < 0 else ""
    return f"{sign}${amount.copy_abs():,.2f}"


def format_percent(fraction: Decimal) -> str:
    pct = _round(Decimal(fraction) * 100, WHOLE)
    return f"{pct}%"


def format_years(years: Decimal) -> str:
    """30 → '30', 15.50 → '15.5'."""
    return f"{Decimal(years).normalize():f}"


def format_month_count(months: int) -> str:
    """12 → '1y 0mo', 30 → '2y 6mo', 8 → '8mo'."""
    years, rem = divmod(months, 12)
    return (f"{years}y " if months >= 12 else "") + f"{rem}mo"


def summary_labels(summary: MortgageSummary) -> dict[str, str]:
    labels = {
        "loan_amount": format_currency(summary.loan_amount),
        "principal_and_interest": format_currency(summary.principal_and_interest),
        "monthly_payment": format_currency(summary.monthly_payment),
        "monthly_payment_with_pmi": format_currency(summary.monthly_payment_with_pmi),
        "pmi_timeline": (
            f"{format_month_count(summary.pmi_months)}"
            f" ({format_currency(summary.pmi_total)} total)"
        ),
        "lifetime_payment": format_currency(summary.lifetime_payment),
        "purchase_payment": format_currency(summary.purchase_payment),
    }
    if summary.debt_to_income is not None:
        labels["debt_to_income"] = format_percent(summary.debt_to_income)
    return labels


def input_hints(snapshot: InputSnapshot) -> dict[str, str]:
    """Echo the effective value of each form field next to the input."""
    assessed = snapshot.assessed_value
    if assessed:
        per_thousand = snapshot.property_tax * 12 / assessed * 1000
    else:
        per_thousand = Decimal("0")
    return {
        "home_value": f"({format_currency(assessed)})",
        "down_payment": f"({format_currency(snapshot.down_payment)})",
        "pmi_equity_pct": f"({format_percent(snapshot.pmi_equity_threshold)})",
        "property_tax": (
            f"({format_currency(per_thousand)} / $1000;"
            f" {format_currency(snapshot.property_tax)}/mo)"
        ),
        "mortgage_term": f"({format_years(snapshot.term_years)} yrs)",
    }


def tooltip_text(record: PaymentRecord, keys: Iterable[str]) -> str:
    lines = [
        f"{PaymentCategory(key).display_name}: {format_currency(record.value(key))}"
        for key in check_categories(keys)
    ]
    lines.append(f"Month: {format_month_count(record.month)}")
    return "\n".join(lines)
