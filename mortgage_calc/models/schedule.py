"""Per-period payment data types."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class PaymentCategory(Enum):
    PRINCIPAL = "principal"
    INTEREST = "interest"
    HOA = "hoa"
    PROPERTY_TAX = "property_tax"
    HOMEOWNERS_INSURANCE = "homeowners_insurance"
    PMI = "pmi"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def color(self) -> str:
        return _COLORS[self]


_DISPLAY_NAMES = {
    PaymentCategory.PRINCIPAL: "Principal",
    PaymentCategory.INTEREST: "Interest",
    PaymentCategory.HOA: "HOA",
    PaymentCategory.PROPERTY_TAX: "Property Tax",
    PaymentCategory.HOMEOWNERS_INSURANCE: "Homeowner's Insurance",
    PaymentCategory.PMI: "PMI",
}

_COLORS = {
    PaymentCategory.PRINCIPAL: "#1f77b4",
    PaymentCategory.INTEREST: "#ff7f0e",
    PaymentCategory.HOA: "#bcbd22",
    PaymentCategory.PROPERTY_TAX: "#17becf",
    PaymentCategory.HOMEOWNERS_INSURANCE: "#9467bd",
    PaymentCategory.PMI: "#7f7f7f",
}

# Chart layer order, bottom to top
CATEGORY_KEYS: tuple[str, ...] = tuple(c.value for c in PaymentCategory)


def check_categories(keys) -> tuple[str, ...]:
    """Return keys as a tuple, rejecting anything that is not a payment category."""
    keys = tuple(keys)
    unknown = [k for k in keys if k not in CATEGORY_KEYS]
    if unknown:
        raise ValueError(f"Unknown payment categories: {', '.join(unknown)}")
    return keys


@dataclass(frozen=True)
class PaymentRecord:
    month: int
    interest: Decimal
    principal: Decimal
    pmi: Decimal
    hoa: Decimal
    property_tax: Decimal
    homeowners_insurance: Decimal

    def value(self, key: str) -> Decimal:
        if key not in CATEGORY_KEYS:
            raise ValueError(f"Unknown payment category: {key}")
        return getattr(self, key)
