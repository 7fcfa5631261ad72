"""Canonical test fixtures used across all engine tests.

Fixture: $300K home, 6% rate, 30yr fixed.
    standard: 20% down, PMI threshold 20% (no PMI ever charged)
    low_down: 5% down, PMI threshold 20%, $150/mo PMI
"""

import pytest
from decimal import Decimal

from mortgage_calc.models.inputs import InputSnapshot
from mortgage_calc.models.schedule import PaymentRecord


@pytest.fixture
def standard_snapshot() -> InputSnapshot:
    """$300K home, $60K down, 6%, 30 years."""
    return InputSnapshot(
        price=Decimal("300000"),
        down_payment=Decimal("60000"),
        annual_rate=Decimal("0.06"),
        term_years=30,
        hoa=Decimal("50"),
        property_tax=Decimal("300"),
        homeowners_insurance=Decimal("100"),
        pmi_monthly=Decimal("150"),
        pmi_equity_threshold=Decimal("0.20"),
        closing_cost=Decimal("9000"),
    )


@pytest.fixture
def low_down_snapshot() -> InputSnapshot:
    """$300K home, $15K down, PMI until 20% equity."""
    return InputSnapshot(
        price=Decimal("300000"),
        down_payment=Decimal("15000"),
        annual_rate=Decimal("0.06"),
        term_years=30,
        pmi_monthly=Decimal("150"),
        pmi_equity_threshold=Decimal("0.20"),
    )


@pytest.fixture
def zero_rate_snapshot() -> InputSnapshot:
    """$360K interest-free loan, nothing down."""
    return InputSnapshot(
        price=Decimal("360000"),
        down_payment=Decimal("0"),
        annual_rate=Decimal("0"),
        term_years=30,
    )


@pytest.fixture
def make_record():
    """Build a PaymentRecord with every category defaulting to zero."""
    def _make(month: int = 1, **values) -> PaymentRecord:
        fields = {
            "interest": Decimal("0"),
            "principal": Decimal("0"),
            "pmi": Decimal("0"),
            "hoa": Decimal("0"),
            "property_tax": Decimal("0"),
            "homeowners_insurance": Decimal("0"),
        }
        fields.update({k: Decimal(str(v)) for k, v in values.items()})
        return PaymentRecord(month=month, **fields)
    return _make
