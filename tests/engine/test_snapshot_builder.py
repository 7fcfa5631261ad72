"""Tests for turning raw form values into a clamped snapshot."""

from decimal import Decimal

import pytest

from mortgage_calc.config import Settings
from mortgage_calc.engine.snapshot_builder import build_snapshot
from mortgage_calc.models.inputs import RawInputs


class TestDefaults:
    def test_blank_form(self):
        snapshot = build_snapshot(RawInputs())
        assert snapshot.price == 0
        assert snapshot.down_payment == 0
        assert snapshot.annual_rate == 0
        assert snapshot.term_years == 30
        assert snapshot.pmi_equity_threshold == Decimal("0.22")

    def test_configured_defaults(self):
        cfg = Settings(default_term_years=15, default_pmi_equity_pct=Decimal("0.20"))
        snapshot = build_snapshot(RawInputs(price=Decimal("100000")), cfg)
        assert snapshot.term_years == 15
        assert snapshot.pmi_equity_threshold == Decimal("0.20")

    def test_explicit_term(self):
        snapshot = build_snapshot(RawInputs(mortgage_term=Decimal("15")))
        assert snapshot.term_years == 15
        assert snapshot.period_count == 180

    def test_fractional_term_kept(self):
        snapshot = build_snapshot(RawInputs(mortgage_term=Decimal("15.5")))
        assert snapshot.term_years == Decimal("15.5")
        assert snapshot.period_count == 186

    def test_half_year_term(self):
        snapshot = build_snapshot(RawInputs(mortgage_term=Decimal("0.5")))
        assert snapshot.period_count == 6

    def test_partial_month_rounds_up(self):
        # 20.9 years is 250.8 months; the last partial month still gets a payment
        snapshot = build_snapshot(RawInputs(mortgage_term=Decimal("20.9")))
        assert snapshot.period_count == 251

    def test_zero_term_uses_default(self):
        snapshot = build_snapshot(RawInputs(mortgage_term=Decimal("0")))
        assert snapshot.term_years == 30

    def test_term_capped(self):
        snapshot = build_snapshot(RawInputs(mortgage_term=Decimal("1e9")))
        assert snapshot.term_years == 50
        assert snapshot.period_count == 600

    def test_configured_term_cap(self):
        cfg = Settings(max_term_years=40)
        snapshot = build_snapshot(RawInputs(mortgage_term=Decimal("45")), cfg)
        assert snapshot.period_count == 480


class TestClamping:
    def test_negative_values_become_zero(self):
        snapshot = build_snapshot(RawInputs(
            price=Decimal("-5"),
            hoa=Decimal("-100"),
            homeowners_insurance=Decimal("-1"),
            monthly_debt=Decimal("-20"),
        ))
        assert snapshot.price == 0
        assert snapshot.hoa == 0
        assert snapshot.homeowners_insurance == 0
        assert snapshot.monthly_debt == 0

    def test_rate_is_percent(self):
        snapshot = build_snapshot(RawInputs(interest_rate_pct=Decimal("6")))
        assert snapshot.annual_rate == Decimal("0.06")

    def test_rate_capped_at_hundred_percent(self):
        snapshot = build_snapshot(RawInputs(interest_rate_pct=Decimal("150")))
        assert snapshot.annual_rate == 1

    @pytest.mark.parametrize("bad", [Decimal("NaN"), Decimal("Infinity"), "abc", ""])
    def test_unparseable_treated_as_zero(self, bad):
        snapshot = build_snapshot(RawInputs(price=bad, mortgage_term=bad))
        assert snapshot.price == 0
        assert snapshot.term_years == 30


class TestDownPayment:
    def test_percentage(self):
        snapshot = build_snapshot(RawInputs(
            price=Decimal("300000"), down_payment_pct=Decimal("20"),
        ))
        assert snapshot.down_payment == Decimal("60000")
        assert snapshot.loan_amount == Decimal("240000")

    def test_percentage_wins_over_amount(self):
        snapshot = build_snapshot(RawInputs(
            price=Decimal("300000"),
            down_payment_pct=Decimal("10"),
            down_payment_amount=Decimal("50000"),
        ))
        assert snapshot.down_payment == Decimal("30000")

    def test_amount_when_no_percentage(self):
        snapshot = build_snapshot(RawInputs(
            price=Decimal("300000"), down_payment_amount=Decimal("50000"),
        ))
        assert snapshot.down_payment == Decimal("50000")

    def test_amount_capped_at_price(self):
        snapshot = build_snapshot(RawInputs(
            price=Decimal("300000"), down_payment_amount=Decimal("500000"),
        ))
        assert snapshot.down_payment == Decimal("300000")
        assert snapshot.loan_amount == 0


class TestPropertyTax:
    def test_monthly_amount(self):
        snapshot = build_snapshot(RawInputs(
            price=Decimal("300000"), property_tax=Decimal("250"),
            property_tax_pct=Decimal("2"),
        ))
        assert snapshot.property_tax == Decimal("250")

    def test_percentage_of_price(self):
        snapshot = build_snapshot(RawInputs(
            price=Decimal("300000"), property_tax_pct=Decimal("1.2"),
        ))
        assert snapshot.property_tax == Decimal("300")

    def test_percentage_of_home_value(self):
        snapshot = build_snapshot(RawInputs(
            price=Decimal("300000"),
            home_value=Decimal("400000"),
            property_tax_pct=Decimal("1.2"),
        ))
        assert snapshot.property_tax == Decimal("400")
        assert snapshot.assessed_value == Decimal("400000")


class TestPmiThreshold:
    def test_percentage(self):
        snapshot = build_snapshot(RawInputs(pmi_equity_pct=Decimal("20")))
        assert snapshot.pmi_equity_threshold == Decimal("0.2")

    def test_zero_falls_back_to_default(self):
        snapshot = build_snapshot(RawInputs(pmi_equity_pct=Decimal("0")))
        assert snapshot.pmi_equity_threshold == Decimal("0.22")
