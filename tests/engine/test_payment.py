from decimal import Decimal

import pytest

from mortgage_calc.engine.payment import InvalidInputError, monthly_payment, principal_and_interest
from mortgage_calc.models.inputs import InputSnapshot


class TestMonthlyPayment:
    def test_standard_mortgage(self):
        """$240K loan at 6% for 30 years."""
        pmt = monthly_payment(Decimal("240000"), Decimal("0.005"), 360)
        # Expected: ~$1,438.92
        assert pmt.quantize(Decimal("0.01")) == Decimal("1438.92")

    def test_not_rounded(self):
        pmt = monthly_payment(Decimal("240000"), Decimal("0.005"), 360)
        assert pmt != pmt.quantize(Decimal("0.01"))

    def test_zero_rate_is_straight_division(self):
        pmt = monthly_payment(Decimal("360000"), Decimal("0"), 360)
        assert pmt == Decimal("1000")

    def test_zero_rate_uneven_division(self):
        pmt = monthly_payment(Decimal("100000"), Decimal("0"), 360)
        assert pmt == Decimal("100000") / 360

    def test_zero_principal(self):
        pmt = monthly_payment(Decimal("0"), Decimal("0.005"), 360)
        assert pmt == Decimal("0")

    def test_payment_exceeds_first_month_interest(self):
        pmt = monthly_payment(Decimal("240000"), Decimal("0.005"), 360)
        assert pmt > Decimal("240000") * Decimal("0.005")

    def test_negative_principal_rejected(self):
        with pytest.raises(InvalidInputError):
            monthly_payment(Decimal("-1"), Decimal("0.005"), 360)

    def test_negative_rate_rejected(self):
        with pytest.raises(InvalidInputError):
            monthly_payment(Decimal("240000"), Decimal("-0.001"), 360)

    @pytest.mark.parametrize("periods", [0, -12])
    def test_non_positive_periods_rejected(self, periods):
        with pytest.raises(InvalidInputError):
            monthly_payment(Decimal("240000"), Decimal("0.005"), periods)

    def test_invalid_input_is_value_error(self):
        with pytest.raises(ValueError):
            monthly_payment(Decimal("240000"), Decimal("0.005"), 0)


class TestPrincipalAndInterest:
    def test_uses_snapshot_loan(self, standard_snapshot):
        pi = principal_and_interest(standard_snapshot)
        assert pi == monthly_payment(Decimal("240000"), Decimal("0.005"), 360)

    def test_paid_in_full_is_exactly_zero(self):
        snapshot = InputSnapshot(
            price=Decimal("300000"),
            down_payment=Decimal("300000"),
            annual_rate=Decimal("0.06"),
        )
        assert principal_and_interest(snapshot) == Decimal("0")

    def test_paid_in_full_skips_formula_even_without_term(self):
        snapshot = InputSnapshot(
            price=Decimal("300000"),
            down_payment=Decimal("300000"),
            term_years=0,
        )
        assert principal_and_interest(snapshot) == Decimal("0")

    def test_zero_rate(self, zero_rate_snapshot):
        assert principal_and_interest(zero_rate_snapshot) == Decimal("1000")
