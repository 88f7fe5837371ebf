"""Tests for mortgage amortization helpers."""

from __future__ import annotations

import pytest

from homecost.config import PricingSettings
from homecost.exceptions import InvalidInputError
from homecost.financing import calculate_financing, monthly_impact, monthly_payment


class TestMonthlyPayment:
    def test_known_amortization(self) -> None:
        # $400,000 at 7% over 30 years
        assert monthly_payment(400_000, 7.0, 30) == pytest.approx(2661.21, abs=0.01)

    def test_zero_rate_is_straight_division(self) -> None:
        assert monthly_payment(360_000, 0, 30) == 1000.0

    def test_zero_principal(self) -> None:
        assert monthly_payment(0, 6.99, 30) == 0.0

    @pytest.mark.parametrize("term", [0, -5])
    def test_non_positive_term_rejected(self, term: int) -> None:
        with pytest.raises(InvalidInputError, match="term_years"):
            monthly_payment(100_000, 6.0, term)

    def test_negative_rate_rejected(self) -> None:
        with pytest.raises(InvalidInputError, match="annual_rate_percent"):
            monthly_payment(100_000, -1.0, 30)


class TestCalculateFinancing:
    def test_down_payment_reduces_loan(self) -> None:
        result = calculate_financing(500_000, 20, 7.0, 30)
        assert result.down_payment == 100_000
        assert result.loan_amount == 400_000
        assert result.num_payments == 360
        assert result.monthly_payment == pytest.approx(2661.21, abs=0.01)

    def test_total_interest(self) -> None:
        result = calculate_financing(500_000, 20, 7.0, 30)
        expected = result.monthly_payment * 360 - 400_000
        assert result.total_interest == pytest.approx(expected)
        assert result.total_interest > 0

    def test_interest_free_loan(self) -> None:
        result = calculate_financing(500_000, 20, 0, 30)
        assert result.monthly_payment == 400_000 / 360
        assert result.total_interest == pytest.approx(0, abs=1e-6)

    def test_paid_in_full(self) -> None:
        result = calculate_financing(750_000, 100, 6.5, 15)
        assert result.loan_amount == 0
        assert result.monthly_payment == 0

    @pytest.mark.parametrize("down", [-1, 100.5])
    def test_down_payment_out_of_range(self, down: float) -> None:
        with pytest.raises(InvalidInputError, match="down_payment_percent"):
            calculate_financing(500_000, down, 7.0, 30)

    def test_negative_price_rejected(self) -> None:
        with pytest.raises(InvalidInputError, match="home_price"):
            calculate_financing(-1, 20, 7.0, 30)


class TestMonthlyImpact:
    def test_uses_settings_rate_and_term(self) -> None:
        settings = PricingSettings(mortgage_rate_percent=6.0, mortgage_term_years=15)
        assert monthly_impact(50_000, settings) == monthly_payment(50_000, 6.0, 15)

    def test_default_terms(self) -> None:
        impact = monthly_impact(100_000, PricingSettings())
        assert impact == monthly_payment(100_000, 6.99, 30)
        assert 600 < impact < 700
