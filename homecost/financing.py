"""Fixed-rate mortgage amortization."""

from __future__ import annotations

from typing import TYPE_CHECKING

from homecost.exceptions import InvalidInputError
from homecost.models.derived import FinancingResult

if TYPE_CHECKING:
    from homecost.config import PricingSettings


def monthly_payment(
    principal: float, annual_rate_percent: float, term_years: int,
) -> float:
    """Level monthly payment on a fixed-rate loan.

    Unrounded; callers round for display only.
    """
    if term_years <= 0:
        msg = f"term_years must be positive, got {term_years}"
        raise InvalidInputError(msg)
    if annual_rate_percent < 0:
        msg = f"annual_rate_percent must be non-negative, got {annual_rate_percent}"
        raise InvalidInputError(msg)

    num_payments = term_years * 12
    monthly_rate = annual_rate_percent / 100 / 12
    if monthly_rate == 0:
        return principal / num_payments

    growth = (1 + monthly_rate) ** num_payments
    return principal * (monthly_rate * growth) / (growth - 1)


def calculate_financing(
    home_price: float,
    down_payment_percent: float,
    annual_rate_percent: float,
    term_years: int,
) -> FinancingResult:
    """Amortize *home_price* less the down payment.

    Example::

        result = calculate_financing(500_000, 20, 7.0, 30)
        result.loan_amount       # 400000.0
        result.monthly_payment   # ~2661.21
    """
    if home_price < 0:
        msg = f"home_price must be non-negative, got {home_price}"
        raise InvalidInputError(msg)
    if not 0 <= down_payment_percent <= 100:
        msg = f"down_payment_percent must be within 0-100, got {down_payment_percent}"
        raise InvalidInputError(msg)

    down_payment = home_price * down_payment_percent / 100
    loan_amount = home_price - down_payment
    num_payments = term_years * 12
    payment = monthly_payment(loan_amount, annual_rate_percent, term_years)

    return FinancingResult(
        home_price=home_price,
        down_payment=down_payment,
        loan_amount=loan_amount,
        num_payments=num_payments,
        monthly_payment=payment,
        total_interest=payment * num_payments - loan_amount,
    )


def monthly_impact(additional_cost: float, settings: PricingSettings) -> float:
    """Monthly payment added by financing *additional_cost* in full."""
    return monthly_payment(
        additional_cost, settings.mortgage_rate_percent, settings.mortgage_term_years,
    )
