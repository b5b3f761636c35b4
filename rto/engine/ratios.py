"""Housing-cost ratios: DTI, LTV, PMI, and the rate-shock stress test.

Pure functions: Decimal in, Decimal out. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

from rto.engine.amortization import monthly_payment
from rto.engine.policy import (
    PMI_ANNUAL_RATE,
    PMI_DOWN_PAYMENT_THRESHOLD,
    STRESS_TEST_BUFFER,
    STRESS_TEST_FLOOR,
    STRESS_TEST_MAX_DTI,
)
from rto.models.results import StressTestResult

TWO_PLACES = Decimal("0.01")
FOUR_PLACES = Decimal("0.0001")


def _pct(numerator: Decimal, denominator: Decimal) -> Decimal:
    return (numerator / denominator * 100).quantize(FOUR_PLACES, ROUND_HALF_UP)


def front_end_ratio(monthly_piti: Decimal, monthly_income: Decimal) -> Decimal:
    """Housing cost as a percent of gross monthly income."""
    return _pct(monthly_piti, monthly_income)


def back_end_ratio(
    monthly_piti: Decimal, monthly_debt_payments: Decimal, monthly_income: Decimal
) -> Decimal:
    """Housing cost plus other recurring debt as a percent of gross monthly income."""
    return _pct(monthly_piti + monthly_debt_payments, monthly_income)


def loan_to_value_ratio(loan_amount: Decimal, property_value: Decimal) -> Decimal:
    return _pct(loan_amount, property_value)


def monthly_pmi(loan_amount: Decimal, target_down_payment: Decimal) -> Decimal:
    """PMI premium; none once the down payment reaches 20%."""
    if target_down_payment >= PMI_DOWN_PAYMENT_THRESHOLD:
        return Decimal("0")
    return (loan_amount * PMI_ANNUAL_RATE / 12).quantize(TWO_PLACES, ROUND_HALF_UP)


def monthly_piti(
    principal_and_interest: Decimal,
    property_tax: Decimal,
    insurance: Decimal,
    pmi: Decimal = Decimal("0"),
    hoa: Decimal = Decimal("0"),
) -> Decimal:
    """Principal, interest, taxes, insurance, plus PMI and HOA dues."""
    total = principal_and_interest + property_tax + insurance + pmi + hoa
    return total.quantize(TWO_PLACES, ROUND_HALF_UP)


def stress_test_rate(interest_rate: Decimal) -> Decimal:
    return max(interest_rate + STRESS_TEST_BUFFER, STRESS_TEST_FLOOR)


def stress_test(
    loan_amount: Decimal,
    interest_rate: Decimal,
    term_years: int,
    non_pi_housing_cost: Decimal,
    monthly_debt_payments: Decimal,
    monthly_income: Decimal,
) -> StressTestResult:
    """Re-price the loan at the shocked rate and check the back-end ratio.

    `non_pi_housing_cost` is everything in PITI other than principal and
    interest (taxes, insurance, PMI, HOA); it does not move with the rate.
    """
    rate = stress_test_rate(interest_rate)
    payment = monthly_payment(loan_amount, rate, term_years)
    piti = (payment + non_pi_housing_cost).quantize(TWO_PLACES, ROUND_HALF_UP)
    exact = (piti + monthly_debt_payments) / monthly_income * 100
    return StressTestResult(
        rate=rate,
        payment=payment,
        piti=piti,
        back_end_ratio=exact.quantize(FOUR_PLACES, ROUND_HALF_UP),
        passes=exact <= STRESS_TEST_MAX_DTI,
    )
