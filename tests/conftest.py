"""Canonical test fixtures used across all engine tests.

Fixture: $5K/mo income, $2K rent with 25% credited to equity, $350K home,
20% down, 6.5% 30yr fixed, $500/mo other debt, 720 credit.
"""

import pytest
from decimal import Decimal

from rto.models.inputs import CalculatorInput


@pytest.fixture
def canonical_input() -> CalculatorInput:
    """The calculator's default household."""
    return CalculatorInput(
        monthly_income=Decimal("5000"),
        current_rent=Decimal("2000"),
        property_value=Decimal("350000"),
        rent_to_equity_percent=Decimal("25"),
        loan_term_years=30,
        interest_rate=Decimal("6.5"),
        target_down_payment=Decimal("20"),
        monthly_debt_payments=Decimal("500"),
        credit_score=720,
        property_tax_rate=Decimal("1.2"),
        home_insurance_annual=Decimal("1225"),
        hoa_monthly=Decimal("0"),
        maintenance_percent=Decimal("1.5"),
        property_appreciation_rate=Decimal("3"),
    )


@pytest.fixture
def strong_input() -> CalculatorInput:
    """High earner saving half of rent toward a 10% down payment (20 months)."""
    return CalculatorInput(
        monthly_income=Decimal("15000"),
        current_rent=Decimal("3000"),
        property_value=Decimal("300000"),
        rent_to_equity_percent=Decimal("50"),
        loan_term_years=30,
        interest_rate=Decimal("6.5"),
        target_down_payment=Decimal("10"),
        monthly_debt_payments=Decimal("0"),
        credit_score=780,
    )
