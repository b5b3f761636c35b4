from dataclasses import dataclass
from decimal import Decimal

from rto.engine.policy import (
    DEFAULT_APPRECIATION_PCT,
    DEFAULT_INSURANCE_RATE,
    DEFAULT_MAINTENANCE_PCT,
    DEFAULT_PROPERTY_TAX_PCT,
)


@dataclass(frozen=True)
class CalculatorInput:
    """One set of figures entered into the rent-to-own calculator.

    Rates and percentages are in percent units (6.5 means 6.5%).
    """
    monthly_income: Decimal
    current_rent: Decimal
    property_value: Decimal

    # Household
    monthly_debt_payments: Decimal = Decimal("0")
    credit_score: int | None = None

    # Property
    property_tax_rate: Decimal = DEFAULT_PROPERTY_TAX_PCT  # Annual, % of value
    home_insurance_annual: Decimal | None = None  # Defaults to 0.35% of value
    hoa_monthly: Decimal | None = None
    maintenance_percent: Decimal = DEFAULT_MAINTENANCE_PCT  # Annual, % of value
    property_appreciation_rate: Decimal = DEFAULT_APPRECIATION_PCT  # Annual

    # Program & financing
    rent_to_equity_percent: Decimal = Decimal("25")
    target_down_payment: Decimal = Decimal("20")  # % of property value
    loan_term_years: int = 30
    interest_rate: Decimal = Decimal("6.5")  # Annual nominal

    @property
    def monthly_equity_contribution(self) -> Decimal:
        return self.current_rent * self.rent_to_equity_percent / 100

    @property
    def total_down_payment_needed(self) -> Decimal:
        return self.property_value * self.target_down_payment / 100

    @property
    def loan_amount(self) -> Decimal:
        return self.property_value - self.total_down_payment_needed

    @property
    def annual_insurance(self) -> Decimal:
        if self.home_insurance_annual is not None:
            return self.home_insurance_annual
        return self.property_value * DEFAULT_INSURANCE_RATE

    @property
    def monthly_hoa(self) -> Decimal:
        return self.hoa_monthly if self.hoa_monthly is not None else Decimal("0")

    @property
    def monthly_property_tax(self) -> Decimal:
        return self.property_value * self.property_tax_rate / 100 / 12

    @property
    def monthly_insurance(self) -> Decimal:
        return self.annual_insurance / 12

    @property
    def monthly_maintenance(self) -> Decimal:
        return self.property_value * self.maintenance_percent / 100 / 12
