"""Pydantic schemas for API request/response models."""

from decimal import Decimal

from pydantic import BaseModel, Field

from rto.engine.policy import (
    DEFAULT_APPRECIATION_PCT,
    DEFAULT_MAINTENANCE_PCT,
    DEFAULT_PROPERTY_TAX_PCT,
)
from rto.models.inputs import CalculatorInput


# ---- Request schemas ----

class AffordabilityRequest(BaseModel):
    """Calculator form. Domain rules are checked by the engine, not here."""
    monthly_income: Decimal = Field(..., description="Gross monthly income")
    current_rent: Decimal = Field(..., description="Current monthly rent")
    property_value: Decimal = Field(..., description="Target property price")
    rent_to_equity_percent: Decimal = Field(Decimal("25"), description="% of rent credited to equity")
    loan_term_years: int = 30
    interest_rate: Decimal = Field(Decimal("6.5"), description="Annual rate, percent")
    target_down_payment: Decimal = Field(Decimal("20"), description="% of property value")
    monthly_debt_payments: Decimal = Decimal("0")
    credit_score: int | None = None
    property_tax_rate: Decimal = DEFAULT_PROPERTY_TAX_PCT
    home_insurance_annual: Decimal | None = Field(None, description="Defaults to 0.35% of value")
    hoa_monthly: Decimal | None = None
    maintenance_percent: Decimal = DEFAULT_MAINTENANCE_PCT
    property_appreciation_rate: Decimal = DEFAULT_APPRECIATION_PCT

    def to_input(self) -> CalculatorInput:
        return CalculatorInput(**self.model_dump())


class ScenarioRequest(AffordabilityRequest):
    percentages: list[Decimal] | None = Field(
        None, description="Rent-to-equity percentages to compare; defaults from settings"
    )

    def to_input(self) -> CalculatorInput:
        return CalculatorInput(**self.model_dump(exclude={"percentages"}))


# ---- Response schemas ----

class ValidationResponse(BaseModel):
    valid: bool
    errors: list[str] = Field(default_factory=list)


class EquityScheduleEntryResponse(BaseModel):
    month: int
    rent_equity: Decimal
    principal_paid: Decimal
    interest_paid: Decimal
    appreciation: Decimal
    loan_balance: Decimal
    home_value: Decimal
    cumulative_rent_equity: Decimal
    cumulative_principal: Decimal
    total_equity: Decimal


class ScoreBreakdownResponse(BaseModel):
    dti: Decimal
    credit: Decimal
    down_payment: Decimal
    time_to_down_payment: Decimal


class StressTestResponse(BaseModel):
    rate: Decimal
    payment: Decimal
    piti: Decimal
    back_end_ratio: Decimal
    passes: bool


class AffordabilityResponse(BaseModel):
    monthly_equity_contribution: Decimal
    total_down_payment_needed: Decimal
    time_to_down_payment_months: int
    effective_monthly_rent: Decimal

    loan_amount: Decimal
    monthly_mortgage_payment: Decimal
    monthly_property_tax: Decimal
    monthly_insurance: Decimal
    monthly_pmi: Decimal
    monthly_hoa: Decimal
    monthly_maintenance: Decimal
    monthly_piti: Decimal
    total_monthly_housing_cost: Decimal

    debt_to_income_ratio: Decimal
    front_end_ratio: Decimal
    back_end_ratio: Decimal
    loan_to_value_ratio: Decimal

    stress_test: StressTestResponse
    passes_stress_test: bool

    qualification_score: int
    score_breakdown: ScoreBreakdownResponse
    assessment: str
    max_affordable_price: Decimal

    projected_equity_in_3_years: Decimal
    property_appreciation_impact: Decimal
    equity_schedule: list[EquityScheduleEntryResponse] = Field(default_factory=list)


class ScenarioResponse(BaseModel):
    rent_to_equity_percent: Decimal
    result: AffordabilityResponse | None = None
    error: str | None = None


class MarketLocationResponse(BaseModel):
    city: str
    state: str
    zip_code: str


class RentalMarketResponse(BaseModel):
    median_rent: Decimal
    year_over_year_growth: Decimal
    vacancy_rate: Decimal
    rent_per_sqft: Decimal


class HousingMarketResponse(BaseModel):
    median_price: Decimal
    appreciation: Decimal
    days_on_market: int
    inventory_level: str
    price_per_sqft: Decimal


class EconomicIndicatorsResponse(BaseModel):
    unemployment_rate: Decimal
    population_growth: Decimal
    median_household_income: Decimal


class MarketTrendPointResponse(BaseModel):
    months_ago: int
    median_rent: Decimal
    median_price: Decimal


class MarketIndicatorResponse(BaseModel):
    subject: str
    value: Decimal


class MarketSnapshotResponse(BaseModel):
    location: MarketLocationResponse
    rental_market: RentalMarketResponse
    housing_market: HousingMarketResponse
    economic_indicators: EconomicIndicatorsResponse
    opportunity_score: Decimal
    opportunity_label: str
    rent_to_price_ratio: Decimal
    cap_rate: Decimal
    indicators: list[MarketIndicatorResponse] = Field(default_factory=list)
    historical_trend: list[MarketTrendPointResponse] = Field(default_factory=list)


class IntegrationStatusResponse(BaseModel):
    name: str
    provider: str
    endpoint: str
    status: str
