from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class EquityScheduleEntry:
    month: int
    rent_equity: Decimal  # Rent credited toward the down payment this month
    principal_paid: Decimal
    interest_paid: Decimal
    appreciation: Decimal  # Value gained since origination
    loan_balance: Decimal
    home_value: Decimal
    cumulative_rent_equity: Decimal
    cumulative_principal: Decimal
    total_equity: Decimal


@dataclass(frozen=True)
class ScoreBreakdown:
    """Points deducted from 100 by each scoring factor (before clamping)."""
    dti: Decimal = Decimal("0")
    credit: Decimal = Decimal("0")
    down_payment: Decimal = Decimal("0")
    time_to_down_payment: Decimal = Decimal("0")

    @property
    def total(self) -> Decimal:
        return self.dti + self.credit + self.down_payment + self.time_to_down_payment


@dataclass(frozen=True)
class StressTestResult:
    rate: Decimal
    payment: Decimal
    piti: Decimal
    back_end_ratio: Decimal
    passes: bool


@dataclass(frozen=True)
class AffordabilityResult:
    # Rent-to-own program
    monthly_equity_contribution: Decimal
    total_down_payment_needed: Decimal
    time_to_down_payment_months: int
    effective_monthly_rent: Decimal  # Rent net of the equity credit

    # Loan & housing cost
    loan_amount: Decimal
    monthly_mortgage_payment: Decimal  # Principal & interest
    monthly_property_tax: Decimal
    monthly_insurance: Decimal
    monthly_pmi: Decimal
    monthly_hoa: Decimal
    monthly_maintenance: Decimal
    monthly_piti: Decimal
    total_monthly_housing_cost: Decimal

    # Ratios (percent)
    front_end_ratio: Decimal
    back_end_ratio: Decimal
    loan_to_value_ratio: Decimal

    # Stress test
    stress_test: StressTestResult

    # Qualification
    qualification_score: int
    score_breakdown: ScoreBreakdown
    assessment: str
    max_affordable_price: Decimal

    # 3-year projection
    equity_schedule: tuple[EquityScheduleEntry, ...] = field(default_factory=tuple)

    @property
    def debt_to_income_ratio(self) -> Decimal:
        """Headline DTI shown on summary cards (front-end ratio)."""
        return self.front_end_ratio

    @property
    def passes_stress_test(self) -> bool:
        return self.stress_test.passes

    @property
    def projected_equity_in_3_years(self) -> Decimal:
        if not self.equity_schedule:
            return Decimal("0")
        return self.equity_schedule[-1].total_equity

    @property
    def property_appreciation_impact(self) -> Decimal:
        if not self.equity_schedule:
            return Decimal("0")
        return self.equity_schedule[-1].appreciation


@dataclass(frozen=True)
class ScenarioResult:
    """One rent-to-equity percentage tried against otherwise identical input."""
    rent_to_equity_percent: Decimal
    result: AffordabilityResult | None = None
    error: str | None = None
