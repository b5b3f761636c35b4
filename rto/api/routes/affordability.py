"""Affordability routes — the calculator's primary API entry point."""

from dataclasses import asdict

from fastapi import APIRouter, HTTPException

from rto.api.schemas import (
    AffordabilityRequest,
    AffordabilityResponse,
    EquityScheduleEntryResponse,
    ScenarioRequest,
    ScenarioResponse,
    ScoreBreakdownResponse,
    StressTestResponse,
    ValidationResponse,
)
from rto.config import settings
from rto.engine.affordability import calculate_affordability, log_observer
from rto.engine.errors import CalculationError, InputValidationError
from rto.engine.scenarios import calculate_scenarios
from rto.engine.validation import validate_inputs
from rto.models.results import AffordabilityResult

router = APIRouter(prefix="/api/v1/affordability", tags=["affordability"])


def _result_to_response(result: AffordabilityResult) -> AffordabilityResponse:
    """Convert engine AffordabilityResult to API response."""
    schedule = [EquityScheduleEntryResponse(**asdict(e)) for e in result.equity_schedule]

    b = result.score_breakdown
    s = result.stress_test
    return AffordabilityResponse(
        monthly_equity_contribution=result.monthly_equity_contribution,
        total_down_payment_needed=result.total_down_payment_needed,
        time_to_down_payment_months=result.time_to_down_payment_months,
        effective_monthly_rent=result.effective_monthly_rent,
        loan_amount=result.loan_amount,
        monthly_mortgage_payment=result.monthly_mortgage_payment,
        monthly_property_tax=result.monthly_property_tax,
        monthly_insurance=result.monthly_insurance,
        monthly_pmi=result.monthly_pmi,
        monthly_hoa=result.monthly_hoa,
        monthly_maintenance=result.monthly_maintenance,
        monthly_piti=result.monthly_piti,
        total_monthly_housing_cost=result.total_monthly_housing_cost,
        debt_to_income_ratio=result.debt_to_income_ratio,
        front_end_ratio=result.front_end_ratio,
        back_end_ratio=result.back_end_ratio,
        loan_to_value_ratio=result.loan_to_value_ratio,
        stress_test=StressTestResponse(
            rate=s.rate,
            payment=s.payment,
            piti=s.piti,
            back_end_ratio=s.back_end_ratio,
            passes=s.passes,
        ),
        passes_stress_test=result.passes_stress_test,
        qualification_score=result.qualification_score,
        score_breakdown=ScoreBreakdownResponse(
            dti=b.dti,
            credit=b.credit,
            down_payment=b.down_payment,
            time_to_down_payment=b.time_to_down_payment,
        ),
        assessment=result.assessment,
        max_affordable_price=result.max_affordable_price,
        projected_equity_in_3_years=result.projected_equity_in_3_years,
        property_appreciation_impact=result.property_appreciation_impact,
        equity_schedule=schedule,
    )


@router.post("", response_model=AffordabilityResponse)
async def calculate(req: AffordabilityRequest):
    """Calculator form → full affordability analysis with 36-month equity schedule."""
    try:
        result = calculate_affordability(req.to_input(), observer=log_observer)
    except InputValidationError as e:
        raise HTTPException(status_code=422, detail={"errors": e.errors})
    except CalculationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _result_to_response(result)


@router.post("/validate", response_model=ValidationResponse)
async def validate(req: AffordabilityRequest):
    """Check the form without calculating."""
    errors = validate_inputs(req.to_input())
    return ValidationResponse(valid=not errors, errors=errors)


@router.post("/scenarios", response_model=list[ScenarioResponse])
async def scenarios(req: ScenarioRequest):
    """Compare the same household across several rent-to-equity percentages."""
    percentages = req.percentages or settings.scenario_percentages
    results = calculate_scenarios(req.to_input(), percentages, observer=log_observer)
    return [
        ScenarioResponse(
            rent_to_equity_percent=s.rent_to_equity_percent,
            result=_result_to_response(s.result) if s.result is not None else None,
            error=s.error,
        )
        for s in results
    ]
