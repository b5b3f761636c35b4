"""Affordability orchestrator: composes the engine sub-modules into one result.

Pure computation. No I/O. CalculatorInput in, AffordabilityResult out.
Diagnostics go through an optional observer so the computation itself stays
free of logging and its output never depends on it.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Callable

from rto.engine.amortization import loan_from_payment, monthly_payment
from rto.engine.equity import equity_schedule, time_to_down_payment_months
from rto.engine.errors import CalculationError, InputValidationError
from rto.engine.policy import MAX_FRONT_END_DTI
from rto.engine.ratios import (
    back_end_ratio,
    front_end_ratio,
    loan_to_value_ratio,
    monthly_piti,
    monthly_pmi,
    stress_test,
)
from rto.engine.scoring import assessment_label, score_breakdown, score_from_breakdown
from rto.engine.validation import validate_inputs
from rto.models.inputs import CalculatorInput
from rto.models.results import AffordabilityResult

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")

Observer = Callable[[str, dict[str, Any]], None]


def log_observer(stage: str, values: dict[str, Any]) -> None:
    """Observer that writes each calculation stage to the module logger."""
    logger.debug("affordability %s: %s", stage, values)


def _money(value: Decimal) -> Decimal:
    return value.quantize(TWO_PLACES, ROUND_HALF_UP)


def max_affordable_price(
    inputs: CalculatorInput, monthly_tax: Decimal, monthly_insurance: Decimal
) -> Decimal:
    """Price supportable at a 28% front-end ratio, keeping the same down payment."""
    max_housing = inputs.monthly_income * MAX_FRONT_END_DTI / 100
    max_pi = max_housing - monthly_tax - monthly_insurance
    max_loan = loan_from_payment(max_pi, inputs.interest_rate, inputs.loan_term_years)
    return _money(max_loan + inputs.total_down_payment_needed)


def calculate_affordability(
    inputs: CalculatorInput,
    observer: Observer | None = None,
) -> AffordabilityResult:
    """Run the complete affordability analysis.

    Raises InputValidationError (with every violation) when the input is
    invalid, and CalculationError when it is valid but degenerate, such as a
    zero rent-to-equity contribution that never reaches the down payment.
    """
    notify: Observer = observer or (lambda stage, values: None)

    errors = validate_inputs(inputs)
    if errors:
        raise InputValidationError(errors)
    notify("inputs", {"inputs": inputs})

    # Rent-to-own program
    contribution = inputs.monthly_equity_contribution
    down_payment = inputs.total_down_payment_needed
    months_to_save = time_to_down_payment_months(down_payment, contribution)
    notify("program", {
        "monthly_equity_contribution": contribution,
        "total_down_payment_needed": down_payment,
        "time_to_down_payment_months": months_to_save,
    })

    # Loan & monthly housing cost
    loan = inputs.loan_amount
    if loan <= 0:
        raise CalculationError("Down payment covers the full property value; there is no loan to qualify for.")
    payment = monthly_payment(loan, inputs.interest_rate, inputs.loan_term_years)
    tax = _money(inputs.monthly_property_tax)
    insurance = _money(inputs.monthly_insurance)
    pmi = monthly_pmi(loan, inputs.target_down_payment)
    hoa = _money(inputs.monthly_hoa)
    maintenance = _money(inputs.monthly_maintenance)
    piti = monthly_piti(payment, tax, insurance, pmi, hoa)
    notify("housing_cost", {
        "loan_amount": loan,
        "monthly_mortgage_payment": payment,
        "monthly_pmi": pmi,
        "monthly_piti": piti,
    })

    # Ratios & stress test
    front_end = front_end_ratio(piti, inputs.monthly_income)
    back_end = back_end_ratio(piti, inputs.monthly_debt_payments, inputs.monthly_income)
    ltv = loan_to_value_ratio(loan, inputs.property_value)
    stress = stress_test(
        loan_amount=loan,
        interest_rate=inputs.interest_rate,
        term_years=inputs.loan_term_years,
        non_pi_housing_cost=tax + insurance + pmi + hoa,
        monthly_debt_payments=inputs.monthly_debt_payments,
        monthly_income=inputs.monthly_income,
    )
    notify("ratios", {
        "front_end_ratio": front_end,
        "back_end_ratio": back_end,
        "loan_to_value_ratio": ltv,
        "stress_test": stress,
    })

    # Qualification
    breakdown = score_breakdown(
        back_end, inputs.credit_score, inputs.target_down_payment, months_to_save
    )
    score = score_from_breakdown(breakdown)
    label = assessment_label(score, months_to_save, stress.passes, back_end)
    notify("qualification", {"score": score, "breakdown": breakdown, "assessment": label})

    schedule = equity_schedule(
        property_value=inputs.property_value,
        total_down_payment_needed=down_payment,
        loan_amount=loan,
        interest_rate=inputs.interest_rate,
        loan_term_years=inputs.loan_term_years,
        annual_appreciation_rate=inputs.property_appreciation_rate,
        monthly_equity_contribution=contribution,
    )
    notify("equity_schedule", {"months": len(schedule), "final": schedule[-1]})

    return AffordabilityResult(
        monthly_equity_contribution=_money(contribution),
        total_down_payment_needed=_money(down_payment),
        time_to_down_payment_months=months_to_save,
        effective_monthly_rent=_money(inputs.current_rent - contribution),
        loan_amount=_money(loan),
        monthly_mortgage_payment=payment,
        monthly_property_tax=tax,
        monthly_insurance=insurance,
        monthly_pmi=pmi,
        monthly_hoa=hoa,
        monthly_maintenance=maintenance,
        monthly_piti=piti,
        total_monthly_housing_cost=piti + maintenance,
        front_end_ratio=front_end,
        back_end_ratio=back_end,
        loan_to_value_ratio=ltv,
        stress_test=stress,
        qualification_score=score,
        score_breakdown=breakdown,
        assessment=label,
        max_affordable_price=max_affordable_price(inputs, tax, insurance),
        equity_schedule=schedule,
    )
