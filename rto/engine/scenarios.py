"""Side-by-side runs of the same household at different rent-to-equity percentages."""

from dataclasses import replace
from decimal import Decimal
from typing import Iterable

from rto.engine.affordability import Observer, calculate_affordability
from rto.engine.errors import CalculationError, InputValidationError
from rto.models.inputs import CalculatorInput
from rto.models.results import ScenarioResult

DEFAULT_SCENARIO_PERCENTAGES: tuple[Decimal, ...] = (Decimal("15"), Decimal("25"), Decimal("35"))


def calculate_scenarios(
    inputs: CalculatorInput,
    percentages: Iterable[Decimal] = DEFAULT_SCENARIO_PERCENTAGES,
    observer: Observer | None = None,
) -> list[ScenarioResult]:
    """Re-run the analysis once per rent-to-equity percentage.

    A percentage that makes the input invalid or degenerate is reported with
    its error message rather than aborting the other scenarios.
    """
    scenarios: list[ScenarioResult] = []
    for raw_pct in percentages:
        pct = Decimal(str(raw_pct))
        scenario_inputs = replace(inputs, rent_to_equity_percent=pct)
        try:
            result = calculate_affordability(scenario_inputs, observer=observer)
        except (CalculationError, InputValidationError) as e:
            scenarios.append(ScenarioResult(rent_to_equity_percent=pct, error=str(e)))
            continue
        scenarios.append(ScenarioResult(rent_to_equity_percent=pct, result=result))
    return scenarios
