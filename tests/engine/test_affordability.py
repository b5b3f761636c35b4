from dataclasses import replace
from decimal import Decimal

import pytest

from rto.engine.affordability import calculate_affordability, log_observer
from rto.engine.errors import CalculationError, InputValidationError
from rto.engine.validation import validate_inputs


class TestAffordability:
    def test_default_household(self, canonical_input):
        result = calculate_affordability(canonical_input)
        assert result.monthly_equity_contribution == Decimal("500")
        assert result.total_down_payment_needed == Decimal("70000")
        assert result.time_to_down_payment_months == 140
        assert result.loan_amount == Decimal("280000")
        assert abs(result.monthly_mortgage_payment - Decimal("1769.79")) <= Decimal("0.02")

    def test_housing_cost_components(self, canonical_input):
        result = calculate_affordability(canonical_input)
        # 350000 * 1.2% / 12 and 1225 / 12
        assert result.monthly_property_tax == Decimal("350.00")
        assert result.monthly_insurance == Decimal("102.08")
        assert result.monthly_pmi == Decimal("0")
        assert result.monthly_hoa == Decimal("0")
        assert result.monthly_piti == (
            result.monthly_mortgage_payment + result.monthly_property_tax + result.monthly_insurance
        )
        # 350000 * 1.5% / 12 = 437.50
        assert result.monthly_maintenance == Decimal("437.50")
        assert result.total_monthly_housing_cost == result.monthly_piti + Decimal("437.50")

    def test_effective_rent(self, canonical_input):
        result = calculate_affordability(canonical_input)
        assert result.effective_monthly_rent == Decimal("1500")

    def test_ratios(self, canonical_input):
        result = calculate_affordability(canonical_input)
        assert Decimal("44") < result.front_end_ratio < Decimal("45")
        assert result.back_end_ratio - result.front_end_ratio == Decimal("10")
        assert result.debt_to_income_ratio == result.front_end_ratio
        assert result.loan_to_value_ratio == Decimal("80")

    def test_stress_test(self, canonical_input):
        result = calculate_affordability(canonical_input)
        assert result.stress_test.rate == Decimal("8.5")
        assert result.stress_test.payment > result.monthly_mortgage_payment
        assert not result.passes_stress_test

    def test_qualification(self, canonical_input):
        result = calculate_affordability(canonical_input)
        assert result.qualification_score == 14
        assert result.assessment == "Needs Improvement"
        assert result.score_breakdown.time_to_down_payment == Decimal("20")
        assert result.score_breakdown.down_payment == Decimal("0")

    def test_strong_household(self, strong_input):
        result = calculate_affordability(strong_input)
        assert result.time_to_down_payment_months == 20
        assert result.monthly_pmi == Decimal("168.75")
        assert result.passes_stress_test
        assert result.qualification_score == 90
        assert result.assessment == "Excellent"

    def test_equity_schedule(self, canonical_input):
        result = calculate_affordability(canonical_input)
        assert len(result.equity_schedule) == 36
        assert result.projected_equity_in_3_years == result.equity_schedule[-1].total_equity
        assert result.property_appreciation_impact == result.equity_schedule[-1].appreciation
        assert result.projected_equity_in_3_years > result.total_down_payment_needed

    def test_max_affordable_price(self, canonical_input):
        result = calculate_affordability(canonical_input)
        # 28% of 5000 leaves ~948/mo for P&I → ~$150K loan + $70K down
        assert Decimal("200000") < result.max_affordable_price < Decimal("240000")

    def test_idempotent(self, canonical_input):
        assert calculate_affordability(canonical_input) == calculate_affordability(canonical_input)

    def test_input_not_mutated(self, canonical_input):
        before = replace(canonical_input)
        calculate_affordability(canonical_input)
        assert canonical_input == before

    def test_insurance_defaults_from_value(self, canonical_input):
        defaulted = replace(canonical_input, home_insurance_annual=None, hoa_monthly=None)
        assert calculate_affordability(defaulted) == calculate_affordability(canonical_input)

    def test_pmi_below_twenty_percent(self, canonical_input):
        result = calculate_affordability(replace(canonical_input, target_down_payment=Decimal("10")))
        # 315000 * 0.75% / 12 = 196.875
        assert result.monthly_pmi == Decimal("196.88")
        assert result.monthly_piti == (
            result.monthly_mortgage_payment
            + result.monthly_property_tax
            + result.monthly_insurance
            + result.monthly_pmi
        )

    def test_zero_interest_rate(self, canonical_input):
        result = calculate_affordability(replace(canonical_input, interest_rate=Decimal("0")))
        assert result.monthly_mortgage_payment == (Decimal("280000") / 360).quantize(Decimal("0.01"))
        assert result.stress_test.rate == Decimal("5.25")

    def test_near_zero_interest_rate(self, canonical_input):
        inputs = replace(canonical_input, interest_rate=Decimal("1E-27"))
        assert validate_inputs(inputs) == []
        result = calculate_affordability(inputs)
        assert result.monthly_mortgage_payment == Decimal("777.78")
        assert all(e.interest_paid == 0 for e in result.equity_schedule)
        assert result.stress_test.rate == Decimal("5.25")

    def test_score_monotone_in_credit(self, canonical_input):
        scores = [
            calculate_affordability(replace(canonical_input, credit_score=s)).qualification_score
            for s in range(300, 851, 10)
        ]
        assert scores == sorted(scores)

    def test_score_bounded(self, canonical_input):
        for income in ("4000", "8000", "20000"):
            for pct in ("5", "25", "50"):
                result = calculate_affordability(replace(
                    canonical_input,
                    monthly_income=Decimal(income),
                    rent_to_equity_percent=Decimal(pct),
                ))
                assert 0 <= result.qualification_score <= 100


class TestAffordabilityErrors:
    def test_zero_rent_to_equity(self, canonical_input):
        with pytest.raises(CalculationError, match="Cannot reach down payment"):
            calculate_affordability(replace(canonical_input, rent_to_equity_percent=Decimal("0")))

    def test_invalid_input_lists_every_error(self, canonical_input):
        bad = replace(canonical_input, monthly_income=Decimal("0"), credit_score=200)
        with pytest.raises(InputValidationError) as exc_info:
            calculate_affordability(bad)
        assert "Monthly income must be greater than 0" in exc_info.value.errors
        assert "Credit score must be between 300 and 850" in exc_info.value.errors

    def test_validation_error_is_value_error(self, canonical_input):
        with pytest.raises(ValueError):
            calculate_affordability(replace(canonical_input, loan_term_years=50))


class TestObserver:
    def test_observer_sees_each_stage(self, canonical_input):
        stages = []
        calculate_affordability(canonical_input, observer=lambda stage, values: stages.append(stage))
        assert stages == [
            "inputs",
            "program",
            "housing_cost",
            "ratios",
            "qualification",
            "equity_schedule",
        ]

    def test_observer_does_not_change_result(self, canonical_input):
        observed = calculate_affordability(canonical_input, observer=lambda stage, values: None)
        assert observed == calculate_affordability(canonical_input)

    def test_log_observer(self, canonical_input, caplog):
        with caplog.at_level("DEBUG", logger="rto.engine.affordability"):
            calculate_affordability(canonical_input, observer=log_observer)
        assert "affordability program" in caplog.text
