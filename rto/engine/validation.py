"""Domain checks on calculator input.

Returns every violation at once, in a stable order, so the form can show them
together. An empty list means the input is valid.
"""

from decimal import Decimal

from rto.models.inputs import CalculatorInput

MAX_RENT_TO_EQUITY_PCT = Decimal("50")
MAX_RENT_TO_INCOME = Decimal("0.5")
MIN_DOWN_PAYMENT_PCT = Decimal("3")
MAX_INTEREST_RATE = Decimal("20")
MIN_LOAN_TERM = 10
MAX_LOAN_TERM = 30
MIN_CREDIT_SCORE = 300
MAX_CREDIT_SCORE = 850


def validate_inputs(inputs: CalculatorInput) -> list[str]:
    errors: list[str] = []

    if inputs.monthly_income <= 0:
        errors.append("Monthly income must be greater than 0")

    if inputs.current_rent <= 0:
        errors.append("Current rent must be greater than 0")

    if inputs.property_value <= 0:
        errors.append("Property value must be greater than 0")

    if inputs.rent_to_equity_percent < 0 or inputs.rent_to_equity_percent > MAX_RENT_TO_EQUITY_PCT:
        errors.append("Rent-to-equity percentage must be between 0 and 50")

    if inputs.current_rent > inputs.monthly_income * MAX_RENT_TO_INCOME:
        errors.append("Rent should not exceed 50% of monthly income")

    if inputs.target_down_payment < MIN_DOWN_PAYMENT_PCT:
        errors.append("Target down payment must be at least 3%")

    if inputs.interest_rate < 0 or inputs.interest_rate > MAX_INTEREST_RATE:
        errors.append("Interest rate must be between 0% and 20%")

    if inputs.loan_term_years < MIN_LOAN_TERM or inputs.loan_term_years > MAX_LOAN_TERM:
        errors.append("Loan term must be between 10 and 30 years")

    if inputs.credit_score is not None and not (
        MIN_CREDIT_SCORE <= inputs.credit_score <= MAX_CREDIT_SCORE
    ):
        errors.append("Credit score must be between 300 and 850")

    if inputs.monthly_debt_payments < 0:
        errors.append("Monthly debt payments cannot be negative")

    # Cost inputs the math needs to be sane
    if inputs.target_down_payment >= 100:
        errors.append("Target down payment must be less than 100% of the property value")

    if inputs.property_tax_rate < 0:
        errors.append("Property tax rate cannot be negative")

    if inputs.maintenance_percent < 0:
        errors.append("Maintenance percentage cannot be negative")

    if inputs.home_insurance_annual is not None and inputs.home_insurance_annual < 0:
        errors.append("Home insurance cannot be negative")

    if inputs.hoa_monthly is not None and inputs.hoa_monthly < 0:
        errors.append("HOA dues cannot be negative")

    if inputs.property_appreciation_rate <= -100:
        errors.append("Property appreciation rate must be greater than -100%")

    return errors
