"""Month-by-month equity buildup over the first three years of ownership.

Equity comes from four places: the down payment, rent credited under the
rent-to-own program, mortgage principal paydown, and appreciation compounded
monthly from the annual rate.
"""

import math
from decimal import Decimal, ROUND_HALF_UP

from rto.engine.amortization import amortization_schedule
from rto.engine.errors import CalculationError
from rto.engine.policy import EQUITY_HORIZON_MONTHS
from rto.models.results import EquityScheduleEntry

TWO_PLACES = Decimal("0.01")


def time_to_down_payment_months(
    total_down_payment_needed: Decimal, monthly_equity_contribution: Decimal
) -> int:
    """Whole months of rent credit needed to cover the down payment (rounded up)."""
    if monthly_equity_contribution <= 0:
        raise CalculationError(
            "Cannot reach down payment: monthly equity contribution is zero. "
            "Increase the rent-to-equity percentage."
        )
    return math.ceil(total_down_payment_needed / monthly_equity_contribution)


def monthly_appreciation_rate(annual_rate_pct: Decimal) -> Decimal:
    """Monthly rate that compounds to the annual rate over 12 months."""
    return (1 + annual_rate_pct / 100) ** (Decimal("1") / Decimal("12")) - 1


def equity_schedule(
    property_value: Decimal,
    total_down_payment_needed: Decimal,
    loan_amount: Decimal,
    interest_rate: Decimal,
    loan_term_years: int,
    annual_appreciation_rate: Decimal,
    monthly_equity_contribution: Decimal,
    months: int = EQUITY_HORIZON_MONTHS,
) -> tuple[EquityScheduleEntry, ...]:
    """Build the equity schedule for months 1..`months`.

    Rent credit stops once the down payment is saved; total equity only
    counts rent credit for those months.
    """
    months_to_save = time_to_down_payment_months(
        total_down_payment_needed, monthly_equity_contribution
    )
    monthly_growth = monthly_appreciation_rate(annual_appreciation_rate)
    loan_rows = amortization_schedule(loan_amount, interest_rate, loan_term_years, months=months)

    entries: list[EquityScheduleEntry] = []
    home_value = property_value
    cumulative_principal = Decimal("0")
    cumulative_rent = Decimal("0")

    for row in loan_rows:
        home_value = home_value * (1 + monthly_growth)
        appreciation = home_value - property_value

        rent_equity = monthly_equity_contribution if row.period <= months_to_save else Decimal("0")
        cumulative_rent += rent_equity
        cumulative_principal += row.principal

        total = total_down_payment_needed + cumulative_principal + appreciation + cumulative_rent

        entries.append(EquityScheduleEntry(
            month=row.period,
            rent_equity=rent_equity.quantize(TWO_PLACES, ROUND_HALF_UP),
            principal_paid=row.principal,
            interest_paid=row.interest,
            appreciation=appreciation.quantize(TWO_PLACES, ROUND_HALF_UP),
            loan_balance=row.balance,
            home_value=home_value.quantize(TWO_PLACES, ROUND_HALF_UP),
            cumulative_rent_equity=cumulative_rent.quantize(TWO_PLACES, ROUND_HALF_UP),
            cumulative_principal=cumulative_principal.quantize(TWO_PLACES, ROUND_HALF_UP),
            total_equity=total.quantize(TWO_PLACES, ROUND_HALF_UP),
        ))

    return tuple(entries)
