"""Fixed-rate loan math: payment, inverse payment, and amortization rows.

Pure functions: Decimal in, Decimal/dataclass out. No I/O.
Rates are annual nominal percentages (6.5 for 6.5%).
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

TWO_PLACES = Decimal("0.01")


@dataclass(frozen=True)
class AmortizationPayment:
    period: int
    principal: Decimal
    interest: Decimal
    balance: Decimal


def _monthly_rate(annual_rate_pct: Decimal) -> Decimal:
    return annual_rate_pct / 100 / 12


def monthly_payment(principal: Decimal, annual_rate_pct: Decimal, term_years: int) -> Decimal:
    """Calculate the fixed monthly principal & interest payment.

    Raises ValueError for a non-positive principal or term; callers must not
    ask for a loan when the down payment covers the whole price.
    """
    if principal <= 0:
        raise ValueError(f"Loan principal must be positive, got {principal}")
    if term_years <= 0:
        raise ValueError(f"Loan term must be positive, got {term_years}")

    n = term_years * 12
    r = _monthly_rate(annual_rate_pct)
    factor = (1 + r) ** n
    # Rates too small to move 1 + r at Decimal precision amortize straight-line
    if factor == 1:
        return (principal / n).quantize(TWO_PLACES, ROUND_HALF_UP)

    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    payment = principal * (r * factor) / (factor - 1)
    return payment.quantize(TWO_PLACES, ROUND_HALF_UP)


def loan_from_payment(payment: Decimal, annual_rate_pct: Decimal, term_years: int) -> Decimal:
    """Largest loan a given monthly P&I payment amortizes over the term.

    A non-positive payment supports no loan.
    """
    if payment <= 0 or term_years <= 0:
        return Decimal("0")

    n = term_years * 12
    r = _monthly_rate(annual_rate_pct)
    factor = (1 + r) ** n
    if factor == 1:
        return (payment * n).quantize(TWO_PLACES, ROUND_HALF_UP)

    loan = payment * (factor - 1) / (r * factor)
    return loan.quantize(TWO_PLACES, ROUND_HALF_UP)


def amortization_schedule(
    principal: Decimal,
    annual_rate_pct: Decimal,
    term_years: int,
    months: int | None = None,
) -> list[AmortizationPayment]:
    """Generate the first `months` rows (default: full term) of a loan.

    Interest is rounded to cents each period; the final payment is trimmed so
    the balance never goes negative.
    """
    pmt = monthly_payment(principal, annual_rate_pct, term_years)
    r = _monthly_rate(annual_rate_pct)
    n_periods = months if months is not None else term_years * 12

    rows: list[AmortizationPayment] = []
    balance = principal

    for period in range(1, n_periods + 1):
        interest = (balance * r).quantize(TWO_PLACES, ROUND_HALF_UP)
        principal_paid = pmt - interest

        if principal_paid > balance:
            principal_paid = balance

        balance -= principal_paid

        rows.append(AmortizationPayment(
            period=period,
            principal=principal_paid,
            interest=interest,
            balance=balance.quantize(TWO_PLACES, ROUND_HALF_UP),
        ))

    return rows
