"""Qualification score (0-100) and the assessment label shown to the applicant.

Four additive deductions from 100: back-end DTI, credit score, down payment
size, and months needed to save the down payment. The coefficients are
program policy and are reproduced exactly; see rto.engine.policy.
"""

from decimal import Decimal, ROUND_HALF_UP

from rto.engine import policy as p
from rto.models.results import ScoreBreakdown


def dti_deduction(back_end_ratio: Decimal) -> Decimal:
    if back_end_ratio <= p.DTI_NO_DEDUCTION:
        return Decimal("0")
    if back_end_ratio <= p.DTI_MODERATE:
        return (back_end_ratio - p.DTI_NO_DEDUCTION) * p.DTI_MODERATE_COEFFICIENT
    if back_end_ratio <= p.DTI_HIGH:
        return p.DTI_HIGH_BASE + (back_end_ratio - p.DTI_MODERATE) * p.DTI_HIGH_COEFFICIENT
    return p.DTI_EXCESSIVE_BASE + (back_end_ratio - p.DTI_HIGH) * p.DTI_EXCESSIVE_COEFFICIENT


def credit_deduction(credit_score: int | None) -> Decimal:
    """No score on file is treated like a sub-620 score."""
    if credit_score is None or credit_score < p.CREDIT_FAIR:
        return p.CREDIT_POOR_DEDUCTION
    if credit_score >= p.CREDIT_EXCELLENT:
        return Decimal("0")
    if credit_score >= p.CREDIT_GOOD:
        return (p.CREDIT_EXCELLENT - credit_score) * p.CREDIT_COEFFICIENT
    # 10 + 60 * 0.167 overshoots the flat sub-620 deduction at exactly 620
    fair = p.CREDIT_FAIR_BASE + (p.CREDIT_GOOD - credit_score) * p.CREDIT_COEFFICIENT
    return min(fair, p.CREDIT_POOR_DEDUCTION)


def down_payment_deduction(target_down_payment: Decimal) -> Decimal:
    if target_down_payment >= p.DOWN_PAYMENT_FULL:
        return Decimal("0")
    if target_down_payment >= p.DOWN_PAYMENT_PARTIAL:
        return (p.DOWN_PAYMENT_FULL - target_down_payment) * p.DOWN_PAYMENT_COEFFICIENT
    return p.DOWN_PAYMENT_LOW_BASE + (p.DOWN_PAYMENT_PARTIAL - target_down_payment) * p.DOWN_PAYMENT_COEFFICIENT


def time_deduction(months: int) -> Decimal:
    if months <= p.MONTHS_NO_DEDUCTION:
        return Decimal("0")
    if months <= p.MONTHS_MODERATE:
        return (months - p.MONTHS_NO_DEDUCTION) * p.MONTHS_COEFFICIENT
    if months <= p.MONTHS_LONG:
        return p.MONTHS_LONG_BASE + (months - p.MONTHS_MODERATE) * p.MONTHS_COEFFICIENT
    return p.MONTHS_EXCESSIVE_DEDUCTION


def score_breakdown(
    back_end_ratio: Decimal,
    credit_score: int | None,
    target_down_payment: Decimal,
    time_to_down_payment_months: int,
) -> ScoreBreakdown:
    return ScoreBreakdown(
        dti=dti_deduction(back_end_ratio),
        credit=credit_deduction(credit_score),
        down_payment=down_payment_deduction(target_down_payment),
        time_to_down_payment=time_deduction(time_to_down_payment_months),
    )


def qualification_score(
    back_end_ratio: Decimal,
    credit_score: int | None,
    target_down_payment: Decimal,
    time_to_down_payment_months: int,
) -> int:
    """Score from 0 to 100, rounded half-up to a whole number.

    Deductions are summed first and the total is clamped once, so a large
    deduction in one factor is never partially absorbed by the bounds.
    """
    return score_from_breakdown(score_breakdown(
        back_end_ratio, credit_score, target_down_payment, time_to_down_payment_months
    ))


def score_from_breakdown(breakdown: ScoreBreakdown) -> int:
    raw = p.MAX_SCORE - breakdown.total
    clamped = max(p.MIN_SCORE, min(p.MAX_SCORE, raw))
    return int(clamped.quantize(Decimal("1"), ROUND_HALF_UP))


def assessment_label(
    score: int,
    time_to_down_payment_months: int,
    passes_stress_test: bool,
    back_end_ratio: Decimal,
) -> str:
    if (
        score >= p.EXCELLENT_MIN_SCORE
        and time_to_down_payment_months <= p.EXCELLENT_MAX_MONTHS
        and passes_stress_test
    ):
        return "Excellent"
    if (
        score >= p.VERY_GOOD_MIN_SCORE
        and time_to_down_payment_months <= p.VERY_GOOD_MAX_MONTHS
        and passes_stress_test
    ):
        return "Very Good"
    if score >= p.GOOD_MIN_SCORE and back_end_ratio <= p.GOOD_MAX_BACK_END:
        return "Good"
    if score >= p.FAIR_MIN_SCORE:
        return "Fair"
    return "Needs Improvement"
