"""Fixed underwriting policy for the rent-to-own program.

These values are program policy, not derived quantities. Percentages are
expressed in percent units (20 means 20%) unless the name ends in _RATE.
"""

from decimal import Decimal

# PMI: 0.75%/yr of the loan when less than 20% is put down
PMI_ANNUAL_RATE = Decimal("0.0075")
PMI_DOWN_PAYMENT_THRESHOLD = Decimal("20")

# Stress test: current rate + 2 points, never below 5.25%
STRESS_TEST_BUFFER = Decimal("2")
STRESS_TEST_FLOOR = Decimal("5.25")
STRESS_TEST_MAX_DTI = Decimal("44")

# Defaults applied when the caller leaves a cost blank
DEFAULT_INSURANCE_RATE = Decimal("0.0035")  # annual, of property value
DEFAULT_MAINTENANCE_PCT = Decimal("1.5")
DEFAULT_PROPERTY_TAX_PCT = Decimal("1.2")
DEFAULT_APPRECIATION_PCT = Decimal("3")

# Max affordable price is sized off a 28% front-end ratio
MAX_FRONT_END_DTI = Decimal("28")

EQUITY_HORIZON_MONTHS = 36

# ---- Qualification score ----
# Deductions are additive from MAX_SCORE; the clamp happens once at the end.

DTI_NO_DEDUCTION = Decimal("28")
DTI_MODERATE = Decimal("36")
DTI_HIGH = Decimal("43")
DTI_MODERATE_COEFFICIENT = Decimal("2.5")
DTI_HIGH_BASE = Decimal("20")
DTI_HIGH_COEFFICIENT = Decimal("2.85")
DTI_EXCESSIVE_BASE = Decimal("40")
DTI_EXCESSIVE_COEFFICIENT = Decimal("2")

CREDIT_EXCELLENT = 740
CREDIT_GOOD = 680
CREDIT_FAIR = 620
CREDIT_COEFFICIENT = Decimal("0.167")
CREDIT_FAIR_BASE = Decimal("10")
CREDIT_POOR_DEDUCTION = Decimal("20")

DOWN_PAYMENT_FULL = Decimal("20")
DOWN_PAYMENT_PARTIAL = Decimal("10")
DOWN_PAYMENT_COEFFICIENT = Decimal("1")
DOWN_PAYMENT_LOW_BASE = Decimal("10")

MONTHS_NO_DEDUCTION = 24
MONTHS_MODERATE = 36
MONTHS_LONG = 48
MONTHS_COEFFICIENT = Decimal("0.83")
MONTHS_LONG_BASE = Decimal("10")
MONTHS_EXCESSIVE_DEDUCTION = Decimal("20")

MAX_SCORE = Decimal("100")
MIN_SCORE = Decimal("0")

# ---- Assessment labels (first match wins) ----
EXCELLENT_MIN_SCORE = 85
EXCELLENT_MAX_MONTHS = 24
VERY_GOOD_MIN_SCORE = 70
VERY_GOOD_MAX_MONTHS = 36
GOOD_MIN_SCORE = 60
GOOD_MAX_BACK_END = Decimal("43")
FAIR_MIN_SCORE = 50
