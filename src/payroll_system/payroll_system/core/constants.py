"""Labor-law constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

# Salary divisor. Always 26, regardless of the calendar month length.
WORKING_DAYS_PER_MONTH = 26
DEFAULT_WORKING_HOURS_PER_DAY = 8

OT_MULTIPLIER_NORMAL = Decimal("1.25")
OT_MULTIPLIER_FRIDAY = Decimal("1.50")
OT_MULTIPLIER_HOLIDAY = Decimal("2.00")

REHAB_DEPARTMENT = "rehab"
REHAB_INDIRECT_OT_FACTOR = Decimal("0.70")

FOOD_ALLOWANCE_ELIGIBLE_CATEGORIES = ("indirect",)
FOOD_ALLOWANCE_ELIGIBLE_ACCOMMODATIONS = ("own",)

INDEMNITY_YEARS_THRESHOLD = 5
INDEMNITY_DAYS_FIRST_TIER = 15
INDEMNITY_DAYS_SECOND_TIER = 30
INDEMNITY_DAYS_IN_MONTH = 30
DAYS_PER_YEAR = 365

DEFAULT_DEDUCTIONS = Decimal("0")

MONTH_FORMAT = "MM-YYYY"
COMMENT_SEPARATOR = "; "
