"""Kuwait end-of-service indemnity.

First 5 years accrue 15 days' salary per year (15/30 of a month), every year
beyond that a full month (30/30).
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from ..common.money import ZERO
from ..core.constants import (
    DAYS_PER_YEAR,
    INDEMNITY_DAYS_FIRST_TIER,
    INDEMNITY_DAYS_IN_MONTH,
    INDEMNITY_DAYS_SECOND_TIER,
    INDEMNITY_YEARS_THRESHOLD,
)
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class IndemnityBreakdown:
    years_of_service: Decimal
    first_tier: Decimal
    second_tier: Decimal

    @property
    def total(self) -> Decimal:
        return self.first_tier + self.second_tier


def years_of_service(date_of_joining: date, today: date) -> Decimal:
    """Calendar days / 365, no leap-year correction."""
    if date_of_joining is None:
        raise ValidationError("date_of_joining is required")
    days = (today - date_of_joining).days
    return Decimal(days) / DAYS_PER_YEAR


def indemnity_breakdown(basic_salary: Decimal, years: Decimal) -> IndemnityBreakdown:
    first_rate = basic_salary * INDEMNITY_DAYS_FIRST_TIER / INDEMNITY_DAYS_IN_MONTH
    second_rate = basic_salary * INDEMNITY_DAYS_SECOND_TIER / INDEMNITY_DAYS_IN_MONTH

    if years <= INDEMNITY_YEARS_THRESHOLD:
        return IndemnityBreakdown(years_of_service=years, first_tier=first_rate * years, second_tier=ZERO)

    return IndemnityBreakdown(
        years_of_service=years,
        first_tier=first_rate * INDEMNITY_YEARS_THRESHOLD,
        second_tier=second_rate * (years - INDEMNITY_YEARS_THRESHOLD),
    )


def indemnity_amount(basic_salary: Decimal, years: Decimal) -> Decimal:
    return indemnity_breakdown(basic_salary, years).total
