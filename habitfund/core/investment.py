"""Compound-interest projection engine.

All functions are pure: they take plain numbers and return a number or a list
of ``ProjectionDataPoint`` rows. Rates are percentages (10 means 10%).

    A = P * (1 + r/n)^(n*t)

where ``P`` is the principal, ``r`` the annual rate as a decimal, ``n`` the
compounding frequency per year and ``t`` the time in years.
"""

from __future__ import annotations

import math
from datetime import date, timedelta
from typing import Iterator, List, Optional

from pydantic import BaseModel

DAYS_PER_YEAR = 365
MONTHS_PER_YEAR = 12

# goal solver search window and tolerance, in years
GOAL_HORIZON_YEARS = 100.0
GOAL_TOLERANCE_YEARS = 0.01


class InvestmentRangeError(ValueError):
    """Raised when a projection leaves the range of a float."""


class ProjectionDataPoint(BaseModel):
    year: int
    # principal + deposits, no interest
    contributions: float
    value_with_interest: float
    interest_earned: float


def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError as exc:
        raise InvestmentRangeError(
            f"growth factor {base}^{exponent} overflows; shorten the horizon or lower the rate"
        ) from exc
    except ValueError as exc:
        raise InvestmentRangeError(
            f"growth factor {base}^{exponent} is undefined for a negative base"
        ) from exc


def _finite(value: float) -> float:
    if not math.isfinite(value):
        raise InvestmentRangeError("projected value is out of range")
    return value


def future_value(
    principal: float,
    annual_rate: float,
    compounding_frequency: int = MONTHS_PER_YEAR,
    years: float = 0.0,
) -> float:
    """
    Grow a lump sum with compound interest.

    Non-positive principal or horizon returns ``principal`` unchanged.
    ``compounding_frequency`` must be at least 1.
    """
    if principal <= 0 or years <= 0:
        return principal

    rate = annual_rate / 100.0
    n = float(compounding_frequency)
    return _finite(principal * _power(1 + rate / n, n * years))


def future_value_with_contributions(
    principal: float,
    regular_contribution: float,
    contribution_frequency: int = DAYS_PER_YEAR,
    annual_rate: float = 0.0,
    compounding_frequency: int = MONTHS_PER_YEAR,
    years: float = 0.0,
) -> float:
    """
    Future value of a lump sum plus a stream of regular contributions.

    Contributions are converted to an equivalent amount per compounding
    period and grown as an ordinary annuity:

        PMT * ((1 + i)^N - 1) / i

    With a zero periodic rate the annuity degrades to ``PMT * N``.
    """
    if years <= 0:
        return principal

    n = float(compounding_frequency)
    periodic_rate = annual_rate / 100.0 / n
    total_periods = n * years
    contribution_per_period = regular_contribution * (contribution_frequency / n)

    principal_fv = future_value(principal, annual_rate, compounding_frequency, years)

    if periodic_rate == 0:
        contributions_fv = contribution_per_period * total_periods
    else:
        factor = _power(1 + periodic_rate, total_periods)
        contributions_fv = contribution_per_period * ((factor - 1) / periodic_rate)

    return _finite(principal_fv + contributions_fv)


def interest_earned(
    principal: float,
    annual_rate: float,
    compounding_frequency: int = MONTHS_PER_YEAR,
    years: float = 0.0,
) -> float:
    """Interest portion of ``future_value``."""
    return future_value(principal, annual_rate, compounding_frequency, years) - principal


def _projection_point(
    current_savings: float,
    daily_savings_rate: float,
    annual_rate: float,
    year: int,
) -> ProjectionDataPoint:
    contributions = current_savings + daily_savings_rate * DAYS_PER_YEAR * year
    with_interest = future_value_with_contributions(
        principal=current_savings,
        regular_contribution=daily_savings_rate,
        contribution_frequency=DAYS_PER_YEAR,
        annual_rate=annual_rate,
        compounding_frequency=MONTHS_PER_YEAR,
        years=float(year),
    )
    return ProjectionDataPoint(
        year=year,
        contributions=contributions,
        value_with_interest=with_interest,
        interest_earned=with_interest - contributions,
    )


def iter_projection(
    current_savings: float,
    daily_savings_rate: float,
    annual_rate: float,
    years: int,
    data_points_count: int = 20,
) -> Iterator[ProjectionDataPoint]:
    """
    Yield yearly samples of contributions vs. compounded value for a chart.

    Samples are taken every ``max(1, years // data_points_count)`` years from
    year 0. The last point is always at ``years``, even when the stride skips
    it. Savings are deposited daily and compounded monthly regardless of the
    user's compounding setting.
    """
    step = max(1, years // max(1, data_points_count))

    last_year: Optional[int] = None
    for year in range(0, years + 1, step):
        yield _projection_point(current_savings, daily_savings_rate, annual_rate, year)
        last_year = year

    if last_year != years:
        yield _projection_point(current_savings, daily_savings_rate, annual_rate, years)


def generate_projection(
    current_savings: float,
    daily_savings_rate: float,
    annual_rate: float,
    years: int,
    data_points_count: int = 20,
) -> List[ProjectionDataPoint]:
    return list(
        iter_projection(current_savings, daily_savings_rate, annual_rate, years, data_points_count)
    )


def years_to_goal(
    current_savings: float,
    daily_savings_rate: float,
    goal_amount: float,
    annual_rate: float,
) -> Optional[float]:
    """
    Years until the projected balance reaches ``goal_amount``.

    Returns 0 when the goal is already met and ``None`` when it can never be
    reached (no positive daily savings). Otherwise bisects [0, 100] years
    until the bracket is at most 0.01 years wide and returns its upper end,
    so the answer is within 0.01 years of the true crossing. Goals beyond
    the window come back as 100.
    """
    if goal_amount <= current_savings:
        return 0.0
    if daily_savings_rate <= 0:
        return None

    low = 0.0
    high = GOAL_HORIZON_YEARS

    while high - low > GOAL_TOLERANCE_YEARS:
        mid = (low + high) / 2
        try:
            value = future_value_with_contributions(
                principal=current_savings,
                regular_contribution=daily_savings_rate,
                contribution_frequency=DAYS_PER_YEAR,
                annual_rate=annual_rate,
                compounding_frequency=MONTHS_PER_YEAR,
                years=mid,
            )
        except InvestmentRangeError:
            # with a positive rate the growth factor can only overflow upward
            if annual_rate <= 0:
                raise
            value = math.inf
        if value >= goal_amount:
            high = mid
        else:
            low = mid

    return high


def date_after_years(years: Optional[float], reference_date: date) -> Optional[date]:
    """
    Calendar date ``years`` after ``reference_date``, counted in whole days.

    ``None`` when the goal is unreachable, not within a century, or would
    fall past the last representable date.
    """
    if years is None or years >= GOAL_HORIZON_YEARS:
        return None

    days = int(years * DAYS_PER_YEAR)
    try:
        return reference_date + timedelta(days=days)
    except OverflowError:
        return None


def goal_achievement_date(
    current_savings: float,
    daily_savings_rate: float,
    goal_amount: float,
    annual_rate: float,
    reference_date: date,
) -> Optional[date]:
    """Calendar date the goal is reached, or ``None`` if not within a century."""
    years = years_to_goal(current_savings, daily_savings_rate, goal_amount, annual_rate)
    return date_after_years(years, reference_date)


__all__ = [
    "DAYS_PER_YEAR",
    "MONTHS_PER_YEAR",
    "GOAL_HORIZON_YEARS",
    "GOAL_TOLERANCE_YEARS",
    "InvestmentRangeError",
    "ProjectionDataPoint",
    "future_value",
    "future_value_with_contributions",
    "interest_earned",
    "iter_projection",
    "generate_projection",
    "years_to_goal",
    "date_after_years",
    "goal_achievement_date",
]
