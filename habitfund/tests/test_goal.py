from __future__ import annotations

from datetime import date, timedelta

import pytest

from habitfund.core.investment import (
    GOAL_HORIZON_YEARS,
    date_after_years,
    future_value_with_contributions,
    goal_achievement_date,
    years_to_goal,
)


def balance(savings: float, daily: float, rate: float, years: float) -> float:
    return future_value_with_contributions(savings, daily, 365, rate, 12, years)


def test_goal_already_met_is_zero_years():
    assert years_to_goal(current_savings=1000, daily_savings_rate=10, goal_amount=500, annual_rate=10) == 0


def test_goal_equal_to_savings_is_zero_years():
    assert years_to_goal(1000, 10, 1000, 10) == 0


@pytest.mark.parametrize("daily", [0.0, -5.0])
def test_goal_unreachable_without_savings(daily):
    assert years_to_goal(current_savings=0, daily_savings_rate=daily, goal_amount=1000, annual_rate=10) is None


def test_bisection_converges_to_crossing():
    years = years_to_goal(current_savings=0, daily_savings_rate=100, goal_amount=50000, annual_rate=10)

    assert years is not None
    assert balance(0, 100, 10, years) >= 50000
    assert balance(0, 100, 10, years - 0.01) < 50000
    # 36,500 a year plus a little interest
    assert 1.2 < years < 1.4


def test_zero_rate_goal_is_linear():
    # 10/day with no interest needs 3650 in exactly a year
    years = years_to_goal(0, 10, 3650, 0)

    assert years is not None
    assert 1.0 <= years <= 1.01


def test_goal_beyond_window_reports_upper_bound():
    years = years_to_goal(0, 0.01, 1e12, 1)

    assert years == 100.0


def test_achievement_date_adds_whole_days():
    today = date(2026, 1, 1)
    years = years_to_goal(0, 100, 50000, 10)

    when = goal_achievement_date(0, 100, 50000, 10, reference_date=today)

    assert when == today + timedelta(days=int(years * 365))


def test_achievement_date_when_goal_met_is_reference_date():
    today = date(2026, 10, 19)

    assert goal_achievement_date(5000, 10, 100, 10, reference_date=today) == today


def test_achievement_date_none_when_unreachable():
    assert goal_achievement_date(0, 0, 1000, 10, reference_date=date(2026, 1, 1)) is None


def test_achievement_date_none_beyond_a_century():
    assert goal_achievement_date(0, 0.01, 1e12, 1, reference_date=date(2026, 1, 1)) is None


def test_goal_solver_treats_overflowing_balance_as_reached():
    # 5000% a year overflows a float long before the 100-year upper bound
    years = years_to_goal(current_savings=0, daily_savings_rate=100, goal_amount=50000, annual_rate=5000)

    assert years is not None
    assert 0 < years < 0.5
    assert balance(0, 100, 5000, years) >= 50000


def test_achievement_date_none_past_last_calendar_date():
    when = goal_achievement_date(0, 100, 50000, 10, reference_date=date(9999, 12, 1))

    assert when is None


def test_date_after_years_skips_window_edge():
    assert date_after_years(GOAL_HORIZON_YEARS, date(2026, 1, 1)) is None
    assert date_after_years(None, date(2026, 1, 1)) is None
    assert date_after_years(1.0, date(2026, 1, 1)) == date(2027, 1, 1)
