"""Figures for the future-value simulator and the dashboard projection cards."""

from __future__ import annotations

from typing import Dict, List, Sequence

from pydantic import BaseModel

from habitfund.core.investment import (
    DAYS_PER_YEAR,
    MONTHS_PER_YEAR,
    ProjectionDataPoint,
    future_value,
    future_value_with_contributions,
    generate_projection,
)

DEFAULT_MILESTONES = (5, 10, 20)
# years gained in the "start earlier" comparison
HEAD_START_YEARS = 5


class SimulationSummary(BaseModel):
    time_horizon: float
    annual_rate: float
    final_value: float
    total_contributions: float
    interest_earned: float
    yearly_savings: float
    start_earlier_bonus: float
    doubling_years: int
    one_year_growth: float
    milestones: Dict[int, float]
    projection: List[ProjectionDataPoint]


def rule_of_72(annual_rate: float) -> int:
    """Whole years for money to double at ``annual_rate`` percent (rates below 1% count as 1%)."""
    return 72 // int(max(1.0, annual_rate))


def one_year_growth(total_saved: float, annual_rate: float) -> float:
    """Interest the current savings would earn over the next year, compounded monthly."""
    return future_value(total_saved, annual_rate, MONTHS_PER_YEAR, 1.0) - total_saved


def _balance_after(
    current_savings: float,
    daily_savings_rate: float,
    annual_rate: float,
    years: float,
) -> float:
    return future_value_with_contributions(
        principal=current_savings,
        regular_contribution=daily_savings_rate,
        contribution_frequency=DAYS_PER_YEAR,
        annual_rate=annual_rate,
        compounding_frequency=MONTHS_PER_YEAR,
        years=years,
    )


def milestones(
    current_savings: float,
    daily_savings_rate: float,
    annual_rate: float,
    horizons: Sequence[int] = DEFAULT_MILESTONES,
) -> Dict[int, float]:
    return {
        horizon: _balance_after(current_savings, daily_savings_rate, annual_rate, float(horizon))
        for horizon in horizons
    }


def simulate(
    current_savings: float,
    daily_savings_rate: float,
    annual_rate: float,
    time_horizon: float,
    data_points_count: int = 20,
) -> SimulationSummary:
    """
    Build everything the simulator screen shows for one slider position.

    The chart series covers whole years only (``int(time_horizon)``); the
    headline figures use the exact, possibly fractional, horizon.
    """
    final_value = _balance_after(current_savings, daily_savings_rate, annual_rate, time_horizon)
    total_contributions = current_savings + daily_savings_rate * DAYS_PER_YEAR * time_horizon
    earlier = _balance_after(
        current_savings, daily_savings_rate, annual_rate, time_horizon + HEAD_START_YEARS
    )

    return SimulationSummary(
        time_horizon=time_horizon,
        annual_rate=annual_rate,
        final_value=final_value,
        total_contributions=total_contributions,
        interest_earned=final_value - total_contributions,
        yearly_savings=daily_savings_rate * DAYS_PER_YEAR,
        start_earlier_bonus=earlier - final_value,
        doubling_years=rule_of_72(annual_rate),
        one_year_growth=one_year_growth(current_savings, annual_rate),
        milestones=milestones(current_savings, daily_savings_rate, annual_rate),
        projection=generate_projection(
            current_savings,
            daily_savings_rate,
            annual_rate,
            int(time_horizon),
            data_points_count,
        ),
    )
