from __future__ import annotations

import types
from math import isclose

import pytest

from habitfund.core.investment import (
    future_value_with_contributions,
    generate_projection,
    iter_projection,
)


@pytest.mark.parametrize("years", [0, 1, 7, 20, 21, 39, 40, 41, 99])
@pytest.mark.parametrize("count", [1, 3, 20, 50])
def test_projection_ends_at_requested_year(years, count):
    points = generate_projection(1000, 5, 10, years, count)

    assert points[0].year == 0
    assert points[-1].year == years


@pytest.mark.parametrize("years", [0, 13, 45])
def test_interest_is_value_minus_contributions_exactly(years):
    for point in generate_projection(2500, 7.3, 11.5, years):
        assert point.interest_earned == point.value_with_interest - point.contributions


def test_years_zero_gives_single_point():
    points = generate_projection(400, 10, 10, 0)

    assert len(points) == 1
    assert points[0].year == 0
    assert points[0].contributions == 400
    assert points[0].value_with_interest == 400
    assert points[0].interest_earned == 0


def test_stride_samples_every_step_years():
    # 45 // 20 = 2, so samples at 0, 2, ..., 44 and then 45 appended
    years = [p.year for p in generate_projection(0, 10, 8, 45)]

    assert years[:3] == [0, 2, 4]
    assert years[-2:] == [44, 45]
    assert len(years) == 24


def test_no_duplicate_final_year_when_stride_lands_on_it():
    years = [p.year for p in generate_projection(0, 10, 8, 40)]

    assert years == list(range(0, 41, 2))


def test_short_horizon_samples_every_year():
    years = [p.year for p in generate_projection(0, 10, 8, 7)]

    assert years == list(range(8))


def test_years_are_non_decreasing():
    years = [p.year for p in generate_projection(100, 3, 6, 77, 9)]

    assert years == sorted(years)


def test_contributions_assume_daily_deposits():
    point = generate_projection(1000, 10, 10, 3)[-1]

    assert point.year == 3
    assert isclose(point.contributions, 1000 + 10 * 365 * 3, abs_tol=1e-9)
    assert point.value_with_interest == future_value_with_contributions(1000, 10, 365, 10, 12, 3)


def test_zero_rate_projection_has_no_interest():
    for point in generate_projection(200, 4, 0, 12):
        assert isclose(point.interest_earned, 0.0, abs_tol=1e-9)


def test_non_positive_count_is_treated_as_one():
    years = [p.year for p in generate_projection(0, 1, 5, 6, 0)]

    assert years == [0, 6]


def test_iter_projection_is_lazy_and_matches_list():
    series = iter_projection(500, 2, 9, 30)

    assert isinstance(series, types.GeneratorType)
    assert list(series) == generate_projection(500, 2, 9, 30)
