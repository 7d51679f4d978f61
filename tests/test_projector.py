import pytest

from fi_planner.engine.projector import (
    iter_projection,
    project,
    projection_frame,
    projection_points,
    target_line,
)


def test_project_returns_one_value_per_period_inclusive():
    values = project(1000.0, 5.0, 2)

    assert values == pytest.approx([1000.0, 1050.0, 1102.5])


@pytest.mark.parametrize("rate", [0.0, 3.0, 15.0])
def test_period_zero_is_the_initial_value(rate):
    assert project(1234.5, rate, 0) == [1234.5]
    assert project(1234.5, rate, 10, periodic_contribution=500.0)[0] == 1234.5


def test_projection_strictly_increases_with_positive_rate():
    values = project(100.0, 3.0, 50)

    assert all(later > earlier for earlier, later in zip(values, values[1:]))


def test_contributions_follow_ordinary_annuity():
    values = project(0.0, 10.0, 2, periodic_contribution=100.0)

    assert values == pytest.approx([0.0, 100.0, 210.0])


def test_zero_rate_contributions_are_linear():
    assert project(0.0, 0.0, 4, periodic_contribution=250.0) == [0.0, 250.0, 500.0, 750.0, 1000.0]


def test_annuity_is_continuous_as_rate_approaches_zero():
    near_zero = project(0.0, 1e-7, 10, periodic_contribution=500.0)
    at_zero = project(0.0, 0.0, 10, periodic_contribution=500.0)

    assert near_zero == pytest.approx(at_zero, rel=1e-6)


def test_negative_start_compounds_as_debt():
    values = project(-1000.0, 10.0, 1)

    assert values == pytest.approx([-1000.0, -1100.0])


def test_overflowing_periods_degrade_to_zero():
    values = project(1.7e308, 15.0, 3)

    assert values[0] == 1.7e308
    assert values[1:] == [0.0, 0.0, 0.0]
    assert project(10.0, 1_000_000.0, 100)[-1] == 0.0


def test_nan_inputs_never_leak_into_series():
    assert project(float("nan"), 5.0, 3) == [0.0, 0.0, 0.0, 0.0]
    assert project(100.0, float("nan"), 2) == [0.0, 0.0, 0.0]


def test_projection_is_restartable():
    first = project(50_000.0, 7.0, 20, periodic_contribution=1_000.0)
    second = list(iter_projection(50_000.0, 7.0, 20, periodic_contribution=1_000.0))

    assert first == second


def test_target_line_is_constant():
    assert target_line(100_000.0, 3) == [100_000.0] * 4


def test_projection_points_pair_tracked_with_target():
    points = projection_points([10.0, 20.0], 15.0)

    assert [(p.period_index, p.tracked_value, p.target_value) for p in points] == [
        (0, 10.0, 15.0),
        (1, 20.0, 15.0),
    ]


def test_projection_frame_adds_year_only_when_anchor_given():
    without_year = projection_frame({"Net Worth": [1.0, 2.0]})
    with_year = projection_frame({"Net Worth": [1.0, 2.0]}, as_of_year=2030)

    assert "Year" not in without_year.columns
    assert list(with_year["Year"]) == [2030, 2031]
    assert list(with_year["Label"]) == ["0y", "1y"]
    assert list(with_year["Net Worth"]) == [1.0, 2.0]
