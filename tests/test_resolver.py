import math

from fi_planner.engine.projector import project
from fi_planner.engine.resolver import NOT_FOUND, find_crossing, resolve_independence


def test_find_crossing_returns_first_period_at_or_above_target():
    assert find_crossing([50, 90, 110, 130], 100, 50) == 2
    assert find_crossing([50, 100, 130], 100, 50) == 1


def test_find_crossing_reports_period_zero_distinctly():
    result = find_crossing([150.0], 100.0, 10)

    assert result == 0
    assert result is not NOT_FOUND


def test_zero_or_negative_target_is_never_reached():
    assert find_crossing([0, 10, 20], 0, 50) is NOT_FOUND
    assert find_crossing([0, 10, 20], -5, 50) is NOT_FOUND
    assert find_crossing([0, 10, 20], math.nan, 50) is NOT_FOUND


def test_find_crossing_respects_search_bound():
    assert find_crossing([0, 0, 0, 200], 100, 2) is NOT_FOUND
    assert find_crossing([0, 0, 0, 200], 100, 3) == 3


def test_find_crossing_accepts_lazy_sequences():
    tracked = (value for value in [1, 2, 3, 500])

    assert find_crossing(tracked, 3, 10) == 2


def test_not_found_is_not_a_number():
    assert NOT_FOUND != 0
    assert not isinstance(NOT_FOUND, int)


def test_independence_at_seven_percent_doubles_in_eleven_years():
    assert project(50_000.0, 7.0, 0) == [50_000.0]

    period = resolve_independence(50_000.0, 100_000.0, 7.0)

    assert period == math.ceil(math.log(2) / math.log(1.07)) == 11


def test_independence_on_exact_threshold_is_not_reported_late():
    assert project(10_000.0, 4.0, 2)[-1] >= 10_816.0

    assert resolve_independence(10_000, 10_816, 4.0) == 2
    assert resolve_independence(10_000, 11_664, 8.0) == 2


def test_independence_without_growth_is_not_found():
    assert resolve_independence(50_000.0, 100_000.0, 0.0) is NOT_FOUND
    assert resolve_independence(0.0, 100_000.0, 7.0) is NOT_FOUND


def test_independence_beyond_search_bound_is_not_found():
    assert resolve_independence(1_000.0, 100_000.0, 7.0, max_periods=50) is NOT_FOUND
