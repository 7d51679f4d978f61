import math

import pytest

from fi_planner.engine.normalize import (
    clamp_slider_value,
    parse_currency,
    parse_percentage,
    parse_years,
    slider_fill_pct,
)


@pytest.mark.parametrize("raw", ["abc", "", "   ", "--5", None, True, float("nan"), float("inf"), 10**400])
def test_parse_currency_degrades_malformed_input_to_zero(raw):
    assert parse_currency(raw) == 0.0


def test_parse_currency_floors_negative_values():
    assert parse_currency("-500") == 0.0
    assert parse_currency(-42.5) == 0.0


def test_parse_currency_strips_symbols_and_separators():
    assert parse_currency("$1,250.50") == 1250.5
    assert parse_currency("1.2.3") == 1.2
    assert parse_currency(".5") == 0.5
    assert parse_currency(1_421_000) == 1_421_000.0


def test_parse_currency_only_honours_a_leading_minus():
    assert parse_currency("1-000") == 1000.0
    assert parse_currency("abc-5") == 5.0
    assert parse_currency("-$500") == 0.0
    assert parse_currency("  -500") == 0.0


def test_parse_currency_has_no_upper_bound():
    assert parse_currency("25,000,000") == 25_000_000.0


def test_parse_percentage_clamps_to_call_site_bound():
    assert parse_percentage("150%") == 100.0
    assert parse_percentage("20", upper=15.0) == 15.0
    assert parse_percentage("7.5%", upper=15.0) == 7.5
    assert parse_percentage("-3") == 0.0
    assert parse_percentage("n/a") == 0.0


def test_parse_years_rounds_and_clamps():
    assert parse_years("3", 5, 50) == 5
    assert parse_years("70", 5, 50) == 50
    assert parse_years("12.6", 5, 50) == 13
    assert parse_years("abc", 5, 50) == 5


def test_slider_projection_does_not_touch_stored_value():
    stored = parse_currency("2,000,000")

    shown = clamp_slider_value(stored, 1_000_000.0)

    assert shown == 1_000_000.0
    assert stored == 2_000_000.0


def test_slider_helpers_guard_bad_maximum_and_values():
    assert clamp_slider_value(float("nan"), 500_000.0) == 0.0
    assert clamp_slider_value(100.0, 0.0) == 0.0
    assert slider_fill_pct(250_000.0, 500_000.0) == 50.0
    assert slider_fill_pct(900_000.0, 500_000.0) == 100.0
    assert slider_fill_pct(10.0, math.inf) == 0.0
