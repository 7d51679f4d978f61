"""Pure entry points for the two calculators.

Callers re-run these on every input change; no state survives between calls.
"""
from __future__ import annotations

from typing import Any, Iterable

from ..data_model import FreedomPlan, LineItem, NetWorthPlan, ProjectionConfig
from ..data_model.constants import (
    FREEDOM_DISPLAY_YEARS,
    FREEDOM_PCT_CEILING,
    GROWTH_RATE_MAX,
    INDEPENDENCE_SEARCH_YEARS,
)
from .aggregate import breakdown, compute_totals
from .normalize import parse_currency, parse_percentage
from .projector import project, projection_points
from .scorecard import build_scorecard


def compute_net_worth_plan(
    assets: Iterable[LineItem],
    liabilities: Iterable[LineItem],
    config: ProjectionConfig | None = None,
) -> NetWorthPlan:
    config = config or ProjectionConfig()
    assets = list(assets)
    liabilities = list(liabilities)
    totals = compute_totals(assets, liabilities)
    # A negative net worth compounds as a growing debt, same as a positive one grows.
    projection = project(
        totals.net_worth,
        config.growth_rate_pct,
        config.horizon_years,
        config.periodic_contribution,
    )
    return NetWorthPlan(
        totals=totals,
        config=config,
        projection=projection,
        asset_breakdown=breakdown(assets),
        liability_breakdown=breakdown(liabilities),
    )


def compute_freedom_plan(
    lifestyle_cost: Any,
    passive_income: Any,
    growth_rate_pct: Any,
    display_years: int = FREEDOM_DISPLAY_YEARS,
    max_periods: int = INDEPENDENCE_SEARCH_YEARS,
    ceiling: float = FREEDOM_PCT_CEILING,
) -> FreedomPlan:
    """Score passive income against lifestyle cost and chart both lines.

    The chart covers ``display_years`` while the independence search runs to
    ``max_periods``; the two horizons are deliberately separate.
    """
    cost = parse_currency(lifestyle_cost)
    income = parse_currency(passive_income)
    rate = parse_percentage(growth_rate_pct, GROWTH_RATE_MAX)

    scorecard = build_scorecard(income, cost, rate, ceiling=ceiling, max_periods=max_periods)
    points = projection_points(project(income, rate, display_years), cost)
    return FreedomPlan(
        lifestyle_cost=cost,
        passive_income=income,
        growth_rate_pct=rate,
        scorecard=scorecard,
        points=points,
    )
