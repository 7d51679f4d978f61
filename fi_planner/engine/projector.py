"""Year-indexed compounding projections.

One formula covers every chart in the app: a starting balance compounding at
``growth_rate_pct`` plus an ordinary annuity of ``periodic_contribution`` paid
at the end of each period. A flat target line is the same projection with a
zero rate and no contribution.
"""
from __future__ import annotations

import logging
import math
from typing import Iterable, Iterator, List, Mapping, Sequence

import pandas as pd

from ..data_model import ProjectionPoint

logger = logging.getLogger(__name__)


def _compound(rate: float, period: int) -> tuple[float, float]:
    """Return ``(1 + rate) ** period`` and the annuity factor ``((1 + rate) ** period - 1) / rate``."""
    if rate == 0:
        return 1.0, float(period)
    try:
        factor = (1.0 + rate) ** period
    except OverflowError:
        return math.nan, math.nan
    try:
        # expm1/log1p keep the annuity factor accurate as rate approaches zero.
        annuity = math.expm1(period * math.log1p(rate)) / rate
    except (OverflowError, ValueError):
        annuity = math.nan
    return factor, annuity


def iter_projection(
    initial_value: float,
    growth_rate_pct: float,
    periods: int,
    periodic_contribution: float = 0.0,
) -> Iterator[float]:
    rate = growth_rate_pct / 100.0
    for period in range(max(0, int(periods)) + 1):
        factor, annuity = _compound(rate, period)
        value = initial_value * factor
        if periodic_contribution:
            value += periodic_contribution * annuity
        if not math.isfinite(value):
            logger.debug("Projection value at period %d is not finite, using 0", period)
            value = 0.0
        yield value


def project(
    initial_value: float,
    growth_rate_pct: float,
    periods: int,
    periodic_contribution: float = 0.0,
) -> List[float]:
    return list(iter_projection(initial_value, growth_rate_pct, periods, periodic_contribution))


def target_line(value: float, periods: int) -> List[float]:
    return project(value, 0.0, periods)


def projection_points(tracked: Iterable[float], target: float) -> List[ProjectionPoint]:
    return [
        ProjectionPoint(period_index=period, tracked_value=value, target_value=target)
        for period, value in enumerate(tracked)
    ]


def projection_frame(columns: Mapping[str, Sequence[float]], as_of_year: int | None = None) -> pd.DataFrame:
    """Lay named series side by side, one row per period.

    ``as_of_year`` only adds a ``Year`` column; nothing here reads the clock.
    """
    length = max((len(values) for values in columns.values()), default=0)
    records = []
    for period in range(length):
        row: dict[str, float | int | str] = {"Period": period, "Label": f"{period}y"}
        if as_of_year is not None:
            row["Year"] = as_of_year + period
        for name, values in columns.items():
            row[name] = values[period] if period < len(values) else 0.0
        records.append(row)
    return pd.DataFrame(records)
