from __future__ import annotations

import math

from ..data_model import ScorecardResult
from ..data_model.constants import FREEDOM_PCT_CEILING, INDEPENDENCE_SEARCH_YEARS
from .resolver import NOT_FOUND, resolve_independence


def progress_pct(current: float, target: float, ceiling: float = FREEDOM_PCT_CEILING) -> float:
    """Percent of ``target`` reached, rounded half-up and clamped to ``[0, ceiling]``."""
    if not all(math.isfinite(x) for x in (current, target, ceiling)) or target <= 0:
        return 0.0
    ratio = current / target * 100.0
    if not math.isfinite(ratio):
        return 0.0
    return max(0.0, min(float(ceiling), float(math.floor(ratio + 0.5))))


def build_scorecard(
    current: float,
    target: float,
    growth_rate_pct: float,
    ceiling: float = FREEDOM_PCT_CEILING,
    max_periods: int = INDEPENDENCE_SEARCH_YEARS,
) -> ScorecardResult:
    period = resolve_independence(current, target, growth_rate_pct, max_periods)
    return ScorecardResult(
        progress_pct=progress_pct(current, target, ceiling),
        independence_period=None if period is NOT_FOUND else period,
    )
