from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List

import pandas as pd

from ..engine.normalize import parse_currency, parse_percentage, parse_years
from .constants import (
    DEFAULT_CONTRIBUTION,
    DEFAULT_HORIZON_YEARS,
    DEFAULT_NET_WORTH_GROWTH_PCT,
    GROWTH_RATE_MAX,
    HORIZON_MAX_YEARS,
    HORIZON_MIN_YEARS,
)
from .items import Totals


@dataclass
class ProjectionConfig:
    growth_rate_pct: float = DEFAULT_NET_WORTH_GROWTH_PCT
    horizon_years: int = DEFAULT_HORIZON_YEARS
    periodic_contribution: float = DEFAULT_CONTRIBUTION

    @classmethod
    def from_raw(cls, growth_rate: Any = None, horizon: Any = None, contribution: Any = None) -> "ProjectionConfig":
        """Clamp raw form values into their domains; ``None`` keeps the default."""
        return cls(
            growth_rate_pct=(
                DEFAULT_NET_WORTH_GROWTH_PCT if growth_rate is None else parse_percentage(growth_rate, GROWTH_RATE_MAX)
            ),
            horizon_years=(
                DEFAULT_HORIZON_YEARS
                if horizon is None
                else parse_years(horizon, HORIZON_MIN_YEARS, HORIZON_MAX_YEARS)
            ),
            periodic_contribution=DEFAULT_CONTRIBUTION if contribution is None else parse_currency(contribution),
        )


@dataclass(frozen=True)
class ProjectionPoint:
    period_index: int
    tracked_value: float
    target_value: float


@dataclass(frozen=True)
class ScorecardResult:
    progress_pct: float
    independence_period: int | None = None


@dataclass
class NetWorthPlan:
    totals: Totals
    config: ProjectionConfig
    projection: List[float] = field(default_factory=list)
    asset_breakdown: pd.DataFrame = field(default_factory=pd.DataFrame)
    liability_breakdown: pd.DataFrame = field(default_factory=pd.DataFrame)


@dataclass
class FreedomPlan:
    lifestyle_cost: float
    passive_income: float
    growth_rate_pct: float
    scorecard: ScorecardResult
    points: List[ProjectionPoint] = field(default_factory=list)
