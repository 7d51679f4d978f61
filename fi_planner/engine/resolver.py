from __future__ import annotations

import enum
import itertools
import math
from typing import Iterable

from ..data_model.constants import INDEPENDENCE_SEARCH_YEARS
from .projector import iter_projection


class Crossing(enum.Enum):
    NOT_FOUND = "not_found"


# Distinct from every period index, including 0.
NOT_FOUND = Crossing.NOT_FOUND


def find_crossing(tracked: Iterable[float], target: float, max_periods: int) -> int | Crossing:
    """Return the first period whose tracked value meets ``target``.

    Periods ``0..max_periods`` are searched. A target of zero or less means the
    goal is unset, so it is never reported as already reached.
    """
    if not math.isfinite(target) or target <= 0 or max_periods < 0:
        return NOT_FOUND
    for period, value in enumerate(itertools.islice(tracked, max_periods + 1)):
        if math.isfinite(value) and value >= target:
            return period
    return NOT_FOUND


def resolve_independence(
    passive_income: float,
    lifestyle_cost: float,
    growth_rate_pct: float,
    max_periods: int = INDEPENDENCE_SEARCH_YEARS,
) -> int | Crossing:
    tracked = iter_projection(passive_income, growth_rate_pct, max_periods)
    return find_crossing(tracked, lifestyle_cost, max_periods)
