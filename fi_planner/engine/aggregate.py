from __future__ import annotations

import math
from typing import Iterable, List

import pandas as pd

from ..data_model import LineItem, Totals

BREAKDOWN_COLUMNS = ["Name", "Value", "Share (%)"]


def sum_items(items: Iterable[LineItem]) -> float:
    return math.fsum(max(0.0, item.value) for item in items)


def net_worth(total_assets: float, total_liabilities: float) -> float:
    return total_assets - total_liabilities


def compute_totals(assets: Iterable[LineItem], liabilities: Iterable[LineItem]) -> Totals:
    total_assets = sum_items(assets)
    total_liabilities = sum_items(liabilities)
    return Totals(
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        net_worth=net_worth(total_assets, total_liabilities),
    )


def reset_items(items: Iterable[LineItem]) -> List[LineItem]:
    return [LineItem(name=item.name, value=0.0) for item in items]


def breakdown(items: Iterable[LineItem]) -> pd.DataFrame:
    """Positive slots with their share of the collection total, for pie charts."""
    rows = [{"Name": item.name, "Value": item.value} for item in items if item.value > 0]
    if not rows:
        return pd.DataFrame(columns=BREAKDOWN_COLUMNS)
    df = pd.DataFrame(rows)
    df["Share (%)"] = df["Value"] / df["Value"].sum() * 100.0
    return df
