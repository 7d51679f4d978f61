from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping

import pandas as pd

from ..engine.normalize import parse_currency


@dataclass
class LineItem:
    """One asset or liability slot. ``value`` is never negative."""

    name: str
    value: float = 0.0

    @classmethod
    def from_raw(cls, name: Any, raw_value: Any) -> "LineItem":
        return cls(name=str(name or "").strip(), value=parse_currency(raw_value))


@dataclass
class Totals:
    total_assets: float
    total_liabilities: float
    net_worth: float


def line_items_from_rows(rows: Iterable[Mapping[str, Any]] | None, catalog: Iterable[str]) -> List[LineItem]:
    """Fill the catalog slots from ``{"name", "value"}`` rows.

    Slots missing from ``rows`` stay at zero. Rows naming something outside the
    catalog are appended after the catalog slots, in the order given.
    """
    items = [LineItem(name=name) for name in catalog]
    by_name = {item.name: item for item in items}
    for row in rows or []:
        name = str(row.get("name", row.get("Name", "")) or "").strip()
        if not name:
            continue
        value = parse_currency(row.get("value", row.get("Value", 0.0)))
        if name in by_name:
            by_name[name].value = value
        else:
            item = LineItem(name=name, value=value)
            by_name[name] = item
            items.append(item)
    return items


def dataframe_to_line_items(df: pd.DataFrame) -> List[LineItem]:
    items: List[LineItem] = []
    for row in df.to_dict("records"):
        name = str(row.get("Name", "")).strip()
        if not name:
            continue
        items.append(LineItem.from_raw(name, row.get("Value", 0.0)))
    return items
