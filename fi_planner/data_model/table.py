from __future__ import annotations

from typing import List

from .base import ColumnDefinition, TableModel
from .constants import (
    ASSET_CATALOG,
    ASSET_SLIDER_MAX,
    DEFAULT_ASSET_SLIDER_MAX,
    LIABILITY_CATALOG,
    LIABILITY_SLIDER_MAX,
)


def _asset_defaults() -> List[dict[str, float | str]]:
    return [
        {
            "Name": name,
            "Value": 0.0,
            "Slider Max": ASSET_SLIDER_MAX.get(name, DEFAULT_ASSET_SLIDER_MAX),
        }
        for name in ASSET_CATALOG
    ]


def _liability_defaults() -> List[dict[str, float | str]]:
    return [{"Name": name, "Value": 0.0, "Slider Max": LIABILITY_SLIDER_MAX} for name in LIABILITY_CATALOG]


def _line_item_columns(step: float) -> List[ColumnDefinition]:
    return [
        ColumnDefinition("Name", "Name"),
        ColumnDefinition(
            "Value",
            "Amount (USD)",
            kind="currency",
            default=0.0,
            min_value=0.0,
            step=step,
        ),
    ]


class AssetTableModel(TableModel):
    """Schema + fixed slots for the assets panel."""

    def __init__(self) -> None:
        super().__init__("assets", _line_item_columns(step=1000.0), _asset_defaults())


class LiabilityTableModel(TableModel):
    """Schema + fixed slots for the liabilities panel."""

    def __init__(self) -> None:
        super().__init__("liabilities", _line_item_columns(step=1000.0), _liability_defaults())
