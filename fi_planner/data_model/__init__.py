from .base import ColumnDefinition, TableModel
from .items import LineItem, Totals, dataframe_to_line_items, line_items_from_rows
from .plan import FreedomPlan, NetWorthPlan, ProjectionConfig, ProjectionPoint, ScorecardResult
from .table import AssetTableModel, LiabilityTableModel

__all__ = [
    "AssetTableModel",
    "ColumnDefinition",
    "FreedomPlan",
    "LiabilityTableModel",
    "LineItem",
    "NetWorthPlan",
    "ProjectionConfig",
    "ProjectionPoint",
    "ScorecardResult",
    "TableModel",
    "Totals",
    "dataframe_to_line_items",
    "line_items_from_rows",
]
