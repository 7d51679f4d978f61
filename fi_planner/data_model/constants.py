from __future__ import annotations

from typing import Dict

ASSET_CATALOG: tuple[str, ...] = ("Cash", "Stocks & ETFs", "Property", "Super", "Other")
LIABILITY_CATALOG: tuple[str, ...] = ("Mortgage", "Credit Card", "Personal Loans", "Margin Loan", "Other")

# Slider maxima only bound the display projection of a value, never the stored value.
ASSET_SLIDER_MAX: Dict[str, float] = {
    "Cash": 1_000_000.0,
    "Property": 10_000_000.0,
}
DEFAULT_ASSET_SLIDER_MAX = 5_000_000.0
LIABILITY_SLIDER_MAX = 5_000_000.0
INCOME_SLIDER_MAX = 500_000.0
CONTRIBUTION_SLIDER_MAX = 500_000.0

PERCENT_MAX = 100.0
GROWTH_RATE_MIN = 0.0
GROWTH_RATE_MAX = 15.0
HORIZON_MIN_YEARS = 5
HORIZON_MAX_YEARS = 50

DEFAULT_NET_WORTH_GROWTH_PCT = 6.0
DEFAULT_PASSIVE_GROWTH_PCT = 7.0
DEFAULT_HORIZON_YEARS = 20
DEFAULT_CONTRIBUTION = 0.0

FREEDOM_DISPLAY_YEARS = 20
INDEPENDENCE_SEARCH_YEARS = 50
FREEDOM_PCT_CEILING = 100.0
