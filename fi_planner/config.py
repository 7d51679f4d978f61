"""Runtime settings read from the environment.

Env vars:
  FREEDOM_PCT_CEILING=100     -> upper clamp for the freedom percentage
  FREEDOM_SEARCH_YEARS=50     -> how far ahead the independence search looks
  FREEDOM_DISPLAY_YEARS=20    -> how many years the freedom chart shows
  FREEDOM_PORT=8000           -> port for the development server
"""
from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass

from .data_model.constants import FREEDOM_DISPLAY_YEARS, FREEDOM_PCT_CEILING, INDEPENDENCE_SEARCH_YEARS

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8000


@dataclass(frozen=True)
class PlannerSettings:
    pct_ceiling: float = FREEDOM_PCT_CEILING
    search_years: int = INDEPENDENCE_SEARCH_YEARS
    display_years: int = FREEDOM_DISPLAY_YEARS
    port: int = DEFAULT_PORT


def _env_number(name: str, default, cast, minimum):
    raw = os.getenv(name, "")
    if not str(raw).strip():
        return default
    try:
        value = cast(raw)
    except (TypeError, ValueError):
        logger.warning("Ignoring %s=%r: not a number, using %s", name, raw, default)
        return default
    if not (math.isfinite(value) and value >= minimum):
        logger.warning("Ignoring %s=%r: out of range (min %s), using %s", name, raw, minimum, default)
        return default
    return value


def load_settings() -> PlannerSettings:
    return PlannerSettings(
        pct_ceiling=_env_number("FREEDOM_PCT_CEILING", FREEDOM_PCT_CEILING, float, 1.0),
        search_years=_env_number("FREEDOM_SEARCH_YEARS", INDEPENDENCE_SEARCH_YEARS, int, 1),
        display_years=_env_number("FREEDOM_DISPLAY_YEARS", FREEDOM_DISPLAY_YEARS, int, 1),
        port=_env_number("FREEDOM_PORT", DEFAULT_PORT, int, 1),
    )
