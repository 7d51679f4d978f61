"""REST backend for the net worth and freedom calculators."""

from __future__ import annotations

import datetime
import logging
import math
from typing import Any, Dict, List

from flask import Flask, jsonify, request

from fi_planner.config import load_settings
from fi_planner.data_model import (
    AssetTableModel,
    LiabilityTableModel,
    ProjectionConfig,
    TableModel,
    line_items_from_rows,
)
from fi_planner.data_model.constants import (
    CONTRIBUTION_SLIDER_MAX,
    DEFAULT_CONTRIBUTION,
    DEFAULT_HORIZON_YEARS,
    DEFAULT_NET_WORTH_GROWTH_PCT,
    DEFAULT_PASSIVE_GROWTH_PCT,
    GROWTH_RATE_MAX,
    GROWTH_RATE_MIN,
    HORIZON_MAX_YEARS,
    HORIZON_MIN_YEARS,
    INCOME_SLIDER_MAX,
)
from fi_planner.engine.planner import compute_freedom_plan, compute_net_worth_plan
from fi_planner.engine.projector import projection_frame

logger = logging.getLogger(__name__)

app = Flask(__name__)

settings = load_settings()

ASSET_MODEL = AssetTableModel()
LIABILITY_MODEL = LiabilityTableModel()


class PayloadError(ValueError):
    """Raised when a request body has the wrong structure."""


def independence_label(period: int | None, as_of_year: int, max_periods: int) -> str:
    if period is None:
        return f"Beyond {max_periods} years"
    return str(as_of_year + period)


def _is_nan(value: Any) -> bool:
    try:
        return not math.isfinite(value)
    except (TypeError, ValueError):
        return False


def _sanitize_records(records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    clean_rows: List[Dict[str, Any]] = []
    for row in records:
        clean_rows.append({key: (None if _is_nan(value) else value) for key, value in row.items()})
    return clean_rows


def _model_payload(model: TableModel) -> Dict[str, Any]:
    columns: List[Dict[str, Any]] = []
    for col in model.columns:
        columns.append(
            {
                "field": col.field,
                "label": col.label,
                "kind": col.kind,
                "default": col.default,
                "min": col.min_value,
                "max": col.max_value,
                "step": col.step,
                "help": col.help,
            }
        )
    defaults = _sanitize_records(model.create_default_df().to_dict("records"))
    return {
        "name": model.name,
        "columns": columns,
        "defaults": defaults,
    }


def _extract_payload_value(payload: dict, *keys: str, default=None):
    for key in keys:
        if key in payload and payload[key] is not None:
            return payload[key]
    return default


def _json_body() -> dict:
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def _as_of_year(payload: dict) -> int:
    raw = _extract_payload_value(payload, "asOfYear", "as_of_year")
    if raw is None:
        return datetime.date.today().year
    if isinstance(raw, bool) or (isinstance(raw, float) and not raw.is_integer()):
        raise PayloadError("asOfYear must be an integer year.")
    try:
        return int(raw)
    except (TypeError, ValueError, OverflowError) as exc:
        raise PayloadError("asOfYear must be an integer year.") from exc


def _rows(payload: dict, *keys: str) -> list:
    rows = _extract_payload_value(payload, *keys, default=[])
    if not isinstance(rows, list):
        raise PayloadError(f"{keys[0]} must be a list.")
    return [row for row in rows if isinstance(row, dict)]


@app.after_request
def apply_cors_headers(response):
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Methods"] = "GET,POST,OPTIONS"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    return response


@app.errorhandler(PayloadError)
def handle_payload_error(exc: PayloadError):
    logger.warning("Rejected request to %s: %s", request.path, exc)
    return jsonify({"error": str(exc)}), 400


@app.get("/api/health")
def healthcheck():
    return jsonify({"status": "ok"})


@app.get("/api/schema")
def get_schema():
    payload = {
        "netWorthDefaults": {
            "growthRate": DEFAULT_NET_WORTH_GROWTH_PCT,
            "horizon": DEFAULT_HORIZON_YEARS,
            "yearlyInvestment": DEFAULT_CONTRIBUTION,
        },
        "freedomDefaults": {
            "lifestyleCost": 0.0,
            "passiveIncome": 0.0,
            "growthRate": DEFAULT_PASSIVE_GROWTH_PCT,
        },
        "bounds": {
            "growthRate": {"min": GROWTH_RATE_MIN, "max": GROWTH_RATE_MAX},
            "horizon": {"min": HORIZON_MIN_YEARS, "max": HORIZON_MAX_YEARS},
            "yearlyInvestment": {"min": 0.0, "max": CONTRIBUTION_SLIDER_MAX},
            "income": {"min": 0.0, "max": INCOME_SLIDER_MAX},
        },
        "assets": _model_payload(ASSET_MODEL),
        "liabilities": _model_payload(LIABILITY_MODEL),
        "pctCeiling": settings.pct_ceiling,
        "searchYears": settings.search_years,
    }
    return jsonify(payload)


@app.post("/api/net-worth")
def net_worth_plan():
    payload = _json_body()
    as_of_year = _as_of_year(payload)
    assets = line_items_from_rows(_rows(payload, "assets"), ASSET_MODEL.catalog())
    liabilities = line_items_from_rows(_rows(payload, "liabilities"), LIABILITY_MODEL.catalog())
    config = ProjectionConfig.from_raw(
        growth_rate=_extract_payload_value(payload, "growthRate", "growth_rate"),
        horizon=_extract_payload_value(payload, "horizon", "horizonYears"),
        contribution=_extract_payload_value(payload, "yearlyInvestment", "periodicContribution"),
    )

    plan = compute_net_worth_plan(assets, liabilities, config)
    logger.info(
        "Net worth %.2f projected over %d years at %.2f%%",
        plan.totals.net_worth,
        config.horizon_years,
        config.growth_rate_pct,
    )
    projection = projection_frame({"Net Worth": plan.projection}, as_of_year=as_of_year)
    return jsonify(
        {
            "totals": {
                "totalAssets": plan.totals.total_assets,
                "totalLiabilities": plan.totals.total_liabilities,
                "netWorth": plan.totals.net_worth,
            },
            "config": {
                "growthRate": config.growth_rate_pct,
                "horizon": config.horizon_years,
                "yearlyInvestment": config.periodic_contribution,
            },
            "assets": [{"name": item.name, "value": item.value} for item in assets],
            "liabilities": [{"name": item.name, "value": item.value} for item in liabilities],
            "projection": _sanitize_records(projection.to_dict(orient="records")),
            "assetBreakdown": _sanitize_records(plan.asset_breakdown.to_dict(orient="records")),
            "liabilityBreakdown": _sanitize_records(plan.liability_breakdown.to_dict(orient="records")),
        }
    )


@app.post("/api/freedom")
def freedom_plan():
    payload = _json_body()
    as_of_year = _as_of_year(payload)
    plan = compute_freedom_plan(
        lifestyle_cost=_extract_payload_value(payload, "lifestyleCost", "lifestyle_cost", default=0.0),
        passive_income=_extract_payload_value(payload, "passiveIncome", "currentPassiveIncome", default=0.0),
        growth_rate_pct=_extract_payload_value(payload, "growthRate", "growth_rate", default=DEFAULT_PASSIVE_GROWTH_PCT),
        display_years=settings.display_years,
        max_periods=settings.search_years,
        ceiling=settings.pct_ceiling,
    )
    period = plan.scorecard.independence_period
    logger.info("Freedom %.0f%%, independence period %s", plan.scorecard.progress_pct, period)
    projection = projection_frame(
        {
            "Passive Income": [point.tracked_value for point in plan.points],
            "Lifestyle Cost": [point.target_value for point in plan.points],
        },
        as_of_year=as_of_year,
    )
    return jsonify(
        {
            "lifestyleCost": plan.lifestyle_cost,
            "passiveIncome": plan.passive_income,
            "growthRate": plan.growth_rate_pct,
            "freedomPercentage": plan.scorecard.progress_pct,
            "pctCeiling": settings.pct_ceiling,
            "independencePeriod": period,
            "independenceLabel": independence_label(period, as_of_year, settings.search_years),
            "projection": _sanitize_records(projection.to_dict(orient="records")),
        }
    )


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app.run(debug=False, port=settings.port)
