"""HTTP routes for the Flask API."""

from datetime import date
from http import HTTPStatus
from typing import Any, Dict, Optional, Type, TypeVar

from flask import Blueprint, current_app, jsonify, request
from pydantic import BaseModel, ValidationError
from werkzeug.exceptions import BadRequest

from habitfund import __version__
from habitfund.config import Settings
from habitfund.core.contextual_stats import Currency, contextual_stats
from habitfund.core.investment import (
    GOAL_HORIZON_YEARS,
    InvestmentRangeError,
    date_after_years,
    future_value,
    future_value_with_contributions,
    generate_projection,
    interest_earned,
    years_to_goal,
)
from habitfund.core.simulation import simulate
from habitfund.schemas.common import PingResponse
from habitfund.schemas.investment import (
    ContributionsRequest,
    ContributionsResponse,
    FutureValueRequest,
    FutureValueResponse,
    GoalEstimate,
    GoalRequest,
    ProjectionRequest,
    ProjectionResponse,
    SimulationRequest,
)
from habitfund.schemas.stats import ContextualStatsRequest, ContextualStatsResponse
from habitfund.utils.logging import get_logger

api_bp = Blueprint("api", __name__)
logger = get_logger(__name__)

RequestModel = TypeVar("RequestModel", bound=BaseModel)


def _settings() -> Settings:
    return current_app.config["SETTINGS"]


def _parse(model: Type[RequestModel], context: Optional[Dict[str, Any]] = None) -> RequestModel:
    raw_payload: Any = request.get_json(force=True, silent=False)
    return model.model_validate(raw_payload, context=context)


def _rate(value: Optional[float]) -> float:
    return value if value is not None else _settings().default_annual_rate


def _frequency(value: Optional[int]) -> int:
    return value if value is not None else _settings().default_compounding_frequency


def _respond(model: BaseModel):
    return jsonify(model.model_dump(mode="json"))


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("validation failed path=%s errors=%d", request.path, exc.error_count())
    detail = exc.errors(include_url=False, include_context=False)
    return jsonify({"detail": detail}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(InvestmentRangeError)
def _handle_range_error(exc: InvestmentRangeError):
    logger.warning("projection out of range path=%s: %s", request.path, exc)
    return jsonify({"detail": str(exc)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(BadRequest)
def _handle_bad_request(exc: BadRequest):
    logger.warning("bad request path=%s: %s", request.path, exc.description)
    return jsonify({"detail": exc.description}), HTTPStatus.BAD_REQUEST


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message="pong", version=__version__, env=_settings().env)
    return _respond(response)


@api_bp.post("/invest/future-value")
def invest_future_value() -> Any:
    """Lump-sum compound growth and the interest part of it."""
    payload = _parse(FutureValueRequest)
    rate = _rate(payload.annual_rate)
    frequency = _frequency(payload.compounding_frequency)

    value = future_value(payload.principal, rate, frequency, payload.years)
    interest = interest_earned(payload.principal, rate, frequency, payload.years)
    logger.info("future value principal=%s rate=%s years=%s", payload.principal, rate, payload.years)
    return _respond(FutureValueResponse(value=value, interest_earned=interest))


@api_bp.post("/invest/contributions")
def invest_contributions() -> Any:
    payload = _parse(ContributionsRequest)
    value = future_value_with_contributions(
        principal=payload.principal,
        regular_contribution=payload.regular_contribution,
        contribution_frequency=payload.contribution_frequency,
        annual_rate=_rate(payload.annual_rate),
        compounding_frequency=_frequency(payload.compounding_frequency),
        years=payload.years,
    )
    logger.info("contributions value years=%s", payload.years)
    return _respond(ContributionsResponse(value=value))


@api_bp.post("/invest/projection")
def invest_projection() -> Any:
    """Chart series of contributions vs. compounded value."""
    payload = _parse(ProjectionRequest, context={"max_years": _settings().max_projection_years})
    points = generate_projection(
        current_savings=payload.current_savings,
        daily_savings_rate=payload.daily_savings_rate,
        annual_rate=_rate(payload.annual_rate),
        years=payload.years,
        data_points_count=payload.data_points_count,
    )
    logger.info("projection years=%d points=%d", payload.years, len(points))
    return _respond(ProjectionResponse(points=points))


@api_bp.post("/invest/goal")
def invest_goal() -> Any:
    """Time to reach a savings goal and the date it lands on."""
    payload = _parse(GoalRequest)
    rate = _rate(payload.annual_rate)
    reference = payload.reference_date or date.today()

    years = years_to_goal(
        payload.current_savings, payload.daily_savings_rate, payload.goal_amount, rate
    )
    reachable = years is not None and years < GOAL_HORIZON_YEARS
    when = date_after_years(years, reference)
    logger.info("goal amount=%s years=%s", payload.goal_amount, years)
    return _respond(GoalEstimate(years=years, reachable=reachable, achievement_date=when))


@api_bp.post("/invest/simulate")
def invest_simulate() -> Any:
    payload = _parse(SimulationRequest, context={"max_years": _settings().max_projection_years})
    summary = simulate(
        current_savings=payload.current_savings,
        daily_savings_rate=payload.daily_savings_rate,
        annual_rate=_rate(payload.annual_rate),
        time_horizon=payload.time_horizon,
        data_points_count=payload.data_points_count,
    )
    logger.info("simulation horizon=%s final=%.2f", payload.time_horizon, summary.final_value)
    return _respond(summary)


@api_bp.post("/stats/contextual")
def stats_contextual() -> Any:
    """What the saved amount would buy in everyday items."""
    payload = _parse(ContextualStatsRequest)
    currency = payload.currency or Currency(_settings().default_currency)
    response = ContextualStatsResponse(
        currency=currency,
        symbol=currency.symbol,
        items=contextual_stats(payload.total_savings, currency),
    )
    return _respond(response)
