"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from compound_interest.core.comparison import ComparisonCoordinator, ComparisonStateError
from compound_interest.core.formatting import format_currency
from compound_interest.core.simulation import final_value, simulate
from compound_interest.schemas.scenario import (
    ComparisonRequest,
    ComparisonResponse,
    ContributionFrequency,
    FinalValues,
    FrequencyOption,
    ScenarioParameters,
    SimulationResponse,
)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.errorhandler(ComparisonStateError)
def _handle_comparison_state_error(exc: ComparisonStateError):
    """
    Guard for coordinator misuse. ``/compare`` enables comparison before it sets
    the second scenario, so no current route raises this; it keeps any future
    stateful route from turning a logic error into a 500.
    """
    current_app.logger.warning("rejected comparison request: %s", exc)
    return jsonify({"error": str(exc)}), HTTPStatus.CONFLICT


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify({"message": "pong"})


@api_bp.get("/frequencies")
def frequencies() -> Any:
    """List the contribution frequencies the calculator accepts."""
    options = [
        FrequencyOption(value=frequency, periods_per_year=frequency.periods_per_year)
        for frequency in ContributionFrequency
    ]
    return jsonify([option.model_dump(mode="json", by_alias=True) for option in options])


@api_bp.post("/simulate")
def simulate_scenario() -> Any:
    """Yearly series for a single scenario."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    params = ScenarioParameters.model_validate(raw_payload)
    results = simulate(params)
    total = final_value(results)
    response = SimulationResponse(
        results=results, final_value=total, final_value_display=format_currency(total)
    )
    return jsonify(response.model_dump(mode="json", by_alias=True))


@api_bp.post("/compare")
def compare() -> Any:
    """Joint series, axis ticks and the resolved selection for up to two scenarios."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = ComparisonRequest.model_validate(raw_payload)

    coordinator = ComparisonCoordinator(payload.primary)
    if payload.secondary is not None:
        coordinator.enable_comparison()
        coordinator.set_secondary(payload.secondary)
    if payload.selected_year is not None:
        coordinator.select_point(payload.selected_year)

    response = ComparisonResponse(
        joint_series=coordinator.joint_series,
        x_axis_ticks=coordinator.x_axis_ticks(),
        selected=coordinator.resolve(),
        final_values=FinalValues(**coordinator.final_values),
    )
    return jsonify(response.model_dump(mode="json", by_alias=True))
