"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from growthsim.core.formatting import parse_currency_input
from growthsim.core.keypad import apply_key, display_text, draft_texts
from growthsim.core.normalizer import commit_draft
from growthsim.core.simulation import simulate_growth
from growthsim.core.summary import point_for_year, summarize
from growthsim.schemas.api import (
    DefaultsResponse,
    KeypadRequest,
    KeypadResponse,
    NormalizeRequest,
    NormalizeResponse,
    PingResponse,
)
from growthsim.schemas.simulation import DEFAULT_PARAMS, SimulationParams, SimulationResponse
from growthsim.utils.logging import get_logger

logger = get_logger(__name__)

api_bp = Blueprint("api", __name__)


def _json_body() -> Dict[str, Any]:
    return request.get_json(force=True, silent=False)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.BAD_REQUEST


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify(PingResponse(message="pong").model_dump())


@api_bp.get("/defaults")
def defaults() -> Any:
    """Baseline params and the texts an edit session starts from."""
    response = DefaultsResponse(params=DEFAULT_PARAMS, texts=draft_texts(DEFAULT_PARAMS))
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/simulate")
def simulate() -> Any:
    """Year-by-year projection; omitted fields take the baseline values.

    An optional ``?year=N`` query also returns the point for that year.
    """
    params = SimulationParams.model_validate(_json_body())
    points = simulate_growth(params)
    logger.debug("simulated %d years at %.2f%% apy", points[-1].yearIndex, params.apy)
    selected_year = request.args.get("year", type=int)
    response = SimulationResponse(
        points=points,
        summary=summarize(params, points),
        selected=point_for_year(points, selected_year) if selected_year is not None else None,
    )
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/normalize")
def normalize() -> Any:
    """Commit a draft: parse, fall back and clamp its text fields."""
    payload = NormalizeRequest.model_validate(_json_body())
    result = commit_draft(
        payload.draft,
        payload.committed,
        payload.apyText,
        payload.yearsText,
        payload.initialText,
        payload.amountText,
    )
    warnings = [f"{name} was clamped to its allowed range" for name in result.clampedFields]
    response = NormalizeResponse(
        params=result.params,
        clampedFields=result.clampedFields,
        warnings=warnings,
    )
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/keypad")
def keypad() -> Any:
    """Apply one keypad press to a field's text."""
    payload = KeypadRequest.model_validate(_json_body())
    value = apply_key(payload.value, payload.key, payload.field)
    response = KeypadResponse(
        value=value,
        display=display_text(value, payload.field),
        number=parse_currency_input(value),
    )
    return jsonify(response.model_dump())
