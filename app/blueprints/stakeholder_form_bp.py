"""
Stakeholder intake form — respondent routes.

Respondents have no account; the token in the URL is the credential and is
re-validated by the service layer on every call. All routes are rate limited
per token (see app/middleware/rate_limiter.py).

Endpoints:
  Form:       GET   /api/v1/stakeholder/form/<token>
  Autosave:   PUT   /api/v1/stakeholder/form/<token>/responses
  Submit:     POST  /api/v1/stakeholder/form/<token>/submit
  Identify:   POST  /api/v1/stakeholder/form/<token>/identify
"""

from flask import Blueprint, jsonify, request

from app.services import stakeholder_lifecycle, stakeholder_response_service
from app.services import stakeholder_review_service, stakeholder_token_service
from app.utils.errors import E, api_error, register_error_handlers

stakeholder_form_bp = Blueprint(
    "stakeholder_form", __name__, url_prefix="/api/v1/stakeholder/form/<token>",
)

register_error_handlers(stakeholder_form_bp)


@stakeholder_form_bp.route("", methods=["GET"])
def get_form(token):
    """Questions (no designer notes), saved answers and submission status."""
    return jsonify(stakeholder_review_service.get_form(token)), 200


@stakeholder_form_bp.route("/responses", methods=["PUT"])
def save_responses(token):
    """Autosave a batch of answers.

    Body: { "responses": [{"question_id": str, "value": str}, ...],
            "changed_by": str }
    Returns: { "saved": int, "changed": int }

    Malformed entries inside ``responses`` are skipped, not rejected.
    """
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return api_error(E.VALIDATION_INVALID, "Request body must be a JSON object")
    responses = data.get("responses")
    changed_by = data.get("changed_by")

    if not isinstance(responses, list):
        return api_error(E.VALIDATION_INVALID, "responses must be a list",
                         details={"responses": "must be a list"})
    if not isinstance(changed_by, str) or not changed_by.strip():
        return api_error(E.VALIDATION_REQUIRED, "changed_by is required",
                         details={"changed_by": "required"})

    result = stakeholder_response_service.upsert_responses(
        token, responses, changed_by.strip()[:200],
    )
    return jsonify(result), 200


@stakeholder_form_bp.route("/submit", methods=["POST"])
def submit(token):
    """Submit for review; 400 MISSING_REQUIRED_RESPONSES lists unanswered questions."""
    return jsonify(stakeholder_lifecycle.submit(token)), 200


@stakeholder_form_bp.route("/identify", methods=["POST"])
def identify(token):
    """Body: { "name": str, "email"?: str }"""
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return api_error(E.VALIDATION_INVALID, "Request body must be a JSON object")
    result = stakeholder_token_service.identify_stakeholder(
        token, data.get("name"), data.get("email"),
    )
    return jsonify(result), 200
