"""
Stakeholder intake — reviewer routes.

Routes for issuing form links, reviewing submissions and the workspace
dashboard card. All business logic is delegated to the stakeholder services
(3-layer architecture); every route requires a JWT and the actor is
authorized against the owning workspace in the service layer.

Endpoints:
  Links:        POST  /tokens
                GET   /tokens?workspace_id=
                PATCH /tokens/<id>
  Submissions:  GET   /submissions?workspace_id=&status=
                GET   /submissions/<id>
  Lifecycle:    POST  /submissions/<id>/start-review
                POST  /submissions/<id>/request-revision
                POST  /submissions/<id>/approve
  Dashboard:    GET   /summary?workspace_id=
"""

from flask import Blueprint, g, jsonify, request

from app.middleware.jwt_auth import require_jwt
from app.services import stakeholder_lifecycle, stakeholder_review_service
from app.services import stakeholder_token_service
from app.utils.errors import E, api_error, register_error_handlers

stakeholder_bp = Blueprint("stakeholder", __name__, url_prefix="/api/v1/stakeholder")

register_error_handlers(stakeholder_bp)


def _workspace_required():
    """workspace_id from query string or JSON body, else a 400 response."""
    workspace_id = request.args.get("workspace_id")
    if not workspace_id:
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return None, api_error(E.VALIDATION_INVALID, "Request body must be a JSON object")
        workspace_id = data.get("workspace_id")
    if not workspace_id or not isinstance(workspace_id, str):
        return None, api_error(E.VALIDATION_REQUIRED, "workspace_id is required",
                               details={"workspace_id": "required"})
    return workspace_id, None


# ═════════════════════════════════════════════════════════════════════════════
# Form links (3 routes)
# ═════════════════════════════════════════════════════════════════════════════


@stakeholder_bp.route("/tokens", methods=["POST"])
@require_jwt
def create_token():
    """Issue a form link.

    Body: { "workspace_id": str, "training_type": str, "expires_at"?: ISO-8601 }
    Returns: token dict with form_url and submission (201).
    """
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return api_error(E.VALIDATION_INVALID, "Request body must be a JSON object")
    workspace_id, err = _workspace_required()
    if err:
        return err
    result = stakeholder_token_service.create_token(
        g.jwt_user_id,
        workspace_id,
        data.get("training_type"),
        expires_at=data.get("expires_at"),
    )
    return jsonify(result), 201


@stakeholder_bp.route("/tokens", methods=["GET"])
@require_jwt
def list_tokens():
    workspace_id, err = _workspace_required()
    if err:
        return err
    items = stakeholder_token_service.list_tokens(g.jwt_user_id, workspace_id)
    return jsonify({"items": items, "total": len(items)}), 200


@stakeholder_bp.route("/tokens/<token_id>", methods=["PATCH"])
@require_jwt
def update_token(token_id):
    """Body: { "is_active"?: bool, "expires_at"?: ISO-8601 | null }"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return api_error(E.VALIDATION_INVALID, "Request body must be a JSON object")
    result = stakeholder_token_service.update_token(g.jwt_user_id, token_id, data)
    return jsonify(result), 200


# ═════════════════════════════════════════════════════════════════════════════
# Submissions (2 routes)
# ═════════════════════════════════════════════════════════════════════════════


@stakeholder_bp.route("/submissions", methods=["GET"])
@require_jwt
def list_submissions():
    """Query params: workspace_id (required), status?"""
    workspace_id, err = _workspace_required()
    if err:
        return err
    items = stakeholder_review_service.list_submissions(
        g.jwt_user_id, workspace_id, status=request.args.get("status") or None,
    )
    return jsonify({"items": items, "total": len(items)}), 200


@stakeholder_bp.route("/submissions/<submission_id>", methods=["GET"])
@require_jwt
def get_submission(submission_id):
    """Internal-view questions with responses, plus the change log."""
    return jsonify(
        stakeholder_review_service.get_submission_detail(g.jwt_user_id, submission_id)
    ), 200


# ═════════════════════════════════════════════════════════════════════════════
# Lifecycle (3 routes)
# ═════════════════════════════════════════════════════════════════════════════


@stakeholder_bp.route("/submissions/<submission_id>/start-review", methods=["POST"])
@require_jwt
def start_review(submission_id):
    return jsonify(stakeholder_lifecycle.start_review(g.jwt_user_id, submission_id)), 200


@stakeholder_bp.route("/submissions/<submission_id>/request-revision", methods=["POST"])
@require_jwt
def request_revision(submission_id):
    """Body: { "revision_notes": str }"""
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return api_error(E.VALIDATION_INVALID, "Request body must be a JSON object")
    result = stakeholder_lifecycle.request_revision(
        g.jwt_user_id, submission_id, data.get("revision_notes"),
    )
    return jsonify(result), 200


@stakeholder_bp.route("/submissions/<submission_id>/approve", methods=["POST"])
@require_jwt
def approve(submission_id):
    return jsonify(stakeholder_lifecycle.approve(g.jwt_user_id, submission_id)), 200


# ═════════════════════════════════════════════════════════════════════════════
# Dashboard (1 route)
# ═════════════════════════════════════════════════════════════════════════════


@stakeholder_bp.route("/summary", methods=["GET"])
@require_jwt
def summary():
    workspace_id, err = _workspace_required()
    if err:
        return err
    return jsonify(stakeholder_review_service.get_summary(g.jwt_user_id, workspace_id)), 200
