"""Standardised API error responses.

Usage
-----
    from app.utils.errors import api_error, E

    return api_error(E.NOT_FOUND, "Submission not found")
    return api_error(E.VALIDATION_INVALID, "responses must be a list")
    return api_error(E.MISSING_REQUIRED_RESPONSES, "Required questions unanswered",
                     extra={"missing_questions": missing})
"""

from __future__ import annotations

import logging

from flask import jsonify, request
from werkzeug.exceptions import HTTPException

from app.core.exceptions import (
    ConflictError,
    ForbiddenError,
    InvalidStateTransition,
    MissingRequiredResponsesError,
    NotFoundError,
    ValidationError,
)
from app.services.permission import PermissionDenied


# ── Error code constants ──────────────────────────────────────────────
class E:
    """Machine-readable error code constants.

    Convention:
     • ERR_  prefix for standard application errors
     • bare upper-case codes for workflow outcomes the form UI branches on
    """

    # Validation – HTTP 400
    VALIDATION_REQUIRED = "ERR_VALIDATION_REQUIRED"
    VALIDATION_INVALID = "ERR_VALIDATION_INVALID"
    MISSING_REQUIRED_RESPONSES = "MISSING_REQUIRED_RESPONSES"

    # Auth – HTTP 401 / 403
    UNAUTHORIZED = "ERR_UNAUTHORIZED"
    FORBIDDEN = "ERR_FORBIDDEN"

    # Not-found – HTTP 404
    NOT_FOUND = "ERR_NOT_FOUND"

    # Conflict – HTTP 409
    CONFLICT_DUPLICATE = "ERR_CONFLICT_DUPLICATE"
    CONFLICT_STATE = "ERR_CONFLICT_STATE"

    # Rate limit – HTTP 429
    RATE_LIMITED = "ERR_RATE_LIMITED"

    # Server – HTTP 500
    DATABASE = "ERR_DATABASE"
    INTERNAL = "ERR_INTERNAL"


# ── Default HTTP status mapping ───────────────────────────────────────
_DEFAULT_STATUS: dict[str, int] = {
    E.VALIDATION_REQUIRED: 400,
    E.VALIDATION_INVALID: 400,
    E.MISSING_REQUIRED_RESPONSES: 400,
    E.UNAUTHORIZED: 401,
    E.FORBIDDEN: 403,
    E.NOT_FOUND: 404,
    E.CONFLICT_DUPLICATE: 409,
    E.CONFLICT_STATE: 409,
    E.RATE_LIMITED: 429,
    E.DATABASE: 500,
    E.INTERNAL: 500,
}


def api_error(
    code: str,
    message: str,
    *,
    status: int | None = None,
    details: dict | None = None,
    extra: dict | None = None,
):
    """Return a standard JSON error response.

    Parameters
    ----------
    code : str
        Machine-readable error code (use ``E.*`` constants).
    message : str
        Human-readable explanation for developers / UI.
    status : int, optional
        HTTP status override.  Falls back to ``_DEFAULT_STATUS[code]``,
        then to ``400``.
    details : dict, optional
        Field-level breakdown, returned under ``details``.
    extra : dict, optional
        Top-level keys merged into the body (e.g. ``missing_questions``).

    Returns
    -------
    tuple[Response, int]
        ``(jsonify(body), http_status)`` – drop-in for Flask views.
    """

    http_status = status or _DEFAULT_STATUS.get(code, 400)

    body: dict = {
        "error": message,
        "code": code,
    }
    if details:
        body["details"] = details
    if extra:
        body.update(extra)

    return jsonify(body), http_status


# ── Blueprint error handlers ──────────────────────────────────────────
_RESOURCE_LABELS = {
    "StakeholderAccessToken": "Form link",
    "StakeholderSubmission": "Submission",
}


def register_error_handlers(bp) -> None:
    """Map service-layer exceptions to ``api_error`` responses on *bp*.

    App-level handlers for 404 / 405 / 429 still win for their status codes.
    """
    logger = logging.getLogger(bp.import_name)

    @bp.errorhandler(NotFoundError)
    def _handle_not_found(error: NotFoundError):
        return api_error(
            E.NOT_FOUND, f"{_RESOURCE_LABELS.get(error.resource, error.resource)} not found",
        )

    @bp.errorhandler(ForbiddenError)
    def _handle_forbidden(error: ForbiddenError):
        return api_error(E.FORBIDDEN, error.message)

    @bp.errorhandler(PermissionDenied)
    def _handle_permission(error: PermissionDenied):
        return api_error(E.FORBIDDEN, "You do not have access to this workspace")

    @bp.errorhandler(ValidationError)
    def _handle_validation(error: ValidationError):
        return api_error(E.VALIDATION_INVALID, str(error), details=error.details)

    @bp.errorhandler(MissingRequiredResponsesError)
    def _handle_missing(error: MissingRequiredResponsesError):
        return api_error(
            E.MISSING_REQUIRED_RESPONSES, str(error),
            extra={"missing_questions": error.missing},
        )

    @bp.errorhandler(InvalidStateTransition)
    def _handle_transition(error: InvalidStateTransition):
        return api_error(
            E.CONFLICT_STATE, str(error),
            extra={"current_status": error.current_status},
        )

    @bp.errorhandler(ConflictError)
    def _handle_conflict(error: ConflictError):
        return api_error(E.CONFLICT_DUPLICATE, "A concurrent update conflicted; retry the request")

    @bp.errorhandler(Exception)
    def _handle_unexpected(error: Exception):
        if isinstance(error, HTTPException):
            return jsonify({"error": error.description}), error.code
        logger.exception("Unexpected error in %s endpoint=%s", bp.name, request.endpoint)
        return api_error(E.INTERNAL, "Internal server error")
