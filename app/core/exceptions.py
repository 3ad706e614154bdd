"""
Service-layer exception hierarchy.

Services raise these; blueprints register handlers against them once and map
each to an HTTP status and error code (see ``app/utils/errors.py``). Services
never build HTTP responses themselves.

Usage:
    from app.core.exceptions import NotFoundError, ValidationError

    raise NotFoundError(resource="StakeholderSubmission", resource_id=sid)
    raise ValidationError("revision_notes is required", details={"revision_notes": "..."})
"""


class NotFoundError(Exception):
    """Raised when a requested resource does not exist.

    Also used for an unknown access token, so a guessed token cannot be told
    apart from a missing submission.

    Args:
        resource: Human-readable model/entity name (e.g. "StakeholderAccessToken").
        resource_id: The key that was looked up. Included in logs, not in the
            HTTP response. Pass None for secrets such as token strings.
    """

    def __init__(self, resource: str, resource_id: str | None = None) -> None:
        self.resource = resource
        self.resource_id = resource_id
        msg = f"{resource}"
        if resource_id is not None:
            msg += f" id={resource_id}"
        msg += " not found"
        super().__init__(msg)


class ForbiddenError(Exception):
    """Raised when a respondent action is refused for the token's current state.

    Covers inactive or expired links and writes against a submission that is
    no longer editable. Maps to HTTP 403.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(Exception):
    """Raised when input fails validation in the service layer.

    Maps to HTTP 400.

    Args:
        message: Human-readable explanation of what failed.
        details: Optional field-level breakdown for structured API responses.
    """

    def __init__(self, message: str, details: dict | None = None) -> None:
        self.details = details or {}
        super().__init__(message)


class MissingRequiredResponsesError(Exception):
    """Raised on submit when required questions are unanswered.

    ``missing`` is a list of ``{question_id, question_text, section}`` dicts in
    catalog order. Maps to HTTP 400 with code MISSING_REQUIRED_RESPONSES.
    """

    def __init__(self, missing: list[dict]) -> None:
        self.missing = missing
        super().__init__(
            f"{len(missing)} required question(s) must be answered before submitting"
        )


class InvalidStateTransition(Exception):
    """Raised when a lifecycle action is not allowed from the current status.

    Also raised when the guarded status update matches no row because a
    concurrent request moved the submission first. Maps to HTTP 409.
    """

    def __init__(self, action: str, current_status: str | None, allowed: list[str]) -> None:
        self.action = action
        self.current_status = current_status
        self.allowed = allowed
        super().__init__(
            f"Cannot {action} a submission in status {current_status!r}; "
            f"allowed from {', '.join(allowed)}"
        )


class ConflictError(Exception):
    """Raised when an operation would violate a unique constraint.

    Maps to HTTP 409.

    Args:
        resource: Model name.
        field: The unique field that would be duplicated.
        value: The conflicting value.
    """

    def __init__(self, resource: str, field: str, value: str | None = None) -> None:
        self.resource = resource
        self.field = field
        self.value = value
        msg = f"{resource} with {field}={value!r} already exists"
        super().__init__(msg)
