"""
Stakeholder submission lifecycle.

    DRAFT ──submit──► SUBMITTED ──start_review──► UNDER_REVIEW
      ▲                 │  │                         │  │
      │                 │  └──────approve────────────┼──┴──► APPROVED
      │                 └────request_revision────────┘
      │                              │
    REVISION_REQUESTED ◄─────────────┘   (submit again from here)

Each transition is written as a guarded UPDATE:

    UPDATE stakeholder_submissions SET status = :to, ...
    WHERE id = :id AND status IN (:allowed)

so a concurrent request that moved the submission first makes the second
one match zero rows and fail with InvalidStateTransition instead of
overwriting it. The token's is_active flag flips in the same transaction.

Usage:
    from app.services.stakeholder_lifecycle import submit, approve

    submit(token_string)
    approve(actor_id, submission_id)
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import select, update

from app.core.exceptions import (
    ForbiddenError,
    InvalidStateTransition,
    MissingRequiredResponsesError,
    NotFoundError,
    ValidationError,
)
from app.models import db
from app.models.stakeholder import (
    SUBMISSION_TRANSITIONS,
    WRITABLE_STATUSES,
    StakeholderSubmission,
)
from app.questions import get_questions_for_type
from app.services.conditional_requirements import find_missing_required
from app.services.permission import authorize
from app.services.stakeholder_response_service import NOT_EDITABLE_MESSAGE, load_answers
from app.services.stakeholder_token_service import validate_token

logger = logging.getLogger(__name__)


def _utcnow():
    return datetime.now(timezone.utc)


def _current_status(submission_id: str) -> str | None:
    return db.session.execute(
        select(StakeholderSubmission.status).where(StakeholderSubmission.id == submission_id)
    ).scalar_one_or_none()


def _guarded_transition(submission: StakeholderSubmission, action: str, **values) -> None:
    """Compare-and-set the status; raise InvalidStateTransition if no row matched.

    Does not commit. Rolls back on failure.
    """
    rule = SUBMISSION_TRANSITIONS[action]
    result = db.session.execute(
        update(StakeholderSubmission)
        .where(
            StakeholderSubmission.id == submission.id,
            StakeholderSubmission.status.in_(rule["from"]),
        )
        .values(status=rule["to"], updated_at=_utcnow(), **values)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount != 1:
        db.session.rollback()
        current = _current_status(submission.id)
        logger.warning(
            "Stakeholder submission transition lost a race",
            extra={"submission_id": submission.id, "action": action, "status": current},
        )
        raise InvalidStateTransition(action, current, rule["from"])


def _load_for_review(actor_id: str, submission_id: str) -> StakeholderSubmission:
    submission = db.session.get(StakeholderSubmission, submission_id)
    if submission is None:
        raise NotFoundError(resource="StakeholderSubmission", resource_id=submission_id)
    authorize(actor_id, submission.workspace_id)
    return submission


def _check_from(submission: StakeholderSubmission, action: str) -> None:
    allowed = SUBMISSION_TRANSITIONS[action]["from"]
    if submission.status not in allowed:
        raise InvalidStateTransition(action, submission.status, allowed)


def _commit(submission: StakeholderSubmission, action: str) -> dict:
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    db.session.refresh(submission)
    logger.info(
        "Stakeholder submission transitioned",
        extra={
            "submission_id": submission.id,
            "workspace_id": submission.workspace_id,
            "action": action,
            "status": submission.status,
        },
    )
    return submission.to_dict()


# ═════════════════════════════════════════════════════════════════════════════
# Respondent action
# ═════════════════════════════════════════════════════════════════════════════


def submit(token_string: str) -> dict:
    """
    Submit the token's questionnaire for review.

    Returns:
        ``{"success", "submission_id", "status", "submitted_at"}``

    Raises:
        NotFoundError, ForbiddenError: token or status checks failed.
        MissingRequiredResponsesError: required answers are blank; nothing is written.
        InvalidStateTransition: the status changed between check and write.
    """
    ctx = validate_token(token_string)
    submission = ctx.submission
    if submission.status not in WRITABLE_STATUSES:
        raise ForbiddenError(NOT_EDITABLE_MESSAGE)

    questions = get_questions_for_type(submission.training_type)
    missing = find_missing_required(questions, load_answers(submission.id))
    if missing:
        logger.info(
            "Stakeholder submit blocked by missing answers",
            extra={"submission_id": submission.id, "missing": len(missing)},
        )
        raise MissingRequiredResponsesError(missing)

    now = _utcnow()
    _guarded_transition(submission, "submit", submitted_at=now)
    ctx.token.is_active = False
    data = _commit(submission, "submit")

    return {
        "success": True,
        "submission_id": data["id"],
        "status": data["status"],
        "submitted_at": data["submitted_at"],
    }


# ═════════════════════════════════════════════════════════════════════════════
# Reviewer actions
# ═════════════════════════════════════════════════════════════════════════════


def start_review(actor_id: str, submission_id: str) -> dict:
    """SUBMITTED → UNDER_REVIEW."""
    submission = _load_for_review(actor_id, submission_id)
    _check_from(submission, "start_review")
    _guarded_transition(submission, "start_review", reviewed_by_id=actor_id)
    return _commit(submission, "start_review")


def request_revision(actor_id: str, submission_id: str, revision_notes) -> dict:
    """
    Send a submission back to the respondent.

    Notes are required. The token is reactivated in the same transaction so
    the original link works again; existing responses are left untouched.
    """
    submission = _load_for_review(actor_id, submission_id)

    if not isinstance(revision_notes, str) or not revision_notes.strip():
        raise ValidationError(
            "revision_notes is required", details={"revision_notes": "required"},
        )
    _check_from(submission, "request_revision")

    _guarded_transition(
        submission,
        "request_revision",
        revision_notes=revision_notes.strip(),
        reviewed_at=_utcnow(),
        reviewed_by_id=actor_id,
    )
    submission.token.is_active = True
    return _commit(submission, "request_revision")


def approve(actor_id: str, submission_id: str) -> dict:
    """
    SUBMITTED / UNDER_REVIEW → APPROVED. The token stays inactive.

    Returns:
        ``{"success", "submission_id", "status", "reviewed_at"}``, the same
        shape as ``submit``.
    """
    submission = _load_for_review(actor_id, submission_id)
    _check_from(submission, "approve")
    _guarded_transition(
        submission, "approve", reviewed_at=_utcnow(), reviewed_by_id=actor_id,
    )
    data = _commit(submission, "approve")

    return {
        "success": True,
        "submission_id": data["id"],
        "status": data["status"],
        "reviewed_at": data["reviewed_at"],
    }
