"""
Read models for the stakeholder intake screens.

Functions:
    - get_form:               Respondent form payload (no designer notes)
    - list_submissions:       Reviewer list with response / question counts
    - get_submission_detail:  Reviewer detail: internal-view questions + change log
    - get_summary:            Workspace dashboard card

All reviewer functions authorize the actor against the owning workspace
before returning anything.
"""

from sqlalchemy import func, select

from app.core.exceptions import NotFoundError, ValidationError
from app.models import db
from app.models.stakeholder import (
    SUBMISSION_STATUSES,
    StakeholderAccessToken,
    StakeholderChangeLog,
    StakeholderResponse,
    StakeholderSubmission,
)
from app.questions import QUESTION_MAP, TRAINING_TYPE_LABELS, get_questions_for_type
from app.services.permission import authorize
from app.services.stakeholder_token_service import validate_token

# Dashboard status buckets
_SUMMARY_STATUS = {
    "SUBMITTED": "PENDING_REVIEW",
    "UNDER_REVIEW": "PENDING_REVIEW",
    "APPROVED": "APPROVED",
    "REVISION_REQUESTED": "REVISION_REQUESTED",
}


def get_form(token_string: str) -> dict:
    """Everything the respondent form needs, keyed for the UI."""
    ctx = validate_token(token_string)
    token, submission = ctx.token, ctx.submission
    questions = get_questions_for_type(submission.training_type)

    return {
        "workspace_name": token.workspace.name if token.workspace else None,
        "training_type": submission.training_type,
        "training_type_label": TRAINING_TYPE_LABELS.get(submission.training_type),
        "submission": {
            "id": submission.id,
            "status": submission.status,
            "revision_notes": submission.revision_notes,
        },
        "stakeholder_name": token.stakeholder_name,
        "stakeholder_email": token.stakeholder_email,
        "questions": [q.respondent_view() for q in questions],
        "responses": {r.question_id: r.value for r in submission.responses.all()},
    }


def list_submissions(actor_id: str, workspace_id: str, status: str | None = None) -> list[dict]:
    """Submissions in a workspace, newest first, optionally filtered by status."""
    authorize(actor_id, workspace_id)

    if status is not None and status not in SUBMISSION_STATUSES:
        raise ValidationError(
            f"status must be one of: {', '.join(SUBMISSION_STATUSES)}",
            details={"status": "invalid"},
        )

    response_count = (
        select(func.count(StakeholderResponse.id))
        .where(StakeholderResponse.submission_id == StakeholderSubmission.id)
        .correlate(StakeholderSubmission)
        .scalar_subquery()
    )
    stmt = (
        select(StakeholderSubmission, StakeholderAccessToken, response_count)
        .join(StakeholderAccessToken, StakeholderAccessToken.id == StakeholderSubmission.token_id)
        .where(StakeholderSubmission.workspace_id == workspace_id)
        .order_by(StakeholderSubmission.created_at.desc())
    )
    if status:
        stmt = stmt.where(StakeholderSubmission.status == status)

    items = []
    for submission, token, count in db.session.execute(stmt).all():
        d = submission.to_dict()
        d["stakeholder_name"] = token.stakeholder_name
        d["stakeholder_email"] = token.stakeholder_email
        d["response_count"] = count or 0
        d["total_questions"] = len(get_questions_for_type(submission.training_type))
        items.append(d)
    return items


def get_submission_detail(actor_id: str, submission_id: str) -> dict:
    """
    Reviewer view of one submission.

    Questions carry designer notes and the current response; the change log
    is newest first, each entry annotated with its question text.
    """
    submission = db.session.get(StakeholderSubmission, submission_id)
    if submission is None:
        raise NotFoundError(resource="StakeholderSubmission", resource_id=submission_id)
    authorize(actor_id, submission.workspace_id)

    responses = {r.question_id: r.to_dict() for r in submission.responses.all()}
    questions = get_questions_for_type(submission.training_type)

    logs = db.session.execute(
        select(StakeholderChangeLog)
        .where(StakeholderChangeLog.submission_id == submission.id)
        .order_by(StakeholderChangeLog.changed_at.desc(), StakeholderChangeLog.id.desc())
    ).scalars().all()

    change_log = []
    for entry in logs:
        d = entry.to_dict()
        question = QUESTION_MAP.get(entry.question_id)
        d["question_text"] = question.question_text if question else entry.question_id
        change_log.append(d)

    result = submission.to_dict()
    result["stakeholder_name"] = submission.token.stakeholder_name
    result["stakeholder_email"] = submission.token.stakeholder_email
    result["question_responses"] = [q.internal_view(responses.get(q.id)) for q in questions]
    result["change_log"] = change_log
    return result


def get_summary(actor_id: str, workspace_id: str) -> dict:
    """Token counts, latest non-draft submission and status bucket counts."""
    authorize(actor_id, workspace_id)

    total_tokens = db.session.scalar(
        select(func.count(StakeholderAccessToken.id))
        .where(StakeholderAccessToken.workspace_id == workspace_id)
    )
    active_tokens = db.session.scalar(
        select(func.count(StakeholderAccessToken.id))
        .where(
            StakeholderAccessToken.workspace_id == workspace_id,
            StakeholderAccessToken.is_active.is_(True),
        )
    )

    rows = db.session.execute(
        select(StakeholderSubmission, StakeholderAccessToken.stakeholder_name)
        .join(StakeholderAccessToken, StakeholderAccessToken.id == StakeholderSubmission.token_id)
        .where(
            StakeholderSubmission.workspace_id == workspace_id,
            StakeholderSubmission.status != "DRAFT",
        )
        .order_by(
            StakeholderSubmission.submitted_at.desc(),
            StakeholderSubmission.created_at.desc(),
        )
    ).all()

    counts = {"pending": 0, "approved": 0, "revision_requested": 0}
    for submission, _name in rows:
        bucket = _SUMMARY_STATUS.get(submission.status)
        if bucket == "PENDING_REVIEW":
            counts["pending"] += 1
        elif bucket == "APPROVED":
            counts["approved"] += 1
        elif bucket == "REVISION_REQUESTED":
            counts["revision_requested"] += 1

    latest = None
    if rows:
        submission, name = rows[0]
        d = submission.to_dict()
        latest = {
            "id": submission.id,
            "stakeholder_name": name or "Unknown",
            "status": _SUMMARY_STATUS.get(submission.status, submission.status),
            "submitted_at": d["submitted_at"] or d["created_at"],
        }

    return {
        "active_token_count": active_tokens or 0,
        "total_token_count": total_tokens or 0,
        "latest_submission": latest,
        "submission_counts": counts,
    }
