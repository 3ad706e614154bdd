"""
Stakeholder response store.

Responses are keyed by (submission, question). Every value change appends a
StakeholderChangeLog row with the previous and new value; unchanged values
write nothing. A batch is all-or-nothing: one commit, or a rollback of every
row it touched.
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from app.core.exceptions import ConflictError, ForbiddenError
from app.models import db
from app.models.stakeholder import (
    WRITABLE_STATUSES,
    StakeholderChangeLog,
    StakeholderResponse,
)
from app.services.stakeholder_token_service import validate_token

logger = logging.getLogger(__name__)

NOT_EDITABLE_MESSAGE = "This submission can no longer be edited"


def _utcnow():
    return datetime.now(timezone.utc)


def _valid_entries(responses: list) -> list[tuple[str, str]]:
    """Keep entries shaped ``{"question_id": str, "value": str}``; drop the rest."""
    entries = []
    for item in responses:
        if not isinstance(item, dict):
            continue
        question_id = item.get("question_id")
        value = item.get("value")
        if not isinstance(question_id, str) or not question_id:
            continue
        if not isinstance(value, str):
            continue
        entries.append((question_id, value))
    return entries


def load_answers(submission_id: str) -> dict[str, str]:
    """Snapshot of ``question_id -> value`` for a submission."""
    rows = db.session.execute(
        select(StakeholderResponse.question_id, StakeholderResponse.value)
        .where(StakeholderResponse.submission_id == submission_id)
    ).all()
    return {question_id: value for question_id, value in rows}


def upsert_responses(token_string: str, responses: list, changed_by: str) -> dict:
    """
    Create or update answers for the token's submission.

    Args:
        token_string: Respondent's access token.
        responses: List of ``{"question_id", "value"}`` dicts; malformed
            entries are skipped.
        changed_by: Free-text attribution recorded on the change log.

    Returns:
        ``{"saved": <valid entries>, "changed": <creates + updates>}``

    Raises:
        NotFoundError, ForbiddenError: token or status checks failed.
        ConflictError: a concurrent batch inserted the same question first.
    """
    ctx = validate_token(token_string)
    submission = ctx.submission
    if submission.status not in WRITABLE_STATUSES:
        raise ForbiddenError(NOT_EDITABLE_MESSAGE)

    entries = _valid_entries(responses)

    existing = {
        r.question_id: r
        for r in submission.responses.all()
    }

    changed = 0
    now = _utcnow()
    try:
        for question_id, value in entries:
            current = existing.get(question_id)
            if current is None:
                current = StakeholderResponse(
                    submission_id=submission.id,
                    question_id=question_id,
                    value=value,
                    updated_by=changed_by,
                )
                db.session.add(current)
                existing[question_id] = current
                db.session.add(StakeholderChangeLog(
                    submission_id=submission.id,
                    question_id=question_id,
                    changed_by=changed_by,
                    previous_value=None,
                    new_value=value,
                    changed_at=now,
                ))
                changed += 1
                continue

            if current.value == value:
                continue

            previous = current.value
            current.value = value
            current.updated_by = changed_by
            db.session.add(StakeholderChangeLog(
                submission_id=submission.id,
                question_id=question_id,
                changed_by=changed_by,
                previous_value=previous,
                new_value=value,
                changed_at=now,
            ))
            changed += 1

        db.session.commit()
    except IntegrityError as exc:
        db.session.rollback()
        logger.warning(
            "Concurrent response insert",
            extra={"submission_id": submission.id},
        )
        raise ConflictError(
            resource="StakeholderResponse", field="question_id",
        ) from exc
    except Exception:
        db.session.rollback()
        raise

    if changed:
        logger.info(
            "Stakeholder responses saved",
            extra={
                "submission_id": submission.id,
                "workspace_id": submission.workspace_id,
                "saved": len(entries),
                "changed": changed,
            },
        )
    return {"saved": len(entries), "changed": changed}
