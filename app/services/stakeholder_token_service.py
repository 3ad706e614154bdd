"""
Stakeholder access tokens.

Respondents are unauthenticated: the token in the form URL is their only
credential. ``validate_token`` runs at the start of every respondent request
and is never cached, so deactivation and expiry take effect immediately.

Functions:
    - validate_token:        Resolve a token string to its token + submission, or raise
    - identify_stakeholder:  Respondent records their name / email on the token
    - create_token:          Reviewer issues a link (token + DRAFT submission, one commit)
    - list_tokens:           Reviewer lists a workspace's links with submission status
    - update_token:          Reviewer toggles is_active / changes expires_at

The raw token string is never written to logs.
"""

import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timezone

from email_validator import EmailNotValidError, validate_email
from flask import current_app
from sqlalchemy import func, select

from app.core.exceptions import ForbiddenError, NotFoundError, ValidationError
from app.models import db
from app.models.stakeholder import (
    StakeholderAccessToken,
    StakeholderResponse,
    StakeholderSubmission,
    as_utc,
)
from app.questions import TRAINING_TYPES, is_training_type
from app.services.permission import authorize

logger = logging.getLogger(__name__)

TOKEN_BYTES = 32

INACTIVE_MESSAGE = "This form link is no longer active"
EXPIRED_MESSAGE = "This form link has expired"


@dataclass(frozen=True)
class TokenContext:
    """A validated token and the submission it grants access to."""

    token: StakeholderAccessToken
    submission: StakeholderSubmission


def _utcnow():
    return datetime.now(timezone.utc)


def _generate_token() -> str:
    return secrets.token_hex(TOKEN_BYTES)


def form_url(token_string: str) -> str:
    base = current_app.config.get("STAKEHOLDER_FORM_BASE_URL", "").rstrip("/")
    return f"{base}/stakeholder/form/{token_string}"


def _parse_expires_at(raw) -> datetime | None:
    """Parse an ISO-8601 expiry; must be in the future. None clears it."""
    if raw is None:
        return None
    if not isinstance(raw, str) or not raw.strip():
        raise ValidationError(
            "expires_at must be an ISO-8601 date string or null",
            details={"expires_at": "invalid"},
        )
    try:
        parsed = datetime.fromisoformat(raw.strip().replace("Z", "+00:00"))
    except ValueError:
        raise ValidationError(
            "expires_at must be an ISO-8601 date string or null",
            details={"expires_at": "invalid"},
        )
    parsed = as_utc(parsed)
    if parsed <= _utcnow():
        raise ValidationError(
            "expires_at must be in the future",
            details={"expires_at": "must be in the future"},
        )
    return parsed


# ═════════════════════════════════════════════════════════════════════════════
# Respondent side
# ═════════════════════════════════════════════════════════════════════════════


def validate_token(token_string: str | None) -> TokenContext:
    """
    Resolve a respondent token.

    Raises:
        NotFoundError: empty or unknown token.
        ForbiddenError: token deactivated, or past its expiry.
    """
    if not token_string:
        raise NotFoundError(resource="StakeholderAccessToken")

    token = db.session.execute(
        select(StakeholderAccessToken).where(StakeholderAccessToken.token == token_string)
    ).scalar_one_or_none()
    if token is None or token.submission is None:
        raise NotFoundError(resource="StakeholderAccessToken")

    if not token.is_active:
        raise ForbiddenError(INACTIVE_MESSAGE)

    expires_at = as_utc(token.expires_at)
    if expires_at is not None and expires_at <= _utcnow():
        raise ForbiddenError(EXPIRED_MESSAGE)

    return TokenContext(token=token, submission=token.submission)


def identify_stakeholder(token_string: str, name, email=None) -> dict:
    """Store the respondent's name (required) and email (optional) on the token."""
    ctx = validate_token(token_string)

    if not isinstance(name, str) or not name.strip():
        raise ValidationError("name is required", details={"name": "required"})
    if email is not None and not isinstance(email, str):
        raise ValidationError("email must be a string", details={"email": "invalid"})
    email = (email or "").strip()
    if email:
        try:
            email = validate_email(email, check_deliverability=False).normalized
        except EmailNotValidError as e:
            raise ValidationError(f"Invalid email: {e}", details={"email": "invalid"})

    ctx.token.stakeholder_name = name.strip()[:200]
    ctx.token.stakeholder_email = email[:255] or None
    db.session.commit()

    logger.info(
        "Stakeholder identified",
        extra={"token_id": ctx.token.id, "submission_id": ctx.submission.id},
    )
    return {"success": True, "name": ctx.token.stakeholder_name}


# ═════════════════════════════════════════════════════════════════════════════
# Reviewer side
# ═════════════════════════════════════════════════════════════════════════════


def create_token(
    actor_id: str,
    workspace_id: str,
    training_type,
    expires_at=None,
) -> dict:
    """
    Issue a new form link for a workspace.

    The token and its DRAFT submission are created in one transaction.

    Returns:
        Token dict with ``form_url`` and ``submission``.

    Raises:
        PermissionDenied, ValidationError
    """
    authorize(actor_id, workspace_id)

    if not is_training_type(training_type):
        raise ValidationError(
            f"training_type must be one of: {', '.join(TRAINING_TYPES)}",
            details={"training_type": "invalid"},
        )
    expiry = _parse_expires_at(expires_at)

    token = StakeholderAccessToken(
        token=_generate_token(),
        workspace_id=workspace_id,
        training_type=training_type,
        created_by_id=actor_id,
        expires_at=expiry,
        is_active=True,
    )
    submission = StakeholderSubmission(
        workspace_id=workspace_id,
        training_type=training_type,
        status="DRAFT",
    )
    token.submission = submission
    db.session.add(token)
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    logger.info(
        "Stakeholder token created",
        extra={
            "workspace_id": workspace_id,
            "token_id": token.id,
            "submission_id": submission.id,
            "training_type": training_type,
        },
    )
    result = token.to_dict()
    result["form_url"] = form_url(token.token)
    result["submission"] = submission.to_dict()
    return result


def list_tokens(actor_id: str, workspace_id: str) -> list[dict]:
    """All links in a workspace, newest first, with submission status and response count."""
    authorize(actor_id, workspace_id)

    tokens = db.session.execute(
        select(StakeholderAccessToken)
        .where(StakeholderAccessToken.workspace_id == workspace_id)
        .order_by(StakeholderAccessToken.created_at.desc())
    ).scalars().all()

    counts = dict(
        db.session.execute(
            select(StakeholderResponse.submission_id, func.count(StakeholderResponse.id))
            .join(
                StakeholderSubmission,
                StakeholderSubmission.id == StakeholderResponse.submission_id,
            )
            .where(StakeholderSubmission.workspace_id == workspace_id)
            .group_by(StakeholderResponse.submission_id)
        ).all()
    )

    items = []
    for token in tokens:
        d = token.to_dict()
        d["form_url"] = form_url(token.token)
        sub = token.submission
        d["submission"] = {
            "id": sub.id,
            "status": sub.status,
            "submitted_at": sub.to_dict()["submitted_at"],
            "response_count": counts.get(sub.id, 0),
        } if sub else None
        items.append(d)
    return items


def update_token(actor_id: str, token_id: str, data: dict) -> dict:
    """
    PATCH a link's ``is_active`` and/or ``expires_at``.

    Raises:
        NotFoundError, PermissionDenied, ValidationError
    """
    token = db.session.get(StakeholderAccessToken, token_id)
    if token is None:
        raise NotFoundError(resource="StakeholderAccessToken", resource_id=token_id)
    authorize(actor_id, token.workspace_id)

    changes = {}
    if "is_active" in data:
        if not isinstance(data["is_active"], bool):
            raise ValidationError(
                "is_active must be a boolean", details={"is_active": "invalid"},
            )
        changes["is_active"] = data["is_active"]
    if "expires_at" in data:
        changes["expires_at"] = _parse_expires_at(data["expires_at"])

    if not changes:
        raise ValidationError(
            "No valid fields to update",
            details={"allowed": ["is_active", "expires_at"]},
        )

    for field, value in changes.items():
        setattr(token, field, value)
    db.session.commit()

    logger.info(
        "Stakeholder token updated",
        extra={
            "workspace_id": token.workspace_id,
            "token_id": token.id,
            "fields": sorted(changes),
        },
    )
    return token.to_dict()
