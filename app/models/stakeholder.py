"""
Stakeholder Intake Service
Stakeholder intake domain models.

Models:
    - StakeholderAccessToken:  bearer link handed to an external respondent
    - StakeholderSubmission:   lifecycle-tracked answers for one token (1:1)
    - StakeholderResponse:     current value per (submission, question)
    - StakeholderChangeLog:    append-only record of every value change

question_id values reference the static question catalog in app.questions,
not a database table.
"""

import uuid
from datetime import datetime, timezone

from app.models import db

# ── Constants ────────────────────────────────────────────────────────────────

SUBMISSION_STATUSES = (
    "DRAFT",
    "SUBMITTED",
    "UNDER_REVIEW",
    "APPROVED",
    "REVISION_REQUESTED",
)

# Statuses in which the respondent may write responses or submit.
WRITABLE_STATUSES = frozenset({"DRAFT", "REVISION_REQUESTED"})

# action → allowed source statuses + target status
SUBMISSION_TRANSITIONS = {
    "submit": {"from": ["DRAFT", "REVISION_REQUESTED"], "to": "SUBMITTED"},
    "start_review": {"from": ["SUBMITTED"], "to": "UNDER_REVIEW"},
    "request_revision": {"from": ["SUBMITTED", "UNDER_REVIEW"], "to": "REVISION_REQUESTED"},
    "approve": {"from": ["SUBMITTED", "UNDER_REVIEW"], "to": "APPROVED"},
}


def _uuid():
    return str(uuid.uuid4())


def _utcnow():
    return datetime.now(timezone.utc)


def as_utc(value: datetime | None) -> datetime | None:
    """Return *value* as an aware UTC datetime.

    SQLite hands back naive datetimes even for timezone=True columns; they
    were written as UTC, so attach the zone rather than convert.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _iso(value: datetime | None) -> str | None:
    value = as_utc(value)
    return value.isoformat() if value else None


# ═════════════════════════════════════════════════════════════════════════════
# Access token
# ═════════════════════════════════════════════════════════════════════════════


class StakeholderAccessToken(db.Model):
    """
    Opaque bearer secret granting one respondent access to one submission.

    Usable iff ``is_active`` and (``expires_at`` is NULL or in the future).
    Deactivated on successful submit, reactivated on revision request.
    """

    __tablename__ = "stakeholder_access_tokens"

    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    token = db.Column(
        db.String(64), nullable=False, unique=True, index=True,
        comment="32 random bytes, hex-encoded",
    )
    workspace_id = db.Column(
        db.String(36),
        db.ForeignKey("workspaces.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    training_type = db.Column(
        db.String(30), nullable=False,
        comment="PERFORMANCE_PROBLEM | NEW_SYSTEM | COMPLIANCE | ROLE_CHANGE",
    )
    created_by_id = db.Column(db.String(64), nullable=False)
    expires_at = db.Column(db.DateTime(timezone=True), nullable=True)
    is_active = db.Column(db.Boolean, nullable=False, default=True)

    # Captured by the respondent on first use (identify)
    stakeholder_name = db.Column(db.String(200), nullable=True)
    stakeholder_email = db.Column(db.String(255), nullable=True)

    created_at = db.Column(db.DateTime(timezone=True), default=_utcnow)
    updated_at = db.Column(
        db.DateTime(timezone=True), default=_utcnow, onupdate=_utcnow,
    )

    workspace = db.relationship("Workspace")
    submission = db.relationship(
        "StakeholderSubmission", back_populates="token", uselist=False,
        cascade="all, delete-orphan",
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "token": self.token,
            "workspace_id": self.workspace_id,
            "training_type": self.training_type,
            "created_by_id": self.created_by_id,
            "is_active": self.is_active,
            "expires_at": _iso(self.expires_at),
            "stakeholder_name": self.stakeholder_name,
            "stakeholder_email": self.stakeholder_email,
            "created_at": _iso(self.created_at),
            "updated_at": _iso(self.updated_at),
        }

    def __repr__(self):
        return f"<StakeholderAccessToken {self.id} active={self.is_active}>"


# ═════════════════════════════════════════════════════════════════════════════
# Submission
# ═════════════════════════════════════════════════════════════════════════════


class StakeholderSubmission(db.Model):
    """
    One respondent's questionnaire for one training type.

    training_type is copied from the token at creation and never changes.
    submitted_at / reviewed_at / reviewed_by_id / revision_notes are only
    written by lifecycle transitions.
    """

    __tablename__ = "stakeholder_submissions"
    __table_args__ = (
        db.Index("ix_stakeholder_submission_ws_status", "workspace_id", "status"),
    )

    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    token_id = db.Column(
        db.String(36),
        db.ForeignKey("stakeholder_access_tokens.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    workspace_id = db.Column(
        db.String(36),
        db.ForeignKey("workspaces.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    training_type = db.Column(db.String(30), nullable=False)
    status = db.Column(
        db.String(30), nullable=False, default="DRAFT",
        comment="DRAFT | SUBMITTED | UNDER_REVIEW | APPROVED | REVISION_REQUESTED",
    )
    submitted_at = db.Column(db.DateTime(timezone=True), nullable=True)
    reviewed_at = db.Column(db.DateTime(timezone=True), nullable=True)
    reviewed_by_id = db.Column(db.String(64), nullable=True)
    revision_notes = db.Column(db.Text, nullable=True)

    created_at = db.Column(db.DateTime(timezone=True), default=_utcnow)
    updated_at = db.Column(
        db.DateTime(timezone=True), default=_utcnow, onupdate=_utcnow,
    )

    token = db.relationship("StakeholderAccessToken", back_populates="submission")
    responses = db.relationship(
        "StakeholderResponse", backref="submission", lazy="dynamic",
        cascade="all, delete-orphan",
    )
    change_logs = db.relationship(
        "StakeholderChangeLog", backref="submission", lazy="dynamic",
        cascade="all, delete-orphan",
        order_by="StakeholderChangeLog.changed_at.desc()",
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "token_id": self.token_id,
            "workspace_id": self.workspace_id,
            "training_type": self.training_type,
            "status": self.status,
            "submitted_at": _iso(self.submitted_at),
            "reviewed_at": _iso(self.reviewed_at),
            "reviewed_by_id": self.reviewed_by_id,
            "revision_notes": self.revision_notes,
            "created_at": _iso(self.created_at),
        }

    def __repr__(self):
        return f"<StakeholderSubmission {self.id} {self.status}>"


# ═════════════════════════════════════════════════════════════════════════════
# Response + change log
# ═════════════════════════════════════════════════════════════════════════════


class StakeholderResponse(db.Model):
    """Current answer for one question. At most one row per (submission, question)."""

    __tablename__ = "stakeholder_responses"
    __table_args__ = (
        db.UniqueConstraint(
            "submission_id", "question_id", name="uq_stakeholder_response_question",
        ),
    )

    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    submission_id = db.Column(
        db.String(36),
        db.ForeignKey("stakeholder_submissions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    question_id = db.Column(db.String(50), nullable=False)
    value = db.Column(db.Text, nullable=False, default="")
    updated_by = db.Column(
        db.String(200), nullable=True,
        comment="Free-text attribution supplied by the respondent",
    )
    created_at = db.Column(db.DateTime(timezone=True), default=_utcnow)
    updated_at = db.Column(
        db.DateTime(timezone=True), default=_utcnow, onupdate=_utcnow,
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "submission_id": self.submission_id,
            "question_id": self.question_id,
            "value": self.value,
            "updated_by": self.updated_by,
            "updated_at": _iso(self.updated_at),
        }

    def __repr__(self):
        return f"<StakeholderResponse {self.submission_id}/{self.question_id}>"


class StakeholderChangeLog(db.Model):
    """
    Immutable record of one value transition on a response.

    previous_value is NULL for the first write of a question.
    Rows are never updated or deleted by the application.
    """

    __tablename__ = "stakeholder_change_logs"
    __table_args__ = (
        db.Index("ix_stakeholder_change_log_sub_ts", "submission_id", "changed_at"),
    )

    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    submission_id = db.Column(
        db.String(36),
        db.ForeignKey("stakeholder_submissions.id", ondelete="CASCADE"),
        nullable=False,
    )
    question_id = db.Column(db.String(50), nullable=False)
    changed_by = db.Column(db.String(200), nullable=False)
    previous_value = db.Column(db.Text, nullable=True)
    new_value = db.Column(db.Text, nullable=False)
    changed_at = db.Column(db.DateTime(timezone=True), nullable=False, default=_utcnow)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "submission_id": self.submission_id,
            "question_id": self.question_id,
            "changed_by": self.changed_by,
            "previous_value": self.previous_value,
            "new_value": self.new_value,
            "changed_at": _iso(self.changed_at),
        }

    def __repr__(self):
        return f"<StakeholderChangeLog {self.question_id} by {self.changed_by}>"
