"""
Stakeholder Intake Service
Workspace membership model.

Models:
    - Workspace:        owning scope for tokens and submissions
    - WorkspaceMember:  (workspace, user) → role; backs the authorize() check

Only the columns the intake workflow reads are modelled here. Course and
page content that hangs off a workspace lives outside this service.
"""

import uuid
from datetime import datetime, timezone

from app.models import db

# ── Constants ────────────────────────────────────────────────────────────────

WORKSPACE_ROLES = ("ADMINISTRATOR", "MANAGER", "DESIGNER", "FACILITATOR")


def _uuid():
    return str(uuid.uuid4())


def _utcnow():
    return datetime.now(timezone.utc)


class Workspace(db.Model):
    """A team workspace that owns stakeholder tokens and submissions."""

    __tablename__ = "workspaces"

    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), default=_utcnow)

    members = db.relationship(
        "WorkspaceMember", backref="workspace", lazy="dynamic",
        cascade="all, delete-orphan",
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f"<Workspace {self.id}: {self.name}>"


class WorkspaceMember(db.Model):
    """Membership row. One per (workspace, user)."""

    __tablename__ = "workspace_members"
    __table_args__ = (
        db.UniqueConstraint("workspace_id", "user_id", name="uq_workspace_member"),
    )

    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    workspace_id = db.Column(
        db.String(36),
        db.ForeignKey("workspaces.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = db.Column(db.String(64), nullable=False, index=True)
    role = db.Column(
        db.String(20),
        nullable=False,
        default="DESIGNER",
        comment="ADMINISTRATOR | MANAGER | DESIGNER | FACILITATOR",
    )
    created_at = db.Column(db.DateTime(timezone=True), default=_utcnow)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "workspace_id": self.workspace_id,
            "user_id": self.user_id,
            "role": self.role,
        }

    def __repr__(self):
        return f"<WorkspaceMember {self.user_id}@{self.workspace_id} {self.role}>"
