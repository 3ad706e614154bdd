"""stakeholder_intake_tables

Create workspace membership and stakeholder intake tables:
workspaces, workspace_members, stakeholder_access_tokens,
stakeholder_submissions, stakeholder_responses, stakeholder_change_logs.

Revision ID: 5f1c2a9d7e30
Revises:
Create Date: 2026-10-18 09:00:00.000000
"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect as sa_inspect


# revision identifiers, used by Alembic.
revision = "5f1c2a9d7e30"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    inspector = sa_inspect(bind)
    existing_tables = set(inspector.get_table_names())

    if "workspaces" not in existing_tables:
        op.create_table(
            "workspaces",
            sa.Column("id", sa.String(length=36), nullable=False),
            sa.Column("name", sa.String(length=200), nullable=False),
            sa.Column("description", sa.Text(), nullable=True),
            sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
            sa.PrimaryKeyConstraint("id"),
        )

    if "workspace_members" not in existing_tables:
        op.create_table(
            "workspace_members",
            sa.Column("id", sa.String(length=36), nullable=False),
            sa.Column("workspace_id", sa.String(length=36), nullable=False),
            sa.Column("user_id", sa.String(length=64), nullable=False),
            sa.Column("role", sa.String(length=20), nullable=False),
            sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
            sa.ForeignKeyConstraint(["workspace_id"], ["workspaces.id"], ondelete="CASCADE"),
            sa.PrimaryKeyConstraint("id"),
            sa.UniqueConstraint("workspace_id", "user_id", name="uq_workspace_member"),
        )
        op.create_index("ix_workspace_members_workspace_id", "workspace_members", ["workspace_id"])
        op.create_index("ix_workspace_members_user_id", "workspace_members", ["user_id"])

    if "stakeholder_access_tokens" not in existing_tables:
        op.create_table(
            "stakeholder_access_tokens",
            sa.Column("id", sa.String(length=36), nullable=False),
            sa.Column("token", sa.String(length=64), nullable=False),
            sa.Column("workspace_id", sa.String(length=36), nullable=False),
            sa.Column("training_type", sa.String(length=30), nullable=False),
            sa.Column("created_by_id", sa.String(length=64), nullable=False),
            sa.Column("expires_at", sa.DateTime(timezone=True), nullable=True),
            sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
            sa.Column("stakeholder_name", sa.String(length=200), nullable=True),
            sa.Column("stakeholder_email", sa.String(length=255), nullable=True),
            sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
            sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
            sa.ForeignKeyConstraint(["workspace_id"], ["workspaces.id"], ondelete="CASCADE"),
            sa.PrimaryKeyConstraint("id"),
        )
        op.create_index(
            "ix_stakeholder_access_tokens_token", "stakeholder_access_tokens", ["token"],
            unique=True,
        )
        op.create_index(
            "ix_stakeholder_access_tokens_workspace_id", "stakeholder_access_tokens",
            ["workspace_id"],
        )

    if "stakeholder_submissions" not in existing_tables:
        op.create_table(
            "stakeholder_submissions",
            sa.Column("id", sa.String(length=36), nullable=False),
            sa.Column("token_id", sa.String(length=36), nullable=False),
            sa.Column("workspace_id", sa.String(length=36), nullable=False),
            sa.Column("training_type", sa.String(length=30), nullable=False),
            sa.Column("status", sa.String(length=30), nullable=False, server_default="DRAFT"),
            sa.Column("submitted_at", sa.DateTime(timezone=True), nullable=True),
            sa.Column("reviewed_at", sa.DateTime(timezone=True), nullable=True),
            sa.Column("reviewed_by_id", sa.String(length=64), nullable=True),
            sa.Column("revision_notes", sa.Text(), nullable=True),
            sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
            sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
            sa.ForeignKeyConstraint(
                ["token_id"], ["stakeholder_access_tokens.id"], ondelete="CASCADE",
            ),
            sa.ForeignKeyConstraint(["workspace_id"], ["workspaces.id"], ondelete="CASCADE"),
            sa.PrimaryKeyConstraint("id"),
            sa.UniqueConstraint("token_id"),
        )
        op.create_index(
            "ix_stakeholder_submissions_workspace_id", "stakeholder_submissions",
            ["workspace_id"],
        )
        op.create_index(
            "ix_stakeholder_submission_ws_status", "stakeholder_submissions",
            ["workspace_id", "status"],
        )

    if "stakeholder_responses" not in existing_tables:
        op.create_table(
            "stakeholder_responses",
            sa.Column("id", sa.String(length=36), nullable=False),
            sa.Column("submission_id", sa.String(length=36), nullable=False),
            sa.Column("question_id", sa.String(length=50), nullable=False),
            sa.Column("value", sa.Text(), nullable=False),
            sa.Column("updated_by", sa.String(length=200), nullable=True),
            sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
            sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
            sa.ForeignKeyConstraint(
                ["submission_id"], ["stakeholder_submissions.id"], ondelete="CASCADE",
            ),
            sa.PrimaryKeyConstraint("id"),
            sa.UniqueConstraint(
                "submission_id", "question_id", name="uq_stakeholder_response_question",
            ),
        )
        op.create_index(
            "ix_stakeholder_responses_submission_id", "stakeholder_responses",
            ["submission_id"],
        )

    if "stakeholder_change_logs" not in existing_tables:
        op.create_table(
            "stakeholder_change_logs",
            sa.Column("id", sa.String(length=36), nullable=False),
            sa.Column("submission_id", sa.String(length=36), nullable=False),
            sa.Column("question_id", sa.String(length=50), nullable=False),
            sa.Column("changed_by", sa.String(length=200), nullable=False),
            sa.Column("previous_value", sa.Text(), nullable=True),
            sa.Column("new_value", sa.Text(), nullable=False),
            sa.Column("changed_at", sa.DateTime(timezone=True), nullable=False),
            sa.ForeignKeyConstraint(
                ["submission_id"], ["stakeholder_submissions.id"], ondelete="CASCADE",
            ),
            sa.PrimaryKeyConstraint("id"),
        )
        op.create_index(
            "ix_stakeholder_change_log_sub_ts", "stakeholder_change_logs",
            ["submission_id", "changed_at"],
        )


def downgrade():
    op.drop_table("stakeholder_change_logs")
    op.drop_table("stakeholder_responses")
    op.drop_table("stakeholder_submissions")
    op.drop_table("stakeholder_access_tokens")
    op.drop_table("workspace_members")
    op.drop_table("workspaces")
