"""
Workspace authorization.

Every reviewer operation calls ``authorize`` before touching data. Membership
lives in ``workspace_members``; a user with no row, or with a role outside
``allowed_roles``, is refused.

Usage:
    from app.services.permission import authorize, PermissionDenied

    role = authorize(actor_id, workspace_id)                 # any member
    role = authorize(actor_id, workspace_id, {"ADMINISTRATOR", "MANAGER"})
"""

import logging

from app.models.workspace import WORKSPACE_ROLES, WorkspaceMember

logger = logging.getLogger(__name__)

# Roles allowed to manage stakeholder links and review submissions.
STAKEHOLDER_REVIEW_ROLES = frozenset(WORKSPACE_ROLES)


class PermissionDenied(Exception):
    """Raised when a user lacks the required workspace role."""

    def __init__(self, user_id: str | None, workspace_id: str | None):
        super().__init__(
            f"User {user_id} does not have access to workspace {workspace_id}"
        )
        self.user_id = user_id
        self.workspace_id = workspace_id


def get_member_role(user_id: str, workspace_id: str) -> str | None:
    """Return the user's role in the workspace, or None if not a member."""
    member = WorkspaceMember.query.filter_by(
        workspace_id=workspace_id, user_id=user_id,
    ).first()
    return member.role if member else None


def authorize(
    actor_id: str | None,
    workspace_id: str | None,
    allowed_roles=STAKEHOLDER_REVIEW_ROLES,
) -> str:
    """
    Assert the actor holds one of ``allowed_roles`` in the workspace.

    Args:
        actor_id: Authenticated user id (from the JWT ``sub`` claim).
        workspace_id: Workspace that owns the resource being acted on.
        allowed_roles: Iterable of role names that may proceed.

    Returns:
        The actor's role.

    Raises:
        PermissionDenied: If the actor is not a member or has the wrong role.
    """
    if not actor_id or not workspace_id:
        raise PermissionDenied(actor_id, workspace_id)

    role = get_member_role(actor_id, workspace_id)
    if role is None or role not in allowed_roles:
        logger.warning(
            "Workspace access denied",
            extra={"user_id": actor_id, "workspace_id": workspace_id, "role": role},
        )
        raise PermissionDenied(actor_id, workspace_id)
    return role
