"""
Shared pytest fixtures for the Stakeholder Intake test suite.

Provides:
    - app: Flask application (session-scoped)
    - _setup_db: Database table creation/teardown (session-scoped)
    - session: Per-test DB cleanup w/ rollback + recreate (autouse)
    - client: Flask test client (function-scoped)
    - workspace / reviewer: Workspace with an ADMINISTRATOR member
    - auth_headers: Bearer JWT for the reviewer
    - issued_token: A fresh PERFORMANCE_PROBLEM form link
"""

import pytest

from app import create_app
from app.models import db as _db
from app.models.workspace import Workspace, WorkspaceMember
from app.services import stakeholder_token_service
from app.services.jwt_service import generate_access_token

REVIEWER_ID = "reviewer-1"


def make_headers(user_id: str) -> dict:
    """JWT Authorization + Content-Type headers for *user_id*."""
    return {
        "Authorization": f"Bearer {generate_access_token(user_id)}",
        "Content-Type": "application/json",
    }


# ── App & DB fixtures ────────────────────────────────────────────────────


@pytest.fixture(scope="session")
def app():
    """Create the Flask application once per test session."""
    application = create_app("testing")
    return application


@pytest.fixture(scope="session")
def _setup_db(app):
    """Create all tables at session start, drop at end."""
    with app.app_context():
        _db.create_all()
    yield
    with app.app_context():
        _db.drop_all()


@pytest.fixture(autouse=True)
def session(app, _setup_db):
    """Per-test: open app context, rollback after test, recreate tables."""
    with app.app_context():
        yield
        _db.session.rollback()
        _db.drop_all()
        _db.create_all()


@pytest.fixture()
def client(app):
    """Flask test client."""
    return app.test_client()


# ── Convenience fixtures ─────────────────────────────────────────────────


@pytest.fixture()
def workspace() -> Workspace:
    ws = Workspace(name="Onboarding Redesign")
    _db.session.add(ws)
    _db.session.commit()
    return ws


@pytest.fixture()
def reviewer(workspace) -> str:
    """Add REVIEWER_ID to the workspace as ADMINISTRATOR and return the id."""
    _db.session.add(WorkspaceMember(
        workspace_id=workspace.id, user_id=REVIEWER_ID, role="ADMINISTRATOR",
    ))
    _db.session.commit()
    return REVIEWER_ID


@pytest.fixture()
def auth_headers(reviewer) -> dict:
    return make_headers(reviewer)


@pytest.fixture()
def issued_token(workspace, reviewer) -> dict:
    """A PERFORMANCE_PROBLEM link created through the service layer."""
    return stakeholder_token_service.create_token(
        reviewer, workspace.id, "PERFORMANCE_PROBLEM",
    )


def required_answers(training_type: str) -> list[dict]:
    """Response entries that satisfy every unconditional required question.

    Select questions take their first option, which never triggers a
    conditional follow-up.
    """
    from app.questions import get_questions_for_type

    entries = []
    for q in get_questions_for_type(training_type):
        if not q.required or q.conditional is not None:
            continue
        value = q.options[0] if q.options else f"Answer for {q.id}"
        entries.append({"question_id": q.id, "value": value})
    return entries


@pytest.fixture()
def complete_responses():
    """Callable fixture: ``complete_responses("COMPLIANCE") -> [entries]``."""
    return required_answers


@pytest.fixture()
def headers_for():
    """Callable fixture: ``headers_for("user-id") -> JWT headers``."""
    return make_headers
