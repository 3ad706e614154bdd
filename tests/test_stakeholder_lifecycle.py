"""
Submission lifecycle tests (app/services/stakeholder_lifecycle.py).

State machine (SUBMISSION_TRANSITIONS):
    - DRAFT | REVISION_REQUESTED -> SUBMITTED          (submit, respondent)
    - SUBMITTED -> UNDER_REVIEW                        (start_review)
    - SUBMITTED | UNDER_REVIEW -> REVISION_REQUESTED   (request_revision)
    - SUBMITTED | UNDER_REVIEW -> APPROVED             (approve)

For each transition: side effects on timestamps, reviewer fields and the
token's is_active flag; every disallowed source status raises
InvalidStateTransition.
"""

import pytest
from sqlalchemy import update

from app.core.exceptions import (
    ForbiddenError,
    InvalidStateTransition,
    MissingRequiredResponsesError,
    NotFoundError,
    ValidationError,
)
from app.models import db
from app.models.stakeholder import (
    SUBMISSION_STATUSES,
    SUBMISSION_TRANSITIONS,
    StakeholderAccessToken,
    StakeholderSubmission,
)
from app.services import stakeholder_lifecycle as lifecycle
from app.services.permission import PermissionDenied
from app.services.stakeholder_response_service import load_answers, upsert_responses
from app.services.stakeholder_token_service import validate_token


def _submission(issued_token) -> StakeholderSubmission:
    return db.session.get(StakeholderSubmission, issued_token["submission"]["id"])


def _token(issued_token) -> StakeholderAccessToken:
    return db.session.get(StakeholderAccessToken, issued_token["id"])


def _force_status(issued_token, status: str) -> None:
    sub = _submission(issued_token)
    sub.status = status
    db.session.commit()


def _fill(issued_token, entries) -> None:
    upsert_responses(issued_token["token"], entries, "Respondent")


@pytest.fixture()
def submitted(issued_token, complete_responses):
    """issued_token with every required answer filled and submitted."""
    _fill(issued_token, complete_responses("PERFORMANCE_PROBLEM"))
    lifecycle.submit(issued_token["token"])
    return issued_token


# ═════════════════════════════════════════════════════════════════════════════
# submit
# ═════════════════════════════════════════════════════════════════════════════


class TestSubmit:

    def test_success(self, issued_token, complete_responses):
        _fill(issued_token, complete_responses("PERFORMANCE_PROBLEM"))

        result = lifecycle.submit(issued_token["token"])

        assert result["success"] is True
        assert result["submission_id"] == issued_token["submission"]["id"]
        assert result["status"] == "SUBMITTED"
        assert result["submitted_at"] is not None

        sub = _submission(issued_token)
        assert sub.status == "SUBMITTED"
        assert sub.submitted_at is not None
        assert _token(issued_token).is_active is False

    def test_token_rejected_after_submit(self, submitted):
        with pytest.raises(ForbiddenError):
            validate_token(submitted["token"])

    def test_missing_lists_exactly_unanswered(self, issued_token, complete_responses):
        entries = [
            e for e in complete_responses("PERFORMANCE_PROBLEM")
            if e["question_id"] not in ("PERF_01", "LP_PERF_03")
        ]
        _fill(issued_token, entries + [{"question_id": "SHARED_09", "value": "   "}])

        with pytest.raises(MissingRequiredResponsesError) as exc:
            lifecycle.submit(issued_token["token"])

        assert [m["question_id"] for m in exc.value.missing] == ["PERF_01", "LP_PERF_03"]
        sub = _submission(issued_token)
        assert sub.status == "DRAFT"
        assert sub.submitted_at is None
        assert _token(issued_token).is_active is True

    def test_whitespace_answer_counts_as_missing(self, issued_token, complete_responses):
        entries = complete_responses("PERFORMANCE_PROBLEM")
        entries[0] = {"question_id": entries[0]["question_id"], "value": "  \n "}
        _fill(issued_token, entries)
        with pytest.raises(MissingRequiredResponsesError) as exc:
            lifecycle.submit(issued_token["token"])
        assert [m["question_id"] for m in exc.value.missing] == ["SHARED_01"]

    def test_conditional_chain_example(self, issued_token, complete_responses):
        """LP_PERF_02 'Yes' makes LP_PERF_02B required; answering it unblocks submit."""
        _fill(issued_token, complete_responses("PERFORMANCE_PROBLEM"))
        _fill(issued_token, [{"question_id": "LP_PERF_02", "value": "Yes (please describe below)"}])

        with pytest.raises(MissingRequiredResponsesError) as exc:
            lifecycle.submit(issued_token["token"])
        assert [m["question_id"] for m in exc.value.missing] == ["LP_PERF_02B"]

        _fill(issued_token, [{"question_id": "LP_PERF_02B", "value": "Night shift struggles most"}])
        assert lifecycle.submit(issued_token["token"])["status"] == "SUBMITTED"

    def test_other_role_requires_description(self, issued_token, complete_responses):
        _fill(issued_token, complete_responses("PERFORMANCE_PROBLEM"))
        _fill(issued_token, [
            {"question_id": "SHARED_03", "value": "Other (please describe in the next field)"},
        ])
        with pytest.raises(MissingRequiredResponsesError) as exc:
            lifecycle.submit(issued_token["token"])
        assert [m["question_id"] for m in exc.value.missing] == ["SHARED_04"]

    def test_false_trigger_does_not_require_flagged_follow_up(self, issued_token, complete_responses):
        _fill(issued_token, complete_responses("PERFORMANCE_PROBLEM"))
        _fill(issued_token, [{"question_id": "LP_PERF_06", "value": "No"}])
        assert lifecycle.submit(issued_token["token"])["status"] == "SUBMITTED"

    def test_failed_commit_changes_nothing(self, issued_token, complete_responses, monkeypatch):
        _fill(issued_token, complete_responses("PERFORMANCE_PROBLEM"))

        def failing_commit():
            raise RuntimeError("database went away")

        monkeypatch.setattr(db.session, "commit", failing_commit)

        with pytest.raises(RuntimeError, match="database went away"):
            lifecycle.submit(issued_token["token"])

        sub = _submission(issued_token)
        assert sub.status == "DRAFT"
        assert sub.submitted_at is None
        assert _token(issued_token).is_active is True

    @pytest.mark.parametrize("status", ["SUBMITTED", "UNDER_REVIEW", "APPROVED"])
    def test_refused_outside_writable_statuses(self, issued_token, complete_responses, status):
        _fill(issued_token, complete_responses("PERFORMANCE_PROBLEM"))
        _force_status(issued_token, status)
        with pytest.raises(ForbiddenError):
            lifecycle.submit(issued_token["token"])


# ═════════════════════════════════════════════════════════════════════════════
# Reviewer transitions
# ═════════════════════════════════════════════════════════════════════════════


class TestStartReview:

    def test_success(self, submitted, reviewer):
        result = lifecycle.start_review(reviewer, submitted["submission"]["id"])
        assert result["status"] == "UNDER_REVIEW"
        assert result["reviewed_by_id"] == reviewer

    def test_non_member_refused(self, submitted):
        with pytest.raises(PermissionDenied):
            lifecycle.start_review("outsider-1", submitted["submission"]["id"])
        assert _submission(submitted).status == "SUBMITTED"

    def test_unknown_submission(self, reviewer):
        with pytest.raises(NotFoundError):
            lifecycle.start_review(reviewer, "missing")


class TestRequestRevision:

    def test_from_submitted_reactivates_token(self, submitted, reviewer):
        before = load_answers(submitted["submission"]["id"])

        result = lifecycle.request_revision(
            reviewer, submitted["submission"]["id"], "  Please expand PERF_02.  ",
        )

        assert result["status"] == "REVISION_REQUESTED"
        assert result["revision_notes"] == "Please expand PERF_02."
        assert result["reviewed_by_id"] == reviewer
        assert result["reviewed_at"] is not None
        assert _token(submitted).is_active is True
        validate_token(submitted["token"])
        assert load_answers(submitted["submission"]["id"]) == before

    def test_from_under_review(self, submitted, reviewer):
        lifecycle.start_review(reviewer, submitted["submission"]["id"])
        result = lifecycle.request_revision(reviewer, submitted["submission"]["id"], "More detail")
        assert result["status"] == "REVISION_REQUESTED"

    @pytest.mark.parametrize("notes", [None, "", "   ", 7])
    def test_notes_required(self, submitted, reviewer, notes):
        with pytest.raises(ValidationError):
            lifecycle.request_revision(reviewer, submitted["submission"]["id"], notes)
        assert _submission(submitted).status == "SUBMITTED"

    def test_resubmit_after_revision(self, submitted, reviewer):
        sid = submitted["submission"]["id"]
        lifecycle.request_revision(reviewer, sid, "Clarify success criteria")
        _fill(submitted, [{"question_id": "PERF_07", "value": "Error rate below 2%"}])

        result = lifecycle.submit(submitted["token"])

        assert result["status"] == "SUBMITTED"
        assert _token(submitted).is_active is False


class TestApprove:

    def test_from_submitted(self, submitted, reviewer):
        result = lifecycle.approve(reviewer, submitted["submission"]["id"])
        assert set(result) == {"success", "submission_id", "status", "reviewed_at"}
        assert result["success"] is True
        assert result["submission_id"] == submitted["submission"]["id"]
        assert result["status"] == "APPROVED"
        assert result["reviewed_at"] is not None
        assert _token(submitted).is_active is False

    def test_from_under_review(self, submitted, reviewer):
        lifecycle.start_review(reviewer, submitted["submission"]["id"])
        assert lifecycle.approve(reviewer, submitted["submission"]["id"])["status"] == "APPROVED"

    def test_approved_is_terminal(self, submitted, reviewer):
        sid = submitted["submission"]["id"]
        lifecycle.approve(reviewer, sid)
        for action in ("start_review", "approve"):
            with pytest.raises(InvalidStateTransition):
                getattr(lifecycle, action)(reviewer, sid)
        with pytest.raises(InvalidStateTransition):
            lifecycle.request_revision(reviewer, sid, "Too late")


def _invalid_edges():
    edges = []
    for action in ("start_review", "request_revision", "approve"):
        allowed = SUBMISSION_TRANSITIONS[action]["from"]
        for status in SUBMISSION_STATUSES:
            if status not in allowed:
                edges.append((action, status))
    return edges


class TestInvalidTransitions:

    @pytest.mark.parametrize("action,status", _invalid_edges())
    def test_rejected_without_change(self, issued_token, reviewer, action, status):
        _force_status(issued_token, status)
        sid = issued_token["submission"]["id"]
        args = (reviewer, sid, "notes") if action == "request_revision" else (reviewer, sid)

        with pytest.raises(InvalidStateTransition) as exc:
            getattr(lifecycle, action)(*args)

        assert exc.value.current_status == status
        assert _submission(issued_token).status == status

    def test_guarded_update_detects_lost_race(self, submitted, reviewer):
        """A status change the caller has not seen makes the guarded UPDATE match no rows."""
        sid = submitted["submission"]["id"]
        sub = _submission(submitted)
        db.session.execute(
            update(StakeholderSubmission)
            .where(StakeholderSubmission.id == sid)
            .values(status="APPROVED")
            .execution_options(synchronize_session=False)
        )
        db.session.commit()

        with pytest.raises(InvalidStateTransition) as exc:
            lifecycle._guarded_transition(sub, "start_review")
        assert exc.value.current_status == "APPROVED"
