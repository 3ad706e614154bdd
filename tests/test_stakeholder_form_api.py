"""
Respondent form API tests — /api/v1/stakeholder/form/<token>.

Covers GET form, PUT responses, POST submit, POST identify and the error
mapping for unknown / inactive tokens and malformed request bodies.
"""

import pytest

from app.models import db
from app.models.stakeholder import StakeholderAccessToken, StakeholderChangeLog

BASE = "/api/v1/stakeholder/form"


def _url(issued_token, suffix=""):
    return f"{BASE}/{issued_token['token']}{suffix}"


class TestGetForm:

    def test_returns_form(self, client, issued_token, workspace):
        res = client.get(_url(issued_token))
        assert res.status_code == 200
        data = res.get_json()

        assert data["workspace_name"] == workspace.name
        assert data["training_type"] == "PERFORMANCE_PROBLEM"
        assert data["training_type_label"] == "Performance Problem"
        assert data["submission"] == {
            "id": issued_token["submission"]["id"],
            "status": "DRAFT",
            "revision_notes": None,
        }
        assert data["stakeholder_name"] is None
        assert data["responses"] == {}
        assert len(data["questions"]) == 27

    def test_questions_hide_designer_notes(self, client, issued_token):
        questions = client.get(_url(issued_token)).get_json()["questions"]
        for q in questions:
            assert "id_notes" not in q
            assert "id_notes_extended" not in q

    def test_includes_saved_responses(self, client, issued_token):
        client.put(_url(issued_token, "/responses"), json={
            "responses": [{"question_id": "SHARED_01", "value": "Ada"}],
            "changed_by": "Ada",
        })
        data = client.get(_url(issued_token)).get_json()
        assert data["responses"] == {"SHARED_01": "Ada"}

    def test_unknown_token_404(self, client, issued_token):
        res = client.get(f"{BASE}/{'a' * 64}")
        assert res.status_code == 404
        assert res.get_json()["code"] == "ERR_NOT_FOUND"

    def test_inactive_token_403(self, client, issued_token):
        token = db.session.get(StakeholderAccessToken, issued_token["id"])
        token.is_active = False
        db.session.commit()

        res = client.get(_url(issued_token))
        assert res.status_code == 403
        body = res.get_json()
        assert body["code"] == "ERR_FORBIDDEN"
        assert body["error"] == "This form link is no longer active"


class TestSaveResponses:

    def test_save(self, client, issued_token):
        res = client.put(_url(issued_token, "/responses"), json={
            "responses": [
                {"question_id": "SHARED_01", "value": "Ada"},
                {"question_id": "SHARED_02", "value": "Engines Ltd"},
            ],
            "changed_by": "Ada",
        })
        assert res.status_code == 200
        assert res.get_json() == {"saved": 2, "changed": 2}
        assert StakeholderChangeLog.query.count() == 2

    def test_resave_unchanged(self, client, issued_token):
        body = {"responses": [{"question_id": "SHARED_01", "value": "Ada"}], "changed_by": "Ada"}
        client.put(_url(issued_token, "/responses"), json=body)
        res = client.put(_url(issued_token, "/responses"), json=body)
        assert res.get_json() == {"saved": 1, "changed": 0}

    @pytest.mark.parametrize("responses", [None, "SHARED_01", {"question_id": "SHARED_01"}])
    def test_responses_must_be_list(self, client, issued_token, responses):
        res = client.put(_url(issued_token, "/responses"),
                         json={"responses": responses, "changed_by": "Ada"})
        assert res.status_code == 400
        assert res.get_json()["code"] == "ERR_VALIDATION_INVALID"

    @pytest.mark.parametrize("changed_by", [None, "", 12])
    def test_changed_by_required(self, client, issued_token, changed_by):
        res = client.put(_url(issued_token, "/responses"),
                         json={"responses": [], "changed_by": changed_by})
        assert res.status_code == 400

    def test_no_body(self, client, issued_token):
        res = client.put(_url(issued_token, "/responses"))
        assert res.status_code == 400

    @pytest.mark.parametrize("body", [
        [{"question_id": "SHARED_01", "value": "Ada"}],
        "text",
        5,
    ])
    def test_body_must_be_object(self, client, issued_token, body):
        res = client.put(_url(issued_token, "/responses"), json=body)
        assert res.status_code == 400
        assert res.get_json()["code"] == "ERR_VALIDATION_INVALID"
        assert StakeholderChangeLog.query.count() == 0

    def test_refused_after_submit(self, client, issued_token, complete_responses):
        client.put(_url(issued_token, "/responses"), json={
            "responses": complete_responses("PERFORMANCE_PROBLEM"), "changed_by": "Ada",
        })
        assert client.post(_url(issued_token, "/submit")).status_code == 200

        res = client.put(_url(issued_token, "/responses"), json={
            "responses": [{"question_id": "SHARED_01", "value": "Changed"}],
            "changed_by": "Ada",
        })
        assert res.status_code == 403


class TestSubmit:

    def test_missing_required(self, client, issued_token):
        client.put(_url(issued_token, "/responses"), json={
            "responses": [{"question_id": "SHARED_01", "value": "Ada"}],
            "changed_by": "Ada",
        })
        res = client.post(_url(issued_token, "/submit"))

        assert res.status_code == 400
        body = res.get_json()
        assert body["code"] == "MISSING_REQUIRED_RESPONSES"
        ids = [m["question_id"] for m in body["missing_questions"]]
        assert "SHARED_01" not in ids
        assert ids[0] == "SHARED_02"
        assert {"question_id", "question_text", "section"} <= set(body["missing_questions"][0])

    def test_success(self, client, issued_token, complete_responses):
        client.put(_url(issued_token, "/responses"), json={
            "responses": complete_responses("PERFORMANCE_PROBLEM"), "changed_by": "Ada",
        })
        res = client.post(_url(issued_token, "/submit"))

        assert res.status_code == 200
        body = res.get_json()
        assert body["success"] is True
        assert body["status"] == "SUBMITTED"
        assert body["submission_id"] == issued_token["submission"]["id"]
        assert body["submitted_at"]

        # The link is spent once submitted.
        assert client.get(_url(issued_token)).status_code == 403


class TestIdentify:

    def test_identify(self, client, issued_token):
        res = client.post(_url(issued_token, "/identify"),
                          json={"name": "Grace Hopper", "email": "grace@example.com"})
        assert res.status_code == 200
        assert res.get_json() == {"success": True, "name": "Grace Hopper"}

        data = client.get(_url(issued_token)).get_json()
        assert data["stakeholder_name"] == "Grace Hopper"
        assert data["stakeholder_email"] == "grace@example.com"

    def test_name_required(self, client, issued_token):
        res = client.post(_url(issued_token, "/identify"), json={"email": "grace@example.com"})
        assert res.status_code == 400
        assert res.get_json()["details"] == {"name": "required"}

    @pytest.mark.parametrize("body", [["Grace"], "Grace", 5])
    def test_body_must_be_object(self, client, issued_token, body):
        res = client.post(_url(issued_token, "/identify"), json=body)
        assert res.status_code == 400
        assert res.get_json()["code"] == "ERR_VALIDATION_INVALID"

    def test_no_jwt_needed(self, client, issued_token):
        res = client.post(_url(issued_token, "/identify"), json={"name": "Grace"},
                          headers={"Authorization": "Bearer not-a-jwt"})
        assert res.status_code == 200
