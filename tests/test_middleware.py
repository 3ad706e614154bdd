"""
Middleware and app-level behaviour.

Covers:
  - per-token rate limiting on the respondent form (429 JSON body)
  - request timing headers and token masking in logged paths
  - JSON log formatter context fields
  - health check and app-level 404 / 405 handlers
  - JWT middleware leaves form routes alone
"""

import json
import logging

import pytest

from app import limiter
from app.middleware.logging_config import JSONFormatter
from app.middleware.timing import loggable_path

FORM = "/api/v1/stakeholder/form"


@pytest.fixture()
def rate_limited(app):
    """Enable Flask-Limiter with a small form budget for one test."""
    previous_limit = app.config["STAKEHOLDER_FORM_RATE_LIMIT"]
    app.config["STAKEHOLDER_FORM_RATE_LIMIT"] = "3/minute"
    limiter.enabled = True
    limiter.reset()
    yield
    limiter.reset()
    limiter.enabled = False
    app.config["STAKEHOLDER_FORM_RATE_LIMIT"] = previous_limit


class TestRateLimiting:

    def test_form_limited_per_token(self, client, issued_token, workspace, reviewer, rate_limited):
        from app.services.stakeholder_token_service import create_token

        url = f"{FORM}/{issued_token['token']}"
        for _ in range(3):
            assert client.get(url).status_code == 200

        res = client.get(url)
        assert res.status_code == 429
        body = res.get_json()
        assert body["error"] == "Too many requests"
        assert "retry_after" in body

        # A different link has its own budget.
        other = create_token(reviewer, workspace.id, "COMPLIANCE")
        assert client.get(f"{FORM}/{other['token']}").status_code == 200

    def test_storage_outage_lets_request_through(self, client, issued_token, rate_limited, monkeypatch):
        def unreachable(*args, **kwargs):
            raise ConnectionError("rate limit storage unreachable")

        monkeypatch.setattr(limiter.limiter, "hit", unreachable)

        res = client.get(f"{FORM}/{issued_token['token']}")
        assert res.status_code == 200

    def test_swallow_errors_configured(self, app):
        assert app.config["RATELIMIT_SWALLOW_ERRORS"] is True

    def test_disabled_in_testing_config(self, app):
        assert app.config["RATELIMIT_ENABLED"] is False

    def test_429_handler_registered(self, app):
        assert 429 in app.error_handler_spec.get(None, {})


class TestTiming:

    def test_headers_set(self, client):
        res = client.get("/api/v1/health")
        assert "X-Request-Duration-Ms" in res.headers
        assert res.headers["X-Request-ID"]

    def test_request_id_echoed(self, client):
        res = client.get("/api/v1/health", headers={"X-Request-ID": "abc123"})
        assert res.headers["X-Request-ID"] == "abc123"

    def test_form_token_masked_in_logged_path(self):
        token = "a" * 64
        assert loggable_path(f"{FORM}/{token}/responses") == f"{FORM}/***/responses"
        assert loggable_path("/api/v1/stakeholder/tokens") == "/api/v1/stakeholder/tokens"


class TestJSONFormatter:

    def test_includes_context_fields(self):
        record = logging.LogRecord(
            name="app.services.stakeholder_lifecycle", level=logging.INFO,
            pathname=__file__, lineno=1, msg="Stakeholder submission transitioned",
            args=(), exc_info=None,
        )
        record.submission_id = "sub-1"
        record.action = "approve"
        record.unrelated = "dropped"

        entry = json.loads(JSONFormatter().format(record))

        assert entry["message"] == "Stakeholder submission transitioned"
        assert entry["submission_id"] == "sub-1"
        assert entry["action"] == "approve"
        assert "unrelated" not in entry


class TestAppHandlers:

    def test_health(self, client):
        res = client.get("/api/v1/health")
        assert res.status_code == 200
        assert res.get_json()["status"] == "ok"

    def test_unknown_route_404_json(self, client):
        res = client.get("/api/v1/nope")
        assert res.status_code == 404
        assert res.get_json()["error"] == "Not found"

    def test_wrong_method_405_json(self, client, issued_token):
        res = client.delete(f"{FORM}/{issued_token['token']}")
        assert res.status_code == 405
        assert res.get_json()["error"] == "Method not allowed"

    def test_form_ignores_bearer_header(self, client, issued_token):
        res = client.get(f"{FORM}/{issued_token['token']}",
                         headers={"Authorization": "Bearer invalid"})
        assert res.status_code == 200
