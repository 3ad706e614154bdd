"""
Rate limiting configuration.

Applies per-blueprint rate limits using Flask-Limiter.
The Limiter instance is created in app/__init__.py with no default limits;
this module applies granular limits per route category.

    - Respondent form:  STAKEHOLDER_FORM_RATE_LIMIT (default 10/minute),
                        keyed per access token so one leaked link cannot
                        exhaust another respondent's budget
    - Reviewer API:     REVIEWER_RATE_LIMIT (default 60/minute), per remote IP
    - Health check:     exempt

Usage:
    from app.middleware.rate_limiter import init_rate_limits
    init_rate_limits(app, limiter)
"""

import logging

from flask import current_app, request as flask_request

logger = logging.getLogger(__name__)

DEFAULT_FORM_LIMIT = "10/minute"
DEFAULT_REVIEWER_LIMIT = "60/minute"


def _form_token_key():
    """Rate limit key: the form's access token if present, else remote IP."""
    token = (flask_request.view_args or {}).get("token")
    if token:
        return f"stakeholder-form:{token}"
    return flask_request.remote_addr or "unknown"


def _form_limit():
    return current_app.config.get("STAKEHOLDER_FORM_RATE_LIMIT", DEFAULT_FORM_LIMIT)


def _reviewer_limit():
    return current_app.config.get("REVIEWER_RATE_LIMIT", DEFAULT_REVIEWER_LIMIT)


def init_rate_limits(app, limiter):
    """
    Apply rate limits to API blueprints.

    Limits are always registered; RATELIMIT_ENABLED=False (testing) turns
    enforcement off at the limiter level.
    """
    bp = app.blueprints.get("stakeholder_form")
    if bp:
        limiter.limit(_form_limit, key_func=_form_token_key)(bp)

    bp = app.blueprints.get("stakeholder")
    if bp:
        limiter.limit(_reviewer_limit)(bp)

    if not app.config.get("RATELIMIT_ENABLED", True):
        logger.info("Rate limiter disabled (RATELIMIT_ENABLED=False)")
        return

    logger.info(
        "Rate limiter configured — form: %s per token, reviewer: %s",
        app.config.get("STAKEHOLDER_FORM_RATE_LIMIT", DEFAULT_FORM_LIMIT),
        app.config.get("REVIEWER_RATE_LIMIT", DEFAULT_REVIEWER_LIMIT),
    )
