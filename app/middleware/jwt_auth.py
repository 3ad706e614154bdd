"""
JWT Auth Middleware — Parses JWT from Authorization header, sets g.jwt_*.

The middleware only resolves identity; it never rejects a request. Reviewer
routes opt in to enforcement with ``@require_jwt``. Respondent form routes
carry their own access token in the URL and skip JWT parsing entirely.

    Authorization: Bearer <token>  →  g.jwt_user_id, g.jwt_roles
"""

import functools
import logging

import jwt as pyjwt
from flask import g, request

from app.services.jwt_service import decode_access_token
from app.utils.errors import E, api_error

logger = logging.getLogger(__name__)

# Paths that skip JWT auth entirely
JWT_SKIP_PREFIXES = (
    "/api/v1/health",
    "/api/v1/stakeholder/form/",
)


def init_jwt_middleware(app):
    """Register JWT middleware as a before_request hook."""

    @app.before_request
    def _jwt_auth():
        # Clear JWT context
        g.jwt_user_id = None
        g.jwt_roles = []

        path = request.path
        if not path.startswith("/api/v1/"):
            return
        for prefix in JWT_SKIP_PREFIXES:
            if path.startswith(prefix):
                return

        auth_header = request.headers.get("Authorization", "")
        if not auth_header.startswith("Bearer "):
            return

        token = auth_header[7:]  # Strip "Bearer "

        try:
            payload = decode_access_token(token)
        except pyjwt.ExpiredSignatureError:
            logger.info("Expired JWT on %s", path)
            return
        except pyjwt.InvalidTokenError:
            logger.warning("Invalid JWT on %s", path)
            return

        g.jwt_user_id = payload.get("sub")
        g.jwt_roles = payload.get("roles", [])


def require_jwt(f):
    """Decorator: reject the request with 401 unless a valid JWT was presented."""

    @functools.wraps(f)
    def decorated(*args, **kwargs):
        if not getattr(g, "jwt_user_id", None):
            return api_error(E.UNAUTHORIZED, "Authentication required")
        return f(*args, **kwargs)

    return decorated
