from __future__ import annotations

from flask import Flask, jsonify
from flask_jwt_extended import JWTManager, create_access_token, get_jwt, get_jwt_identity

from ..core.constants import MSG_TOKEN_REQUIRED
from ..core.enums import Role
from ..users.model import Caller, User


def _token_required(*_args):
    return jsonify({"success": False, "message": MSG_TOKEN_REQUIRED}), 401


def init_jwt(app: Flask) -> JWTManager:
    """Install bearer-token auth.

    Missing, malformed, invalid and expired tokens all answer 401 with the
    same body, so route handlers only ever run for a recognized caller.
    """
    jwt = JWTManager(app)
    jwt.unauthorized_loader(_token_required)
    jwt.invalid_token_loader(_token_required)
    jwt.expired_token_loader(_token_required)
    jwt.revoked_token_loader(_token_required)
    jwt.needs_fresh_token_loader(_token_required)
    jwt.user_lookup_error_loader(_token_required)
    return jwt


def issue_token(user: User) -> str:
    return create_access_token(
        identity=str(user.user_id),
        additional_claims={"role": user.role.value, "name": user.name},
    )


def current_caller() -> Caller:
    """Build the Caller for the verified token of the current request."""
    claims = get_jwt()
    return Caller(
        user_id=int(get_jwt_identity()),
        role=Role.parse(claims.get("role")),
        name=str(claims.get("name") or ""),
    )
