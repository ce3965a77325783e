from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from flask_jwt_extended import jwt_required

from ..common.auth import current_caller, issue_token
from ..core.exceptions import AuthenticationError, ValidationError
from ..container import Container
from .model import User

logger = logging.getLogger(__name__)


def _user_json(user: User) -> dict:
    return {"id": user.user_id, "name": user.name, "email": user.email, "role": user.role.value}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    def login():
        data = request.get_json(silent=True) or {}
        try:
            user = container.auth_service.authenticate(
                str(data.get("email") or ""),
                str(data.get("password") or ""),
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except AuthenticationError as e:
            return jsonify({"success": False, "message": str(e)}), 401
        except Exception:
            logger.exception("Login failed")
            return jsonify({"success": False, "message": "Login failed"}), 500

        return jsonify({"success": True, "data": {"token": issue_token(user), "user": _user_json(user)}})

    @app.route("/api/auth/me", methods=["GET"], endpoint="auth_me")
    @jwt_required()
    def me():
        caller = current_caller()
        try:
            user = container.auth_service.get_profile(caller.user_id)
        except AuthenticationError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except Exception:
            logger.exception("Profile lookup failed for user_id=%s", caller.user_id)
            return jsonify({"success": False, "message": "Failed to fetch profile"}), 500

        return jsonify({"success": True, "data": {"user": _user_json(user)}})
