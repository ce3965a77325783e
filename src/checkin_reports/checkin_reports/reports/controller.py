from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from flask_jwt_extended import jwt_required

from ..common.auth import current_caller
from ..core.constants import MSG_DAILY_SUMMARY_FAILED
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/reports/daily-summary", methods=["GET"], endpoint="daily_summary")
    @jwt_required()
    def daily_summary():
        try:
            summary = container.daily_summary_service.build_daily_summary(
                current_caller(),
                date=request.args.get("date"),
                employee_id=request.args.get("employee_id"),
            )
        except AuthenticationError as e:
            return jsonify({"success": False, "message": str(e)}), 401
        except AuthorizationError as e:
            return jsonify({"success": False, "message": str(e)}), 403
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Daily summary error")
            return jsonify({"success": False, "message": MSG_DAILY_SUMMARY_FAILED}), 500

        return jsonify({"success": True, "data": summary.to_dict()})
