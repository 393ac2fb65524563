from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.validators import parse_week_number
from ..core.enums import NotificationStatus
from ..core.exceptions import ValidationError
from ..container import Container

logger = logging.getLogger(__name__)

_STATUS_CODES = {
    NotificationStatus.READY: 200,
    NotificationStatus.SENT: 200,
    NotificationStatus.REJECTED: 422,
    NotificationStatus.LINK_FAILED: 422,
    NotificationStatus.CHANNEL_FAILED: 409,
    NotificationStatus.NOT_FOUND: 404,
    NotificationStatus.ERROR: 500,
}


def register(app: Flask, container: Container) -> None:
    default_week = int(app.config.get("DEFAULT_WEEK_NUMBER", 1))

    def read_week(data: dict) -> int:
        return parse_week_number(data.get("week"), default_week)

    @app.route("/api/students/<student_id>/notifications", methods=["POST"], endpoint="api_prepare_notification")
    def api_prepare_notification(student_id: str):
        """Validate and compose; the browser then opens ``target_url`` itself."""
        data = request.get_json(silent=True) or {}
        try:
            week = read_week(data)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        outcome = container.notification_workflow.prepare(student_id, week)
        return jsonify(outcome.to_dict()), _STATUS_CODES[outcome.status]

    @app.route(
        "/api/students/<student_id>/notifications/outcome",
        methods=["POST"],
        endpoint="api_notification_outcome",
    )
    def api_notification_outcome(student_id: str):
        """Browser reports whether the WhatsApp window opened."""
        data = request.get_json(silent=True) or {}
        try:
            week = read_week(data)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        if not isinstance(data.get("opened"), bool):
            return jsonify({"success": False, "message": "opened must be true or false"}), 400
        if data.get("closed_immediately"):
            # Cannot be detected reliably; diagnostic only.
            logger.info("WhatsApp window for student %s closed immediately - possibly invalid number", student_id)

        outcome = container.notification_workflow.complete(student_id, week, data["opened"])
        if outcome.sent and not outcome.persisted:
            return jsonify(outcome.to_dict()), 502
        return jsonify(outcome.to_dict()), _STATUS_CODES[outcome.status]

    @app.route(
        "/api/students/<student_id>/weeks/<int:week>/message-state",
        methods=["PUT"],
        endpoint="api_message_state",
    )
    def api_message_state(student_id: str, week: int):
        data = request.get_json(silent=True) or {}
        if not isinstance(data.get("message_state"), bool):
            return jsonify({"success": False, "message": "message_state must be true or false"}), 400
        if week < 1:
            return jsonify({"success": False, "message": "Week number must be 1 or greater"}), 400

        record = container.delivery_updater.record(student_id, week, data["message_state"])
        if not record.persisted:
            return jsonify({"success": False, "message": "Failed to update message state"}), 502
        return jsonify({"success": True, "student_id": record.student_id, "week": record.week_number,
                        "message_state": record.message_state}), 200
