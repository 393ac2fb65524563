from __future__ import annotations

import logging

from flask import Flask, jsonify, render_template, request

from ..core.exceptions import AuthenticationError, PersistenceError, StudentNotFoundError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/student-info", methods=["GET"], endpoint="student_info")
    def student_info():
        try:
            student = container.student_service.get_public_view(request.args.get("id"), request.args.get("sig"))
        except AuthenticationError as e:
            return render_template("student_info.html", student=None, error=str(e)), 403
        except StudentNotFoundError as e:
            return render_template("student_info.html", student=None, error=str(e)), 404
        except PersistenceError:
            return render_template("student_info.html", student=None, error="Service temporarily unavailable"), 503
        return render_template("student_info.html", student=student, error=None)

    @app.route("/api/students/<student_id>", methods=["GET"], endpoint="api_student_detail")
    def api_student_detail(student_id: str):
        try:
            student = container.student_service.get_student(student_id)
        except StudentNotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except PersistenceError:
            return jsonify({"success": False, "message": "Database unavailable"}), 503
        return jsonify({"success": True, "student": student.to_dict()}), 200

    @app.route("/api/students/<student_id>/link", methods=["GET"], endpoint="api_student_link")
    def api_student_link(student_id: str):
        try:
            url = container.student_service.share_link(student_id)
        except StudentNotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except PersistenceError:
            return jsonify({"success": False, "message": "Database unavailable"}), 503
        return jsonify({"success": True, "url": url}), 200
