from __future__ import annotations

from flask import Flask, jsonify

from ..common.app_logger import get_logger
from ..common.http import error_body, json_body
from ..container import Container
from ..core.exceptions import PersistenceError

logger = get_logger("lateness.controller")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/scan", methods=["POST"], endpoint="api_scan")
    def api_scan():
        data = json_body()
        try:
            container.lateness_service.record_scan(
                student_id=data.get("student_id"),
                reason=data.get("reason"),
                minutes_late=data.get("minutes_late"),
            )
        except PersistenceError as e:
            logger.error("scan failed: %s", e)
            return jsonify(error_body(str(e))), 500
        return jsonify({"message": "Attendance recorded!"})

    @app.route("/api/history/<student_id>", methods=["GET"], endpoint="api_history")
    def api_history(student_id: str):
        try:
            records = container.lateness_service.history_for_student(student_id)
        except PersistenceError as e:
            logger.error("history lookup failed for %r: %s", student_id, e)
            return jsonify(error_body(str(e))), 500
        return jsonify([r.to_dict() for r in records])

    @app.route("/api/admin/records", methods=["GET"], endpoint="api_admin_records")
    def api_admin_records():
        try:
            rows = container.lateness_service.admin_records()
        except PersistenceError as e:
            logger.error("admin records lookup failed: %s", e)
            return jsonify(error_body(str(e))), 500
        return jsonify([r.to_dict() for r in rows])
