from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import error_body, json_body
from ..container import Container
from .model import NewStudent
from .service import LoginRejected, LoginSucceeded, OperationFailed


def register(app: Flask, container: Container) -> None:
    @app.route("/api/register", methods=["POST"], endpoint="api_register")
    def api_register():
        result = container.auth_service.register(NewStudent.from_payload(json_body()))
        if isinstance(result, OperationFailed):
            return jsonify(error_body(result.message)), 500
        return jsonify({"message": "Student account created!"})

    @app.route("/api/login", methods=["POST"], endpoint="api_login")
    def api_login():
        data = json_body()
        result = container.auth_service.login(data.get("email"), data.get("password"))

        if isinstance(result, LoginSucceeded):
            return jsonify({"message": "Login successful", "user": result.user.to_dict()})
        if isinstance(result, LoginRejected):
            return jsonify(error_body(result.message)), 401
        return jsonify(error_body(result.message)), 500
