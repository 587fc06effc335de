from __future__ import annotations

import os
from pathlib import Path

from flask import Flask, jsonify, request, send_from_directory
from werkzeug.exceptions import HTTPException
from werkzeug.security import safe_join

from ..common.app_logger import get_logger
from ..common.http import error_body
from ..core.constants import API_PREFIX

logger = get_logger("frontend")

ANY_METHOD = ["GET", "POST", "PUT", "PATCH", "DELETE"]
API_NOT_FOUND = "API route not found"


def _is_api_path(path: str) -> bool:
    return path.startswith(API_PREFIX)


def register(app: Flask, static_dir: Path) -> None:
    """Serve the single-page app from `static_dir`; unknown /api paths get a JSON 404."""

    @app.route("/", defaults={"path": ""}, methods=ANY_METHOD, endpoint="spa")
    @app.route("/<path:path>", methods=ANY_METHOD, endpoint="spa")
    def spa(path: str):
        if _is_api_path(request.path):
            return jsonify(error_body(API_NOT_FOUND)), 404

        target = safe_join(str(static_dir), path) if path else None
        if target and os.path.isfile(target):
            return send_from_directory(static_dir, path)
        return send_from_directory(static_dir, "index.html")

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        if not _is_api_path(request.path):
            return e
        if e.code in (404, 405):
            return jsonify(error_body(API_NOT_FOUND)), 404
        return jsonify(error_body(e.description or e.name)), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("unhandled error on %s %s", request.method, request.path)
        return jsonify(error_body(str(e))), 500
