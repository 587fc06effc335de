from __future__ import annotations

from typing import Any, Dict

from flask import request


def json_body() -> Dict[str, Any]:
    """Request JSON as a dict; a missing or unparsable body is an empty object."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def error_body(message: str) -> Dict[str, str]:
    return {"error": message}
