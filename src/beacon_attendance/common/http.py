from __future__ import annotations

from typing import Any

from flask import jsonify, request

from ..core.exceptions import ValidationError


def read_json_body() -> dict[str, Any]:
    """Return the request body as a dict.

    An empty body counts as ``{}``. Malformed JSON raises (callers map that
    to a 500 like any other unexpected error).
    """
    if not request.get_data(cache=True):
        return {}
    body = request.get_json(force=True)
    if body is None:
        return {}
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object.")
    return body


def message_response(message: str, status: int, **extra: Any):
    payload: dict[str, Any] = {"message": message}
    payload.update(extra)
    return jsonify(payload), status
