"""Standardized JSON response helpers."""

from __future__ import annotations

from typing import Any, Mapping

from flask import Response, g, has_request_context, jsonify

from .errors import AppError


def _meta() -> dict[str, Any]:
    if has_request_context() and getattr(g, "request_id", None):
        return {"request_id": g.request_id}
    return {}


def _envelope(payload: dict[str, Any], status: int) -> Response:
    meta = _meta()
    if meta:
        payload["meta"] = meta
    response = jsonify(payload)
    response.status_code = status
    return response


def ok(data: Any, *, status: int = 200) -> Response:
    """Return a success envelope."""

    return _envelope({"success": True, "data": data}, status)


def fail(error: AppError | Mapping[str, Any], *, status: int | None = None) -> Response:
    """Return a standardized failure envelope."""

    if isinstance(error, AppError):
        return _envelope({"success": False, "error": error.to_dict()}, status or error.status_code)
    return _envelope({"success": False, "error": dict(error)}, status or 400)


__all__ = ["ok", "fail"]
