"""Uniform response envelope.

Every API endpoint answers with ``{"success": bool, "data" | "message": ...}``.
Exactly one of ``data`` / ``message`` is present.
"""

from __future__ import annotations

from typing import Any

from rest_framework import status as http_status
from rest_framework.response import Response


def success_response(data: Any, status: int = http_status.HTTP_200_OK) -> Response:
    return Response({"success": True, "data": data}, status=status)


def message_response(message: str, status: int = http_status.HTTP_200_OK) -> Response:
    """Successful outcome that carries no payload (e.g. a delete)."""
    return Response({"success": True, "message": message}, status=status)


def error_response(message: str, status: int) -> Response:
    return Response({"success": False, "message": message}, status=status)


def format_validation_errors(errors: list[dict[str, Any]]) -> str:
    """Flatten pydantic ``ValidationError.errors()`` into ``field: reason`` pairs."""
    parts = []
    for error in errors:
        field = ".".join(str(loc) for loc in error.get("loc", ())) or "body"
        parts.append(f"{field}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts)
