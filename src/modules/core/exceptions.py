"""DRF exception handler that renders framework errors in the envelope.

Domain exceptions are translated inside the views.  This handler covers
what DRF raises before a view method runs (malformed JSON, unsupported
method or media type) and anything that escapes a view.
"""

from __future__ import annotations

from typing import Any

import structlog
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

from modules.core.responses import error_response

logger = structlog.get_logger(__name__)


def _detail_to_message(detail: Any) -> str:
    if isinstance(detail, dict):
        return "; ".join(
            f"{key}: {_detail_to_message(value)}" for key, value in detail.items()
        )
    if isinstance(detail, (list, tuple)):
        return "; ".join(_detail_to_message(item) for item in detail)
    return str(detail)


def envelope_exception_handler(exc: Exception, context: dict) -> Response:
    response = exception_handler(exc, context)
    view = context.get("view")
    view_name = type(view).__name__ if view is not None else None

    if response is None:
        logger.exception(
            "api.unhandled_exception",
            view=view_name,
            error=str(exc),
        )
        set_rollback()
        return error_response(
            "Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    logger.warning(
        "api.request_rejected",
        view=view_name,
        status_code=response.status_code,
        error=str(exc),
    )
    detail = response.data
    if isinstance(detail, dict) and "detail" in detail:
        detail = detail["detail"]
    response.data = {"success": False, "message": _detail_to_message(detail)}
    return response
