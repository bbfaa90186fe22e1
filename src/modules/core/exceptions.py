"""Project-wide DRF exception handler.

Registered as ``REST_FRAMEWORK["EXCEPTION_HANDLER"]``.  Field validation
never reaches this handler (``validate_request`` answers those itself), so it
only shapes what escapes a view:

- DRF ``APIException`` (malformed JSON, 405, 415, ...) -> ``{"error": detail}``
  with the exception's status code.
- ``django.db.DatabaseError`` -> logged, answered with a generic 500 that
  never leaks driver details.

Anything else is left to Django's default 500 handling.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.db import DatabaseError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = structlog.get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def _flatten_detail(detail: Any) -> str:
    if isinstance(detail, dict):
        return "; ".join(
            f"{key}: {_flatten_detail(value)}" for key, value in detail.items()
        )
    if isinstance(detail, (list, tuple)):
        return "; ".join(_flatten_detail(item) for item in detail)
    return str(detail)


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    response = drf_exception_handler(exc, context)
    if response is not None:
        data = response.data
        if isinstance(data, dict) and "detail" in data:
            data = data["detail"]
        response.data = {"error": _flatten_detail(data)}
        return response

    if isinstance(exc, DatabaseError):
        view = context.get("view")
        logger.exception(
            "database_error",
            view=type(view).__name__ if view is not None else None,
            error_type=type(exc).__name__,
        )
        return Response(
            {"error": INTERNAL_ERROR_MESSAGE},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return None
