# core/exceptions.py
import logging

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger("hackops.api")


def custom_exception_handler(exc, context):
    """
    Wrap DRF + Django exceptions into a consistent response format:

        {"success": false, "status_code": 409, "code": "already_on_team", "errors": {...}}

    Success responses (2xx) are not touched.
    Only errors come through here.
    """
    response = drf_exception_handler(exc, context)

    # If DRF handled it, wrap it
    if response is not None:
        view = context.get("view")
        logger.info(
            f"API error: view={view.__class__.__name__ if view else 'unknown'}, "
            f"status={response.status_code}, error={exc.__class__.__name__}"
        )
        return Response(
            {
                "success": False,
                "status_code": response.status_code,
                "code": _error_code(exc),
                "errors": response.data,
            },
            status=response.status_code,
            headers=_passthrough_headers(response),
        )

    # Unhandled exceptions -> 500
    logger.exception("Unhandled API exception", exc_info=exc)

    return Response(
        {
            "success": False,
            "status_code": status.HTTP_500_INTERNAL_SERVER_ERROR,
            "code": "server_error",
            "errors": {"detail": "Internal server error."},
        },
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _error_code(exc):
    if isinstance(exc, APIException):
        return getattr(exc, "default_code", "error")
    return "error"


def _passthrough_headers(response):
    # Keep auth challenges and throttling hints
    return {
        name: response[name]
        for name in ("WWW-Authenticate", "Retry-After")
        if response.has_header(name)
    }
