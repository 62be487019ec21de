import logging

from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger("checker.errors")


def custom_exception_handler(exc, context):
    # Call the default exception handler first
    response = exception_handler(exc, context)

    # If the response is None, handle other uncaught exceptions
    if response is None:
        return handle_other_exceptions(exc, context)

    if isinstance(exc, ValidationError):
        response.data = {"error": "Invalid request.", "detail": response.data}
    else:
        response.data = {
            "error": response.data.get("detail", str(exc))
            if isinstance(response.data, dict)
            else str(exc),
            "detail": response.data,
        }
    return response


def handle_other_exceptions(exc, context):
    view = context.get("view")
    logger.error(
        "Unhandled error in %s",
        view.__class__.__name__ if view is not None else "unknown view",
        exc_info=exc,
    )
    return Response(
        {"error": "Internal server error"},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
