from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from ems.log_app import loggers


class InvalidState(APIException):
    """The action is not allowed from the record's current status."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Action not allowed in the current state."
    default_code = "invalid_state"


class InvalidInput(ValidationError):
    """A ValidationError rendered as ``{"detail": message}``."""

    def __init__(self, detail, code=None):
        super().__init__({"detail": detail}, code=code)


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is not None:
        return response

    request = context.get("request")
    loggers.error(
        f"Unhandled error | {getattr(request, 'method', '-')} {getattr(request, 'path', '-')}",
        exc_info=(type(exc), exc, exc.__traceback__)
    )
    return Response(
        {"detail": "Internal server error"},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR
    )
