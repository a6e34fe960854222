"""
Translate API errors into ``{"error": "..."}`` responses.
"""
import logging

from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response

from evalhub.errors import (
    EvalhubError, EvalhubInternalError, EvalhubNotFoundError, EvalhubPermissionError, EvalhubRequestError,
    format_field_errors,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"

ERROR_STATUS_CODES = (
    (EvalhubRequestError, status.HTTP_400_BAD_REQUEST),
    (EvalhubPermissionError, status.HTTP_403_FORBIDDEN),
    (EvalhubNotFoundError, status.HTTP_404_NOT_FOUND),
    (EvalhubInternalError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def error_response(message, status_code):
    return Response({"error": message}, status=status_code)


def _status_for(exc):
    for error_class, status_code in ERROR_STATUS_CODES:
        if isinstance(exc, error_class):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def evalhub_exception_handler(exc, context):
    """
    DRF exception handler.

    Known request, permission and not-found errors keep their message.
    Anything else is logged and reported as a generic internal error.
    """
    view = context.get('view')

    if isinstance(exc, EvalhubError):
        status_code = _status_for(exc)
        if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error("Internal error in %s: %s", view.__class__.__name__, exc)
            return error_response(INTERNAL_ERROR_MESSAGE, status_code)
        logger.info("Rejected request to %s (%s): %s", view.__class__.__name__, status_code, exc)
        return error_response(str(exc), status_code)

    if isinstance(exc, Http404):
        return error_response(str(exc) or "Not found", status.HTTP_404_NOT_FOUND)

    if isinstance(exc, exceptions.NotAuthenticated):
        return error_response("Unauthorized", status.HTTP_401_UNAUTHORIZED)

    if isinstance(exc, exceptions.APIException):
        response = error_response(format_field_errors(exc.detail), exc.status_code)
        auth_header = getattr(exc, 'auth_header', None)
        if auth_header:
            response['WWW-Authenticate'] = auth_header
        wait = getattr(exc, 'wait', None)
        if wait:
            response['Retry-After'] = '%d' % wait
        return response

    logger.exception("Unexpected error in %s", view.__class__.__name__)
    return error_response(INTERNAL_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)
