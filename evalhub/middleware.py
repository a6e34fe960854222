"""
Middleware that tags every request with an id.

Any logger in the call chain can then include the id in its output, so all of
the log lines of one request can be connected back to one another.
"""

import logging
from threading import local
from uuid import uuid4

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = 'HTTP_X_REQUEST_ID'
RESPONSE_HEADER = 'X-Request-ID'

_request_data = local()


def get_request_id():
    """The id of the request being handled on this thread, or None."""
    return getattr(_request_data, 'request_id', None)


class RequestIDMiddleware:
    """Attach an id to each request, reusing one set by an upstream proxy."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request_id = request.META.get(REQUEST_ID_HEADER)
        if request_id:
            logger.debug("Incoming request preassigned %s", request_id)
        else:
            request_id = uuid4().hex
            request.META[REQUEST_ID_HEADER] = request_id
        request.request_id = request_id
        _request_data.request_id = request_id
        try:
            response = self.get_response(request)
        finally:
            _request_data.request_id = None
        response[RESPONSE_HEADER] = request_id
        return response
