"""A log filter which knows to insert ids from the request id middleware."""

import logging

from evalhub.middleware import get_request_id


class RequestIDFilter(logging.Filter):
    """Set ``record.request_id`` so formatters can reference it."""

    def filter(self, record):
        record.request_id = get_request_id() or '-'
        return True
