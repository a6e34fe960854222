"""
Errors for the submissions api.
"""

from evalhub.errors import (
    EvalhubError, EvalhubInternalError, EvalhubNotFoundError, EvalhubPermissionError, EvalhubRequestError,
)


class SubmissionError(EvalhubError):
    """Generic Submission Error

    Raised when an error occurs while processing a request related to
    submissions.

    """


class SubmissionRequestError(SubmissionError, EvalhubRequestError):
    """Error indicating insufficient or incorrect parameters in the request.

    Raised when the request does not contain enough information, or incorrect
    information which does not allow the request to be processed.

    """


class SubmissionPermissionError(SubmissionError, EvalhubPermissionError):
    """The caller does not own the submission, or may not see it."""


class SubmissionNotFoundError(SubmissionError, EvalhubNotFoundError):
    """The requested submission does not exist."""


class SubmissionInternalError(SubmissionError, EvalhubInternalError):
    """Error indicating an internal problem independent of API use.

    Raised when an internal error has occurred. This should be independent of
    the actions or parameters given to the API.

    """
