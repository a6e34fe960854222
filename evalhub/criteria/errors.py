"""
Errors for the criteria registry.
"""

from evalhub.errors import (
    EvalhubError, EvalhubInternalError, EvalhubNotFoundError, EvalhubPermissionError, EvalhubRequestError,
)


class CriteriaError(EvalhubError):
    """Generic Criteria Registry Error

    Raised when an error occurs while processing a request related to
    criteria or categories.

    """


class CriteriaRequestError(CriteriaError, EvalhubRequestError):
    """Error indicating insufficient or incorrect parameters in the request.

    Raised when the request does not contain enough information, or incorrect
    information which does not allow the request to be processed.

    """


class CriteriaPermissionError(CriteriaError, EvalhubPermissionError):
    """Only administrators may change criteria and categories."""


class CriteriaNotFoundError(CriteriaError, EvalhubNotFoundError):
    """The requested criterion or category does not exist."""


class CriteriaInternalError(CriteriaError, EvalhubInternalError):
    """Error indicating an internal problem independent of API use.

    Raised when an internal error has occurred. This should be independent of
    the actions or parameters given to the API.

    """
