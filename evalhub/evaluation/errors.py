"""
Errors for the evaluation api.
"""

from evalhub.errors import (
    EvalhubError, EvalhubInternalError, EvalhubNotFoundError, EvalhubPermissionError, EvalhubRequestError,
)


class EvaluationError(EvalhubError):
    """Generic Evaluation Error

    Raised when an error occurs while processing a request related to
    evaluations.

    """


class EvaluationRequestError(EvaluationError, EvalhubRequestError):
    """Error indicating insufficient or incorrect parameters in the request.

    Raised when the request does not contain enough information, or incorrect
    information which does not allow the request to be processed.

    """


class EvaluationPermissionError(EvaluationError, EvalhubPermissionError):
    """The caller's role does not allow evaluating, or reading this evaluation."""


class EvaluationNotFoundError(EvaluationError, EvalhubNotFoundError):
    """The evaluation, or the submission being evaluated, does not exist."""


class EvaluationInternalError(EvaluationError, EvalhubInternalError):
    """Error indicating an internal problem independent of API use.

    Raised when an internal error has occurred. This should be independent of
    the actions or parameters given to the API.

    """
