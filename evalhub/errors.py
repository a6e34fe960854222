"""
Error kinds shared by every evalhub API.

Each app defines its own hierarchy (``SubmissionRequestError``,
``EvaluationNotFoundError``, ...) on top of these, and the HTTP layer maps
the kind to a status code.
"""
import copy


def format_field_errors(field_errors):
    """
    Flatten serializer errors into a single readable line.

    >>> format_field_errors({"title": ["This field is required."]})
    'title: This field is required.'
    """
    if isinstance(field_errors, dict):
        return "; ".join(
            "{}: {}".format(field, format_field_errors(errors))
            for field, errors in field_errors.items()
        )
    if isinstance(field_errors, (list, tuple)):
        return " ".join(format_field_errors(error) for error in field_errors)
    return str(field_errors)


class EvalhubError(Exception):
    """ A generic error raised by an evalhub API. """


class EvalhubRequestError(EvalhubError):
    """Error indicating insufficient or incorrect parameters in the request.

    Raised before anything is written. ``field_errors`` keeps the per-field
    serializer errors when the request failed validation.
    """

    def __init__(self, message_or_field_errors):
        if isinstance(message_or_field_errors, (dict, list)):
            self.field_errors = copy.deepcopy(message_or_field_errors)
            message = format_field_errors(message_or_field_errors)
        else:
            self.field_errors = {}
            message = message_or_field_errors
        super().__init__(message)


class EvalhubPermissionError(EvalhubError):
    """Error indicating the caller's role or ownership does not allow the action."""


class EvalhubNotFoundError(EvalhubError):
    """Error indicating a referenced record does not exist."""


class EvalhubInternalError(EvalhubError):
    """Error indicating an internal problem independent of API use.

    The message is logged but never shown to the caller.
    """
