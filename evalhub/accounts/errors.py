"""
Errors for the accounts api.
"""

from evalhub.errors import (
    EvalhubError, EvalhubInternalError, EvalhubNotFoundError, EvalhubPermissionError, EvalhubRequestError,
)


class UserError(EvalhubError):
    """Generic error raised while resolving or managing users."""


class UserRequestError(UserError, EvalhubRequestError):
    """The request is missing a user id or names an invalid role."""


class UserPermissionError(UserError, EvalhubPermissionError):
    """The caller is not allowed to change this user."""


class UserNotFoundError(UserError, EvalhubNotFoundError):
    """No user exists with the requested id."""


class UserInternalError(UserError, EvalhubInternalError):
    """An unexpected error occurred while reading or writing users."""
