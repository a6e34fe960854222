"""
Public interface for resolving callers to local users and managing roles.
"""

import logging

from django.conf import settings
from django.db import DatabaseError, transaction
from django.db.models import Count, Q

from evalhub.accounts import permissions
from evalhub.accounts.errors import UserInternalError, UserNotFoundError, UserPermissionError, UserRequestError
from evalhub.accounts.models import DEFAULT_USER_NAME, ROLES, User
from evalhub.accounts.serializers import UserListSerializer, UserSerializer

logger = logging.getLogger(__name__)  # pylint: disable=invalid-name


class IdentityResolver:
    """
    Map a verified external identity to a local ``User``.

    Args:
        bootstrap_admin_ids (iterable of str): Identities that are made
            administrators whenever they are resolved.

    Resolution is not read-only: a missing user is created, and an
    allow-listed user who is not yet an admin is promoted.
    """

    def __init__(self, bootstrap_admin_ids=()):
        self.bootstrap_admin_ids = frozenset(
            str(user_id).strip() for user_id in bootstrap_admin_ids if str(user_id).strip()
        )

    def is_bootstrap_admin(self, external_id):
        return external_id in self.bootstrap_admin_ids

    def resolve(self, external_id, email=None, name=None):
        """
        Return the user for ``external_id``, creating it on first sight.

        Args:
            external_id (str): The identity provider's user id.
            email (str): Optional email hint, only used when creating.
            name (str): Optional display name hint, only used when creating.

        Returns:
            User

        Raises:
            UserRequestError: No external id was given.
            UserInternalError: The user could not be read or written.

        Examples:
            >>> IdentityResolver(["user_1"]).resolve("user_1", email="ada@example.com")
            <User: Unknown User (user_1, ADMIN)>
        """
        external_id = (external_id or "").strip()
        if not external_id:
            raise UserRequestError("A verified user id is required")

        is_bootstrap_admin = self.is_bootstrap_admin(external_id)
        try:
            user, created = User.objects.get_or_create(
                id=external_id,
                defaults={
                    'email': email or "",
                    'name': name or DEFAULT_USER_NAME,
                    'role': ROLES.ADMIN if is_bootstrap_admin else ROLES.STUDENT,
                }
            )
            if created:
                logger.info("Created user %s with role %s", user.id, user.role)
            elif is_bootstrap_admin and user.role != ROLES.ADMIN:
                # Re-checked on every resolution so a bootstrap admin who was
                # first stored as a student heals on the next request.
                user = set_role(user, ROLES.ADMIN, actor=None, reason="bootstrap admin allow-list")
                logger.info("Promoted bootstrap user %s to ADMIN role", user.id)
        except DatabaseError as ex:
            msg = f"An error occurred while resolving the user with id {external_id}"
            logger.exception(msg)
            raise UserInternalError(msg) from ex

        return user


def get_identity_resolver():
    """Build a resolver from the ``EVALHUB_BOOTSTRAP_ADMIN_IDS`` setting."""
    return IdentityResolver(getattr(settings, 'EVALHUB_BOOTSTRAP_ADMIN_IDS', ()))


def resolve_user(external_id, email=None, name=None):
    """Shortcut for ``get_identity_resolver().resolve(...)``."""
    return get_identity_resolver().resolve(external_id, email=email, name=name)


def register_user(user, email=None, name=None):
    """
    Fill in profile details the caller did not have when first resolved.

    Only a blank email and the placeholder name are replaced; a profile
    that is already set is left alone.

    Args:
        user (User): The resolved caller.
        email (str): Optional email hint.
        name (str): Optional display name hint.

    Returns:
        dict: The serialized user.

    Raises:
        UserInternalError: The user could not be saved.
    """
    update_fields = []
    if email and not user.email:
        user.email = email
        update_fields.append('email')
    if name and user.name == DEFAULT_USER_NAME:
        user.name = name
        update_fields.append('name')

    if update_fields:
        try:
            user.save(update_fields=update_fields + ['modified'])
        except DatabaseError as ex:
            msg = f"An error occurred while registering the user with id {user.id}"
            logger.exception(msg)
            raise UserInternalError(msg) from ex
        logger.info("Updated profile of user %s", user.id)

    return UserSerializer(user).data


def _get_user_model(user_id):
    try:
        return User.objects.get(id=user_id)
    except User.DoesNotExist as ex:
        raise UserNotFoundError("User not found") from ex
    except DatabaseError as ex:
        msg = f"An error occurred while retrieving the user with id {user_id}"
        logger.exception(msg)
        raise UserInternalError(msg) from ex


def get_user(user_id):
    """
    Retrieve a user by id.

    Returns:
        dict: The serialized user (id, name, email, role, createdAt).

    Raises:
        UserNotFoundError: No such user.
        UserInternalError: The database could not be read.
    """
    return UserSerializer(_get_user_model(user_id)).data


def list_users(actor):
    """
    All users, newest first, with counts of the evaluations each has made.

    Returns:
        list of dict: Serialized users with ``evaluationCount`` and
        ``completedEvaluationCount``.

    Raises:
        UserPermissionError: The actor is not an admin.
    """
    if not permissions.can_manage_users(actor.role):
        raise UserPermissionError("Forbidden - Admin access required")
    users = User.objects.annotate(
        evaluation_count=Count('evaluations', distinct=True),
        completed_evaluation_count=Count(
            'evaluations', filter=Q(evaluations__is_completed=True), distinct=True
        ),
    ).order_by('-created')
    return UserListSerializer(users, many=True).data


def change_role(actor, user_id, role):
    """
    Set the role of a user.

    Args:
        actor (User): The caller; must be an admin.
        user_id (str): The user whose role changes.
        role (str): One of ``ROLES``.

    Returns:
        dict: The serialized user.

    Raises:
        UserPermissionError: The actor is not an admin.
        UserRequestError: ``role`` is not a valid role.
        UserNotFoundError: No such user.
    """
    if not permissions.can_manage_users(actor.role):
        raise UserPermissionError("Forbidden - Admin access required")
    if not permissions.is_valid_role(role):
        raise UserRequestError("Invalid role")

    user = _get_user_model(user_id)
    if user.role != role:
        try:
            user = set_role(user, role, actor=actor, reason=f"role changed by {actor.id}")
        except DatabaseError as ex:
            msg = f"An error occurred while changing the role of user {user_id}"
            logger.exception(msg)
            raise UserInternalError(msg) from ex
        logger.info("User %s changed role of %s to %s", actor.id, user.id, role)
    return UserSerializer(user).data


def promote_to_admin(actor, user_id):
    """
    Make ``user_id`` an administrator.

    Admins may promote anyone. While ``EVALHUB_ALLOW_SELF_PROMOTION`` is on, a
    non-admin may promote themselves; that path exists for bootstrapping and
    every use of it is logged as a warning and kept in the role history.

    Returns:
        dict: The serialized user.

    Raises:
        UserPermissionError: The actor may not promote this user.
        UserNotFoundError: No such user.
    """
    if not permissions.can_promote_to_admin(actor, user_id):
        raise UserPermissionError("Forbidden - Admin access required")

    user = _get_user_model(user_id)
    if user.role == ROLES.ADMIN:
        return UserSerializer(user).data

    self_promotion = actor.role != ROLES.ADMIN
    reason = "self-promotion" if self_promotion else f"promoted by {actor.id}"
    try:
        user = set_role(user, ROLES.ADMIN, actor=actor, reason=reason)
    except DatabaseError as ex:
        msg = f"An error occurred while promoting user {user_id}"
        logger.exception(msg)
        raise UserInternalError(msg) from ex

    if self_promotion:
        logger.warning("User %s promoted themselves to ADMIN role", user.id)
    else:
        logger.info("User %s promoted %s to ADMIN role", actor.id, user.id)
    return UserSerializer(user).data


@transaction.atomic
def set_role(user, role, actor, reason):
    """
    Save a role change together with its history record.

    No permission check is made here; callers decide who may change roles.
    """
    user.role = role
    user._change_reason = reason  # pylint: disable=protected-access
    if actor is not None:
        user._history_user = actor  # pylint: disable=protected-access
    user.save(update_fields=['role', 'modified'])
    return user
