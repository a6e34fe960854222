"""
Role-based access policy.

Every role check in evalhub goes through the capability functions below; the
DRF permission classes at the bottom are thin wrappers for views.
"""
from django.conf import settings
from rest_framework.permissions import SAFE_METHODS, BasePermission

from evalhub.accounts.models import ROLES

EVALUATING_ROLES = frozenset([ROLES.EVALUATOR, ROLES.ADMIN])


def is_valid_role(role):
    return role in ROLES


def can_evaluate(role):
    """Evaluators and admins may create and update evaluations; students never can."""
    return role in EVALUATING_ROLES


def can_mutate_criteria(role):
    return role == ROLES.ADMIN


def can_mutate_categories(role):
    return role == ROLES.ADMIN


def can_manage_users(role):
    """Listing users and changing roles is reserved for admins."""
    return role == ROLES.ADMIN


def can_view_all_submissions(role):
    """Students only see their own submissions."""
    return role in EVALUATING_ROLES


def can_view_submission(user, submission):
    return can_view_all_submissions(user.role) or submission.student_id == user.id


def can_mutate_submission(user, submission):
    """
    Only the owning student may edit or delete a submission.

    Role is not enough here: ownership is checked against the stored owner,
    so admins and evaluators are refused as well.
    """
    return submission.student_id == user.id


def self_promotion_enabled():
    return getattr(settings, 'EVALHUB_ALLOW_SELF_PROMOTION', False)


def can_promote_to_admin(actor, target_id):
    """
    Admins may promote anyone. A non-admin may only promote themselves, and
    only while self-promotion is enabled.
    """
    if actor.role == ROLES.ADMIN:
        return True
    return actor.id == target_id and self_promotion_enabled()


class IsAdmin(BasePermission):
    """Allow admins only."""
    message = "Forbidden - Admin access required"

    def has_permission(self, request, view):
        return bool(request.user and can_manage_users(request.user.role))


class IsAdminOrReadOnly(BasePermission):
    """Any authenticated caller may read; only admins may write."""
    message = "Forbidden - Admin access required"

    def has_permission(self, request, view):
        if not request.user:
            return False
        if request.method in SAFE_METHODS:
            return True
        return can_mutate_criteria(request.user.role)
