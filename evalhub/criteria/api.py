"""
Public interface for the criteria registry and categories.

Reads are open to any authenticated caller. Writes are reserved for admins,
and nothing here ever hard-deletes: deleting deactivates, so evaluations that
cite a criterion keep a valid reference.
"""

import logging

from django.db import DatabaseError

from evalhub.accounts import permissions
from evalhub.criteria.errors import (
    CriteriaInternalError, CriteriaNotFoundError, CriteriaPermissionError, CriteriaRequestError,
)
from evalhub.criteria.models import Category, Criteria
from evalhub.criteria.serializers import CategorySerializer, CriteriaSerializer

logger = logging.getLogger(__name__)  # pylint: disable=invalid-name


def get_active_criteria():
    """
    Active criteria ordered by display order.

    This order is the order criteria are presented for scoring in.

    Returns:
        list of dict: Serialized criteria.

    Raises:
        CriteriaInternalError: The database could not be read.

    Examples:
        >>> get_active_criteria()
        [
            {
                'id': 1,
                'name': 'Technical Implementation',
                'description': 'Code architecture and technical execution',
                'weight': 30.0,
                'maxScore': 10,
                'order': 1,
                'isActive': True,
                ...
            },
            ...
        ]
    """
    try:
        return CriteriaSerializer(Criteria.active(), many=True).data
    except DatabaseError as ex:
        msg = "An error occurred while retrieving the active criteria"
        logger.exception(msg)
        raise CriteriaInternalError(msg) from ex


def get_criteria(criteria_id):
    """
    One criterion by id, whether active or not.

    Raises:
        CriteriaNotFoundError: No such criterion.
    """
    return CriteriaSerializer(_get_model(Criteria, criteria_id)).data


def create_criteria(actor, criteria_dict):
    """
    Create a criterion.

    Args:
        actor (User): The caller; must be an admin.
        criteria_dict (dict): ``name`` (required), ``description``,
            ``weight`` (default 1.0), ``maxScore`` (default 10),
            ``order`` (default 0).

    Returns:
        dict: The serialized criterion.

    Raises:
        CriteriaPermissionError: The actor is not an admin.
        CriteriaRequestError: The data did not validate.
        CriteriaInternalError: The criterion could not be saved.
    """
    _check_can_mutate(permissions.can_mutate_criteria, actor)
    criteria = _save(CriteriaSerializer(data=criteria_dict))
    logger.info("User %s created criterion %s (%s)", actor.id, criteria.id, criteria.name)
    return CriteriaSerializer(criteria).data


def update_criteria(actor, criteria_id, criteria_dict):
    """
    Update some or all fields of a criterion.

    Changing weights only affects evaluations submitted afterwards; existing
    totals are not recomputed.

    Raises:
        CriteriaPermissionError: The actor is not an admin.
        CriteriaNotFoundError: No such criterion.
        CriteriaRequestError: The data did not validate.
    """
    _check_can_mutate(permissions.can_mutate_criteria, actor)
    criteria = _get_model(Criteria, criteria_id)
    criteria = _save(CriteriaSerializer(criteria, data=criteria_dict, partial=True))
    logger.info("User %s updated criterion %s", actor.id, criteria.id)
    return CriteriaSerializer(criteria).data


def deactivate_criteria(actor, criteria_id):
    """
    Remove a criterion from future scoring without deleting it.

    Raises:
        CriteriaPermissionError: The actor is not an admin.
        CriteriaNotFoundError: No such criterion.
    """
    _check_can_mutate(permissions.can_mutate_criteria, actor)
    criteria = _deactivate(_get_model(Criteria, criteria_id))
    logger.info("User %s deactivated criterion %s", actor.id, criteria.id)
    return CriteriaSerializer(criteria).data


def get_active_categories():
    """
    Active categories ordered by name.

    Raises:
        CriteriaInternalError: The database could not be read.
    """
    try:
        return CategorySerializer(Category.objects.filter(is_active=True).order_by('name'), many=True).data
    except DatabaseError as ex:
        msg = "An error occurred while retrieving the active categories"
        logger.exception(msg)
        raise CriteriaInternalError(msg) from ex


def get_category(category_id):
    return CategorySerializer(_get_model(Category, category_id)).data


def create_category(actor, category_dict):
    """
    Create a category. Names are unique.

    Raises:
        CriteriaPermissionError: The actor is not an admin.
        CriteriaRequestError: Missing or duplicate name.
    """
    _check_can_mutate(permissions.can_mutate_categories, actor)
    category = _save(CategorySerializer(data=category_dict))
    logger.info("User %s created category %s (%s)", actor.id, category.id, category.name)
    return CategorySerializer(category).data


def update_category(actor, category_id, category_dict):
    _check_can_mutate(permissions.can_mutate_categories, actor)
    category = _get_model(Category, category_id)
    category = _save(CategorySerializer(category, data=category_dict, partial=True))
    logger.info("User %s updated category %s", actor.id, category.id)
    return CategorySerializer(category).data


def deactivate_category(actor, category_id):
    """Hide a category from new submissions; existing submissions keep it."""
    _check_can_mutate(permissions.can_mutate_categories, actor)
    category = _deactivate(_get_model(Category, category_id))
    logger.info("User %s deactivated category %s", actor.id, category.id)
    return CategorySerializer(category).data


def _check_can_mutate(capability, actor):
    if not capability(actor.role):
        raise CriteriaPermissionError("Forbidden - Admin access required")


def _get_model(model_class, pk):
    try:
        return model_class.objects.get(pk=pk)
    except (model_class.DoesNotExist, ValueError, TypeError) as ex:
        raise CriteriaNotFoundError(f"{model_class._meta.verbose_name.capitalize()} not found") from ex
    except DatabaseError as ex:
        msg = f"An error occurred while retrieving {model_class.__name__} {pk}"
        logger.exception(msg)
        raise CriteriaInternalError(msg) from ex


def _save(serializer):
    if not serializer.is_valid():
        raise CriteriaRequestError(serializer.errors)
    try:
        return serializer.save()
    except DatabaseError as ex:
        msg = f"An error occurred while saving {serializer.Meta.model.__name__}"
        logger.exception(msg)
        raise CriteriaInternalError(msg) from ex


def _deactivate(instance):
    if not instance.is_active:
        return instance
    instance.is_active = False
    try:
        instance.save(update_fields=['is_active', 'modified'])
    except DatabaseError as ex:
        msg = f"An error occurred while deactivating {instance.__class__.__name__} {instance.pk}"
        logger.exception(msg)
        raise CriteriaInternalError(msg) from ex
    return instance
