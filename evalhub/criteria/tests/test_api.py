"""
Tests for the criteria registry and categories.
"""
from unittest import mock

import ddt
from django.db import DatabaseError
from django.db.models import ProtectedError
from django.test import TestCase

from evalhub.accounts.models import ROLES
from evalhub.criteria import api as criteria_api
from evalhub.criteria.errors import (
    CriteriaInternalError, CriteriaNotFoundError, CriteriaPermissionError, CriteriaRequestError,
)
from evalhub.criteria.models import Category, Criteria
from evalhub.tests.factories import CategoryFactory, CriteriaEvaluationFactory, CriteriaFactory, UserFactory


@ddt.ddt
class TestCriteriaApi(TestCase):

    def setUp(self):
        super().setUp()
        self.admin = UserFactory(role=ROLES.ADMIN)

    def test_active_criteria_in_display_order(self):
        CriteriaFactory(name="Second", order=2)
        CriteriaFactory(name="First", order=1)
        CriteriaFactory(name="Hidden", order=0, is_active=False)

        names = [criteria['name'] for criteria in criteria_api.get_active_criteria()]

        self.assertEqual(names, ["First", "Second"])

    def test_create_criteria(self):
        criteria = criteria_api.create_criteria(self.admin, {
            'name': 'Code Quality',
            'description': 'Readability',
            'weight': 25,
            'maxScore': 10,
            'order': 2,
        })

        self.assertEqual(criteria['name'], 'Code Quality')
        self.assertEqual(criteria['weight'], 25.0)
        self.assertEqual(criteria['maxScore'], 10)
        self.assertTrue(criteria['isActive'])

    def test_create_criteria_defaults(self):
        criteria = criteria_api.create_criteria(self.admin, {'name': 'Innovation'})

        self.assertEqual(criteria['weight'], 1.0)
        self.assertEqual(criteria['maxScore'], 10)
        self.assertEqual(criteria['order'], 0)

    @ddt.data(
        {},
        {'name': '   '},
        {'name': 'Zero', 'weight': 0},
        {'name': 'Negative', 'weight': -5},
        {'name': 'No scale', 'maxScore': 0},
    )
    def test_create_criteria_invalid(self, criteria_dict):
        with self.assertRaises(CriteriaRequestError):
            criteria_api.create_criteria(self.admin, criteria_dict)
        self.assertFalse(Criteria.objects.exists())

    @ddt.data(ROLES.STUDENT, ROLES.EVALUATOR)
    def test_non_admin_cannot_create(self, role):
        with self.assertRaises(CriteriaPermissionError):
            criteria_api.create_criteria(UserFactory(role=role), {'name': 'Sneaky'})
        self.assertFalse(Criteria.objects.exists())

    def test_update_criteria_is_partial(self):
        criteria = CriteriaFactory(name="Docs", weight=20, max_score=10)

        updated = criteria_api.update_criteria(self.admin, criteria.id, {'weight': 40})

        self.assertEqual(updated['weight'], 40.0)
        self.assertEqual(updated['name'], "Docs")

    def test_update_missing_criteria(self):
        with self.assertRaises(CriteriaNotFoundError):
            criteria_api.update_criteria(self.admin, 999, {'weight': 40})

    def test_deactivate_keeps_row(self):
        criteria = CriteriaFactory()

        result = criteria_api.deactivate_criteria(self.admin, criteria.id)

        self.assertFalse(result['isActive'])
        self.assertTrue(Criteria.objects.filter(pk=criteria.id).exists())
        self.assertEqual(criteria_api.get_active_criteria(), [])
        self.assertFalse(criteria_api.get_criteria(criteria.id)['isActive'])

    def test_referenced_criteria_cannot_be_deleted(self):
        part = CriteriaEvaluationFactory()
        with self.assertRaises(ProtectedError):
            part.criteria.delete()

    @mock.patch.object(Criteria, 'active')
    def test_database_error(self, mock_active):
        mock_active.side_effect = DatabaseError("KABOOM!")
        with self.assertRaises(CriteriaInternalError):
            criteria_api.get_active_criteria()


class TestCategoryApi(TestCase):

    def setUp(self):
        super().setUp()
        self.admin = UserFactory(role=ROLES.ADMIN)

    def test_active_categories_by_name(self):
        CategoryFactory(name="Web Development")
        CategoryFactory(name="Data Science")
        CategoryFactory(name="Archived", is_active=False)

        names = [category['name'] for category in criteria_api.get_active_categories()]

        self.assertEqual(names, ["Data Science", "Web Development"])

    def test_create_category(self):
        category = criteria_api.create_category(self.admin, {'name': 'Cybersecurity'})
        self.assertEqual(category['name'], 'Cybersecurity')
        self.assertEqual(category['description'], '')

    def test_duplicate_name(self):
        CategoryFactory(name="Other")
        with self.assertRaises(CriteriaRequestError):
            criteria_api.create_category(self.admin, {'name': 'Other'})

    def test_student_cannot_create(self):
        with self.assertRaises(CriteriaPermissionError):
            criteria_api.create_category(UserFactory(role=ROLES.STUDENT), {'name': 'Other'})

    def test_update_and_deactivate(self):
        category = CategoryFactory(name="Mobile")

        criteria_api.update_category(self.admin, category.id, {'description': 'Apps'})
        criteria_api.deactivate_category(self.admin, category.id)

        category = Category.objects.get(pk=category.id)
        self.assertEqual(category.description, 'Apps')
        self.assertFalse(category.is_active)

    def test_missing_category(self):
        with self.assertRaises(CriteriaNotFoundError):
            criteria_api.get_category(12345)
