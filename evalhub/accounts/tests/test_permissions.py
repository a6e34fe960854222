"""
Tests for the role capability functions.
"""
import ddt
from django.test import TestCase, override_settings

from evalhub.accounts import permissions
from evalhub.accounts.models import ROLES
from evalhub.tests.factories import SubmissionFactory, UserFactory


@ddt.ddt
class TestCapabilities(TestCase):

    @ddt.unpack
    @ddt.data(
        (ROLES.STUDENT, False, False, False),
        (ROLES.EVALUATOR, True, False, True),
        (ROLES.ADMIN, True, True, True),
    )
    def test_role_capabilities(self, role, evaluate, administer, view_all):
        self.assertEqual(permissions.can_evaluate(role), evaluate)
        self.assertEqual(permissions.can_mutate_criteria(role), administer)
        self.assertEqual(permissions.can_mutate_categories(role), administer)
        self.assertEqual(permissions.can_manage_users(role), administer)
        self.assertEqual(permissions.can_view_all_submissions(role), view_all)

    @ddt.data("STUDENT", "EVALUATOR", "ADMIN")
    def test_valid_roles(self, role):
        self.assertTrue(permissions.is_valid_role(role))

    @ddt.data("student", "OWNER", "", None)
    def test_invalid_roles(self, role):
        self.assertFalse(permissions.is_valid_role(role))

    def test_only_owner_mutates_submission(self):
        owner = UserFactory(role=ROLES.STUDENT)
        submission = SubmissionFactory(student=owner)

        self.assertTrue(permissions.can_mutate_submission(owner, submission))
        for role in (ROLES.STUDENT, ROLES.EVALUATOR, ROLES.ADMIN):
            self.assertFalse(permissions.can_mutate_submission(UserFactory(role=role), submission))

    def test_view_submission(self):
        owner = UserFactory(role=ROLES.STUDENT)
        submission = SubmissionFactory(student=owner)

        self.assertTrue(permissions.can_view_submission(owner, submission))
        self.assertTrue(permissions.can_view_submission(UserFactory(role=ROLES.EVALUATOR), submission))
        self.assertFalse(permissions.can_view_submission(UserFactory(role=ROLES.STUDENT), submission))

    @override_settings(EVALHUB_ALLOW_SELF_PROMOTION=True)
    def test_promote_self_when_enabled(self):
        student = UserFactory(role=ROLES.STUDENT)
        self.assertTrue(permissions.can_promote_to_admin(student, student.id))
        self.assertFalse(permissions.can_promote_to_admin(student, "someone_else"))

    @override_settings(EVALHUB_ALLOW_SELF_PROMOTION=False)
    def test_promote_self_when_disabled(self):
        student = UserFactory(role=ROLES.STUDENT)
        admin = UserFactory(role=ROLES.ADMIN)
        self.assertFalse(permissions.can_promote_to_admin(student, student.id))
        self.assertTrue(permissions.can_promote_to_admin(admin, student.id))
