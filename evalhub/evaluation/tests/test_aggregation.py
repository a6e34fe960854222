"""
Tests for derived submission status and average score.
"""
from types import SimpleNamespace

import ddt
from django.test import SimpleTestCase, TestCase

from evalhub.evaluation import aggregation
from evalhub.evaluation.aggregation import STATUS
from evalhub.submissions.models import Submission
from evalhub.tests.factories import EvaluationFactory, SubmissionFactory


def _evaluation(is_completed=True, total_score=None):
    return SimpleNamespace(is_completed=is_completed, total_score=total_score)


@ddt.ddt
class TestDeriveStatus(SimpleTestCase):

    def test_no_evaluations_is_pending(self):
        self.assertEqual(aggregation.derive_status([]), STATUS.pending)

    def test_all_completed(self):
        evaluations = [_evaluation(True, 5), _evaluation(True, 7)]
        self.assertEqual(aggregation.derive_status(evaluations), STATUS.completed)

    def test_some_incomplete(self):
        evaluations = [_evaluation(True, 5), _evaluation(False)]
        self.assertEqual(aggregation.derive_status(evaluations), STATUS.in_progress)

    def test_single_completed_evaluation(self):
        evaluations = [_evaluation(True, 6.8)]
        self.assertEqual(aggregation.derive_status(evaluations), STATUS.completed)
        self.assertEqual(aggregation.average_score(evaluations), 6.8)

    def test_only_incomplete_evaluation(self):
        evaluations = [_evaluation(False)]
        self.assertEqual(aggregation.derive_status(evaluations), STATUS.in_progress)
        self.assertIsNone(aggregation.average_score(evaluations))

    def test_average_of_completed_scores(self):
        evaluations = [_evaluation(True, 6), _evaluation(True, 8), _evaluation(False, 1), _evaluation(True, None)]
        self.assertEqual(aggregation.average_score(evaluations), 7.0)

    @ddt.data(
        [],
        [_evaluation(False, 9)],
        [_evaluation(True, None)],
    )
    def test_average_absent(self, evaluations):
        self.assertIsNone(aggregation.average_score(evaluations))

    @ddt.unpack
    @ddt.data(
        ('pending', STATUS.pending),
        ('In_Progress', STATUS.in_progress),
        ('in-progress', STATUS.in_progress),
        ('in-review', STATUS.in_progress),
        (' completed ', STATUS.completed),
        ('all', None),
        ('', None),
        (None, None),
    )
    def test_normalize_status(self, status, expected):
        self.assertEqual(aggregation.normalize_status(status), expected)

    def test_normalize_unknown_status(self):
        with self.assertRaises(ValueError):
            aggregation.normalize_status('archived')


@ddt.ddt
class TestFilterByStatus(TestCase):
    """
    The SQL filter must agree with derive_status for every submission.
    """

    def setUp(self):
        super().setUp()
        self.pending = SubmissionFactory()
        self.completed = SubmissionFactory()
        EvaluationFactory(submission=self.completed, is_completed=True)
        EvaluationFactory(submission=self.completed, is_completed=True)
        self.in_progress = SubmissionFactory()
        EvaluationFactory(submission=self.in_progress, is_completed=True)
        EvaluationFactory(submission=self.in_progress, is_completed=False)

    @ddt.data(STATUS.pending, STATUS.in_progress, STATUS.completed)
    def test_filter_matches_derived_status(self, status):
        filtered = aggregation.filter_by_status(Submission.objects.all(), status)

        self.assertEqual([submission.id for submission in filtered], [getattr(self, status).id])
        for submission in Submission.objects.all():
            derived = aggregation.derive_status(submission.evaluations.all())
            self.assertEqual(derived == status, submission.id == getattr(self, status).id)

    def test_all_is_unfiltered(self):
        self.assertEqual(aggregation.filter_by_status(Submission.objects.all(), 'all').count(), 3)
