"""
Tests for weighted scoring.
"""
from collections import namedtuple

import ddt
from django.test import SimpleTestCase

from evalhub.evaluation.scoring import compute_weighted_score

Criterion = namedtuple('Criterion', ['id', 'weight'])


@ddt.ddt
class TestComputeWeightedScore(SimpleTestCase):

    def test_weighted_average(self):
        criteria = [Criterion(1, 30), Criterion(2, 20)]
        self.assertAlmostEqual(compute_weighted_score(criteria, {1: 8, 2: 5}), 6.8)

    def test_missing_scores_count_as_zero(self):
        criteria = [Criterion(1, 1), Criterion(2, 1)]
        self.assertAlmostEqual(compute_weighted_score(criteria, {1: 10}), 5.0)

    def test_scores_for_other_criteria_are_ignored(self):
        criteria = [Criterion(1, 2)]
        self.assertAlmostEqual(compute_weighted_score(criteria, {1: 4, 99: 10}), 4.0)

    @ddt.data(
        [],
        [Criterion(1, 0)],
    )
    def test_no_weight(self, criteria):
        self.assertEqual(compute_weighted_score(criteria, {1: 10}), 0.0)

    def test_weights_need_not_sum_to_anything(self):
        self.assertAlmostEqual(
            compute_weighted_score([Criterion(1, 0.3), Criterion(2, 0.2)], {1: 8, 2: 5}),
            compute_weighted_score([Criterion(1, 300), Criterion(2, 200)], {1: 8, 2: 5}),
        )
