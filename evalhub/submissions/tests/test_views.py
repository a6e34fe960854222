"""
Tests for the submission endpoints.
"""
from django.urls import reverse

from evalhub.submissions.models import Submission
from evalhub.test_utils import EvalhubAPITestCase
from evalhub.tests.factories import SubmissionFactory


class TestSubmissionViews(EvalhubAPITestCase):

    def test_create(self):
        self.authenticate(self.student)
        response = self.client.post(reverse('submission-list'), {
            'title': 'Weather app',
            'description': 'A forecast dashboard',
            'categoryId': '',
            'fileUrls': ['https://files.example.com/abc/report.pdf'],
            'fileNames': ['report.pdf'],
            'fileSizes': [2048],
        }, format='json')

        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual(body['studentId'], 'student_1')
        self.assertEqual(body['files'][0]['type'], 'pdf')
        self.assertEqual(body['status'], 'pending')

    def test_create_missing_title(self):
        self.authenticate(self.student)
        response = self.client.post(reverse('submission-list'), {'description': 'No title'}, format='json')

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {'error': 'title: This field is required.'})

    def test_list_with_filters(self):
        SubmissionFactory(student=self.student, title="Robot arm")
        SubmissionFactory(student=self.student, title="Chess bot")
        self.authenticate(self.evaluator)

        response = self.client.get(reverse('submission-list'), {'status': 'pending', 'search': 'robot'})

        self.assertEqual(response.status_code, 200)
        self.assertEqual([submission['title'] for submission in response.json()], ["Robot arm"])

    def test_list_invalid_status(self):
        self.authenticate(self.evaluator)
        response = self.client.get(reverse('submission-list'), {'status': 'lost'})
        self.assertEqual(response.status_code, 400)

    def test_student_cannot_read_others(self):
        submission = SubmissionFactory()
        self.authenticate(self.student)

        response = self.client.get(reverse('submission-detail', args=[submission.id]))

        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json(), {'error': 'Forbidden'})

    def test_owner_updates_and_deletes(self):
        submission = SubmissionFactory(student=self.student)
        self.authenticate(self.student)

        response = self.client.put(
            reverse('submission-detail', args=[submission.id]), {'description': 'Updated'}, format='json'
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['description'], 'Updated')

        response = self.client.delete(reverse('submission-detail', args=[submission.id]))
        self.assertEqual(response.status_code, 200)
        self.assertFalse(Submission.objects.filter(pk=submission.id).exists())

    def test_admin_cannot_delete_others(self):
        submission = SubmissionFactory(student=self.student)
        self.authenticate(self.admin)

        response = self.client.delete(reverse('submission-detail', args=[submission.id]))

        self.assertEqual(response.status_code, 403)
        self.assertTrue(Submission.objects.filter(pk=submission.id).exists())

    def test_missing_submission(self):
        self.authenticate(self.admin)
        response = self.client.get(reverse('submission-detail', args=[999]))
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {'error': 'Submission not found'})
