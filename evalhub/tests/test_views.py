"""
Tests for the health endpoint.
"""
from django.urls import reverse
from rest_framework.test import APITestCase

from evalhub import __version__


class TestHealthView(APITestCase):

    def test_health_needs_no_identity(self):
        response = self.client.get(reverse('health'))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {'status': 'ok', 'version': __version__})
