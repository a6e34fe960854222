"""
Tests for request ids and their log filter.
"""
import logging

from django.http import HttpResponse
from django.test import RequestFactory, TestCase
from django.urls import reverse

from evalhub import middleware
from evalhub.loggers import RequestIDFilter


class TestRequestIDMiddleware(TestCase):

    def test_generates_id(self):
        response = self.client.get(reverse('health'))
        self.assertEqual(len(response['X-Request-ID']), 32)

    def test_keeps_upstream_id(self):
        response = self.client.get(reverse('health'), HTTP_X_REQUEST_ID='abc-123')
        self.assertEqual(response['X-Request-ID'], 'abc-123')

    def test_id_visible_while_handling(self):
        seen = []

        def get_response(request):
            seen.append(middleware.get_request_id())
            return HttpResponse()

        request = RequestFactory().get('/', HTTP_X_REQUEST_ID='req-1')
        middleware.RequestIDMiddleware(get_response)(request)

        self.assertEqual(seen, ['req-1'])
        self.assertEqual(request.request_id, 'req-1')
        self.assertIsNone(middleware.get_request_id())


class TestRequestIDFilter(TestCase):

    def _record(self):
        return logging.LogRecord('evalhub', logging.INFO, __file__, 1, "message", (), None)

    def test_outside_request(self):
        record = self._record()
        self.assertTrue(RequestIDFilter().filter(record))
        self.assertEqual(record.request_id, '-')

    def test_inside_request(self):
        records = []

        def get_response(request):
            record = self._record()
            RequestIDFilter().filter(record)
            records.append(record)
            return HttpResponse()

        middleware.RequestIDMiddleware(get_response)(RequestFactory().get('/', HTTP_X_REQUEST_ID='req-2'))

        self.assertEqual(records[0].request_id, 'req-2')
