"""
Tests for the standard response envelope and error translation.
"""
from django.core.exceptions import ValidationError
from django.db import DatabaseError
from django.test import SimpleTestCase
from rest_framework import status
from rest_framework.test import APITestCase, APIClient

from core.base.test_utils import create_court_tree, create_role_users
from judiciary_project.renderers import format_error_response
from judiciary_project.response_formatter import custom_exception_handler


class FormatErrorResponseTest(SimpleTestCase):
    """Test format_error_response()"""

    def test_field_errors(self):
        body = format_error_response({'name': ['Too short', 'Required']}, 400)
        self.assertEqual(body, {'status': 'error', 'message': 'name: Too short, Required', 'data': None})

    def test_detail_message(self):
        body = format_error_response({'detail': 'Access denied to this court'}, 403)
        self.assertEqual(body['message'], 'Access denied to this court')

    def test_nested_errors(self):
        body = format_error_response({'address': {'city': ['Too long']}}, 400)
        self.assertEqual(body['message'], 'address: city: Too long')

    def test_list_errors(self):
        body = format_error_response(['First', 'Second'], 400)
        self.assertEqual(body['message'], 'First, Second')


class CustomExceptionHandlerTest(SimpleTestCase):
    """Test custom_exception_handler() on Django exceptions"""

    def test_validation_error(self):
        response = custom_exception_handler(ValidationError({'court_id': 'Court not found'}), {})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['message'], 'court_id: Court not found')

    def test_storage_failure_hides_details(self):
        with self.assertLogs('judiciary_project.response_formatter', level='ERROR'):
            response = custom_exception_handler(DatabaseError('database is locked'), {})
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data, {'status': 'error', 'message': 'Internal server error', 'data': None})

    def test_unknown_exception_left_to_django(self):
        self.assertIsNone(custom_exception_handler(RuntimeError('boom'), {}))


class ResponseEnvelopeAPITest(APITestCase):
    """Test rendered bodies follow {status, message, data}"""

    @classmethod
    def setUpTestData(cls):
        cls.courts = create_court_tree()
        cls.users = create_role_users(cls.courts)

    def setUp(self):
        self.client = APIClient()

    def test_health_is_public(self):
        response = self.client.get('/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()['message'], 'BACKEND IS RUNNING')

    def test_success_envelope(self):
        self.client.force_authenticate(user=self.users['admin'])
        response = self.client.get(f"/courts/{self.courts['circuit'].id}/")
        body = response.json()
        self.assertEqual(body['status'], 'success')
        self.assertEqual(body['data']['name'], 'First Circuit Court')

    def test_write_message_envelope(self):
        self.client.force_authenticate(user=self.users['admin'])
        response = self.client.delete(f"/courts/{self.courts['other_magisterial'].id}/")
        body = response.json()
        self.assertEqual(body['status'], 'success')
        self.assertEqual(body['message'], 'Court deactivated successfully')

    def test_not_found_envelope(self):
        self.client.force_authenticate(user=self.users['admin'])
        response = self.client.get('/courts/99999/')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        body = response.json()
        self.assertEqual(body['status'], 'error')
        self.assertIsNone(body['data'])

    def test_permission_denied_envelope(self):
        self.client.force_authenticate(user=self.users['magisterial'])
        response = self.client.get(f"/courts/{self.courts['other_circuit'].id}/")
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.json()['message'], 'Access denied to this court')

    def test_validation_envelope(self):
        self.client.force_authenticate(user=self.users['admin'])
        response = self.client.post('/courts/circuit/', {'name': 'X'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        body = response.json()
        self.assertEqual(body['status'], 'error')
        self.assertTrue(body['message'].startswith('name:'))
