"""
DRF authentication backed by the external identity provider.

The upstream gateway verifies the caller and forwards the identity in request
headers; this class only turns that identity into a local ``User``.
"""
import logging

from django.conf import settings
from rest_framework import authentication

from evalhub.accounts.api import get_identity_resolver

logger = logging.getLogger(__name__)

DEFAULT_IDENTITY_HEADERS = {
    'id': 'HTTP_X_USER_ID',
    'email': 'HTTP_X_USER_EMAIL',
    'name': 'HTTP_X_USER_NAME',
}


def _identity_headers():
    return getattr(settings, 'EVALHUB_IDENTITY_HEADERS', DEFAULT_IDENTITY_HEADERS)


class VerifiedIdentityAuthentication(authentication.BaseAuthentication):
    """
    Resolve the verified identity headers to a ``User``.

    A request without an id header is unauthenticated; views then answer 401.
    """

    def authenticate(self, request):
        headers = _identity_headers()
        external_id = request.META.get(headers['id'], '').strip()
        if not external_id:
            return None

        user = get_identity_resolver().resolve(
            external_id,
            email=request.META.get(headers['email']),
            name=request.META.get(headers['name']),
        )
        return (user, None)

    def authenticate_header(self, request):
        # A non-empty value makes DRF answer 401 rather than 403 for anonymous callers.
        return 'X-User-Id'
