"""
Test-specific Django settings.
"""
# Inherit from base settings
from .base import *  # pylint:disable=W0614,W0401

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

EVALHUB_BOOTSTRAP_ADMIN_IDS = ['bootstrap-admin']
EVALHUB_ALLOW_SELF_PROMOTION = True

PASSWORD_HASHERS = (
    'django.contrib.auth.hashers.MD5PasswordHasher',
)

LOGGING['loggers']['evalhub']['level'] = 'WARNING'
