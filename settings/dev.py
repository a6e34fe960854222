"""
Dev-specific Django settings.
"""
# Inherit from base settings
from .base import *  # pylint:disable=W0614,W0401

DEBUG = True

TEMPLATES[0]['OPTIONS']['debug'] = True

ALLOWED_HOSTS = ['*']

LOG_LEVEL = 'DEBUG'
LOGGING['loggers']['evalhub']['level'] = LOG_LEVEL

REST_FRAMEWORK['DEFAULT_RENDERER_CLASSES'] = (
    'rest_framework.renderers.JSONRenderer',
    'rest_framework.renderers.BrowsableAPIRenderer',
)
