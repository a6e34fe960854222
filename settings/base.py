"""
Base settings for evalhub.

Values that differ between deployments are read from environment variables.
"""

import os

BASE_DIR = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))


def _env_bool(name, default):
    """Read a boolean flag ("1", "true", "yes") from the environment."""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_list(name):
    """Read a comma-separated list from the environment, dropping blanks."""
    return [item.strip() for item in os.environ.get(name, '').split(',') if item.strip()]


DEBUG = _env_bool('EVALHUB_DEBUG', False)

ADMINS = (
    ('admin', 'admin'),
)

MANAGERS = ADMINS

ALLOWED_HOSTS = _env_list('EVALHUB_ALLOWED_HOSTS') or ['localhost', '127.0.0.1']

DEFAULT_AUTO_FIELD = "django.db.models.AutoField"
DATABASES = {
    'default': {
        'ENGINE': os.environ.get('EVALHUB_DB_ENGINE', 'django.db.backends.sqlite3'),
        'NAME': os.environ.get('EVALHUB_DB_NAME', os.path.join(BASE_DIR, 'evalhub.db')),
        'USER': os.environ.get('EVALHUB_DB_USER', ''),
        'PASSWORD': os.environ.get('EVALHUB_DB_PASSWORD', ''),
        'HOST': os.environ.get('EVALHUB_DB_HOST', ''),
        'PORT': os.environ.get('EVALHUB_DB_PORT', ''),
    }
}

TIME_ZONE = 'UTC'

LANGUAGE_CODE = 'en-us'

USE_I18N = True

USE_TZ = True

STATIC_URL = '/static/'

# Make this unique, and don't share it with anybody.
SECRET_KEY = os.environ.get('EVALHUB_SECRET_KEY', 'insecure-evalhub-development-key')

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
                'django.template.context_processors.request',
            ],
            'debug': DEBUG,
        },
    },
]

MIDDLEWARE = (
    'evalhub.middleware.RequestIDMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
)

ROOT_URLCONF = 'urls'

INSTALLED_APPS = (
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'django.contrib.admin',

    'rest_framework',
    'simple_history',

    # evalhub apps
    'evalhub',
    'evalhub.accounts',
    'evalhub.criteria',
    'evalhub.submissions',
    'evalhub.evaluation',
)

REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': (
        'evalhub.accounts.authentication.VerifiedIdentityAuthentication',
    ),
    'DEFAULT_PERMISSION_CLASSES': (
        'rest_framework.permissions.IsAuthenticated',
    ),
    'DEFAULT_RENDERER_CLASSES': (
        'rest_framework.renderers.JSONRenderer',
    ),
    'EXCEPTION_HANDLER': 'evalhub.exceptions.evalhub_exception_handler',
    'UNAUTHENTICATED_USER': None,
}

# Identities that are made (and kept) administrators whenever they are resolved.
EVALHUB_BOOTSTRAP_ADMIN_IDS = _env_list('INITIAL_ADMIN_IDS')

# Lets a non-admin caller promote *themselves* to admin. Turn this off once the
# first administrators exist.
EVALHUB_ALLOW_SELF_PROMOTION = _env_bool('EVALHUB_ALLOW_SELF_PROMOTION', True)

# Request headers set by the upstream gateway after the identity provider has
# verified the caller.
EVALHUB_IDENTITY_HEADERS = {
    'id': 'HTTP_X_USER_ID',
    'email': 'HTTP_X_USER_EMAIL',
    'name': 'HTTP_X_USER_NAME',
}

LOG_LEVEL = os.environ.get('EVALHUB_LOG_LEVEL', 'INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'filters': {
        'request_id': {
            '()': 'evalhub.loggers.RequestIDFilter',
        },
    },
    'formatters': {
        'simple': {
            'format': '%(asctime)s [%(request_id)s] %(name)s [%(levelname)s] %(message)s'
        },
    },
    'handlers': {
        'console': {
            'level': 'DEBUG',
            'class': 'logging.StreamHandler',
            'filters': ['request_id'],
            'formatter': 'simple',
        },
    },
    'loggers': {
        '': {
            'handlers': ['console'],
            'level': 'WARNING',
        },
        'evalhub': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}

# disable indexing on history_date
SIMPLE_HISTORY_DATE_INDEX = False
