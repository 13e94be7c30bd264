"""
Django settings for the ticket ledger.

Everything environment-specific is read from environment variables so the
same settings module serves local runs, tests and the upload service.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get('TICKETLEDGER_SECRET_KEY', 'dev-only-not-a-secret')
DEBUG = os.environ.get('TICKETLEDGER_DEBUG', '0') == '1'
ALLOWED_HOSTS = [h for h in os.environ.get('TICKETLEDGER_ALLOWED_HOSTS', '').split(',') if h]

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'ingest',
    'mappings',
    'pipeline',
    'categories',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
]

ROOT_URLCONF = 'ticketledger.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

# Postgres when configured, SQLite otherwise
if os.environ.get('POSTGRES_DB'):
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.postgresql',
            'NAME': os.environ['POSTGRES_DB'],
            'USER': os.environ.get('POSTGRES_USER', ''),
            'PASSWORD': os.environ.get('POSTGRES_PASSWORD', ''),
            'HOST': os.environ.get('POSTGRES_HOST', 'localhost'),
            'PORT': os.environ.get('POSTGRES_PORT', '5432'),
        }
    }
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': BASE_DIR / 'db.sqlite3',
        }
    }

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'


# ============================================================
# TICKET INGESTION
# ============================================================

# Timezone assumed for source timestamps that carry no offset
TICKET_SOURCE_TIMEZONE = os.environ.get('TICKET_SOURCE_TIMEZONE', 'UTC')

# Accepted values for the priority code column
TICKET_PRIORITY_CODES = tuple(
    code.strip()
    for code in os.environ.get('TICKET_PRIORITY_CODES', 'SR,INC,CR,PR').split(',')
    if code.strip()
)

# Record fields consulted by the mapping resolver
TICKET_ORGANIZATION_FIELD = 'assigned_support_organization'
TICKET_ASSIGNEE_FIELD = 'assignee'


LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        name: {
            'handlers': ['console'],
            'level': os.environ.get('TICKETLEDGER_LOG_LEVEL', 'INFO'),
        }
        for name in ('ingest', 'mappings', 'pipeline', 'categories')
    },
}
