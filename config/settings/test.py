"""Test settings for the Building Management project.

Used by pytest-django (see ``pyproject.toml``). Keeps the database in memory,
swaps in a fast password hasher and plain static storage, and lets domain
loggers propagate so tests can capture them.
"""

from .base import *  # noqa: F401,F403

DEBUG = False

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

STORAGES = {
    'default': {'BACKEND': 'django.core.files.storage.FileSystemStorage'},
    'staticfiles': {'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage'},
}

for _name in ('apps', 'shared'):
    LOGGING['loggers'][_name]['propagate'] = True  # noqa: F405
