"""Development settings for HomeHarbor.

This module extends the base settings with development specific
configuration, such as enabling debug, allowing all hosts and running
Celery tasks eagerly. Do not use these settings in production!
"""

from .base import *  # noqa: F401,F403

# Enable debug mode for development
DEBUG = True

# Allow all hosts in development
ALLOWED_HOSTS = ['*']

# Use console email backend during development
EMAIL_BACKEND = 'django.core.mail.backends.console.EmailBackend'

# No broker is needed locally, tasks run inline
CELERY_TASK_ALWAYS_EAGER = get_env('CELERY_TASK_ALWAYS_EAGER', 'true').lower() == 'true'  # noqa: F405
CELERY_TASK_EAGER_PROPAGATES = True

# Plain storage keeps tests free of the collectstatic manifest
STORAGES = {
    'default': {'BACKEND': 'django.core.files.storage.FileSystemStorage'},
    'staticfiles': {'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage'},
}
