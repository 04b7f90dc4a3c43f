"""ASGI config for HomeHarbor.

Exposes the ASGI callable for async-capable servers (uvicorn, daphne).
The API itself is plain request/response, so this mirrors the WSGI entry
point with the same settings resolution.
"""

import os
from django.core.asgi import get_asgi_application  # type: ignore

# Use the development settings by default. Production servers should set
# DJANGO_SETTINGS_MODULE accordingly.
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.dev')

application = get_asgi_application()
