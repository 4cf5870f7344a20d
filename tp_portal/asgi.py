"""
ASGI config for tp_portal project.

Loads the lookup cache before the first request is served.
"""
import os

from django.core.asgi import get_asgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'tp_portal.settings')

application = get_asgi_application()

from core.lookups.services import initialize_lookup_cache  # noqa: E402

initialize_lookup_cache()
