"""
WSGI config for tp_portal project.

Loads the lookup cache before the first request is served.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'tp_portal.settings')

application = get_wsgi_application()

from core.lookups.services import initialize_lookup_cache  # noqa: E402

initialize_lookup_cache()
