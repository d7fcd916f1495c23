"""
ASGI entry point of the dev server.

The readiness latch suspends module requests on the event loop, so the server
must run under ASGI (`manage.py runaim`, or `uvicorn devserver.asgi:application`).
"""
import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "devserver.settings.dev")

application = get_asgi_application()
