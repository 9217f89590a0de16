"""
ASGI config for the Task Manager API.

Serves the project through any ASGI server (Daphne, Uvicorn).
"""
import os

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

from django.core.asgi import get_asgi_application

# Initialize Django at module load time, not on the first request
application = get_asgi_application()
